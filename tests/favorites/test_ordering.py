"""Tests for favorites display ordering."""

import pytest

from efemerides.dates import parse_display_date
from efemerides.favorites import sorted_by_date_descending
from efemerides.models import EventRecord


def rec(titulo: str, fecha: str) -> EventRecord:
    return EventRecord(titulo=titulo, evento=f"evento {titulo}", fecha=fecha)


def test_most_recent_first():
    favorites = [rec("A", "1/1/2024"), rec("B", "5/1/2024")]
    assert [r.titulo for r in sorted_by_date_descending(favorites)] == ["B", "A"]


def test_compares_dates_not_strings():
    # "9/1/2024" > "10/1/2024" as strings
    favorites = [rec("nine", "9/1/2024"), rec("ten", "10/1/2024"), rec("old", "31/12/2023")]
    assert [r.titulo for r in sorted_by_date_descending(favorites)] == ["ten", "nine", "old"]


def test_ties_keep_original_order():
    favorites = [
        rec("first", "3/3/2020"),
        rec("newer", "4/3/2020"),
        rec("second", "3/3/2020"),
        rec("third", "3/3/2020"),
    ]
    result = sorted_by_date_descending(favorites)
    assert [r.titulo for r in result] == ["newer", "first", "second", "third"]


def test_non_increasing_dates():
    favorites = [
        rec("a", "15/6/2010"),
        rec("b", "1/1/2030"),
        rec("c", "15/6/2010"),
        rec("d", "29/2/2000"),
        rec("e", "2/2/2022"),
    ]
    dates = [parse_display_date(r.fecha) for r in sorted_by_date_descending(favorites)]
    assert all(earlier >= later for earlier, later in zip(dates, dates[1:]))


def test_empty():
    assert sorted_by_date_descending([]) == []


def test_single():
    only = rec("A", "1/1/2024")
    assert sorted_by_date_descending([only]) == [only]


def test_does_not_mutate_input():
    favorites = [rec("A", "1/1/2024"), rec("B", "5/1/2024")]
    snapshot = list(favorites)

    result = sorted_by_date_descending(favorites)

    assert favorites == snapshot
    assert result is not favorites


def test_invalid_date_raises():
    with pytest.raises(ValueError):
        sorted_by_date_descending([rec("A", "sin fecha"), rec("B", "1/1/2024")])
