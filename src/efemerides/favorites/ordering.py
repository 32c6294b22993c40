"""Display ordering for favorites."""

from collections.abc import Iterable

from ..dates import parse_display_date
from ..models import EventRecord


def sorted_by_date_descending(records: Iterable[EventRecord]) -> list[EventRecord]:
    """Return a new list ordered most recent first.

    Records sharing a date keep their relative order. The input is not modified.

    Raises:
        ValueError: If a record's ``fecha`` is not a ``D/M/YYYY`` date.
    """
    return sorted(records, key=lambda r: parse_display_date(r.fecha), reverse=True)
