"""Efemérides: the historical event of the day, with local favorites."""

from .api import EfemeridesClient
from .favorites import FavoritesStore, sorted_by_date_descending
from .home import HomeController, HomeState
from .models import EventRecord, FetchedEvent

__all__ = [
    "EfemeridesClient",
    "EventRecord",
    "FavoritesStore",
    "FetchedEvent",
    "HomeController",
    "HomeState",
    "sorted_by_date_descending",
]
