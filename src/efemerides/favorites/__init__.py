"""Favorites collection and its display ordering."""

from .ordering import sorted_by_date_descending
from .store import FAVORITES_KEY, FavoritesStore

__all__ = ["FAVORITES_KEY", "FavoritesStore", "sorted_by_date_descending"]
