"""Favorites collection mirrored to local preferences."""

import json
import logging
from collections.abc import Callable

from ..dates import parse_display_date
from ..logging import JSONLLogger, get_logger
from ..models import EventRecord
from ..storage import PreferencesStore
from .ordering import sorted_by_date_descending

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorite_efemerides"

Listener = Callable[[list[EventRecord]], None]


class FavoritesStore:
    """Ordered, persisted collection of favorite events.

    Membership for toggling is by title only. The collection is written to
    preferences after every mutation, and subscribers are notified with a
    copy of the new items.
    """

    def __init__(
        self,
        preferences: PreferencesStore,
        json_logger: JSONLLogger | None = None,
    ) -> None:
        self.preferences = preferences
        self.json_logger = json_logger or get_logger()
        self._items: list[EventRecord] = []
        self._listeners: list[Listener] = []
        self._loaded = False

    @property
    def items(self) -> list[EventRecord]:
        """Favorites in storage order (a copy)."""
        return list(self._items)

    @property
    def loaded(self) -> bool:
        """Whether load() has run."""
        return self._loaded

    def __len__(self) -> int:
        return len(self._items)

    def sorted_items(self) -> list[EventRecord]:
        """Favorites in display order, most recent first."""
        return sorted_by_date_descending(self._items)

    # Subscriptions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        snapshot = self.items
        for listener in list(self._listeners):
            listener(snapshot)

    def _commit(self) -> None:
        """Persist and notify after a mutation."""
        self.save()
        self._notify()

    # Queries

    def is_favorite(self, titulo: str) -> bool:
        """Check if any favorite has this title."""
        return any(item.titulo == titulo for item in self._items)

    # Mutations

    def toggle(self, record: EventRecord) -> bool:
        """Add the record, or drop every favorite sharing its title.

        Returns:
            True if the record is now a favorite, False if it was removed.
        """
        if self.is_favorite(record.titulo):
            self._items = [item for item in self._items if item.titulo != record.titulo]
            added = False
        else:
            self._items = [*self._items, record]
            added = True

        self.json_logger.log_favorites(
            "favorite_toggled", len(self._items), titulo=record.titulo, added=added
        )
        self._commit()
        return added

    def remove_at(self, position: int) -> EventRecord:
        """Remove the favorite at position in storage order.

        Raises:
            IndexError: If position is out of range.
        """
        if not 0 <= position < len(self._items):
            raise IndexError(f"No favorite at position {position}")

        items = list(self._items)
        removed = items.pop(position)
        self._items = items
        self.json_logger.log_favorites("favorite_removed", len(items), titulo=removed.titulo)
        self._commit()
        return removed

    def remove_displayed(self, position: int) -> EventRecord:
        """Remove the favorite shown at position in display order.

        Raises:
            IndexError: If position is out of range.
        """
        shown = self.sorted_items()
        if not 0 <= position < len(shown):
            raise IndexError(f"No favorite at position {position}")

        target = shown[position]
        self.remove(target)
        return target

    def remove(self, record: EventRecord) -> bool:
        """Remove the first favorite with the same identity as record."""
        for index, item in enumerate(self._items):
            if item.key == record.key:
                self.remove_at(index)
                return True
        return False

    def remove_by_title(self, titulo: str) -> int:
        """Remove all favorites with this title. Returns how many were removed."""
        kept = [item for item in self._items if item.titulo != titulo]
        removed = len(self._items) - len(kept)
        self._items = kept
        self.json_logger.log_favorites("favorite_removed", len(kept), titulo=titulo, removed=removed)
        self._commit()
        return removed

    # Persistence

    def save(self) -> None:
        """Write the whole collection under the favorites key."""
        payload = json.dumps([item.to_dict() for item in self._items], ensure_ascii=False)
        self.preferences.set_string(FAVORITES_KEY, payload)
        logger.debug("Saved %d favorites", len(self._items))
        self.json_logger.log_favorites("favorites_saved", len(self._items))

    def load(self) -> None:
        """Replace the collection with what is stored, if anything.

        A stored value that is not a JSON array of records with valid
        ``D/M/YYYY`` dates is logged and leaves the collection empty.
        """
        raw = self.preferences.get_string(FAVORITES_KEY)
        if raw is not None:
            try:
                data = json.loads(raw)
                if not isinstance(data, list):
                    raise ValueError("favorites value is not a JSON array")
                items = [EventRecord.from_dict(entry) for entry in data]
                for item in items:
                    parse_display_date(item.fecha)
                self._items = items
            except (ValueError, KeyError, TypeError) as e:
                logger.warning("Ignoring stored favorites: %s", e)
                self.json_logger.log("favorites_load_error", error=str(e))
                self._items = []
            else:
                self.json_logger.log_favorites("favorites_loaded", len(self._items))

        self._loaded = True
        self._notify()
