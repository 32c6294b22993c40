"""State and actions of the Home screen."""

import logging
from dataclasses import dataclass, field
from datetime import date

from .api import EfemeridesClient, FetchError
from .dates import FIRST_DATE, LAST_DATE, format_display_date, in_selectable_range
from .favorites import FavoritesStore
from .logging import JSONLLogger, get_logger
from .models import EventRecord

logger = logging.getLogger(__name__)


@dataclass
class HomeState:
    """What the Home screen currently shows."""

    selected_date: date = field(default_factory=date.today)
    titulo: str | None = None
    evento: str | None = None
    is_loading: bool = True
    error_message: str | None = None

    @property
    def shows_event(self) -> bool:
        """True when the event card is visible: loaded, no error pending."""
        return (
            not self.is_loading
            and self.error_message is None
            and self.titulo is not None
            and self.evento is not None
        )


class HomeController:
    """Fetches the efeméride of the selected date and toggles it as favorite.

    Each fetch takes a new request token. Only the response of the latest
    request may update the state; older ones are dropped.
    """

    def __init__(
        self,
        client: EfemeridesClient,
        favorites: FavoritesStore,
        state: HomeState | None = None,
        json_logger: JSONLLogger | None = None,
    ) -> None:
        self.client = client
        self.favorites = favorites
        self.state = state or HomeState()
        self.json_logger = json_logger or get_logger()
        self._request_token = 0

    @property
    def request_token(self) -> int:
        """Token of the most recent fetch."""
        return self._request_token

    async def fetch(self, day: date) -> bool:
        """Fetch the event for day into the state.

        Returns:
            False if a newer fetch started meanwhile and this result was
            discarded, True otherwise.
        """
        self._request_token += 1
        token = self._request_token
        self.state.is_loading = True
        self.state.error_message = None

        try:
            event = await self.client.fetch(day)
        except FetchError as e:
            if token != self._request_token:
                self._log_stale(day, token)
                return False
            self.state.is_loading = False
            self.state.error_message = e.message
            return True

        if token != self._request_token:
            self._log_stale(day, token)
            return False

        self.state.titulo = event.titulo
        self.state.evento = event.evento
        self.state.is_loading = False
        return True

    async def select_date(self, day: date) -> bool:
        """Select a new date and fetch it.

        Returns:
            True if the selection changed.

        Raises:
            ValueError: If day is outside the selectable range.
        """
        if not in_selectable_range(day):
            raise ValueError(
                f"La fecha debe estar entre {format_display_date(FIRST_DATE)} "
                f"y {format_display_date(LAST_DATE)}."
            )
        if day == self.state.selected_date:
            return False

        self.state.selected_date = day
        await self.fetch(day)
        return True

    async def refresh(self) -> bool:
        """Fetch again for the selected date."""
        return await self.fetch(self.state.selected_date)

    def current_record(self) -> EventRecord | None:
        """The shown event as a favorite record, or None if nothing is shown."""
        if not self.state.shows_event:
            return None

        assert self.state.titulo is not None and self.state.evento is not None
        return EventRecord(
            titulo=self.state.titulo,
            evento=self.state.evento,
            fecha=format_display_date(self.state.selected_date),
        )

    def is_favorite(self) -> bool:
        """Whether the shown event is among the favorites."""
        if self.state.titulo is None:
            return False
        return self.favorites.is_favorite(self.state.titulo)

    def toggle_favorite(self) -> bool | None:
        """Toggle the shown event as favorite.

        Returns:
            The new favorite status, or None when no event is shown.
        """
        record = self.current_record()
        if record is None:
            return None
        return self.favorites.toggle(record)

    def _log_stale(self, day: date, token: int) -> None:
        logger.debug("Dropping stale response for %s (token %d)", day, token)
        self.json_logger.log(
            "fetch_stale",
            fecha=day.isoformat(),
            token=token,
            latest_token=self._request_token,
        )
