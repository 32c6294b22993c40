"""HTTP client for the efemérides API."""

import json
import logging
import time
from datetime import date
from typing import Any

import httpx

from ..dates import format_query_date
from ..logging import JSONLLogger, get_logger
from ..models import FetchedEvent
from .errors import ConnectionOrParseError, FetchError, NoDataForDate, ServerError

logger = logging.getLogger(__name__)


def parse_events_payload(payload: bytes, fecha: str) -> FetchedEvent:
    """Extract the first event from a 200 response body.

    Raises:
        NoDataForDate: If the body is not a non-empty JSON array.
        ConnectionOrParseError: If the body is not UTF-8 JSON or the first
            event lacks ``titulo``/``evento``.
    """
    try:
        data: Any = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConnectionOrParseError(str(e)) from e

    if not isinstance(data, list) or not data:
        raise NoDataForDate(fecha)

    first = data[0]
    try:
        return FetchedEvent(titulo=str(first["titulo"]), evento=str(first["evento"]))
    except (KeyError, TypeError) as e:
        raise ConnectionOrParseError(f"respuesta sin campo {e}") from e


class EfemeridesClient:
    """Fetches the efeméride of a given date."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        json_logger: JSONLLogger | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. ``http://10.0.2.2:8000``.
            timeout: Seconds allowed per request.
            transport: Optional httpx transport, used by tests.
            json_logger: Event log; defaults to the global one.
        """
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self.json_logger = json_logger or get_logger()

    def url_for(self, day: date) -> str:
        """Build the request URL for a date."""
        return f"{self.base_url}/efemeride?fecha={format_query_date(day)}"

    async def fetch(self, day: date) -> FetchedEvent:
        """Fetch the first event for a date.

        Raises:
            NoDataForDate: Empty result for the date.
            ServerError: Non-200 response.
            ConnectionOrParseError: Network failure or undecodable body.
        """
        fecha = format_query_date(day)
        url = self.url_for(day)
        start = time.monotonic()
        status_code: int | None = None

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url)
            status_code = response.status_code

            if response.status_code != 200:
                body = response.content.decode("utf-8", errors="replace")
                raise ServerError(response.status_code, body)

            event = parse_events_payload(response.content, fecha)

        except FetchError as e:
            self._log(fecha, start, status_code, error=e.message)
            raise
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Request to %s failed: %s", url, e)
            error = ConnectionOrParseError(str(e) or type(e).__name__)
            self._log(fecha, start, status_code, error=error.message)
            raise error from e

        self._log(fecha, start, status_code, titulo=event.titulo)
        return event

    def _log(
        self,
        fecha: str,
        start: float,
        status_code: int | None,
        *,
        titulo: str | None = None,
        error: str | None = None,
    ) -> None:
        duration_ms = round((time.monotonic() - start) * 1000, 1)
        self.json_logger.log_fetch(
            fecha,
            duration_ms=duration_ms,
            status_code=status_code,
            titulo=titulo,
            error=error,
        )
