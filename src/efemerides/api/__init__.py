"""Remote efemérides API."""

from .client import EfemeridesClient, parse_events_payload
from .errors import ConnectionOrParseError, FetchError, NoDataForDate, ServerError

__all__ = [
    "ConnectionOrParseError",
    "EfemeridesClient",
    "FetchError",
    "NoDataForDate",
    "ServerError",
    "parse_events_payload",
]
