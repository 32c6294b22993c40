"""Date formats used by the API and the favorites list."""

from datetime import date, datetime

# Bounds of the selectable range.
FIRST_DATE = date(2000, 1, 1)
LAST_DATE = date(2030, 1, 1)


def format_query_date(day: date) -> str:
    """Format a date for the API query string (``YYYY-MM-DD``)."""
    return f"{day.year}-{day.month:02d}-{day.day:02d}"


def format_display_date(day: date) -> str:
    """Format a date the way favorites store it (``D/M/YYYY``, no padding)."""
    return f"{day.day}/{day.month}/{day.year}"


def parse_display_date(value: str) -> date:
    """Parse a ``D/M/YYYY`` string.

    Raises:
        ValueError: If the string is not three slash-separated integers
            forming a valid date.
    """
    parts = value.strip().split("/")
    if len(parts) != 3:
        raise ValueError(f"Invalid date: {value!r}")
    day, month, year = (int(p) for p in parts)
    return date(year, month, day)


def parse_user_date(value: str) -> date:
    """Parse a date typed by the user, either ``D/M/YYYY`` or ``YYYY-MM-DD``."""
    value = value.strip()
    if "/" in value:
        return parse_display_date(value)
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Fecha inválida: {value!r}. Usa D/M/AAAA o AAAA-MM-DD.") from None


def in_selectable_range(day: date) -> bool:
    """Whether the date can be picked on the Home screen."""
    return FIRST_DATE <= day <= LAST_DATE
