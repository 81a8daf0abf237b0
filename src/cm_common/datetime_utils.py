"""UTC datetime utilities."""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def parse_iso_date(value: str) -> date:
    """Parse an ISO-8601 date or datetime string and drop the time of day.

    Raises ValueError on unparsable input.
    """
    value = value.strip()
    if not value:
        raise ValueError("empty date string")
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    # datetime.fromisoformat accepts a trailing "Z" from Python 3.11 onward
    return datetime.fromisoformat(value).date()


def start_of_day(day: date) -> datetime:
    """Midnight UTC at the start of `day`."""
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
