"""Reporting query parameters: payment date range and leaderboard limit."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from src.cm_common.datetime_utils import parse_iso_date, start_of_day
from src.cm_common.errors import DateRangeError, InvalidLimitError


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date range over payment_date."""

    start: date
    end: date

    @property
    def start_at(self) -> datetime:
        return start_of_day(self.start)

    @property
    def end_before(self) -> datetime | None:
        """Exclusive upper bound: midnight after the last day of the range.

        None when the range ends on the last representable date.
        """
        if self.end == date.max:
            return None
        return start_of_day(self.end + timedelta(days=1))


def parse_date_range(start: str | None, end: str | None) -> DateRange | None:
    """Both bounds or neither. One bound alone, or an unparsable bound, is an error."""
    start = start or None
    end = end or None
    if start is None and end is None:
        return None
    if start is None or end is None:
        raise DateRangeError()
    try:
        return DateRange(start=parse_iso_date(start), end=parse_iso_date(end))
    except ValueError:
        raise DateRangeError() from None


def parse_limit(raw: str | int | None, default: int) -> int:
    """Positive integer limit; None means `default`."""
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise InvalidLimitError()
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            raise InvalidLimitError() from None
    if value <= 0:
        raise InvalidLimitError()
    return value
