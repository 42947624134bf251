"""Range filtering and validity checks on parsed datetimes."""

from __future__ import annotations

from datetime import datetime, timezone
from itertools import pairwise

from datetimescan.parse_datetime import DatetimeParseError, parse_datetime


def _describe(datetimes) -> str:
    return "[" + ", ".join(value.isoformat() for value in datetimes) + "]"


class FutureDatetimesError(ValueError):
    """Raised when datetimes later than the present are found."""

    def __init__(self, datetimes):
        self.datetimes = list(datetimes)
        super().__init__(f"reject future_datetimes=({_describe(self.datetimes)})")


class UnsortedDatetimesError(ValueError):
    """Raised when datetimes are not in ascending order."""

    def __init__(self, datetimes):
        self.datetimes = list(datetimes)
        super().__init__(f"reject out_of_order_datetimes=({_describe(self.datetimes)})")


def filter_datetimes_valid_indexes(datetimes, filter_start, filter_end) -> list[bool]:
    """For each datetime, whether it lies within the optional inclusive bounds."""
    return [
        (filter_start is None or value >= filter_start)
        and (filter_end is None or value <= filter_end)
        for value in datetimes
    ]


def reject_datetimes_future(datetimes) -> list[datetime]:
    """Return the datetimes, raising FutureDatetimesError if any lie after now."""
    datetimes = list(datetimes)
    now = datetime.now(timezone.utc)
    future = [value for value in datetimes if value > now]
    if future:
        raise FutureDatetimesError(future)
    return datetimes


def reject_datetimes_unsorted(datetimes) -> list[datetime]:
    """Return the datetimes, raising UnsortedDatetimesError if any is earlier than its predecessor."""
    datetimes = list(datetimes)
    out_of_order = [later for earlier, later in pairwise(datetimes) if later < earlier]
    if out_of_order:
        raise UnsortedDatetimesError(out_of_order)
    return datetimes


def _parse_bound(name: str, text: str | None) -> datetime | None:
    if text is None:
        return None
    try:
        return parse_datetime(text)
    except DatetimeParseError as error:
        raise DatetimeParseError(text) from error


def parse_filter_start_end(filter_start, filter_end) -> tuple[datetime | None, datetime | None]:
    """Parse optional filter bound strings into datetimes.

    Raises ValueError naming the bound that cannot be parsed.
    """
    try:
        start = _parse_bound("filter_start", filter_start)
    except DatetimeParseError as error:
        raise ValueError(f"invalid filter_start=({filter_start})") from error
    try:
        end = _parse_bound("filter_end", filter_end)
    except DatetimeParseError as error:
        raise ValueError(f"invalid filter_end=({filter_end})") from error
    return start, end