"""Parsing of datetime strings in the ISO-like formats found by the scanner."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone

log = logging.getLogger(__name__)

_TIMEZONE_CODES = {
    "UTC": "+0000",
    "AEST": "+1000",
    "AEDT": "+1100",
}

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?"
    r"([Zz]|[+-]\d{2}:\d{2})"
)

_OFFSET_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_NAIVE_FORMATS = ("%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S")


class DatetimeParseError(ValueError):
    """Raised when a string cannot be parsed as a datetime."""

    def __init__(self, datetime_str: str):
        super().__init__(f"failed to parse datetime_str=({datetime_str})")
        self.datetime_str = datetime_str


def _replace_timezone_codes(text: str) -> str:
    for code, offset in _TIMEZONE_CODES.items():
        text = text.replace(code, offset)
    return text


def _parse_rfc3339(text: str) -> datetime | None:
    match = _RFC3339.fullmatch(text)
    if match is None:
        return None
    year, month, day, hour, minute, second, fraction, offset = match.groups()
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    if offset in ("Z", "z"):
        tzinfo = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if minutes >= 60:
            return None
        tzinfo = timezone(sign * timedelta(hours=hours, minutes=minutes))
    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second),
            microsecond, tzinfo=tzinfo,
        )
    except ValueError:
        return None


def _parse_with_offset(text: str) -> datetime | None:
    try:
        return datetime.strptime(text, _OFFSET_FORMAT)
    except ValueError:
        return None


def _parse_naive_as_local(text: str) -> datetime | None:
    for fmt in _NAIVE_FORMATS:
        try:
            naive = datetime.strptime(text, fmt)
        except ValueError:
            continue
        local_offset = datetime.now().astimezone().utcoffset()
        return naive.replace(tzinfo=timezone(local_offset))
    return None


def parse_datetime(datetime_str: str) -> datetime:
    """Parse a datetime string into a timezone-aware datetime.

    Accepts RFC 3339, 'YYYY-MM-DDTHH:MM:SS' followed by an offset such as
    '+1000', and the same with no offset (with 'T' or a space separator), in
    which case the current local offset is used. The timezone codes UTC, AEST
    and AEDT are understood. Raises DatetimeParseError on failure.
    """
    text = _replace_timezone_codes(datetime_str)
    result = (
        _parse_rfc3339(text)
        or _parse_with_offset(text)
        or _parse_naive_as_local(text)
    )
    if result is None:
        log.error("parse_datetime(), failed to parse datetime_str=(%s)", text)
        raise DatetimeParseError(datetime_str)
    return result


def parse_datetimes(datetimes_strs) -> list[datetime]:
    """Parse every string; raises DatetimeParseError if any one fails."""
    return [parse_datetime(text) for text in datetimes_strs]