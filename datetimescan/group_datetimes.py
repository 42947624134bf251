"""Grouping of datetimes by day, month, year, or all together."""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime

log = logging.getLogger(__name__)

_ALL = "all"


def _day_key(value: datetime) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _month_key(value: datetime) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def _year_key(value: datetime) -> str:
    return f"{value.year:04d}"


_KEY_FUNCTIONS = {"d": _day_key, "m": _month_key, "y": _year_key}


def group_datetimes(datetimes, interval: str) -> dict[str, list[datetime]]:
    """Group datetimes by 'd', 'm', 'y' or 'all' (case-insensitive).

    Keys are 'YYYY-MM-DD', 'YYYY-MM', 'YYYY' or 'all', taken from each
    datetime's own local date. Input order is kept within each group.
    """
    interval_key = interval.lower()
    result: defaultdict[str, list[datetime]] = defaultdict(list)
    if interval_key == _ALL:
        for value in datetimes:
            result[_ALL].append(value)
    else:
        key_function = _KEY_FUNCTIONS.get(interval_key)
        if key_function is None:
            raise ValueError(f"unsupported interval=({interval}) (must be d/m/y)")
        for value in datetimes:
            result[key_function(value)].append(value)
    log.debug("group_datetimes(), interval=(%s), groups=(%d)", interval, len(result))
    return dict(result)