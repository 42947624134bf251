"""Differences between consecutive datetimes and their grouping into splits."""

from __future__ import annotations

import logging
from datetime import datetime
from itertools import pairwise

log = logging.getLogger(__name__)

_MICROS_PER_SECOND = 1_000_000


def datetime_difference_seconds(dt1: datetime, dt2: datetime) -> int:
    """Whole seconds from ``dt1`` to ``dt2``, truncated toward zero.

    Positive when ``dt2`` is later than ``dt1``.
    """
    delta = dt2 - dt1
    micros = (delta.days * 86400 + delta.seconds) * _MICROS_PER_SECOND + delta.microseconds
    seconds = abs(micros) // _MICROS_PER_SECOND
    return seconds if micros >= 0 else -seconds


def delta_datetimes(datetimes, allow_negatives: bool) -> list[int]:
    """Seconds between each consecutive pair of datetimes.

    When ``allow_negatives`` is false, negative differences become 0.
    """
    result = []
    for earlier, later in pairwise(datetimes):
        delta = datetime_difference_seconds(earlier, later)
        result.append(0 if delta < 0 and not allow_negatives else delta)
    log.debug("delta_datetimes(), result=(%s)", result)
    return result


def split_deltas(deltas, timeout: int) -> list[int]:
    """Total length of each run of deltas in which no delta exceeds ``timeout``.

    A negative delta or one greater than ``timeout`` ends the current run.
    Runs that sum to zero are left out.
    """
    if timeout < 0:
        raise ValueError(f"timeout=({timeout}) must not be negative")
    result = []
    current: list[int] = []
    for delta in deltas:
        if delta < 0 or delta > timeout:
            if current and sum(current) > 0:
                result.append(sum(current))
            current = []
        else:
            current.append(delta)
    if current and sum(current) > 0:
        result.append(sum(current))
    log.debug("split_deltas(), timeout=(%s), result=(%s)", timeout, result)
    return result