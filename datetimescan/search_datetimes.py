"""Locating datetime strings within lines of text."""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

log = logging.getLogger(__name__)

DATETIME_PATTERN = re.compile(
    r"(?P<datetime>\d{4}-\d{2}-\d{2}[ T]\d{2}:\d{2}:\d{2}(?:[A-Z]{3,4}|[+-]\d{2}:?\d{2})?)"
)


class DatetimeMatch(NamedTuple):
    """A datetime string found in input, its 1-based line and byte offset in that line."""

    text: str
    line_number: int
    position: int


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def search_datetimes(lines) -> list[DatetimeMatch]:
    """Find datetime strings in the given lines.

    Recognised forms include '2023-05-08T19:29:50AEST', '...UTC',
    '...+1000', '...+10:00', '2023-05-08 19:29:50' and '2023-05-08T19:29:50'.
    Positions are byte offsets into the UTF-8 encoded line.
    """
    results = []
    for line_number, raw_line in enumerate(lines, start=1):
        line = _strip_line_ending(raw_line)
        for match in DATETIME_PATTERN.finditer(line):
            position = len(line[: match.start("datetime")].encode("utf-8"))
            results.append(DatetimeMatch(match.group("datetime"), line_number, position))
    log.debug("search_datetimes(), matches=(%d)", len(results))
    return results