"""The scanning operations behind each command: locate, count, deltas, splits, sum."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import datetime

from datetimescan.delta_datetimes import delta_datetimes, split_deltas
from datetimescan.filters import (
    filter_datetimes_valid_indexes,
    parse_filter_start_end,
    reject_datetimes_future,
    reject_datetimes_unsorted,
)
from datetimescan.group_datetimes import group_datetimes
from datetimescan.parse_datetime import parse_datetimes
from datetimescan.printer import Printer
from datetimescan.search_datetimes import DatetimeMatch, search_datetimes

log = logging.getLogger(__name__)


@dataclass
class ScanOptions:
    """Settings shared by the commands; ``input_path`` None means standard input."""

    input_path: str | None = None
    filter_start: str | None = None
    filter_end: str | None = None
    filter_invert: bool = False
    no_future: bool = False
    no_unsorted: bool = False
    no_locations: bool = False
    per: str = "all"
    allow_negative: bool = False
    timeout: int = 300
    unit: str = "s"


def read_datetimes_and_locations(options: ScanOptions) -> list[DatetimeMatch]:
    """Find every datetime string in the input, with its line and position."""
    if options.input_path is None:
        return search_datetimes(sys.stdin)
    with open(options.input_path, encoding="utf-8") as handle:
        return search_datetimes(handle)


def get_datetimes_parsed(options: ScanOptions) -> list[datetime]:
    """Parse the datetimes in the input and keep those passing the filter.

    Raises if a match cannot be parsed, if ``no_future`` is set and one lies
    after now, or if ``no_unsorted`` is set and they are out of order.
    """
    matches = read_datetimes_and_locations(options)
    parsed = parse_datetimes(match.text for match in matches)
    start, end = parse_filter_start_end(options.filter_start, options.filter_end)
    included = filter_datetimes_valid_indexes(parsed, start, end)
    filtered = [
        value for value, keep in zip(parsed, included) if keep != options.filter_invert
    ]
    if options.no_future:
        reject_datetimes_future(filtered)
    if options.no_unsorted:
        reject_datetimes_unsorted(filtered)
    return filtered


def get_datetimes_grouped(options: ScanOptions) -> dict[str, list[datetime]]:
    """Filtered datetimes grouped by the ``per`` interval."""
    return group_datetimes(get_datetimes_parsed(options), options.per)


def get_deltas(options: ScanOptions) -> list[int]:
    """Seconds between consecutive filtered datetimes."""
    return delta_datetimes(get_datetimes_parsed(options), options.allow_negative)


def get_splits_per_interval(options: ScanOptions) -> dict[str, list[int]]:
    """Splits for each interval; intervals with no splits are left out."""
    result = {}
    for interval, values in get_datetimes_grouped(options).items():
        splits = split_deltas(delta_datetimes(values, False), options.timeout)
        if splits:
            result[interval] = splits
    log.debug("get_splits_per_interval(), result=(%s)", result)
    return result


def get_sum_splits_per_interval(options: ScanOptions) -> dict[str, int]:
    """Total of the splits for each interval."""
    return {
        interval: sum(splits)
        for interval, splits in get_splits_per_interval(options).items()
    }


def locate(options: ScanOptions, printer: Printer) -> None:
    """List datetime matches, with their locations unless ``no_locations`` is set."""
    matches = read_datetimes_and_locations(options)
    if options.no_locations:
        printer.print_datetimes_no_locations(matches)
    else:
        printer.print_datetimes_and_locations(matches)


def count(options: ScanOptions, printer: Printer) -> None:
    """Report the number of datetimes per interval."""
    printer.print_counts_datetimes_grouped(get_datetimes_grouped(options))


def deltas(options: ScanOptions, printer: Printer) -> None:
    """Report seconds elapsed between each datetime match."""
    printer.print_deltas(get_deltas(options))


def splits(options: ScanOptions, printer: Printer) -> None:
    """Report the splits of each interval."""
    printer.print_splits_per_interval(get_splits_per_interval(options), options.unit)


def sum_splits(options: ScanOptions, printer: Printer) -> None:
    """Report the summed splits of each interval."""
    printer.print_sum_splits_per_interval(get_sum_splits_per_interval(options), options.unit)