"""Writing scan results as lines of text."""

from __future__ import annotations

import sys
from typing import TextIO

from datetimescan.convert_seconds import convert_seconds

_ALL = "all"


def _is_all_only(keys: list[str]) -> bool:
    return keys == [_ALL]


class Printer:
    """Writes results to a text stream, or to standard output when none is given."""

    def __init__(self, output: TextIO | None = None):
        self._output = output

    @property
    def stream(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _line(self, text: str) -> None:
        print(text, file=self.stream)

    def print_datetimes_no_locations(self, datetimes_and_locations) -> None:
        """Write each located datetime string on its own line."""
        for text, _line_number, _position in datetimes_and_locations:
            self._line(text)

    def print_datetimes_and_locations(self, datetimes_and_locations) -> None:
        """Write each datetime string, line number and position, tab separated."""
        for text, line_number, position in datetimes_and_locations:
            self._line(f"{text}\t{line_number}\t{position}")

    def print_deltas(self, deltas) -> None:
        """Write each delta on its own line."""
        for delta in deltas:
            self._line(str(delta))

    def print_counts_datetimes_grouped(self, datetimes_grouped) -> None:
        """Write the number of datetimes in each interval, intervals sorted."""
        intervals = sorted(datetimes_grouped)
        if _is_all_only(intervals):
            self._line(str(len(datetimes_grouped[_ALL])))
            return
        for interval in intervals:
            self._line(f"{interval}: {len(datetimes_grouped[interval])}")

    def print_splits_per_interval(self, splits_per_interval, unit: str) -> None:
        """Write the splits of each interval in the given unit."""
        intervals = sorted(splits_per_interval)
        if _is_all_only(intervals):
            for split in splits_per_interval[_ALL]:
                self._line(convert_seconds(split, unit))
            return
        for interval in intervals:
            joined = ", ".join(convert_seconds(split, unit) for split in splits_per_interval[interval])
            self._line(f"{interval}: {joined}")

    def print_sum_splits_per_interval(self, sum_splits_per_interval, unit: str) -> None:
        """Write the summed splits of each interval in the given unit."""
        intervals = sorted(sum_splits_per_interval)
        if _is_all_only(intervals):
            self._line(convert_seconds(sum_splits_per_interval[_ALL], unit))
            return
        for interval in intervals:
            self._line(f"{interval}: {convert_seconds(sum_splits_per_interval[interval], unit)}")