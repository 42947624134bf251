"""Ranges of dates and enumeration of years, months or days within them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

_INTEGER = re.compile(r"[+-]?\d+")


def _parse_int(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


def parse_partial_date_str(s: str) -> date | None:
    """Parse 'YYYY', 'YYYY-MM' or 'YYYY-MM-DD' into a date.

    A year alone means January 1 of that year, a year and month the first of
    that month. Returns None if the string cannot be parsed or the date does
    not exist.
    """
    try:
        if len(s) == 4:
            year = _parse_int(s)
            return None if year is None else date(year, 1, 1)
        if len(s) == 7:
            parts = s.split("-")
            if len(parts) < 2:
                return None
            year, month = _parse_int(parts[0]), _parse_int(parts[1])
            if year is None or month is None:
                return None
            return date(year, month, 1)
        if len(s) == 10:
            return datetime.strptime(s, "%Y-%m-%d").date()
    except ValueError:
        return None
    return None


def _date_format(d: date, range_type: str) -> str:
    match range_type:
        case "y" | "Y":
            return f"{d.year:04d}"
        case "m" | "M":
            return f"{d.year:04d}-{d.month:02d}"
        case "d" | "D":
            return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"
        case _:
            raise ValueError(
                f"Invalid range_type=({range_type!r}) for `DateRange` (must be y/m/d)"
            )


@dataclass(frozen=True)
class DateRange:
    """An inclusive range between two dates."""

    start: date
    end: date

    @classmethod
    def from_strings(cls, start: str, end: str) -> DateRange:
        """Build a range from two partial date strings."""
        start_date = parse_partial_date_str(start)
        if start_date is None:
            raise ValueError(f"invalid date start=({start})")
        end_date = parse_partial_date_str(end)
        if end_date is None:
            raise ValueError(f"invalid date end=({end})")
        return cls(start_date, end_date)

    @classmethod
    def from_str_range(cls, dates) -> DateRange:
        """Build a range spanning the earliest and latest of the given date strings."""
        parsed = []
        for text in dates:
            value = parse_partial_date_str(text)
            if value is None:
                raise ValueError(f"Invalid date given for DateRange: ({text})")
            parsed.append(value)
        if not parsed:
            raise ValueError("At least one date is required for DateRange")
        return cls(min(parsed), max(parsed))

    def get_dates(self, range_type: str) -> list[date]:
        """List every year, month or day start between start and end, inclusive.

        ``range_type`` is 'y', 'm' or 'd' (either case). Months are given as
        the first of the month, years as January 1.
        """
        match range_type:
            case "y" | "Y":
                return list(self._years())
            case "m" | "M":
                return list(self._months())
            case "d" | "D":
                return list(self._days())
            case _:
                raise ValueError(
                    f"Invalid range_type=({range_type!r}) for `DateRange` (must be y/m/d)"
                )

    def _days(self):
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def _months(self):
        current = self.start
        while current <= self.end:
            yield current.replace(day=1)
            if current.month == 12:
                current = date(current.year + 1, 1, 1)
            else:
                current = date(current.year, current.month + 1, 1)

    def _years(self):
        for year in range(self.start.year, self.end.year + 1):
            yield date(year, 1, 1)

    def is_date_in_range(self, date_str: str) -> bool:
        """Whether the given partial date string falls within the range, inclusive."""
        value = parse_partial_date_str(date_str)
        if value is None:
            raise ValueError(f"Invalid date_str=({date_str}) for DateRange.is_date_in_range")
        return self.start <= value <= self.end


def get_missing_dates(search_dates_strs, range_type: str) -> list[str]:
    """List the years, months or days in the span of the given dates that are absent.

    Results are formatted as 'YYYY', 'YYYY-MM' or 'YYYY-MM-DD' by range type.
    """
    search_dates_strs = list(search_dates_strs)
    date_range = DateRange.from_str_range(search_dates_strs)
    search_dates = {parse_partial_date_str(text) for text in search_dates_strs}
    return [
        _date_format(d, range_type)
        for d in date_range.get_dates(range_type)
        if d not in search_dates
    ]