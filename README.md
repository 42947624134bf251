# datetimescan

datetimescan is a command-line tool that finds datetime strings in text and reports on them. It can list the datetimes it finds, count them per day, month or year, show the seconds between one datetime and the next, and add up periods of continuous activity.

It needs Python 3.10 or later and has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Recognised datetime forms

```
2023-05-08T19:29:50AEST
2023-05-08T19:29:50UTC
2023-05-08T19:29:50+1000
2023-05-08T19:29:50+10:00
2023-05-08 19:29:50
2023-05-08T19:29:50
```

Only three timezone names are understood: `UTC` (+00:00), `AEST` (+10:00) and `AEDT` (+11:00). A datetime with no offset is given the current local UTC offset.

## Usage

```
datetimescan [options] <command> [options]
```

These options are accepted before or after the command name:

| Option | Meaning |
| --- | --- |
| `-i`, `--input FILE` | Read from FILE (UTF-8). Without it, input comes from stdin |
| `-o`, `--output OUT_FILE` | Write to OUT_FILE. Without it, output goes to stdout |
| `--filter_start DT` | Drop datetimes before DT |
| `--filter_end DT` | Drop datetimes after DT |
| `--filter_invert` | Keep the datetimes the filter would drop, and drop the rest |
| `--no_future` | Fail if any kept datetime is later than now |
| `--no_unsorted` | Fail if the kept datetimes are not in ascending order |
| `--version` | Print the version and exit |

`DT` is written in any of the recognised forms above; both bounds are inclusive.

### Commands

- `locate [--no_locations]`: prints each match with its line number (counted from 1) and its position in that line, separated by tabs. The position is a byte offset into the UTF-8 encoded line. With `--no_locations` only the matched text is printed. The filter and checking options do not apply to `locate`.
- `count [--per d|m|y|all]`: prints the number of datetimes in each interval.
- `deltas [--allow_negative]`: prints the whole seconds between each datetime and the one before it. Negative gaps are printed as 0 unless `--allow_negative` is given.
- `splits [--per d|m|y|all] [--timeout N] [--unit s|m|h|hms]`: prints the length of each unbroken run of gaps. A run ends at any gap that is negative or longer than `--timeout` seconds (default 300). Runs that add up to zero are left out. With `--per`, gaps are measured only between datetimes in the same interval, and intervals with no runs are not shown.
- `sum [--per d|m|y|all] [--timeout N] [--unit s|m|h|hms]`: prints the total of the splits in each interval.

Intervals are taken from each datetime's own date in its own offset. With `--per all`, the default, the output is a bare value or list. With `d`, `m` or `y`, each line is prefixed with the interval (`2023-05-05`, `2023-05` or `2023`), lines are sorted by interval, and `splits` joins an interval's values with `, `.

Units: `s` prints whole seconds, `m` and `h` print minutes or hours with two decimals, and `hms` prints forms such as `1h01m01s`, `1m53s` or `7s`.

If a match cannot be parsed, a filter bound is invalid, or a `--no_future` / `--no_unsorted` check fails, an error message is printed to stderr and the exit status is 1. Running with no command is a usage error.

### Examples

```
$ datetimescan locate --input worklog.txt
2023-05-05T19:34:42+1000	1	0
2023-05-05T19:35:23+1000	2	0

$ datetimescan count --per m --input worklog.txt
2023-05: 5

$ datetimescan sum --per d --unit hms --input worklog.txt
2023-05-05: 1m53s
```

## Using it from Python

The pieces behind the commands can be used on their own:

- `datetimescan.search_datetimes.search_datetimes(lines)` returns `DatetimeMatch(text, line_number, position)` tuples.
- `datetimescan.parse_datetime.parse_datetime(text)` returns a timezone-aware `datetime`, raising `DatetimeParseError` on failure; `parse_datetimes` does the same for many strings.
- `datetimescan.delta_datetimes` provides `delta_datetimes`, `datetime_difference_seconds` and `split_deltas`.
- `datetimescan.group_datetimes.group_datetimes(datetimes, interval)` groups by `d`, `m`, `y` or `all`.
- `datetimescan.filters` provides `filter_datetimes_valid_indexes`, `reject_datetimes_future`, `reject_datetimes_unsorted` (raising `FutureDatetimesError` / `UnsortedDatetimesError`) and `parse_filter_start_end`.
- `datetimescan.convert_seconds` provides `convert_seconds(seconds, unit)` and `format_hms(seconds)`.
- `datetimescan.date_range` provides `DateRange` (with `from_strings`, `from_str_range`, `get_dates` and `is_date_in_range`), `parse_partial_date_str` for `YYYY`, `YYYY-MM` and `YYYY-MM-DD` strings, and `get_missing_dates`, which lists the years, months or days missing from a set of dates.
- `datetimescan.subcommands` runs each command from a `ScanOptions` and writes through a `datetimescan.printer.Printer`.
- `datetimescan.cli.run(argv, output)` runs the command line with results going to any text stream.

## What it does not do

datetimescan only reports on the datetimes it finds. It does not print the input back with datetimes reformatted, does not filter input lines, does not parse or convert datetimes into other output formats, and has no words-per-minute or grouped-sum reports. `get_missing_dates` is available from Python only; no command exposes it.