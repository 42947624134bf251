"""Command-line interface: find and analyse datetime strings in text."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import TextIO

from datetimescan import subcommands
from datetimescan.printer import Printer
from datetimescan.subcommands import ScanOptions

_PROGRAM = "datetimescan"
_VERSION = "0.0.1"
_UNSIGNED = re.compile(r"\+?\d+")

_HANDLERS = {
    "locate": subcommands.locate,
    "count": subcommands.count,
    "deltas": subcommands.deltas,
    "splits": subcommands.splits,
    "sum": subcommands.sum_splits,
}


def _unsigned_int(value: str) -> int:
    if not _UNSIGNED.fullmatch(value):
        raise argparse.ArgumentTypeError("Invalid unsigned-integer value")
    return int(value)


def _add_global_arguments(parser: argparse.ArgumentParser, suppress: bool) -> None:
    """Add the options accepted both before and after the command name.

    On a command's own parser the defaults are suppressed, so a value given
    before the command name is not overwritten.
    """

    def default(value):
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "-i", "--input", metavar="FILE", default=default(None),
        help="Select input file (default=stdin)",
    )
    parser.add_argument(
        "-o", "--output", metavar="OUT_FILE", default=default(None),
        help="Select output file (default=stdout)",
    )
    parser.add_argument(
        "--no_future", action="store_true", default=default(False),
        help="Do not allow datetimes after the present",
    )
    parser.add_argument(
        "--no_unsorted", action="store_true", default=default(False),
        help="Do not allow out-of-order datetimes in input",
    )
    parser.add_argument(
        "--filter_start", metavar="FILTER_START", default=default(None),
        help="Exclude datetimes before",
    )
    parser.add_argument(
        "--filter_end", metavar="FILTER_END", default=default(None),
        help="Exclude datetimes after",
    )
    parser.add_argument(
        "--filter_invert", action="store_true", default=default(False),
        help="Invert filter excluded items",
    )


def _add_per(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--per", metavar="INTERVAL", choices=("d", "m", "y", "all"), default="all",
        help="Count/Sum datetimes per interval (d/m/y/all) (default=all)",
    )


def _add_split_arguments(parser: argparse.ArgumentParser) -> None:
    _add_per(parser)
    parser.add_argument(
        "--timeout", metavar="TIMEOUT", type=_unsigned_int, default=300,
        help="Max positive delta not considered a split (default=300)",
    )
    parser.add_argument(
        "--unit", metavar="UNIT", choices=("s", "m", "h", "hms"), default="s",
        help="Output in seconds/minutes/hours (s/m/h/hms) (default=s)",
    )


def create_arg_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its commands and options."""
    parser = argparse.ArgumentParser(
        prog=_PROGRAM,
        description="Utility for finding/analysing datetime strings in input",
    )
    parser.add_argument("--version", action="version", version=f"{_PROGRAM} {_VERSION}")
    _add_global_arguments(parser, suppress=False)

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    locate = commands.add_parser("locate", help="List datetime matches and their locations")
    locate.add_argument(
        "--no_locations", action="store_true",
        help="Do not include positions of datetime matches",
    )

    count = commands.add_parser("count", help="Count datetimes per interval")
    _add_per(count)

    deltas = commands.add_parser(
        "deltas", help="Report seconds elapsed between each datetime match"
    )
    deltas.add_argument(
        "--allow_negative", action="store_true",
        help="Keep negative deltas instead of setting them to 0",
    )

    splits = commands.add_parser(
        "splits", help="Report length of continuous deltas where no delta > timeout"
    )
    _add_split_arguments(splits)

    sum_parser = commands.add_parser("sum", help="Sum splits per interval")
    _add_split_arguments(sum_parser)

    for command_parser in (locate, count, deltas, splits, sum_parser):
        _add_global_arguments(command_parser, suppress=True)

    return parser


def _options_from(args: argparse.Namespace) -> ScanOptions:
    return ScanOptions(
        input_path=args.input,
        filter_start=args.filter_start,
        filter_end=args.filter_end,
        filter_invert=args.filter_invert,
        no_future=args.no_future,
        no_unsorted=args.no_unsorted,
        no_locations=getattr(args, "no_locations", False),
        per=getattr(args, "per", "all"),
        allow_negative=getattr(args, "allow_negative", False),
        timeout=getattr(args, "timeout", 300),
        unit=getattr(args, "unit", "s"),
    )


def run(argv=None, output: TextIO | None = None) -> None:
    """Parse ``argv`` and run the chosen command.

    Results go to the ``--output`` file if one is named, otherwise to
    ``output``, or to standard output when that is None.
    """
    parser = create_arg_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.error("No subcommand was used. Use --help for more information.")
    handler = _HANDLERS[args.command]
    options = _options_from(args)
    if args.output is not None:
        with open(args.output, "w", encoding="utf-8") as handle:
            handler(options, Printer(handle))
    else:
        handler(options, Printer(output))


def main(argv=None) -> int:
    """Entry point; returns the process exit status."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    try:
        run(argv)
    except (ValueError, OSError) as error:
        print(f"{_PROGRAM}: error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())