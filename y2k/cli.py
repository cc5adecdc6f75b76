"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys

from .interpreter import Y2K
from .raw import export_raw_to_timestamp_files, read_raw_file
from .utils import get_timestamps

_USAGE = "Missing input dir!\n\nUsage: y2k <directory> [args]"


def _build_parser():
    parser = argparse.ArgumentParser(prog="y2k", allow_abbrev=False)
    parser.add_argument(
        "-d",
        dest="digits",
        type=int,
        default=1,
        help="Set # of digits to parse at a time",
    )
    parser.add_argument(
        "-debug",
        "--debug",
        action="store_true",
        help="Enable to view interpreter steps in console",
    )
    parser.add_argument(
        "-export",
        "--export",
        action="store_true",
        help="Export a Y2K raw file to a set of timestamp-only files",
    )
    parser.add_argument(
        "-outdir",
        "--outdir",
        default="./y2k-out",
        help="Set the output directory for timestamp-only files when exporting "
        "a raw Y2K file. This directory will be created if it does not exist.",
    )
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def main(argv=None):
    """Run a program from a directory or file; extra arguments become variables."""
    parser = _build_parser()
    options = parser.parse_args(argv)

    try:
        interp = Y2K(digits=options.digits, debug=options.debug)
    except ValueError as exc:
        parser.error(str(exc))

    timestamp = ""
    try:
        for arg in options.args:
            if timestamp:
                interp.from_cli_arg(arg)
                continue
            if options.export:
                export_raw_to_timestamp_files(read_raw_file(arg), options.outdir)
                return 0
            timestamp = get_timestamps(arg, options.digits)

        if not timestamp:
            print(_USAGE)
            parser.print_help(sys.stderr)
            return 0

        interp.parse(timestamp)
    except (OSError, ValueError, IndexError) as exc:
        print(f"y2k: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())