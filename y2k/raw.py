"""Reading raw program files and exporting them as timestamp-only files."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

from .utils import str_to_int

COMMENT_CHAR = "#"
TIMESTAMP_LENGTH = 18


def read_raw_file(path):
    """Read a raw program file, dropping comments and spaces.

    Lines are joined together; everything after ``#`` on a line is a comment.
    """
    with open(path, "rb") as handle:
        text = handle.read().decode("utf-8", errors="surrogateescape")

    pieces = []
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        line = line.partition(COMMENT_CHAR)[0]
        pieces.append(line.replace(" ", ""))
    return "".join(pieces)


def _format_time(seconds, nanos):
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone()
    fraction = f".{nanos:09d}".rstrip("0") if nanos else ""
    return f"{moment:%Y-%m-%d %H:%M:%S}{fraction} {moment:%z %Z}"


def write_file_timestamp(timestamp, path, file_num):
    """Create ``<path>/<file_num>.y2k`` and set its times from the timestamp.

    Every file after the first gets a leading ``8`` so that a leading zero
    in its digits survives. Returns the path of the written file.
    """
    filename = f"{os.fspath(path)}/{file_num}.y2k"
    with open(filename, "w"):
        pass

    if file_num > 0:
        timestamp = "8" + timestamp

    if len(timestamp) != TIMESTAMP_LENGTH:
        raise ValueError("Invalid timestamp length -- must be 18 chars long")

    seconds = str_to_int(timestamp[:9])
    nanos = str_to_int(timestamp[9:])
    print(f"Writing {filename} -- {timestamp} ({_format_time(seconds, nanos)})")

    total = seconds * 1_000_000_000 + nanos
    os.utime(filename, ns=(total, total))
    return Path(filename)


def export_raw_to_timestamp_files(timestamp, path):
    """Split a program into empty files whose timestamps hold its digits.

    The directory is created when missing. The last chunk is padded with
    trailing zeros. Returns the paths of the written files in order.
    """
    target = os.fspath(path)
    if not os.path.exists(target):
        os.mkdir(target)

    written = []
    remaining = timestamp
    while remaining:
        max_len = TIMESTAMP_LENGTH if not written else TIMESTAMP_LENGTH - 1
        remaining = remaining.ljust(max_len, "0")
        written.append(write_file_timestamp(remaining[:max_len], target, len(written)))
        remaining = remaining[max_len:]
    return written