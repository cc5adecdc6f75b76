"""Number parsing, timestamp collection and language constants."""

from __future__ import annotations

import math
import os
import re
from decimal import Decimal

Y2K_EXT = ".y2k"
PRINTABLE = (
    " abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "1234567890"
    "!@#$%^&*()+-<>.,"
)
MAX_TIMESTAMP = 999_999_999_999_999_999
STR_TERM = "  "
LOOP_TERM = "1999"
COND_TERM = "2000"
CONTINUE_CMD = "continue"
DEBUG_DIVIDER = "=" * 30

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def get_file_mod_time(path, zero_pad):
    """Return a file's modification time in nanoseconds as text.

    An empty string is returned when the file cannot be read or was
    modified after the largest timestamp the language accepts.
    """
    try:
        nanoseconds = os.stat(path).st_mtime_ns
    except OSError:
        return ""
    if nanoseconds > MAX_TIMESTAMP:
        return ""
    prefix = "0" if zero_pad else ""
    return f"{prefix}{nanoseconds}"


def get_cond_term(loop):
    """Return the terminator that ends a loop or a plain condition."""
    return LOOP_TERM if loop else COND_TERM


def str_to_int(text):
    """Parse a decimal integer, returning 0 for anything invalid."""
    if not _INT_RE.fullmatch(text):
        return 0
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return value


def str_to_float(text):
    """Parse a floating point number, returning 0.0 for anything invalid."""
    if not _FLOAT_RE.fullmatch(text):
        return 0.0
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        return 0.0
    return value


def float_to_string(value):
    """Format a float in the shortest plain decimal form, without exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def str_arr_to_int(parts):
    """Join the parts and parse them as one integer."""
    return str_to_int("".join(parts))


def str_arr_to_float(parts):
    """Join the parts and parse them as one float."""
    return str_to_float("".join(parts))


def str_arr_to_printable(parts):
    """Map each part to a printable character by its index.

    Parts whose index falls outside the printable table are dropped.
    """
    return "".join(
        PRINTABLE[index]
        for index in map(str_to_int, parts)
        if 0 <= index < len(PRINTABLE)
    )


def split_str_by_n(text, n):
    """Split text into chunks of n characters; the last may be shorter.

    An empty string yields a single empty chunk.
    """
    if n < 1:
        raise ValueError("chunk size must be at least 1")
    if not text:
        return [""]
    return [text[start:start + n] for start in range(0, len(text), n)]


def get_file_timestamp(path, digits):
    """Return a file's timestamp, or its raw contents for newer files."""
    from .raw import read_raw_file

    mod_time = get_file_mod_time(path, digits > 1)
    if mod_time:
        return mod_time
    return read_raw_file(path)


def get_timestamps(path, digits):
    """Join the timestamps of every .y2k file in a directory, by name.

    Every timestamp after the first loses its leading ``digits``
    characters. A path that is not a directory is read as a single file.
    """
    try:
        names = sorted(os.listdir(path))
    except OSError:
        return get_file_timestamp(path, digits)

    directory = os.path.abspath(path)
    pieces = []
    for name in names:
        if not name.endswith(Y2K_EXT):
            continue
        timestamp = get_file_mod_time(os.path.join(directory, name), digits > 1)
        if pieces and timestamp:
            timestamp = timestamp[digits:]
        if timestamp:
            pieces.append(timestamp)
    return "".join(pieces)