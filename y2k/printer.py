"""Printing of literal text and variables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .utils import split_str_by_n, str_arr_to_printable, str_to_int


class PrintType(IntEnum):
    """What a print command outputs."""

    STRING = 1
    VAR = 2


@dataclass
class PrintCommand:
    """A print command, filled in from the timestamp."""

    FIELDS: ClassVar[tuple[str, ...]] = ("print_type", "size")

    print_type: int = 0
    size: int = 0
    value: str = ""


def parse_print(interp, timestamp, cmd):
    """Read ``size`` chunks from the timestamp and print them.

    Literal text maps each chunk to a printable character; a variable
    print treats the digits as a variable id. ``interp`` supplies
    ``digits``, ``variables``, ``debug_msg`` and ``output_msg``. Returns
    the timestamp starting at the last chunk that was consumed.
    """
    digits = interp.digits
    while True:
        if len(timestamp) < digits:
            raise ValueError("timestamp ended while reading a print value")

        chunk = timestamp[:digits]
        interp.debug_msg("ParsePrint: [%s]%s", chunk, timestamp[digits:])
        cmd.value += chunk

        if len(cmd.value) >= cmd.size * digits:
            break
        timestamp = timestamp[digits:]

    if cmd.print_type == PrintType.STRING:
        interp.output_msg(str_arr_to_printable(split_str_by_n(cmd.value, digits)))
    elif cmd.print_type == PrintType.VAR:
        interp.output_msg(interp.variables.get(str_to_int(cmd.value)).display())
    return timestamp