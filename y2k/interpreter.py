"""The interpreter loop that dispatches timestamp digits to commands."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Callable, TextIO

from .condition import Condition, parse_condition
from .modifier import Modification, parse_modify
from .printer import PrintCommand, parse_print
from .utils import CONTINUE_CMD, str_to_int
from .variables import Variable, VarStore, parse_variable


class Command(IntEnum):
    """Command codes that start an instruction in a timestamp."""

    PRINT = 9
    CREATE = 8
    MODIFY = 7
    CONDITION = 6
    META = 5
    CONTINUE = 4


class _Kind(Enum):
    UINT8 = "uint8"
    INT = "int"
    BOOL = "bool"

    def convert(self, value):
        if self is _Kind.UINT8:
            return value & 0xFF
        if self is _Kind.BOOL:
            return value != 0
        return value


@dataclass(frozen=True)
class _Instruction:
    name: str
    fields: tuple[tuple[str, _Kind], ...]
    run: Callable[[Any, str, dict], str]


def _build(factory, handler):
    def run(interp, timestamp, values):
        return handler(interp, timestamp, factory(**values))

    return run


def _run_meta(interp, timestamp, values):
    return interp.parse_meta(timestamp, values["digits"], values["debug"])


_INSTRUCTIONS = {
    Command.PRINT: _Instruction(
        "PrintCommand",
        (("print_type", _Kind.UINT8), ("size", _Kind.INT)),
        _build(PrintCommand, parse_print),
    ),
    Command.CREATE: _Instruction(
        "Variable",
        (("var_id", _Kind.UINT8), ("var_type", _Kind.UINT8), ("size", _Kind.UINT8)),
        _build(Variable, parse_variable),
    ),
    Command.MODIFY: _Instruction(
        "Modification",
        (
            ("var_id", _Kind.UINT8),
            ("mod_fn", _Kind.UINT8),
            ("arg_is_var", _Kind.BOOL),
            ("mod_size", _Kind.UINT8),
        ),
        _build(Modification, parse_modify),
    ),
    Command.CONDITION: _Instruction(
        "Condition",
        (
            ("var_id", _Kind.UINT8),
            ("comp_fn", _Kind.UINT8),
            ("loop", _Kind.BOOL),
            ("comp_val_size", _Kind.UINT8),
        ),
        _build(Condition, parse_condition),
    ),
    Command.META: _Instruction(
        "Y2K",
        (("debug", _Kind.BOOL), ("digits", _Kind.INT)),
        _run_meta,
    ),
}


@dataclass
class Y2K:
    """Interpreter state: the parsing window, debug flag, variables and output."""

    digits: int = 1
    debug: bool = False
    variables: VarStore = field(default_factory=VarStore, compare=False, repr=False)
    output: TextIO | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.digits < 1:
            raise ValueError("the number of digits to parse must be at least 1")

    def read_fields(self, timestamp, names):
        """Read one integer per name, each ``digits`` characters wide.

        Returns the integers and the rest of the timestamp.
        """
        values = []
        rest = timestamp
        for name in names:
            chunk, rest = rest[: self.digits], rest[self.digits:]
            if len(chunk) < self.digits:
                raise ValueError(f"timestamp ended while reading {name}")
            self.debug_msg("%s: [%s]%s", name, chunk, rest)
            values.append(str_to_int(chunk))
        return values, rest

    def debug_msg(self, template, *args):
        """Output a formatted message when debugging is enabled."""
        if self.debug:
            self.output_msg(template % args if args else template)

    def output_msg(self, msg):
        """Write a line to the output stream and flush it."""
        stream = self.output if self.output is not None else sys.stdout
        stream.write(msg + "\n")
        stream.flush()

    def parse(self, timestamp):
        """Run the program held in the timestamp.

        Returns the continue marker when a continue command is met,
        otherwise an empty string once the timestamp is used up.
        """
        digits = self.digits
        while True:
            if len(timestamp) < digits:
                raise ValueError("timestamp is shorter than the parsing window")

            head = timestamp[:digits]
            self.debug_msg("Parse: [%s]%s", head, timestamp[digits:])
            command = str_to_int(head)

            if command == Command.CONTINUE:
                return CONTINUE_CMD

            instruction = _INSTRUCTIONS.get(command)
            if instruction is not None:
                labels = [f"{instruction.name}.{name}" for name, _ in instruction.fields]
                raw, rest = self.read_fields(timestamp[digits:], labels)
                values = {
                    name: kind.convert(value)
                    for (name, kind), value in zip(instruction.fields, raw)
                }
                timestamp = instruction.run(self, rest, values)

            if digits > len(timestamp) - digits:
                return ""
            timestamp = timestamp[digits:]

    def parse_meta(self, timestamp, digits, debug):
        """Parse the rest of the timestamp with new interpreter settings.

        The new interpreter shares this one's variables and output.
        """
        child = Y2K(
            digits=digits,
            debug=debug,
            variables=self.variables,
            output=self.output,
        )
        return child.parse(timestamp)

    def from_cli_arg(self, text):
        """Store a command-line argument as a variable and return it."""
        return self.variables.add_cli_arg(text, self.digits)