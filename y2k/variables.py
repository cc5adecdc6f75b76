"""Variables, the variable store and parsing of variable creation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .utils import PRINTABLE, float_to_string, str_to_float, str_to_int


class VarType(IntEnum):
    """How the interpreter treats a variable's value."""

    STRING = 1
    INT = 2
    FLOAT = 3
    COPY = 9


@dataclass
class Variable:
    """A program variable holding both a string and a numeric value."""

    FIELDS: ClassVar[tuple[str, ...]] = ("var_id", "var_type", "size")

    var_id: int = 0
    var_type: int = 0
    size: int = 0
    str_val: str = ""
    num_val: float = 0.0

    def display(self):
        """Return the value as shown when printed."""
        if self.var_type == VarType.STRING:
            return self.str_val
        return float_to_string(self.num_val)

    def values(self):
        """Return the string and numeric values as a pair."""
        return self.str_val, self.num_val


class VarStore:
    """Variables keyed by an 8-bit id."""

    def __init__(self):
        self._vars: dict[int, Variable] = {}

    def get(self, var_id):
        """Return the variable with this id, creating an empty one if unset."""
        return self._vars.setdefault(var_id & 0xFF, Variable())

    def set(self, var_id, variable):
        self._vars[var_id & 0xFF] = variable

    def __contains__(self, var_id):
        return (var_id & 0xFF) in self._vars

    def __len__(self):
        return len(self._vars)

    def clear(self):
        self._vars.clear()

    def add_cli_arg(self, text, digits):
        """Store a command-line argument as a variable.

        Arguments fill ids downward from the largest id for the window
        size (9, 99, ...). Arguments holding a letter are strings, the
        rest are numbers.
        """
        if len(self._vars) >= 256:
            raise ValueError("no free variable id left")

        arg_type = VarType.STRING if any(c.isalpha() for c in text) else VarType.INT

        index = str_to_int("9" * digits)
        while index in self:
            index -= 1

        variable = Variable(
            var_id=index & 0xFF,
            var_type=arg_type,
            size=len(text.encode("utf-8")) & 0xFF,
            str_val=text,
            num_val=str_to_float(text),
        )
        self.set(index, variable)
        return variable


def _finish(variable, store):
    variable.str_val = variable.str_val[: variable.size]

    if variable.var_type == VarType.COPY:
        source = store.get(str_to_int(variable.str_val))
        variable.var_type = source.var_type
        variable.size = source.size
        variable.num_val = source.num_val
        variable.str_val = source.str_val
        return

    if variable.var_type == VarType.FLOAT:
        # The first digit says where the decimal point goes.
        decimal_index = str_to_int(variable.str_val[0:1])
        if decimal_index + 1 > len(variable.str_val):
            raise ValueError(
                f"decimal position {decimal_index} is outside float value "
                f"{variable.str_val!r}"
            )
        digits = variable.str_val
        variable.str_val = (
            digits[1:decimal_index + 1] + "." + digits[decimal_index + 1:]
        )

    variable.num_val = str_to_float(variable.str_val)


def parse_variable(interp, timestamp, variable):
    """Read the variable's value from the timestamp and store it.

    ``interp`` supplies ``digits``, ``variables`` and ``debug_msg``.
    Returns the timestamp starting at the last chunk that was consumed.
    """
    digits = interp.digits
    while True:
        if len(timestamp) < digits:
            raise ValueError("timestamp ended while reading a variable value")

        chunk = timestamp[:digits]
        interp.debug_msg("ParseVariable: [%s]%s", chunk, timestamp[digits:])

        if variable.var_type == VarType.STRING:
            index = str_to_int(chunk)
            if not 0 <= index < len(PRINTABLE):
                raise IndexError(f"no printable character at index {index}")
            chunk = PRINTABLE[index]
        variable.str_val += chunk

        if len(variable.str_val) >= variable.size:
            _finish(variable, interp.variables)
            interp.variables.set(variable.var_id, variable)
            return timestamp

        timestamp = timestamp[digits:]