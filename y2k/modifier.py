"""Modification of existing variables."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .utils import (
    split_str_by_n,
    str_arr_to_float,
    str_arr_to_int,
    str_arr_to_printable,
)
from .variables import VarType


@dataclass
class Modification:
    """A pending change to a variable, filled in from the timestamp."""

    FIELDS: ClassVar[tuple[str, ...]] = ("var_id", "mod_fn", "arg_is_var", "mod_size")

    var_id: int = 0
    mod_fn: int = 0
    arg_is_var: bool = False
    mod_size: int = 0
    value: str = ""


def _is_string(variable):
    return variable.var_type == VarType.STRING


def _is_odd_integer(value):
    return math.isfinite(value) and value == int(value) and int(value) % 2 == 1


def _divide(numerator, denominator):
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _power(base, exponent):
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def add_to_var(variable, str_val, num_val):
    """Append to a string variable, or add to a numeric one."""
    if _is_string(variable):
        variable.str_val += str_val
        return
    variable.num_val += num_val


def subtract_from_var(variable, str_val, num_val):
    """Drop the last characters of a string, or subtract from a number."""
    if _is_string(variable):
        keep = len(variable.str_val) - int(num_val)
        if not 0 <= keep <= len(variable.str_val):
            raise ValueError(
                f"cannot remove {int(num_val)} characters from {variable.str_val!r}"
            )
        variable.str_val = variable.str_val[:keep]
        return
    variable.num_val -= num_val


def multiply_var(variable, str_val, num_val):
    """Repeat a string a number of times, or multiply a number."""
    if _is_string(variable):
        count = int(num_val)
        if count < 0:
            raise ValueError(f"negative repeat count {count}")
        variable.str_val = variable.str_val * count
        return
    variable.num_val *= num_val


def divide_var(variable, str_val, num_val):
    """Remove every occurrence of a substring, or divide a number."""
    if _is_string(variable):
        variable.str_val = variable.str_val.replace(str_val, "")
        return
    variable.num_val = _divide(variable.num_val, num_val)


def pow_var(variable, str_val, num_val):
    """Raise a numeric variable to a power; strings are left alone."""
    if _is_string(variable):
        return
    variable.num_val = _power(variable.num_val, num_val)


def set_var(variable, str_val, num_val):
    """Overwrite a variable's value, keeping its type."""
    if _is_string(variable):
        variable.str_val = str_val
        return
    variable.num_val = num_val


MODIFIERS = {
    1: add_to_var,
    2: subtract_from_var,
    3: multiply_var,
    4: divide_var,
    5: pow_var,
    9: set_var,
}


def parse_modify(interp, timestamp, mod):
    """Read the modification value from the timestamp and apply it.

    ``interp`` supplies ``digits``, ``variables`` and ``debug_msg``.
    Returns the timestamp starting at the last chunk that was consumed.
    """
    digits = interp.digits
    while True:
        if len(timestamp) < digits:
            raise ValueError("timestamp ended while reading a modification value")

        chunk = timestamp[:digits]
        interp.debug_msg("ParseModify: [%s]%s", chunk, timestamp[digits:])
        mod.value += chunk

        if len(mod.value) >= mod.mod_size:
            break
        timestamp = timestamp[digits:]

    try:
        modifier = MODIFIERS[mod.mod_fn]
    except KeyError:
        raise ValueError(f"unknown modification function {mod.mod_fn}") from None

    target = interp.variables.get(mod.var_id)
    mod.value = mod.value[: mod.mod_size]

    parts = split_str_by_n(mod.value, digits)
    str_val = str_arr_to_printable(parts)
    num_val = str_arr_to_float(parts)

    if mod.arg_is_var:
        str_val, num_val = interp.variables.get(str_arr_to_int(parts)).values()

    modifier(target, str_val, num_val)
    return timestamp