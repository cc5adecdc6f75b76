"""Conditions and loops that compare a variable against a value."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .utils import (
    CONTINUE_CMD,
    DEBUG_DIVIDER,
    get_cond_term,
    split_str_by_n,
    str_arr_to_float,
    str_arr_to_int,
    str_arr_to_printable,
)
from .variables import VarType


@dataclass
class Condition:
    """An ``if`` or a loop, filled in from the timestamp."""

    FIELDS: ClassVar[tuple[str, ...]] = ("var_id", "comp_fn", "loop", "comp_val_size")

    var_id: int = 0
    comp_fn: int = 0
    loop: bool = False
    comp_val_size: int = 0
    value: str = ""


def _is_string(variable):
    return variable.var_type == VarType.STRING


def equal_to(variable, values):
    """Compare a string with printable text, or a number with a number."""
    if _is_string(variable):
        return variable.str_val == str_arr_to_printable(values)
    return variable.num_val == str_arr_to_float(values)


def less_than(variable, values):
    """Compare a string's length, or a number, against the value."""
    if _is_string(variable):
        return len(variable.str_val) < str_arr_to_int(values)
    return variable.num_val < str_arr_to_float(values)


def greater_than(variable, values):
    """Compare a string's length, or a number, against the value."""
    if _is_string(variable):
        return len(variable.str_val) > str_arr_to_int(values)
    return variable.num_val > str_arr_to_float(values)


def is_divisible(variable, values):
    """Check that a number divides evenly; strings always pass."""
    if _is_string(variable):
        return True
    try:
        return math.fmod(variable.num_val, str_arr_to_float(values)) == 0
    except ValueError:
        return False


COMPARISONS = {
    1: equal_to,
    2: less_than,
    3: greater_than,
    4: is_divisible,
}


def run_condition(interp, cond, timestamp, target, split_comp):
    """Run the body once or in a loop while the comparison holds.

    Returns True when the last run of the body asked to continue, which
    ends the rest of the enclosing timestamp.
    """
    try:
        compare = COMPARISONS[cond.comp_fn]
    except KeyError:
        raise ValueError(f"unknown comparison function {cond.comp_fn}") from None

    result = ""
    if cond.loop:
        while compare(target, split_comp):
            result = interp.parse(timestamp)
    elif compare(target, split_comp):
        result = interp.parse(timestamp)
    return result == CONTINUE_CMD


def parse_condition(interp, timestamp, cond):
    """Read the comparison value, then run the body up to its terminator.

    The body ends at the loop or condition terminator, or at the end of
    the timestamp. Returns what the main parser should continue with.
    """
    digits = interp.digits
    while True:
        if len(timestamp) < digits:
            raise ValueError("timestamp ended while reading a comparison value")

        chunk = timestamp[:digits]
        interp.debug_msg("ParseCondition: [%s]%s", chunk, timestamp[digits:])
        cond.value += chunk

        if len(cond.value) >= cond.comp_val_size:
            break
        timestamp = timestamp[digits:]

    target = interp.variables.get(cond.var_id)
    split_comp = split_str_by_n(cond.value[: cond.comp_val_size], digits)

    terminator = get_cond_term(cond.loop)
    end = timestamp.find(terminator)
    if end < 0:
        end = len(timestamp)
        next_timestamp = ""
    else:
        if end < digits:
            raise ValueError("condition terminator overlaps its comparison value")
        next_timestamp = timestamp[end + len(terminator) - 1:]

    body = timestamp[digits:end]
    interp.debug_msg(DEBUG_DIVIDER)

    if run_condition(interp, cond, body, target, split_comp):
        return ""
    return next_timestamp