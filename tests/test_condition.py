import pytest

from y2k.condition import (
    Condition,
    equal_to,
    greater_than,
    is_divisible,
    less_than,
    parse_condition,
    run_condition,
)
from y2k.utils import COND_TERM, CONTINUE_CMD, LOOP_TERM, PRINTABLE
from y2k.variables import Variable, VarStore, VarType


class FakeInterp:
    def __init__(self, digits=1, step=None, result=""):
        self.digits = digits
        self.variables = VarStore()
        self.bodies = []
        self.step = step
        self.result = result

    def debug_msg(self, template, *args):
        pass

    def parse(self, timestamp):
        self.bodies.append(timestamp)
        if self.step is not None:
            self.step(self)
        return self.result


def number(value):
    return Variable(var_id=1, var_type=VarType.INT, num_val=value)


def text(value):
    return Variable(var_id=1, var_type=VarType.STRING, str_val=value)


def increment(interp):
    interp.variables.get(1).num_val += 1


def test_equal_to_number():
    assert equal_to(number(42.0), ["4", "2"])
    assert not equal_to(number(42.0), ["4", "3"])


def test_equal_to_string():
    var = text(PRINTABLE[8] + PRINTABLE[9])
    assert equal_to(var, ["8", "9"])
    assert not equal_to(var, ["9", "8"])


def test_less_and_greater_on_string_length():
    var = text("abc")
    assert less_than(var, ["4"])
    assert not less_than(var, ["3"])
    assert greater_than(var, ["2"])
    assert not greater_than(var, ["3"])


def test_less_and_greater_on_number():
    var = number(10.0)
    assert less_than(var, ["1", "1"])
    assert greater_than(var, ["9"])
    assert not greater_than(var, ["1", "0"])


def test_is_divisible():
    assert is_divisible(number(10.0), ["5"])
    assert not is_divisible(number(10.0), ["3"])
    assert not is_divisible(number(10.0), ["0"])
    assert is_divisible(text("abc"), ["7"])


def test_run_condition_once_when_true():
    interp = FakeInterp()
    cond = Condition(comp_fn=1, loop=False)
    stop = run_condition(interp, cond, "body", number(5.0), ["5"])
    assert stop is False
    assert interp.bodies == ["body"]


def test_run_condition_skips_when_false():
    interp = FakeInterp()
    cond = Condition(comp_fn=1, loop=False)
    run_condition(interp, cond, "body", number(5.0), ["6"])
    assert interp.bodies == []


def test_run_condition_continue_stops():
    interp = FakeInterp(result=CONTINUE_CMD)
    cond = Condition(comp_fn=1, loop=False)
    assert run_condition(interp, cond, "body", number(5.0), ["5"]) is True


def test_run_condition_loops_until_false():
    interp = FakeInterp(step=increment)
    interp.variables.set(1, number(0.0))
    cond = Condition(var_id=1, comp_fn=2, loop=True)
    run_condition(interp, cond, "body", interp.variables.get(1), ["5"])
    assert len(interp.bodies) == 5
    assert interp.variables.get(1).num_val == 5.0


def test_run_condition_unknown_comparison():
    interp = FakeInterp()
    cond = Condition(comp_fn=8)
    with pytest.raises(ValueError):
        run_condition(interp, cond, "body", number(0.0), ["0"])


def test_parse_condition_loop_to_terminator():
    interp = FakeInterp(step=increment)
    interp.variables.set(1, number(0.0))
    cond = Condition(var_id=1, comp_fn=2, loop=True, comp_val_size=1)
    rest = parse_condition(interp, "3" + "8123" + LOOP_TERM + "56", cond)
    assert interp.bodies == ["8123"] * 3
    assert rest == LOOP_TERM[-1] + "56"


def test_parse_condition_without_terminator_runs_to_end():
    interp = FakeInterp()
    interp.variables.set(1, number(4.0))
    cond = Condition(var_id=1, comp_fn=1, loop=False, comp_val_size=1)
    rest = parse_condition(interp, "48123", cond)
    assert rest == ""
    assert interp.bodies == ["8123"]


def test_parse_condition_multi_chunk_value():
    interp = FakeInterp()
    interp.variables.set(1, number(42.0))
    cond = Condition(var_id=1, comp_fn=1, loop=False, comp_val_size=2)
    rest = parse_condition(interp, "42" + "913" + COND_TERM + "7", cond)
    assert interp.bodies == ["913"]
    assert rest == COND_TERM[-1] + "7"


def test_parse_condition_continue_empties_rest():
    interp = FakeInterp(result=CONTINUE_CMD)
    interp.variables.set(1, number(4.0))
    cond = Condition(var_id=1, comp_fn=1, loop=False, comp_val_size=1)
    assert parse_condition(interp, "4" + "81" + COND_TERM + "55", cond) == ""


def test_parse_condition_terminator_overlapping_value():
    interp = FakeInterp()
    cond = Condition(var_id=1, comp_fn=1, loop=True, comp_val_size=1)
    with pytest.raises(ValueError):
        parse_condition(interp, LOOP_TERM + "5", cond)


def test_parse_condition_short_timestamp():
    interp = FakeInterp(digits=2)
    cond = Condition(var_id=1, comp_fn=1, loop=False, comp_val_size=4)
    with pytest.raises(ValueError):
        parse_condition(interp, "123", cond)