import array
import io
import math

import pytest

from sheetlib.object_representation import (
    FloatStack,
    PopError,
    print_binary_double,
    print_binary_float,
)

FLOAT_CASES = [
    (42.125, "sign: 0\nexponent: 10000100\nmantissa: 01010001000000000000000\n"),
    (-42.125, "sign: 1\nexponent: 10000100\nmantissa: 01010001000000000000000\n"),
    (0.0, "sign: 0\nexponent: 00000000\nmantissa: 00000000000000000000000\n"),
    (-0.0, "sign: 1\nexponent: 00000000\nmantissa: 00000000000000000000000\n"),
    (math.inf, "sign: 0\nexponent: 11111111\nmantissa: 00000000000000000000000\n"),
    (-math.inf, "sign: 1\nexponent: 11111111\nmantissa: 00000000000000000000000\n"),
]

DOUBLE_CASES = [
    (42.125, "sign: 0\nexponent: 10000000100\nmantissa: 0101000100000000000000000000000000000000000000000000\n"),
    (-42.125, "sign: 1\nexponent: 10000000100\nmantissa: 0101000100000000000000000000000000000000000000000000\n"),
    (0.0, "sign: 0\nexponent: 00000000000\nmantissa: 0000000000000000000000000000000000000000000000000000\n"),
    (-0.0, "sign: 1\nexponent: 00000000000\nmantissa: 0000000000000000000000000000000000000000000000000000\n"),
    (math.inf, "sign: 0\nexponent: 11111111111\nmantissa: 0000000000000000000000000000000000000000000000000000\n"),
    (-math.inf, "sign: 1\nexponent: 11111111111\nmantissa: 0000000000000000000000000000000000000000000000000000\n"),
]


@pytest.mark.parametrize("value, expected", FLOAT_CASES)
def test_print_binary_float(value, expected):
    out = io.StringIO()
    print_binary_float(value, out)
    assert out.getvalue() == expected


@pytest.mark.parametrize("value, expected", DOUBLE_CASES)
def test_print_binary_double(value, expected):
    out = io.StringIO()
    print_binary_double(value, out)
    assert out.getvalue() == expected


def test_print_binary_defaults_to_stdout(capsys):
    print_binary_float(42.125)
    assert capsys.readouterr().out == FLOAT_CASES[0][1]


def test_push_pop_float():
    stack = FloatStack()
    stack.push_float(1.0)
    assert len(stack) == 5
    with pytest.raises(PopError):
        stack.pop_double()
    assert stack.pop_float() == 1.0
    assert len(stack) == 0


def test_push_pop_double():
    stack = FloatStack()
    stack.push_double(1.0)
    assert len(stack) == 9
    with pytest.raises(PopError):
        stack.pop_float()
    assert stack.pop_double() == 1.0
    assert len(stack) == 0


def test_push_pop_mixed():
    stack = FloatStack()
    stack.push_double(123.456)
    stack.push_float(42.24)
    stack.push_double(245e123)

    with pytest.raises(PopError):
        stack.pop_float()
    assert stack.pop_double() == 245e123
    with pytest.raises(PopError):
        stack.pop_double()
    assert stack.pop_float() == array.array("f", [42.24])[0]
    with pytest.raises(PopError):
        stack.pop_float()
    assert stack.pop_double() == 123.456
    with pytest.raises(PopError):
        stack.pop_float()
    with pytest.raises(PopError):
        stack.pop_double()
    assert len(stack) == 0


def test_pop_empty_raises():
    with pytest.raises(PopError):
        FloatStack().pop_float()


def test_float_overflow_becomes_infinity():
    stack = FloatStack()
    stack.push_float(1e300)
    assert stack.pop_float() == math.inf