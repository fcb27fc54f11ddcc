import math

import pytest

from sheetlib.complex_number import Complex


def test_real_imag():
    a = Complex()
    b = Complex(42.0)
    c = Complex(1.0, 2.0)
    assert a.real == pytest.approx(0.0)
    assert a.imag == pytest.approx(0.0)
    assert b.real == pytest.approx(42.0)
    assert b.imag == pytest.approx(0.0)
    assert c.real == pytest.approx(1.0)
    assert c.imag == pytest.approx(2.0)


def test_abs():
    assert Complex(3.0, 4.0).abs() == pytest.approx(5.0)


def test_norm():
    assert Complex(3.0, 4.0).norm() == pytest.approx(25.0)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Complex(1.0, 0.0), 0.0),
        (Complex(0.0, 1.0), math.pi / 2),
        (Complex(-1.0, 0.0), math.pi),
        (Complex(0.0, -1.0), -math.pi / 2),
    ],
)
def test_arg(value, expected):
    assert value.arg() == pytest.approx(expected)


def test_conj():
    c = Complex(1.0, 2.0).conj()
    assert c.real == pytest.approx(1.0)
    assert c.imag == pytest.approx(-2.0)


def test_unary_minus():
    b = -Complex(1.0, 2.0)
    assert (b.real, b.imag) == (pytest.approx(-1.0), pytest.approx(-2.0))


def test_unary_plus():
    b = +Complex(1.0, 2.0)
    assert (b.real, b.imag) == (pytest.approx(1.0), pytest.approx(2.0))


def test_binary_plus():
    c = Complex(1.0, 2.0) + Complex(3.0, 4.0)
    assert (c.real, c.imag) == (pytest.approx(4.0), pytest.approx(6.0))


def test_binary_minus():
    c = Complex(1.0, 2.0) - Complex(3.0, 4.0)
    assert (c.real, c.imag) == (pytest.approx(-2.0), pytest.approx(-2.0))


def test_multiplication():
    c = Complex(1.0, 2.0) * Complex(3.0, 4.0)
    assert (c.real, c.imag) == (pytest.approx(-5.0), pytest.approx(10.0))


def test_division():
    c = Complex(1.0, 2.0) / Complex(3.0, 4.0)
    assert c.real == pytest.approx(11.0 / 25.0)
    assert c.imag == pytest.approx(2.0 / 25.0)


def test_comparison():
    a = Complex(1.0, 2.0)
    b = Complex(3.0, 4.0)
    assert a == a
    assert b == b
    assert not (a == b)
    assert not (a != a)
    assert not (b != b)
    assert a != b


def test_mixed_with_real_number():
    assert Complex(1.0, 2.0) + 3 == Complex(4.0, 2.0)
    assert 2 * Complex(1.0, 2.0) == Complex(2.0, 4.0)