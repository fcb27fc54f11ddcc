import pytest

from sheetlib.rational import Rational


def parts(r):
    return r.num(), r.den()


def test_num_den():
    assert parts(Rational()) == (0, 1)
    assert parts(Rational(42)) == (42, 1)
    assert parts(Rational(42, 1)) == (42, 1)


def test_canonicalization():
    assert parts(Rational(84, 35)) == (12, 5)
    assert parts(Rational(-1, -2)) == (1, 2)
    assert parts(Rational(42, -1)) == (-42, 1)


def test_conversion():
    assert float(Rational(84, 35)) == pytest.approx(2.4)


def test_inv():
    assert parts(Rational(-84, 35).inv()) == (5, -12)


def test_unary_minus():
    assert parts(-Rational(84, 35)) == (-12, 5)


def test_unary_plus():
    assert parts(+Rational(84, 35)) == (12, 5)


def test_binary_minus():
    assert parts(Rational(84, 35) - Rational(6, 18)) == (31, 15)


def test_binary_plus():
    assert parts(Rational(84, 35) + Rational(6, 18)) == (41, 15)


def test_multiplication():
    assert parts(Rational(84, 35) * Rational(6, 18)) == (4, 5)


def test_division():
    assert parts(Rational(84, 35) / Rational(6, 18)) == (36, 5)


def test_comparison():
    a = Rational(1, 3)
    b = Rational(6, 18)
    c = Rational(1, 4)

    assert a == a
    assert a <= a
    assert not (a < a)
    assert a >= a
    assert not (a > a)
    assert a.compare(a) == 0

    assert a == b
    assert a <= b
    assert not (a < b)
    assert a >= b
    assert not (a > b)
    assert a.compare(b) == 0

    assert b == a
    assert b <= a
    assert not (b < a)
    assert b >= a
    assert not (b > a)
    assert b.compare(a) == 0

    assert not (a == c)
    assert not (a <= c)
    assert not (a < c)
    assert a >= c
    assert a > c
    assert a.compare(c) == 1

    assert not (c == a)
    assert c <= a
    assert c < a
    assert not (c >= a)
    assert not (c > a)
    assert c.compare(a) == -1


def test_zero_over_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Rational(0, 0)


def test_mixed_with_int():
    assert Rational(1, 2) + 1 == Rational(3, 2)
    assert Rational(4, 2) == 2