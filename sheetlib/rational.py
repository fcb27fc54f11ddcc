"""Rational numbers kept in reduced form."""

from __future__ import annotations

from typing import Union

_Operand = Union["Rational", int]


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _gcd(a: int, b: int) -> int:
    # Euclid with remainders that truncate toward zero, so signs carry through.
    while b != 0:
        a, b = b, a - b * _trunc_div(a, b)
    return a


class Rational:
    """A fraction numerator/denominator, reduced by their greatest common divisor."""

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        common = _gcd(numerator, denominator)
        if common == 0:
            raise ZeroDivisionError("0/0 is not a rational number")
        self._num = _trunc_div(numerator, common)
        self._den = _trunc_div(denominator, common)

    @staticmethod
    def _coerce(value: _Operand) -> Rational | None:
        if isinstance(value, Rational):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Rational(value)
        return None

    def num(self) -> int:
        """Return the numerator."""
        return self._num

    def den(self) -> int:
        """Return the denominator."""
        return self._den

    def inv(self) -> Rational:
        """Return the reciprocal."""
        return Rational(self._den, self._num)

    def compare(self, other: _Operand) -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater than other."""
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"cannot compare Rational with {type(other).__name__}")
        if self < rhs:
            return -1
        if self > rhs:
            return 1
        return 0

    def __neg__(self) -> Rational:
        return Rational(-self._num, self._den)

    def __pos__(self) -> Rational:
        return self

    def __add__(self, other: _Operand) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._den + rhs._num * self._den, self._den * rhs._den)

    def __radd__(self, other: _Operand) -> Rational:
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs + self

    def __sub__(self, other: _Operand) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._den - rhs._num * self._den, self._den * rhs._den)

    def __rsub__(self, other: _Operand) -> Rational:
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs - self

    def __mul__(self, other: _Operand) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._num, self._den * rhs._den)

    def __rmul__(self, other: _Operand) -> Rational:
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs * self

    def __truediv__(self, other: _Operand) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._den, self._den * rhs._num)

    def __rtruediv__(self, other: _Operand) -> Rational:
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs / self

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)  # type: ignore[arg-type]
        if rhs is None:
            return NotImplemented
        return self._num == rhs._num and self._den == rhs._den

    def __hash__(self) -> int:
        return hash((self._num, self._den))

    def _cross(self, other: _Operand) -> tuple[int, int] | None:
        rhs = self._coerce(other)
        if rhs is None:
            return None
        return self._num * rhs._den, rhs._num * self._den

    def __lt__(self, other: _Operand) -> bool:
        cross = self._cross(other)
        return NotImplemented if cross is None else cross[0] < cross[1]

    def __le__(self, other: _Operand) -> bool:
        cross = self._cross(other)
        return NotImplemented if cross is None else cross[0] <= cross[1]

    def __gt__(self, other: _Operand) -> bool:
        cross = self._cross(other)
        return NotImplemented if cross is None else cross[0] > cross[1]

    def __ge__(self, other: _Operand) -> bool:
        cross = self._cross(other)
        return NotImplemented if cross is None else cross[0] >= cross[1]

    def __float__(self) -> float:
        return float(self._num) / float(self._den)

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"