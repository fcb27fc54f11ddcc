"""Complex numbers in Cartesian form with double-precision parts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

_Operand = Union["Complex", int, float]


@dataclass(frozen=True)
class Complex:
    """A complex number with a real and an imaginary part."""

    real: float = 0.0
    imag: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imag", float(self.imag))

    @staticmethod
    def _coerce(value: _Operand) -> Complex | None:
        if isinstance(value, Complex):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return Complex(value)
        return None

    def abs(self) -> float:
        """Return the magnitude."""
        return math.sqrt(self.norm())

    def norm(self) -> float:
        """Return the squared magnitude."""
        return self.real * self.real + self.imag * self.imag

    def arg(self) -> float:
        """Return the phase angle in radians."""
        return math.atan2(self.imag, self.real)

    def conj(self) -> Complex:
        """Return the complex conjugate."""
        return Complex(self.real, -self.imag)

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imag)

    def __pos__(self) -> Complex:
        return Complex(self.real, self.imag)

    def __add__(self, other: _Operand) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.real + rhs.real, self.imag + rhs.imag)

    def __radd__(self, other: _Operand) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: _Operand) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.real - rhs.real, self.imag - rhs.imag)

    def __rsub__(self, other: _Operand) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: _Operand) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(
            self.real * rhs.real - self.imag * rhs.imag,
            self.real * rhs.imag + self.imag * rhs.real,
        )

    def __rmul__(self, other: _Operand) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: _Operand) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        denominator = rhs.norm()
        return Complex(
            (self.real * rhs.real + self.imag * rhs.imag) / denominator,
            (self.imag * rhs.real - self.real * rhs.imag) / denominator,
        )

    def __rtruediv__(self, other: _Operand) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self