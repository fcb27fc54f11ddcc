"""Bit-level views of IEEE 754 numbers and a tagged byte stack for them."""

from __future__ import annotations

import math
import struct
import sys
from typing import TextIO

_FLOAT_SIZE = 4
_DOUBLE_SIZE = 8


class PopError(Exception):
    """Raised when the top of the stack does not hold a value of the requested type."""


def _pack(fmt: str, value: float) -> bytes:
    try:
        return struct.pack(fmt, value)
    except OverflowError:
        return struct.pack(fmt, math.copysign(math.inf, value))


def _bits(bits: int, high: int, low: int) -> str:
    return "".join(str((bits >> i) & 1) for i in range(high, low - 1, -1))


def _print_fields(bits: int, sign_bit: int, exponent_low: int, out: TextIO | None) -> None:
    stream = out if out is not None else sys.stdout
    stream.write(f"sign: {(bits >> sign_bit) & 1}\n")
    stream.write(f"exponent: {_bits(bits, sign_bit - 1, exponent_low)}\n")
    stream.write(f"mantissa: {_bits(bits, exponent_low - 1, 0)}\n")


def print_binary_float(value: float, out: TextIO | None = None) -> None:
    """Print sign, exponent and mantissa bits of a single-precision value."""
    (bits,) = struct.unpack("<I", _pack("<f", value))
    _print_fields(bits, 31, 23, out)


def print_binary_double(value: float, out: TextIO | None = None) -> None:
    """Print sign, exponent and mantissa bits of a double-precision value."""
    (bits,) = struct.unpack("<Q", _pack("<d", value))
    _print_fields(bits, 63, 52, out)


class FloatStack:
    """A byte stack holding floats and doubles, each followed by its size byte."""

    def __init__(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def push_float(self, value: float) -> None:
        """Push a single-precision value."""
        self._data += _pack("<f", value)
        self._data.append(_FLOAT_SIZE)

    def push_double(self, value: float) -> None:
        """Push a double-precision value."""
        self._data += _pack("<d", value)
        self._data.append(_DOUBLE_SIZE)

    def _pop(self, size: int, fmt: str) -> float:
        if len(self._data) < size + 1 or self._data[-1] != size:
            raise PopError(f"top of stack is not a {size}-byte value")
        del self._data[-1]
        (value,) = struct.unpack(fmt, bytes(self._data[-size:]))
        del self._data[-size:]
        return value

    def pop_float(self) -> float:
        """Pop a single-precision value, raising PopError if the top is not one."""
        return self._pop(_FLOAT_SIZE, "<f")

    def pop_double(self) -> float:
        """Pop a double-precision value, raising PopError if the top is not one."""
        return self._pop(_DOUBLE_SIZE, "<d")