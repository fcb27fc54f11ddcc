"""A growable sequence of bits."""

from __future__ import annotations

from collections.abc import Iterator


class BitSet:
    """A sequence of boolean values that can grow at the end."""

    __slots__ = ("_bits",)

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._bits = bytearray(size)

    def __len__(self) -> int:
        return len(self._bits)

    def cardinality(self) -> int:
        """Return the number of set bits."""
        return sum(self._bits)

    def append(self, value: bool) -> None:
        """Add a bit at the end."""
        self._bits.append(1 if value else 0)

    def front(self) -> bool:
        """Return the first bit."""
        if not self._bits:
            raise IndexError("front of an empty bitset")
        return bool(self._bits[0])

    def back(self) -> bool:
        """Return the last bit."""
        if not self._bits:
            raise IndexError("back of an empty bitset")
        return bool(self._bits[-1])

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._bits):
            raise IndexError(f"bit index {index} out of range")

    def __getitem__(self, index: int) -> bool:
        self._check(index)
        return bool(self._bits[index])

    def __setitem__(self, index: int, value: bool) -> None:
        self._check(index)
        self._bits[index] = 1 if value else 0

    def __iter__(self) -> Iterator[bool]:
        return (bool(bit) for bit in self._bits)

    def __reversed__(self) -> Iterator[bool]:
        return (bool(bit) for bit in reversed(self._bits))

    def __repr__(self) -> str:
        return f"BitSet({''.join(str(bit) for bit in self._bits)!r})"