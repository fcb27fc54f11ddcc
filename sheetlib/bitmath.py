"""Unsigned 32-bit addition built from bit operations, and multiplication on top of it."""

from __future__ import annotations

import sys
from collections.abc import Iterator

_MASK = 0xFFFFFFFF


def add(a: int, b: int) -> int:
    """Add two unsigned 32-bit numbers using only XOR, AND and shifts."""
    carry_free = (a ^ b) & _MASK
    carry = a & b & _MASK
    while carry:
        carry = (carry << 1) & _MASK
        carry_free, carry = carry_free ^ carry, carry_free & carry
    return carry_free


def multiply(a: int, b: int) -> int:
    """Multiply two unsigned 32-bit numbers as repeated addition, modulo 2**32."""
    a &= _MASK
    b &= _MASK
    result = 0
    # Doubling gives the same sum as adding ``a`` b times.
    while b:
        if b & 1:
            result = add(result, a)
        a = add(a, a)
        b >>= 1
    return result


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read two numbers from standard input and print their product."""
    tokens = _tokens(sys.stdin)
    numbers = []
    for prompt in ("Input first number: ", "Input second number: "):
        print(prompt, end="", flush=True)
        try:
            numbers.append(int(next(tokens)) & _MASK)
        except (StopIteration, ValueError):
            print("invalid input", file=sys.stderr)
            return 1
    print(multiply(*numbers))
    return 0


if __name__ == "__main__":
    sys.exit(main())