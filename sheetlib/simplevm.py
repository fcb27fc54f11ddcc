"""A tiny register machine that reads its program as whitespace-separated text."""

from __future__ import annotations

import math
import re
import struct
import sys
from enum import IntEnum
from typing import TextIO

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

INT_REGISTERS = "ABCD"
FLOAT_REGISTERS = "XY"

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class Opcode(IntEnum):
    """Instruction codes understood by the machine."""

    HALT = 0
    MOVI = 10
    MOVF = 11
    LOADA = 20
    STOREA = 21
    SWAPAB = 22
    LOADX = 30
    STOREX = 31
    SWAPXY = 32
    ITOF = 40
    FTOI = 41
    ADDI = 50
    SUBI = 51
    RSUBI = 52
    MULI = 53
    DIVI = 54
    ADDF = 60
    SUBF = 61
    MULF = 62
    DIVF = 63


class _EndOfInput(Exception):
    """Raised when the program text is exhausted or malformed."""


def _wrap32(value: int) -> int:
    return (value - INT32_MIN) % 2**32 + INT32_MIN


def _float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


class _Reader:
    """Reads characters and numbers from program text the way a stream would."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def read_char(self) -> str:
        self._skip_whitespace()
        if self._pos >= len(self._text):
            raise _EndOfInput
        char = self._text[self._pos]
        self._pos += 1
        return char

    def _match(self, pattern: re.Pattern[str]) -> str:
        self._skip_whitespace()
        match = pattern.match(self._text, self._pos)
        if match is None:
            raise _EndOfInput
        self._pos = match.end()
        return match.group()

    def read_int(self) -> int:
        value = int(self._match(_INT_PATTERN))
        if not INT32_MIN <= value <= INT32_MAX:
            raise _EndOfInput
        return value

    def read_float(self) -> float:
        return _float32(float(self._match(_FLOAT_PATTERN)))


class SimpleVM:
    """Four integer registers A-D and two single-precision registers X and Y."""

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output
        self.registers: dict[str, int] = {}
        self.float_registers: dict[str, float] = {}
        self._reset()

    def _reset(self) -> None:
        self.registers = dict.fromkeys(INT_REGISTERS, 0)
        self.float_registers = dict.fromkeys(FLOAT_REGISTERS, 0.0)

    def _report(self, message: str) -> None:
        print(message, file=self._output if self._output is not None else sys.stdout)

    def run(self, program: str | TextIO) -> int:
        """Execute the program and return the value of register A."""
        text = program if isinstance(program, str) else program.read()
        reader = _Reader(text)
        self._reset()
        regs = self.registers
        fregs = self.float_registers
        try:
            while True:
                code = reader.read_int()
                try:
                    op = Opcode(code)
                except ValueError:
                    continue
                match op:
                    case Opcode.HALT:
                        break
                    case Opcode.MOVI:
                        name = reader.read_char()
                        value = reader.read_int()
                        if name in regs:
                            regs[name] = value
                    case Opcode.MOVF:
                        name = reader.read_char()
                        fvalue = reader.read_float()
                        if name in fregs:
                            fregs[name] = fvalue
                    case Opcode.LOADA:
                        regs["A"] = regs.get(reader.read_char(), 0)
                    case Opcode.STOREA:
                        name = reader.read_char()
                        if name in regs:
                            regs[name] = regs["A"]
                    case Opcode.SWAPAB:
                        regs["A"], regs["B"] = regs["B"], regs["A"]
                    case Opcode.LOADX:
                        fregs["X"] = fregs.get(reader.read_char(), 0.0)
                    case Opcode.STOREX:
                        name = reader.read_char()
                        if name in fregs:
                            fregs[name] = fregs["X"]
                    case Opcode.SWAPXY:
                        fregs["X"], fregs["Y"] = fregs["Y"], fregs["X"]
                    case Opcode.ITOF:
                        fregs["X"] = _float32(float(regs["A"]))
                    case Opcode.FTOI:
                        x = fregs["X"]
                        if not math.isfinite(x):
                            raise ValueError(f"cannot convert {x} to an integer")
                        regs["A"] = _wrap32(int(x))
                    case Opcode.ADDI:
                        regs["A"] = _wrap32(regs["A"] + regs["B"])
                    case Opcode.SUBI:
                        regs["A"] = _wrap32(regs["A"] - regs["B"])
                    case Opcode.RSUBI:
                        regs["A"] = _wrap32(regs["B"] - regs["A"])
                    case Opcode.MULI:
                        regs["A"] = _wrap32(regs["A"] * regs["B"])
                    case Opcode.DIVI:
                        if regs["B"] == 0:
                            self._report("division by 0")
                            break
                        quotient, remainder = _truncating_divmod(regs["A"], regs["B"])
                        regs["A"] = _wrap32(quotient)
                        regs["B"] = _wrap32(remainder)
                    case Opcode.ADDF:
                        fregs["X"] = _float32(fregs["X"] + fregs["Y"])
                    case Opcode.SUBF:
                        fregs["X"] = _float32(fregs["X"] - fregs["Y"])
                    case Opcode.MULF:
                        fregs["X"] = _float32(fregs["X"] * fregs["Y"])
                    case Opcode.DIVF:
                        if fregs["Y"] == 0.0:
                            self._report("division by 0")
                            break
                        fregs["X"] = _float32(fregs["X"] / fregs["Y"])
        except _EndOfInput:
            pass
        return regs["A"]


def run_vm(program: str | TextIO, output: TextIO | None = None) -> int:
    """Run a program on a fresh machine and return register A."""
    return SimpleVM(output).run(program)


def fibonacci_program(n: int) -> str:
    """Return a program that leaves the nth Fibonacci number in register A."""
    lines = [f"{Opcode.MOVI.value} A 0", f"{Opcode.MOVI.value} B 1"]
    for _ in range(n):
        lines.append(str(Opcode.ADDI.value))
        lines.append(str(Opcode.SWAPAB.value))
    lines.append(str(Opcode.HALT.value))
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the program read from standard input."""
    print("Starting the VM", flush=True)
    result = run_vm(sys.stdin)
    print(f"VM returned A = {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())