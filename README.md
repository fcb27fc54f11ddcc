# sheetlib

A collection of small, self-contained programs and data structures of the
kind met in a systems-programming course:

| Module | What it holds |
| --- | --- |
| `sheetlib.hello` | The classic greeting program (`greeting`, `main`). |
| `sheetlib.bitmath` | Unsigned 32-bit addition built from XOR, AND and shifts (`add`), and multiplication on top of it (`multiply`). |
| `sheetlib.simplevm` | A tiny register machine with integer registers A–D and single-precision registers X, Y (`SimpleVM`, `Opcode`, `run_vm`, `fibonacci_program`). |
| `sheetlib.binary_heap` | A max-heap kept in a plain list (`insert`, `extract`) and a Graphviz dump of it (`print_dot`). |
| `sheetlib.sort_pointers` | Hand-written in-place `quicksort` and `mergesort`. |
| `sheetlib.object_representation` | Sign/exponent/mantissa dumps of floats (`print_binary_float`, `print_binary_double`) and a tagged byte stack of them (`FloatStack`, `PopError`). |
| `sheetlib.complex_number` | A frozen `Complex` number type. |
| `sheetlib.rational` | A `Rational` number type kept in lowest terms. |
| `sheetlib.bitset` | A growable `BitSet`. |
| `sheetlib.hashtable` | A `ChainingHashTable` of integer keys to 64-byte `GenericValue` blobs, with `Entry` items. |
| `sheetlib.osapi`, `sheetlib.tempfs`, `sheetlib.commandline` | File-system helpers, self-removing `TempDirectory` / `TempFile` objects and an interactive shell driving them (`CommandLine`). |

The package has no dependencies beyond the standard library. The file-system
parts use directory file descriptors (`dir_fd`) and need a POSIX system.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

```
sheetlib-hello               # prints "Hello World!"
sheetlib-bitmath             # asks for two numbers and prints their product modulo 2**32
sheetlib-simplevm            # runs a VM program read from standard input
sheetlib-heap FILE           # builds an example heap and writes it as a dot graph to FILE
sheetlib-commandline [DIR]   # interactive shell for temporary files (DIR defaults to /tmp/raii)
```

### The VM

`sheetlib-simplevm` prints `Starting the VM`, reads whitespace-separated
instructions until it sees opcode `0` (halt), the input ends or the input
cannot be read as an instruction, then prints `VM returned A = <value>`.
Unknown opcodes are skipped.

| Opcode | Instruction | Effect |
| --- | --- | --- |
| 0 | halt | stop |
| 10 R n | movi | integer register R = n |
| 11 R f | movf | float register R = f |
| 20 R | loada | A = R |
| 21 R | storea | R = A |
| 22 | swapab | swap A and B |
| 30 R | loadx | X = R |
| 31 R | storex | R = X |
| 32 | swapxy | swap X and Y |
| 40 | itof | X = A |
| 41 | ftoi | A = X, truncated |
| 50 | addi | A = A + B |
| 51 | subi | A = A - B |
| 52 | rsubi | A = B - A |
| 53 | muli | A = A * B |
| 54 | divi | A = A / B, B = A % B (truncating toward zero) |
| 60–63 | addf, subf, mulf, divf | X = X op Y |

Integer results wrap around at 32 bits; float results are rounded to single
precision. Division by zero prints `division by 0` and stops the machine.
`ftoi` on an infinite or NaN value raises `ValueError`.

```
$ printf '10 A 9\n10 B 10\n50\n0\n' | sheetlib-simplevm
Starting the VM
VM returned A = 19
```

`fibonacci_program(n)` returns program text that leaves the nth Fibonacci
number in register A.

### The temp-file shell

`sheetlib-commandline` creates the base directory, prints a `> ` prompt and
reads one command per line:

- `enter` – create a new subdirectory `dirN` in the current directory and make it current
- `current` – show the current directory
- `leave` – leave the current directory and go back to its parent
- `create` – create a new file `fileN` in the current directory
- `list` – list the files created so far, with their indices
- `remove N` – remove the file with index N
- `quit` – remove everything that was created and exit

Anything else prints `wrong command`. A directory that has been left is
removed from disk as soon as no file or directory created inside it remains.
Everything is also removed when the input ends.

## Library use

```python
import io

from sheetlib.simplevm import run_vm
from sheetlib.binary_heap import insert, extract
from sheetlib.rational import Rational
from sheetlib.complex_number import Complex
from sheetlib.bitset import BitSet
from sheetlib.hashtable import ChainingHashTable, GenericValue
from sheetlib.object_representation import FloatStack, PopError

run_vm("10 A 9\n10 B 10\n50\n0", io.StringIO())   # 19

heap = []
for value in (14, 12, 8, 20):
    insert(heap, value)
extract(heap)                                      # 20

r = Rational(84, 35)
r.num(), r.den()                                   # (12, 5)
float(r)                                           # 2.4
Rational(1, 4).compare(Rational(1, 3))             # -1

Complex(3.0, 4.0).abs()                            # 5.0

bits = BitSet(16)
bits[8] = True
bits.cardinality()                                 # 1

stack = FloatStack()
stack.push_double(1.0)
stack.pop_double()                                 # 1.0; pop_float() would raise PopError

table = ChainingHashTable()
table.insert(123, GenericValue.from_int(456))      # the value passed in is invalidated
table[123].as_int()                                # 456
123 in table                                       # True
```

Indexing a `ChainingHashTable` with a missing key inserts an all-zero value,
and `find` returns the `Entry` for a key or `None`.