"""A binary max-heap stored in a plain list, with Graphviz output."""

from __future__ import annotations

import sys
from collections.abc import Iterator, MutableSequence
from typing import TextIO

_EXAMPLE_VALUES = (35, 33, 42, 10, 14, 19, 27, 44, 26, 31)


def _parent(index: int) -> int:
    return (index - 1) // 2


def _sift_up(heap: MutableSequence[int], index: int) -> None:
    while index > 0 and heap[index] > heap[_parent(index)]:
        parent = _parent(index)
        heap[index], heap[parent] = heap[parent], heap[index]
        index = parent


def _sift_down(heap: MutableSequence[int], index: int) -> None:
    size = len(heap)
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and heap[child] > heap[largest]:
                largest = child
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def insert(heap: MutableSequence[int], value: int) -> None:
    """Insert a value into the heap."""
    heap.append(value)
    _sift_up(heap, len(heap) - 1)


def extract(heap: MutableSequence[int]) -> int:
    """Remove and return the largest value of the heap."""
    if not heap:
        raise IndexError("extract from an empty heap")
    root = heap[0]
    heap[0], heap[-1] = heap[-1], heap[0]
    heap.pop()
    _sift_down(heap, 0)
    return root


def _edges(size: int, index: int = 0) -> Iterator[tuple[int, int]]:
    for child in (2 * index + 1, 2 * index + 2):
        if child < size:
            yield index, child
            yield from _edges(size, child)


def print_dot(out: TextIO, heap: MutableSequence[int]) -> None:
    """Write a Graphviz digraph describing the heap to ``out``."""
    out.write("digraph {\n")
    for index, value in enumerate(heap):
        out.write(f'\t{index} [label="{value}"];\n')
    for parent, child in _edges(len(heap)):
        out.write(f"\t{parent} -> {child};\n")
    out.write("}\n")


def main(argv: list[str] | None = None) -> int:
    """Build an example heap and write it as a dot file to the given path."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("USAGE: binary_heap file", file=sys.stderr)
        return 1
    heap: list[int] = []
    for value in _EXAMPLE_VALUES:
        insert(heap, value)
    with open(args[0], "w", encoding="utf-8") as out:
        print_dot(out, heap)
    return 0


if __name__ == "__main__":
    sys.exit(main())