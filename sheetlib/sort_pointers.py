"""In-place quicksort and mergesort over a list of references."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quicksort(items: MutableSequence[Any]) -> None:
    """Sort the sequence in place with a Lomuto-partition quicksort."""
    pending = [(0, len(items))]
    while pending:
        begin, end = pending.pop()
        if end - begin > 1:
            split = _partition(items, begin, end - 1)
            pending.append((begin, split))
            pending.append((split + 1, end))


def _merge(items: MutableSequence[Any], begin: int, mid: int, end: int) -> None:
    left = list(items[begin:mid])
    right = list(items[mid:end])
    i = j = 0
    k = begin
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            items[k] = left[i]
            i += 1
        else:
            items[k] = right[j]
            j += 1
        k += 1
    for value in left[i:] + right[j:]:
        items[k] = value
        k += 1


def _mergesort(items: MutableSequence[Any], begin: int, end: int) -> None:
    if end - begin > 1:
        mid = begin + (end - begin) // 2
        _mergesort(items, begin, mid)
        _mergesort(items, mid, end)
        _merge(items, begin, mid, end)


def mergesort(items: MutableSequence[Any]) -> None:
    """Sort the sequence in place with a top-down mergesort."""
    _mergesort(items, 0, len(items))