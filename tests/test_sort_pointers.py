import random

import pytest

from sheetlib.sort_pointers import mergesort, quicksort


def _generate(n):
    data = list(range(n))
    random.Random(42).shuffle(data)
    return data


class _Box:
    def __init__(self, value):
        self.value = value

    def __lt__(self, other):
        return self.value < other.value


@pytest.mark.parametrize("sort", [quicksort, mergesort])
@pytest.mark.parametrize("n", [1, 25, 1000])
def test_sorts_shuffled_range(sort, n):
    data = _generate(n)
    sort(data)
    assert data == list(range(n))


@pytest.mark.parametrize("sort", [quicksort, mergesort])
def test_sorts_references_not_values(sort):
    boxes = [_Box(v) for v in _generate(50)]
    originals = {id(b) for b in boxes}
    sort(boxes)
    assert [b.value for b in boxes] == list(range(50))
    assert {id(b) for b in boxes} == originals


@pytest.mark.parametrize("sort", [quicksort, mergesort])
def test_empty_and_duplicates(sort):
    empty = []
    sort(empty)
    assert empty == []
    values = [3, 1, 3, 2, 1, 3]
    sort(values)
    assert values == [1, 1, 2, 3, 3, 3]


@pytest.mark.parametrize("sort", [quicksort, mergesort])
def test_already_sorted_large(sort):
    data = list(range(5000))
    sort(data)
    assert data == list(range(5000))