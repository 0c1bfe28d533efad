"""
heap.py — Heap Sort
====================
1. Build a max-heap bottom-up: sift down from the last parent to the root.
2. Repeatedly swap the root with the last unsorted slot and re-sift the
   shrunken heap from the root.

Every sift-down examination yields a compare step over the parent and
whichever of its two children are inside the heap (so 1 to 3 indices);
every swap (sift, or root extraction) yields a swap step.
"""

from typing import Iterator, Sequence

from algorithms.step import Number, SortStep, StepBuilder


def heap_sort(values: Sequence[Number]) -> Iterator[SortStep]:
    sb = StepBuilder(values)
    n  = len(sb)

    for i in range(n // 2 - 1, -1, -1):
        yield from _sift_down(sb, n, i)

    for end in range(n - 1, 0, -1):
        yield sb.swap(0, end)
        yield from _sift_down(sb, end, 0)


def _sift_down(sb: StepBuilder, size: int, i: int) -> Iterator[SortStep]:
    while True:
        left, right = 2 * i + 1, 2 * i + 2
        yield sb.compare(*(k for k in (i, left, right) if k < size))

        largest = i
        if left < size and sb[left] > sb[largest]:
            largest = left
        if right < size and sb[right] > sb[largest]:
            largest = right

        if largest == i:
            return
        yield sb.swap(i, largest)
        i = largest
