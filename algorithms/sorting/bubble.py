"""
bubble.py — Bubble Sort
========================
Classic adjacent-pair double loop, no early exit: a compare step before
every comparison, a swap step after every swap.

    [3, 1, 2] → compare(0,1) swap(0,1) compare(1,2) swap(1,2) compare(0,1)
"""

from typing import Iterator, Sequence

from algorithms.step import Number, SortStep, StepBuilder


def bubble_sort(values: Sequence[Number]) -> Iterator[SortStep]:
    sb = StepBuilder(values)
    n  = len(sb)

    for i in range(n - 1):
        for j in range(n - i - 1):
            yield sb.compare(j, j + 1)
            if sb[j] > sb[j + 1]:
                yield sb.swap(j, j + 1)
