"""
merge.py — Merge Sort
======================
Top-down: split at mid = (lo + hi) // 2, sort left, sort right, merge.

The merge is done IN PLACE by rotation so every snapshot stays a
permutation of the input:

    left head at i, right head at j (runs [i, mid] and [j, hi])
    compare(i, j)
      left ≤ right  → left head is already at the output slot i
      right < left  → rotate arr[j] down into slot i, left run shifts up
    write step (i,)  and  advance the output slot

Whatever remains of either run is already in place once the other run
is exhausted; the drain still emits one write step per position, so
every output slot gets exactly one write step.  Ties take the left
element first, keeping the sort stable.
"""

from typing import Iterator, Sequence

from algorithms.step import Number, SortStep, StepBuilder


def merge_sort(values: Sequence[Number]) -> Iterator[SortStep]:
    sb = StepBuilder(values)
    yield from _sort(sb, 0, len(sb) - 1)


def _sort(sb: StepBuilder, lo: int, hi: int) -> Iterator[SortStep]:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    yield from _sort(sb, lo, mid)
    yield from _sort(sb, mid + 1, hi)
    yield from _merge(sb, lo, mid, hi)


def _merge(sb: StepBuilder, lo: int, mid: int, hi: int) -> Iterator[SortStep]:
    i, j = lo, mid + 1

    while i <= mid and j <= hi:
        yield sb.compare(i, j)
        if sb[i] <= sb[j]:
            yield sb.mark_written(i)
        else:
            yield sb.rotate_into(j, i)
            mid += 1
            j   += 1
        i += 1

    # drain
    for k in range(i, hi + 1):
        yield sb.mark_written(k)
