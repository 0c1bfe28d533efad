"""
quick.py — Quick Sort (Lomuto partition)
=========================================
Pivot = last element of the range.  Per partition:

    • compare step for every scan position j against the pivot
    • swap step whenever arr[j] < pivot (also when i == j)
    • swap step for the final pivot placement

Recursion goes left partition first.  An explicit stack replaces Python
recursion so sorted input (worst case, depth n) cannot hit the limit.
"""

from typing import Iterator, List, Sequence, Tuple

from algorithms.step import Number, SortStep, StepBuilder


def quick_sort(values: Sequence[Number]) -> Iterator[SortStep]:
    sb = StepBuilder(values)
    pending: List[Tuple[int, int]] = [(0, len(sb) - 1)]

    while pending:
        low, high = pending.pop()
        if low >= high:
            continue

        pivot = sb[high]
        i = low - 1
        for j in range(low, high):
            yield sb.compare(j, high)
            if sb[j] < pivot:
                i += 1
                yield sb.swap(i, j)
        yield sb.swap(i + 1, high)
        p = i + 1

        # right pushed first so the left partition is handled next
        pending.append((p + 1, high))
        pending.append((low, p - 1))
