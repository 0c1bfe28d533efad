"""
algorithms/sorting — Array sorting family
==========================================

    from algorithms.sorting import run

    steps = run([5, 2, 9, 1], "merge")
    steps[-1].array   # → (1, 2, 5, 9)

Generators take  (values) → Iterator[SortStep]  and work on a private
copy of `values`.  Zero- and one-element inputs produce an empty trace.
"""

import logging
import math
from enum import Enum
from numbers import Real
from typing import Dict, List, Sequence, Union

from algorithms.registry import AlgoInfo, check_exhaustive, resolve
from algorithms.sorting.bubble import bubble_sort
from algorithms.sorting.heap import heap_sort
from algorithms.sorting.merge import merge_sort
from algorithms.sorting.quick import quick_sort
from algorithms.step import Number, SortStep

logger = logging.getLogger(__name__)

FAMILY = "sorting"


class SortingAlgorithm(str, Enum):
    BUBBLE = "bubble"
    QUICK  = "quick"
    MERGE  = "merge"
    HEAP   = "heap"


REGISTRY: Dict[SortingAlgorithm, AlgoInfo] = {

    SortingAlgorithm.BUBBLE: AlgoInfo(
        key="bubble", family=FAMILY, label="Bubble Sort", fn=bubble_sort,
        tags=["comparison", "in-place", "stable"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent out-of-order pairs.",
    ),

    SortingAlgorithm.QUICK: AlgoInfo(
        key="quick", family=FAMILY, label="Quick Sort", fn=quick_sort,
        tags=["comparison", "in-place", "divide-and-conquer"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Lomuto partition around the last element, left side first.",
    ),

    SortingAlgorithm.MERGE: AlgoInfo(
        key="merge", family=FAMILY, label="Merge Sort", fn=merge_sort,
        tags=["comparison", "stable", "divide-and-conquer"],
        complexity_time="O(n log n) comparisons", complexity_space="O(log n)",
        description="Top-down split, then merge the sorted halves.",
    ),

    SortingAlgorithm.HEAP: AlgoInfo(
        key="heap", family=FAMILY, label="Heap Sort", fn=heap_sort,
        tags=["comparison", "in-place"],
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a max-heap, then moves the root to the end one element at a time.",
    ),
}

check_exhaustive(SortingAlgorithm, REGISTRY)


def get_algorithm(name: Union[str, SortingAlgorithm]) -> AlgoInfo:
    return REGISTRY[resolve(SortingAlgorithm, name)]


def validate_values(values: Sequence[Number]) -> List[Number]:
    """Reject anything that is not a flat sequence of real numbers."""
    out = list(values)
    for i, v in enumerate(out):
        if isinstance(v, bool) or not isinstance(v, Real):
            raise ValueError(f"value at index {i} is not a number: {v!r}")
        if not math.isfinite(v):
            raise ValueError(f"value at index {i} is not finite: {v!r}")
    return out


def run(values: Sequence[Number], algorithm: Union[str, SortingAlgorithm]) -> List[SortStep]:
    """Sort a copy of `values` and return the full trace."""
    info  = get_algorithm(algorithm)
    steps = list(info.fn(validate_values(values)))
    logger.debug("sorting %s on %d value(s): %d step(s)", info.key, len(values), len(steps))
    return steps


__all__ = [
    "SortingAlgorithm",
    "REGISTRY",
    "get_algorithm",
    "validate_values",
    "run",
]
