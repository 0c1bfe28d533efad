"""Tests for the sorting family: exact traces and snapshot invariants."""

import math
import random

import pytest

from algorithms.registry import UnknownAlgorithmError
from algorithms.sorting import REGISTRY, SortingAlgorithm, get_algorithm, run, validate_values
from algorithms.step import SortStep, StepBuilder

ALL = [a.value for a in SortingAlgorithm]


def _ops(steps):
    """Compact form: ("c", indices, array) / ("s", indices, array)."""
    return [
        ("c" if s.is_compare else "s",
         s.comparing_indices if s.is_compare else s.swapped_indices,
         list(s.array))
        for s in steps
    ]


# ---------------------------------------------------------------------------
# Exact traces on [3, 1, 2]
# ---------------------------------------------------------------------------
def test_bubble_sort_three_elements():
    assert _ops(run([3, 1, 2], "bubble")) == [
        ("c", (0, 1), [3, 1, 2]),
        ("s", (0, 1), [1, 3, 2]),
        ("c", (1, 2), [1, 3, 2]),
        ("s", (1, 2), [1, 2, 3]),
        ("c", (0, 1), [1, 2, 3]),
    ]


def test_quick_sort_three_elements():
    assert _ops(run([3, 1, 2], "quick")) == [
        ("c", (0, 2), [3, 1, 2]),
        ("c", (1, 2), [3, 1, 2]),
        ("s", (0, 1), [1, 3, 2]),
        ("s", (1, 2), [1, 2, 3]),
    ]


def test_merge_sort_three_elements():
    assert _ops(run([3, 1, 2], "merge")) == [
        ("c", (0, 1), [3, 1, 2]),
        ("s", (0,),   [1, 3, 2]),
        ("s", (1,),   [1, 3, 2]),
        ("c", (0, 2), [1, 3, 2]),
        ("s", (0,),   [1, 3, 2]),
        ("c", (1, 2), [1, 3, 2]),
        ("s", (1,),   [1, 2, 3]),
        ("s", (2,),   [1, 2, 3]),
    ]


def test_heap_sort_three_elements():
    assert _ops(run([3, 1, 2], "heap")) == [
        ("c", (0, 1, 2), [3, 1, 2]),
        ("s", (0, 2),    [2, 1, 3]),
        ("c", (0, 1),    [2, 1, 3]),
        ("s", (0, 1),    [1, 2, 3]),
        ("c", (0,),      [1, 2, 3]),
    ]


# ---------------------------------------------------------------------------
# Invariants over many inputs
# ---------------------------------------------------------------------------
def _inputs():
    rng = random.Random(7)
    cases = [
        [2, 1],
        [1, 2, 3, 4, 5],
        [5, 4, 3, 2, 1],
        [4, 4, 4, 4],
        [0, -3, 7.5, -3, 2, 0.25],
    ]
    for n in (6, 11, 24):
        cases.append([rng.randint(-20, 20) for _ in range(n)])
    return cases


@pytest.mark.parametrize("name", ALL)
@pytest.mark.parametrize("values", _inputs())
def test_final_array_is_sorted_and_every_snapshot_is_a_permutation(name, values):
    steps = run(values, name)
    assert steps
    assert list(steps[-1].array) == sorted(values)
    expected = sorted(values)
    for s in steps:
        assert sorted(s.array) == expected


@pytest.mark.parametrize("name", ALL)
@pytest.mark.parametrize("values", _inputs())
def test_each_step_is_compare_xor_swap(name, values):
    for s in run(values, name):
        assert s.is_compare != s.is_swap
        assert all(0 <= i < len(values) for i in s.comparing_indices + s.swapped_indices)


@pytest.mark.parametrize("name", ALL)
@pytest.mark.parametrize("values", [[], [42]])
def test_trivial_inputs_give_empty_trace(name, values):
    assert run(values, name) == []


@pytest.mark.parametrize("name", ALL)
def test_input_is_not_mutated(name):
    values = [9, 3, 7, 1]
    run(values, name)
    assert values == [9, 3, 7, 1]


@pytest.mark.parametrize("name", ALL)
def test_snapshots_are_independent_copies(name):
    steps = run([4, 3, 2, 1], name)
    first = steps[0].array
    assert isinstance(first, tuple)
    assert first == (4, 3, 2, 1)


def test_bubble_swaps_follow_their_compare():
    steps = run([5, 1, 4, 2, 8], "bubble")
    for prev, cur in zip(steps, steps[1:]):
        if cur.is_swap:
            assert prev.is_compare
            assert prev.comparing_indices == cur.swapped_indices


def test_quick_sort_compares_against_pivot():
    for s in run([5, 1, 4, 2, 8, 3], "quick"):
        if s.is_compare:
            j, pivot = s.comparing_indices
            assert j < pivot


def test_merge_sort_writes_are_single_index():
    for s in run([5, 1, 4, 2, 8, 3, 7], "merge"):
        if s.is_swap:
            assert len(s.swapped_indices) == 1


def test_merge_sort_writes_every_slot_per_merge():
    steps = run([2, 1], "merge")
    assert [s.swapped_indices for s in steps if s.is_swap] == [(0,), (1,)]


def test_heap_sort_compare_covers_parent_and_children():
    for s in run([5, 1, 4, 2, 8, 3, 7], "heap"):
        if s.is_compare:
            parent, *children = s.comparing_indices
            assert all(k in (2 * parent + 1, 2 * parent + 2) for k in children)
            assert len(children) <= 2


def test_heap_sort_builds_max_heap_first():
    values = [1, 5, 3, 9, 2, 8]
    steps = run(values, "heap")
    # the first root-extraction swap moves the maximum to the end
    extraction = next(s for s in steps if s.swapped_indices == (0, len(values) - 1))
    assert extraction.array[-1] == max(values)


# ---------------------------------------------------------------------------
# StepBuilder
# ---------------------------------------------------------------------------
def test_step_builder_copies_input():
    values = [3, 2, 1]
    sb = StepBuilder(values)
    sb.swap(0, 2)
    assert values == [3, 2, 1]
    assert sb.result() == [1, 2, 3]


def test_step_builder_rotate():
    sb = StepBuilder([1, 5, 6, 2])
    step = sb.rotate_into(3, 1)
    assert step.array == (1, 2, 5, 6)
    assert step.swapped_indices == (1,)


def test_sort_step_to_dict():
    step = SortStep(array=(1, 2), comparing_indices=(0, 1))
    assert step.to_dict() == {"array": [1, 2], "comparing_indices": [0, 1], "swapped_indices": []}


# ---------------------------------------------------------------------------
# Validation & dispatch
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("bad", [[1, "2"], [True, 0], [1, None], [[1], 2]])
def test_non_numeric_values_rejected(bad):
    with pytest.raises(ValueError):
        validate_values(bad)


@pytest.mark.parametrize("bad", [[1, math.nan], [math.inf, 2], [3, -math.inf]])
def test_non_finite_values_rejected(bad):
    with pytest.raises(ValueError, match="not finite"):
        validate_values(bad)


def test_validate_values_accepts_mixed_numbers():
    assert validate_values((1, 2.5, -3)) == [1, 2.5, -3]


def test_registry_is_exhaustive():
    assert set(REGISTRY) == set(SortingAlgorithm)
    assert [info.key for info in REGISTRY.values()] == ["bubble", "quick", "merge", "heap"]


def test_name_resolution():
    assert get_algorithm("HEAP") is REGISTRY[SortingAlgorithm.HEAP]


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError):
        run([2, 1], "bogo")
