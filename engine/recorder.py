"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps), then computes the
analytics metrics the presentation layer needs for its Analytics panel
and Comparison Mode.

Usage:
    rec = Recorder()
    rec.start("pathfinding", grid, "dijkstra")
    rec.run_to_completion()          # exhausts the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    The caller holds two Recorders (one per algorithm), runs both to
    completion on the SAME input, then calls compare(rec1, rec2) →
    ComparisonResult.
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

from algorithms import Family, build_input, get_algorithm, resolve_family
from algorithms.registry import AlgoInfo, UnknownAlgorithmError
from algorithms.step import GraphStep, PathStep, SortStep, Step
from engine.replay import visited_until
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    family:           str   = ""
    algorithm:        str   = ""
    label:            str   = ""
    total_steps:      int   = 0          # number of Steps yielded
    wall_time_ms:     float = 0.0        # wall-clock time to run to completion
    memory_bytes:     int   = 0          # approx size of the step buffer
    # pathfinding / graph
    visited_count:    int   = 0          # distinct cells or node ids touched
    # pathfinding
    path_found:       bool  = False
    path_length:      int   = 0          # number of moves on the final path
    # sorting
    comparisons:      int   = 0
    swaps:            int   = 0
    # graph
    mst_weight:       Optional[float] = None
    mst_edges:        int   = 0
    distance_updates: int   = 0          # Floyd–Warshall relaxations

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived: the winning label, or "tie"
    winner_visited: str = ""   # fewer cells / nodes touched
    winner_steps:   str = ""   # shorter trace
    winner_result:  str = ""   # shorter path, lighter MST or fewer swaps

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left":           self.left.to_dict(),
            "right":          self.right.to_dict(),
            "winner_visited": self.winner_visited,
            "winner_steps":   self.winner_steps,
            "winner_result":  self.winner_result,
        }


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps       : Full list of Steps from the run.
        metrics     : Computed RunMetrics (available after run_to_completion).
        stepper     : A Stepper loaded with the recorded trace, for playback.
    """

    def __init__(self):
        self.steps:     List[Step]           = []
        self.metrics:   Optional[RunMetrics] = None
        self.stepper:   Optional[Stepper]    = None

        self._family:     Optional[Family]   = None
        self._algo_info:  Optional[AlgoInfo] = None
        self._input:      Any                = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, family: Union[str, Family], data: Any, algorithm: str) -> None:
        """Resolve the algorithm and validate the input for this run."""
        fam  = resolve_family(family)
        info = get_algorithm(fam, algorithm)
        if info is None:
            raise UnknownAlgorithmError(f"Unknown {fam.value} algorithm: {algorithm!r}")

        self._family     = fam
        self._algo_info  = info
        self._input      = build_input(fam, data)
        self.steps       = []
        self.metrics     = None
        self.stepper     = None

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self._algo_info is None:
            raise RuntimeError("Call start() first.")

        started = time.perf_counter()
        self.steps = list(self._algo_info.fn(self._input))
        wall_ms = (time.perf_counter() - started) * 1000

        self.stepper = Stepper()
        self.stepper.load(self.steps)

        self.metrics = self._compute_metrics(wall_ms)
        logger.debug(
            "recorded %s/%s: %d step(s) in %.2f ms",
            self._family.value, self._algo_info.key, len(self.steps), wall_ms,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        data = self._input
        if hasattr(data, "to_dict"):
            data = data.to_dict()
        return {
            "family":    self._family.value if self._family else "",
            "algorithm": self._algo_info.key if self._algo_info else "",
            "input":     data,
            "metrics":   self.metrics.to_dict() if self.metrics else {},
            "steps":     [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info  = self._algo_info
        steps = self.steps
        last  = steps[-1] if steps else None

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(steps)
        for s in steps:
            mem += sys.getsizeof(s)

        metrics = RunMetrics(
            family=self._family.value,
            algorithm=info.key,
            label=info.label,
            total_steps=len(steps),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
        )

        if self._family is Family.PATHFINDING:
            metrics.visited_count = len(visited_until(steps, len(steps) - 1)) if steps else 0
            path = next((s.path for s in reversed(steps) if isinstance(s, PathStep) and s.path), ())
            metrics.path_found  = bool(path)
            metrics.path_length = len(path) - 1 if path else 0

        elif self._family is Family.SORTING:
            metrics.comparisons = sum(1 for s in steps if isinstance(s, SortStep) and s.is_compare)
            metrics.swaps       = sum(1 for s in steps if isinstance(s, SortStep) and s.is_swap)

        else:
            metrics.visited_count    = len(visited_until(steps, len(steps) - 1)) if steps else 0
            metrics.distance_updates = sum(1 for s in steps if isinstance(s, GraphStep) and s.distances is not None)
            if isinstance(last, GraphStep) and last.mst is not None:
                metrics.mst_weight = last.mst_weight
                metrics.mst_edges  = len(last.mst)

        return metrics


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def _winner(l_val, r_val, l_key: str, r_key: str) -> str:
    """Lower is better; None counts as worse than any value."""
    if l_val == r_val:
        return "tie"
    if l_val is None:
        return r_key
    if r_val is None:
        return l_key
    return l_key if l_val < r_val else r_key


def _result_value(m: RunMetrics):
    if m.family == Family.PATHFINDING.value:
        return m.path_length if m.path_found else None
    if m.family == Family.SORTING.value:
        return m.swaps
    return m.mst_weight


def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()
    if l.family != r.family:
        raise ValueError(f"cannot compare a {l.family or 'missing'} run with a {r.family or 'missing'} run")

    # identical labels (same algorithm twice) would make the winner ambiguous
    l_key, r_key = (l.label, r.label) if l.label != r.label else ("left", "right")

    return ComparisonResult(
        left=l,
        right=r,
        winner_visited=_winner(l.visited_count, r.visited_count, l_key, r_key),
        winner_steps  =_winner(l.total_steps, r.total_steps, l_key, r_key),
        winner_result =_winner(_result_value(l), _result_value(r), l_key, r_key),
    )
