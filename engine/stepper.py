"""
stepper.py — Step-by-Step Playback Engine
==========================================
Reference playback controller over a materialised trace.  It owns an
index cursor into the Step list and exposes a play/pause/next/prev/seek/
speed API; the algorithms themselves know nothing about time.

State machine:
    IDLE  →  load()  →  PAUSED           (FINISHED straight away if the trace is empty)
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (last step reached) → FINISHED
    FINISHED → prev / goto / rewind → PAUSED
    any     →  reset()  →  IDLE

Cumulative state ("everything visited so far") is kept in a
VisitAccumulator: a forward move of exactly one step extends it, any
other move rebuilds it from step 0.

Thread safety:
  Steps are immutable, so any number of Steppers may share one trace.
  A single Stepper is NOT thread-safe; drive it from one thread (or
  one event loop).
"""

import time
from enum import Enum
from typing import Callable, Dict, Hashable, List, Optional, Sequence, Tuple

from algorithms.step import Step
from engine.replay import Frame, VisitAccumulator
from grid import Cell


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed levels (seconds per step): 1 = slowest … 10 = fastest
# ---------------------------------------------------------------------------
SPEED_PRESETS: Dict[int, float] = {
    1:  0.100,
    2:  0.080,
    3:  0.060,
    4:  0.045,
    5:  0.030,
    6:  0.020,
    7:  0.015,
    8:  0.010,
    9:  0.005,
    10: 0.001,
}
DEFAULT_SPEED = 5


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The trace being played (never modified).
        current_idx : Index into `steps` that is currently displayed (-1 = nothing).
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(Frame) fired every time the current step changes.
                      The UI hooks its re-render here.
    """

    def __init__(self, on_step: Optional[Callable[[Frame], None]] = None, speed: int = DEFAULT_SPEED):
        self.steps:       Sequence[Step] = ()
        self.current_idx: int            = -1
        self.state:       StepperState   = StepperState.IDLE
        self.speed:       float          = SPEED_PRESETS[DEFAULT_SPEED]
        self.on_step:     Optional[Callable[[Frame], None]] = on_step

        self._acc       = VisitAccumulator()
        self._last_tick: float = 0.0
        self.set_speed(speed)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence[Step]) -> None:
        """Attach a fresh trace (discarding the previous one) and show step 0."""
        self.steps       = tuple(steps)
        self.current_idx = -1
        self._acc.reset()
        if not self.steps:
            self.state = StepperState.FINISHED
            return
        self.state = StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        """Back to IDLE; the caller must call load() again."""
        self.steps       = ()
        self.current_idx = -1
        self.state       = StepperState.IDLE
        self._acc.reset()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        if self.current_idx + 1 >= len(self.steps):
            if self.steps:
                self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        if self.current_idx == len(self.steps) - 1 and self.state == StepperState.PLAYING:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._unfinish()
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index."""
        if not 0 <= idx < len(self.steps):
            return False
        self._unfinish()
        self._goto(idx)
        return True

    def rewind(self) -> None:
        """Jump back to step 0."""
        self.goto_step(0)

    def jump_to_end(self) -> None:
        """Jump to the final step."""
        if self.steps:
            self._goto(len(self.steps) - 1)
            self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self, now: Optional[float] = None) -> None:
        if self.state in (StepperState.FINISHED, StepperState.IDLE):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic() if now is None else now

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> int:
        """
        Call periodically.  While playing, advances as many steps as the
        elapsed time covers at the current speed and returns how many
        were taken (0 when paused, finished or not yet due).
        """
        if self.state != StepperState.PLAYING:
            return 0
        now = time.monotonic() if now is None else now
        taken = 0
        while now - self._last_tick >= self.speed and self.state == StepperState.PLAYING:
            self._last_tick += self.speed
            if not self.next_step():
                break
            taken += 1
        return taken

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, level: int) -> None:
        """Speed level 1 (slowest) … 10 (fastest); out-of-range levels are clamped."""
        level = max(min(int(level), max(SPEED_PRESETS)), min(SPEED_PRESETS))
        self.speed = SPEED_PRESETS[level]

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(0.001, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def visited_so_far(self) -> List[Hashable]:
        return list(self._acc.items)

    @property
    def path_so_far(self) -> Tuple[Cell, ...]:
        return self._acc.path

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def progress(self) -> float:
        """0.0 at step 0, 1.0 on the last step."""
        if len(self.steps) <= 1:
            return 1.0 if self.steps else 0.0
        return max(self.current_idx, 0) / (len(self.steps) - 1)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    def frame(self) -> Optional[Frame]:
        step = self.current_step
        if step is None:
            return None
        return Frame(
            index=self.current_idx,
            total=len(self.steps),
            step=step,
            visited=tuple(self._acc.items),
            path=self._acc.path,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _unfinish(self) -> None:
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED

    def _goto(self, idx: int) -> None:
        if idx == self._acc.consumed:
            self._acc.add(self.steps[idx])
        elif idx != self._acc.consumed - 1:
            self._acc.rebuild(self.steps, idx)
        self.current_idx = idx
        self._notify()

    def _notify(self) -> None:
        if self.on_step:
            frame = self.frame()
            if frame is not None:
                self.on_step(frame)
