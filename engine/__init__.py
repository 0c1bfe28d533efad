"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, compare, frame_at
"""

from engine.replay   import Frame, VisitAccumulator, frame_at, path_until, visited_until
from engine.stepper  import Stepper, StepperState, SPEED_PRESETS, DEFAULT_SPEED
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Frame",
    "VisitAccumulator",
    "frame_at",
    "path_until",
    "visited_until",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "DEFAULT_SPEED",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
