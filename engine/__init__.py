"""
engine/
-------
Playback & recording layer.

    from engine import PlaybackController, Pacer, Recorder, compare
"""

from engine.events     import EventType, PlaybackEvent, Reset, SwapEvent, Wait
from engine.controller import PlaybackController, ControllerPhase, STEP_DURATION, INTERMISSION_DURATION
from engine.pacer      import Pacer, PacerState, SPEED_PRESETS
from engine.recorder   import Recorder, RunMetrics, ComparisonResult, compare, replay

__all__ = [
    "EventType",
    "PlaybackEvent",
    "Reset",
    "SwapEvent",
    "Wait",
    "PlaybackController",
    "ControllerPhase",
    "STEP_DURATION",
    "INTERMISSION_DURATION",
    "Pacer",
    "PacerState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "replay",
]
