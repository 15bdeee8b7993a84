"""
pacer.py — Wall-Clock Playback
===============================
The controller only *describes* timing.  The Pacer turns that into
real playback for a renderer that polls on its own frame clock:

    pacer = Pacer(controller)
    # every frame:
    event = pacer.tick()
    if event is not None:
        renderer.apply(event)

Each Wait pushes the deadline forward; poll() returns at most one
Reset / SwapEvent per call and None while the deadline is pending.

State machine:
    PLAYING  →  pause()  →  PAUSED
    PAUSED   →  play()   →  PLAYING   (paused time is skipped)
"""

import time
from enum import Enum
from typing import Optional

from engine.controller import PlaybackController
from engine.events import PlaybackEvent, Wait


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PacerState(Enum):
    PLAYING = "playing"
    PAUSED  = "paused"


# ---------------------------------------------------------------------------
# Speed presets (multiplier on every Wait)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   2.0,    # teaching mode
    "normal": 1.0,
    "fast":   0.5,
    "turbo":  0.1,    # demo mode
}


# ---------------------------------------------------------------------------
# Pacer
# ---------------------------------------------------------------------------
class Pacer:
    """
    Attributes:
        controller : The event source.
        speed      : Multiplier applied to every Wait duration.
        state      : Current PacerState.
    """

    def __init__(self, controller: PlaybackController, speed: float = 1.0, start: float = 0.0):
        self.controller: PlaybackController = controller
        self.speed:      float              = 1.0
        self.state:      PacerState         = PacerState.PLAYING
        self.set_speed_value(speed)

        self._deadline:     float           = start
        self._paused_at:    Optional[float] = None
        self._clock_origin: Optional[float] = None

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------
    def poll(self, elapsed: float) -> Optional[PlaybackEvent]:
        """Return the next due non-wait event, or None if nothing is due."""
        if self.state != PacerState.PLAYING:
            return None
        while self._deadline <= elapsed:
            event = self.controller.next()
            if isinstance(event, Wait):
                self._deadline += event.duration * self.speed
                continue
            return event
        return None

    def tick(self) -> Optional[PlaybackEvent]:
        """poll() against time.monotonic(), measured from the first tick."""
        return self.poll(self._now())

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self, now: Optional[float] = None) -> None:
        if self.state == PacerState.PLAYING:
            return
        now = self._now() if now is None else now
        if self._paused_at is not None:
            self._deadline += now - self._paused_at
        self._paused_at = None
        self.state      = PacerState.PLAYING

    def pause(self, now: Optional[float] = None) -> None:
        if self.state == PacerState.PAUSED:
            return
        self._paused_at = self._now() if now is None else now
        self.state      = PacerState.PAUSED

    def toggle_play(self, now: Optional[float] = None) -> None:
        if self.state == PacerState.PLAYING:
            self.pause(now)
        else:
            self.play(now)

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset}")
        self.speed = SPEED_PRESETS[preset]

    def set_speed_value(self, multiplier: float) -> None:
        if multiplier <= 0:
            raise ValueError(f"Speed multiplier must be positive, got {multiplier}")
        self.speed = multiplier

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def deadline(self) -> float:
        return self._deadline

    @property
    def is_playing(self) -> bool:
        return self.state == PacerState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _now(self) -> float:
        now = time.monotonic()
        if self._clock_origin is None:
            self._clock_origin = now
        return now - self._clock_origin
