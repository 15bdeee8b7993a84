"""
controller.py — Playback Controller
====================================
Rotates forever through the algorithm registry, handing the renderer
one event per `next()` call.  Nothing here sleeps; Wait events are
directives the renderer honours on its own clock.

Cycle (one per algorithm):

    shuffle
      → Wait(intermission)
      → Reset(data, name)
      → Wait(intermission)
      → [ SwapEvent(s) → Wait(step_duration) ]  for every significant swap
      → index = (index + 1) % len(algorithms), back to shuffle

State machine:
    INTERMISSION  →  RESET  →  LEAD_IN  →  SWAP  ⇄  STEP_WAIT
    SWAP  →  (producer exhausted)  →  rotate + shuffle  →  RESET

Thread safety:
  This class is NOT thread-safe.  Call next() from one thread.
"""

import logging
import random
from enum import Enum
from typing import Optional, Sequence

from algorithms import ALGORITHMS, AlgoInfo, StepProducer
from engine.events import PlaybackEvent, Reset, SwapEvent, Wait
from sortdata import SortBuffer


log = logging.getLogger(__name__)

STEP_DURATION = 0.08          # seconds between swaps
INTERMISSION_DURATION = 3.0   # seconds around each reset


# ---------------------------------------------------------------------------
# Phases
# ---------------------------------------------------------------------------
class ControllerPhase(Enum):
    INTERMISSION = "intermission"   # next: Wait before the reset
    RESET        = "reset"          # next: Reset event
    LEAD_IN      = "lead_in"        # next: Wait after the reset
    SWAP         = "swap"           # next: a swap, or rotation on completion
    STEP_WAIT    = "step_wait"      # next: Wait after a swap


# ---------------------------------------------------------------------------
# PlaybackController
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        data_count       : Elements per shuffled input (fixed).
        step_duration    : Wait emitted after every swap, in seconds.
        intermission     : Wait emitted before and after every reset.
        cycles_completed : Algorithms drained to completion so far.
    """

    def __init__(
        self,
        data_count: int,
        *,
        algorithms: Sequence[AlgoInfo] = ALGORITHMS,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        step_duration: float = STEP_DURATION,
        intermission: float = INTERMISSION_DURATION,
    ):
        if data_count < 0:
            raise ValueError(f"data_count must be non-negative, got {data_count}")
        if not algorithms:
            raise ValueError("At least one algorithm is required")

        self.data_count:       int   = data_count
        self.step_duration:    float = step_duration
        self.intermission:     float = intermission
        self.cycles_completed: int   = 0

        self._algorithms = tuple(algorithms)
        self._rng        = rng if rng is not None else random.Random(seed)
        self._index:    int                 = 0
        self._phase:    ControllerPhase     = ControllerPhase.INTERMISSION
        self._initial:  tuple               = ()
        self._producer: Optional[StepProducer] = None
        self._load()

    # ------------------------------------------------------------------
    # Event stream
    # ------------------------------------------------------------------
    def next(self) -> PlaybackEvent:
        """Produce the next playback event.  Never runs out."""
        phase = self._phase

        if phase == ControllerPhase.INTERMISSION:
            self._phase = ControllerPhase.RESET
            return Wait(self.intermission)

        if phase == ControllerPhase.RESET:
            self._phase = ControllerPhase.LEAD_IN
            return Reset(data=self._initial, algorithm_name=self.current_algorithm.name)

        if phase == ControllerPhase.LEAD_IN:
            self._phase = ControllerPhase.SWAP
            return Wait(self.intermission)

        if phase == ControllerPhase.STEP_WAIT:
            self._phase = ControllerPhase.SWAP
            return Wait(self.step_duration)

        # SWAP
        swap = self._producer.advance()
        if swap is not None:
            self._phase = ControllerPhase.STEP_WAIT
            return SwapEvent(swap)

        self._rotate()
        self._phase = ControllerPhase.RESET
        return Wait(self.intermission)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def algorithm_index(self) -> int:
        return self._index

    @property
    def current_algorithm(self) -> AlgoInfo:
        return self._algorithms[self._index]

    @property
    def phase(self) -> ControllerPhase:
        return self._phase

    @property
    def initial_data(self) -> tuple:
        """The permutation the current algorithm started from."""
        return self._initial

    @property
    def algorithm_count(self) -> int:
        return len(self._algorithms)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _rotate(self) -> None:
        finished = self.current_algorithm
        self.cycles_completed += 1
        self._index = (self._index + 1) % len(self._algorithms)
        log.info(
            "%s finished after %d swap(s); next up: %s",
            finished.label, self._producer.swaps_emitted, self.current_algorithm.label,
        )
        self._load()

    def _load(self) -> None:
        buffer = SortBuffer.shuffled(self.data_count, self._rng)
        self._initial  = tuple(buffer)
        self._producer = self.current_algorithm.factory(buffer)
