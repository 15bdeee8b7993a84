"""
producer.py — Step Producer
============================
Every algorithm is a generator that yields Swaps.  The StepProducer
wraps one such generator and hands the caller exactly one *significant*
swap per `advance()` call.

    producer = StepProducer(bubble_sort(buffer), name="Bubble Sort")
    swap = producer.advance()
    while swap is not None:
        renderer.apply(swap)
        swap = producer.advance()
    buffer = producer.result

Design decisions:
  - Algorithms are written as ordinary nested loops with a `yield` at
    each swap site.  The generator frame keeps every loop counter, so
    resuming picks up exactly where the last comparison left off.
  - Insignificant swaps (i == j) are consumed here and never surfaced.
  - The generator *returns* the buffer when it finishes.  That return
    value is the hand-back of ownership, and it must be sorted.  An
    unsorted result is a bug in the algorithm, so it raises
    UnsortedResultError and nobody in the core catches it.

State machine:
    NOT_STARTED  →  advance()  →  RUNNING
    RUNNING      →  (generator returns)  →  COMPLETED
    COMPLETED    →  advance()  →  COMPLETED  (always None)
    A failed completion stays failed: advance() and result re-raise.
"""

import logging
from enum import Enum
from typing import Generator, Optional

from sortdata import SortBuffer, Swap


log = logging.getLogger(__name__)

SortGenerator = Generator[Swap, None, SortBuffer]


class UnsortedResultError(AssertionError):
    """An algorithm finished but left its buffer out of order."""


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class ProducerState(Enum):
    NOT_STARTED = "not_started"
    RUNNING     = "running"
    COMPLETED   = "completed"


# ---------------------------------------------------------------------------
# StepProducer
# ---------------------------------------------------------------------------
class StepProducer:
    """
    Attributes:
        name          : Display name of the wrapped algorithm (for logs).
        state         : Current ProducerState.
        swaps_emitted : Significant swaps returned so far.
    """

    def __init__(self, generator: SortGenerator, name: str = ""):
        self._generator: Optional[SortGenerator] = generator
        self._result:    Optional[SortBuffer]    = None
        self._failure:   Optional[UnsortedResultError] = None
        self.name:          str           = name
        self.state:         ProducerState = ProducerState.NOT_STARTED
        self.swaps_emitted: int           = 0

    def advance(self) -> Optional[Swap]:
        """Run until the next significant swap, or None once sorted."""
        if self._failure is not None:
            raise self._failure
        if self._generator is None:
            return None
        self.state = ProducerState.RUNNING
        try:
            while True:
                swap = next(self._generator)
                if swap.is_significant:
                    self.swaps_emitted += 1
                    return swap
        except StopIteration as stop:
            buffer = stop.value
        self._finish(buffer)
        return None

    def drain(self) -> SortBuffer:
        """Exhaust the producer and return the sorted buffer."""
        while self.advance() is not None:
            pass
        return self.result

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def result(self) -> SortBuffer:
        if self._failure is not None:
            raise UnsortedResultError(f"No result: {self._failure}")
        if self.state != ProducerState.COMPLETED or self._result is None:
            raise RuntimeError("Buffer is still owned by a running sort.")
        return self._result

    @property
    def is_finished(self) -> bool:
        return self.state == ProducerState.COMPLETED

    @property
    def failed(self) -> bool:
        return self._failure is not None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _finish(self, buffer: SortBuffer) -> None:
        self._generator = None
        self.state      = ProducerState.COMPLETED
        if not buffer.is_sorted():
            self._failure = UnsortedResultError(
                f"{self.name or 'algorithm'} finished with "
                f"{buffer.descents()} adjacent pair(s) out of order: {buffer.data()}"
            )
            raise self._failure
        self._result = buffer
        log.debug("%s finished after %d swap(s)", self.name or "algorithm", self.swaps_emitted)
