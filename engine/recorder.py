"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (every significant Swap), then
computes the metrics the UI needs for the Analytics panel and
Comparison Mode.

Usage:
    rec = Recorder()
    rec.start(algo_key="quick", data=[3, 0, 2, 1])
    rec.run_to_completion()          # drains the step producer
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    The UI holds two Recorders (one per algo), runs both to completion
    on the SAME input, then calls compare(rec1, rec2) → ComparisonResult.
"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from algorithms import AlgoInfo, StepProducer, get_algorithm
from sortdata import SortBuffer, Swap


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:         str   = ""
    algo_label:       str   = ""
    element_count:    int   = 0
    swap_count:       int   = 0          # significant swaps only
    initial_descents: int   = 0          # adjacent out-of-order pairs before sorting
    wall_time_ms:     float = 0.0        # wall-clock time to run to completion
    is_sorted:        bool  = False


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_swaps: str = ""   # which algo needed fewer swaps
    winner_time:  str = ""   # which algo finished faster


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        swaps    : Every significant Swap from the run, in order.
        metrics  : Computed RunMetrics (available after run_to_completion).
        producer : The underlying StepProducer.
    """

    def __init__(self):
        self.swaps:    List[Swap]             = []
        self.metrics:  Optional[RunMetrics]   = None
        self.producer: Optional[StepProducer] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._initial:   List[int]          = []

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, data: Sequence[int]) -> None:
        """Build the step producer for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        if sorted(data) != list(range(len(data))):
            raise ValueError(f"Input must be a permutation of 0..{len(data)}")

        self._algo_info = info
        self._initial   = list(data)
        self.swaps      = []
        self.metrics    = None
        self.producer   = info.factory(SortBuffer(data))

    def run_to_completion(self) -> RunMetrics:
        """Drain the producer, record every swap, compute metrics."""
        if self.producer is None:
            raise RuntimeError("Call start() first.")

        start = time.monotonic()
        swap = self.producer.advance()
        while swap is not None:
            self.swaps.append(swap)
            swap = self.producer.advance()
        wall_ms = (time.monotonic() - start) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "initial":  list(self._initial),
            "swaps":    [[s.a, s.b] for s in self.swaps],
            "metrics":  asdict(self.metrics) if self.metrics else {},
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            element_count=len(self._initial),
            swap_count=len(self.swaps),
            initial_descents=SortBuffer(self._initial).descents(),
            wall_time_ms=round(wall_ms, 2),
            is_sorted=self.producer.result.is_sorted(),
        )


# ---------------------------------------------------------------------------
# Replay helper
# ---------------------------------------------------------------------------
def replay(initial: Sequence[int], swaps: Iterable[Swap]) -> List[int]:
    """Apply a recorded swap log to a copy of `initial`."""
    buffer = SortBuffer(initial)
    for a, b in swaps:
        buffer.exchange(a, b)
    return buffer.data()


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key, lower_is_better=True):
        if l_val == r_val:
            return "tie"
        if lower_is_better:
            return l_key if l_val < r_val else r_key
        return l_key if l_val > r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_swaps=winner(l.swap_count, r.swap_count, l.algo_label, r.algo_label),
        winner_time =winner(l.wall_time_ms, r.wall_time_ms, l.algo_label, r.algo_label),
    )
