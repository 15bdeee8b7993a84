"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows
about.

    from algorithms import REGISTRY, ALGORITHMS, get_algorithm

REGISTRY is an ordered dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, tags, …),
        …
    }

Insertion order is rotation order: the playback controller walks
ALGORITHMS (the same entries, as a tuple) by index and wraps around.
Adding a new algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble_sort       import bubble_sort       as _bubble,  PSEUDOCODE as _bubble_pc
from algorithms.comb_sort         import comb_sort         as _comb,    PSEUDOCODE as _comb_pc
from algorithms.shell_sort        import shell_sort        as _shell,   PSEUDOCODE as _shell_pc
from algorithms.cant_believe_sort import cant_believe_sort as _cbis,    PSEUDOCODE as _cbis_pc
from algorithms.quick_sort        import quick_sort        as _quick,   PSEUDOCODE as _quick_pc
from algorithms.producer          import StepProducer, ProducerState, UnsortedResultError
from sortdata import SortBuffer


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:               str                    # registry key, e.g. "bubble"
    label:             str                    # display name, e.g. "Bubble Sort"
    fn:                Callable               # buffer -> swap generator
    pseudocode:        List[str]              # lines for the side-panel
    tags:              List[str] = field(default_factory=list)   # e.g. ["in-place", "stable"]
    complexity_time:   str      = ""          # e.g. "O(n²)"
    complexity_space:  str      = ""          # e.g. "O(1)"
    description:       str      = ""          # one-liner for the UI card

    @property
    def name(self) -> str:
        return self.label

    def factory(self, buffer: SortBuffer) -> StepProducer:
        """Build a step producer that sorts `buffer` with this algorithm."""
        return StepProducer(self.fn(buffer), name=self.label)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        tags=["in-place", "stable", "adjacent"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Full passes over neighbouring pairs. Large values bubble to the end.",
    ),

    "comb": AlgoInfo(
        key="comb", label="Comb Sort", fn=_comb, pseudocode=_comb_pc,
        tags=["in-place", "gapped"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Bubble sort with a gap that shrinks by 1.3 each pass. Kills turtles early.",
    ),

    "shell": AlgoInfo(
        key="shell", label="Shell Sort", fn=_shell, pseudocode=_shell_pc,
        tags=["in-place", "gapped", "insertion"],
        complexity_time="O(n^1.5)", complexity_space="O(1)",
        description="Insertion sort over strides 57, 23, 10, 4, 1. Every shift is a swap.",
    ),

    "cant_believe": AlgoInfo(
        key="cant_believe", label="I Can't Believe It Can Sort", fn=_cbis, pseudocode=_cbis_pc,
        tags=["in-place", "naive"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Compare every i with every j and swap if data[i] < data[j]. It works!",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        tags=["in-place", "divide-and-conquer", "recursive"],
        complexity_time="O(n log n)", complexity_space="O(log n)",
        description="Lomuto partition around the last element, then recurse on both sides.",
    ),
}

ALGORITHMS: Tuple[AlgoInfo, ...] = tuple(REGISTRY.values())


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in rotation order."""
    return list(ALGORITHMS)


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in ALGORITHMS if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "ALGORITHMS",
    "StepProducer",
    "ProducerState",
    "UnsortedResultError",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
