"""
swap.py — Swap Value
=====================
A Swap is the only thing the renderer ever learns about a running
algorithm: "positions a and b just traded places".

Design decisions:
  - Frozen dataclass so a Swap can be logged, compared and replayed
    without anyone mutating it behind our back.
  - A swap of a position with itself is *insignificant*.  Some
    algorithms produce those for convenience; the step producer filters
    them out before they reach the outside world.
"""

from dataclasses import dataclass
from typing import Dict, Iterator


@dataclass(frozen=True)
class Swap:
    """
    Attributes:
        a : First position exchanged.
        b : Second position exchanged.
    """

    a: int
    b: int

    @property
    def is_significant(self) -> bool:
        return self.a != self.b

    def __iter__(self) -> Iterator[int]:
        yield self.a
        yield self.b

    def __str__(self) -> str:
        return f"{self.a} ⇄ {self.b}"

    def to_dict(self) -> Dict[str, int]:
        return {"a": self.a, "b": self.b}
