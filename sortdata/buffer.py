"""
buffer.py — Sort Buffer
========================
The mutable array under sort.  Algorithms and the recorder both talk
to this object; it is the ONLY mutable state in a run.

Responsibilities:
  1. Guarded exchange primitive      (exchange → Swap)
  2. Order queries                   (is_sorted, descents)
  3. Read-only access                (len, indexing, iteration, data)
  4. Factory for shuffled inputs     (shuffled)

Design decisions:
  - Length is fixed for the buffer's lifetime; `exchange` is the only
    mutator, so every change to the data is describable as a Swap.
  - Values are normally a permutation of 0..n, which makes sortedness
    well defined and lets the values double as element identities.
"""

import random
from typing import Iterable, Iterator, List, Optional

from sortdata.swap import Swap


class SortBuffer:
    """
    Attributes:
        _data : The elements, in their current order.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[int]):
        self._data: List[int] = list(data)

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------
    @classmethod
    def shuffled(cls, count: int, rng: Optional[random.Random] = None) -> "SortBuffer":
        """Uniformly random permutation of 0..count (Fisher–Yates)."""
        if count < 0:
            raise ValueError(f"Element count must be non-negative, got {count}")
        data = list(range(count))
        (rng or random.Random()).shuffle(data)
        return cls(data)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def exchange(self, i: int, j: int) -> Swap:
        """Swap positions i and j in place and describe what happened."""
        self._data[i], self._data[j] = self._data[j], self._data[i]
        return Swap(i, j)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def descents(self) -> int:
        """Number of adjacent pairs that are out of order."""
        d = self._data
        return sum(1 for k in range(len(d) - 1) if d[k] > d[k + 1])

    def is_sorted(self) -> bool:
        return self.descents() == 0

    def data(self) -> List[int]:
        return list(self._data)

    def copy(self) -> "SortBuffer":
        return SortBuffer(self._data)

    # ------------------------------------------------------------------
    # Sequence protocol (read-only)
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, idx: int) -> int:
        return self._data[idx]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __eq__(self, other) -> bool:
        if isinstance(other, SortBuffer):
            return self._data == other._data
        return NotImplemented

    def __repr__(self) -> str:
        return f"SortBuffer({self._data!r})"
