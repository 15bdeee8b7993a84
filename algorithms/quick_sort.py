"""
quick_sort.py — Quick Sort
===========================
Lomuto partition, last element as pivot.

Recursion does not suspend cleanly inside a single flat loop, and the
inputs here are small, so the whole swap sequence is computed up front:
the sort runs once against a scratch copy, every swap is recorded,
and the returned generator replays that fixed list against the real
buffer.  Because the scratch copy starts identical to the real
buffer, the replay is swap-for-swap what an incremental run would do.
"""

import logging
from typing import List

from sortdata import SortBuffer, Swap
from algorithms.producer import SortGenerator


log = logging.getLogger(__name__)

PSEUDOCODE: List[str] = [
    "def QuickSort(data, low, high):",          # 0
    "    if low < high:",                       # 1
    "        pivot ← data[high];  i ← low",     # 2
    "        for j in low … high-1:",           # 3
    "            if data[j] < pivot:",          # 4
    "                swap(i, j);  i ← i+1",     # 5
    "        swap(i, high)",                    # 6
    "        QuickSort(data, low, i-1)",        # 7
    "        QuickSort(data, i+1, high)",       # 8
]


def quick_sort(data: SortBuffer) -> SortGenerator:
    """Precompute every swap, then return a generator that replays them."""
    scratch = data.copy()
    swaps: List[Swap] = []
    _quicksort(scratch, 0, len(scratch) - 1, swaps)
    log.debug("quick sort precomputed %d swap(s) for %d element(s)", len(swaps), len(data))
    return _replay(data, swaps)


def _replay(data: SortBuffer, swaps: List[Swap]) -> SortGenerator:
    for swap in swaps:
        yield data.exchange(swap.a, swap.b)
    return data


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _partition(data: SortBuffer, low: int, high: int, swaps: List[Swap]) -> int:
    pivot = data[high]
    i = low
    for j in range(low, high):
        if data[j] < pivot:
            swaps.append(data.exchange(i, j))
            i += 1

    swaps.append(data.exchange(i, high))
    return i


def _quicksort(data: SortBuffer, low: int, high: int, swaps: List[Swap]) -> None:
    # explicit stack; the left range is popped first, same order as recursion
    pending = [(low, high)]
    while pending:
        low, high = pending.pop()
        if low < high:
            p = _partition(data, low, high, swaps)
            pending.append((p + 1, high))
            pending.append((low, p - 1))
