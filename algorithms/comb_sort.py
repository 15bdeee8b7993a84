"""
comb_sort.py — Comb Sort
=========================
Bubble sort with a shrinking gap.  The gap starts at `len` and is
divided by SHRINK_FACTOR (floored, never below 1) before every pass.
Sorting stops once a gap-1 pass makes no swaps.
"""

import math
from typing import List

from sortdata import SortBuffer
from algorithms.producer import SortGenerator


SHRINK_FACTOR = 1.3

PSEUDOCODE: List[str] = [
    "def CombSort(data):",                          # 0
    "    gap ← n;  swapped ← true",                 # 1
    "    while gap > 1 or swapped:",                # 2
    "        gap ← max(⌊gap / 1.3⌋, 1)",            # 3
    "        swapped ← false",                      # 4
    "        for i in 0 … n-gap-1:",                # 5
    "            if data[i] > data[i+gap]:",        # 6
    "                swap(i, i+gap);  swapped ← true",  # 7
]


def comb_sort(data: SortBuffer) -> SortGenerator:
    n       = len(data)
    gap     = n
    swapped = True
    while gap > 1 or swapped:
        gap = max(math.floor(gap / SHRINK_FACTOR), 1)

        swapped = False
        for i in range(n - gap):
            if data[i] > data[i + gap]:
                swapped = True
                yield data.exchange(i, i + gap)
    return data
