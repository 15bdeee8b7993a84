"""
bubble_sort.py — Bubble Sort
=============================
Generator-based bubble sort.  `len` full passes over adjacent pairs,
no early exit, so the comparison order is fixed by the input length.
"""

from typing import List

from sortdata import SortBuffer
from algorithms.producer import SortGenerator


PSEUDOCODE: List[str] = [
    "def BubbleSort(data):",                    # 0
    "    for pass in 0 … n-1:",                 # 1
    "        for j in 1 … n-1:",                # 2
    "            if data[j-1] > data[j]:",      # 3
    "                swap(j-1, j)",             # 4
]


def bubble_sort(data: SortBuffer) -> SortGenerator:
    n = len(data)
    for _ in range(n):
        for j in range(1, n):
            if data[j - 1] > data[j]:
                yield data.exchange(j - 1, j)
    return data
