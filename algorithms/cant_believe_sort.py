"""
cant_believe_sort.py — "I Can't Believe It Can Sort"
=====================================================
The famously naive double scan: for every i, compare against every j
and swap whenever data[i] < data[j].  Looks wrong, sorts ascending.

Quadratic on purpose, including the i == j self-comparisons.
"""

from typing import List

from sortdata import SortBuffer
from algorithms.producer import SortGenerator


PSEUDOCODE: List[str] = [
    "def ICantBelieveItCanSort(data):",     # 0
    "    for i in 0 … n-1:",                # 1
    "        for j in 0 … n-1:",            # 2
    "            if data[i] < data[j]:",    # 3
    "                swap(i, j)",           # 4
]


def cant_believe_sort(data: SortBuffer) -> SortGenerator:
    n = len(data)
    for i in range(n):
        for j in range(n):
            if data[i] < data[j]:
                yield data.exchange(i, j)
    return data
