"""
shell_sort.py — Shell Sort
===========================
Gapped insertion sort over a fixed gap sequence.  Instead of holding
the element aside and assigning it once, every shift is a pairwise
exchange down the stride, so each move is its own observable swap.

After the shift loop a final "placing" swap (j, temp_index) is issued.
By then j == temp_index, so it is always insignificant and the step
producer drops it; it is kept so the comparison/swap order matches the
textbook loop exactly.

Any gap >= len is a no-op pass.
"""

from typing import List, Sequence

from sortdata import SortBuffer
from algorithms.producer import SortGenerator


GAPS = (57, 23, 10, 4, 1)

PSEUDOCODE: List[str] = [
    "def ShellSort(data):",                             # 0
    "    for gap in [57, 23, 10, 4, 1]:",               # 1
    "        for i in gap … n-1:",                      # 2
    "            temp ← data[i];  j ← i",               # 3
    "            while j ≥ gap and data[j-gap] > temp:",  # 4
    "                swap(j, j-gap);  j ← j-gap",       # 5
    "            place temp at j",                      # 6
]


def shell_sort(data: SortBuffer, gaps: Sequence[int] = GAPS) -> SortGenerator:
    n = len(data)
    for gap in gaps:
        for i in range(gap, n):
            temp       = data[i]
            temp_index = i
            j          = i
            while j >= gap and data[j - gap] > temp:
                temp_index = j - gap
                yield data.exchange(j, temp_index)
                j -= gap

            yield data.exchange(j, temp_index)
    return data
