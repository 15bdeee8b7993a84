"""
Properties every registered algorithm must satisfy, plus the exact
swap sequences for a few hand-traced inputs.
"""

import itertools
import random

import pytest

from algorithms import ALGORITHMS, StepProducer, get_algorithm
from algorithms.shell_sort import shell_sort
from engine import replay
from sortdata import SortBuffer


ALGO_KEYS = [a.key for a in ALGORITHMS]


def drain(key, data):
    """Run `key` on `data`; return (significant swaps, final buffer)."""
    producer = get_algorithm(key).factory(SortBuffer(data))
    swaps = []
    swap = producer.advance()
    while swap is not None:
        swaps.append((swap.a, swap.b))
        swap = producer.advance()
    return swaps, producer.result


@pytest.mark.parametrize("key", ALGO_KEYS)
@pytest.mark.parametrize("n", range(0, 8))
def test_every_permutation_sorts(key, n):
    for perm in itertools.permutations(range(n)):
        swaps, result = drain(key, perm)

        assert result.data() == list(range(n)), perm
        assert all(a != b for a, b in swaps), perm
        assert replay(perm, swaps) == list(range(n)), perm


@pytest.mark.parametrize("key", ALGO_KEYS)
def test_random_larger_inputs_sort(key):
    rng = random.Random(1234)
    for n in (10, 23, 57, 60):
        data = list(range(n))
        rng.shuffle(data)

        swaps, result = drain(key, data)

        assert result.is_sorted()
        assert all(a != b for a, b in swaps)
        assert replay(data, swaps) == sorted(data)


@pytest.mark.parametrize("key", [k for k in ALGO_KEYS if k != "cant_believe"])
def test_sorted_input_produces_no_swaps(key):
    producer = get_algorithm(key).factory(SortBuffer([1, 2, 3]))

    assert producer.advance() is None
    assert producer.result.data() == [1, 2, 3]


def test_cant_believe_shuffles_sorted_input_before_settling():
    # data[i] < data[j] swaps even when the input is already ascending
    swaps, result = drain("cant_believe", [1, 2, 3])

    assert swaps == [(0, 1), (0, 2), (1, 0), (2, 1)]
    assert result.data() == [1, 2, 3]


def test_quick_sort_handles_long_sorted_input():
    # worst-case partitions: one range per element
    swaps, result = drain("quick", list(range(1200)))

    assert swaps == []
    assert result.data() == list(range(1200))


@pytest.mark.parametrize("key", ALGO_KEYS)
def test_duplicates_are_tolerated(key):
    swaps, result = drain(key, [2, 0, 2, 1, 0])

    assert result.data() == [0, 0, 1, 2, 2]


@pytest.mark.parametrize("key, expected", [
    ("bubble",       [(0, 1), (1, 2)]),
    ("comb",         [(0, 2), (0, 1)]),
    ("shell",        [(1, 0), (2, 1)]),
    ("cant_believe", [(1, 0), (2, 1)]),
    ("quick",        [(0, 1), (1, 2)]),
])
def test_hand_traced_sequences(key, expected):
    swaps, _ = drain(key, [2, 0, 1])

    assert swaps == expected


def test_bubble_reverse_three():
    swaps, _ = drain("bubble", [2, 1, 0])

    assert swaps == [(0, 1), (1, 2), (0, 1)]


def test_shell_gap_one_on_sorted_input_has_no_swaps():
    buf = SortBuffer(range(20))
    producer = StepProducer(shell_sort(buf, gaps=(1,)))

    assert producer.advance() is None
    assert producer.swaps_emitted == 0


def test_shell_every_shift_is_a_swap():
    # 0 travels from the end to the front: one swap per shift
    swaps, _ = drain("shell", [1, 2, 3, 0])

    assert swaps == [(3, 2), (2, 1), (1, 0)]


def test_comb_gap_shrinks_before_first_pass():
    # gap 4 → 3 on the first pass, so (0, 3) is the first comparison
    swaps, _ = drain("comb", [3, 1, 2, 0])

    assert swaps[0] == (0, 3)


# ---------------------------------------------------------------------------
# Quick sort: eager recording vs. an incremental recursive generator
# ---------------------------------------------------------------------------
def _incremental_partition(data, low, high, out):
    pivot = data[high]
    i = low
    for j in range(low, high):
        if data[j] < pivot:
            yield data.exchange(i, j)
            i += 1
    yield data.exchange(i, high)
    out.append(i)


def _incremental_quicksort(data, low, high):
    if low < high:
        out = []
        yield from _incremental_partition(data, low, high, out)
        p = out[0]
        yield from _incremental_quicksort(data, low, p - 1)
        yield from _incremental_quicksort(data, p + 1, high)


def _incremental(data):
    yield from _incremental_quicksort(data, 0, len(data) - 1)
    return data


def test_quick_sort_matches_incremental_reference():
    rng = random.Random(99)
    for n in range(0, 40):
        data = list(range(n))
        rng.shuffle(data)

        eager, eager_result = drain("quick", data)

        reference = StepProducer(_incremental(SortBuffer(data)))
        expected = []
        swap = reference.advance()
        while swap is not None:
            expected.append((swap.a, swap.b))
            swap = reference.advance()

        assert eager == expected
        assert len(eager) == reference.swaps_emitted
        assert eager_result == reference.result


def test_quick_sort_precomputes_without_touching_the_buffer():
    buf = SortBuffer([3, 2, 1, 0])
    producer = get_algorithm("quick").factory(buf)

    assert buf.data() == [3, 2, 1, 0]

    producer.advance()
    assert buf.data() != [3, 2, 1, 0]
