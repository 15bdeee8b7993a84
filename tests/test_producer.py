import pytest

from algorithms import ProducerState, StepProducer, UnsortedResultError, get_algorithm
from algorithms.bubble_sort import bubble_sort
from sortdata import SortBuffer


def _noisy(data):
    """Yields self-swaps around one real swap."""
    yield data.exchange(0, 0)
    yield data.exchange(1, 1)
    yield data.exchange(0, 1)
    yield data.exchange(1, 1)
    return data


def _broken(data):
    yield data.exchange(0, 1)
    return data


def test_bubble_three_elements_step_by_step():
    buf = SortBuffer([3, 1, 2])
    producer = StepProducer(bubble_sort(buf), name="Bubble Sort")

    first = producer.advance()
    assert (first.a, first.b) == (0, 1)
    assert buf.data() == [1, 3, 2]

    second = producer.advance()
    assert (second.a, second.b) == (1, 2)
    assert buf.data() == [1, 2, 3]

    assert producer.advance() is None
    assert producer.result.is_sorted()


def test_insignificant_swaps_are_never_surfaced():
    buf = SortBuffer([1, 0])
    producer = StepProducer(_noisy(buf))

    swap = producer.advance()

    assert (swap.a, swap.b) == (0, 1)
    assert producer.advance() is None
    assert producer.swaps_emitted == 1


def test_states_progress_and_completion_is_terminal():
    buf = SortBuffer([1, 0])
    producer = StepProducer(bubble_sort(buf))
    assert producer.state == ProducerState.NOT_STARTED

    producer.advance()
    assert producer.state == ProducerState.RUNNING

    assert producer.advance() is None
    assert producer.state == ProducerState.COMPLETED
    assert producer.is_finished

    for _ in range(3):
        assert producer.advance() is None
    assert buf.data() == [0, 1]


def test_result_is_unavailable_while_sorting():
    producer = StepProducer(bubble_sort(SortBuffer([2, 1, 0])))
    producer.advance()

    with pytest.raises(RuntimeError):
        producer.result


def test_unsorted_completion_raises():
    producer = StepProducer(_broken(SortBuffer([0, 2, 1])), name="Broken")

    producer.advance()
    with pytest.raises(UnsortedResultError, match="Broken"):
        producer.advance()


def test_unsorted_result_error_is_an_assertion():
    assert issubclass(UnsortedResultError, AssertionError)


def test_drain_returns_the_sorted_buffer():
    producer = get_algorithm("comb").factory(SortBuffer([4, 3, 2, 1, 0]))

    result = producer.drain()

    assert result.data() == [0, 1, 2, 3, 4]


def test_failed_completion_stays_failed():
    producer = StepProducer(_broken(SortBuffer([0, 2, 1])), name="Broken")
    producer.advance()
    with pytest.raises(UnsortedResultError):
        producer.advance()

    assert producer.failed
    assert producer.state == ProducerState.COMPLETED
    with pytest.raises(UnsortedResultError, match="Broken"):
        producer.advance()
    with pytest.raises(UnsortedResultError, match="No result"):
        producer.result
