import random

import pytest

from pqueues.core.errors import EmptyQueueError
from pqueues.core.heap_queue import HeapPriorityQueue
from pqueues.core.sorted_array_queue import SortedArrayPriorityQueue
from pqueues.core.types import INITIAL_CAPACITY, Record


def test_size_is_empty_clear(queue_cls):
    pq = queue_cls()
    assert pq.is_empty()
    pq.clear()
    assert pq.is_empty() == (pq.size() == 0)

    for i in range(8):
        assert pq.size() == i
        pq.enqueue(Record("", i * 10))
        assert pq.size() == i + 1
        assert len(pq) == i + 1

    pq.clear()
    assert pq.is_empty()
    assert pq.size() == 0


def test_dequeue_or_peek_on_empty_raises(queue_cls):
    pq = queue_cls()
    point = Record("Programming Abstractions", 106)

    assert pq.is_empty()
    with pytest.raises(EmptyQueueError):
        pq.dequeue()
    with pytest.raises(EmptyQueueError):
        pq.peek()

    pq.enqueue(point)
    assert pq.dequeue() == point
    with pytest.raises(EmptyQueueError):
        pq.dequeue()
    with pytest.raises(EmptyQueueError, match="Cannot peek empty pqueue"):
        pq.peek()

    pq.enqueue(point)
    pq.clear()
    with pytest.raises(EmptyQueueError):
        pq.dequeue()
    with pytest.raises(EmptyQueueError):
        pq.peek()


def test_peek_does_not_remove(queue_cls):
    pq = queue_cls()
    for p in [3, 9, 1]:
        pq.enqueue(Record(str(p), p))

    assert pq.peek() == Record("9", 9)
    assert pq.size() == 3
    assert pq.dequeue() == Record("9", 9)


@pytest.mark.parametrize("priorities", [
    [5, 3, 8, 1, 9, 2],
    list(range(20)),
    list(range(20, 0, -1)),
    [4, 4, 4, 1, 1, 7, -2, -2],
    [-1.5, 2.25, 0.0, -100, 100],
])
def test_round_trip_descending(queue_cls, priorities):
    pq = queue_cls()
    for p in priorities:
        pq.enqueue(Record("", p))

    drained = [pq.dequeue().priority for _ in range(len(priorities))]

    assert drained == sorted(priorities, reverse=True)
    assert pq.size() == 0


def test_min_mode_round_trip_ascending(queue_cls):
    rng = random.Random(3)
    priorities = [rng.randint(-50, 50) for _ in range(200)]
    pq = queue_cls(mode="min")
    for p in priorities:
        pq.enqueue(Record("", p))

    assert [pq.dequeue().priority for _ in range(200)] == sorted(priorities)


def test_invariant_holds_after_every_operation(queue_cls):
    rng = random.Random(2024)
    pq = queue_cls()
    expected_size = 0

    pq.validate_internal_state()
    for _ in range(2_000):
        if expected_size == 0 or rng.random() < 0.6:
            pq.enqueue(Record("", rng.randint(-1_000, 1_000)))
            expected_size += 1
        else:
            pq.dequeue()
            expected_size -= 1
        pq.validate_internal_state()
        assert pq.size() == expected_size

    pq.clear()
    pq.validate_internal_state()


def test_dequeue_returns_current_maximum(queue_cls):
    rng = random.Random(11)
    pq = queue_cls()
    stored = []
    for _ in range(1_000):
        if stored and rng.random() < 0.4:
            record = pq.dequeue()
            assert record.priority == max(r.priority for r in stored)
            stored.remove(record)
        else:
            record = Record(str(len(stored)), rng.randint(0, 100))
            pq.enqueue(record)
            stored.append(record)


def test_growth_keeps_order(queue_cls):
    n = 100_000
    pq = queue_cls()
    assert pq.capacity == INITIAL_CAPACITY
    for i in range(n):
        pq.enqueue(Record("", i))
    pq.validate_internal_state()
    assert pq.size() == n
    assert pq.capacity == INITIAL_CAPACITY * 2 ** 14

    previous = pq.dequeue().priority
    assert previous == n - 1
    for _ in range(n - 1):
        current = pq.dequeue().priority
        assert current <= previous
        previous = current
    assert pq.is_empty()


def test_capacity_doubles_and_survives_clear(queue_cls):
    pq = queue_cls(initial_capacity=2)
    assert pq.capacity == 2
    for i in range(5):
        pq.enqueue(Record("", i))
    assert pq.capacity == 8

    pq.clear()
    assert pq.capacity == 8
    assert pq.size() == 0


def test_backends_agree():
    rng = random.Random(5)
    priorities = [rng.randint(0, 1_000) for _ in range(300)]
    results = []
    for cls in (SortedArrayPriorityQueue, HeapPriorityQueue):
        pq = cls()
        for p in priorities:
            pq.enqueue(Record("", p))
        results.append([pq.dequeue().priority for _ in priorities])
    assert results[0] == results[1]


@pytest.mark.parametrize("kwargs", [{"initial_capacity": 0}, {"mode": "middle"}])
def test_invalid_construction(queue_cls, kwargs):
    with pytest.raises(ValueError):
        queue_cls(**kwargs)


def test_repr(queue_cls):
    pq = queue_cls(mode="min")
    pq.enqueue(Record("a", 1))
    assert repr(pq) == f"{queue_cls.__name__}(mode='min', size=1, capacity={INITIAL_CAPACITY})"
