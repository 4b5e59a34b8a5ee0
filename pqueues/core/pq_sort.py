# pqueues/core/pq_sort.py
from __future__ import annotations

from typing import MutableSequence

from .base import QueueFactory
from .sorted_array_queue import SortedArrayPriorityQueue
from .types import Record


def pq_sort(
    records: MutableSequence[Record],
    queue_factory: QueueFactory = SortedArrayPriorityQueue,
    descending: bool = False,
) -> None:
    """
    Sort `records` in place by priority using a priority queue.

    Every record is enqueued into a fresh queue and then dequeued back into
    the same positions. The result is ascending by priority unless
    `descending` is set; the order among equal priorities depends on the
    backend.
    """
    pq = queue_factory(mode="max" if descending else "min")

    for record in records:
        pq.enqueue(record)

    # The queue hands records back in extraction order, which is the sort order.
    for i in range(len(records)):
        records[i] = pq.dequeue()
