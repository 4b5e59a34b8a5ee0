# pqueues/core/topk_queue.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from .base import PriorityQueue, QueueFactory
from .sorted_array_queue import SortedArrayPriorityQueue
from .types import Record


@dataclass
class TopKSelector:
    """
    Cola de prioridad acotada que mantiene los K registros de mayor prioridad.

    The working set is a "min" queue, so its peek() is the weakest record
    kept: the one evicted when a stronger record arrives. A newcomer must
    strictly beat it, so among equal priorities the first seen stay.
    """
    k: int
    queue_factory: QueueFactory = SortedArrayPriorityQueue

    _queue: PriorityQueue = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.k < 0:
            raise ValueError(f"k must be non-negative, got {self.k}")
        self._queue = self.queue_factory(mode="min")

    def push(self, record: Record) -> None:
        """Keep the record if it belongs to the K best seen so far."""
        if self._queue.size() < self.k:
            self._queue.enqueue(record)
        elif self.k > 0 and record.priority > self._queue.peek().priority:
            self._queue.dequeue()
            self._queue.enqueue(record)

    def best_first(self) -> List[Record]:
        """Devuelve los registros ordenados de MAYOR a MENOR prioridad."""
        # Draining yields weakest first; refill so the selector stays usable.
        drained = [self._queue.dequeue() for _ in range(self._queue.size())]
        for record in drained:
            self._queue.enqueue(record)
        drained.reverse()
        return drained

    def __len__(self) -> int:
        return self._queue.size()


def select_top_k(
    records: Iterable[Record],
    k: int,
    queue_factory: QueueFactory = SortedArrayPriorityQueue,
) -> List[Record]:
    """
    Return the k highest-priority records of `records`, highest first.

    `records` is consumed once and may be any iterable, including a
    generator. Fewer than k records yields all of them.
    """
    selector = TopKSelector(k=k, queue_factory=queue_factory)
    if k == 0:
        return []
    for record in records:
        selector.push(record)
    return selector.best_first()
