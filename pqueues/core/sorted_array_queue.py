# pqueues/core/sorted_array_queue.py
from __future__ import annotations

import bisect

from .base import PriorityQueue
from .errors import InternalInvariantError
from .types import Record


class SortedArrayPriorityQueue(PriorityQueue):
    """
    Cola de prioridad sobre un array totalmente ordenado.

    The filled slots are kept sorted so that the next record to leave is
    always in the last filled slot: enqueue pays O(n) to keep the order,
    dequeue and peek are O(1).
    Records with equal priority leave in the order they arrived.
    """

    def enqueue(self, record: Record) -> None:
        self._ensure_room()
        n = self._num_filled
        # Primer hueco cuyo registro no supera al nuevo: el nuevo va delante
        # de sus iguales, así que los más antiguos salen antes.
        pos = bisect.bisect_left(self._elements, self._rank(record), 0, n, key=self._rank)
        # One contiguous shift of the tail; the trailing free slot absorbs it.
        self._elements.insert(pos, record)
        self._elements.pop()
        self._num_filled = n + 1

    def dequeue(self) -> Record:
        self._check_not_empty("dequeue")
        self._num_filled -= 1
        record = self._elements[self._num_filled]
        self._elements[self._num_filled] = None
        return record

    def peek(self) -> Record:
        self._check_not_empty("peek")
        return self._elements[self._num_filled - 1]

    def validate_internal_state(self) -> None:
        self._check_capacity()
        for i in range(1, self._num_filled):
            if self._rank(self._elements[i - 1]) > self._rank(self._elements[i]):
                raise InternalInvariantError("Array elements out of order", i)
