# pqueues/core/heap_queue.py
from __future__ import annotations

from typing import Optional

from .base import PriorityQueue
from .errors import InternalInvariantError
from .types import Record


class HeapPriorityQueue(PriorityQueue):
    """
    Binary heap stored in the slot buffer.

    Children of slot i live at 2i+1 and 2i+2, its parent at (i-1)//2.
    The root holds the record that leaves next (highest priority in "max"
    mode, lowest in "min" mode); enqueue and dequeue are O(log n).
    """

    def enqueue(self, record: Record) -> None:
        self._ensure_room()
        child = self._num_filled
        self._elements[child] = record
        self._num_filled += 1
        self._sift_up(child)

    def dequeue(self) -> Record:
        self._check_not_empty("dequeue")
        root = self._elements[0]
        last = self._num_filled - 1
        self._elements[0] = self._elements[last]
        self._elements[last] = None
        self._num_filled = last
        if self._num_filled > 1:
            self._sift_down(0)
        return root

    def peek(self) -> Record:
        self._check_not_empty("peek")
        return self._elements[0]

    def validate_internal_state(self) -> None:
        """Every parent must rank at least as high as each of its children."""
        self._check_capacity()
        for i in range(self._num_filled):
            for child in (self._left_child_index(i), self._right_child_index(i)):
                if child is not None and self._outranks(child, i):
                    raise InternalInvariantError("Heap property violated", i)

    # ------------------------------------------------------------------
    # Sift operations
    # ------------------------------------------------------------------

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = self._parent_index(index)
            if not self._outranks(index, parent):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        while True:
            child = self._higher_child_index(index)
            # Sin hijo izquierdo no hay derecho: hemos llegado a una hoja.
            if child is None or not self._outranks(child, index):
                break
            self._swap(index, child)
            index = child

    # ------------------------------------------------------------------
    # Index arithmetic
    # ------------------------------------------------------------------

    def _outranks(self, i: int, j: int) -> bool:
        return self._rank(self._elements[i]) > self._rank(self._elements[j])

    def _swap(self, i: int, j: int) -> None:
        self._elements[i], self._elements[j] = self._elements[j], self._elements[i]

    @staticmethod
    def _parent_index(index: int) -> int:
        return (index - 1) // 2

    def _left_child_index(self, index: int) -> Optional[int]:
        child = 2 * index + 1
        return child if child < self._num_filled else None

    def _right_child_index(self, index: int) -> Optional[int]:
        child = 2 * index + 2
        return child if child < self._num_filled else None

    def _higher_child_index(self, index: int) -> Optional[int]:
        """Index of the child that should move up first, or None for a leaf."""
        left = self._left_child_index(index)
        if left is None:
            return None
        right = self._right_child_index(index)
        if right is not None and self._outranks(right, left):
            return right
        return left
