# pqueues/core/base.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .errors import EmptyQueueError, InternalInvariantError
from .types import INITIAL_CAPACITY, QueueMode, Record

logger = logging.getLogger(__name__)


def rank_key(mode: QueueMode) -> Callable[[Record], float]:
    """
    Clave de comparación interna: el registro con mayor rank sale primero.
    """
    if mode == "max":
        return lambda r: r.priority
    if mode == "min":
        return lambda r: -r.priority
    raise ValueError(f"Unknown queue mode: {mode!r} (expected 'max' or 'min')")


class PriorityQueue(ABC):
    """
    Shared contract of both backends.

    `dequeue()` always returns a record whose priority is extreme among the
    stored ones: maximal in "max" mode (the default), minimal in "min" mode.
    Storage is a fixed-size list of slots plus a fill count; when every slot
    is taken the list doubles, so N insertions copy O(N) slots in total.
    """

    def __init__(self, mode: QueueMode = "max", initial_capacity: int = INITIAL_CAPACITY) -> None:
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")
        self.mode: QueueMode = mode
        self._rank = rank_key(mode)
        self._elements: List[Optional[Record]] = [None] * initial_capacity
        self._num_filled = 0

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    @abstractmethod
    def enqueue(self, record: Record) -> None:
        ...

    @abstractmethod
    def dequeue(self) -> Record:
        ...

    @abstractmethod
    def peek(self) -> Record:
        ...

    @abstractmethod
    def validate_internal_state(self) -> None:
        """Raise InternalInvariantError if the buffer ordering is broken."""

    def size(self) -> int:
        return self._num_filled

    def is_empty(self) -> bool:
        return self.size() == 0

    def clear(self) -> None:
        """Empty the queue; the allocated capacity stays."""
        for i in range(self._num_filled):
            self._elements[i] = None
        self._num_filled = 0

    @property
    def capacity(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return self._num_filled

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mode={self.mode!r}, size={self._num_filled}, "
            f"capacity={self.capacity})"
        )

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    def _ensure_room(self) -> None:
        """Double the buffer if there is no free slot left."""
        if self._num_filled < len(self._elements):
            return
        old_capacity = len(self._elements)
        self._elements = self._elements + [None] * old_capacity
        logger.debug("%s grew from %d to %d slots", type(self).__name__, old_capacity, len(self._elements))

    def _check_not_empty(self, operation: str) -> None:
        if self._num_filled == 0:
            raise EmptyQueueError(f"Cannot {operation} empty pqueue")

    def _check_capacity(self) -> None:
        if self._num_filled > len(self._elements):
            raise InternalInvariantError("Too many elements in not enough space")


# Any backend class (or callable) that builds an empty queue; called with an
# optional `mode` keyword.
QueueFactory = Callable[..., PriorityQueue]
