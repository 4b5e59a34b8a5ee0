# pqueues/core/errors.py
from __future__ import annotations


class EmptyQueueError(IndexError):
    """Se lanza al hacer dequeue/peek sobre una cola vacía."""
    pass


class InternalInvariantError(RuntimeError):
    """
    The backing buffer broke its ordering guarantee.

    Only `validate_internal_state()` raises this; it signals a bug in the
    queue itself, never bad input.
    """

    def __init__(self, invariant: str, index: int | None = None) -> None:
        self.invariant = invariant
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"{invariant}{where}")
