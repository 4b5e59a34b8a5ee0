# pqueues/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# Starting buffer size of every queue; callers must not rely on it.
INITIAL_CAPACITY = 10

# "max": highest priority leaves first. "min": lowest priority leaves first.
QueueMode = Literal["max", "min"]


@dataclass(frozen=True)
class Record:
    """
    Label + priority pair, the unit stored in the priority queues.

    Ordering comparisons look only at `priority`; equality compares both
    fields, so two records with the same priority are order-equivalent
    without being equal.
    """
    label: str
    priority: float

    def __lt__(self, other: Record) -> bool:
        return self.priority < other.priority

    def __le__(self, other: Record) -> bool:
        return self.priority <= other.priority

    def __gt__(self, other: Record) -> bool:
        return self.priority > other.priority

    def __ge__(self, other: Record) -> bool:
        return self.priority >= other.priority
