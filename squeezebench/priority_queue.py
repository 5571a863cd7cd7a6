"""Binary min-heap keyed by integer priority."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class QueueItem(Generic[T]):
    value: T
    priority: int


class PriorityQueue(Generic[T]):
    """Min-heap of QueueItems.

    Items added with push are appended unordered; call init_heap before
    using heap_push and heap_pop.
    """

    def __init__(self) -> None:
        self._items: list[QueueItem[T]] = []

    def __len__(self) -> int:
        return len(self._items)

    def _less(self, i: int, j: int) -> bool:
        return self._items[i].priority < self._items[j].priority

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]

    def _up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(parent, j)
            j = parent

    def _down(self, i: int, n: int) -> None:
        while True:
            child = 2 * i + 1
            if child >= n:
                break
            right = child + 1
            if right < n and self._less(right, child):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child

    def push(self, item: QueueItem[T]) -> None:
        """Append an item without restoring heap order."""
        self._items.append(item)

    def init_heap(self) -> None:
        """Arrange the current items into heap order."""
        n = len(self._items)
        for i in range(n // 2 - 1, -1, -1):
            self._down(i, n)

    def heap_push(self, item: QueueItem[T]) -> None:
        self._items.append(item)
        self._up(len(self._items) - 1)

    def heap_pop(self) -> QueueItem[T]:
        """Remove and return the item with the lowest priority."""
        if not self._items:
            raise IndexError("pop from empty priority queue")
        last = len(self._items) - 1
        self._swap(0, last)
        self._down(0, last)
        return self._items.pop()