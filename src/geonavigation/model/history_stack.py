"""
Bounded History Stack
=====================
A stack capped at ``max_size`` entries: push/pop happen at the top, and when
the cap is exceeded the oldest entry (the bottom) is evicted.

A ``collections.deque`` with ``maxlen`` does exactly this: ``append`` on a
full deque drops the element at the opposite end.
"""
from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class BoundedStack(Generic[T]):
    """LIFO at the top, FIFO eviction at the bottom."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max(1, int(max_size))
        self._items: deque[T] = deque(maxlen=self.max_size)

    def push(self, item: T) -> Optional[T]:
        """
        Push ``item`` on top.

        Returns:
            The evicted oldest entry when the bound was exceeded, else None.
        """
        evicted = self._items[0] if len(self._items) == self.max_size else None
        self._items.append(item)
        return evicted

    def pop(self) -> T:
        """Remove and return the top entry. Raises IndexError when empty."""
        return self._items.pop()

    def peek(self) -> Optional[T]:
        """Return the top entry without removing it, or None when empty."""
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def oldest_first(self) -> list[T]:
        """Bottom-to-top snapshot (oldest entry first)."""
        return list(self._items)

    def top_first(self) -> list[T]:
        """Top-to-bottom snapshot (natural pop order)."""
        return list(reversed(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
