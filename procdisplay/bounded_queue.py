"""Fixed-capacity history queue and the CPU and memory samples stored in it."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

_BYTES_PER_GB = 1_000_000_000


class BoundedQueue(Generic[T]):
    """A FIFO queue that drops its oldest item once it reaches capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[T] = deque()

    def add_item(self, item: T) -> None:
        """Append ``item``, evicting the oldest items to stay within capacity."""
        while self._items and len(self._items) >= self._capacity:
            self._items.popleft()
        self._items.append(item)

    def front(self) -> Optional[T]:
        """The oldest item, or None when empty."""
        return self._items[0] if self._items else None

    def back(self) -> Optional[T]:
        """The newest item, or None when empty."""
        return self._items[-1] if self._items else None

    def capacity(self) -> int:
        return self._capacity

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self._capacity}, items={list(self._items)!r})"


@dataclass(frozen=True)
class CpuItem:
    """One usage sample of a CPU; id 0 is reserved for global usage."""

    id: int = 0
    usage: float = 0.0
    frequency: int = 0
    name: str = ""
    brand: str = ""
    vendor_id: str = ""

    def global_usage(self) -> float:
        return self.usage


@dataclass(frozen=True)
class MemoryItem:
    """One memory sample, in bytes."""

    total_memory: int = 0
    used_memory: int = 0
    free_memory: int = 0
    available_memory: int = 0

    def total_memory_gb(self) -> float:
        return self.total_memory / _BYTES_PER_GB

    def used_memory_gb(self) -> float:
        return self.used_memory / _BYTES_PER_GB

    def free_memory_gb(self) -> float:
        return self.free_memory / _BYTES_PER_GB

    def available_memory_gb(self) -> float:
        return self.available_memory / _BYTES_PER_GB