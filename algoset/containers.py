"""Small stateful containers: an LRU cache, a min stack and a running median."""

from __future__ import annotations

import heapq
from collections import OrderedDict
from collections.abc import Hashable
from typing import Any


class LRUCache:
    """A fixed-size mapping that evicts the least recently used key.

    ``get`` returns -1 for a missing key.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> Any:
        """Return the value for ``key`` and mark it most recently used, or -1."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry when full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        current = min(self._items[-1][1], val) if self._items else val
        self._items.append((val, current))

    def pop(self) -> None:
        if not self._items:
            raise IndexError("pop from empty stack")
        self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]


class MedianFinder:
    """Keeps a running median of added numbers using two heaps."""

    def __init__(self) -> None:
        self._lower: list[int] = []  # max-heap stored as negated values
        self._upper: list[int] = []

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)

    def add_num(self, num: int) -> None:
        if not self._upper or num >= self._upper[0]:
            if len(self._upper) > len(self._lower):
                heapq.heappush(self._lower, -heapq.heappop(self._upper))
            heapq.heappush(self._upper, num)
        else:
            if len(self._lower) > len(self._upper):
                heapq.heappush(self._upper, -heapq.heappop(self._lower))
            heapq.heappush(self._lower, -num)

    def find_median(self) -> float:
        if not self._lower and not self._upper:
            raise IndexError("median of no numbers")
        if len(self._lower) > len(self._upper):
            return float(-self._lower[0])
        if len(self._lower) < len(self._upper):
            return float(self._upper[0])
        return (-self._lower[0] + self._upper[0]) / 2.0