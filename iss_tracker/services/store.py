"""
Bounded, time-ordered position history shared by the tracker and the API.
"""
import threading
from collections import deque
from typing import Iterable, List, Optional

from ..schemas.position import Position


class PositionStore:
    """Fixed-capacity history, oldest first; evicts from the head.

    One writer (the tracker) and any number of readers. Every operation
    takes the lock for the duration of an in-memory copy only, so readers
    always see a state that existed at some instant.
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._positions: deque[Position] = deque()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, position: Position) -> None:
        with self._lock:
            self._positions.append(position)
            self._evict()

    def extend(self, positions: Iterable[Position]) -> None:
        batch = list(positions)
        with self._lock:
            self._positions.extend(batch)
            self._evict()

    def _evict(self) -> None:
        # caller holds the lock
        while len(self._positions) > self._capacity:
            self._positions.popleft()

    def snapshot_all(self) -> List[Position]:
        with self._lock:
            return list(self._positions)

    def latest(self) -> Optional[Position]:
        with self._lock:
            return self._positions[-1] if self._positions else None

    def count(self) -> int:
        with self._lock:
            return len(self._positions)

    def count_and_latest(self) -> tuple[int, Optional[Position]]:
        """Length and newest entry read under one lock acquisition."""
        with self._lock:
            return len(self._positions), (self._positions[-1] if self._positions else None)

    def clear(self) -> None:
        with self._lock:
            self._positions.clear()
