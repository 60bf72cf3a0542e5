"""Bounded, expiring cache of recently seen task IDs."""

from __future__ import annotations

import asyncio
import time
from collections import deque
from typing import Callable

DEFAULT_EXPIRATION = 300.0


class TaskCache:
    """Async-safe queue of the most recent task IDs, oldest evicted first."""

    def __init__(
        self,
        capacity: int,
        expiration: float = DEFAULT_EXPIRATION,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.capacity = capacity
        self.expiration = expiration
        self._clock = clock
        self._entries: deque[tuple[str, float]] = deque()
        self._lock = asyncio.Lock()

    def _prune_expired(self) -> None:
        now = self._clock()
        self._entries = deque(
            (task_id, stamp)
            for task_id, stamp in self._entries
            if now - stamp < self.expiration
        )

    async def contains(self, task_id: str) -> bool:
        """Return True if the task ID is present and not expired."""
        async with self._lock:
            self._prune_expired()
            return any(entry_id == task_id for entry_id, _ in self._entries)

    async def insert(self, task_id: str) -> None:
        """Add a task ID, evicting the oldest entry when full."""
        async with self._lock:
            self._prune_expired()
            if any(entry_id == task_id for entry_id, _ in self._entries):
                return
            if len(self._entries) == self.capacity:
                self._entries.popleft()
            self._entries.append((task_id, self._clock()))

    def __len__(self) -> int:
        return len(self._entries)