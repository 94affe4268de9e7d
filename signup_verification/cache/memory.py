"""In-process code storage."""

import threading
import time
from typing import Callable, Dict, Optional, Tuple

from signup_verification.cache.base import CodeStorage


class MemoryCodeStorage(CodeStorage):
    """
    Process-wide map of key to value.

    Entries vanish on restart and are not shared between uvicorn workers.
    The lock keeps the map consistent when the storage is used from
    several threads. Expired entries are dropped when read, and swept in
    bulk on write once the map reaches ``sweep_threshold`` keys.
    """

    name = "memory"

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sweep_threshold: int = 1024,
    ) -> None:
        self._clock = clock
        self._sweep_threshold = sweep_threshold
        self._lock = threading.Lock()
        self._entries: Dict[str, Tuple[str, Optional[float]]] = {}

    async def get(self, key: str) -> Optional[str]:
        """Get value from storage."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, deadline = entry
            if deadline is not None and self._clock() >= deadline:
                del self._entries[key]
                return None
            return value

    async def set(self, key: str, value: str, expire: Optional[int] = None) -> None:
        """Set value in storage."""
        now = self._clock()
        deadline = now + expire if expire else None
        with self._lock:
            if len(self._entries) >= self._sweep_threshold:
                self._purge_expired(now)
            self._entries[key] = (value, deadline)

    async def delete(self, key: str) -> None:
        """Delete value from storage."""
        with self._lock:
            self._entries.pop(key, None)

    def _purge_expired(self, now: float) -> None:
        expired = [
            key
            for key, (_, deadline) in self._entries.items()
            if deadline is not None and now >= deadline
        ]
        for key in expired:
            del self._entries[key]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
