"""A thread-safe in-memory cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    val: bytes


class Cache:
    """Byte-value cache with a background reaper.

    Every ``interval`` seconds, entries older than ``interval`` are removed.
    Timestamps come from :func:`time.monotonic`.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = interval
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, stamping it with the current time."""
        with self._lock:
            self._entries[key] = _Entry(time.monotonic(), bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.val

    def reap(self, cutoff: float) -> None:
        """Remove every entry created before the monotonic time ``cutoff``."""
        with self._lock:
            expired = [k for k, v in self._entries.items() if v.created_at < cutoff]
            for key in expired:
                del self._entries[key]

    def close(self) -> None:
        """Stop the background reaper."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self.interval):
            self.reap(time.monotonic() - self.interval)