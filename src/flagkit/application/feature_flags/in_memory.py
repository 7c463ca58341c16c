"""Application feature flags – InMemoryStorageBackend."""

from __future__ import annotations

import threading


class InMemoryStorageBackend:
    """Process-local :class:`StorageBackend` backed by a ``{key: value}`` dict.

    Used as the fallback medium when no cookie jar or persistent store is
    available.  Writes are serialised with a lock; the last write wins.
    """

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the stored values."""
        with self._lock:
            return dict(self._values)


__all__ = ["InMemoryStorageBackend"]
