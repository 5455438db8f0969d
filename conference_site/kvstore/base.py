"""Key-value store contract shared by the storage backends."""
from __future__ import annotations

import threading
from typing import Dict, Optional, Protocol, runtime_checkable


class StoreError(RuntimeError):
    """Raised when the backing store cannot be read or written."""


@runtime_checkable
class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def ping(self) -> bool:
        ...


class MemoryKeyValueStore:
    """Process-local store for development and tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def ping(self) -> bool:
        return True


__all__ = ["StoreError", "KeyValueStore", "MemoryKeyValueStore"]
