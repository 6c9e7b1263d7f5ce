"""Key-value stores used to persist per-browser values.

The chat only needs one key (the session identifier), but the store is
injected so tests and alternative hosts can swap the backend.
"""
import threading
from abc import ABC, abstractmethod
from typing import MutableMapping, Optional


class KeyValueStore(ABC):
    """Abstract string key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None if the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value under key."""
        pass


class MemoryKeyValueStore(KeyValueStore):
    """Process-local store, mostly for tests and single-user runs."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._lock = threading.Lock()
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value


class MappingKeyValueStore(KeyValueStore):
    """Adapter over any mutable mapping.

    Used with NiceGUI's ``app.storage.user``, which is scoped to the
    browser cookie and persisted on the server.
    """

    def __init__(self, mapping: MutableMapping):
        self._mapping = mapping

    def get(self, key: str) -> Optional[str]:
        value = self._mapping.get(key)
        return str(value) if value is not None else None

    def set(self, key: str, value: str) -> None:
        self._mapping[key] = value
