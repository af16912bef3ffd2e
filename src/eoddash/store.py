"""Key-value store backends: JSON files on disk, in-memory with TTL, and a no-op.

The store replaces browser local storage: anything the dashboard keeps
between loads goes through an injected ``KeyValueStore``. Values must be
JSON-serializable.
"""

from __future__ import annotations

import json
import re
import time
from abc import ABC, abstractmethod
from collections import OrderedDict
from pathlib import Path
from typing import Any


class KeyValueStore(ABC):
    """Abstract key-value interface.

    Contract:
        ``get`` returns the stored value, or None on a miss.
        ``set`` overwrites any existing value for the key.
        ``delete`` of a missing key is a no-op.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the stored value, or None on miss."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a value under key."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...


class NullStore(KeyValueStore):
    """No-op store. Always misses."""

    def get(self, key):  # type: ignore[override]
        return None

    def set(self, key, value):  # type: ignore[override]
        pass

    def delete(self, key):  # type: ignore[override]
        pass

    def clear(self):
        pass


class JsonFileStore(KeyValueStore):
    """Disk-based store, one JSON document per key.

    Storage layout: ``{base_path}/{key}.json``
    """

    _UNSAFE = re.compile(r"[^A-Za-z0-9_.-]")

    def __init__(self, base_path: Path | str) -> None:
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _file_path(self, key: str) -> Path:
        return self.base_path / f"{self._UNSAFE.sub('_', key)}.json"

    def get(self, key: str) -> Any | None:
        fp = self._file_path(key)
        if not fp.exists():
            return None
        try:
            return json.loads(fp.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return None

    def set(self, key: str, value: Any) -> None:
        fp = self._file_path(key)
        tmp = fp.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(value, sort_keys=True), encoding="utf-8")
        tmp.replace(fp)

    def delete(self, key: str) -> None:
        self._file_path(key).unlink(missing_ok=True)

    def clear(self) -> None:
        for fp in self.base_path.glob("*.json"):
            fp.unlink()


class MemoryStore(KeyValueStore):
    """In-memory store with optional TTL.

    Uses LRU eviction when ``max_entries`` is exceeded. ``ttl_seconds=None``
    disables expiry.
    """

    def __init__(self, ttl_seconds: float | None = None, max_entries: int = 1000) -> None:
        self.ttl = ttl_seconds
        self.max_entries = max_entries
        self._store: OrderedDict[str, tuple[float, Any]] = OrderedDict()

    def _expired(self, ts: float, now: float) -> bool:
        return self.ttl is not None and now - ts > self.ttl

    def _evict_lru(self) -> None:
        while len(self._store) > self.max_entries:
            self._store.popitem(last=False)

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        ts, value = entry
        if self._expired(ts, time.monotonic()):
            del self._store[key]
            return None
        self._store.move_to_end(key)  # refresh LRU position
        return value

    def set(self, key: str, value: Any) -> None:
        self._store[key] = (time.monotonic(), value)
        self._store.move_to_end(key)
        self._evict_lru()

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def clear(self) -> None:
        self._store.clear()


def create_store(
    backend: str,
    base_path: Path | str = "data/cache",
    ttl_seconds: float | None = None,
) -> KeyValueStore:
    """Build a store by backend name: "json", "memory", or "none"."""
    if backend == "json":
        return JsonFileStore(base_path)
    if backend == "memory":
        return MemoryStore(ttl_seconds=ttl_seconds)
    if backend == "none":
        return NullStore()
    raise ValueError(f"Unknown store backend: {backend!r}. Valid: json, memory, none")
