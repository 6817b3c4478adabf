"""Cache en memoria para traducciones.

Reglas:
- TTL fijo por entrada (por defecto 300 s) contado desde la inserción.
- Capacidad acotada (por defecto 1000); al excederla se expulsa la entrada
  usada menos recientemente.
- Sincronización interna con un lock: los llamantes nunca bloquean.
- No se persiste entre reinicios.
"""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable

DEFAULT_TTL_SECONDS = 300.0
DEFAULT_MAX_ENTRIES = 1000


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: str
    inserted_at: float


class TranslationCache:
    """TTL + LRU `str -> str` cache, safe to share between tasks and threads."""

    def __init__(
        self,
        *,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.inserted_at >= self._ttl

    def get(self, key: str) -> str | None:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._expired(entry, now):
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return entry.value

    def insert(self, key: str, value: str) -> None:
        now = self._clock()
        with self._lock:
            self._entries[key] = CacheEntry(key=key, value=value, inserted_at=now)
            self._entries.move_to_end(key)
            self._evict(now)

    def pop(self, key: str) -> str | None:
        """Remove and return a live entry (`None` if absent or expired)."""

        now = self._clock()
        with self._lock:
            entry = self._entries.pop(key, None)
        if entry is None or self._expired(entry, now):
            return None
        return entry.value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __len__(self) -> int:
        now = self._clock()
        with self._lock:
            self._purge_expired(now)
            return len(self._entries)

    def _evict(self, now: float) -> None:
        # Caller holds the lock.
        self._purge_expired(now)
        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)

    def _purge_expired(self, now: float) -> None:
        stale = [k for k, e in self._entries.items() if self._expired(e, now)]
        for key in stale:
            del self._entries[key]
