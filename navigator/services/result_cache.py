import hashlib
import threading
import time

import orjson
from cachetools import TLRUCache

from navigator.core.logger import logger
from navigator.core.models import SelectionConfig, settings


def fingerprint(media_type: str, media_id: str, config: SelectionConfig):
    content = orjson.dumps(
        {"type": media_type, "id": media_id, "config": config.model_dump()},
        option=orjson.OPT_SORT_KEYS,
    )
    return hashlib.md5(content, usedforsecurity=False).hexdigest()


class SelectionStore(TLRUCache):
    def popitem(self):
        key, value = super().popitem()
        logger.log("CACHE", f"Evicted {key} (capacity {int(self.maxsize)})")
        return key, value


class ResultCache:
    """
    Bounded LRU store of ranked selections with a fixed per-entry lifetime.

    Expiry is decided at insertion time and never extended by reads. Empty
    selections get `empty_ttl`, so a provider outage is only masked for that
    long instead of the full `ttl`. cachetools is not thread-safe, so every
    access goes through the lock.
    """

    def __init__(
        self,
        max_entries: int = 1024,
        ttl: float = 900,
        empty_ttl: float = None,
        clock=time.monotonic,
    ):
        self.max_entries = max_entries
        self.ttl = ttl
        self.empty_ttl = ttl if empty_ttl is None else empty_ttl
        self.clock = clock
        self._entries = self._new_store()
        self._lock = threading.Lock()

    def _new_store(self):
        return SelectionStore(
            maxsize=self.max_entries, ttu=self._expires_at, timer=self.clock
        )

    def _expires_at(self, _key, entry, now):
        empty, _value = entry
        return now + (self.empty_ttl if empty else self.ttl)

    def get(self, key: str):
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry[1]

    def put(self, key: str, value, empty: bool = False):
        with self._lock:
            self._entries[key] = (empty, value)

    def clear(self):
        with self._lock:
            self._entries = self._new_store()

    def __len__(self):
        with self._lock:
            self._entries.expire()
            return len(self._entries)


result_cache = ResultCache(
    max_entries=settings.RESULT_CACHE_MAX_ENTRIES,
    ttl=settings.RESULT_CACHE_TTL,
    empty_ttl=settings.RESULT_CACHE_EMPTY_TTL,
)
