import logging
import threading
from typing import Callable, Optional

from config import engine_config
from core.dictionary import DictionaryIndex
from core.time_provider import SystemTimeProvider, TimeProvider

logger = logging.getLogger(__name__)


class DictionaryCache:
    """
    Cache of dictionary indexes keyed by source path. Engines share the
    module-level default_cache unless given their own.

    Lifecycle per key: build, read many, expire after ttl_s, rebuild on the
    next get(). Only one rebuild runs at a time for a given key; callers that
    miss while it runs wait for it and reuse its result. A finished index is
    published with a single dict assignment, so readers never see a partial one.
    Failed builds are not remembered: the next get() tries again.
    """

    def __init__(
        self,
        ttl_s: float = engine_config.DICTIONARY_CACHE_TTL_S,
        time_provider: Optional[TimeProvider] = None,
        loader: Callable[[str], DictionaryIndex] = DictionaryIndex.load
    ) -> None:
        self._ttl_ms = ttl_s * 1000
        self._time = time_provider or SystemTimeProvider()
        self._loader = loader
        self._entries: dict[str, tuple[DictionaryIndex, int]] = {}
        self._build_locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, source: str) -> threading.Lock:
        with self._locks_guard:
            return self._build_locks.setdefault(source, threading.Lock())

    def _fresh_entry(self, source: str) -> Optional[DictionaryIndex]:
        entry = self._entries.get(source)
        if entry is None:
            return None
        index, built_at = entry
        if self._time.get_ticks() - built_at >= self._ttl_ms:
            return None
        return index

    def is_fresh(self, source: str) -> bool:
        return self._fresh_entry(source) is not None

    def get(self, source: str) -> DictionaryIndex:
        index = self._fresh_entry(source)
        if index is not None:
            return index

        with self._lock_for(source):
            # Another caller may have rebuilt it while we waited
            index = self._fresh_entry(source)
            if index is not None:
                return index

            logger.info(f"Dictionary cache miss for {source}, rebuilding")
            index = self._loader(source)
            self._entries[source] = (index, self._time.get_ticks())
            return index

    def invalidate(self, source: Optional[str] = None) -> None:
        """Drop the cached index for source, or every cached index."""
        if source is None:
            logger.info("Invalidating all cached dictionaries")
            self._entries = {}
        else:
            logger.info(f"Invalidating cached dictionary {source}")
            self._entries.pop(source, None)


# Shared by every WordEngine created without an explicit cache
default_cache = DictionaryCache()
