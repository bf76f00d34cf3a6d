"""
TTL cache for the distinct category list.

One instance is shared by every request of the process and handed to the
catalog store. Catalog writes call invalidate(); a load that started before an
invalidation never publishes its (stale) result.
"""

import logging
import threading
import time

logger = logging.getLogger(__name__)


class CategoryCache:

    def __init__(self, ttl_seconds: float = 300.0, clock=time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._data = None
        self._loaded_at = 0.0
        self._generation = 0

    def get(self):
        """Cached categories, or None when empty or expired."""
        with self._lock:
            if self._data is not None and self._clock() - self._loaded_at < self.ttl_seconds:
                return list(self._data)
            return None

    def set(self, categories, generation: int = None) -> bool:
        """Store categories. Returns False if an invalidation happened since `generation`."""
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            self._data = list(categories)
            self._loaded_at = self._clock()
            return True

    def invalidate(self):
        with self._lock:
            self._data = None
            self._loaded_at = 0.0
            self._generation += 1
        logger.info("Categories cache invalidated")

    def get_or_load(self, loader):
        """
        Return cached categories, or call loader() and cache its result.
        Returns (categories, source) where source is "cache" or "store".
        """
        cached = self.get()
        if cached is not None:
            logger.info("Serving %d categories from cache", len(cached))
            return cached, "cache"
        with self._lock:
            generation = self._generation
        categories = list(loader())
        if not self.set(categories, generation):
            logger.info("Catalog changed during category load; result not cached")
        return categories, "store"
