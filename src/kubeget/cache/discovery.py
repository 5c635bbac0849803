"""Discovery snapshot provider with TTL caching and explicit refresh."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from cachetools import TTLCache

from kubeget.cache.keys import CacheKeys
from kubeget.core.exceptions import GroupDiscoveryError
from kubeget.core.models import APIResourceList
from kubeget.providers.base import DiscoverySnapshotProvider

logger = logging.getLogger(__name__)

# Cached value: the snapshot plus the messages of any groups that failed
CachedSnapshot = tuple[list[APIResourceList], dict[str, str]]


class CachedDiscoveryClient(DiscoverySnapshotProvider):
    """
    Serves a delegate's snapshot from cache until it expires.

    Invalidation policy:
    - the snapshot is refetched once `ttl` seconds have passed;
    - `invalidate()` drops it immediately (e.g. after installing a CRD);
    - a ttl of 0 disables caching entirely.

    Failed fetches are never cached. A partial snapshot (some groups failed)
    is cached like a complete one and re-raised as GroupDiscoveryError on
    every hit until it expires or is invalidated.
    """

    def __init__(
        self,
        delegate: DiscoverySnapshotProvider,
        cache: TTLCache | None = None,
        *,
        ttl: float = 600.0,
        host: str = "default",
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._delegate = delegate
        self._ttl = ttl
        self._cache = cache if cache is not None else TTLCache(maxsize=16, ttl=ttl, timer=timer)
        self._lock = threading.Lock()
        self._key = CacheKeys.preferred_resources(host)

    @property
    def fresh(self) -> bool:
        """Whether a cached snapshot is currently being served."""
        with self._lock:
            return self._key in self._cache

    def preferred_resources(self) -> list[APIResourceList]:
        if self._ttl <= 0:
            return self._delegate.preferred_resources()

        with self._lock:
            cached: CachedSnapshot | None = self._cache.get(self._key)

        if cached is None:
            logger.debug(f"Discovery cache miss for {self._key}")
            cached = self._fetch()
            with self._lock:
                self._cache[self._key] = cached

        snapshot, failed_groups = cached
        if failed_groups:
            raise GroupDiscoveryError(snapshot, failed_groups)
        return snapshot

    def invalidate(self) -> None:
        """Drop the cached snapshot so the next call refetches it."""
        with self._lock:
            dropped = self._cache.pop(self._key, None)
        if dropped is not None:
            logger.info("Discovery cache invalidated")

    def _fetch(self) -> CachedSnapshot:
        try:
            return self._delegate.preferred_resources(), {}
        except GroupDiscoveryError as e:
            return e.snapshot, e.failed_groups
