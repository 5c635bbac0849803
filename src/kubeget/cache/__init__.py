"""In-memory caching of discovery data."""

from .discovery import CachedDiscoveryClient
from .keys import CacheKeys

__all__ = [
    "CacheKeys",
    "CachedDiscoveryClient",
]
