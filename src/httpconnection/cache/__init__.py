"""Response cache policy for httpconnection.

This package provides :class:`CachePolicy`, the per-request description of
whether and for how long a cached response may stand in for a network call,
together with the :class:`ResponseStore` interface and :func:`cache_key`
helper used by execution engines that keep such a cache.

Storage itself is out of scope: engines plug in their own store.
"""

from httpconnection.cache.policy import CachePolicy, CacheState, TimeUnit
from httpconnection.cache.store import ResponseStore, cache_key

__all__ = ["CachePolicy", "CacheState", "TimeUnit", "ResponseStore", "cache_key"]
