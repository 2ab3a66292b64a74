"""Read cache for REST responses, one instance per resource type."""

import copy
from typing import Any

from guac_sdk.exceptions import GuacCacheFullError


class ResponseCache:
    """Keyed store of previously fetched response payloads.

    Payloads are copied on the way in and out, so nothing a caller does to a
    returned value can change what later reads see.

    Only read operations call ``get`` and ``put``. Write operations call
    ``remove_all`` after they succeed, which drops every entry regardless of
    data source or key.
    """

    def __init__(self, name: str, *, max_entries: int | None = None) -> None:
        """Initialize an empty cache.

        Args:
            name: Resource type this cache belongs to (e.g. "users").
            max_entries: Maximum number of entries, or None for unbounded.
        """
        self.name = name
        self._max_entries = max_entries
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        """Return a copy of the payload cached under key, or None."""
        if key not in self._entries:
            return None
        return copy.deepcopy(self._entries[key])

    def put(self, key: str, payload: Any) -> None:
        """Store a copy of payload under key.

        Raises:
            GuacCacheFullError: The cache is at capacity and key is new.
        """
        if (
            self._max_entries is not None
            and key not in self._entries
            and len(self._entries) >= self._max_entries
        ):
            raise GuacCacheFullError(
                f"Cache {self.name!r} is full ({self._max_entries} entries)"
            )
        self._entries[key] = copy.deepcopy(payload)

    def remove_all(self) -> None:
        """Discard every entry."""
        self._entries = {}

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResponseCache(name={self.name!r}, entries={len(self._entries)})"


class CacheService:
    """Owns the per-resource-type caches of one client."""

    def __init__(self, *, max_entries: int | None = None) -> None:
        self._max_entries = max_entries
        self._caches: dict[str, ResponseCache] = {}

    def get(self, resource_type: str) -> ResponseCache:
        """Return the cache for resource_type, creating it on first use."""
        cache = self._caches.get(resource_type)
        if cache is None:
            cache = ResponseCache(resource_type, max_entries=self._max_entries)
            self._caches[resource_type] = cache
        return cache

    def remove_all(self) -> None:
        """Clear every resource type's cache."""
        for cache in self._caches.values():
            cache.remove_all()
