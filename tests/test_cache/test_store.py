"""Tests for cache keys and the ResponseStore interface."""

from __future__ import annotations

from typing import Any, Optional

import pytest

from httpconnection.cache import ResponseStore, cache_key
from httpconnection.exceptions import InvalidArgumentError
from httpconnection.request import HttpRequest


class _DictStore:
    """Minimal in-memory store satisfying the ResponseStore protocol."""

    def __init__(self) -> None:
        self.entries: dict[str, Any] = {}

    def get(self, key: str) -> Optional[Any]:
        return self.entries.get(key)

    def set(self, key: str, value: Any, expire: Optional[float] = None) -> None:
        self.entries[key] = value

    def delete(self, key: str) -> None:
        self.entries.pop(key, None)


def _request(url: str = "https://api.example.com/users") -> HttpRequest:
    return HttpRequest().set_url(url)


class TestCacheKey:
    def test_identical_requests_share_key(self) -> None:
        first = _request().add_parameter("page", 1)
        second = _request().add_parameter("page", "1")
        assert cache_key(first) == cache_key(second)

    def test_key_is_sha256_hex(self) -> None:
        key = cache_key(_request())
        assert len(key) == 64
        int(key, 16)

    def test_url_changes_key(self) -> None:
        assert cache_key(_request()) != cache_key(_request("https://api.example.com/orders"))

    def test_method_changes_key(self) -> None:
        assert cache_key(_request()) != cache_key(_request().set_method("POST"))

    def test_parameter_order_changes_key(self) -> None:
        first = _request().add_parameter("a", 1).add_parameter("b", 2)
        second = _request().add_parameter("b", 2).add_parameter("a", 1)
        assert cache_key(first) != cache_key(second)

    def test_headers_do_not_change_key(self) -> None:
        assert cache_key(_request()) == cache_key(_request().add_header("X-Trace", "1"))

    def test_snapshot_matches_descriptor(self) -> None:
        request = _request().add_parameter("q", "x")
        assert cache_key(request.freeze()) == cache_key(request)

    def test_requires_url(self) -> None:
        with pytest.raises(InvalidArgumentError):
            cache_key(HttpRequest())


class TestResponseStore:
    def test_dict_store_satisfies_protocol(self) -> None:
        assert isinstance(_DictStore(), ResponseStore)

    def test_plain_object_does_not(self) -> None:
        assert not isinstance(object(), ResponseStore)

    def test_engine_style_lookup(self) -> None:
        """Store and fetch under the descriptor's key only when cacheable."""
        store = _DictStore()
        request = _request().set_cache_response(True)
        if request.cache_policy.is_cacheable(request.get_method()):
            store.set(cache_key(request), {"status_code": 200}, expire=request.get_cache_renewal_time())
        assert store.get(cache_key(request)) == {"status_code": 200}

        store.delete(cache_key(request))
        assert store.get(cache_key(request)) is None
