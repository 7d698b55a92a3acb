"""Boundary between cache policies and the response store.

Persisting responses is the job of the execution engine's cache store,
which this package does not implement. :class:`ResponseStore` describes
the interface such a store exposes, and :func:`cache_key` derives the
request identity under which responses are filed.

Cache keys are SHA-256 hashes of ``METHOD|URL|params`` so that identical
requests always resolve to the same entry.
"""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING, Any, Optional, Protocol, Union, runtime_checkable

from httpconnection.exceptions import InvalidArgumentError
from httpconnection.models import RequestSnapshot

if TYPE_CHECKING:
    from httpconnection.request import HttpRequest


@runtime_checkable
class ResponseStore(Protocol):
    """Key/value store holding cached responses, keyed by :func:`cache_key`."""

    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any, expire: Optional[float] = None) -> Any:
        ...

    def delete(self, key: str) -> Any:
        ...


def cache_key(request: Union[HttpRequest, RequestSnapshot]) -> str:
    """Generate a cache key from the method, URL, and parameters of *request*.

    Parameters are hashed in insertion order; duplicate names are kept.

    Raises:
        InvalidArgumentError: If the request has no URL.
    """
    if isinstance(request, RequestSnapshot):
        method, url, params = request.method, request.url, request.parameters
    else:
        method, url, params = request.get_method(), request.get_url(), request.get_parameters()
    if not url:
        raise InvalidArgumentError("Cannot derive a cache key for a request without a URL")

    parts = [method.value, url]
    if params:
        parts.append(json.dumps([p.as_tuple() for p in params]))
    raw = "|".join(parts)
    return hashlib.sha256(raw.encode()).hexdigest()
