"""httpconnection -- request descriptors for an HTTP client library.

This package assembles everything needed to issue a single HTTP call --
method, URL, headers, parameters, body, multipart file references -- and
attaches an optional response cache policy, before the finished descriptor
is handed to a separate execution engine that performs the network I/O.

Typical usage::

    from httpconnection import HttpRequest, TimeUnit

    request = (
        HttpRequest()
        .set_url("https://api.example.com/v1/items")
        .add_header("Authorization", "Bearer t")
        .set_cache_response(True)
        .set_cache_renewal_time(2, TimeUnit.MINUTES)
    )
    engine.execute(request)

Modules:
    request: The :class:`HttpRequest` descriptor.
    cache: Cache policy, store interface, and cache keys.
    models: Pydantic models and enums shared across the package.
    config: Loading and saving of descriptor defaults.
    exceptions: Exception hierarchy.
    transport: Execution engine interface.
"""

from httpconnection.cache import CachePolicy, CacheState, ResponseStore, TimeUnit, cache_key
from httpconnection.exceptions import (
    ConfigError,
    FileNotFoundError_,
    HttpConnectionError,
    InvalidArgumentError,
    MalformedURLError,
)
from httpconnection.models import (
    MAX_CACHE_SECONDS,
    CacheConfig,
    ContentType,
    HTTPMethod,
    MultipartFile,
    NameValue,
    RequestDefaults,
    RequestSnapshot,
    RequestType,
)
from httpconnection.request import HttpRequest
from httpconnection.transport import RequestExecutor

__version__ = "0.1.0"

__all__ = [
    "CacheConfig",
    "CachePolicy",
    "CacheState",
    "ConfigError",
    "ContentType",
    "FileNotFoundError_",
    "HTTPMethod",
    "HttpConnectionError",
    "HttpRequest",
    "InvalidArgumentError",
    "MAX_CACHE_SECONDS",
    "MalformedURLError",
    "MultipartFile",
    "NameValue",
    "RequestDefaults",
    "RequestExecutor",
    "RequestSnapshot",
    "RequestType",
    "ResponseStore",
    "TimeUnit",
    "cache_key",
]
