"""Canonical Pydantic models shared across all httpconnection modules.

The models fall into three groups:

**Request parts** -- immutable values stored inside a descriptor:
    :class:`NameValue` and :class:`MultipartFile`.

**Enumerations** -- :class:`HTTPMethod`, :class:`RequestType`, and
    :class:`ContentType`.

**Configuration and hand-off models** -- :class:`CacheConfig`,
    :class:`RequestDefaults`, and :class:`RequestSnapshot`.

All models use Pydantic v2. Value models are declared ``frozen`` so they
can be hashed and compared, and so a snapshot handed to the execution
engine cannot be mutated afterwards.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_CACHE_SECONDS = 2**31 - 1
"""Upper bound for stored cache durations (largest signed 32-bit integer)."""


# --- Request parts ---


class NameValue(BaseModel):
    """A single ``(name, value)`` pair used for headers and parameters.

    Two pairs are equal when both the name and the value match exactly.
    Owning lists preserve insertion order and allow duplicate names.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str

    def as_tuple(self) -> tuple[str, str]:
        return (self.name, self.value)


class MultipartFile(BaseModel):
    """Reference to a file on disk to be attached as a multipart part.

    Only metadata is held here; the execution engine is responsible for
    reading and encoding the file contents.
    """

    model_config = ConfigDict(frozen=True)

    absolute_path: str = Field(description="Absolute path of the file on disk")
    file_name: str = Field(description="Base name sent as the part's filename")
    field_name: str = Field(description="Form field name of the part")
    content_type: str = Field(description="MIME type of the part")


# --- Enumerations ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods a descriptor can carry. Defaults to ``GET``."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class RequestType(str, enum.Enum):
    """Classification tag shared with the rest of the library.

    The descriptor only carries the value; the execution engine decides
    what, if anything, it means.
    """

    DEFAULT = "default"
    MULTIPART = "multipart"
    STREAM = "stream"


class ContentType(str, enum.Enum):
    """Frequently used ``Content-Type`` values."""

    JSON = "application/json"
    FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART_FORM_DATA = "multipart/form-data"
    TEXT_PLAIN = "text/plain"
    OCTET_STREAM = "application/octet-stream"


# --- Configuration / hand-off ---


class CacheConfig(BaseModel):
    """Serialisable form of a :class:`~httpconnection.cache.CachePolicy`."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=False, description="Cache the response of this call")
    renewal_seconds: int = Field(
        default=60,
        ge=0,
        le=MAX_CACHE_SECONDS,
        description="Seconds until a cached entry should be refreshed",
    )
    expire_seconds: int = Field(
        default=0,
        ge=0,
        le=MAX_CACHE_SECONDS,
        description="Extra seconds a stale entry may still be served",
    )


class RequestDefaults(BaseModel):
    """Defaults applied to descriptors built with
    :meth:`~httpconnection.request.HttpRequest.from_defaults`.

    Loaded by :func:`~httpconnection.config.load_defaults`.
    """

    method: HTTPMethod = HTTPMethod.GET
    content_type: Optional[str] = None
    headers: dict[str, str] = Field(default_factory=dict)
    request_type: RequestType = RequestType.DEFAULT
    cache: CacheConfig = Field(default_factory=CacheConfig)


class RequestSnapshot(BaseModel):
    """Immutable copy of a descriptor, taken at hand-off to the engine.

    Produced by :meth:`~httpconnection.request.HttpRequest.freeze`.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    method: HTTPMethod
    headers: tuple[NameValue, ...] = ()
    parameters: tuple[NameValue, ...] = ()
    body: Optional[str] = None
    content_type: Optional[str] = None
    files: tuple[MultipartFile, ...] = ()
    request_type: RequestType = RequestType.DEFAULT
    cache: CacheConfig = Field(default_factory=CacheConfig)
