"""HTTP request descriptor with a fluent builder surface.

:class:`HttpRequest` accumulates everything needed to describe one HTTP
call before it is handed to an execution engine:

- **URL** -- validated on assignment; must be an absolute ``http://`` or
  ``https://`` URL that :class:`httpx.URL` can parse.
- **Method** -- one of :class:`~httpconnection.models.HTTPMethod`,
  ``GET`` by default.
- **Headers and parameters** -- ordered lists of
  :class:`~httpconnection.models.NameValue`; duplicate names are allowed.
- **Body and content type** -- free-form strings, not cross-checked.
- **Multipart files** -- :class:`~httpconnection.models.MultipartFile`
  references; file contents are never read here.
- **Cache policy** -- an embedded
  :class:`~httpconnection.cache.CachePolicy`.

Only the URL and the cache timers are validated. Everything else is
caller-trusted data; protocol-level correctness (header name legality,
body encoding) is the execution engine's responsibility.

A descriptor is built on one thread and should be treated as read-only
once handed off. :meth:`HttpRequest.freeze` returns an immutable
:class:`~httpconnection.models.RequestSnapshot` for engines that want
that guarantee enforced.

Example::

    request = (
        HttpRequest()
        .set_url("https://api.example.com/v1/users")
        .set_method(HTTPMethod.GET)
        .add_header("Authorization", "Bearer t")
        .add_parameter("page", 2)
        .set_cache_response(True)
        .set_cache_renewal_time(5, TimeUnit.MINUTES)
    )
"""

from __future__ import annotations

import logging
import mimetypes
import os
from pathlib import Path
from typing import Any, Optional, Union

import httpx

from httpconnection.cache.policy import CachePolicy, TimeUnit
from httpconnection.exceptions import FileNotFoundError_, InvalidArgumentError, MalformedURLError
from httpconnection.models import (
    ContentType,
    HTTPMethod,
    MultipartFile,
    NameValue,
    RequestDefaults,
    RequestSnapshot,
    RequestType,
)

logger = logging.getLogger(__name__)

_ALLOWED_PREFIXES = ("http://", "https://")


def _validate_url(url: Any) -> str:
    """Return *url* if it is a well-formed absolute http(s) URL.

    Raises:
        InvalidArgumentError: If *url* is empty or lacks an http(s) prefix.
        MalformedURLError: If *url* fails structural parsing.
    """
    if not url:
        raise InvalidArgumentError("Request URL cannot be either null or empty")
    if not isinstance(url, str):
        raise InvalidArgumentError(f"Request URL must be a string, got {type(url).__name__}")
    if not url.startswith(_ALLOWED_PREFIXES):
        raise InvalidArgumentError("Specify either http:// or https:// as protocol")

    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, UnicodeError, ValueError) as exc:
        raise MalformedURLError(f"Malformed URL {url!r}: {exc}", url=url) from exc
    if not parsed.host:
        raise MalformedURLError(f"Malformed URL {url!r}: missing host", url=url)
    return url


def _name_value(name: Any, value: Any, kind: str) -> NameValue:
    """Build a :class:`NameValue`, rejecting non-string names and values."""
    if not isinstance(name, str) or not isinstance(value, str):
        raise InvalidArgumentError(
            f"{kind} name and value must be strings, got {name!r}: {value!r}"
        )
    return NameValue(name=name, value=value)


class HttpRequest:
    """Descriptor of a single HTTP call.

    Every mutator returns the descriptor so calls can be chained. Failed
    validation raises immediately and leaves the descriptor unchanged.
    """

    def __init__(self) -> None:
        self._url: Optional[str] = None
        self._method: HTTPMethod = HTTPMethod.GET
        self._headers: list[NameValue] = []
        self._parameters: list[NameValue] = []
        self._body: Optional[str] = None
        self._content_type: Optional[str] = None
        self._files: list[MultipartFile] = []
        self._request_type: RequestType = RequestType.DEFAULT
        self._cache_policy = CachePolicy()

    @classmethod
    def from_defaults(cls, defaults: RequestDefaults) -> HttpRequest:
        """Create a descriptor pre-populated from *defaults*.

        Args:
            defaults: Typically the result of
                :func:`~httpconnection.config.load_defaults`.
        """
        request = cls()
        request.set_method(defaults.method)
        request.set_content_type(defaults.content_type)
        request.set_request_type(defaults.request_type)
        for name, value in defaults.headers.items():
            request.add_header(name, value)
        request._cache_policy = CachePolicy.from_config(defaults.cache)
        return request

    # ------------------------------------------------------------------ #
    # URL and method
    # ------------------------------------------------------------------ #

    def set_url(self, url: str) -> HttpRequest:
        """Validate and store the request URL.

        Raises:
            InvalidArgumentError: If *url* is ``None``/empty or does not
                start with ``http://`` or ``https://``.
            MalformedURLError: If *url* is not a structurally valid URL.
        """
        try:
            self._url = _validate_url(url)
        except (InvalidArgumentError, MalformedURLError) as exc:
            logger.debug("Rejected request URL %r: %s", url, exc)
            raise
        return self

    def get_url(self) -> Optional[str]:
        return self._url

    def set_method(self, method: Union[HTTPMethod, str, None]) -> HttpRequest:
        """Set the HTTP method. ``None`` keeps the current method.

        Args:
            method: An :class:`HTTPMethod` or its name (case-insensitive).

        Raises:
            InvalidArgumentError: If *method* names an unsupported method.
        """
        if method is None:
            return self
        if isinstance(method, HTTPMethod):
            self._method = method
            return self
        try:
            self._method = HTTPMethod(str(method).upper())
        except ValueError as exc:
            raise InvalidArgumentError(f"Unsupported HTTP method: {method!r}") from exc
        return self

    def get_method(self) -> HTTPMethod:
        return self._method

    # ------------------------------------------------------------------ #
    # Headers
    # ------------------------------------------------------------------ #

    def add_header(self, name: str, value: str) -> HttpRequest:
        """Append a header. Repeated names are kept as separate entries.

        Raises:
            InvalidArgumentError: If *name* or *value* is not a string.
        """
        self._headers.append(_name_value(name, value, "Header"))
        return self

    def get_headers(self) -> list[NameValue]:
        return self._headers

    def remove_header(self, name: str, value: Optional[str] = None) -> HttpRequest:
        """Remove the first header named *name* (and equal to *value*, if given).

        Does nothing when no header matches.
        """
        for index, header in enumerate(self._headers):
            if header.name != name:
                continue
            if value is not None and header.value != value:
                continue
            del self._headers[index]
            break
        return self

    # ------------------------------------------------------------------ #
    # Parameters, body, content type
    # ------------------------------------------------------------------ #

    def add_parameter(self, name: str, value: Any) -> HttpRequest:
        """Append a parameter, storing ``str(value)``.

        A value whose string conversion raises is dropped without error.

        Raises:
            InvalidArgumentError: If *name* is not a string.
        """
        if not isinstance(name, str):
            raise InvalidArgumentError(f"Parameter name must be a string, got {name!r}")
        try:
            text = str(value)
        except Exception as exc:
            logger.debug("Dropping parameter %r: cannot convert value to str (%s)", name, exc)
            return self
        self._parameters.append(_name_value(name, text, "Parameter"))
        return self

    def get_parameters(self) -> list[NameValue]:
        return self._parameters

    def add_body(self, body: Optional[str]) -> HttpRequest:
        self._body = body
        return self

    def get_body(self) -> Optional[str]:
        return self._body

    def set_content_type(self, content_type: Union[ContentType, str, None]) -> HttpRequest:
        if isinstance(content_type, ContentType):
            content_type = content_type.value
        self._content_type = content_type
        return self

    def get_content_type(self) -> Optional[str]:
        return self._content_type

    # ------------------------------------------------------------------ #
    # Multipart files
    # ------------------------------------------------------------------ #

    def add_file(
        self,
        file: Union[str, os.PathLike],
        field_name: str,
        content_type: Optional[str] = None,
    ) -> HttpRequest:
        """Attach a file on disk as a multipart part.

        Only the file's absolute path and base name are recorded; its
        contents are read later by the execution engine.

        Args:
            file: Path to an existing regular file.
            field_name: Form field name for the part.
            content_type: MIME type of the part. Guessed from the file
                name when omitted, falling back to
                ``application/octet-stream``.

        Raises:
            FileNotFoundError_: If *file* does not name an existing file.
        """
        try:
            path = Path(os.fspath(file))
        except TypeError as exc:
            raise InvalidArgumentError(f"Expected a path, got {file!r}") from exc
        if not path.is_file():
            raise FileNotFoundError_(f"{path} (No such file)", path=str(path))

        if content_type is None:
            content_type = mimetypes.guess_type(path.name)[0] or ContentType.OCTET_STREAM.value
        self._files.append(
            MultipartFile(
                absolute_path=str(path.absolute()),
                file_name=path.name,
                field_name=field_name,
                content_type=content_type,
            )
        )
        return self

    def get_files(self) -> list[MultipartFile]:
        return self._files

    # ------------------------------------------------------------------ #
    # Request type
    # ------------------------------------------------------------------ #

    def set_request_type(self, request_type: RequestType) -> HttpRequest:
        self._request_type = request_type
        return self

    def get_request_type(self) -> RequestType:
        return self._request_type

    # ------------------------------------------------------------------ #
    # Cache policy
    # ------------------------------------------------------------------ #

    @property
    def cache_policy(self) -> CachePolicy:
        """The embedded cache policy."""
        return self._cache_policy

    def set_cache_response(self, enabled: bool) -> HttpRequest:
        """Cache this call's response. Honoured by the engine for GET only."""
        self._cache_policy.set_cache_response(enabled)
        return self

    def is_cache_response(self) -> bool:
        return self._cache_policy.is_cache_response()

    def set_cache_renewal_time(
        self, value: Union[int, float], unit: Union[TimeUnit, str] = TimeUnit.SECONDS
    ) -> HttpRequest:
        """See :meth:`CachePolicy.set_cache_renewal_time`."""
        self._cache_policy.set_cache_renewal_time(value, unit)
        return self

    def set_cache_expire_time(
        self, value: Union[int, float], unit: Union[TimeUnit, str] = TimeUnit.SECONDS
    ) -> HttpRequest:
        """See :meth:`CachePolicy.set_cache_expire_time`."""
        self._cache_policy.set_cache_expire_time(value, unit)
        return self

    def get_cache_renewal_time(self) -> int:
        return self._cache_policy.get_cache_renewal_time()

    def get_cache_expire_time(self) -> int:
        return self._cache_policy.get_cache_expire_time()

    # ------------------------------------------------------------------ #
    # Hand-off
    # ------------------------------------------------------------------ #

    def freeze(self) -> RequestSnapshot:
        """Return an immutable snapshot of the descriptor for the engine.

        Raises:
            InvalidArgumentError: If no URL has been set.
        """
        if self._url is None:
            raise InvalidArgumentError("Request URL must be set before hand-off")
        return RequestSnapshot(
            url=self._url,
            method=self._method,
            headers=tuple(self._headers),
            parameters=tuple(self._parameters),
            body=self._body,
            content_type=self._content_type,
            files=tuple(self._files),
            request_type=self._request_type,
            cache=self._cache_policy.to_config(),
        )

    def __repr__(self) -> str:
        return (
            f"HttpRequest(method={self._method.value!r}, url={self._url!r}, "
            f"headers={len(self._headers)}, parameters={len(self._parameters)}, "
            f"files={len(self._files)})"
        )
