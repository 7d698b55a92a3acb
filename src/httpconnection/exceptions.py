"""Exception hierarchy for httpconnection.

All exceptions inherit from :class:`HttpConnectionError`. Validation errors
are raised synchronously by the failing builder call and never mutate the
descriptor, so callers learn about a bad request before it reaches the
execution engine.

Subclass hierarchy::

    HttpConnectionError
    +-- InvalidArgumentError  (also ValueError)
    +-- MalformedURLError     (also ValueError)
    +-- FileNotFoundError_    (also FileNotFoundError)
    +-- ConfigError
"""


class HttpConnectionError(Exception):
    """Base exception for all httpconnection errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(HttpConnectionError, ValueError):
    """Raised for a null/empty URL, a URL without an http(s) scheme, or a negative cache duration."""


class MalformedURLError(HttpConnectionError, ValueError):
    """Raised when a URL has an http(s) prefix but fails structural parsing.

    Args:
        message: Human-readable error description.
        url: The rejected URL string.
    """

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class FileNotFoundError_(HttpConnectionError, FileNotFoundError):
    """Raised when a multipart file reference does not name an existing file.

    Named with a trailing underscore to avoid shadowing the built-in
    ``FileNotFoundError``, which it also subclasses so that
    ``except FileNotFoundError`` keeps working.
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ConfigError(HttpConnectionError):
    """Raised for configuration problems (missing file, invalid JSON, bad values)."""
