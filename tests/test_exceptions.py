"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from httpconnection.exceptions import (
    ConfigError,
    FileNotFoundError_,
    HttpConnectionError,
    InvalidArgumentError,
    MalformedURLError,
)


@pytest.mark.parametrize(
    ("exc_type", "builtin"),
    [
        (InvalidArgumentError, ValueError),
        (MalformedURLError, ValueError),
        (FileNotFoundError_, FileNotFoundError),
        (ConfigError, Exception),
    ],
)
def test_hierarchy(exc_type: type, builtin: type) -> None:
    assert issubclass(exc_type, HttpConnectionError)
    assert issubclass(exc_type, builtin)


def test_message_preserved() -> None:
    exc = InvalidArgumentError("bad url")
    assert str(exc) == "bad url"
    assert exc.message == "bad url"


def test_malformed_url_keeps_url() -> None:
    exc = MalformedURLError("broken", url="http://x:y")
    assert exc.url == "http://x:y"


def test_file_not_found_keeps_path() -> None:
    exc = FileNotFoundError_("missing", path="/tmp/nope")
    assert exc.path == "/tmp/nope"
    assert str(exc) == "missing"
