"""Shared test fixtures for httpconnection.

Provides reusable fixtures for building descriptors, creating files to
attach as multipart parts, and isolating configuration from the real
environment. These fixtures are automatically discovered by pytest and
available to all test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from httpconnection.request import HttpRequest


# ---------------------------------------------------------------------------
# Descriptor fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def request_() -> HttpRequest:
    """A fresh descriptor with default settings."""
    return HttpRequest()


@pytest.fixture
def api_request() -> HttpRequest:
    """A descriptor pointing at a sample API endpoint."""
    return HttpRequest().set_url("https://api.test/v1")


# ---------------------------------------------------------------------------
# File fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def upload_file(tmp_path: Path) -> Path:
    """A small JSON file on disk to attach as a multipart part."""
    path = tmp_path / "payload.json"
    path.write_text('{"id": 1}', encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear all HTTPCONNECTION_* environment variables.

    Changes the working directory to tmp_path so tests never read or
    write real user files.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    for var in [
        "HTTPCONNECTION_CONFIG",
        "HTTPCONNECTION_METHOD",
        "HTTPCONNECTION_CACHE_ENABLED",
        "HTTPCONNECTION_CACHE_RENEWAL_SECONDS",
        "HTTPCONNECTION_CACHE_EXPIRE_SECONDS",
    ]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path
