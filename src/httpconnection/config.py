"""Loading and saving of descriptor defaults.

:class:`~httpconnection.models.RequestDefaults` holds the values applied
to descriptors created with
:meth:`~httpconnection.request.HttpRequest.from_defaults`. They are
resolved with the following precedence (highest wins):

1. Environment variables (``HTTPCONNECTION_METHOD``,
   ``HTTPCONNECTION_CACHE_ENABLED``,
   ``HTTPCONNECTION_CACHE_RENEWAL_SECONDS``,
   ``HTTPCONNECTION_CACHE_EXPIRE_SECONDS``)
2. A JSON file, given explicitly or through ``HTTPCONNECTION_CONFIG``
3. Built-in defaults

File writes use an atomic temp-file-then-rename strategy
(:func:`_atomic_write`) so a crash never leaves a half-written file.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Union

from httpconnection.exceptions import ConfigError
from httpconnection.models import RequestDefaults

logger = logging.getLogger(__name__)

ENV_CONFIG = "HTTPCONNECTION_CONFIG"
ENV_METHOD = "HTTPCONNECTION_METHOD"
ENV_CACHE_ENABLED = "HTTPCONNECTION_CACHE_ENABLED"
ENV_CACHE_RENEWAL = "HTTPCONNECTION_CACHE_RENEWAL_SECONDS"
ENV_CACHE_EXPIRE = "HTTPCONNECTION_CACHE_EXPIRE_SECONDS"

_CACHE_ENV_FIELDS = {
    ENV_CACHE_ENABLED: "enabled",
    ENV_CACHE_RENEWAL: "renewal_seconds",
    ENV_CACHE_EXPIRE: "expire_seconds",
}


def _atomic_write(path: Path, data: str) -> None:
    """Write *data* to a sibling temp file, then rename it over *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise


def _read_json(path: Path) -> dict[str, Any]:
    """Read a JSON object from *path*."""
    if not path.is_file():
        raise ConfigError(f"Config file not found at {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config at {path}: expected a JSON object")
    return data


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay ``HTTPCONNECTION_*`` environment variables onto *data*."""
    method = os.environ.get(ENV_METHOD, "")
    if method:
        data["method"] = method.upper()

    cache = data.get("cache")
    if cache is None:
        cache = {}
    elif not isinstance(cache, dict):
        raise ConfigError(f"Invalid request defaults: cache must be a JSON object, got {cache!r}")
    cache = dict(cache)
    for env_var, field_name in _CACHE_ENV_FIELDS.items():
        value = os.environ.get(env_var, "")
        if value:
            cache[field_name] = value
    if cache:
        data["cache"] = cache
    return data


def load_defaults(path: Union[str, Path, None] = None) -> RequestDefaults:
    """Resolve descriptor defaults from a JSON file and the environment.

    Args:
        path: JSON file to read. When ``None``, the file named by
            ``HTTPCONNECTION_CONFIG`` is used, if set.

    Returns:
        The validated :class:`~httpconnection.models.RequestDefaults`.

    Raises:
        ConfigError: If the file is missing or not valid JSON, or the
            resolved values fail validation.
    """
    if path is None:
        env_path = os.environ.get(ENV_CONFIG, "")
        path = Path(env_path) if env_path else None

    data: dict[str, Any] = {}
    if path is not None:
        data = _read_json(Path(path))
        logger.debug("Loaded request defaults from %s", path)

    data = _apply_env_overrides(data)
    try:
        return RequestDefaults.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid request defaults: {exc}") from exc


def save_defaults(defaults: RequestDefaults, path: Union[str, Path]) -> None:
    """Persist *defaults* atomically as JSON at *path*."""
    data = defaults.model_dump(mode="json")
    _atomic_write(Path(path), json.dumps(data, indent=2) + "\n")
