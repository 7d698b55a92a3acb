"""Per-request response cache policy.

A :class:`CachePolicy` carries a "cache this response" flag and two timers,
both stored as whole seconds:

* **renewal time** -- how long a cached entry stays fresh. Once it elapses
  the engine should refresh the entry when connectivity is available.
* **expire time** -- how much longer a stale entry may still be served in
  place of a network response when connectivity is unavailable or a
  network call is undesired.

Durations can be given in any :class:`TimeUnit`. Conversions that exceed
:data:`~httpconnection.models.MAX_CACHE_SECONDS` saturate at that value
instead of wrapping.

Caching only applies to ``GET`` requests. The policy records the caller's
intent; enforcing the method restriction is up to the execution engine,
which can ask :meth:`CachePolicy.is_cacheable`.
"""

from __future__ import annotations

import enum
import logging
import math
from fractions import Fraction
from typing import Optional, Union

from httpconnection.exceptions import InvalidArgumentError
from httpconnection.models import MAX_CACHE_SECONDS, CacheConfig, HTTPMethod

logger = logging.getLogger(__name__)

_SECONDS_PER_UNIT: dict[str, Fraction] = {
    "nanoseconds": Fraction(1, 1_000_000_000),
    "microseconds": Fraction(1, 1_000_000),
    "milliseconds": Fraction(1, 1_000),
    "seconds": Fraction(1),
    "minutes": Fraction(60),
    "hours": Fraction(3_600),
    "days": Fraction(86_400),
}


class TimeUnit(str, enum.Enum):
    """Units accepted by the cache duration setters."""

    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    def to_seconds(self, value: Union[int, float]) -> int:
        """Convert *value* in this unit to whole seconds.

        The product is computed exactly and rounded to the nearest integer
        with :func:`round`, so exact halves go to the even neighbour:
        2500 ms becomes 2 seconds while 3500 ms becomes 4. No clamping is
        applied here.
        """
        return round(Fraction(value) * _SECONDS_PER_UNIT[self.value])


class CacheState(str, enum.Enum):
    """Freshness of a cached entry as seen by the execution engine.

    ``FRESH`` and ``STALE_REVALIDATABLE`` entries may be served from the
    cache; ``STALE_EXPIRED`` entries require a network round-trip.
    """

    FRESH = "fresh"
    STALE_REVALIDATABLE = "stale_revalidatable"
    STALE_EXPIRED = "stale_expired"


def _to_cache_seconds(value: Union[int, float], unit: Union[TimeUnit, str], label: str) -> int:
    """Validate *value* and convert it to saturated whole seconds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{label} must be a number, got {value!r}")
    if math.isnan(value):
        raise InvalidArgumentError(f"{label} must be a number, got nan")
    if value < 0:
        raise InvalidArgumentError(f"{label} < 0: {value}")
    try:
        time_unit = unit if isinstance(unit, TimeUnit) else TimeUnit(unit.lower())
    except (AttributeError, ValueError) as exc:
        raise InvalidArgumentError(f"Unknown time unit: {unit!r}") from exc

    if math.isinf(value):
        seconds = MAX_CACHE_SECONDS
    else:
        seconds = time_unit.to_seconds(value)
    if seconds > MAX_CACHE_SECONDS:
        logger.debug(
            "%s of %s %s exceeds %d seconds, clamping",
            label, value, time_unit.value, MAX_CACHE_SECONDS,
        )
        return MAX_CACHE_SECONDS
    return seconds


class CachePolicy:
    """Whether, and for how long, a cached response may replace a network call.

    Defaults: caching disabled, renewal time 60 seconds, expire time 0
    seconds (no stale fallback window).

    Example::

        policy = CachePolicy()
        policy.set_cache_response(True)
        policy.set_cache_renewal_time(2, TimeUnit.MINUTES)
        policy.get_cache_renewal_time()  # 120
    """

    def __init__(
        self,
        enabled: bool = False,
        renewal_seconds: int = 60,
        expire_seconds: int = 0,
    ) -> None:
        self._enabled = bool(enabled)
        self._renewal_seconds = _to_cache_seconds(renewal_seconds, TimeUnit.SECONDS, "renewal time")
        self._expire_seconds = _to_cache_seconds(expire_seconds, TimeUnit.SECONDS, "expire time")

    # ------------------------------------------------------------------ #
    # Flag and timers
    # ------------------------------------------------------------------ #

    def set_cache_response(self, enabled: bool) -> None:
        """Toggle caching of this call's response. Only meaningful for GET."""
        self._enabled = bool(enabled)

    def is_cache_response(self) -> bool:
        return self._enabled

    def set_cache_renewal_time(
        self, value: Union[int, float], unit: Union[TimeUnit, str] = TimeUnit.SECONDS
    ) -> None:
        """Set how long a cached entry stays fresh.

        Args:
            value: Non-negative duration expressed in *unit*.
            unit: Unit of *value*. Defaults to seconds.

        Raises:
            InvalidArgumentError: If *value* is negative or not a number,
                or *unit* is unknown. The stored value is left unchanged.
        """
        self._renewal_seconds = _to_cache_seconds(value, unit, "renewal time")

    def set_cache_expire_time(
        self, value: Union[int, float], unit: Union[TimeUnit, str] = TimeUnit.SECONDS
    ) -> None:
        """Set how long a stale entry may still be served once renewal time has passed.

        Args:
            value: Non-negative duration expressed in *unit*.
            unit: Unit of *value*. Defaults to seconds.

        Raises:
            InvalidArgumentError: If *value* is negative or not a number,
                or *unit* is unknown. The stored value is left unchanged.
        """
        self._expire_seconds = _to_cache_seconds(value, unit, "expire time")

    def get_cache_renewal_time(self) -> int:
        return self._renewal_seconds

    def get_cache_expire_time(self) -> int:
        return self._expire_seconds

    # ------------------------------------------------------------------ #
    # Engine-side helpers
    # ------------------------------------------------------------------ #

    def is_cacheable(self, method: Union[HTTPMethod, str]) -> bool:
        """Return ``True`` when caching is enabled and *method* is GET."""
        return self._enabled and str(getattr(method, "value", method)).upper() == "GET"

    def state_for(self, age_seconds: float) -> CacheState:
        """Classify a cached entry of the given age.

        An entry is ``FRESH`` until ``renewal`` seconds have elapsed,
        ``STALE_REVALIDATABLE`` for a further ``expire`` seconds, and
        ``STALE_EXPIRED`` afterwards.
        """
        if age_seconds < 0:
            raise InvalidArgumentError(f"age_seconds < 0: {age_seconds}")
        if age_seconds < self._renewal_seconds:
            return CacheState.FRESH
        if age_seconds < self._renewal_seconds + self._expire_seconds:
            return CacheState.STALE_REVALIDATABLE
        return CacheState.STALE_EXPIRED

    def may_serve(self, age_seconds: float) -> bool:
        """Return ``True`` if an entry of this age may be served from the cache."""
        return self.state_for(age_seconds) is not CacheState.STALE_EXPIRED

    def cache_control(self) -> Optional[str]:
        """Render the policy as a request ``Cache-Control`` header value.

        Returns ``None`` when caching is disabled.
        """
        if not self._enabled:
            return None
        value = f"max-age={self._renewal_seconds}"
        if self._expire_seconds > 0:
            value += f", max-stale={self._expire_seconds}"
        return value

    # ------------------------------------------------------------------ #
    # Conversion
    # ------------------------------------------------------------------ #

    def to_config(self) -> CacheConfig:
        return CacheConfig(
            enabled=self._enabled,
            renewal_seconds=self._renewal_seconds,
            expire_seconds=self._expire_seconds,
        )

    @classmethod
    def from_config(cls, config: CacheConfig) -> CachePolicy:
        return cls(
            enabled=config.enabled,
            renewal_seconds=config.renewal_seconds,
            expire_seconds=config.expire_seconds,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CachePolicy):
            return NotImplemented
        return self.to_config() == other.to_config()

    def __repr__(self) -> str:
        return (
            f"CachePolicy(enabled={self._enabled}, "
            f"renewal_seconds={self._renewal_seconds}, "
            f"expire_seconds={self._expire_seconds})"
        )
