"""Conversions between absolute instants and Julian Day numbers."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Union

import numpy as np

__all__ = [
    "MILLISECONDS_PER_DAY",
    "JULIAN_DAY_UNIX_EPOCH",
    "JULIAN_DAY_J2000_EPOCH",
    "to_milliseconds",
    "to_datetime",
    "to_julian_day",
    "from_julian_day",
    "to_days_since_j2000",
]

MILLISECONDS_PER_DAY = 1000 * 60 * 60 * 24
JULIAN_DAY_UNIX_EPOCH = 2440588  # 1970-01-01T12:00Z
JULIAN_DAY_J2000_EPOCH = 2451545  # 2000-01-01T12:00Z

Instant = Union[datetime, float, np.ndarray, np.datetime64]


def to_milliseconds(date: Instant) -> Union[float, np.ndarray]:
    """Return *date* as milliseconds since the Unix epoch.

    Parameters
    ----------
    date:
        A timezone-aware :class:`~datetime.datetime`, a numpy ``datetime64``
        scalar or array, or a number (or numeric array) already expressed in
        epoch milliseconds.

    Raises
    ------
    ValueError
        If *date* is a naive datetime.
    TypeError
        If *date* is not one of the supported instant types.
    """

    if isinstance(date, datetime):
        if date.tzinfo is None:
            raise ValueError("datetime must be timezone-aware (UTC)")
        return date.timestamp() * 1000.0
    if isinstance(date, (bool, np.bool_)):
        raise TypeError(f"Unsupported instant type: {type(date).__name__}")
    if isinstance(date, (int, float, np.integer, np.floating)):
        return float(date)
    if isinstance(date, (np.ndarray, np.datetime64)):
        if np.issubdtype(date.dtype, np.datetime64):
            milliseconds = date.astype("datetime64[ms]").astype(np.int64).astype(float)
            return np.where(np.isnat(date), np.nan, milliseconds)[()]
        if np.issubdtype(date.dtype, np.number):
            return date.astype(float)
    raise TypeError(f"Unsupported instant type: {type(date).__name__}")


def to_datetime(milliseconds: float) -> datetime:
    """Convert epoch *milliseconds* into a timezone-aware UTC datetime."""

    return datetime.fromtimestamp(milliseconds / 1000.0, tz=UTC)


def to_julian_day(date: Instant) -> Union[float, np.ndarray]:
    return to_milliseconds(date) / MILLISECONDS_PER_DAY - 0.5 + JULIAN_DAY_UNIX_EPOCH


def from_julian_day(jd: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Inverse of :func:`to_julian_day`, returning epoch milliseconds."""

    return (jd + 0.5 - JULIAN_DAY_UNIX_EPOCH) * MILLISECONDS_PER_DAY


def to_days_since_j2000(date: Instant) -> Union[float, np.ndarray]:
    """Days (fractional, signed) elapsed since 2000-01-01T12:00Z."""

    return to_julian_day(date) - JULIAN_DAY_J2000_EPOCH
