"""Validated entry points for host applications.

The numeric core in :mod:`sunmoon.solar` and :mod:`sunmoon.lunar` is pure
and accepts any instant. This module validates observer input with the
pydantic models, supplies the current time where the caller omits it and
logs every computation as a single-line JSON record.
"""

from __future__ import annotations

import json
import logging
import time
from datetime import UTC, datetime
from typing import Callable, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .astro import HorizontalCoordinate
from .lunar import Illumination, MoonPosition, get_moon_illumination, get_moon_position
from .models import IlluminationQuery, PositionQuery
from .solar import get_position

__all__ = [
    "InvalidInputError",
    "utc_now",
    "sun_position",
    "moon_position",
    "moon_illumination",
]

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], datetime]
_Query = TypeVar("_Query", bound=BaseModel)


class InvalidInputError(ValueError):
    """Raised when an instant or geographic coordinate fails validation."""


def utc_now() -> datetime:
    return datetime.now(UTC)


def _validate(model: Type[_Query], **values: object) -> _Query:
    try:
        return model(**values)
    except ValidationError as exc:
        messages = ", ".join(error["msg"] for error in exc.errors())
        LOGGER.warning(
            json.dumps({"event": "invalid_input", "model": model.__name__, "message": messages})
        )
        raise InvalidInputError(messages) from exc


def _log_computation(event: str, start_time: float, **fields: object) -> None:
    if not LOGGER.isEnabledFor(logging.DEBUG):
        return
    duration_ms = (time.perf_counter() - start_time) * 1000.0
    payload = {"event": event, **fields, "duration_ms": round(duration_ms, 3)}
    LOGGER.debug(json.dumps(payload, default=str))


def sun_position(date: datetime, lat: float, lng: float) -> HorizontalCoordinate:
    """Validated wrapper around :func:`sunmoon.solar.get_position`.

    Raises
    ------
    InvalidInputError
        If *date* is naive or the coordinates are out of range.
    """

    query = _validate(PositionQuery, date=date, lat=lat, lng=lng)
    start_time = time.perf_counter()
    result = get_position(query.date, query.lat, query.lng)
    _log_computation(
        "sun_position",
        start_time,
        date=query.date.isoformat(),
        lat=query.lat,
        lng=query.lng,
        azimuth=float(result.azimuth),
        altitude=float(result.altitude),
    )
    return result


def moon_position(date: datetime, lat: float, lng: float) -> MoonPosition:
    """Validated wrapper around :func:`sunmoon.lunar.get_moon_position`."""

    query = _validate(PositionQuery, date=date, lat=lat, lng=lng)
    start_time = time.perf_counter()
    result = get_moon_position(query.date, query.lat, query.lng)
    _log_computation(
        "moon_position",
        start_time,
        date=query.date.isoformat(),
        lat=query.lat,
        lng=query.lng,
        azimuth=float(result.azimuth),
        altitude=float(result.altitude),
        distance_km=float(result.distance),
    )
    return result


def moon_illumination(
    date: Optional[datetime] = None, clock: Clock = utc_now
) -> Illumination:
    """Moon illumination at *date*, or at ``clock()`` when *date* is omitted.

    The default clock is bound at import time, so pass *clock* explicitly to
    substitute the current time; patching :func:`utc_now` has no effect.
    """

    query = _validate(IlluminationQuery, date=date if date is not None else clock())
    start_time = time.perf_counter()
    result = get_moon_illumination(query.date)
    _log_computation(
        "moon_illumination",
        start_time,
        date=query.date.isoformat(),
        fraction=float(result.fraction),
        phase=float(result.phase),
    )
    return result
