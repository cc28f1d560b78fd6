from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta, timezone

import pytest

from pydantic import ValidationError

from sunmoon import lunar, service, solar
from sunmoon.models import IlluminationQuery, PositionQuery

REFERENCE_DATE = datetime(2013, 3, 5, tzinfo=timezone.utc)


def _events(caplog: pytest.LogCaptureFixture) -> list[dict]:
    return [json.loads(record.getMessage()) for record in caplog.records]


def test_sun_position_matches_core():
    result = service.sun_position(REFERENCE_DATE, 50.5, 30.5)
    assert result == solar.get_position(REFERENCE_DATE, 50.5, 30.5)


def test_moon_position_matches_core():
    result = service.moon_position(REFERENCE_DATE, 50.5, 30.5)
    assert result == lunar.get_moon_position(REFERENCE_DATE, 50.5, 30.5)


def test_moon_illumination_uses_clock_when_date_omitted():
    result = service.moon_illumination(clock=lambda: REFERENCE_DATE)
    assert result == lunar.get_moon_illumination(REFERENCE_DATE)


def test_explicit_date_wins_over_clock():
    def failing_clock() -> datetime:
        raise AssertionError("clock must not be called")

    result = service.moon_illumination(REFERENCE_DATE, clock=failing_clock)
    assert result == lunar.get_moon_illumination(REFERENCE_DATE)


def test_default_clock_is_timezone_aware():
    now = service.utc_now()
    assert now.tzinfo is not None
    illumination = service.moon_illumination()
    assert 0.0 <= illumination.fraction <= 1.0


@pytest.mark.parametrize(
    "lat, lng",
    [(95.0, 0.0), (-90.5, 0.0), (0.0, 180.5), (0.0, -200.0), (float("nan"), 0.0), (0.0, float("inf"))],
)
def test_out_of_range_coordinates_are_rejected(lat: float, lng: float):
    with pytest.raises(service.InvalidInputError):
        service.sun_position(REFERENCE_DATE, lat, lng)
    with pytest.raises(service.InvalidInputError):
        service.moon_position(REFERENCE_DATE, lat, lng)


def test_naive_datetime_is_rejected():
    with pytest.raises(service.InvalidInputError, match="timezone-aware"):
        service.sun_position(datetime(2013, 3, 5), 50.5, 30.5)


def test_naive_clock_is_rejected():
    with pytest.raises(service.InvalidInputError):
        service.moon_illumination(clock=lambda: datetime(2013, 3, 5))


def test_invalid_input_error_is_value_error():
    assert issubclass(service.InvalidInputError, ValueError)


def test_boundary_coordinates_are_accepted():
    service.sun_position(REFERENCE_DATE, 90.0, 180.0)
    service.moon_position(REFERENCE_DATE, -90.0, -180.0)


def test_query_models_are_frozen():
    query = PositionQuery(date=REFERENCE_DATE, lat=50.5, lng=30.5)
    with pytest.raises(ValidationError):
        query.lat = 10.0  # type: ignore[misc]
    assert IlluminationQuery().date is None


def test_offset_datetime_is_accepted():
    local = REFERENCE_DATE.astimezone(timezone(timedelta(hours=2)))
    assert service.sun_position(local, 50.5, 30.5) == service.sun_position(
        REFERENCE_DATE, 50.5, 30.5
    )


def test_computations_are_logged(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="sunmoon.service")
    service.sun_position(REFERENCE_DATE, 50.5, 30.5)
    service.moon_position(REFERENCE_DATE, 50.5, 30.5)
    service.moon_illumination(REFERENCE_DATE)

    events = _events(caplog)
    assert [event["event"] for event in events] == [
        "sun_position",
        "moon_position",
        "moon_illumination",
    ]
    assert events[0]["lat"] == 50.5
    assert events[0]["azimuth"] == pytest.approx(-2.5003175907168385, abs=1e-9)
    assert all(event["duration_ms"] >= 0 for event in events)


def test_invalid_input_is_logged(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.WARNING, logger="sunmoon.service")
    with pytest.raises(service.InvalidInputError):
        service.sun_position(REFERENCE_DATE, 95.0, 0.0)
    events = _events(caplog)
    assert events[-1]["event"] == "invalid_input"
    assert events[-1]["model"] == "PositionQuery"


@pytest.mark.parametrize("date", [3_600_000, 1362441600000.0, "2013-03-05T00:00:00Z"])
def test_non_datetime_instants_are_rejected(date):
    with pytest.raises(service.InvalidInputError):
        service.sun_position(date, 50.5, 30.5)
    with pytest.raises(service.InvalidInputError):
        service.moon_position(date, 50.5, 30.5)
    with pytest.raises(service.InvalidInputError):
        service.moon_illumination(date)
