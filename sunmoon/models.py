"""Pydantic models validating observer input at the library boundary."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require_aware(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        raise ValueError("date must be timezone-aware")
    return value


class PositionQuery(BaseModel):
    """Validated parameters for a sun or moon position computation."""

    model_config = ConfigDict(frozen=True)

    date: datetime = Field(
        ..., strict=True, description="Instant of observation (timezone-aware)"
    )
    lat: float = Field(
        ..., ge=-90.0, le=90.0, allow_inf_nan=False, description="Latitude in degrees"
    )
    lng: float = Field(
        ...,
        ge=-180.0,
        le=180.0,
        allow_inf_nan=False,
        description="Longitude in degrees (east positive)",
    )

    @field_validator("date")
    def validate_date(cls, value: datetime) -> datetime:
        return _require_aware(value)


class IlluminationQuery(BaseModel):
    """Validated parameters for a moon illumination computation."""

    model_config = ConfigDict(frozen=True)

    date: Optional[datetime] = Field(
        None,
        strict=True,
        description="Instant of observation; the current time when omitted",
    )

    @field_validator("date")
    def validate_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _require_aware(value)
