"""Spherical-astronomy primitives shared by the solar and lunar models.

All angles are in radians. Every function accepts scalars or numpy arrays
and broadcasts like a numpy ufunc.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

__all__ = [
    "RAD",
    "E",
    "EquatorialCoordinate",
    "HorizontalCoordinate",
    "right_ascension",
    "declination",
    "azimuth",
    "altitude",
    "sidereal_time",
    "astro_refraction",
    "observer_angles",
    "hour_angle",
]

Angle = Union[float, np.ndarray]

RAD = np.pi / 180.0

E = RAD * 23.4397  # obliquity of the ecliptic


@dataclass(frozen=True)
class EquatorialCoordinate:
    """Position of a body relative to the celestial equator."""

    right_ascension: Angle
    declination: Angle


@dataclass(frozen=True)
class HorizontalCoordinate:
    """Position of a body as seen by an observer.

    Azimuth is measured from south, positive towards west.
    """

    azimuth: Angle
    altitude: Angle


def right_ascension(l: Angle, b: Angle) -> Angle:
    """Right ascension of ecliptic longitude *l* and latitude *b*."""

    with np.errstate(invalid="ignore", divide="ignore"):
        return np.arctan2(np.sin(l) * np.cos(E) - np.tan(b) * np.sin(E), np.cos(l))


def declination(l: Angle, b: Angle) -> Angle:
    """Declination of ecliptic longitude *l* and latitude *b*."""

    with np.errstate(invalid="ignore"):
        return np.arcsin(np.sin(b) * np.cos(E) + np.cos(b) * np.sin(E) * np.sin(l))


def azimuth(H: Angle, phi: Angle, dec: Angle) -> Angle:
    with np.errstate(invalid="ignore", divide="ignore"):
        return np.arctan2(np.sin(H), np.cos(H) * np.sin(phi) - np.tan(dec) * np.cos(phi))


def altitude(H: Angle, phi: Angle, dec: Angle) -> Angle:
    with np.errstate(invalid="ignore"):
        return np.arcsin(
            np.sin(phi) * np.sin(dec) + np.cos(phi) * np.cos(dec) * np.cos(H)
        )


def sidereal_time(d: Angle, lw: Angle) -> Angle:
    """Local sidereal time for day offset *d* and west longitude *lw*.

    The result is not reduced to ``[0, 2*pi)``.
    """

    return RAD * (280.16 + 360.9856235 * d) - lw


def astro_refraction(h: Angle) -> Angle:
    """Atmospheric refraction to add to the geometric altitude *h*.

    Meeus, Astronomical Algorithms (2nd ed.), formula 16.4, converted to
    radians. Only valid for positive altitudes, so negative values are
    evaluated at the horizon.
    """

    h = np.maximum(h, 0.0)
    with np.errstate(invalid="ignore", divide="ignore"):
        return 0.0002967 / np.tan(h + 0.00312536 / (h + 0.08901179))


def observer_angles(lat: Angle, lng: Angle) -> Tuple[Angle, Angle]:
    """Return ``(lw, phi)``: west longitude and latitude of the observer in radians."""

    lw = RAD * -np.asarray(lng, dtype=float)
    phi = RAD * np.asarray(lat, dtype=float)
    return lw, phi


def hour_angle(d: Angle, lw: Angle, ra: Angle) -> Angle:
    return sidereal_time(d, lw) - ra
