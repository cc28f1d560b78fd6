"""Low-precision lunar model: position, distance and illumination.

Position formulas from https://www.aa.quae.nl/en/reken/hemelpositie.html;
illumination follows Meeus, Astronomical Algorithms (2nd ed.), chapter 48.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .astro import (
    RAD,
    Angle,
    altitude,
    astro_refraction,
    azimuth,
    declination,
    hour_angle,
    observer_angles,
    right_ascension,
)
from .solar import sun_coords
from .time import Instant, to_days_since_j2000

__all__ = [
    "MoonCoordinate",
    "MoonPosition",
    "Illumination",
    "moon_coords",
    "get_moon_position",
    "get_moon_illumination",
]

SUN_DISTANCE_KM = 149598000  # mean Earth-Sun distance


@dataclass(frozen=True)
class MoonCoordinate:
    """Geocentric equatorial coordinates of the Moon."""

    right_ascension: Angle
    declination: Angle
    distance: Angle  # km


@dataclass(frozen=True)
class MoonPosition:
    azimuth: Angle
    altitude: Angle  # apparent, refraction corrected
    distance: Angle  # km
    parallactic_angle: Angle


@dataclass(frozen=True)
class Illumination:
    """Illuminated fraction, phase and bright-limb angle of the Moon.

    ``phase`` runs from 0 (new moon) through 0.5 (full moon) back to 1.
    """

    fraction: Angle
    phase: Angle
    angle: Angle


def moon_coords(d: Angle) -> MoonCoordinate:
    """Geocentric coordinates of the Moon *d* days after J2000."""

    L = RAD * (218.316 + 13.176396 * d)  # ecliptic longitude
    M = RAD * (134.963 + 13.064993 * d)  # mean anomaly
    F = RAD * (93.272 + 13.229350 * d)  # mean distance

    l = L + RAD * 6.289 * np.sin(M)  # longitude
    b = RAD * 5.128 * np.sin(F)  # latitude
    dist = 385001 - 20905 * np.cos(M)

    return MoonCoordinate(
        right_ascension=right_ascension(l, b),
        declination=declination(l, b),
        distance=dist,
    )


def get_moon_position(date: Instant, lat: Angle, lng: Angle) -> MoonPosition:
    """Compute the Moon's apparent position for an observer.

    Parameters
    ----------
    date:
        Instant of observation.
    lat, lng:
        Geographic coordinates in degrees (east-positive longitude).
    """

    lw, phi = observer_angles(lat, lng)
    d = to_days_since_j2000(date)

    c = moon_coords(d)
    H = hour_angle(d, lw, c.right_ascension)
    # Meeus formula 14.1
    with np.errstate(invalid="ignore", divide="ignore"):
        pa = np.arctan2(
            np.sin(H), np.tan(phi) * np.cos(c.declination) - np.sin(c.declination) * np.cos(H)
        )

    h = altitude(H, phi, c.declination)
    h = h + astro_refraction(h)

    return MoonPosition(
        azimuth=azimuth(H, phi, c.declination),
        altitude=h,
        distance=c.distance,
        parallactic_angle=pa,
    )


def get_moon_illumination(date: Instant) -> Illumination:
    """Compute the Moon's illumination at *date*.

    The instant is required; :func:`sunmoon.service.moon_illumination`
    supplies the current time when the caller has none.
    """

    d = to_days_since_j2000(date)
    s = sun_coords(d)
    m = moon_coords(d)

    delta_ra = s.right_ascension - m.right_ascension
    with np.errstate(invalid="ignore"):
        phi = np.arccos(
            np.sin(s.declination) * np.sin(m.declination)
            + np.cos(s.declination) * np.cos(m.declination) * np.cos(delta_ra)
        )
    inc = np.arctan2(SUN_DISTANCE_KM * np.sin(phi), m.distance - SUN_DISTANCE_KM * np.cos(phi))
    angle = np.arctan2(
        np.cos(s.declination) * np.sin(delta_ra),
        np.sin(s.declination) * np.cos(m.declination)
        - np.cos(s.declination) * np.sin(m.declination) * np.cos(delta_ra),
    )

    return Illumination(
        fraction=(1 + np.cos(inc)) / 2,
        phase=0.5 + 0.5 * inc * np.where(angle < 0, -1.0, 1.0) / np.pi,
        angle=angle,
    )
