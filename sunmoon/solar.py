"""Low-precision solar model.

Formulas from https://www.aa.quae.nl/en/reken/zonpositie.html, accurate to
roughly a hundredth of a degree for dates near J2000.
"""

from __future__ import annotations

import numpy as np

from .astro import (
    RAD,
    Angle,
    EquatorialCoordinate,
    HorizontalCoordinate,
    altitude,
    azimuth,
    declination,
    hour_angle,
    observer_angles,
    right_ascension,
)
from .time import Instant, to_days_since_j2000

__all__ = ["solar_mean_anomaly", "ecliptic_longitude", "sun_coords", "get_position"]

PERIHELION = RAD * 102.9372  # perihelion of the Earth


def solar_mean_anomaly(d: Angle) -> Angle:
    return RAD * (357.5291 + 0.98560028 * d)


def ecliptic_longitude(M: Angle) -> Angle:
    """Ecliptic longitude of the Sun for mean anomaly *M*."""

    C = RAD * (1.9148 * np.sin(M) + 0.02 * np.sin(2 * M) + 0.0003 * np.sin(3 * M))  # equation of center
    return M + C + PERIHELION + np.pi


def sun_coords(d: Angle) -> EquatorialCoordinate:
    """Equatorial coordinates of the Sun *d* days after J2000.

    The Sun's ecliptic latitude is taken as zero.
    """

    L = ecliptic_longitude(solar_mean_anomaly(d))
    return EquatorialCoordinate(
        right_ascension=right_ascension(L, 0.0),
        declination=declination(L, 0.0),
    )


def get_position(date: Instant, lat: Angle, lng: Angle) -> HorizontalCoordinate:
    """Compute the Sun's azimuth and altitude for an observer.

    Parameters
    ----------
    date:
        Instant of observation (see :func:`sunmoon.time.to_milliseconds`).
    lat, lng:
        Geographic coordinates in degrees (east-positive longitude).

    Returns
    -------
    HorizontalCoordinate
        Geometric azimuth and altitude in radians.
    """

    lw, phi = observer_angles(lat, lng)
    d = to_days_since_j2000(date)

    c = sun_coords(d)
    H = hour_angle(d, lw, c.right_ascension)

    return HorizontalCoordinate(
        azimuth=azimuth(H, phi, c.declination),
        altitude=altitude(H, phi, c.declination),
    )
