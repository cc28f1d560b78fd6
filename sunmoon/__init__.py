"""Sun and Moon positions and Moon illumination for an observer."""

from . import astro, lunar, solar, time
from .astro import RAD

__all__ = ["RAD", "astro", "lunar", "solar", "time"]
