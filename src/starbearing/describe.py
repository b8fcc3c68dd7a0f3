"""Plain-language description of a sighting: compass point and elevation."""

import math
import os

from starbearing.i18n import t
from starbearing.models import Sighting

COMPASS_POINTS: tuple[str, ...] = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def compass_point(azimuth_radians: float) -> str:
    """Name of the 16-wind compass point nearest an azimuth (0 = north, eastwards).

    Returns "?" for a NaN or infinite azimuth.
    """
    if not math.isfinite(azimuth_radians):
        return "?"
    sector = 2 * math.pi / len(COMPASS_POINTS)
    index = int(math.floor(azimuth_radians / sector + 0.5)) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def describe_sighting(sighting: Sighting, lang: str | None = None) -> str:
    """Describe where the star of a sighting appears, in one sentence.

    Args:
        sighting: Computed sighting.
        lang: Language code ('ko' or 'en'). Defaults to $STARBEARING_LANG, then 'en'.

    Returns:
        e.g. "Polaris is 53.0° above the horizon, bearing N (1.0°)."
    """
    if lang is None:
        lang = os.environ.get("STARBEARING_LANG", "en")
    horizontal = sighting.horizontal
    key = "above_horizon" if horizontal.is_above_horizon else "below_horizon"
    return t(key, lang).format(
        name=sighting.name or t("unnamed_star", lang),
        alt=abs(horizontal.altitude_degrees),
        compass=t(compass_point(horizontal.azimuth), lang),
        az=horizontal.azimuth_degrees,
    )
