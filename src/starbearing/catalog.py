"""Built-in table of bright named stars (J2000 catalog positions)."""

import logging

from starbearing.models import EquatorialCoordinate

logger = logging.getLogger(__name__)

# name → (decl °, ', '', RA h, m, s); southern declinations negate every part
BRIGHT_STARS: dict[str, tuple[float, float, float, float, float, float]] = {
    "polaris": (89, 15, 50.8, 2, 31, 49.09),
    "mizar": (54, 55, 31.3, 13, 23, 55.5),
    "vega": (38, 47, 1.3, 18, 36, 56.34),
    "sirius": (-16, -42, -58.0, 6, 45, 8.92),
    "betelgeuse": (7, 24, 25.4, 5, 55, 10.31),
    "rigel": (-8, -12, -5.9, 5, 14, 32.27),
    "arcturus": (19, 10, 56.7, 14, 15, 39.67),
    "capella": (45, 59, 52.8, 5, 16, 41.36),
    "deneb": (45, 16, 49.2, 20, 41, 25.92),
    "altair": (8, 52, 5.96, 19, 50, 47.0),
}


class StarNotFoundError(KeyError):
    """Star name not in the built-in catalog."""


def star_names() -> tuple[str, ...]:
    """Catalog names, capitalized, in table order."""
    return tuple(name.capitalize() for name in BRIGHT_STARS)


def get_star(name: str) -> EquatorialCoordinate:
    """Look up a star by name (case-insensitive).

    Raises:
        StarNotFoundError: When the name is not in BRIGHT_STARS.
    """
    key = name.strip().lower()
    if key not in BRIGHT_STARS:
        raise StarNotFoundError(f"Unknown star: {name}")
    logger.debug("catalog hit: %s %s", key, BRIGHT_STARS[key])
    return EquatorialCoordinate.from_sexagesimal(*BRIGHT_STARS[key])
