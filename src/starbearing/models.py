"""Data model definitions — star coordinates, observer input, and computed sightings."""

import math
from dataclasses import dataclass
from datetime import datetime

from starbearing.sidereal import degrees_to_radians, seconds_to_radians


@dataclass(frozen=True)
class EquatorialCoordinate:
    """Fixed position of a star on the celestial sphere.

    Independent of the observer and of time (it drifts only on astronomical
    timescales). Combined with a local sidereal time and an observer
    latitude it yields the HorizontalCoordinate where the star is seen.
    """

    declination: float  # radians, like a latitude on the celestial sphere
    right_ascension: float  # radians, measured from the March equinox; 24h == 2π

    @classmethod
    def from_sexagesimal(
        cls,
        decl_degrees: float,
        decl_minutes: float,
        decl_seconds: float,
        ra_hours: float,
        ra_minutes: float,
        ra_seconds: float,
    ) -> "EquatorialCoordinate":
        """Build from catalog notation, e.g. Polaris +89° 15' 50.8'', 02h 31m 49.09s.

        Declination is an angle (360° == 2π), right ascension a time (24h == 2π).
        Each part carries its own sign: -16° 42' 58'' is ``(-16, -42, -58)``.
        """
        return cls(
            declination=(decl_degrees + decl_minutes / 60.0 + decl_seconds / (60.0 * 60.0))
            / 360.0
            * 2.0
            * math.pi,
            right_ascension=(ra_hours * 3600.0 + ra_minutes * 60.0 + ra_seconds)
            / (60.0 * 60.0 * 24.0)
            * 2.0
            * math.pi,
        )

    @property
    def declination_degrees(self) -> float:
        return math.degrees(self.declination)

    @property
    def right_ascension_hours(self) -> float:
        return self.right_ascension / (2 * math.pi) * 24

    def hour_angle(self, lmst_radians: float) -> float:
        """Hour angle H = local sidereal time - right ascension, in radians."""
        return lmst_radians - self.right_ascension

    def altitude(self, lmst_radians: float, latitude_radians: float) -> float:
        """Altitude above the horizon in radians (Meeus p. 93).

        Args:
            lmst_radians: Local mean sidereal time in radians (86400 s == 2π).
            latitude_radians: Observer latitude in radians.
        """
        h = _finite(self.hour_angle(lmst_radians))
        phi = _finite(latitude_radians)
        delta = _finite(self.declination)
        return _asin(
            math.sin(phi) * math.sin(delta) + math.cos(phi) * math.cos(delta) * math.cos(h)
        )

    def azimuth(self, lmst_radians: float, latitude_radians: float) -> float:
        """Azimuth in radians (Meeus p. 93), wrapped to [0, 2π) when negative.

        Uses single-argument atan with only a sign correction, not atan2, so
        the quadrant is not fully resolved. A zero denominator yields ±π/2
        or NaN instead of an error. A raw result just below zero rounds to
        exactly 2π after the correction.
        """
        h = _finite(self.hour_angle(lmst_radians))
        phi = _finite(latitude_radians)
        delta = _finite(self.declination)
        result = math.atan(
            _divide(math.sin(h), math.sin(phi) * math.cos(h) - math.cos(phi) * math.tan(delta))
        )
        if result < 0:
            result += 2 * math.pi
        return result


# The helpers below give IEEE results (NaN, ±inf) where the math module raises.


def _finite(angle: float) -> float:
    return math.nan if math.isinf(angle) else angle


def _asin(x: float) -> float:
    # rounding can push the argument just past ±1 at the zenith/nadir
    if not -1 <= x <= 1:
        return math.nan
    return math.asin(x)


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass(frozen=True)
class HorizontalCoordinate:
    """Apparent position of a star for one observer at one instant.

    Recomputed for every place and time; never cached.
    """

    altitude: float  # radians above (+) or below (-) the horizon; π/2 is the zenith
    azimuth: float  # radians; 0 = true north, increasing eastwards

    @classmethod
    def from_equatorial(
        cls, eq: EquatorialCoordinate, lmst_radians: float, latitude_radians: float
    ) -> "HorizontalCoordinate":
        """Transform an equatorial coordinate for a sidereal time and latitude, both in radians."""
        return cls(
            altitude=eq.altitude(lmst_radians, latitude_radians),
            azimuth=eq.azimuth(lmst_radians, latitude_radians),
        )

    @classmethod
    def from_equatorial_degrees(
        cls, eq: EquatorialCoordinate, lmst_seconds: float, latitude_degrees: float
    ) -> "HorizontalCoordinate":
        """Same as from_equatorial with LMST in seconds of day and latitude in degrees."""
        return cls.from_equatorial(
            eq, seconds_to_radians(lmst_seconds), degrees_to_radians(latitude_degrees)
        )

    @classmethod
    def from_equatorial_seconds(
        cls, eq: EquatorialCoordinate, lmst_seconds: float, latitude_radians: float
    ) -> "HorizontalCoordinate":
        return cls.from_equatorial(eq, seconds_to_radians(lmst_seconds), latitude_radians)

    @property
    def altitude_degrees(self) -> float:
        return math.degrees(self.altitude)

    @property
    def azimuth_degrees(self) -> float:
        return math.degrees(self.azimuth)

    @property
    def is_above_horizon(self) -> bool:
        return self.altitude >= 0


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    star: str  # Catalog name ("Polaris")
    lat: float  # Latitude (decimal degrees, north positive)
    lng: float  # Longitude (decimal degrees, east positive)
    when: str  # Local civil time, "YYYY-MM-DD HH:MM[:SS]"
    tz: str | None = None  # IANA zone name; looked up from lat/lng when None


@dataclass(frozen=True)
class ObserverContext:
    """Observer place and instant. Input to sky computation."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees, east positive)
    utc_dt: datetime  # UTC datetime (with tzinfo=utc)
    tz_name: str  # IANA zone the local time was interpreted in


@dataclass(frozen=True)
class Sighting:
    """Where one star appears for one observer. Fully computed state."""

    name: str
    context: ObserverContext
    equatorial: EquatorialCoordinate
    horizontal: HorizontalCoordinate
    julian_day_number: float  # JDN at 0h UTC of the observation date
    gmst_seconds: float  # GMST at the observation instant, unreduced
    lmst_seconds: float  # LMST at the observer, seconds of day [0, 86400)
