"""Observation pipeline — observer resolution, sidereal time, and star position."""

import logging
from datetime import datetime

from pytz import UnknownTimeZoneError, timezone, utc
from timezonefinder import TimezoneFinder

from starbearing.catalog import get_star
from starbearing.julian import gregorian_to_julian_day_number
from starbearing.models import (
    EquatorialCoordinate,
    HorizontalCoordinate,
    ObserverContext,
    QueryInput,
    Sighting,
)
from starbearing.sidereal import (
    gmst_to_lmst,
    julian_day_number_to_gmst,
    time_of_day_to_sidereal_seconds,
)
from starbearing.validation import validate_observation

logger = logging.getLogger(__name__)

_tf = TimezoneFinder()
_WHEN_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M")


class ObserverError(Exception):
    """Observer timezone could not be determined."""


def _parse_when(when: str) -> datetime:
    for fmt in _WHEN_FORMATS:
        try:
            return datetime.strptime(when, fmt)
        except ValueError:
            continue
    raise ValueError(f"Unrecognized time {when!r}, expected YYYY-MM-DD HH:MM[:SS]")


def resolve_observer(
    lat: float, lng: float, when: str, tz: str | None = None
) -> ObserverContext:
    """Resolve a place and a local time string to an ObserverContext.

    Args:
        lat: Latitude in decimal degrees (north positive).
        lng: Longitude in decimal degrees (east positive).
        when: Local time string in "YYYY-MM-DD HH:MM:SS" or "YYYY-MM-DD HH:MM" format.
        tz: IANA timezone name. Looked up from lat/lng when None.

    Returns:
        ObserverContext containing lat/lng, UTC datetime, and the zone name used.

    Raises:
        ObserverError: When no timezone is found (including coordinates the
            lookup rejects) or tz is not a known zone.
        ValueError: When `when` cannot be parsed.
    """
    dt = _parse_when(when)
    if tz is not None:
        tz_str = tz
    else:
        try:
            tz_str = _tf.timezone_at(lat=lat, lng=lng)
        except ValueError as exc:
            raise ObserverError(f"Timezone not found: lat={lat}, lng={lng}") from exc
    if tz_str is None:
        raise ObserverError(f"Timezone not found: lat={lat}, lng={lng}")
    try:
        local_tz = timezone(tz_str)
    except UnknownTimeZoneError as exc:
        raise ObserverError(f"Unknown timezone: {tz_str}") from exc
    utc_dt = local_tz.localize(dt, is_dst=None).astimezone(utc)
    logger.debug("observer lat=%s lng=%s %s -> %s (%s)", lat, lng, when, utc_dt, tz_str)

    return ObserverContext(lat=lat, lng=lng, utc_dt=utc_dt, tz_name=tz_str)


def compute_sighting(
    star: EquatorialCoordinate, context: ObserverContext, name: str = ""
) -> Sighting:
    """Compute where a star appears for an observer.

    GMST is taken at 0h UTC of the observation date and advanced by the
    sidereal seconds of the UTC time of day, then shifted to the observer's
    longitude.

    Args:
        star: Equatorial coordinate of the star.
        context: Observer place and instant.
        name: Display name carried into the result.

    Returns:
        Sighting with the horizontal coordinate and intermediate sidereal times.
    """
    utc_dt = context.utc_dt.astimezone(utc)
    jdn = gregorian_to_julian_day_number(utc_dt.year, utc_dt.month, utc_dt.day)
    seconds = utc_dt.second + utc_dt.microsecond / 1e6
    gmst = julian_day_number_to_gmst(jdn) + time_of_day_to_sidereal_seconds(
        utc_dt.hour, utc_dt.minute, seconds
    )
    lmst = gmst_to_lmst(gmst, context.lng)
    horizontal = HorizontalCoordinate.from_equatorial_degrees(star, lmst, context.lat)
    logger.debug(
        "sighting %s jdn=%s lmst=%s alt=%s az=%s",
        name or "?",
        jdn,
        lmst,
        horizontal.altitude,
        horizontal.azimuth,
    )

    return Sighting(
        name=name,
        context=context,
        equatorial=star,
        horizontal=horizontal,
        julian_day_number=jdn,
        gmst_seconds=gmst,
        lmst_seconds=lmst,
    )


def run(query: QueryInput, strict: bool = False) -> Sighting:
    """Top-level entry point: takes a QueryInput and returns a Sighting.

    Args:
        query: User input (star name, place, local time string).
        strict: Reject out-of-range latitude/longitude before computing.

    Returns:
        Fully computed Sighting.

    Raises:
        StarNotFoundError: Unknown star name.
        InvalidObservationError: strict=True and the place is out of range.
        ObserverError: Timezone could not be determined.
    """
    star = get_star(query.star)
    if strict:
        validate_observation(query.lat, query.lng)
    context = resolve_observer(query.lat, query.lng, query.when, tz=query.tz)
    return compute_sighting(star, context, name=query.star.strip().capitalize())
