"""Greenwich and local mean sidereal time.

GMST follows Meeus, Astronomical Algorithms (2nd ed.), p. 87. Sidereal times
are kept in seconds (86400 s == 24 h == 2π) until a caller converts them
to radians for the coordinate transform.
"""

import math

from starbearing.julian import gregorian_to_julian_day_number

SECONDS_PER_DAY = 86400.0
J2000 = 2451545.0  # JD of epoch J2000.0
DAYS_PER_JULIAN_CENTURY = 36525.0
# Sidereal seconds elapsed per mean solar second
SIDEREAL_RATE = 1.00273790935


def julian_day_number_to_gmst(jdn: float) -> float:
    """Greenwich Mean Sidereal Time for a Julian Day Number.

    Args:
        jdn: Julian Day Number. An integral JDN + .5 is 0h UT; a fractional
            part beyond that selects a different UT.

    Returns:
        GMST in seconds, *including* the day count. Reduce it with
        ``gmst_seconds_of_day`` to get the seconds elapsed on the current
        sidereal day. Before J2000.0 the raw value is negative.
    """
    # Julian centuries since J2000.0
    tu = (jdn - J2000) / DAYS_PER_JULIAN_CENTURY
    return 24110.54841 + 8640184.812866 * tu + 0.093104 * tu * tu - 0.0000062 * tu * tu * tu


def julian_date_to_gmst(julian_date: float) -> float:
    """GMST in seconds (unreduced) for a Julian date that carries a time-of-day fraction."""
    return julian_day_number_to_gmst(julian_date)


def gmst_seconds_of_day(gmst_seconds: float) -> float:
    """Reduce a sidereal time in seconds to [0, 86400).

    An infinite input (the cubic term overflows for absurd JDNs) gives NaN.
    """
    if math.isinf(gmst_seconds):
        return math.nan
    result = math.fmod(gmst_seconds, SECONDS_PER_DAY)
    if result < 0:
        result += SECONDS_PER_DAY
    # a tiny negative remainder rounds up to a full day
    if result >= SECONDS_PER_DAY:
        result -= SECONDS_PER_DAY
    return result


def time_of_day_to_sidereal_seconds(hours: float, minutes: float, seconds: float) -> float:
    """Sidereal seconds elapsed during a civil (UT) time of day.

    Add the result to the GMST at 0h UT to get the GMST at that time:
    ``julian_day_number_to_gmst(jdn_0h) + time_of_day_to_sidereal_seconds(h, m, s)``.
    """
    return (hours * 60 * 60 + minutes * 60 + seconds) * SIDEREAL_RATE


def gmst_to_lmst(gmst_seconds: float, longitude_degrees: float) -> float:
    """Local Mean Sidereal Time for an observer longitude.

    Args:
        gmst_seconds: GMST in seconds, reduced or not.
        longitude_degrees: Observer longitude, east positive.

    Returns:
        LMST in seconds of day, in [0, 86400).
    """
    return gmst_seconds_of_day(gmst_seconds + longitude_degrees / 360 * SECONDS_PER_DAY)


def local_mean_sidereal_time(
    year: int,
    month: int,
    day: int,
    hours: float,
    minutes: float,
    seconds: float,
    longitude_degrees: float,
) -> float:
    """LMST in seconds of day for a UTC calendar date and time at a longitude."""
    gmst_0h = julian_day_number_to_gmst(gregorian_to_julian_day_number(year, month, day))
    gmst = gmst_0h + time_of_day_to_sidereal_seconds(hours, minutes, seconds)
    return gmst_to_lmst(gmst, longitude_degrees)


def seconds_to_radians(seconds: float) -> float:
    """Seconds of (sidereal) day to radians: 86400 s == 2π."""
    return seconds / SECONDS_PER_DAY * 2 * math.pi


def degrees_to_radians(degrees: float) -> float:
    return degrees * 2 * math.pi / 360
