"""Civil time → day fraction → Julian Day Number (Meeus, Astronomical Algorithms, ch. 7)."""

import math
from datetime import datetime

from pytz import utc


def time_to_day_fraction(hours: float, minutes: float, seconds: float) -> float:
    """Return the fraction of a 24-hour day elapsed at hours:minutes:seconds.

    17:23:12 → (17 * 3600 + 23 * 60 + 12) / 86400 = 0.724

    Ranges (hours 0..23, minutes and seconds 0..59) are not enforced.
    """
    return (hours * 60 * 60 + minutes * 60 + seconds) / (60 * 60 * 24)


def gregorian_to_julian_day_number(year: int, month: int, day: float) -> float:
    """Convert a proleptic Gregorian calendar date to a Julian Day Number.

    An integral ``day`` gives the JDN at 00:00 UTC (ending in .5). A fractional
    ``day`` shifts the result by that fraction of a day, e.g.
    ``day=10 + time_to_day_fraction(19, 21, 0)``.

    Args:
        year: Calendar year. Dates before 1582 are treated as proleptic Gregorian.
        month: Month 1..12. Out-of-range values are not rejected.
        day: Day of month, optionally with a time-of-day fraction.

    Returns:
        Julian Day Number (days).
    """
    # January and February count as months 13 and 14 of the previous year
    y = year if month > 2 else year - 1
    m = month if month > 2 else month + 12
    b = 2 - math.floor(y / 100) + math.floor(y / 400)
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524.5


def datetime_to_julian_day_number(dt: datetime) -> float:
    """Julian Day Number of a datetime, including its time of day.

    Naive datetimes are taken to be UTC.
    """
    if dt.tzinfo is None:
        dt = utc.localize(dt)
    dt = dt.astimezone(utc)
    seconds = dt.second + dt.microsecond / 1e6
    fraction = time_to_day_fraction(dt.hour, dt.minute, seconds)
    return gregorian_to_julian_day_number(dt.year, dt.month, dt.day + fraction)
