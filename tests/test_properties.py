"""Invariant checks over random input."""

import math

import pytest

from starbearing.models import EquatorialCoordinate, HorizontalCoordinate
from starbearing.sidereal import SECONDS_PER_DAY, gmst_seconds_of_day, gmst_to_lmst

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
settings = hypothesis.settings
st = hypothesis.strategies

GMST = st.floats(min_value=-1e12, max_value=1e12, allow_nan=False, allow_infinity=False)
LONGITUDES = st.floats(min_value=-180.0, max_value=180.0)
LATITUDES = st.floats(min_value=-89.0, max_value=89.0)
DECLINATIONS = st.floats(min_value=-math.pi / 2, max_value=math.pi / 2)
RIGHT_ASCENSIONS = st.floats(min_value=0.0, max_value=2 * math.pi, exclude_max=True)
LMST_SECONDS = st.floats(min_value=0.0, max_value=SECONDS_PER_DAY, exclude_max=True)


@settings(deadline=None)
@given(gmst=GMST, longitude=LONGITUDES)
def test_lmst_within_one_day(gmst: float, longitude: float) -> None:
    lmst = gmst_to_lmst(gmst, longitude)
    assert 0.0 <= lmst < SECONDS_PER_DAY


@settings(deadline=None)
@given(gmst=GMST)
def test_seconds_of_day_within_one_day(gmst: float) -> None:
    assert 0.0 <= gmst_seconds_of_day(gmst) < SECONDS_PER_DAY


@settings(deadline=None)
@given(declination=DECLINATIONS, right_ascension=RIGHT_ASCENSIONS)
def test_stored_radians_read_back_exactly(declination: float, right_ascension: float) -> None:
    star = EquatorialCoordinate(declination=declination, right_ascension=right_ascension)
    assert star.declination == declination
    assert star.right_ascension == right_ascension


@settings(deadline=None)
@given(
    declination=DECLINATIONS,
    right_ascension=RIGHT_ASCENSIONS,
    lmst=LMST_SECONDS,
    latitude=LATITUDES,
)
def test_horizontal_ranges(
    declination: float, right_ascension: float, lmst: float, latitude: float
) -> None:
    star = EquatorialCoordinate(declination=declination, right_ascension=right_ascension)
    coord = HorizontalCoordinate.from_equatorial_degrees(star, lmst, latitude)
    if not math.isnan(coord.altitude):
        assert -math.pi / 2 <= coord.altitude <= math.pi / 2
    if not math.isnan(coord.azimuth):
        # a raw atan of about -1e-17 plus 2π rounds to exactly 2π
        assert 0.0 <= coord.azimuth <= 2 * math.pi


@settings(deadline=None)
@given(
    declination=DECLINATIONS,
    right_ascension=RIGHT_ASCENSIONS,
    lmst=LMST_SECONDS,
    latitude=LATITUDES,
)
def test_degree_overload_is_bit_identical(
    declination: float, right_ascension: float, lmst: float, latitude: float
) -> None:
    star = EquatorialCoordinate(declination=declination, right_ascension=right_ascension)
    via_degrees = HorizontalCoordinate.from_equatorial_degrees(star, lmst, latitude)
    via_radians = HorizontalCoordinate.from_equatorial(
        star, lmst / 86400 * 2 * math.pi, latitude * 2 * math.pi / 360
    )
    # NaN != NaN, so compare through repr
    assert repr(via_degrees) == repr(via_radians)
