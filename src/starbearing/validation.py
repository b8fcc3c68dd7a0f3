"""Opt-in range checks for observer input.

The coordinate and time functions accept any float and let out-of-range
values propagate. Callers that want to reject such input call
``validate_observation`` first; ``compute.run(..., strict=True)`` does so.
"""


class InvalidObservationError(ValueError):
    """Observer position outside its valid range."""


def validate_observation(lat: float, lng: float) -> None:
    """Raise InvalidObservationError listing every out-of-range coordinate.

    NaN fails every check.
    """
    problems: list[str] = []
    if not -90 <= lat <= 90:
        problems.append(f"latitude {lat} not in [-90, 90]")
    if not -180 <= lng <= 180:
        problems.append(f"longitude {lng} not in [-180, 180]")
    if problems:
        raise InvalidObservationError("; ".join(problems))
