"""Coordinate validation, run before any fetch."""

import math

import pydantic

from solarcast.errors import ValidationError
from solarcast.models import Coordinate


def _parse_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError("Invalid latitude or longitude") from None
    if not math.isfinite(value):
        raise ValidationError("Invalid latitude or longitude")
    return value


def parse_coordinate(latitude_raw: str | None, longitude_raw: str | None) -> Coordinate:
    """Parse raw query values into a Coordinate.

    Bounds are inclusive: latitude in [-90, 90], longitude in [-180, 180].

    Raises:
        ValidationError: If either value is missing, non-numeric or out of range
    """
    latitude_raw = (latitude_raw or "").strip()
    longitude_raw = (longitude_raw or "").strip()
    if not latitude_raw or not longitude_raw:
        raise ValidationError("Both latitude and longitude are required")

    latitude = _parse_float(latitude_raw)
    longitude = _parse_float(longitude_raw)

    try:
        return Coordinate(latitude=latitude, longitude=longitude)
    except pydantic.ValidationError:
        raise ValidationError("Invalid latitude or longitude") from None
