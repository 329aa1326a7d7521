"""Flat-Earth grid around a center point.

One degree is taken as 111 km on both axes, with longitude scaled by the
cosine of the center latitude. Good for meters to a few kilometers.
"""

from __future__ import annotations

import math

from .spiral import index_to_point
from .types import GeoPoint, GridOffset

METERS_PER_DEGREE = 111000
DEGREES_PER_METER = 1 / METERS_PER_DEGREE
DEFAULT_PRECISION_METERS = 3.0


def _check_scale(precision_meters: float, degrees_per_meter: float) -> None:
    if precision_meters <= 0:
        raise ValueError(f"precision_meters must be positive, got {precision_meters}")
    if degrees_per_meter <= 0:
        raise ValueError(f"degrees_per_meter must be positive, got {degrees_per_meter}")


def to_offset(
    center: GeoPoint,
    target: GeoPoint,
    precision_meters: float = DEFAULT_PRECISION_METERS,
    degrees_per_meter: float = DEGREES_PER_METER,
) -> GridOffset:
    """Quantize ``target`` to grid cells of ``precision_meters`` around ``center``."""
    _check_scale(precision_meters, degrees_per_meter)
    lat_m = (target.lat - center.lat) / degrees_per_meter
    lng_m = (
        (target.lng - center.lng)
        / degrees_per_meter
        * math.cos(math.radians(center.lat))
    )
    return GridOffset(
        lat=round(lat_m / precision_meters),
        lng=round(lng_m / precision_meters),
    )


def from_offset(
    center: GeoPoint,
    offset: GridOffset,
    precision_meters: float = DEFAULT_PRECISION_METERS,
    degrees_per_meter: float = DEGREES_PER_METER,
) -> GeoPoint:
    """Inverse of :func:`to_offset`; returns the center of the grid cell."""
    _check_scale(precision_meters, degrees_per_meter)
    lat_diff = offset.lat * precision_meters * degrees_per_meter
    lng_diff = (
        offset.lng
        * precision_meters
        * degrees_per_meter
        / math.cos(math.radians(center.lat))
    )
    return GeoPoint(lat=center.lat + lat_diff, lng=center.lng + lng_diff)


def max_range_meters(n: int, precision_meters: float = DEFAULT_PRECISION_METERS) -> float:
    """Distance from the center, in meters, covered by spiral index ``n``.

    Measured along the longer axis of the cell offset.
    """
    x, y = index_to_point(n)
    return max(abs(x), abs(y)) * precision_meters


def format_distance(meters: float) -> str:
    if meters >= 1000:
        return f"{meters / 1000:.1f}km"
    return f"{meters:.1f}m"
