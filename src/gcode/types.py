from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float

    def __str__(self) -> str:
        return f"{self.lat},{self.lng}"

    @classmethod
    def from_string(cls, value: str) -> "GeoPoint":
        parts = value.split(",", 1)
        if len(parts) != 2:
            raise ValueError("GeoPoint string must be 'lat,lng'")
        lat = float(parts[0].strip())
        lng = float(parts[1].strip())
        return cls(lat=lat, lng=lng)


@dataclass(frozen=True)
class GridOffset:
    """Signed grid-cell counts from a center at a given precision."""

    lat: int
    lng: int


class LatticePoint(NamedTuple):
    x: int
    y: int
