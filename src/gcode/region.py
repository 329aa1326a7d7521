"""Nearest-region search over static region tables."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Mapping, Optional

from .exceptions import InvalidRegionLevel
from .models import Region
from .types import GeoPoint

EARTH_RADIUS_KM = 6371.0
SUPPORTED_REGION_LEVELS = (1, 2)


def check_region_level(region_level: int) -> int:
    if region_level not in SUPPORTED_REGION_LEVELS:
        raise InvalidRegionLevel(
            f"region level must be one of {SUPPORTED_REGION_LEVELS}, got {region_level}"
        )
    return region_level


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in kilometers."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlng = math.radians(b.lng - a.lng)
    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def prefix_of(region: Region, region_level: int) -> str:
    """Text a region contributes in front of a code."""
    return region.code if region_level == 1 else region.name


class RegionTable:
    def __init__(self, levels: Optional[Mapping[int, Iterable[Region]]] = None) -> None:
        self._levels: Dict[int, List[Region]] = {}
        for level, regions in (levels or {}).items():
            self._levels[check_region_level(level)] = list(regions)

    def regions(self, region_level: int = 1) -> List[Region]:
        return list(self._levels.get(check_region_level(region_level), []))

    def find_closest(self, point: GeoPoint, region_level: int = 1) -> Optional[Region]:
        closest: Optional[Region] = None
        closest_km = math.inf
        for region in self._levels.get(check_region_level(region_level), []):
            distance = haversine_km(point, region.center)
            if distance < closest_km:
                closest_km = distance
                closest = region
        return closest

    def find(self, key: str, region_level: int = 1) -> Optional[Region]:
        wanted = key.strip().lower()
        for region in self._levels.get(check_region_level(region_level), []):
            if prefix_of(region, region_level).lower() == wanted:
                return region
        return None
