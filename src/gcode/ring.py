"""Integer lattice rings: points with ``x*x + y*y == m``."""

from __future__ import annotations

import math
from typing import List

from .types import LatticePoint


def count_within_radius(m: int) -> int:
    """Count lattice points with ``x*x + y*y <= m``.

    Only the ``x >= 0`` half is scanned; every column away from the y axis
    is mirrored once.
    """
    if m < 0:
        return 0
    r = math.isqrt(m)
    count = 0
    for x in range(r + 1):
        k = math.isqrt(m - x * x)
        count += (1 if x == 0 else 2) * (2 * k + 1)
    return count


def points_on_ring(m: int) -> List[LatticePoint]:
    """Return every lattice point with ``x*x + y*y == m`` (unordered)."""
    if m < 0:
        return []
    points: List[LatticePoint] = []
    r = math.isqrt(m)
    for x in range(-r, r + 1):
        rest = m - x * x
        k = math.isqrt(rest)
        if k * k != rest:
            continue
        if k > 0:
            points.append(LatticePoint(x, k))
            points.append(LatticePoint(x, -k))
        else:
            points.append(LatticePoint(x, 0))
    return points


def angle_key(point: LatticePoint) -> float:
    return math.atan2(point.y, point.x)


def sorted_ring(m: int) -> List[LatticePoint]:
    """Ring points clockwise from angle pi (``atan2`` descending).

    No two points of one ring share an angle, so the order is total.
    """
    return sorted(points_on_ring(m), key=angle_key, reverse=True)
