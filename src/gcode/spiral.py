"""Bijection between spiral indexes (1, 2, 3, ...) and the integer lattice.

Points are numbered ring by ring, in order of growing ``x*x + y*y``. Inside
a ring they are taken clockwise starting from angle pi. Index 1 is the
origin.
"""

from __future__ import annotations

import math

from .exceptions import InvalidIndex
from .ring import angle_key, count_within_radius, points_on_ring, sorted_ring
from .types import LatticePoint


def _smallest_ring_reaching(n: int) -> int:
    # About pi * m lattice points lie within radius sqrt(m).
    approx = int(n / math.pi)
    delta = math.isqrt(n - 1) + 1
    low = max(0, approx - delta)
    high = approx + delta

    while count_within_radius(high) < n:
        low = high + 1
        high += delta
        delta *= 2
    while low > 0 and count_within_radius(low - 1) >= n:
        high = low - 1
        low = max(0, low - delta)
        delta *= 2

    while low < high:
        mid = (low + high) // 2
        if count_within_radius(mid) < n:
            low = mid + 1
        else:
            high = mid
    return low


def index_to_point(n: int) -> LatticePoint:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidIndex(f"index must be an integer, got {n!r}")
    if n < 1:
        raise InvalidIndex(f"index must be >= 1, got {n}")
    if n == 1:
        return LatticePoint(0, 0)

    m = _smallest_ring_reaching(n)
    offset = n - count_within_radius(m - 1)
    return sorted_ring(m)[offset - 1]


def point_to_index(x: int, y: int) -> int:
    if x == 0 and y == 0:
        return 1

    m = x * x + y * y
    base = count_within_radius(m - 1)
    angle = angle_key(LatticePoint(x, y))
    rank = 1 + sum(1 for point in points_on_ring(m) if angle_key(point) > angle)
    return base + rank
