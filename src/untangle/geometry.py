"""Exact geometry on rational points.

The crossing predicate never leaves the integers: the four points are
rewritten over a common denominator by multiplying each numerator by the
other points' denominators, and every subsequent test is a sign or
comparison of integer cross / dot products.  Only :func:`make_circle` uses
floating point, to seed integer positions.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .models import Point

IntPair = Tuple[int, int]


def coord_limit(n: int, point_density: int = 3) -> int:
    """Side of the square grid holding *n* points, ``ceil(sqrt(density * n))``."""
    cells = n * point_density
    side = math.isqrt(cells)
    if side * side < cells:
        side += 1
    return side


def compute_size(n: int, tilesize: int, point_density: int = 3) -> tuple[int, int]:
    """Pixel extent of the playing area for *n* points."""
    side = coord_limit(n, point_density) * tilesize
    return side, side


def _common_numerators(points: Sequence[Point]) -> List[IntPair]:
    dens = [p.d for p in points]
    if all(d == dens[0] for d in dens):
        return [(p.x, p.y) for p in points]
    out: List[IntPair] = []
    for i, p in enumerate(points):
        k = 1
        for j, d in enumerate(dens):
            if j != i:
                k *= d
        out.append((p.x * k, p.y * k))
    return out


def _orient(p: IntPair, q: IntPair, r: IntPair) -> int:
    """Twice the signed area of triangle p, q, r."""
    return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])


def _same_strict_sign(u: int, v: int) -> bool:
    return (u > 0 and v > 0) or (u < 0 and v < 0)


def _collinear_overlap(a1: IntPair, a2: IntPair, b1: IntPair, b2: IntPair) -> bool:
    # All four points lie on one line; pick any non-zero direction along it.
    for p, q in ((a1, a2), (b1, b2)):
        dx, dy = q[0] - p[0], q[1] - p[1]
        if dx or dy:
            break
    else:
        return a1 == b1

    def project(r: IntPair) -> int:
        return r[0] * dx + r[1] * dy

    ta = sorted((project(a1), project(a2)))
    tb = sorted((project(b1), project(b2)))
    return max(ta[0], tb[0]) <= min(ta[1], tb[1])


def segments_cross(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    """Return True if closed segments a1-a2 and b1-b2 share any point.

    Touching at an endpoint and collinear overlap both count.  Either
    segment may have zero length, so ``segments_cross(u, v, p, p)`` tests
    whether *p* lies on segment u-v.
    """
    A1, A2, B1, B2 = _common_numerators((a1, a2, b1, b2))

    o1 = _orient(A1, A2, B1)
    o2 = _orient(A1, A2, B2)
    if _same_strict_sign(o1, o2):
        return False

    o3 = _orient(B1, B2, A1)
    o4 = _orient(B1, B2, A2)
    if _same_strict_sign(o3, o4):
        return False

    if o1 == 0 and o2 == 0 and o3 == 0 and o4 == 0:
        return _collinear_overlap(A1, A2, B1, B2)

    return True


def point_on_segment(p: Point, s1: Point, s2: Point) -> bool:
    return segments_cross(s1, s2, p, p)


def make_circle(n: int, w: int, d: int = 64) -> List[Point]:
    """Place *n* points evenly on a circle inside the box (0, 0)-(w, w).

    Coordinates are rounded half-up onto the fixed denominator *d*; a
    little space is left outside the circle.
    """
    import numpy as np

    c = d * w // 2
    r = d * w * 3 // 7
    angles = np.arange(n) * 2 * np.pi / n
    xs = np.floor(c + r * np.sin(angles) + 0.5).astype(np.int64)
    ys = np.floor(c - r * np.cos(angles) + 0.5).astype(np.int64)
    return [Point(int(x), int(y), d) for x, y in zip(xs, ys)]
