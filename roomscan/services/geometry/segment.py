"""
Segment primitives: point-to-segment distance and strict intersection.

The intersection tests use the open interval ``0 < t < 1`` on both
segment parameters, so segments that merely touch at an endpoint (a
corner join or a T-junction) are never reported as intersecting.
"""

from typing import Optional

from ...models import Point
from ..scan_constants import EPSILON
from .vector import cross_product, dot_product, is_finite_point, magnitude_squared, subtract


class InvalidGeometryError(ValueError):
    """Non-finite coordinates reached a geometry primitive."""


def dist_to_segment(p: Point, a: Point, b: Point) -> float:
    """
    Shortest distance from *p* to the segment *a*-*b*.

    The projection of *p* onto the segment's line is clamped to the
    segment; a degenerate segment collapses to point distance.

    Raises
    ------
    InvalidGeometryError
        If any coordinate is NaN or infinite.
    """
    if not (is_finite_point(p) and is_finite_point(a) and is_finite_point(b)):
        raise InvalidGeometryError(
            f"dist_to_segment received non-finite coordinates: p={p}, a={a}, b={b}"
        )

    ab = subtract(b, a)
    l2 = magnitude_squared(ab)
    if l2 < EPSILON:
        return magnitude_squared(subtract(p, a)) ** 0.5

    t = dot_product(subtract(p, a), ab) / l2
    t = max(0.0, min(1.0, t))
    projection = Point(a.x + t * ab.x, a.y + t * ab.y)
    return magnitude_squared(subtract(p, projection)) ** 0.5


def _intersection_params(a: Point, b: Point, c: Point, d: Point) -> Optional[tuple]:
    if not all(is_finite_point(p) for p in (a, b, c, d)):
        return None
    ab = subtract(b, a)
    cd = subtract(d, c)
    det = cross_product(ab, cd)
    if abs(det) < EPSILON:
        # Parallel or collinear: not a crossing
        return None
    ad = subtract(d, a)
    lam = cross_product(ad, cd) / det
    gamma = cross_product(ab, ad) / det
    return lam, gamma


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True iff *a*-*b* and *c*-*d* cross strictly inside both segments."""
    params = _intersection_params(a, b, c, d)
    if params is None:
        return False
    lam, gamma = params
    return 0 < lam < 1 and 0 < gamma < 1


def get_segment_intersection(a: Point, b: Point, c: Point, d: Point) -> Optional[Point]:
    """Crossing point of *a*-*b* and *c*-*d*, or None under the same rules as
    :func:`segments_intersect`."""
    params = _intersection_params(a, b, c, d)
    if params is None:
        return None
    lam, gamma = params
    if not (0 < lam < 1 and 0 < gamma < 1):
        return None
    return Point(a.x + lam * (b.x - a.x), a.y + lam * (b.y - a.y))
