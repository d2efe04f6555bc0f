"""Separating Axis Theorem overlap test for convex world-space footprints."""

from typing import Sequence, Tuple

from ...models import Point
from .vector import dot_product


def _project(polygon: Sequence[Point], axis: Point) -> Tuple[float, float]:
    values = [dot_product(axis, p) for p in polygon]
    return min(values), max(values)


def polygons_intersect(poly_a: Sequence[Point], poly_b: Sequence[Point]) -> bool:
    """
    True unless some edge normal of either polygon separates them.

    Touching (shared edge or vertex) counts as intersecting. Both polygons
    are assumed convex; an empty polygon never intersects anything.
    """
    if not poly_a or not poly_b:
        return False

    for polygon in (poly_a, poly_b):
        n = len(polygon)
        for i in range(n):
            p1 = polygon[i]
            p2 = polygon[(i + 1) % n]
            normal = Point(-(p2.y - p1.y), p2.x - p1.x)

            min_a, max_a = _project(poly_a, normal)
            min_b, max_b = _project(poly_b, normal)
            if max_a < min_b or max_b < min_a:
                return False
    return True
