"""
Polygon integrity validation and winding.

``check_polygon_integrity`` is the gatekeeper for footprint *quality*:
rings are rejected on the first failing rule, in this order:

  1. At least 3 points
  2. Finite coordinates within +/- MAX_COORDINATE
  3. Implicit closure (first point must not repeat as the last)
  4. No edge shorter than 1 mm, no interior angle outside [5, 175] degrees
  5. Non-degenerate area with clockwise winding (negative signed area)
  6. No strict self-intersection between non-adjacent edges
  7. No collinear overlap between non-adjacent edges
  8. No coincident vertices
"""

import math
from typing import Sequence

from ...models import Point
from ..scan_constants import (
    EPSILON,
    MAX_COORDINATE,
    MAX_INTERIOR_ANGLE_DEG,
    MIN_EDGE_LENGTH,
    MIN_INTERIOR_ANGLE_DEG,
    MIN_POLYGON_VERTICES,
    POINT_EPSILON,
)
from .segment import segments_intersect
from .vector import cross_product, dot_product, magnitude, magnitude_squared, subtract


def signed_area(points: Sequence[Point]) -> float:
    """Signed area as ``sum((x2 - x1) * (y2 + y1)) / 2``.

    Under this convention a ring listed clockwise (screen orientation) has a
    negative area.
    """
    n = len(points)
    total = 0.0
    for i in range(n):
        p1 = points[i]
        p2 = points[(i + 1) % n]
        total += (p2.x - p1.x) * (p2.y + p1.y)
    return total / 2


def check_polygon_integrity(points: Sequence[Point]) -> bool:
    """Return True if *points* is a well-formed clockwise footprint ring."""
    n = len(points)
    if n < MIN_POLYGON_VERTICES:
        return False

    for p in points:
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            return False
        if abs(p.x) > MAX_COORDINATE or abs(p.y) > MAX_COORDINATE:
            return False

    first, last = points[0], points[-1]
    if abs(first.x - last.x) < POINT_EPSILON and abs(first.y - last.y) < POINT_EPSILON:
        return False

    if not _edges_and_angles_ok(points):
        return False

    area = signed_area(points)
    if abs(area) < EPSILON or area > -EPSILON:
        return False

    if _has_self_intersection(points):
        return False
    if _has_collinear_overlap(points):
        return False
    if _has_duplicate_points(points):
        return False
    return True


# ---------- Rules ----------
def _edges_and_angles_ok(points: Sequence[Point]) -> bool:
    n = len(points)
    for i in range(n):
        p1 = points[i]
        p2 = points[(i + 1) % n]
        p3 = points[(i + 2) % n]

        if magnitude(subtract(p2, p1)) < MIN_EDGE_LENGTH:
            return False

        # Angle at p2
        ba = subtract(p1, p2)
        bc = subtract(p3, p2)
        len_ba = magnitude(ba)
        len_bc = magnitude(bc)
        if len_ba < EPSILON or len_bc < EPSILON:
            return False
        cos_theta = max(-1.0, min(1.0, dot_product(ba, bc) / (len_ba * len_bc)))
        angle = math.degrees(math.acos(cos_theta))
        if angle < MIN_INTERIOR_ANGLE_DEG or angle > MAX_INTERIOR_ANGLE_DEG:
            return False
    return True


def _has_self_intersection(points: Sequence[Point]) -> bool:
    n = len(points)
    for i in range(n):
        p1, p2 = points[i], points[(i + 1) % n]
        for j in range(i + 2, n):
            # First and last edges share the closing vertex
            if i == 0 and j == n - 1:
                continue
            if segments_intersect(p1, p2, points[j], points[(j + 1) % n]):
                return True
    return False


def _collinear_overlap(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    a = subtract(p2, p1)
    if abs(cross_product(a, subtract(q2, q1))) > EPSILON:
        return False
    if abs(cross_product(a, subtract(q1, p1))) > EPSILON:
        return False

    # Project onto x, or onto y for vertical edges
    vertical = abs(a.x) < EPSILON

    def project(p: Point) -> float:
        return p.y if vertical else p.x

    a_lo, a_hi = sorted((project(p1), project(p2)))
    b_lo, b_hi = sorted((project(q1), project(q2)))
    return min(a_hi, b_hi) - max(a_lo, b_lo) > EPSILON


def _has_collinear_overlap(points: Sequence[Point]) -> bool:
    n = len(points)
    for i in range(n):
        for j in range(i + 1, n):
            if j - i == 1 or (i == 0 and j == n - 1):
                continue
            if _collinear_overlap(points[i], points[(i + 1) % n],
                                  points[j], points[(j + 1) % n]):
                return True
    return False


def _has_duplicate_points(points: Sequence[Point]) -> bool:
    limit = POINT_EPSILON * POINT_EPSILON
    n = len(points)
    for i in range(n):
        for j in range(i + 1, n):
            if magnitude_squared(subtract(points[j], points[i])) < limit:
                return True
    return False
