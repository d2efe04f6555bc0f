"""Wall elevation checks: soffit notches and low ceilings."""

import math

from ...schemas import Scan, Surface
from ..footprints import local_corners, minimum_ceiling_height
from ..geometry.vector import is_finite_point
from ..scan_constants import (
    LOW_CEILING_THRESHOLD_METERS,
    MIN_POLYGON_VERTICES,
    SOFFIT_MAX_ANGLE_DEG,
    SOFFIT_MIN_ANGLE_DEG,
)


def has_soffit(wall: Surface) -> bool:
    """
    True if any vertex of the wall's local outline turns by 260-280 degrees.

    The turn at each vertex is the counter-clockwise angle from the edge
    back to the previous vertex to the edge on to the next one, in
    [0, 360). Outlines are listed clockwise, so plain convex corners come
    out near 90 and a step-in notch near 270. A collinear redundant vertex
    gives exactly 180 and is not a corner.
    """
    corners = local_corners(wall)
    n = len(corners)
    if n < MIN_POLYGON_VERTICES or not all(is_finite_point(p) for p in corners):
        return False

    for i in range(n):
        prev, curr, nxt = corners[i - 1], corners[i], corners[(i + 1) % n]
        angle_back = math.atan2(prev.y - curr.y, prev.x - curr.x)
        angle_on = math.atan2(nxt.y - curr.y, nxt.x - curr.x)
        turn = math.degrees(angle_on - angle_back)
        if turn < 0:
            turn += 360
        if SOFFIT_MIN_ANGLE_DEG <= turn <= SOFFIT_MAX_ANGLE_DEG:
            return True
    return False


def check_soffit(scan: Scan) -> bool:
    return any(has_soffit(w) for w in scan.walls)


def check_low_ceiling(scan: Scan) -> bool:
    """True if any wall's lowest ceiling point is under 7.5 ft."""
    for wall in scan.walls:
        height = minimum_ceiling_height(wall)
        if height is not None and height < LOW_CEILING_THRESHOLD_METERS:
            return True
    return False
