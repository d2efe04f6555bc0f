"""Crooked wall check: shallow-angle joins between touching walls."""

import math
from itertools import combinations
from typing import Tuple

from ...models import Point
from ...schemas import Scan
from ..footprints import same_story, wall_centerline
from ..geometry import dist_to_segment
from ..scan_constants import CROOKED_WALL_ANGLE_DEG, CROOKED_WALL_JOIN_METERS


def _heading(segment: Tuple[Point, Point]) -> float:
    start, end = segment
    return math.atan2(end.y - start.y, end.x - start.x)


def join_deviation(seg_a: Tuple[Point, Point], seg_b: Tuple[Point, Point]) -> float:
    """Angle in degrees between two segments, measured from straight (0 or 180)."""
    diff = abs(math.degrees(_heading(seg_a) - _heading(seg_b))) % 360
    if diff > 180:
        diff = 360 - diff
    return min(diff, abs(180 - diff))


def _join_distance(seg_a: Tuple[Point, Point], seg_b: Tuple[Point, Point]) -> float:
    return min(
        dist_to_segment(seg_b[0], *seg_a),
        dist_to_segment(seg_b[1], *seg_a),
        dist_to_segment(seg_a[0], *seg_b),
        dist_to_segment(seg_a[1], *seg_b),
    )


def check_crooked_walls(scan: Scan) -> bool:
    """
    True if two touching walls meet within 5 degrees of straight.

    Such a join is either a straight run that should have been one wall or
    a slight kink no builder would intend. Both limits are inclusive, so
    an exactly collinear join is flagged; real corners (e.g. 90 degrees)
    are not.
    """
    segments = []
    for wall in scan.walls:
        centerline = wall_centerline(wall)
        if centerline is not None:
            segments.append((wall, centerline))

    for (wall_a, seg_a), (wall_b, seg_b) in combinations(segments, 2):
        if not same_story(wall_a.story, wall_b.story):
            continue
        if _join_distance(seg_a, seg_b) > CROOKED_WALL_JOIN_METERS:
            continue
        if join_deviation(seg_a, seg_b) <= CROOKED_WALL_ANGLE_DEG:
            return True
    return False
