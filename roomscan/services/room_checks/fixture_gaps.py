"""
Gap checks between bathroom fixtures and the surrounding walls.

Toilets are expected to sit flush: the back face may be at most 1 inch
from the nearest wall. Tubs may be flush or clearly free-standing, but a
1-6 inch gap to any wall on the tub's story is a cleaning trap and is flagged.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ...models import Category, Point
from ...schemas import Scan, Surface
from ..footprints import (
    object_box,
    point_to_ring_distance,
    ring_distance,
    same_story,
    wall_rings,
)
from ..geometry import is_finite_point, is_valid_transform, transform_point
from ..scan_constants import (
    BOUNDARY_EPSILON,
    TOILET_GAP_MAX_METERS,
    TUB_GAP_EPSILON,
    TUB_GAP_MAX_METERS,
    TUB_GAP_MIN_METERS,
)

logger = logging.getLogger(__name__)

Ring = List[Point]


def _story_rings(rings: Sequence[Tuple[Surface, Ring]], story: Optional[int]) -> List[Ring]:
    return [ring for wall, ring in rings if same_story(wall.story, story)]


def toilet_backface(toilet: Surface) -> Optional[Point]:
    """World position of the centre of the toilet's back (local -Z) face."""
    if not is_valid_transform(toilet.transform) or len(toilet.dimensions) < 3:
        return None
    backface = transform_point(Point(0.0, -toilet.dimensions[2] / 2), toilet.transform)
    return backface if is_finite_point(backface) else None


def nearest_wall_distance(point: Point, rings: Sequence[Ring]) -> Optional[float]:
    if not rings:
        return None
    return min(point_to_ring_distance(point, ring) for ring in rings)


def check_toilet_gaps(scan: Scan) -> bool:
    """True if any toilet's back face is more than 1 inch from its nearest wall."""
    rings = wall_rings(scan.walls)

    for toilet in scan.objects_of(Category.TOILET):
        backface = toilet_backface(toilet)
        if backface is None:
            logger.debug(f"Skipping toilet {toilet.identifier}: no usable pose")
            continue
        gap = nearest_wall_distance(backface, _story_rings(rings, toilet.story))
        if gap is None:
            continue
        if gap > TOILET_GAP_MAX_METERS + BOUNDARY_EPSILON:
            logger.debug(f"Toilet {toilet.identifier} is {gap:.4f} m from the wall")
            return True
    return False


def check_tub_gaps(scan: Scan) -> bool:
    """True if any tub is between 1 and 6 inches (inclusive) from any same-story wall."""
    rings = wall_rings(scan.walls)

    for tub in scan.objects_of(Category.BATHTUB):
        if len(tub.dimensions) < 3:
            continue
        box = object_box(tub)
        if not box:
            logger.debug(f"Skipping tub {tub.identifier}: no usable footprint")
            continue
        for ring in _story_rings(rings, tub.story):
            gap = ring_distance(box, ring)
            if TUB_GAP_MIN_METERS - TUB_GAP_EPSILON <= gap <= TUB_GAP_MAX_METERS + TUB_GAP_EPSILON:
                logger.debug(f"Tub {tub.identifier} is {gap:.4f} m from a wall")
                return True
    return False
