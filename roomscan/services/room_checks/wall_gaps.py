"""Wall-to-wall gap check."""

import logging
from itertools import combinations

from ...schemas import Scan
from ..footprints import ring_distance, same_story, wall_rings
from ..scan_constants import BOUNDARY_EPSILON, WALL_GAP_MAX_METERS, WALL_GAP_MIN_METERS

logger = logging.getLogger(__name__)


def check_wall_gaps(scan: Scan) -> bool:
    """
    True if two walls on the same story come within 1-12 inches of each other.

    The distance is the smallest corner-to-edge distance in either
    direction, so a pinch point mid-span counts as well as a gap at the
    ends. Touching walls (0) and walls a foot or more apart pass; both
    band limits are exclusive.
    """
    rings = wall_rings(scan.walls)
    for (wall_a, ring_a), (wall_b, ring_b) in combinations(rings, 2):
        if not same_story(wall_a.story, wall_b.story):
            continue
        gap = ring_distance(ring_a, ring_b)
        if WALL_GAP_MIN_METERS + BOUNDARY_EPSILON < gap < WALL_GAP_MAX_METERS - BOUNDARY_EPSILON:
            logger.debug(f"Walls {wall_a.identifier}/{wall_b.identifier} gap {gap:.4f} m")
            return True
    return False
