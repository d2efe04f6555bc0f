"""Colinear wall check: a straight wall the scanner split into pieces."""

from itertools import combinations

from ...schemas import Scan
from ..footprints import ring_distance, same_story, wall_direction, wall_rings
from ..geometry import dot_product
from ..scan_constants import COLINEAR_WALL_GAP_MAX_METERS, COLINEAR_WALL_PARALLEL_THRESHOLD


def check_colinear_walls(scan: Scan) -> bool:
    """
    True if two walls run parallel (|cos| > 0.996) and are less than
    3 inches apart, overlapping included.
    """
    walls = [
        (wall, ring, wall_direction(ring))
        for wall, ring in wall_rings(scan.walls)
    ]
    for (wall_a, ring_a, dir_a), (wall_b, ring_b, dir_b) in combinations(walls, 2):
        if not same_story(wall_a.story, wall_b.story):
            continue
        if abs(dot_product(dir_a, dir_b)) <= COLINEAR_WALL_PARALLEL_THRESHOLD:
            continue
        if ring_distance(ring_a, ring_b) < COLINEAR_WALL_GAP_MAX_METERS:
            return True
    return False
