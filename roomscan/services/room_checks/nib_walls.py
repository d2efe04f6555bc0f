"""Nib wall check: wall stubs shorter than a foot."""

from itertools import combinations
from typing import Sequence

from ...models import Point
from ...schemas import Scan
from ..footprints import same_story, wall_rings
from ..geometry import distance
from ..scan_constants import NIB_WALL_THRESHOLD_METERS


def wall_span(ring: Sequence[Point]) -> float:
    """Largest distance between any two corners."""
    return max((distance(a, b) for a, b in combinations(ring, 2)), default=0.0)


def check_nib_walls(scan: Scan) -> bool:
    """True if a wall on the scan's story is shorter than 1 ft (zero-length walls excluded)."""
    for wall, ring in wall_rings(scan.walls):
        if not same_story(wall.story, scan.story):
            continue
        span = wall_span(ring)
        if 0 < span < NIB_WALL_THRESHOLD_METERS:
            return True
    return False
