"""
Interpenetration checks between objects and walls.

Three independent signals over same-story entities:
  - object-object: inset bounding boxes overlap (SAT), except sink/storage
  - wall-object: a wall rectangle overlaps an inset object box
  - wall-wall: centrelines cross mid-span or overlap while collinear
"""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import List, Optional, Tuple

from ...models import Category, Point
from ...schemas import Scan, Surface
from ..footprints import object_box, same_story, wall_centerline, wall_rectangle
from ..geometry import cross_product, dot_product, magnitude_squared, polygons_intersect, subtract
from ..scan_constants import (
    EPSILON,
    OBJECT_COLLISION_INSET_METERS,
    WALL_COLLINEAR_TOLERANCE,
    WALL_CROSSING_PARAM_EPSILON,
)

logger = logging.getLogger(__name__)

# Vanity assemblies are modelled as a sink overlapping its cabinet
VANITY_PAIR = frozenset({Category.SINK, Category.STORAGE})


@dataclass(frozen=True)
class IntersectionResult:
    has_object_intersection_errors: bool = False
    has_wall_object_intersection_errors: bool = False
    has_wall_wall_intersection_errors: bool = False


@dataclass(frozen=True)
class ObjectFootprint:
    item: Surface
    corners: List[Point]
    inner_corners: List[Point]

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        xs = [p.x for p in self.corners]
        zs = [p.y for p in self.corners]
        return min(xs), min(zs), max(xs), max(zs)


def object_footprints(scan: Scan) -> List[ObjectFootprint]:
    """Full and inset world boxes for every object with box geometry."""
    footprints = []
    for item in scan.objects:
        corners = object_box(item)
        if not corners:
            logger.debug(f"Skipping object {item.identifier}: no box geometry")
            continue
        footprints.append(ObjectFootprint(item, corners, object_box(item, OBJECT_COLLISION_INSET_METERS)))
    return footprints


def _bounds_overlap(a: ObjectFootprint, b: ObjectFootprint) -> bool:
    a_min_x, a_min_z, a_max_x, a_max_z = a.bounds
    b_min_x, b_min_z, b_max_x, b_max_z = b.bounds
    return not (a_max_x < b_min_x or a_min_x > b_max_x or a_max_z < b_min_z or a_min_z > b_max_z)


def is_vanity_pair(a: Surface, b: Surface) -> bool:
    return {a.category, b.category} == VANITY_PAIR


def check_object_intersections(scan: Scan, footprints: Optional[List[ObjectFootprint]] = None) -> bool:
    """True if two same-story objects overlap by more than the 1 inch inset."""
    if footprints is None:
        footprints = object_footprints(scan)
    for a, b in combinations(footprints, 2):
        if not same_story(a.item.story, b.item.story):
            continue
        if is_vanity_pair(a.item, b.item):
            continue
        if not _bounds_overlap(a, b):
            continue
        if polygons_intersect(a.inner_corners, b.inner_corners):
            logger.debug(f"Objects {a.item.identifier}/{b.item.identifier} intersect")
            return True
    return False


def check_wall_object_intersections(scan: Scan, footprints: Optional[List[ObjectFootprint]] = None) -> bool:
    """True if an object's inset box overlaps a same-story wall rectangle."""
    if footprints is None:
        footprints = object_footprints(scan)
    for wall in scan.walls:
        rectangle = wall_rectangle(wall)
        if not rectangle:
            continue
        for footprint in footprints:
            if not same_story(wall.story, footprint.item.story):
                continue
            if polygons_intersect(rectangle, footprint.inner_corners):
                logger.debug(f"Wall {wall.identifier} intersects object {footprint.item.identifier}")
                return True
    return False


def centerlines_intersect(seg_a: Tuple[Point, Point], seg_b: Tuple[Point, Point]) -> bool:
    """
    True if two wall centrelines cross away from their ends, or are
    collinear and share more than a point.

    Walls meeting at a corner touch only at an endpoint and pass.
    """
    p1, p2 = seg_a
    p3, p4 = seg_b
    d1 = subtract(p2, p1)
    d2 = subtract(p4, p3)

    den = cross_product(d1, d2)
    if abs(den) < EPSILON:
        # Parallel: only collinear overlap counts
        if abs(cross_product(d1, subtract(p3, p1))) > WALL_COLLINEAR_TOLERANCE:
            return False
        length_sq = magnitude_squared(d1)
        if length_sq < EPSILON:
            return False
        t3 = dot_product(subtract(p3, p1), d1) / length_sq
        t4 = dot_product(subtract(p4, p1), d1) / length_sq
        overlap = min(1.0, max(t3, t4)) - max(0.0, min(t3, t4))
        return overlap > WALL_CROSSING_PARAM_EPSILON

    diff = subtract(p3, p1)
    t = cross_product(diff, d2) / den
    u = cross_product(diff, d1) / den
    low, high = WALL_CROSSING_PARAM_EPSILON, 1 - WALL_CROSSING_PARAM_EPSILON
    return low < t < high and low < u < high


def check_wall_wall_intersections(scan: Scan) -> bool:
    segments = []
    for wall in scan.walls:
        centerline = wall_centerline(wall)
        if centerline is not None:
            segments.append((wall, centerline))

    for (wall_a, seg_a), (wall_b, seg_b) in combinations(segments, 2):
        if not same_story(wall_a.story, wall_b.story):
            continue
        if centerlines_intersect(seg_a, seg_b):
            logger.debug(f"Walls {wall_a.identifier}/{wall_b.identifier} intersect")
            return True
    return False


def check_intersections(scan: Scan) -> IntersectionResult:
    footprints = object_footprints(scan)
    return IntersectionResult(
        has_object_intersection_errors=check_object_intersections(scan, footprints),
        has_wall_object_intersection_errors=check_wall_object_intersections(scan, footprints),
        has_wall_wall_intersection_errors=check_wall_wall_intersections(scan),
    )
