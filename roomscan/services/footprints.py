"""
Entity footprints in plan view.

Turns scan entities into world-space 2D shapes for the room checks:
  - Wall corner rings and centrelines
  - Wall rectangles (length x thickness)
  - Object boxes (width x depth), optionally inset
  - Door clearance boxes

Every builder returns ``None`` (or an empty list) for degenerate input so
callers can skip the entity instead of failing the whole scan.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

from shapely.geometry import Polygon

from ..models import Point
from ..schemas import Surface
from .geometry import (
    dist_to_segment,
    distance,
    is_valid_transform,
    transform_point,
)
from .scan_constants import (
    DEFAULT_WALL_THICKNESS_METERS,
    DOOR_CLEARANCE_METERS,
    DOOR_WIDTH_SHRINK_METERS,
    M_TY,
    MIN_POLYGON_VERTICES,
)

logger = logging.getLogger(__name__)

Segment = Tuple[Point, Point]


# ---------- Stories ----------
def same_story(a: Optional[float], b: Optional[float]) -> bool:
    """Entities are on different stories only when both stories are known."""
    if a is None or b is None:
        return True
    return a == b


# ---------- Corners ----------
def local_corners(surface: Surface) -> List[Point]:
    """Local ``(x, y)`` of each polygon corner that carries both values."""
    return [Point(c[0], c[1]) for c in surface.polygon_corners if len(c) >= 2]


def _finite(points: Sequence[Point]) -> bool:
    return all(math.isfinite(p.x) and math.isfinite(p.y) for p in points)


def surface_area(surface: Surface) -> float:
    """
    Area of a surface in square metres.

    Polygon area of the corners when there are at least three,
    else ``dimensions[0] * dimensions[1]`` for a 3-vector, else 0.
    """
    corners = local_corners(surface)
    if len(corners) >= MIN_POLYGON_VERTICES:
        return Polygon([(p.x, p.y) for p in corners]).area
    if len(surface.dimensions) == 3:
        return surface.dimensions[0] * surface.dimensions[1]
    return 0.0


def _dimension(surface: Surface, index: int, default: float = 0.0) -> float:
    dims = surface.dimensions
    return dims[index] if index < len(dims) else default


# ---------- Walls ----------
def wall_world_corners(wall: Surface) -> List[Point]:
    """
    World corner ring of a wall.

    Falls back to the length-only segment ``(-L/2, 0) -> (L/2, 0)`` when the
    wall has no corners. Returns ``[]`` when the transform is unusable or
    fewer than two finite corners remain.
    """
    if not is_valid_transform(wall.transform):
        logger.debug(f"Skipping wall {wall.identifier}: transform is not 16 finite numbers")
        return []

    corners = local_corners(wall)
    if not wall.polygon_corners:
        half = _dimension(wall, 0) / 2
        corners = [Point(-half, 0.0), Point(half, 0.0)]

    world = [transform_point(c, wall.transform) for c in corners]
    if len(world) < 2 or not _finite(world):
        logger.debug(f"Skipping wall {wall.identifier}: no usable footprint")
        return []
    return world


def wall_rings(walls: Sequence[Surface]) -> List[Tuple[Surface, List[Point]]]:
    """``(wall, world ring)`` for every wall with a usable footprint."""
    rings = []
    for wall in walls:
        ring = wall_world_corners(wall)
        if ring:
            rings.append((wall, ring))
    return rings


def ring_segments(points: Sequence[Point]) -> List[Segment]:
    """Closed ring edges ``(p[i], p[i+1 mod n])``."""
    n = len(points)
    return [(points[i], points[(i + 1) % n]) for i in range(n)]


def point_to_ring_distance(p: Point, ring: Sequence[Point]) -> float:
    return min(dist_to_segment(p, a, b) for a, b in ring_segments(ring))


def ring_distance(ring_a: Sequence[Point], ring_b: Sequence[Point]) -> float:
    """Minimum corner-to-edge distance between two rings, both directions."""
    return min(
        min(point_to_ring_distance(p, ring_b) for p in ring_a),
        min(point_to_ring_distance(p, ring_a) for p in ring_b),
    )


def wall_direction(ring: Sequence[Point]) -> Point:
    """Unit vector along the longest edge of a wall ring."""
    best, direction = 0.0, Point(0.0, 0.0)
    for a, b in ring_segments(ring):
        length = distance(a, b)
        if length > best:
            best = length
            direction = Point((b.x - a.x) / length, (b.y - a.y) / length)
    return direction


def wall_centerline(wall: Surface) -> Optional[Segment]:
    """
    World centreline of a wall at local z = 0.

    Spans the min/max local x of the corners; falls back to the wall
    length when the corners have no extent.
    """
    if not is_valid_transform(wall.transform):
        return None

    xs = [c[0] for c in wall.polygon_corners if c]
    start = end = None
    if xs and max(xs) > min(xs):
        start, end = Point(min(xs), 0.0), Point(max(xs), 0.0)
    elif wall.dimensions:
        half = wall.dimensions[0] / 2
        start, end = Point(-half, 0.0), Point(half, 0.0)
    if start is None:
        return None

    segment = (transform_point(start, wall.transform), transform_point(end, wall.transform))
    return segment if _finite(segment) else None


def wall_rectangle(wall: Surface) -> List[Point]:
    """World footprint of a wall as a length x thickness rectangle."""
    if not is_valid_transform(wall.transform):
        return []
    half_len = _dimension(wall, 0) / 2
    half_thick = _dimension(wall, 2, DEFAULT_WALL_THICKNESS_METERS) / 2
    return _rectangle(wall.transform, -half_len, -half_thick, half_len, half_thick)


def minimum_ceiling_height(wall: Surface) -> Optional[float]:
    """
    Lowest ceiling height of a wall in metres, or None when unknown.

    For walls with an elevation polygon (3D corners, Y vertical) this is
    the height from the base to the lowest point of the top edge, which
    catches sloped or V-shaped tops. Otherwise ``dimensions[1]``.
    """
    if len(wall.polygon_corners) >= MIN_POLYGON_VERTICES:
        ys = [c[1] for c in wall.polygon_corners if len(c) >= 3]
        if not ys:
            return None
        base = min(ys)
        tops = [y for y in ys if y > base]
        if tops:
            return min(tops) - base
        return None

    height = _dimension(wall, 1)
    return height if height > 0 else None


# ---------- Objects ----------
def _rectangle(transform: Sequence[float], x0: float, z0: float,
               x1: float, z1: float) -> List[Point]:
    local = [Point(x0, z0), Point(x1, z0), Point(x1, z1), Point(x0, z1)]
    world = [transform_point(p, transform) for p in local]
    return world if _finite(world) else []


def has_box_geometry(obj: Surface) -> bool:
    """A 16-number transform, 3 dimensions, not all zero."""
    dims = obj.dimensions
    if all(d == 0 for d in dims):
        return False
    return is_valid_transform(obj.transform) and len(dims) == 3


def object_box(obj: Surface, inset: float = 0.0) -> List[Point]:
    """
    World footprint of an object's bounding box (width x depth).

    *inset* shrinks each half-extent, floored at zero. Returns ``[]`` for
    objects without box geometry.
    """
    if not has_box_geometry(obj):
        return []
    half_w = max(0.0, obj.dimensions[0] / 2 - inset)
    half_d = max(0.0, obj.dimensions[2] / 2 - inset)
    return _rectangle(obj.transform, -half_w, -half_d, half_w, half_d)


def vertical_extent(surface: Surface) -> Tuple[float, float]:
    """World ``(bottom, top)`` from the transform's Y and ``dimensions[1]``."""
    center = surface.transform[M_TY] if len(surface.transform) > M_TY else 0.0
    half = _dimension(surface, 1) / 2
    return center - half, center + half


# ---------- Doors ----------
def door_clearance_box(door: Surface) -> List[Point]:
    """
    Clearance zone in front of a door (local +Z).

    Slightly narrower than the door so that walls and furniture merely
    grazing the frame do not count.
    """
    if not is_valid_transform(door.transform):
        return []
    half_w = max(0.0, _dimension(door, 0) - DOOR_WIDTH_SHRINK_METERS) / 2
    return _rectangle(door.transform, -half_w, 0.0, half_w, DOOR_CLEARANCE_METERS)
