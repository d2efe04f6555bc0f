"""External opening detection: an opening hosted by a wall on the room perimeter."""

import logging
from typing import Optional

from shapely.geometry import LinearRing
from shapely.geometry import Point as ShapelyPoint

from ...models import Point
from ...schemas import Scan, Surface
from ..footprints import same_story
from ..geometry import get_position, is_valid_transform, project_local_point
from ..scan_constants import EXTERNAL_WALL_PERIMETER_METERS, MIN_POLYGON_VERTICES

logger = logging.getLogger(__name__)


def floor_perimeter(floor: Surface) -> Optional[LinearRing]:
    """
    World (X, Z) outline of a floor, or None when it has no polygon.

    Floor corners lie in the floor's local XY plane and are carried into
    plan view by the full transform. Without a usable transform the
    corners are taken as plan coordinates already.
    """
    corners = [c for c in floor.polygon_corners if len(c) >= 2]
    if len(corners) < MIN_POLYGON_VERTICES:
        return None
    if is_valid_transform(floor.transform):
        points = [
            project_local_point(c[0], c[1], c[2] if len(c) > 2 else 0.0, floor.transform)
            for c in corners
        ]
    else:
        points = [Point(c[0], c[1]) for c in corners]
    return LinearRing([(p.x, p.y) for p in points])


def check_external_opening(scan: Scan) -> bool:
    """
    True if some opening sits in an existing wall on the room perimeter.

    Doors and windows never count. Openings on another story than the
    scan are ignored. Without a floor polygon any resolvable host wall
    counts; with one, the host wall's position must lie within
    ``EXTERNAL_WALL_PERIMETER_METERS`` of the floor outline.
    """
    perimeter = floor_perimeter(scan.floors[0]) if scan.floors else None

    for opening in scan.openings:
        if opening.parent_identifier is None:
            continue
        if not same_story(opening.story, scan.story):
            continue
        wall = scan.wall_by_id(opening.parent_identifier)
        if wall is None:
            logger.debug(f"Opening {opening.identifier} has no host wall {opening.parent_identifier}")
            continue
        if perimeter is None:
            return True
        if not is_valid_transform(wall.transform):
            continue

        position = get_position(wall.transform)
        if perimeter.distance(ShapelyPoint(position.x, position.y)) < EXTERNAL_WALL_PERIMETER_METERS:
            return True
    return False
