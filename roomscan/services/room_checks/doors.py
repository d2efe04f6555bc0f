"""Door checks: blocked clearance zones and doors that do not reach the floor."""

import logging
from typing import Optional

from ...schemas import Scan, Surface
from ..footprints import door_clearance_box, object_box, same_story, vertical_extent, wall_rectangle
from ..geometry import is_valid_transform, polygons_intersect
from ..scan_constants import DOOR_FLOOR_GAP_METERS, M_TY, STEP_OVER_HEIGHT_METERS

logger = logging.getLogger(__name__)


def _blocks_vertically(item: Surface, door: Surface) -> bool:
    """Objects wholly above the door or low enough to step over do not block."""
    door_bottom, door_top = vertical_extent(door)
    item_bottom, item_top = vertical_extent(item)
    if item_bottom > door_top:
        return False
    return item_top >= door_bottom + STEP_OVER_HEIGHT_METERS


def check_door_blocking(scan: Scan) -> bool:
    """
    True if something stands in the clearance zone in front of a door.

    Objects attached to the door and the door's own host wall never block.
    Other walls and same-story objects do.
    """
    for door in scan.doors:
        clearance = door_clearance_box(door)
        if not clearance:
            continue

        for item in scan.objects:
            if not same_story(door.story, item.story):
                continue
            if door.identifier is not None and item.parent_identifier == door.identifier:
                continue
            if not _blocks_vertically(item, door):
                continue
            footprint = object_box(item)
            if footprint and polygons_intersect(clearance, footprint):
                logger.debug(f"Door {door.identifier} blocked by object {item.identifier}")
                return True

        for wall in scan.walls:
            if wall.identifier is not None and wall.identifier == door.parent_identifier:
                continue
            if not same_story(door.story, wall.story):
                continue
            rectangle = wall_rectangle(wall)
            if rectangle and polygons_intersect(clearance, rectangle):
                logger.debug(f"Door {door.identifier} blocked by wall {wall.identifier}")
                return True
    return False


def floor_level(scan: Scan) -> float:
    """Height of the first floor: its transform Y, else its first corner's Y, else 0."""
    if not scan.floors:
        return 0.0
    floor = scan.floors[0]
    if len(floor.transform) == 16:
        return floor.transform[M_TY]
    if floor.polygon_corners and len(floor.polygon_corners[0]) > 1:
        return floor.polygon_corners[0][1]
    return 0.0


def door_floor_gap(door: Surface, level: float) -> Optional[float]:
    if not is_valid_transform(door.transform):
        return None
    bottom, _ = vertical_extent(door)
    return abs(bottom - level)


def check_door_floor_contact(scan: Scan) -> bool:
    """True if any door's bottom edge is more than 1 inch above or below the floor."""
    level = floor_level(scan)
    for door in scan.doors:
        gap = door_floor_gap(door, level)
        if gap is not None and gap > DOOR_FLOOR_GAP_METERS:
            logger.debug(f"Door {door.identifier} is {gap:.4f} m off the floor")
            return True
    return False
