"""
Builders for raw RoomPlan-style scan dicts used across the test modules.

Everything here returns plain JSON-shaped dicts so tests go through the
same validation path as real artifacts. Poses are rotations about the
vertical axis plus a world translation.
"""

import math
from typing import List, Optional, Sequence

INCH = 0.0254

IDENTITY = [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]


def pose(x: float = 0.0, z: float = 0.0, y: float = 0.0, yaw_deg: float = 0.0) -> List[float]:
    """Column-major 4x4 for a yaw about +Y followed by a translation."""
    yaw = math.radians(yaw_deg)
    c, s = math.cos(yaw), math.sin(yaw)
    return [
        c, 0.0, -s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        s, 0.0, c, 0.0,
        x, y, z, 1.0,
    ]


def floor_pose(y: float = 0.0) -> List[float]:
    """Floor pose: local Y axis laid along world +Z."""
    return [
        1.0, 0.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, -1.0, 0.0, 0.0,
        0.0, y, 0.0, 1.0,
    ]


def make_wall(identifier: str, start: Sequence[float], end: Sequence[float],
              story: Optional[int] = 1, height: float = 2.4, thickness: float = 0.1,
              **extra) -> dict:
    """Straight wall from *start* to *end* given as world (x, z)."""
    dx, dz = end[0] - start[0], end[1] - start[1]
    length = math.hypot(dx, dz)
    yaw = math.degrees(math.atan2(-dz, dx))
    mid_x, mid_z = (start[0] + end[0]) / 2, (start[1] + end[1]) / 2
    wall = {
        "identifier": identifier,
        "parentIdentifier": None,
        "category": {"wall": {}},
        "confidence": {"high": {}},
        "dimensions": [length, height, thickness],
        "polygonCorners": [[-length / 2, 0.0], [length / 2, 0.0]],
        "transform": pose(mid_x, mid_z, y=height / 2, yaw_deg=yaw),
        "story": story,
        "completedEdges": [],
        "curve": None,
    }
    wall.update(extra)
    return wall


def make_object(category: str, x: float = 0.0, z: float = 0.0,
                width: float = 0.5, height: float = 0.8, depth: float = 0.5,
                yaw_deg: float = 0.0, story: Optional[int] = 1,
                identifier: Optional[str] = None, y: Optional[float] = None,
                **extra) -> dict:
    obj = {
        "identifier": identifier or f"{category}-{x}-{z}",
        "parentIdentifier": None,
        "category": {category: {}},
        "confidence": {"high": {}},
        "dimensions": [width, height, depth],
        "transform": pose(x, z, y=height / 2 if y is None else y, yaw_deg=yaw_deg),
        "story": story,
        "attributes": {},
    }
    obj.update(extra)
    return obj


def make_toilet(x: float = 0.0, z: float = 0.0, **kwargs) -> dict:
    kwargs.setdefault("width", 0.4)
    kwargs.setdefault("depth", 0.5)
    return make_object("toilet", x, z, **kwargs)


def make_tub(x: float = 0.0, z: float = 0.0, **kwargs) -> dict:
    kwargs.setdefault("width", 1.5)
    kwargs.setdefault("height", 0.5)
    kwargs.setdefault("depth", 0.75)
    return make_object("bathtub", x, z, **kwargs)


def make_door(identifier: str, parent: Optional[str], x: float = 0.0, z: float = 0.0,
              width: float = 0.9, height: float = 2.0, yaw_deg: float = 0.0,
              bottom: float = 0.0, is_open: Optional[bool] = None,
              story: Optional[int] = 1, **extra) -> dict:
    category = {} if is_open is None else {"isOpen": is_open}
    door = {
        "identifier": identifier,
        "parentIdentifier": parent,
        "category": {"door": category},
        "confidence": {"high": {}},
        "dimensions": [width, height, 0.05],
        "polygonCorners": [],
        "transform": pose(x, z, y=bottom + height / 2, yaw_deg=yaw_deg),
        "story": story,
        "completedEdges": [],
        "curve": None,
    }
    door.update(extra)
    return door


def make_embedded(kind: str, identifier: str, parent: Optional[str],
                  story: Optional[int] = 1, **extra) -> dict:
    """Window or opening hosted by *parent*."""
    entity = {
        "identifier": identifier,
        "parentIdentifier": parent,
        "category": {kind: {}},
        "confidence": {"medium": {}},
        "dimensions": [1.0, 1.0, 0.0],
        "polygonCorners": [],
        "transform": IDENTITY,
        "story": story,
        "completedEdges": [],
        "curve": None,
    }
    entity.update(extra)
    return entity


def make_floor(width: float = 3.0, depth: float = 3.0, y: float = 0.0,
               story: Optional[int] = 1, **extra) -> dict:
    """Rectangular floor spanning world x in [0, width] and z in [0, depth]."""
    floor = {
        "identifier": "floor-0",
        "parentIdentifier": None,
        "category": {"floor": {}},
        "confidence": {"high": {}},
        "dimensions": [width, depth, 0.0],
        "polygonCorners": [[0.0, 0.0, 0.0], [width, 0.0, 0.0], [width, depth, 0.0], [0.0, depth, 0.0]],
        "transform": floor_pose(y),
        "story": story,
        "completedEdges": [],
    }
    floor.update(extra)
    return floor


def make_scan(**arrays) -> dict:
    """Minimal valid scan; keyword arguments override any top-level key."""
    scan = {
        "version": 2,
        "sections": [],
        "coreModel": "coreModel-1",
        "floors": [],
        "walls": [],
        "objects": [],
        "windows": [],
        "doors": [],
        "story": 1,
        "openings": [],
    }
    scan.update(arrays)
    return scan


def box_room(width: float = 3.0, depth: float = 3.0, story: Optional[int] = 1) -> List[dict]:
    """Four walls around x in [0, width], z in [0, depth]."""
    return [
        make_wall("w-south", (0.0, 0.0), (width, 0.0), story=story),
        make_wall("w-east", (width, 0.0), (width, depth), story=story),
        make_wall("w-north", (width, depth), (0.0, depth), story=story),
        make_wall("w-west", (0.0, depth), (0.0, 0.0), story=story),
    ]
