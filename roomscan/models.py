"""Domain enums and value types shared by the scan schema and the checks."""

import enum
from dataclasses import dataclass


class EntityKind(enum.Enum):
    FLOOR = "floor"
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
    OPENING = "opening"
    OBJECT = "object"


class Category(enum.Enum):
    """Closed tag set for entity categories.

    Values match the single key RoomPlan uses in its category object,
    e.g. ``{"toilet": {}}`` or ``{"door": {"isOpen": true}}``.
    """
    # Surfaces
    FLOOR = "floor"
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
    OPENING = "opening"

    # Objects
    TOILET = "toilet"
    SINK = "sink"
    BATHTUB = "bathtub"
    STORAGE = "storage"
    WASHER_DRYER = "washerDryer"
    STOVE = "stove"
    TABLE = "table"
    CHAIR = "chair"
    BED = "bed"
    SOFA = "sofa"
    DISHWASHER = "dishwasher"
    OVEN = "oven"
    REFRIGERATOR = "refrigerator"
    STAIRS = "stairs"
    FIREPLACE = "fireplace"
    TELEVISION = "television"


class Confidence(enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class VanityType(enum.Enum):
    NORMAL = "normal"
    SINK_ONLY = "sink only"
    STORAGE_ONLY = "storage only"
    NO_VANITY = "no vanity"


@dataclass(frozen=True)
class Point:
    """A 2D position: world (X, Z) after projection, or local (x, localZ)."""

    x: float
    y: float
