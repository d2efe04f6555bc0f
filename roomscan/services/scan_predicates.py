"""Presence predicates and tallies over a scan's embedded entities and attributes."""

from typing import Dict, Iterable

from ..models import Category
from ..schemas import Scan, Surface
from .scan_constants import OBJECT_ATTRIBUTE_TYPES, RECTANGULAR_CORNER_COUNT


def _embedded(scan: Scan) -> Iterable[Surface]:
    """Doors, windows and openings: the entities hosted by walls."""
    yield from scan.doors
    yield from scan.windows
    yield from scan.openings


def has_unparented_embedded(scan: Scan) -> bool:
    return any(e.parent_identifier is None for e in _embedded(scan))


def has_curved_embedded(scan: Scan) -> bool:
    return any(e.parent_identifier is not None and e.curve is not None for e in _embedded(scan))


def has_non_rectangular_embedded(scan: Scan) -> bool:
    return any(
        e.parent_identifier is not None
        and e.polygon_corners
        and len(e.polygon_corners) != RECTANGULAR_CORNER_COUNT
        for e in _embedded(scan)
    )


def has_non_empty_completed_edges(scan: Scan) -> bool:
    entities = (*scan.doors, *scan.floors, *scan.openings, *scan.walls, *scan.windows)
    return any(e.completed_edges for e in entities)


def wall_embedded_counts(scan: Scan) -> Dict[str, int]:
    """Number of distinct walls hosting at least one window, door or opening."""
    return {
        "walls_with_windows": len({w.parent_identifier for w in scan.windows if w.parent_identifier is not None}),
        "walls_with_doors": len({d.parent_identifier for d in scan.doors if d.parent_identifier is not None}),
        "walls_with_openings": len({o.parent_identifier for o in scan.openings if o.parent_identifier is not None}),
    }


def door_is_open_counts(scan: Scan) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for door in scan.doors:
        if door.is_open is True:
            key = "Open"
        elif door.is_open is False:
            key = "Closed"
        else:
            key = "Unknown"
        counts[key] = counts.get(key, 0) + 1
    return counts


def object_attribute_counts(scan: Scan) -> Dict[str, Dict[str, int]]:
    """Value tallies for the string-valued object attributes RoomPlan reports."""
    counts: Dict[str, Dict[str, int]] = {}
    for item in scan.objects:
        for attribute in OBJECT_ATTRIBUTE_TYPES:
            value = item.attributes.get(attribute)
            if isinstance(value, str):
                per_value = counts.setdefault(attribute, {})
                per_value[value] = per_value.get(value, 0) + 1
    return counts


def attribute_counts(scan: Scan) -> Dict[str, dict]:
    return {
        "door_is_open_counts": door_is_open_counts(scan),
        "object_attribute_counts": object_attribute_counts(scan),
    }


def category_count(scan: Scan, category: Category) -> int:
    return len(scan.objects_of(category))


def has_category(scan: Scan, category: Category) -> bool:
    return any(o.category is category for o in scan.objects)
