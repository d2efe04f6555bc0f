"""
Vanity classification.

A vanity is a sink sitting on a storage cabinet. Selection order:
  1. A storage object overlapping a sink on the same story  -> normal
  2. Otherwise the first sink                                -> sink only
  3. Otherwise the largest storage object (width x depth)    -> storage only
  4. Nothing                                                 -> no vanity
"""

from typing import List, Optional, Tuple

from ..models import Category, VanityType
from ..schemas import Scan, Surface
from .footprints import object_box, same_story
from .geometry import polygons_intersect
from .scan_constants import OBJECT_COLLISION_INSET_METERS


def _footprint_area(item: Surface) -> float:
    dims = item.dimensions
    width = dims[0] if len(dims) > 0 else 0.0
    depth = dims[2] if len(dims) > 2 else 0.0
    return width * depth


def _overlaps_sink(storage: Surface, sinks: List[Surface]) -> bool:
    storage_box = object_box(storage, OBJECT_COLLISION_INSET_METERS)
    if not storage_box:
        return False
    for sink in sinks:
        if not same_story(storage.story, sink.story):
            continue
        sink_box = object_box(sink, OBJECT_COLLISION_INSET_METERS)
        if sink_box and polygons_intersect(storage_box, sink_box):
            return True
    return False


def find_vanity_candidate(scan: Scan) -> Tuple[Optional[Surface], VanityType]:
    """Pick the object that represents the vanity and classify it."""
    sinks = scan.objects_of(Category.SINK)
    storages = scan.objects_of(Category.STORAGE)

    for storage in storages:
        if _overlaps_sink(storage, sinks):
            return storage, VanityType.NORMAL
    if sinks:
        return sinks[0], VanityType.SINK_ONLY
    if storages:
        # First wins on ties
        largest = storages[0]
        for storage in storages[1:]:
            if _footprint_area(storage) > _footprint_area(largest):
                largest = storage
        return largest, VanityType.STORAGE_ONLY
    return None, VanityType.NO_VANITY


def vanity_type(scan: Scan) -> VanityType:
    return find_vanity_candidate(scan)[1]


def vanity_lengths(scan: Scan) -> List[float]:
    """Width of the selected vanity object, when it has a positive one."""
    candidate, _ = find_vanity_candidate(scan)
    if candidate is None or not candidate.dimensions:
        return []
    length = candidate.dimensions[0]
    return [length] if length > 0 else []
