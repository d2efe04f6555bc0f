"""
Per-entity dimension and area lists for the scan analysis record.

Widths, heights and areas are read from ``dimensions`` (width at index 0,
height at index 1). Walls with a polygon outline use its perimeter as the
width instead; floors with one use the X and Y spans of the corners.
Non-positive values are left out of every list.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from shapely.geometry import LineString

from ..models import Category
from ..schemas import Scan, Surface, WidthHeight
from .scan_constants import MIN_POLYGON_VERTICES
from .vanity import vanity_lengths

# Corners must carry x, y and z to count toward outline measurements
MIN_CORNER_COORDINATES = 3


def _full_corners(surface: Surface) -> List[Sequence[float]]:
    return [c for c in surface.polygon_corners if len(c) >= MIN_CORNER_COORDINATES]


def _positive(value: Optional[float]) -> bool:
    return value is not None and value > 0


def _wall_extent(wall: Surface) -> Tuple[Optional[float], Optional[float]]:
    """(width, height) of a wall; width is the outline perimeter when it has one."""
    dims = wall.dimensions
    if len(wall.polygon_corners) >= MIN_POLYGON_VERTICES:
        ring = [(c[0], c[1]) for c in _full_corners(wall)]
        perimeter = LineString(ring + ring[:1]).length
        return perimeter, dims[1] if len(dims) > 1 else None
    if len(dims) >= 2:
        return dims[0], dims[1]
    return None, None


def _floor_extent(floor: Surface) -> Tuple[Optional[float], Optional[float]]:
    """(length, width) of a floor from its corner spans or its dimensions."""
    if len(floor.polygon_corners) >= MIN_POLYGON_VERTICES:
        corners = _full_corners(floor)
        if not corners:
            return None, None
        xs = [c[0] for c in corners]
        ys = [c[1] for c in corners]
        return max(xs) - min(xs), max(ys) - min(ys)
    if len(floor.dimensions) >= 2:
        return floor.dimensions[0], floor.dimensions[1]
    return None, None


def _collect(prefix: str, extents: Sequence[Tuple[Optional[float], Optional[float]]]) -> Dict[str, list]:
    heights, widths, areas, pairs = [], [], [], []
    for width, height in extents:
        if _positive(width):
            widths.append(width)
        if _positive(height):
            heights.append(height)
        if _positive(width) and _positive(height):
            areas.append(width * height)
            pairs.append(WidthHeight(height=height, width=width))
    return {
        f"{prefix}_heights": heights,
        f"{prefix}_widths": widths,
        f"{prefix}_areas": areas,
        f"{prefix}_width_height_pairs": pairs,
    }


def _embedded_extents(surfaces: Sequence[Surface]) -> List[Tuple[float, float]]:
    # Windows, doors and openings only report an entity whose width and height are both set
    return [
        (s.dimensions[0], s.dimensions[1])
        for s in surfaces
        if len(s.dimensions) >= 2 and _positive(s.dimensions[0]) and _positive(s.dimensions[1])
    ]


def floor_data(scan: Scan) -> Dict[str, list]:
    lengths, widths, pairs = [], [], []
    for floor in scan.floors:
        length, width = _floor_extent(floor)
        if _positive(length):
            lengths.append(length)
        if _positive(width):
            widths.append(width)
        if _positive(length) and _positive(width):
            pairs.append(WidthHeight(height=length, width=width))
    return {
        "floor_lengths": lengths,
        "floor_widths": widths,
        "floor_width_height_pairs": pairs,
    }


def tub_lengths(scan: Scan) -> List[float]:
    return [
        tub.dimensions[0]
        for tub in scan.objects_of(Category.BATHTUB)
        if tub.dimensions and _positive(tub.dimensions[0])
    ]


def extract_dimension_data(scan: Scan) -> Dict[str, list]:
    """Every dimension and area list merged into :class:`ScanAnalysis`."""
    data = _collect("wall", [_wall_extent(w) for w in scan.walls])
    data.update(_collect("window", _embedded_extents(scan.windows)))
    data.update(_collect("door", _embedded_extents(scan.doors)))
    data.update(_collect("opening", _embedded_extents(scan.openings)))
    data.update(floor_data(scan))
    data["tub_lengths"] = tub_lengths(scan)
    data["vanity_lengths"] = vanity_lengths(scan)
    return data
