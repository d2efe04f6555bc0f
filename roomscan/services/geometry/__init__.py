"""
Plan-view computational geometry used by the room checks.

All functions are pure and operate on :class:`roomscan.models.Point`.
"""

from .polygon import check_polygon_integrity, signed_area
from .sat import polygons_intersect
from .segment import (
    InvalidGeometryError,
    dist_to_segment,
    get_segment_intersection,
    segments_intersect,
)
from .transform import get_position, is_valid_transform, project_local_point, transform_point
from .vector import (
    cross_product,
    distance,
    dot_product,
    is_finite_point,
    magnitude,
    magnitude_squared,
    subtract,
)

__all__ = [
    "check_polygon_integrity",
    "signed_area",
    "polygons_intersect",
    "InvalidGeometryError",
    "dist_to_segment",
    "get_segment_intersection",
    "segments_intersect",
    "get_position",
    "is_valid_transform",
    "project_local_point",
    "transform_point",
    "cross_product",
    "distance",
    "dot_product",
    "is_finite_point",
    "magnitude",
    "magnitude_squared",
    "subtract",
]
