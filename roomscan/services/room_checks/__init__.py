"""
Room Validation Suite.

Whole-scan geometric integrity checks. Every check takes a validated
:class:`~roomscan.schemas.Scan` and returns a boolean (or a small result
record); degenerate entities are skipped rather than raising.
"""

from .colinear_walls import check_colinear_walls
from .crooked_walls import check_crooked_walls
from .doors import check_door_blocking, check_door_floor_contact
from .external_opening import check_external_opening
from .fixture_gaps import check_toilet_gaps, check_tub_gaps
from .intersections import (
    IntersectionResult,
    check_intersections,
    check_object_intersections,
    check_wall_object_intersections,
    check_wall_wall_intersections,
)
from .nib_walls import check_nib_walls
from .wall_gaps import check_wall_gaps
from .wall_profile import check_low_ceiling, check_soffit, has_soffit

__all__ = [
    "check_colinear_walls",
    "check_crooked_walls",
    "check_door_blocking",
    "check_door_floor_contact",
    "check_external_opening",
    "check_toilet_gaps",
    "check_tub_gaps",
    "IntersectionResult",
    "check_intersections",
    "check_object_intersections",
    "check_wall_object_intersections",
    "check_wall_wall_intersections",
    "check_nib_walls",
    "check_wall_gaps",
    "check_low_ceiling",
    "check_soffit",
    "has_soffit",
]
