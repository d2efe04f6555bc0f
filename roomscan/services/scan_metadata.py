"""
Scan analysis: runs every room check over one scan and flattens the
results into a :class:`~roomscan.schemas.ScanAnalysis` record for the
reporting layer.
"""

import logging

from ..models import Category
from ..schemas import Scan, ScanAnalysis
from . import room_checks
from .dimension_data import extract_dimension_data
from .footprints import surface_area
from .scan_constants import NON_RECT_WALL_MIN_CORNERS, SQ_FT_PER_SQ_M
from .scan_predicates import (
    attribute_counts,
    category_count,
    has_category,
    has_curved_embedded,
    has_non_empty_completed_edges,
    has_non_rectangular_embedded,
    has_unparented_embedded,
    wall_embedded_counts,
)
from .vanity import vanity_type

logger = logging.getLogger(__name__)

# Presence flags reported per object category
PRESENCE_FLAGS = {
    "has_washer_dryer": Category.WASHER_DRYER,
    "has_stove": Category.STOVE,
    "has_table": Category.TABLE,
    "has_chair": Category.CHAIR,
    "has_bed": Category.BED,
    "has_sofa": Category.SOFA,
    "has_dishwasher": Category.DISHWASHER,
    "has_oven": Category.OVEN,
    "has_refrigerator": Category.REFRIGERATOR,
    "has_stairs": Category.STAIRS,
    "has_fireplace": Category.FIREPLACE,
    "has_television": Category.TELEVISION,
}


def compute_scan_analysis(scan: Scan) -> ScanAnalysis:
    """Compute every integrity flag, count and summary field for *scan*.

    Pure function: no I/O, no caching.
    """
    intersections = room_checks.check_intersections(scan)
    stories = sorted({w.story if w.story is not None else 0 for w in scan.walls})
    room_area_sq_m = sum(surface_area(f) for f in scan.floors)

    fields = dict(
        room_area_sq_ft=room_area_sq_m * SQ_FT_PER_SQ_M,
        wall_count=len(scan.walls),
        toilet_count=category_count(scan, Category.TOILET),
        tub_count=category_count(scan, Category.BATHTUB),
        sink_count=category_count(scan, Category.SINK),
        storage_count=category_count(scan, Category.STORAGE),
        door_count=len(scan.doors),
        window_count=len(scan.windows),
        opening_count=len(scan.openings),
        # Geometric integrity
        has_external_opening=room_checks.check_external_opening(scan),
        has_soffit=room_checks.check_soffit(scan),
        has_low_ceiling=room_checks.check_low_ceiling(scan),
        has_toilet_gap_errors=room_checks.check_toilet_gaps(scan),
        has_tub_gap_errors=room_checks.check_tub_gaps(scan),
        has_wall_gap_errors=room_checks.check_wall_gaps(scan),
        has_colinear_wall_errors=room_checks.check_colinear_walls(scan),
        has_crooked_wall_errors=room_checks.check_crooked_walls(scan),
        has_nib_walls=room_checks.check_nib_walls(scan),
        has_object_intersection_errors=intersections.has_object_intersection_errors,
        has_wall_object_intersection_errors=intersections.has_wall_object_intersection_errors,
        has_wall_wall_intersection_errors=intersections.has_wall_wall_intersection_errors,
        has_door_blocking_error=room_checks.check_door_blocking(scan),
        has_door_floor_contact_error=room_checks.check_door_floor_contact(scan),
        # Wall shape
        has_non_rect_wall=any(len(w.polygon_corners) > NON_RECT_WALL_MIN_CORNERS for w in scan.walls),
        has_curved_wall=any(w.curve is not None for w in scan.walls),
        # Embedded entities
        has_unparented_embedded=has_unparented_embedded(scan),
        has_curved_embedded=has_curved_embedded(scan),
        has_non_rectangular_embedded=has_non_rectangular_embedded(scan),
        has_non_empty_completed_edges=has_non_empty_completed_edges(scan),
        has_floors_with_parent_id=any(f.parent_identifier is not None for f in scan.floors),
        # Stories / sections
        stories=stories,
        has_multiple_stories=len(stories) > 1,
        section_labels=[s.label for s in scan.sections],
        vanity_type=vanity_type(scan).value,
    )
    fields.update({name: has_category(scan, category) for name, category in PRESENCE_FLAGS.items()})
    fields.update(wall_embedded_counts(scan))
    fields.update(attribute_counts(scan))
    fields.update(extract_dimension_data(scan))

    analysis = ScanAnalysis(**fields)
    logger.info(f"Analyzed scan: {analysis.wall_count} walls, {len(scan.objects)} objects, "
                f"{analysis.room_area_sq_ft:.1f} sq ft")
    return analysis
