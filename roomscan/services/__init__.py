"""
Scan analysis services.

Geometry primitives, entity footprints, the room validation suite and
the per-scan analysis record built on top of them.
"""

from .dimension_data import extract_dimension_data
from .scan_loader import load_scan
from .scan_metadata import compute_scan_analysis
from .vanity import find_vanity_candidate, vanity_lengths

__all__ = [
    "extract_dimension_data",
    "load_scan",
    "compute_scan_analysis",
    "find_vanity_candidate",
    "vanity_lengths",
]
