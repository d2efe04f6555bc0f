"""
Room scan integrity engine.

Validates 3D room scans (floors, walls, doors, windows, openings and
objects) and computes the geometric-integrity flags consumed by the
reporting layer.
"""

import logging

from .config import LOG_LEVEL

logging.getLogger(__name__).setLevel(LOG_LEVEL)

from .schemas import Scan, ScanAnalysis, ScanValidationError, Surface, parse_scan  # noqa: E402
from .services import compute_scan_analysis, load_scan  # noqa: E402

__version__ = "1.0.0"

__all__ = [
    "Scan",
    "ScanAnalysis",
    "ScanValidationError",
    "Surface",
    "parse_scan",
    "compute_scan_analysis",
    "load_scan",
]
