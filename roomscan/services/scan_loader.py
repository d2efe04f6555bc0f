"""Load and validate scan artifacts from disk."""

import json
import logging
from pathlib import Path
from typing import Union

from ..config import RAW_SCAN_FILENAME
from ..schemas import Scan, ScanValidationError, parse_scan

logger = logging.getLogger(__name__)


def resolve_scan_path(path: Union[str, Path]) -> Path:
    """A scan file, or the raw scan file inside an artifact directory."""
    path = Path(path)
    if path.is_dir():
        path = path / RAW_SCAN_FILENAME
    if not path.exists():
        raise FileNotFoundError(f"Scan file not found: {path}")
    return path


def load_scan(path: Union[str, Path]) -> Scan:
    """
    Read and validate a scan.

    Raises:
        FileNotFoundError: if the file (or ``<dir>/rawScan.json``) is missing.
        ScanValidationError: if the file is not JSON or fails validation.
    """
    scan_path = resolve_scan_path(path)
    try:
        data = json.loads(scan_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning(f"Malformed JSON in {scan_path}: {e}")
        raise ScanValidationError(f"Invalid raw scan: {scan_path} is not valid JSON") from e

    try:
        scan = parse_scan(data)
    except ScanValidationError as e:
        logger.warning(f"Rejected {scan_path}: {e}")
        raise
    logger.debug(f"Loaded {scan_path}: {len(scan.walls)} walls, {len(scan.objects)} objects")
    return scan
