"""
Top-down projection of scan transforms.

RoomPlan stores every entity pose as a flattened column-major 4x4 matrix.
The geometric checks work in plan view, so only the X/Z rotation block
(indices 0, 2, 8, 10) and the X/Z translation (12, 14) are read; the
vertical axis is ignored here. Floor outlines are the one exception, see
:func:`project_local_point`.
"""

import math
from typing import Sequence

from ...models import Point
from ..scan_constants import (
    M_TX,
    M_TZ,
    M_XX,
    M_XZ,
    M_YX,
    M_YZ,
    M_ZX,
    M_ZZ,
    TRANSFORM_SIZE,
)


def is_valid_transform(transform: Sequence[float]) -> bool:
    """16 finite numbers."""
    return len(transform) == TRANSFORM_SIZE and all(math.isfinite(v) for v in transform)


def get_position(transform: Sequence[float]) -> Point:
    """World (X, Z) translation; the origin when the matrix is not 4x4."""
    if len(transform) != TRANSFORM_SIZE:
        return Point(0.0, 0.0)
    return Point(transform[M_TX], transform[M_TZ])


def transform_point(local: Point, transform: Sequence[float]) -> Point:
    """Map a local ``(x, localZ)`` pair into world ``(x, z)``."""

    def at(index: int) -> float:
        return transform[index] if index < len(transform) else 0.0

    return Point(
        local.x * at(M_XX) + local.y * at(M_ZX) + at(M_TX),
        local.x * at(M_XZ) + local.y * at(M_ZZ) + at(M_TZ),
    )


def project_local_point(x: float, y: float, z: float, transform: Sequence[float]) -> Point:
    """World ``(X, Z)`` of a full 3D local point.

    Needed for surfaces whose outline lies in their local XY plane (floors),
    where the local Y axis is rotated into the horizontal.
    """
    return Point(
        x * transform[M_XX] + y * transform[M_YX] + z * transform[M_ZX] + transform[M_TX],
        x * transform[M_XZ] + y * transform[M_YZ] + z * transform[M_ZZ] + transform[M_TZ],
    )
