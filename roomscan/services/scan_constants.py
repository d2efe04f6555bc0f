"""
Centralized Scan Tolerances: single source of truth for all room checks.

Exposes the named thresholds used by the geometry primitives and the
room validation suite:
  - Unit conversions (inch / foot / metre)
  - Numeric epsilons and transform layout
  - Polygon integrity limits
  - Per-check gap, angle and size thresholds

Each check owns its boundary semantics (open vs closed interval). The same
nominal "1 inch" is compared with ``>`` in one check and ``>=`` in another,
so the thresholds are kept separate per check even when the values match.
"""

# ===========================================================================
# UNITS
# ===========================================================================

METERS_PER_INCH = 0.0254
METERS_PER_FOOT = 0.3048
SQ_FT_PER_SQ_M = 1.0 / (METERS_PER_FOOT * METERS_PER_FOOT)


def inches_to_meters(inches: float) -> float:
    return inches * METERS_PER_INCH


def feet_to_meters(feet: float) -> float:
    return feet * METERS_PER_FOOT


# ===========================================================================
# NUMERIC
# ===========================================================================

# Smaller than any architectural detail, larger than double accumulation error
EPSILON = 1e-10

# Point-identity tolerance for closure / duplicate-vertex checks
POINT_EPSILON = 1e-9

# Slack applied at reporting thresholds so that a gap authored as exactly
# N inches lands on the documented side of the boundary.
BOUNDARY_EPSILON = 1e-6

# Flattened 4x4 matrix (column-major, RoomPlan simd_float4x4)
TRANSFORM_SIZE = 16
M_XX = 0
M_XZ = 2
M_YX = 4
M_YZ = 6
M_ZX = 8
M_ZZ = 10
M_TX = 12
M_TY = 13
M_TZ = 14

# ===========================================================================
# POLYGON INTEGRITY
# ===========================================================================

MIN_POLYGON_VERTICES = 3
MAX_COORDINATE = 10_000.0
MIN_EDGE_LENGTH = 0.001       # 1 mm
MIN_INTERIOR_ANGLE_DEG = 5.0
MAX_INTERIOR_ANGLE_DEG = 175.0

# ===========================================================================
# SOFFIT
# ===========================================================================

SOFFIT_MIN_ANGLE_DEG = 260.0
SOFFIT_MAX_ANGLE_DEG = 280.0

# ===========================================================================
# ROOM CHECK THRESHOLDS
# ===========================================================================

# Anything closer than this is "touching"
TOUCHING_THRESHOLD_METERS = inches_to_meters(1)

# Toilet backface: error when gap > 1in (exactly 1in passes)
TOILET_GAP_MAX_METERS = inches_to_meters(1)

# Bathtub: error inside the closed band [1in, 6in]
TUB_GAP_MIN_METERS = inches_to_meters(1)
TUB_GAP_MAX_METERS = inches_to_meters(6)
TUB_GAP_EPSILON = 1e-5

# Wall-wall: error inside the open band (1in, 12in)
WALL_GAP_MIN_METERS = inches_to_meters(1)
WALL_GAP_MAX_METERS = inches_to_meters(12)

# Colinear walls: |cos| above this is parallel (~5 degrees), gap below 3in
COLINEAR_WALL_PARALLEL_THRESHOLD = 0.996
COLINEAR_WALL_GAP_MAX_METERS = inches_to_meters(3)

# Crooked walls: joins within touching distance deviating <= 5 degrees
CROOKED_WALL_JOIN_METERS = TOUCHING_THRESHOLD_METERS
CROOKED_WALL_ANGLE_DEG = 5.0

# Nib walls: shorter than 1 ft
NIB_WALL_THRESHOLD_METERS = feet_to_meters(1)

# Objects are shrunk by this much on every side before collision tests
OBJECT_COLLISION_INSET_METERS = inches_to_meters(1)

# Wall thickness when dimensions[2] is missing
DEFAULT_WALL_THICKNESS_METERS = 0.15

# Wall-wall centreline crossing: parametric slack that keeps corner joins out
WALL_CROSSING_PARAM_EPSILON = 1e-5
WALL_COLLINEAR_TOLERANCE = 1e-5

# Door clearance box in front of the door (local +Z)
DOOR_CLEARANCE_METERS = 0.6
DOOR_WIDTH_SHRINK_METERS = 0.1
STEP_OVER_HEIGHT_METERS = 0.05

# Door bottom further than this from the floor level is an error
DOOR_FLOOR_GAP_METERS = TOUCHING_THRESHOLD_METERS

# Opening host wall must be within this distance of the floor perimeter
EXTERNAL_WALL_PERIMETER_METERS = 0.5

# ===========================================================================
# METADATA
# ===========================================================================

LOW_CEILING_THRESHOLD_METERS = feet_to_meters(7.5)
NON_RECT_WALL_MIN_CORNERS = 4
RECTANGULAR_CORNER_COUNT = 4

OBJECT_ATTRIBUTE_TYPES = (
    "ChairArmType",
    "ChairBackType",
    "ChairLegType",
    "ChairType",
    "SofaType",
    "StorageType",
    "TableShapeType",
    "TableType",
)
