"""Pydantic schemas for scan input validation and the analysis output record."""

from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    field_validator,
    model_validator,
)

from .models import Category, Confidence, EntityKind


class ScanValidationError(ValueError):
    """Raised when a raw scan container fails structural validation."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ScanValidationError":
        errors = exc.errors()
        # Unknown keys are reported ahead of field errors
        extra = [e for e in errors if e["type"] == "extra_forbidden"]
        first = extra[0] if extra else errors[0]
        field = _format_loc(first["loc"])
        if first["type"] == "extra_forbidden":
            message = f'Invalid raw scan: unknown key "{field}"'
        else:
            message = f'Invalid raw scan: missing or invalid "{field}"'
        return cls(message, errors)


def _format_loc(loc: tuple) -> str:
    parts = []
    for item in loc:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        elif parts:
            parts.append(f".{item}")
        else:
            parts.append(str(item))
    return "".join(parts)


def _single_tag(value: Any, what: str):
    """Unpack RoomPlan's ``{"tag": payload}`` form into ``(tag, payload)``."""
    if not value:
        return None, None
    if len(value) != 1:
        raise ValueError(f"{what} must have exactly one tag, got {sorted(value)}")
    return next(iter(value.items()))


# ---------- Entities ----------
class Surface(BaseModel):
    """Shared geometric contract of every scan entity.

    Floors, walls, doors, windows, openings and objects are all the same
    shape; ``kind`` tells them apart. Geometry fields default to empty so
    that a malformed entity degrades the checks instead of the parse.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    kind: EntityKind
    identifier: Optional[str] = None
    parent_identifier: Optional[str] = Field(None, alias="parentIdentifier")
    polygon_corners: tuple[tuple[float, ...], ...] = Field((), alias="polygonCorners")
    dimensions: tuple[float, ...] = ()
    transform: tuple[float, ...] = ()
    story: Optional[int] = None
    confidence: Optional[Confidence] = None
    category: Optional[Category] = None
    is_open: Optional[bool] = Field(None, alias="isOpen")
    attributes: dict[str, Any] = Field(default_factory=dict)
    curve: Optional[Any] = None
    completed_edges: tuple[Any, ...] = Field((), alias="completedEdges")

    @model_validator(mode="before")
    @classmethod
    def _unpack_tags(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        category = data.get("category")
        if isinstance(category, dict):
            tag, payload = _single_tag(category, "category")
            data["category"] = tag
            if isinstance(payload, dict) and "isOpen" in payload:
                data["isOpen"] = payload["isOpen"]
        confidence = data.get("confidence")
        if isinstance(confidence, dict):
            data["confidence"], _ = _single_tag(confidence, "confidence")
        return data

    @field_validator("polygon_corners", "dimensions", "transform", "completed_edges", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("attributes", mode="before")
    @classmethod
    def _none_as_empty_map(cls, value: Any) -> Any:
        return {} if value is None else value

    def has_category(self, category: Category) -> bool:
        return self.category is category


class Section(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    label: str = ""
    story: Optional[int] = None
    center: tuple[float, ...] = ()


# ---------- Scan ----------
_ENTITY_ARRAYS = {
    "floors": EntityKind.FLOOR,
    "walls": EntityKind.WALL,
    "doors": EntityKind.DOOR,
    "windows": EntityKind.WINDOW,
    "openings": EntityKind.OPENING,
    "objects": EntityKind.OBJECT,
}


class Scan(BaseModel):
    """A validated, immutable room scan.

    Only the keys RoomPlan emits are accepted; anything else is rejected
    before any check runs. Build instances with :func:`parse_scan`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: Union[int, float]
    sections: tuple[Section, ...]
    core_model: StrictStr = Field(alias="coreModel")
    floors: tuple[Surface, ...]
    walls: tuple[Surface, ...]
    objects: tuple[Surface, ...]
    windows: tuple[Surface, ...]
    doors: tuple[Surface, ...]
    reference_origin_transform: tuple[float, ...] = Field(
        (), alias="referenceOriginTransform"
    )
    story: Union[int, float]
    openings: tuple[Surface, ...]

    @field_validator(*_ENTITY_ARRAYS, mode="before")
    @classmethod
    def _tag_entity_kind(cls, value: Any, info) -> Any:
        if not isinstance(value, (list, tuple)):
            return value
        kind = _ENTITY_ARRAYS[info.field_name]
        return [
            {**item, "kind": kind} if isinstance(item, dict) else item
            for item in value
        ]

    @field_validator("version", "story", mode="before")
    @classmethod
    def _require_number(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("must be a number")
        return value

    @field_validator("reference_origin_transform", mode="before")
    @classmethod
    def _check_reference_transform(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (list, tuple)) and len(value) not in (0, 16):
            raise ValueError("referenceOriginTransform must hold 16 numbers")
        return value

    @classmethod
    def from_raw(cls, data: Any) -> "Scan":
        return parse_scan(data)

    def wall_by_id(self, identifier: Optional[str]) -> Optional[Surface]:
        """Resolve a parentIdentifier against the wall list."""
        if identifier is None:
            return None
        for wall in self.walls:
            if wall.identifier == identifier:
                return wall
        return None

    def objects_of(self, category: Category) -> list[Surface]:
        return [o for o in self.objects if o.category is category]


def parse_scan(data: Any) -> Scan:
    """Validate untrusted decoded JSON into a :class:`Scan`.

    Raises:
        ScanValidationError: naming the first offending field.
    """
    if not isinstance(data, dict):
        raise ScanValidationError("Invalid raw scan: data must be an object")
    try:
        return Scan.model_validate(data)
    except ValidationError as exc:
        raise ScanValidationError.from_pydantic(exc) from exc


# ---------- Analysis output ----------
class WidthHeight(BaseModel):
    """One entity's extent; floors report their length as ``height``."""

    model_config = ConfigDict(frozen=True)

    height: float
    width: float


class ScanAnalysis(BaseModel):
    """Flat per-artifact record merged into the reporting layer's analysis."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    room_area_sq_ft: float = Field(0.0, alias="roomAreaSqFt")
    wall_count: int = Field(0, alias="wallCount")
    toilet_count: int = Field(0, alias="toiletCount")
    tub_count: int = Field(0, alias="tubCount")
    sink_count: int = Field(0, alias="sinkCount")
    storage_count: int = Field(0, alias="storageCount")
    door_count: int = Field(0, alias="doorCount")
    window_count: int = Field(0, alias="windowCount")
    opening_count: int = Field(0, alias="openingCount")

    # Geometric integrity
    has_external_opening: bool = Field(False, alias="hasExternalOpening")
    has_soffit: bool = Field(False, alias="hasSoffit")
    has_low_ceiling: bool = Field(False, alias="hasLowCeiling")
    has_toilet_gap_errors: bool = Field(False, alias="hasToiletGapErrors")
    has_tub_gap_errors: bool = Field(False, alias="hasTubGapErrors")
    has_wall_gap_errors: bool = Field(False, alias="hasWallGapErrors")
    has_colinear_wall_errors: bool = Field(False, alias="hasColinearWallErrors")
    has_crooked_wall_errors: bool = Field(False, alias="hasCrookedWallErrors")
    has_nib_walls: bool = Field(False, alias="hasNibWalls")
    has_object_intersection_errors: bool = Field(False, alias="hasObjectIntersectionErrors")
    has_wall_object_intersection_errors: bool = Field(False, alias="hasWallObjectIntersectionErrors")
    has_wall_wall_intersection_errors: bool = Field(False, alias="hasWallWallIntersectionErrors")
    has_door_blocking_error: bool = Field(False, alias="hasDoorBlockingError")
    has_door_floor_contact_error: bool = Field(False, alias="hasDoorFloorContactError")

    # Wall shape
    has_non_rect_wall: bool = Field(False, alias="hasNonRectWall")
    has_curved_wall: bool = Field(False, alias="hasCurvedWall")

    # Object presence
    has_washer_dryer: bool = Field(False, alias="hasWasherDryer")
    has_stove: bool = Field(False, alias="hasStove")
    has_table: bool = Field(False, alias="hasTable")
    has_chair: bool = Field(False, alias="hasChair")
    has_bed: bool = Field(False, alias="hasBed")
    has_sofa: bool = Field(False, alias="hasSofa")
    has_dishwasher: bool = Field(False, alias="hasDishwasher")
    has_oven: bool = Field(False, alias="hasOven")
    has_refrigerator: bool = Field(False, alias="hasRefrigerator")
    has_stairs: bool = Field(False, alias="hasStairs")
    has_fireplace: bool = Field(False, alias="hasFireplace")
    has_television: bool = Field(False, alias="hasTelevision")

    # Embedded entities
    has_unparented_embedded: bool = Field(False, alias="hasUnparentedEmbedded")
    has_curved_embedded: bool = Field(False, alias="hasCurvedEmbedded")
    has_non_rectangular_embedded: bool = Field(False, alias="hasNonRectangularEmbedded")
    has_non_empty_completed_edges: bool = Field(False, alias="hasNonEmptyCompletedEdges")
    has_floors_with_parent_id: bool = Field(False, alias="hasFloorsWithParentId")
    walls_with_windows: int = Field(0, alias="wallsWithWindows")
    walls_with_doors: int = Field(0, alias="wallsWithDoors")
    walls_with_openings: int = Field(0, alias="wallsWithOpenings")

    # Stories / sections
    stories: list[int] = Field(default_factory=list)
    has_multiple_stories: bool = Field(False, alias="hasMultipleStories")
    section_labels: list[str] = Field(default_factory=list, alias="sectionLabels")

    # Attributes / vanity
    door_is_open_counts: dict[str, int] = Field(default_factory=dict, alias="doorIsOpenCounts")
    object_attribute_counts: dict[str, dict[str, int]] = Field(
        default_factory=dict, alias="objectAttributeCounts"
    )
    vanity_type: str = Field("no vanity", alias="vanityType")

    # Dimensions and areas (metres, square metres)
    wall_heights: list[float] = Field(default_factory=list, alias="wallHeights")
    wall_widths: list[float] = Field(default_factory=list, alias="wallWidths")
    wall_areas: list[float] = Field(default_factory=list, alias="wallAreas")
    wall_width_height_pairs: list[WidthHeight] = Field(default_factory=list, alias="wallWidthHeightPairs")
    window_heights: list[float] = Field(default_factory=list, alias="windowHeights")
    window_widths: list[float] = Field(default_factory=list, alias="windowWidths")
    window_areas: list[float] = Field(default_factory=list, alias="windowAreas")
    window_width_height_pairs: list[WidthHeight] = Field(default_factory=list, alias="windowWidthHeightPairs")
    door_heights: list[float] = Field(default_factory=list, alias="doorHeights")
    door_widths: list[float] = Field(default_factory=list, alias="doorWidths")
    door_areas: list[float] = Field(default_factory=list, alias="doorAreas")
    door_width_height_pairs: list[WidthHeight] = Field(default_factory=list, alias="doorWidthHeightPairs")
    opening_heights: list[float] = Field(default_factory=list, alias="openingHeights")
    opening_widths: list[float] = Field(default_factory=list, alias="openingWidths")
    opening_areas: list[float] = Field(default_factory=list, alias="openingAreas")
    opening_width_height_pairs: list[WidthHeight] = Field(default_factory=list, alias="openingWidthHeightPairs")
    floor_lengths: list[float] = Field(default_factory=list, alias="floorLengths")
    floor_widths: list[float] = Field(default_factory=list, alias="floorWidths")
    floor_width_height_pairs: list[WidthHeight] = Field(default_factory=list, alias="floorWidthHeightPairs")
    tub_lengths: list[float] = Field(default_factory=list, alias="tubLengths")
    vanity_lengths: list[float] = Field(default_factory=list, alias="vanityLengths")
