"""Tests for the per-scan analysis record, predicates, vanity and loading."""

import json
import logging
import math

import pytest

from roomscan import ScanAnalysis, ScanValidationError, compute_scan_analysis, load_scan
from roomscan.models import Category, VanityType
from roomscan.scan_fixtures import (
    box_room,
    make_door,
    make_embedded,
    make_floor,
    make_object,
    make_scan,
    make_toilet,
    make_tub,
    make_wall,
)
from roomscan.schemas import parse_scan
from roomscan.services import extract_dimension_data, find_vanity_candidate, vanity_lengths
from roomscan.services.scan_predicates import (
    door_is_open_counts,
    has_curved_embedded,
    has_non_empty_completed_edges,
    has_non_rectangular_embedded,
    has_unparented_embedded,
    object_attribute_counts,
    wall_embedded_counts,
)


def scan_of(**arrays):
    return parse_scan(make_scan(**arrays))


def vanity_objects() -> list:
    return [
        make_object("sink", 1.5, 1.5, identifier="sink-1"),
        make_object("storage", 1.5, 1.5, width=1.0, identifier="vanity-1"),
    ]


def bathroom() -> dict:
    return make_scan(
        sections=[{"label": "bathroom", "story": 1, "center": [1.5, 0.0, 1.5]}],
        floors=[make_floor()],
        walls=box_room(),
        objects=vanity_objects(),
        doors=[make_door("d1", "w-south", 1.5, 0.0, is_open=True)],
        openings=[make_embedded("opening", "o1", "w-east")],
    )


class TestComputeScanAnalysis:
    def test_clean_bathroom(self) -> None:
        analysis = compute_scan_analysis(parse_scan(bathroom()))

        assert analysis.room_area_sq_ft == pytest.approx(9 / 0.3048 ** 2)
        assert analysis.wall_count == 4
        assert analysis.sink_count == 1
        assert analysis.storage_count == 1
        assert analysis.toilet_count == 0
        assert analysis.door_count == 1
        assert analysis.opening_count == 1
        assert analysis.has_external_opening
        assert analysis.vanity_type == "normal"
        assert analysis.stories == [1]
        assert not analysis.has_multiple_stories
        assert analysis.section_labels == ["bathroom"]
        assert analysis.door_is_open_counts == {"Open": 1}
        assert analysis.walls_with_doors == 1
        assert analysis.walls_with_openings == 1
        assert analysis.walls_with_windows == 0

        errors = [
            "has_toilet_gap_errors", "has_tub_gap_errors", "has_wall_gap_errors",
            "has_colinear_wall_errors", "has_crooked_wall_errors", "has_nib_walls",
            "has_object_intersection_errors", "has_wall_object_intersection_errors",
            "has_wall_wall_intersection_errors", "has_door_blocking_error",
            "has_door_floor_contact_error", "has_soffit", "has_low_ceiling",
            "has_non_rect_wall", "has_curved_wall", "has_unparented_embedded",
            "has_curved_embedded", "has_non_rectangular_embedded",
            "has_non_empty_completed_edges", "has_floors_with_parent_id",
        ]
        assert [name for name in errors if getattr(analysis, name)] == []

    def test_problem_scan(self) -> None:
        raw = bathroom()
        raw["objects"].append(make_toilet(0.5, 1.5))
        raw["objects"].append(make_object("chair", 1.5, 0.4, width=0.4, depth=0.4))
        raw["walls"].append(make_wall("nib", (2.0, 3.0), (2.0, 2.8)))
        analysis = compute_scan_analysis(parse_scan(raw))

        assert analysis.toilet_count == 1
        assert analysis.has_toilet_gap_errors
        assert analysis.has_door_blocking_error
        assert analysis.has_nib_walls
        assert analysis.has_chair
        assert not analysis.has_wall_gap_errors

    def test_toilet_with_non_finite_depth_does_not_abort(self) -> None:
        raw = bathroom()
        raw["objects"].append(make_toilet(2.5, 2.5, dimensions=[0.4, 0.8, math.nan]))
        analysis = compute_scan_analysis(parse_scan(raw))
        assert analysis.toilet_count == 1
        assert not analysis.has_toilet_gap_errors

    def test_dimension_lists(self) -> None:
        analysis = compute_scan_analysis(parse_scan(bathroom()))
        assert analysis.wall_widths == pytest.approx([3.0] * 4)
        assert analysis.wall_heights == pytest.approx([2.4] * 4)
        assert analysis.opening_areas == pytest.approx([1.0])
        assert analysis.door_widths == pytest.approx([0.9])
        assert analysis.floor_lengths == pytest.approx([3.0])
        assert analysis.vanity_lengths == [1.0]
        assert analysis.tub_lengths == []
        dumped = analysis.model_dump(by_alias=True)
        assert dumped["vanityLengths"] == [1.0]
        assert dumped["doorWidthHeightPairs"] == [{"height": 2.0, "width": 0.9}]

    def test_empty_scan(self) -> None:
        analysis = compute_scan_analysis(scan_of())
        assert analysis.model_dump() == ScanAnalysis().model_dump()
        assert analysis.vanity_type == "no vanity"

    def test_presence_flags(self) -> None:
        objects = [make_object("stove", 0.5, 0.5), make_object("bed", 2.0, 2.0, width=1.0, depth=1.0)]
        analysis = compute_scan_analysis(scan_of(objects=objects))
        assert analysis.has_stove
        assert analysis.has_bed
        assert not analysis.has_sofa
        assert not analysis.has_washer_dryer

    def test_stories(self) -> None:
        walls = [
            make_wall("a", (0.0, 0.0), (3.0, 0.0), story=1),
            make_wall("b", (0.0, 0.0), (3.0, 0.0), story=2),
            make_wall("c", (0.0, 5.0), (3.0, 5.0), story=None),
        ]
        analysis = compute_scan_analysis(scan_of(walls=walls))
        assert analysis.stories == [0, 1, 2]
        assert analysis.has_multiple_stories

    def test_wall_shape_flags(self) -> None:
        corners = [[0, 0], [0, 5], [5, 5], [5, 10], [10, 10], [10, 0]]
        walls = [make_wall("w", (0.0, 0.0), (10.0, 0.0), polygonCorners=corners, curve={"radius": 4.0})]
        analysis = compute_scan_analysis(scan_of(walls=walls))
        assert analysis.has_non_rect_wall
        assert analysis.has_curved_wall
        assert analysis.has_soffit

    def test_camel_case_dump(self) -> None:
        dumped = compute_scan_analysis(parse_scan(bathroom())).model_dump(by_alias=True)
        assert dumped["hasExternalOpening"] is True
        assert dumped["vanityType"] == "normal"
        assert dumped["doorIsOpenCounts"] == {"Open": 1}
        assert "has_external_opening" not in dumped

    def test_logs_summary(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="roomscan"):
            compute_scan_analysis(parse_scan(bathroom()))
        assert "4 walls" in caplog.text


class TestPredicates:
    def test_unparented_embedded(self) -> None:
        assert has_unparented_embedded(scan_of(windows=[make_embedded("window", "win1", None)]))
        assert not has_unparented_embedded(scan_of(windows=[make_embedded("window", "win1", "w1")]))

    def test_curved_embedded_requires_parent(self) -> None:
        assert has_curved_embedded(scan_of(doors=[make_door("d1", "w1", curve={"radius": 1.0})]))
        assert not has_curved_embedded(scan_of(doors=[make_door("d1", None, curve={"radius": 1.0})]))

    def test_non_rectangular_embedded(self) -> None:
        triangle = [[0, 0, 0], [1, 0, 0], [0, 1, 0]]
        square = [[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]]
        assert has_non_rectangular_embedded(
            scan_of(windows=[make_embedded("window", "win1", "w1", polygonCorners=triangle)]))
        assert not has_non_rectangular_embedded(
            scan_of(windows=[make_embedded("window", "win1", "w1", polygonCorners=square)]))
        assert not has_non_rectangular_embedded(scan_of(windows=[make_embedded("window", "win1", "w1")]))

    def test_completed_edges(self) -> None:
        walls = box_room()
        walls[0]["completedEdges"] = ["top"]
        assert has_non_empty_completed_edges(scan_of(walls=walls))
        assert not has_non_empty_completed_edges(scan_of(walls=box_room()))

    def test_wall_embedded_counts(self) -> None:
        windows = [
            make_embedded("window", "win1", "w1"),
            make_embedded("window", "win2", "w1"),
            make_embedded("window", "win3", "w2"),
            make_embedded("window", "win4", None),
        ]
        counts = wall_embedded_counts(scan_of(windows=windows))
        assert counts == {"walls_with_windows": 2, "walls_with_doors": 0, "walls_with_openings": 0}

    def test_door_is_open_counts(self) -> None:
        doors = [
            make_door("d1", "w1", is_open=True),
            make_door("d2", "w1", is_open=True),
            make_door("d3", "w2", is_open=False),
            make_door("d4", "w3"),
        ]
        assert door_is_open_counts(scan_of(doors=doors)) == {"Open": 2, "Closed": 1, "Unknown": 1}

    def test_object_attribute_counts(self) -> None:
        objects = [
            make_object("chair", 0.0, 0.0, attributes={"ChairType": "dining", "ChairArmType": "missing"}),
            make_object("chair", 1.0, 0.0, attributes={"ChairType": "dining", "Other": "x"}),
            make_object("table", 2.0, 0.0, attributes={"TableType": 3}),
        ]
        assert object_attribute_counts(scan_of(objects=objects)) == {
            "ChairType": {"dining": 2},
            "ChairArmType": {"missing": 1},
        }


class TestVanity:
    def test_sink_on_cabinet(self) -> None:
        candidate, kind = find_vanity_candidate(scan_of(objects=vanity_objects()))
        assert kind is VanityType.NORMAL
        assert candidate.identifier == "vanity-1"
        assert vanity_lengths(scan_of(objects=vanity_objects())) == [1.0]

    def test_sink_only(self) -> None:
        scan = scan_of(objects=[make_object("sink", 1.5, 1.5, identifier="sink-1")])
        candidate, kind = find_vanity_candidate(scan)
        assert kind is VanityType.SINK_ONLY
        assert candidate.category is Category.SINK
        assert vanity_lengths(scan) == [0.5]

    def test_cabinet_on_other_story(self) -> None:
        objects = [
            make_object("sink", 1.5, 1.5),
            make_object("storage", 1.5, 1.5, width=1.0, story=2),
        ]
        assert find_vanity_candidate(scan_of(objects=objects))[1] is VanityType.SINK_ONLY

    def test_largest_storage(self) -> None:
        objects = [
            make_object("storage", 0.0, 0.0, width=0.6, depth=0.5, identifier="small"),
            make_object("storage", 2.0, 0.0, width=1.2, depth=0.5, identifier="large"),
            make_object("storage", 4.0, 0.0, width=1.2, depth=0.5, identifier="tie"),
        ]
        candidate, kind = find_vanity_candidate(scan_of(objects=objects))
        assert kind is VanityType.STORAGE_ONLY
        assert candidate.identifier == "large"

    def test_no_vanity(self) -> None:
        scan = scan_of(objects=[make_toilet()])
        assert find_vanity_candidate(scan) == (None, VanityType.NO_VANITY)
        assert vanity_lengths(scan) == []


class TestLoadScan:
    def test_load_file(self, tmp_path) -> None:
        path = tmp_path / "scan.json"
        path.write_text(json.dumps(bathroom()))
        scan = load_scan(path)
        assert len(scan.walls) == 4

    def test_load_artifact_directory(self, tmp_path) -> None:
        (tmp_path / "rawScan.json").write_text(json.dumps(bathroom()))
        assert load_scan(str(tmp_path)).doors[0].identifier == "d1"

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_scan(tmp_path / "nope.json")
        with pytest.raises(FileNotFoundError):
            load_scan(tmp_path)

    def test_malformed_json(self, tmp_path) -> None:
        path = tmp_path / "scan.json"
        path.write_text("{not json")
        with pytest.raises(ScanValidationError, match="not valid JSON"):
            load_scan(path)

    def test_invalid_scan_is_logged(self, tmp_path, caplog) -> None:
        path = tmp_path / "scan.json"
        path.write_text(json.dumps(make_scan(bogus=True)))
        with caplog.at_level(logging.WARNING, logger="roomscan"):
            with pytest.raises(ScanValidationError, match='unknown key "bogus"'):
                load_scan(path)
        assert "Rejected" in caplog.text


def pairs(data: dict, key: str) -> list:
    return [p.model_dump() for p in data[key]]


class TestDimensionData:
    def test_wall_outline_perimeter_is_the_width(self) -> None:
        outline = [[0, 0, 0], [5, 0, 0], [5, 2, 0], [0, 2, 0]]
        wall = make_wall("w", (0.0, 0.0), (5.0, 0.0), height=2.0, polygonCorners=outline)
        data = extract_dimension_data(scan_of(walls=[wall]))
        assert data["wall_widths"] == pytest.approx([14.0])
        assert data["wall_heights"] == [2.0]
        assert data["wall_areas"] == pytest.approx([28.0])
        assert pairs(data, "wall_width_height_pairs") == [{"height": 2.0, "width": pytest.approx(14.0)}]

    def test_wall_without_outline_uses_dimensions(self) -> None:
        data = extract_dimension_data(scan_of(walls=[make_wall("w", (0.0, 0.0), (10.0, 0.0), height=3.0)]))
        assert data["wall_widths"] == pytest.approx([10.0])
        assert data["wall_heights"] == [3.0]
        assert data["wall_areas"] == pytest.approx([30.0])

    def test_outline_wall_without_height(self) -> None:
        outline = [[0, 0, 0], [1, 0, 0], [1, 0, 1]]
        wall = make_wall("w", (0.0, 0.0), (1.0, 0.0), polygonCorners=outline, dimensions=[1.0])
        data = extract_dimension_data(scan_of(walls=[wall]))
        assert len(data["wall_widths"]) == 1
        assert data["wall_heights"] == []
        assert data["wall_areas"] == []

    def test_non_positive_wall_values_are_dropped(self) -> None:
        walls = [
            make_wall("a", (0.0, 0.0), (1.0, 0.0), dimensions=[0.0, 3.0, 0.2]),
            make_wall("b", (0.0, 1.0), (1.0, 1.0), dimensions=[10.0, 0.0, 0.2]),
            make_wall("c", (0.0, 2.0), (1.0, 2.0), dimensions=[10.0]),
        ]
        data = extract_dimension_data(scan_of(walls=walls))
        assert data["wall_widths"] == [10.0]
        assert data["wall_heights"] == [3.0]
        assert data["wall_areas"] == []
        assert data["wall_width_height_pairs"] == []

    def test_windows_doors_and_openings(self) -> None:
        data = extract_dimension_data(scan_of(
            windows=[make_embedded("window", "win1", "w1", dimensions=[1.5, 1.2, 0.1])],
            doors=[make_door("d1", "w1", width=0.9, height=2.1)],
            openings=[make_embedded("opening", "o1", "w1", dimensions=[2.0, 2.5, 0.1])],
        ))
        assert data["window_widths"] == [1.5]
        assert data["window_heights"] == [1.2]
        assert data["window_areas"] == pytest.approx([1.8])
        assert pairs(data, "window_width_height_pairs") == [{"height": 1.2, "width": 1.5}]
        assert data["door_areas"] == pytest.approx([0.9 * 2.1])
        assert data["opening_areas"] == pytest.approx([5.0])

    def test_embedded_entities_need_width_and_height(self) -> None:
        windows = [
            make_embedded("window", "win1", "w1", dimensions=[1.2]),
            make_embedded("window", "win2", "w1", dimensions=[0.0, 1.2]),
        ]
        doors = [make_door("d1", "w1", height=0.0)]
        data = extract_dimension_data(scan_of(windows=windows, doors=doors))
        assert data["window_widths"] == []
        assert data["window_heights"] == []
        assert data["door_widths"] == []
        assert data["door_heights"] == []

    def test_floor_outline_spans(self) -> None:
        outline = [[0, 0, 0], [10, 5, 0], [5, 10, 0], [-2, 3, 0]]
        data = extract_dimension_data(scan_of(floors=[make_floor(polygonCorners=outline)]))
        assert data["floor_lengths"] == [12]
        assert data["floor_widths"] == [10]
        assert pairs(data, "floor_width_height_pairs") == [{"height": 12.0, "width": 10.0}]

    def test_floor_dimensions_fallback(self) -> None:
        floors = [
            make_floor(polygonCorners=[], dimensions=[10.0, 0.0, 0.1]),
            make_floor(polygonCorners=[], dimensions=[0.0, 5.0, 0.1]),
            make_floor(polygonCorners=[], dimensions=[]),
        ]
        data = extract_dimension_data(scan_of(floors=floors))
        assert data["floor_lengths"] == [10.0]
        assert data["floor_widths"] == [5.0]
        assert data["floor_width_height_pairs"] == []

    def test_tub_lengths(self) -> None:
        objects = [
            make_tub(0.0, 0.0, dimensions=[1.7, 0.7, 0.6]),
            make_tub(3.0, 0.0, dimensions=[0.0, 0.7, 0.6]),
            make_toilet(dimensions=[0.7, 0.5, 0.4]),
        ]
        data = extract_dimension_data(scan_of(objects=objects))
        assert data["tub_lengths"] == [1.7]
        assert data["vanity_lengths"] == []

    def test_empty_scan(self) -> None:
        data = extract_dimension_data(scan_of())
        assert all(values == [] for values in data.values())
