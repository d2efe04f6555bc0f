"""Tests for wall-level room checks: gaps, colinear/crooked joins, nibs, profiles."""

import math

import pytest

from roomscan.scan_fixtures import INCH, box_room, make_scan, make_wall
from roomscan.schemas import parse_scan
from roomscan.services.room_checks import (
    check_colinear_walls,
    check_crooked_walls,
    check_low_ceiling,
    check_nib_walls,
    check_soffit,
    check_wall_gaps,
    check_wall_wall_intersections,
    has_soffit,
)


def scan_of(**arrays):
    return parse_scan(make_scan(**arrays))


def split_wall(gap: float, story_b: int = 1):
    """Two collinear walls along x with *gap* metres between them."""
    return [
        make_wall("a", (0.0, 0.0), (2.0, 0.0)),
        make_wall("b", (2.0 + gap, 0.0), (4.0, 0.0), story=story_b),
    ]


class TestWallGaps:
    @pytest.mark.parametrize("inches, expected", [
        (0.0, False),
        (1.00, False),
        (1.01, True),
        (6.0, True),
        (11.99, True),
        (12.00, False),
        (24.0, False),
    ])
    def test_gap_band_is_open(self, inches: float, expected: bool) -> None:
        assert check_wall_gaps(scan_of(walls=split_wall(inches * INCH))) is expected

    def test_closed_room_has_no_gaps(self) -> None:
        assert not check_wall_gaps(scan_of(walls=box_room()))

    def test_walls_on_different_stories_are_not_compared(self) -> None:
        assert not check_wall_gaps(scan_of(walls=split_wall(6 * INCH, story_b=2)))

    def test_walls_without_pose_are_skipped(self) -> None:
        walls = split_wall(6 * INCH)
        walls[1]["transform"] = [1, 0, 0]
        assert not check_wall_gaps(scan_of(walls=walls))


class TestColinearWalls:
    def test_split_straight_wall(self) -> None:
        assert check_colinear_walls(scan_of(walls=split_wall(2 * INCH)))

    def test_overlapping_pieces(self) -> None:
        walls = [make_wall("a", (0.0, 0.0), (2.0, 0.0)), make_wall("b", (1.5, 0.0), (3.0, 0.0))]
        assert check_colinear_walls(scan_of(walls=walls))

    def test_parallel_but_far_apart(self) -> None:
        assert not check_colinear_walls(scan_of(walls=split_wall(4 * INCH)))
        walls = [make_wall("a", (0.0, 0.0), (2.0, 0.0)), make_wall("b", (0.0, 0.5), (2.0, 0.5))]
        assert not check_colinear_walls(scan_of(walls=walls))

    def test_square_corners_are_fine(self) -> None:
        assert not check_colinear_walls(scan_of(walls=box_room()))


class TestCrookedWalls:
    def test_straight_join_is_flagged(self) -> None:
        assert check_crooked_walls(scan_of(walls=split_wall(0.0)))

    def test_shallow_kink_is_flagged(self) -> None:
        bend = math.radians(4)
        walls = [
            make_wall("a", (0.0, 0.0), (2.0, 0.0)),
            make_wall("b", (2.0, 0.0), (2.0 + 2 * math.cos(bend), 2 * math.sin(bend))),
        ]
        assert check_crooked_walls(scan_of(walls=walls))

    def test_clear_angle_is_not_flagged(self) -> None:
        bend = math.radians(10)
        walls = [
            make_wall("a", (0.0, 0.0), (2.0, 0.0)),
            make_wall("b", (2.0, 0.0), (2.0 + 2 * math.cos(bend), 2 * math.sin(bend))),
        ]
        assert not check_crooked_walls(scan_of(walls=walls))

    def test_right_angle_corners(self) -> None:
        assert not check_crooked_walls(scan_of(walls=box_room()))

    def test_walls_that_do_not_touch(self) -> None:
        assert not check_crooked_walls(scan_of(walls=split_wall(6 * INCH)))


class TestNibWalls:
    def test_short_wall(self) -> None:
        walls = box_room() + [make_wall("nib", (1.0, 0.0), (1.0, 0.25))]
        assert check_nib_walls(scan_of(walls=walls))

    def test_wall_just_over_a_foot(self) -> None:
        walls = [make_wall("stub", (1.0, 0.0), (1.0, 0.35))]
        assert not check_nib_walls(scan_of(walls=walls))

    def test_zero_length_wall_is_ignored(self) -> None:
        walls = [make_wall("dot", (1.0, 0.0), (1.0, 0.0))]
        assert not check_nib_walls(scan_of(walls=walls))

    def test_other_story_is_ignored(self) -> None:
        walls = [make_wall("nib", (1.0, 0.0), (1.0, 0.25), story=2)]
        assert not check_nib_walls(scan_of(walls=walls))


class TestWallWallIntersections:
    def test_closed_room(self) -> None:
        assert not check_wall_wall_intersections(scan_of(walls=box_room()))

    def test_crossing_mid_span(self) -> None:
        walls = box_room() + [make_wall("cross", (1.5, -1.0), (1.5, 1.0))]
        assert check_wall_wall_intersections(scan_of(walls=walls))

    def test_t_junction_is_not_a_crossing(self) -> None:
        walls = box_room() + [make_wall("spur", (1.5, 0.0), (1.5, 2.0))]
        assert not check_wall_wall_intersections(scan_of(walls=walls))

    def test_collinear_overlap(self) -> None:
        walls = [make_wall("a", (0.0, 0.0), (2.0, 0.0)), make_wall("b", (1.0, 0.0), (3.0, 0.0))]
        assert check_wall_wall_intersections(scan_of(walls=walls))

    def test_collinear_end_to_end(self) -> None:
        assert not check_wall_wall_intersections(scan_of(walls=split_wall(0.0)))

    def test_crossing_on_other_story(self) -> None:
        walls = box_room() + [make_wall("cross", (1.5, -1.0), (1.5, 1.0), story=2)]
        assert not check_wall_wall_intersections(scan_of(walls=walls))


def profiled_wall(corners):
    return make_wall("w", (0.0, 0.0), (10.0, 0.0), polygonCorners=corners)


class TestSoffit:
    @pytest.mark.parametrize("corners", [
        pytest.param([[0, 0], [0, 5], [5, 5], [5, 10], [10, 10], [10, 0]], id="top-left-notch"),
        pytest.param([[10, 0], [5, 0], [5, 5], [0, 5], [0, 10], [10, 10]], id="bottom-left-notch"),
        pytest.param([[0, 0], [0, 10], [10, 10], [10, 5], [5, 5], [5, 0]], id="bottom-right-notch"),
        pytest.param([[0, 0], [0, 5], [5, 5], [5, 10], [10, 10], [10, 5], [7, 5], [7, 0]],
                     id="two-notches"),
        pytest.param([[0, 0], [0, 5], [5, 5], [5.5, 10], [10, 10], [10, 0]], id="slanted-notch-264deg"),
    ])
    def test_notched_outline(self, corners) -> None:
        scan = scan_of(walls=[profiled_wall(corners)])
        assert has_soffit(scan.walls[0])
        assert check_soffit(scan)

    @pytest.mark.parametrize("corners", [
        pytest.param([[0, 0], [0, 10], [10, 10], [10, 0]], id="rectangle"),
        pytest.param([[0, 0], [0, 10], [8, 10], [10, 8], [10, 0]], id="chamfer-135deg"),
        pytest.param([[0, 0], [0, 10], [5, 10], [10, 10], [10, 0]], id="redundant-collinear-vertex"),
        pytest.param([[0, 0], [0, 8], [10, 10], [10, 0]], id="monopitch-trapezoid"),
    ])
    def test_plain_outline(self, corners) -> None:
        assert not check_soffit(scan_of(walls=[profiled_wall(corners)]))

    def test_too_few_corners(self) -> None:
        assert not check_soffit(scan_of(walls=[make_wall("w", (0.0, 0.0), (3.0, 0.0))]))

    def test_no_walls(self) -> None:
        assert not check_soffit(scan_of())


class TestLowCeiling:
    def test_short_wall_height(self) -> None:
        assert check_low_ceiling(scan_of(walls=[make_wall("w", (0.0, 0.0), (3.0, 0.0), height=2.0)]))

    def test_standard_height(self) -> None:
        assert not check_low_ceiling(scan_of(walls=box_room()))

    def test_sloped_top_uses_lowest_point(self) -> None:
        corners = [[-1.5, 0.0, 0.0], [1.5, 0.0, 0.0], [1.5, 2.6, 0.0], [-1.5, 2.1, 0.0]]
        wall = make_wall("w", (0.0, 0.0), (3.0, 0.0), height=2.6, polygonCorners=corners)
        assert check_low_ceiling(scan_of(walls=[wall]))

    def test_unknown_height_is_skipped(self) -> None:
        wall = make_wall("w", (0.0, 0.0), (3.0, 0.0), dimensions=[3.0])
        assert not check_low_ceiling(scan_of(walls=[wall]))


class TestStraightRunExample:
    def test_touching_split_wall(self) -> None:
        scan = scan_of(walls=[
            make_wall("a", (0.0, 0.0), (10.0, 0.0)),
            make_wall("b", (10.0, 0.0), (20.0, 0.0)),
        ])
        assert check_colinear_walls(scan)
        assert not check_wall_gaps(scan)
