"""
Tests for center-alignment detection and position correction.
"""
from __future__ import annotations

import pytest
from loguru import logger

from snap_guides.core.engine import NO_SNAP, NoSnap, Snap, SnapResult, compute_snap
from snap_guides.core.exceptions import PreconditionError
from snap_guides.core.geometry import Axis, center_of
from snap_guides.core.models import Shape
from snap_guides.core.settings import DEFAULT_TOLERANCE


def _centered(x, y, size=10, **kw):
    return Shape(left=x, top=y, width=size, height=size,
                 origin_x="center", origin_y="center", **kw)


class TestNoCandidates:
    def test_empty_candidates(self, shape_a):
        result = compute_snap(shape_a, [])
        assert isinstance(result.horizontal, NoSnap)
        assert isinstance(result.vertical, NoSnap)
        assert (shape_a.left, shape_a.top) == (100, 100)

    def test_only_self_on_canvas(self, shape_a):
        result = compute_snap(shape_a, [shape_a])
        assert result == SnapResult(NO_SNAP, NO_SNAP)
        assert not result.any_snapped
        assert (shape_a.left, shape_a.top) == (100, 100)

    def test_excluded_objects_are_not_targets(self, shape_a):
        twin = _centered(100, 100)
        result = compute_snap(shape_a, [shape_a, twin], exclude=[twin])
        assert not result.any_snapped


class TestThreshold:
    def test_default_tolerance_is_20(self):
        assert DEFAULT_TOLERANCE == 20

    def test_delta_equal_to_tolerance_does_not_snap(self, shape_b):
        moving = _centered(98, 0)  # 20 away from B's center x=118
        result = compute_snap(moving, [shape_b], tolerance=20)
        assert result.horizontal is NO_SNAP
        assert moving.left == 98

    def test_delta_just_under_tolerance_snaps(self, shape_b):
        moving = _centered(98.5, 0)
        result = compute_snap(moving, [shape_b], tolerance=20)
        assert isinstance(result.horizontal, Snap)
        assert result.horizontal.coordinate == 118
        assert moving.left == 118

    @pytest.mark.parametrize("bad", [0, -1, float("nan"), float("inf"), "wide", None])
    def test_invalid_tolerance_raises(self, shape_a, bad):
        with pytest.raises(PreconditionError):
            compute_snap(shape_a, [], tolerance=bad)


class TestSnapping:
    def test_scenario_horizontal_alignment(self, shape_a, shape_b):
        # drag A so its center sits at x=110, within 20 of B's center x=118
        shape_a.left = 110
        result = compute_snap(shape_a, [shape_a, shape_b])

        assert result.horizontal == Snap(coordinate=118, leading=118, target=shape_b)
        assert result.vertical is NO_SNAP
        assert shape_a.left == 118
        assert shape_a.top == 100

    def test_leading_origin_moving_object_is_corrected_by_center(self, shape_a):
        moving = Shape(left=0, top=500, width=40, height=40, origin_x="left", origin_y="top")
        # moving center x = 20, A center x = 100 -> move far away first
        moving.left = 75  # center 95
        compute_snap(moving, [shape_a])
        assert center_of(moving, Axis.HORIZONTAL) == 100
        assert moving.left == 80

    def test_trailing_origin_moving_object(self, shape_a):
        moving = Shape(left=0, top=0, width=40, height=40, origin_x="right", origin_y="bottom")
        moving.left, moving.top = 115, 125  # centers (95, 105)
        result = compute_snap(moving, [shape_a])
        assert result.horizontal.leading == 120
        assert result.vertical.leading == 120
        assert (moving.left, moving.top) == (120, 120)

    def test_axes_are_independent(self, shape_a):
        other = _centered(105, 400)
        result = compute_snap(shape_a, [other])
        assert isinstance(result.horizontal, Snap)
        assert result.vertical is NO_SNAP
        assert shape_a.left == 105
        assert shape_a.top == 100

    def test_vertical_only(self, shape_a):
        other = _centered(400, 92)
        result = compute_snap(shape_a, [other])
        assert result.horizontal is NO_SNAP
        assert result.outcome(Axis.VERTICAL).coordinate == 92
        assert shape_a.left == 100
        assert shape_a.top == 92

    def test_last_match_wins(self, shape_a):
        first = _centered(115, 600)
        second = _centered(90, 700)
        result = compute_snap(shape_a, [first, second])
        assert result.horizontal.target is second
        assert shape_a.left == 90

    def test_matches_measured_against_original_center(self, shape_a):
        # after snapping to 115, 81 would be 34 away; it still matches
        # because every candidate is compared with the pre-drag center
        first = _centered(115, 600)
        second = _centered(81, 700)
        compute_snap(shape_a, [first, second])
        assert shape_a.left == 81

    def test_apply_false_leaves_object_untouched(self, shape_a, shape_b):
        shape_a.left = 110
        result = compute_snap(shape_a, [shape_b], apply=False)
        assert result.horizontal.leading == 118
        assert shape_a.left == 110


class TestPreconditions:
    def test_none_moving_object(self, shape_b):
        with pytest.raises(PreconditionError):
            compute_snap(None, [shape_b])

    def test_malformed_candidate(self, shape_a):
        with pytest.raises(PreconditionError):
            compute_snap(shape_a, [object()])

    def test_malformed_later_candidate_leaves_moving_untouched(self, shape_a, shape_b):
        shape_a.left = 110
        with pytest.raises(PreconditionError):
            compute_snap(shape_a, [shape_b, object()])
        assert shape_a.left == 110
        assert shape_a.top == 100


class TestLogging:
    def _snap_with_sink(self, shape_a, shape_b):
        records = []
        sink_id = logger.add(records.append, level="DEBUG")
        try:
            shape_a.left = 110
            compute_snap(shape_a, [shape_b])
        finally:
            logger.remove(sink_id)
        return records

    def test_silent_until_host_enables(self, shape_a, shape_b):
        assert self._snap_with_sink(shape_a, shape_b) == []

    def test_records_matches_once_enabled(self, shape_a, shape_b):
        logger.enable("snap_guides")
        try:
            records = self._snap_with_sink(shape_a, shape_b)
        finally:
            logger.disable("snap_guides")
        assert any("snap: horizontal=118" in str(r) for r in records)
