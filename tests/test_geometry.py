"""
Tests for origin-aware center math.
"""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from snap_guides.core.exceptions import PreconditionError
from snap_guides.core.geometry import (
    Axis,
    OriginMode,
    center_of,
    leading,
    leading_coordinate_for,
    set_leading_coordinate,
)
from snap_guides.core.models import Shape


def _shape(origin_x, origin_y, **kw):
    params = dict(left=12.5, top=-40.0, width=30, height=16, scale_x=1.5, scale_y=0.5)
    params.update(kw)
    return Shape(origin_x=origin_x, origin_y=origin_y, **params)


class TestCenterOf:
    def test_center_origin_returns_stored_coordinate(self):
        s = _shape("center", "center")
        assert center_of(s, Axis.HORIZONTAL) == 12.5
        assert center_of(s, Axis.VERTICAL) == -40.0

    def test_leading_origin_adds_half_scaled_extent(self):
        s = _shape("left", "top")
        assert center_of(s, Axis.HORIZONTAL) == 12.5 + 30 * 1.5 / 2
        assert center_of(s, Axis.VERTICAL) == -40.0 + 16 * 0.5 / 2

    def test_trailing_origin_subtracts_half_scaled_extent(self):
        s = _shape("right", "bottom")
        assert center_of(s, Axis.HORIZONTAL) == 12.5 - 22.5
        assert center_of(s, Axis.VERTICAL) == -40.0 - 4.0

    def test_enum_members_accepted(self):
        s = _shape(OriginMode.START, OriginMode.END)
        assert center_of(s, Axis.HORIZONTAL) == 35.0
        assert center_of(s, Axis.VERTICAL) == -44.0


class TestInverse:
    @pytest.mark.parametrize(
        "origin_x,origin_y",
        [("left", "top"), ("center", "center"), ("right", "bottom")],
    )
    def test_leading_coordinate_for_inverts_center_of(self, origin_x, origin_y):
        s = _shape(origin_x, origin_y)
        for axis in Axis:
            c = center_of(s, axis)
            assert leading_coordinate_for(s, axis, c) == leading(s, axis)

    def test_inverse_holds_up_to_rounding_for_inexact_values(self):
        # 0.1 and 0.2 have no exact binary form; the round trip may be off
        # in the last bit
        s = Shape(left=0.1, top=0.1, width=0.4, height=0.4)
        for axis in Axis:
            back = leading_coordinate_for(s, axis, center_of(s, axis))
            assert back == pytest.approx(0.1)

    def test_set_leading_coordinate_moves_center(self):
        s = _shape("right", "top")
        set_leading_coordinate(s, Axis.HORIZONTAL, leading_coordinate_for(s, Axis.HORIZONTAL, 200.0))
        assert center_of(s, Axis.HORIZONTAL) == 200.0
        # other axis untouched
        assert s.top == -40.0


class TestPreconditions:
    def test_missing_field_raises(self):
        obj = SimpleNamespace(left=0, width=10, scale_x=1)  # no origin_x
        with pytest.raises(PreconditionError):
            center_of(obj, Axis.HORIZONTAL)

    def test_missing_size_raises(self):
        obj = SimpleNamespace(top=0, scale_y=1, origin_y="top")
        with pytest.raises(PreconditionError):
            center_of(obj, Axis.VERTICAL)

    def test_non_numeric_position_raises(self):
        s = _shape("center", "center", left="abc")
        with pytest.raises(PreconditionError):
            center_of(s, Axis.HORIZONTAL)

    def test_unknown_origin_raises(self):
        with pytest.raises(PreconditionError):
            center_of(_shape("middle", "top"), Axis.HORIZONTAL)

    def test_origin_names_are_axis_specific(self):
        # "top" is not a horizontal origin
        with pytest.raises(PreconditionError):
            center_of(_shape("top", "top"), Axis.HORIZONTAL)

    def test_precondition_error_is_value_error(self):
        with pytest.raises(ValueError):
            OriginMode.coerce(None, Axis.VERTICAL)


class TestShapeModel:
    def test_from_dict_builds_canvas_object(self):
        s = Shape.from_dict(
            dict(left=520, top=160, width=120, height=60,
                 origin_x="right", origin_y="bottom", name="C")
        )
        assert s.name == "C"
        assert center_of(s, Axis.HORIZONTAL) == 460.0
        assert center_of(s, Axis.VERTICAL) == 130.0

    def test_from_dict_rejects_unknown_fields(self):
        with pytest.raises(TypeError):
            Shape.from_dict(dict(left=0, top=0, width=1, height=1, colour="red"))
