# snap_guides/core/geometry.py
"""
Origin-aware center math shared by the alignment engine and the guides.

A canvas object stores one coordinate per axis, and which point of its
bounding box that coordinate refers to depends on the object's origin
mode (leading edge, center, or trailing edge). Everything here converts
between that stored coordinate and the geometric center along one axis.

Field access goes through a small per-axis accessor table instead of
building attribute names on the fly.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from typing import Any, Callable

from .exceptions import PreconditionError


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class OriginMode(Enum):
    START = "start"     # left / top
    CENTER = "center"
    END = "end"         # right / bottom

    @classmethod
    def coerce(cls, value: Any, axis: Axis) -> "OriginMode":
        """
        Normalize *value* into an OriginMode for *axis*.

        Accepts enum members, their values, and the axis-specific names
        used by graphics toolkits ("left"/"right" horizontally,
        "top"/"bottom" vertically).
        """
        if isinstance(value, OriginMode):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            mode = _ORIGIN_ALIASES[axis].get(key)
            if mode is not None:
                return mode
        raise PreconditionError(
            f"Unknown {axis.value} origin mode: {value!r}"
        )


_ORIGIN_ALIASES: dict[Axis, dict[str, OriginMode]] = {
    Axis.HORIZONTAL: {
        "start": OriginMode.START,
        "left": OriginMode.START,
        "center": OriginMode.CENTER,
        "end": OriginMode.END,
        "right": OriginMode.END,
    },
    Axis.VERTICAL: {
        "start": OriginMode.START,
        "top": OriginMode.START,
        "center": OriginMode.CENTER,
        "end": OriginMode.END,
        "bottom": OriginMode.END,
    },
}


@dataclass(frozen=True)
class AxisFields:
    """Accessors for one axis of a canvas object."""

    position: Callable[[Any], Any]
    extent: Callable[[Any], Any]
    scale: Callable[[Any], Any]
    origin: Callable[[Any], Any]
    set_position: Callable[[Any, float], None]


def _setter(name: str) -> Callable[[Any, float], None]:
    def _set(obj: Any, value: float) -> None:
        setattr(obj, name, value)
    return _set


AXIS_FIELDS: dict[Axis, AxisFields] = {
    Axis.HORIZONTAL: AxisFields(
        position=attrgetter("left"),
        extent=attrgetter("width"),
        scale=attrgetter("scale_x"),
        origin=attrgetter("origin_x"),
        set_position=_setter("left"),
    ),
    Axis.VERTICAL: AxisFields(
        position=attrgetter("top"),
        extent=attrgetter("height"),
        scale=attrgetter("scale_y"),
        origin=attrgetter("origin_y"),
        set_position=_setter("top"),
    ),
}


def _number(obj: Any, axis: Axis, getter: Callable[[Any], Any], what: str) -> float:
    try:
        value = float(getter(obj))
    except AttributeError as exc:
        raise PreconditionError(
            f"{type(obj).__name__} has no {axis.value} {what}"
        ) from exc
    except (TypeError, ValueError) as exc:
        raise PreconditionError(
            f"{type(obj).__name__} has a non-numeric {axis.value} {what}"
        ) from exc
    if not math.isfinite(value):
        raise PreconditionError(
            f"{type(obj).__name__} has a non-finite {axis.value} {what}: {value}"
        )
    return value


def origin_mode(obj: Any, axis: Axis) -> OriginMode:
    try:
        raw = AXIS_FIELDS[axis].origin(obj)
    except AttributeError as exc:
        raise PreconditionError(
            f"{type(obj).__name__} has no {axis.value} origin mode"
        ) from exc
    return OriginMode.coerce(raw, axis)


def leading(obj: Any, axis: Axis) -> float:
    """Stored coordinate of *obj* along *axis*."""
    return _number(obj, axis, AXIS_FIELDS[axis].position, "position")


def half_extent(obj: Any, axis: Axis) -> float:
    """Half of the scaled size of *obj* along *axis*."""
    fields = AXIS_FIELDS[axis]
    extent = _number(obj, axis, fields.extent, "extent")
    scale = _number(obj, axis, fields.scale, "scale")
    return extent * scale / 2


def center_of(obj: Any, axis: Axis) -> float:
    """Geometric center of *obj* along *axis*."""
    mode = origin_mode(obj, axis)
    stored = leading(obj, axis)
    if mode is OriginMode.CENTER:
        return stored
    if mode is OriginMode.START:
        return stored + half_extent(obj, axis)
    return stored - half_extent(obj, axis)


def leading_coordinate_for(obj: Any, axis: Axis, desired_center: float) -> float:
    """
    Stored coordinate that puts the center of *obj* at *desired_center*.

    Inverse of :func:`center_of` for every origin mode. The round trip is
    exact when the half extent and coordinates are representable in binary
    floating point; otherwise it holds up to rounding (``0.1 + 0.2`` style
    error in the last bit).
    """
    mode = origin_mode(obj, axis)
    if mode is OriginMode.CENTER:
        return desired_center
    if mode is OriginMode.START:
        return desired_center - half_extent(obj, axis)
    return desired_center + half_extent(obj, axis)


def set_leading_coordinate(obj: Any, axis: Axis, value: float) -> None:
    AXIS_FIELDS[axis].set_position(obj, value)
