# snap_guides/core/engine.py
"""
Center-alignment detection.

``compute_snap`` compares the moving object's center with every other
candidate's center, one axis at a time. A candidate whose center is
strictly closer than the tolerance is a match; the moving object is
re-positioned so the centers coincide. When several candidates match on
the same axis, the last one in iteration order wins.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from loguru import logger

from .exceptions import PreconditionError
from .geometry import (
    Axis,
    center_of,
    leading_coordinate_for,
    set_leading_coordinate,
)
from .settings import DEFAULT_TOLERANCE, validate_tolerance


@dataclass(frozen=True)
class NoSnap:
    """No candidate lined up on this axis."""

    @property
    def snapped(self) -> bool:
        return False


@dataclass(frozen=True)
class Snap:
    """The moving object lines up with a candidate on this axis."""

    coordinate: float   # matched center (where the guide goes)
    leading: float      # corrected stored coordinate for the moving object
    target: Any = None

    @property
    def snapped(self) -> bool:
        return True


SnapOutcome = Union[NoSnap, Snap]

NO_SNAP = NoSnap()


@dataclass(frozen=True)
class SnapResult:
    horizontal: SnapOutcome = NO_SNAP
    vertical: SnapOutcome = NO_SNAP

    def outcome(self, axis: Axis) -> SnapOutcome:
        return self.horizontal if axis is Axis.HORIZONTAL else self.vertical

    @property
    def any_snapped(self) -> bool:
        return self.horizontal.snapped or self.vertical.snapped


def _is_excluded(obj: Any, moving: Any, exclude: Iterable[Any]) -> bool:
    if obj is moving:
        return True
    return any(obj is ex for ex in exclude)


def compute_snap(
    moving: Any,
    candidates: Iterable[Any],
    tolerance: float = DEFAULT_TOLERANCE,
    exclude: Iterable[Any] = (),
    apply: bool = True,
) -> SnapResult:
    """
    Find center alignments between *moving* and *candidates*.

    Parameters
    ----------
    moving:
        The object being dragged.
    candidates:
        Every object on the canvas. *moving* itself is skipped.
    tolerance:
        Strict upper bound on the center delta that counts as aligned.
    exclude:
        Objects that are never alignment targets (the guide lines).
    apply:
        When true (the default) the winning corrected coordinates are
        written to *moving* once every candidate has been checked.
    """
    if moving is None:
        raise PreconditionError("compute_snap() needs a moving object, got None")
    tol = validate_tolerance(tolerance)
    excluded = tuple(exclude)

    moving_center = {axis: center_of(moving, axis) for axis in Axis}
    outcomes: dict[Axis, SnapOutcome] = {axis: NO_SNAP for axis in Axis}

    for obj in candidates:
        if _is_excluded(obj, moving, excluded):
            continue

        for axis in Axis:
            candidate_center = center_of(obj, axis)
            if abs(moving_center[axis] - candidate_center) < tol:
                outcomes[axis] = Snap(
                    coordinate=candidate_center,
                    leading=leading_coordinate_for(moving, axis, candidate_center),
                    target=obj,
                )

    # a malformed candidate raises above, before anything is written
    if apply:
        for axis, outcome in outcomes.items():
            if isinstance(outcome, Snap):
                set_leading_coordinate(moving, axis, outcome.leading)

    result = SnapResult(
        horizontal=outcomes[Axis.HORIZONTAL],
        vertical=outcomes[Axis.VERTICAL],
    )
    if result.any_snapped:
        logger.debug(
            "snap: horizontal={} vertical={}",
            _fmt(result.horizontal),
            _fmt(result.vertical),
        )
    return result


def _fmt(outcome: SnapOutcome) -> Optional[float]:
    return outcome.coordinate if isinstance(outcome, Snap) else None
