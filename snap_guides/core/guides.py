# snap_guides/core/guides.py
"""
Guide-line lifecycle for a single drag gesture.

The controller owns two lines: a vertical one marking horizontal
(x) alignment and a horizontal one marking vertical (y) alignment.
They are created together on the first movement frame, updated on every
frame, and removed together when the drag completes, so the canvas
always holds either both guides or neither.

All canvas access goes through the canvas handed to the constructor;
the event handlers are bound methods of this instance.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from loguru import logger

from .engine import Snap, SnapOutcome, SnapResult, compute_snap
from .exceptions import PreconditionError
from .protocols import MOVED_EVENT, MOVING_EVENT
from .settings import DEFAULT_TOLERANCE, AxisSettings, validate_tolerance

if TYPE_CHECKING:
    from .protocols import GuideDrawable, LineFactory, SnapCanvas


class GuideController:
    def __init__(
        self,
        canvas: "SnapCanvas",
        line_factory: "LineFactory",
        settings: Optional[Mapping[str, Any] | AxisSettings] = None,
        tolerance: float = DEFAULT_TOLERANCE,
        attach: bool = True,
    ):
        if canvas is None:
            raise PreconditionError("GuideController needs a canvas")
        self.canvas = canvas
        self.line_factory = line_factory

        if isinstance(settings, AxisSettings):
            self._settings = settings
        else:
            self._settings = AxisSettings.merged(settings)
        self._tolerance = validate_tolerance(tolerance)

        # marks x alignment (line runs top to bottom)
        self._vertical_guide: Optional["GuideDrawable"] = None
        # marks y alignment (line runs left to right)
        self._horizontal_guide: Optional["GuideDrawable"] = None

        self._attached = False
        if attach:
            self.attach()

    # ---- read-only state ----
    @property
    def settings(self) -> AxisSettings:
        return self._settings

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def vertical_guide(self) -> Optional["GuideDrawable"]:
        return self._vertical_guide

    @property
    def horizontal_guide(self) -> Optional["GuideDrawable"]:
        return self._horizontal_guide

    @property
    def active(self) -> bool:
        return self._vertical_guide is not None

    def guides(self) -> tuple:
        if not self.active:
            return ()
        return (self._vertical_guide, self._horizontal_guide)

    # ---- event wiring ----
    def attach(self) -> None:
        if self._attached:
            return
        self.canvas.on(MOVING_EVENT, self.on_moving)
        self.canvas.on(MOVED_EVENT, self.on_moved)
        self._attached = True

    def detach(self) -> None:
        """Unsubscribe from the canvas and drop any guides still shown."""
        if not self._attached:
            return
        self.canvas.off(MOVING_EVENT, self.on_moving)
        self.canvas.off(MOVED_EVENT, self.on_moved)
        self._attached = False
        self.on_moved()

    # ---- lifecycle ----
    def ensure_guides(self) -> None:
        """Create both guides (hidden, idle color) if they don't exist yet."""
        if self.active:
            return

        span = self._settings.extent
        vertical = self.line_factory((0.0, -span, 0.0, span), self._settings)
        horizontal = self.line_factory((-span, 0.0, span, 0.0), self._settings)
        for line in (vertical, horizontal):
            line.set_color(self._settings.stroke)
            line.set_shown(False)

        self.canvas.add(vertical)
        self.canvas.add(horizontal)
        self._vertical_guide = vertical
        self._horizontal_guide = horizontal
        logger.debug("guides created (extent={})", span)
        self.canvas.request_render()

    def on_moving(self, target: Any) -> SnapResult:
        """Handle one drag frame for *target*."""
        if target is None:
            raise PreconditionError("object:moving fired without a target object")

        self.ensure_guides()
        result = compute_snap(
            target,
            list(self.canvas.get_objects()),
            tolerance=self._tolerance,
            exclude=self.guides(),
        )
        self.apply(result)
        self.canvas.request_render()
        return result

    def apply(self, result: SnapResult) -> None:
        """Update guide position/color/visibility from *result*."""
        if not self.active:
            self.ensure_guides()
        self._show_vertical(result.horizontal)
        self._show_horizontal(result.vertical)

    def on_moved(self, *_args: Any) -> None:
        """Drag finished: remove both guides. Safe to call repeatedly."""
        if not self.active:
            return
        vertical, horizontal = self._vertical_guide, self._horizontal_guide
        self._vertical_guide = self._horizontal_guide = None
        self.canvas.remove(vertical)
        self.canvas.remove(horizontal)
        logger.debug("guides removed")
        self.canvas.request_render()

    # ---- per-guide updates ----
    def _show_vertical(self, outcome: SnapOutcome) -> None:
        line = self._vertical_guide
        if isinstance(outcome, Snap):
            x1, y1, x2, y2 = line.endpoints()
            if outcome.coordinate != x1:
                line.set_endpoints(outcome.coordinate, y1, outcome.coordinate, y2)
            line.set_color(self._settings.active_color)
            line.set_shown(True)
        else:
            line.set_shown(False)

    def _show_horizontal(self, outcome: SnapOutcome) -> None:
        line = self._horizontal_guide
        if isinstance(outcome, Snap):
            x1, y1, x2, y2 = line.endpoints()
            if outcome.coordinate != y1:
                line.set_endpoints(x1, outcome.coordinate, x2, outcome.coordinate)
            line.set_color(self._settings.active_color)
            line.set_shown(True)
        else:
            line.set_shown(False)


def install_guides(
    canvas: "SnapCanvas",
    line_factory: "LineFactory",
    tolerance: float = DEFAULT_TOLERANCE,
    **overrides: Any,
) -> GuideController:
    """Create a GuideController attached to *canvas* with keyword setting overrides."""
    return GuideController(
        canvas,
        line_factory,
        settings=AxisSettings.merged(overrides),
        tolerance=tolerance,
    )


__all__ = ["GuideController", "install_guides"]
