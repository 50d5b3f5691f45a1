# snap_guides/core/protocols.py
"""
Typing-only Protocol definitions for the host collaborators.

Each Protocol describes the *minimal* surface the snapping core reads,
writes, or calls on the graphics library it is integrated with. These
are **static guardrails only** — they are never checked at runtime.

Rules
-----
- Only stdlib ``typing`` / ``collections.abc`` types are used.
- This module must NOT import Qt; the Qt adapter lives in ``snap_guides.ui``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol, Sequence, Tuple, Union

if TYPE_CHECKING:
    from .geometry import OriginMode
    from .settings import AxisSettings


LineCoords = Tuple[float, float, float, float]

# Event names shared by every host adapter
MOVING_EVENT = "object:moving"
MOVED_EVENT = "object:moved"


class CanvasObject(Protocol):
    """A drawable the core can read geometry from (and reposition)."""

    left: float
    top: float
    width: float
    height: float
    scale_x: float
    scale_y: float
    origin_x: Union[str, "OriginMode"]
    origin_y: Union[str, "OriginMode"]


class GuideDrawable(Protocol):
    """A straight line primitive the guides are drawn with."""

    def endpoints(self) -> LineCoords: ...
    def set_endpoints(self, x1: float, y1: float, x2: float, y2: float) -> None: ...
    def set_color(self, color: str) -> None: ...
    def color(self) -> str: ...
    def set_shown(self, shown: bool) -> None: ...
    def is_shown(self) -> bool: ...


class LineFactory(Protocol):
    def __call__(self, coords: LineCoords, settings: "AxisSettings") -> GuideDrawable: ...


class SnapCanvas(Protocol):
    """The host canvas / graphics surface."""

    def get_objects(self) -> Sequence[Any]: ...
    def add(self, obj: Any) -> None: ...
    def remove(self, obj: Any) -> None: ...
    def request_render(self) -> None: ...
    def on(self, event: str, callback: Callable[..., Any]) -> None: ...
    def off(self, event: str, callback: Callable[..., Any]) -> None: ...
