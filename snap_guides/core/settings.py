# snap_guides/core/settings.py
"""
Guide-line configuration.

``AxisSettings`` is built once (defaults merged with caller overrides)
and never mutated afterwards; controllers hold on to the same instance
for their whole lifetime.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from .exceptions import PreconditionError, SettingsError
from .geometry import Axis, OriginMode

DEFAULT_TOLERANCE = 20.0
DEFAULT_EXTENT = 1000.0

IDLE_COLOR = "red"
ACTIVE_COLOR = "green"


@dataclass(frozen=True)
class AxisSettings:
    fill: str = IDLE_COLOR
    stroke: str = IDLE_COLOR
    stroke_width: float = 1
    selectable: bool = False
    evented: bool = False
    origin_x: OriginMode = OriginMode.CENTER
    origin_y: OriginMode = OriginMode.CENTER

    # color used while a guide marks a live alignment
    active_color: str = ACTIVE_COLOR
    # guides span [-extent, extent] along their own direction
    extent: float = DEFAULT_EXTENT

    def __post_init__(self) -> None:
        # normalize string origins ("center", "left", ...) into enum members
        try:
            object.__setattr__(
                self, "origin_x", OriginMode.coerce(self.origin_x, Axis.HORIZONTAL)
            )
            object.__setattr__(
                self, "origin_y", OriginMode.coerce(self.origin_y, Axis.VERTICAL)
            )
        except PreconditionError as exc:
            raise SettingsError(str(exc)) from exc

        for name in ("stroke_width", "extent"):
            raw = getattr(self, name)
            try:
                value = float(raw)
            except (TypeError, ValueError) as exc:
                raise SettingsError(f"{name} must be a number, got {raw!r}") from exc
            if not math.isfinite(value):
                raise SettingsError(f"{name} must be finite, got {raw!r}")
            object.__setattr__(self, name, value)

        if self.stroke_width < 0:
            raise SettingsError(f"stroke_width must be >= 0, got {self.stroke_width}")
        if not self.extent > 0:
            raise SettingsError(f"extent must be > 0, got {self.extent}")

    @classmethod
    def merged(
        cls,
        overrides: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> "AxisSettings":
        """
        Defaults with *overrides* (and keyword overrides) applied on top.

        Override wins per key. Unknown keys raise :class:`SettingsError`.
        """
        values: Dict[str, Any] = dict(overrides or {})
        values.update(kwargs)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise SettingsError(f"Unknown guide setting(s): {', '.join(unknown)}")

        return replace(cls(), **values)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["origin_x"] = self.origin_x.value
        d["origin_y"] = self.origin_y.value
        return d


def validate_tolerance(tolerance: Any) -> float:
    """Return *tolerance* as a float, rejecting non-positive or non-finite values."""
    try:
        value = float(tolerance)
    except (TypeError, ValueError) as exc:
        raise PreconditionError(f"Tolerance must be a number, got {tolerance!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise PreconditionError(f"Tolerance must be a positive number, got {tolerance!r}")
    return value
