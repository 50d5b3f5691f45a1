# snap_guides/ui/settings.py
"""
Read snapping configuration from QSettings.

Keys live under the ``snapping/`` group; anything missing falls back to
the AxisSettings defaults. Values are only read once, when a controller
is built.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

from PySide6.QtCore import QSettings

from ..core.exceptions import PreconditionError, SettingsError
from ..core.settings import DEFAULT_TOLERANCE, AxisSettings, validate_tolerance

ORG_NAME = "SnapGuides"
APP_NAME = "SnapGuides"
GROUP = "snapping"

# QSettings key -> (AxisSettings field, converter)
_KEYS = {
    "stroke": ("stroke", str),
    "fill": ("fill", str),
    "active_color": ("active_color", str),
    "stroke_width": ("stroke_width", float),
    "extent": ("extent", float),
}


def _settings() -> QSettings:
    return QSettings(ORG_NAME, APP_NAME)


def load_snap_config(settings: QSettings | None = None) -> Tuple[AxisSettings, float]:
    """
    Return ``(AxisSettings, tolerance)`` built from *settings*.

    Uses the application's default QSettings store when *settings* is None.
    """
    s = settings if settings is not None else _settings()
    overrides: Dict[str, Any] = {}

    s.beginGroup(GROUP)
    try:
        for key, (field_name, conv) in _KEYS.items():
            if s.contains(key):
                raw = s.value(key)
                try:
                    overrides[field_name] = conv(raw)
                except (TypeError, ValueError) as exc:
                    raise SettingsError(
                        f"{GROUP}/{key} has an invalid value: {raw!r}"
                    ) from exc
        try:
            tolerance = validate_tolerance(s.value("tolerance", DEFAULT_TOLERANCE))
        except PreconditionError as exc:
            raise SettingsError(f"{GROUP}/tolerance: {exc}") from exc
    finally:
        s.endGroup()

    return AxisSettings.merged(overrides), tolerance


def save_snap_config(
    axis_settings: AxisSettings,
    tolerance: float,
    settings: QSettings | None = None,
) -> None:
    s = settings if settings is not None else _settings()
    s.beginGroup(GROUP)
    try:
        for key, (field_name, _conv) in _KEYS.items():
            s.setValue(key, getattr(axis_settings, field_name))
        s.setValue("tolerance", float(tolerance))
    finally:
        s.endGroup()
