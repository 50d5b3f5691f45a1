# snap_guides/core/exceptions.py
"""
Consistent error types for the snapping core.

No Qt dependencies — this module is pure Python so it can be used
in non-GUI contexts (tests, headless layout tools).
"""
from __future__ import annotations


class SnapError(Exception):
    """Base exception for all snapping errors."""


class PreconditionError(SnapError, ValueError):
    """A caller handed the core something it cannot work with.

    Raised for a missing moving object, a canvas object without the
    expected position/size/scale/origin fields, an unknown origin mode,
    or a non-positive tolerance. These point at a host-integration bug,
    so they are never swallowed.
    """


class SettingsError(SnapError, ValueError):
    """Invalid or unknown guide-line configuration key."""


# ---------------------------------------------------------------------------
# Message helpers
# ---------------------------------------------------------------------------

_PREFIXES: list[tuple[type, str]] = [
    (PreconditionError, "Snapping precondition failed"),
    (SettingsError, "Invalid snapping settings"),
]


def describe(exc: BaseException) -> str:
    """Return a short, UI-safe description for *exc*."""
    for exc_type, prefix in _PREFIXES:
        if isinstance(exc, exc_type):
            return f"{prefix}: {exc}"
    if isinstance(exc, SnapError):
        return str(exc)
    return f"{type(exc).__name__}: {exc}"
