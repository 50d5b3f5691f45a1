# snap_guides/ui/host_protocols.py
"""
Typing-only Protocol definitions for MainWindow attribute coupling.

Each Protocol describes the *minimal* subset of MainWindow that a given
extracted module actually reads, writes, or calls. These are **static
guardrails only** — they are never checked at runtime.

Rules
-----
- Protocols live here; extracted modules import them under TYPE_CHECKING.
- Qt types are forward-referenced (strings) or imported under
  TYPE_CHECKING to avoid import-time cost.
- This module must NOT import main_window.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from PySide6 import QtWidgets

    from .scene import SnapScene


class CanvasHost(Protocol):
    """Attributes used by ``canvas/controller.py``."""

    scene: "SnapScene"
    view: "QtWidgets.QGraphicsView"

    def setCentralWidget(self, widget: "QtWidgets.QWidget") -> None: ...
