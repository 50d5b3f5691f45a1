# snap_guides/ui/scene.py
"""
QGraphicsScene that speaks the host-canvas interface the snapping core
expects: object enumeration, add/remove, render requests, and the
``object:moving`` / ``object:moved`` drag events.
"""
from __future__ import annotations

from typing import Any, Callable, List

from loguru import logger
from PySide6 import QtCore, QtWidgets

from ..core.exceptions import PreconditionError
from ..core.protocols import MOVED_EVENT, MOVING_EVENT


class SnapScene(QtWidgets.QGraphicsScene):
    # payload: the item being dragged
    object_moving = QtCore.Signal(object)
    object_moved = QtCore.Signal(object)

    def __init__(self, parent: QtCore.QObject | None = None):
        super().__init__(parent)
        # set by install_snap_guides(); keeps the controller alive with the scene
        self.guide_controller = None

    def _signal_for(self, event: str):
        if event == MOVING_EVENT:
            return self.object_moving
        if event == MOVED_EVENT:
            return self.object_moved
        raise PreconditionError(f"Unknown canvas event: {event!r}")

    # ---- host canvas interface ----
    def get_objects(self) -> List[Any]:
        """Top-level items, bottom to top (insertion order among equal z)."""
        return [
            it
            for it in self.items(QtCore.Qt.AscendingOrder)
            if it.parentItem() is None
        ]

    def add(self, obj: QtWidgets.QGraphicsItem) -> None:
        self.addItem(obj)

    def remove(self, obj: QtWidgets.QGraphicsItem) -> None:
        if obj is not None and obj.scene() is self:
            self.removeItem(obj)

    def request_render(self) -> None:
        self.update()

    def on(self, event: str, callback: Callable[..., Any]) -> None:
        self._signal_for(event).connect(callback)

    def off(self, event: str, callback: Callable[..., Any]) -> None:
        signal = self._signal_for(event)
        try:
            signal.disconnect(callback)
        except (RuntimeError, TypeError):
            # not connected
            logger.debug("off({}): callback was not connected", event)

    # ---- called by items ----
    def notify_moving(self, item: QtWidgets.QGraphicsItem) -> None:
        self.object_moving.emit(item)

    def notify_moved(self, item: QtWidgets.QGraphicsItem) -> None:
        self.object_moved.emit(item)
