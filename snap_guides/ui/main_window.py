from __future__ import annotations
from PySide6 import QtCore, QtWidgets

from ..core.models import Shape
from .canvas.controller import build_scene_view, install_snap_guides, populate_scene
from .settings import APP_NAME, ORG_NAME, load_snap_config

APP_VERSION = "0.1.0"


# A few shapes with mixed origin conventions to drag around
DEMO_SHAPES = [
    dict(left=100, top=100, width=50, height=50, origin_x="center", origin_y="center",
         name="A"),
    dict(left=108, top=300, width=20, height=20, name="B", kind="ellipse",
         fill_color="#c0504d", stroke_color="#7f2b29"),
    dict(left=520, top=160, width=120, height=60, origin_x="right", origin_y="bottom",
         name="C", fill_color="#9bbb59", stroke_color="#5b7030"),
    dict(left=360, top=420, width=40, height=40, scale_x=2.0, scale_y=1.5, name="D",
         kind="ellipse", fill_color="#8064a2", stroke_color="#4b3a61"),
]


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, shapes: list[Shape] | None = None):
        super().__init__()

        self.setWindowTitle(f"{APP_NAME} — {APP_VERSION}")
        self.resize(900, 700)
        self.settings = QtCore.QSettings(ORG_NAME, APP_NAME)

        build_scene_view(self)

        if shapes is None:
            shapes = [Shape.from_dict(d) for d in DEMO_SHAPES]
        self.items = populate_scene(self.scene, shapes)

        axis_settings, tolerance = load_snap_config(self.settings)
        self.guides = install_snap_guides(self.scene, axis_settings, tolerance)

        # connected after the controller so guides are already updated
        self.scene.object_moving.connect(self._on_object_moving)
        self.scene.object_moved.connect(self._on_object_moved)

        self.statusBar().showMessage("Drag a shape near another shape's center.")

    def _on_object_moving(self, item) -> None:
        parts = []
        vertical = self.guides.vertical_guide
        horizontal = self.guides.horizontal_guide
        if vertical is not None and vertical.is_shown():
            parts.append(f"x = {vertical.endpoints()[0]:.1f}")
        if horizontal is not None and horizontal.is_shown():
            parts.append(f"y = {horizontal.endpoints()[1]:.1f}")
        if parts:
            self.statusBar().showMessage("Aligned at " + ", ".join(parts))
        else:
            self.statusBar().clearMessage()

    def _on_object_moved(self, item) -> None:
        name = getattr(getattr(item, "model", None), "name", "") or "shape"
        self.statusBar().showMessage(
            f"Moved {name} to ({item.left:.1f}, {item.top:.1f})", 3000
        )


__all__ = ["MainWindow"]


def create_window() -> MainWindow:
    """Convenience factory used by launchers/tests."""
    return MainWindow()
