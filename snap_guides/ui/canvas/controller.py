# snap_guides/ui/canvas/controller.py
"""
Canvas controller: scene/view creation, shape population, and snapping
guides installation.

All builders receive the hosting window (or just the scene) to avoid
circular imports — this module must NOT import app.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from ...core.guides import GuideController
from ...core.models import Shape
from ...core.settings import DEFAULT_TOLERANCE, AxisSettings
from ..items import ShapeItem, make_guide_line, make_shape_item
from ..scene import SnapScene
from ..views import CanvasView

if TYPE_CHECKING:
    from ..host_protocols import CanvasHost


def build_scene_view(mw: CanvasHost, width: float = 800.0, height: float = 600.0) -> None:
    """
    Create the SnapScene + CanvasView, wrap in a central widget,
    and attach to *mw*.

    Sets attributes on *mw*: scene, view.
    """
    mw.scene = SnapScene(mw)
    mw.scene.setSceneRect(0, 0, width, height)
    mw.view = CanvasView(mw)
    mw.view.setScene(mw.scene)
    mw.view.setBackgroundBrush(QtGui.QBrush(QtGui.QColor("#ffffff")))

    # Rubberband drag for multi-selection
    mw.view.setDragMode(QtWidgets.QGraphicsView.RubberBandDrag)
    mw.view.setFocusPolicy(QtCore.Qt.StrongFocus)

    central = QtWidgets.QWidget(mw)
    lay = QtWidgets.QVBoxLayout(central)
    lay.setContentsMargins(0, 0, 0, 0)
    lay.addWidget(mw.view)
    mw.setCentralWidget(central)


def populate_scene(scene: SnapScene, shapes: Iterable[Shape]) -> List[ShapeItem]:
    """Add one item per shape model, in order."""
    items = []
    for model in shapes:
        item = make_shape_item(model)
        scene.add(item)
        items.append(item)
    return items


def install_snap_guides(
    scene: SnapScene,
    settings: Optional[Mapping[str, Any] | AxisSettings] = None,
    tolerance: float = DEFAULT_TOLERANCE,
) -> GuideController:
    """
    Attach a GuideController to *scene* using Qt guide line items.

    Any controller previously installed on the scene is detached first.
    """
    previous = getattr(scene, "guide_controller", None)
    if previous is not None:
        previous.detach()

    controller = GuideController(
        scene,
        make_guide_line,
        settings=settings,
        tolerance=tolerance,
    )
    scene.guide_controller = controller
    return controller
