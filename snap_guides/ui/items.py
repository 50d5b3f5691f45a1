from __future__ import annotations
from PySide6 import QtCore, QtGui, QtWidgets

from ..core.models import Shape
from ..core.geometry import Axis, OriginMode
from ..core.settings import AxisSettings
from ..core.protocols import LineCoords


def _origin_offset(mode: OriginMode, extent: float) -> float:
    """Where the local rect starts so that the item's pos() is its origin point."""
    if mode is OriginMode.CENTER:
        return -extent / 2.0
    if mode is OriginMode.END:
        return -extent
    return 0.0


class ShapeItem(QtWidgets.QGraphicsRectItem):
    """
    A draggable shape backed by a :class:`Shape` model.

    The item's ``pos()`` is the shape's stored origin point, so ``left`` /
    ``top`` read and write ``pos()`` directly; the local rect is offset
    according to the origin mode and per-axis scale is applied through
    the item transform (which scales around the origin point).

    During a mouse drag the item reports each frame to its scene
    (``notify_moving``) and the end of the drag (``notify_moved``).
    """

    def __init__(self, model: Shape):
        super().__init__()
        self.model = model

        self.setFlags(
            QtWidgets.QGraphicsItem.ItemIsMovable
            | QtWidgets.QGraphicsItem.ItemIsSelectable
            | QtWidgets.QGraphicsItem.ItemSendsGeometryChanges
        )

        self._dragging = False
        self._apply_style()
        self._sync_geometry()

    # ---- CanvasObject fields ----
    @property
    def left(self) -> float:
        return self.pos().x()

    @left.setter
    def left(self, value: float) -> None:
        self.setPos(float(value), self.pos().y())

    @property
    def top(self) -> float:
        return self.pos().y()

    @top.setter
    def top(self, value: float) -> None:
        self.setPos(self.pos().x(), float(value))

    @property
    def width(self) -> float:
        return self.model.width

    @width.setter
    def width(self, value: float) -> None:
        self.model.width = float(value)
        self._sync_geometry()

    @property
    def height(self) -> float:
        return self.model.height

    @height.setter
    def height(self, value: float) -> None:
        self.model.height = float(value)
        self._sync_geometry()

    @property
    def scale_x(self) -> float:
        return self.model.scale_x

    @scale_x.setter
    def scale_x(self, value: float) -> None:
        self.model.scale_x = float(value)
        self._sync_geometry()

    @property
    def scale_y(self) -> float:
        return self.model.scale_y

    @scale_y.setter
    def scale_y(self, value: float) -> None:
        self.model.scale_y = float(value)
        self._sync_geometry()

    @property
    def origin_x(self) -> str:
        return self.model.origin_x

    @property
    def origin_y(self) -> str:
        return self.model.origin_y

    # ---- geometry / style ----
    def _sync_geometry(self) -> None:
        m = self.model
        mode_x = OriginMode.coerce(m.origin_x, Axis.HORIZONTAL)
        mode_y = OriginMode.coerce(m.origin_y, Axis.VERTICAL)

        self.setRect(
            _origin_offset(mode_x, m.width),
            _origin_offset(mode_y, m.height),
            m.width,
            m.height,
        )
        self.setTransform(QtGui.QTransform.fromScale(m.scale_x, m.scale_y))
        self.setPos(m.left, m.top)

    def _apply_style(self) -> None:
        pen = QtGui.QPen(QtGui.QColor(self.model.stroke_color))
        pen.setWidthF(float(self.model.stroke_px))
        pen.setCosmetic(True)
        self.setPen(pen)
        self.setBrush(QtGui.QBrush(QtGui.QColor(self.model.fill_color)))

    def _paint_shape(self, painter: QtGui.QPainter) -> None:
        """
        Default: simple rectangle. Subclasses override.
        """
        painter.setPen(self.pen())
        painter.setBrush(self.brush())
        painter.drawRect(self.rect())

    def paint(
        self,
        painter: QtGui.QPainter,
        option: QtWidgets.QStyleOptionGraphicsItem,
        widget=None,
    ) -> None:
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        self._paint_shape(painter)

        if self.isSelected():
            sel_pen = QtGui.QPen(QtGui.QColor("#0078d7"))
            sel_pen.setCosmetic(True)
            painter.setPen(sel_pen)
            painter.setBrush(QtCore.Qt.NoBrush)
            painter.drawRect(self.rect())

    # ---- drag reporting ----
    def mousePressEvent(self, event: QtWidgets.QGraphicsSceneMouseEvent) -> None:
        self._dragging = False
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QtWidgets.QGraphicsSceneMouseEvent) -> None:
        super().mouseMoveEvent(event)
        self._dragging = True
        notify = getattr(self.scene(), "notify_moving", None)
        if notify is not None:
            notify(self)

    def mouseReleaseEvent(self, event: QtWidgets.QGraphicsSceneMouseEvent) -> None:
        super().mouseReleaseEvent(event)
        if not self._dragging:
            return
        self._dragging = False
        notify = getattr(self.scene(), "notify_moved", None)
        if notify is not None:
            notify(self)

    def itemChange(
        self,
        change: QtWidgets.QGraphicsItem.GraphicsItemChange,
        value,
    ):
        # Keep model in sync
        if change == QtWidgets.QGraphicsItem.ItemPositionHasChanged:
            pos = self.pos()
            self.model.left = pos.x()
            self.model.top = pos.y()
        return super().itemChange(change, value)


class EllipseShapeItem(ShapeItem):
    """
    Ellipse inscribed in the shape's box.
    """

    def _paint_shape(self, painter: QtGui.QPainter) -> None:
        painter.setPen(self.pen())
        painter.setBrush(self.brush())
        painter.drawEllipse(self.rect())


def make_shape_item(model: Shape) -> ShapeItem:
    if model.kind == "ellipse":
        return EllipseShapeItem(model)
    return ShapeItem(model)


class GuideLineItem(QtWidgets.QGraphicsLineItem):
    """Straight guide line drawn above the shapes."""

    Z_VALUE = 10000

    def __init__(self, coords: LineCoords, settings: AxisSettings):
        super().__init__(*coords)
        self._color = settings.stroke

        pen = QtGui.QPen(QtGui.QColor(settings.stroke))
        pen.setWidthF(float(settings.stroke_width))
        pen.setCosmetic(True)
        self.setPen(pen)

        self.setZValue(self.Z_VALUE)
        self.setFlag(QtWidgets.QGraphicsItem.ItemIsMovable, False)
        self.setFlag(QtWidgets.QGraphicsItem.ItemIsSelectable, bool(settings.selectable))
        if not settings.evented:
            self.setAcceptedMouseButtons(QtCore.Qt.NoButton)
            self.setAcceptHoverEvents(False)

    def endpoints(self) -> LineCoords:
        line = self.line()
        return (line.x1(), line.y1(), line.x2(), line.y2())

    def set_endpoints(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.setLine(x1, y1, x2, y2)

    def color(self) -> str:
        return self._color

    def set_color(self, color: str) -> None:
        self._color = color
        pen = self.pen()
        pen.setColor(QtGui.QColor(color))
        self.setPen(pen)

    def is_shown(self) -> bool:
        return self.isVisible()

    def set_shown(self, shown: bool) -> None:
        self.setVisible(bool(shown))


def make_guide_line(coords: LineCoords, settings: AxisSettings) -> GuideLineItem:
    return GuideLineItem(coords, settings)
