from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets


class CanvasView(QtWidgets.QGraphicsView):
    def __init__(self, parent=None):
        super().__init__(parent)

        self.setRenderHints(
            QtGui.QPainter.Antialiasing
            | QtGui.QPainter.TextAntialiasing
            | QtGui.QPainter.SmoothPixmapTransform
        )
        # guides are long lines; partial updates leave trails behind them
        self.setViewportUpdateMode(QtWidgets.QGraphicsView.FullViewportUpdate)

    # ------------ background: workspace + canvas outline ------------
    def drawBackground(self, painter: QtGui.QPainter, rect: QtCore.QRectF) -> None:
        painter.fillRect(rect, QtGui.QColor("#2b2b2b"))

        if self.scene() is None:
            return

        canvas_rect = self.sceneRect()
        painter.fillRect(canvas_rect, QtCore.Qt.white)

        pen = QtGui.QPen(QtGui.QColor("#999999"))
        pen.setWidth(1)
        painter.setPen(pen)
        painter.setBrush(QtCore.Qt.NoBrush)
        painter.drawRect(canvas_rect)

