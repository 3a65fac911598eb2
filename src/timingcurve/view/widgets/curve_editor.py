"""
Curve Editor
Paints the timing curve with its layout grid and the two draggable handles.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QPointF, QRectF, QSize
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPainterPath, QPaintEvent, QPen, QBrush
from PySide6.QtWidgets import QWidget, QSizePolicy

from timingcurve.app.state import Store
from timingcurve.config import (
    VIEWPORT_SIZE, CONTROL_POINT_SIZE, CURVE_LINE_WIDTH, HANDLE_LINE_WIDTH,
    GRID_COLUMNS, GRID_ROWS, CURVE_COLOR, GRID_COLOR, CP0_COLOR, CP1_COLOR, HANDLE_OUTLINE_COLOR,
)
from timingcurve.controller.drag import DragController
from timingcurve.model.bezier import PathDescriptor, build_curve
from timingcurve.model.geometry_primitives import CurveRect, PixelPoint
from timingcurve.model.timing import ControlPoint

logger = logging.getLogger(__name__)


def to_qpoint(point: PixelPoint) -> QPointF:
    return QPointF(point.x, point.y)

def path_to_painter_path(descriptor: PathDescriptor) -> QPainterPath:
    """Convert the declarative curve into a QPainterPath (move + one cubic)."""
    path = QPainterPath()
    path.moveTo(to_qpoint(descriptor.start))
    path.cubicTo(
        to_qpoint(descriptor.control1),
        to_qpoint(descriptor.control2),
        to_qpoint(descriptor.end),
    )
    return path


class CurveEditorWidget(QWidget):
    """
    Square viewport showing the curve from bottom-left to top-right.
    A margin around the square keeps handles on the border visible; pointer
    positions are shifted by the margin before they reach the controller.
    """
    HANDLE_COLORS = {
        ControlPoint.FIRST: CP0_COLOR,
        ControlPoint.SECOND: CP1_COLOR,
    }

    def __init__(self, store: Store, size: float = VIEWPORT_SIZE, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.rect_model = CurveRect(size)
        self.controller = DragController(store, size)
        self.margin: float = CONTROL_POINT_SIZE

        side = int(size + 2 * self.margin)
        self.setFixedSize(QSize(side, side))
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setMouseTracking(False)

        self.store.curve_changed.connect(lambda *_: self.update())

    # ------------------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------------------

    def current_path(self) -> PathDescriptor:
        cp0 = self.controller.handle_position(ControlPoint.FIRST)
        cp1 = self.controller.handle_position(ControlPoint.SECOND)
        return build_curve(cp0, cp1, self.rect_model)

    # ------------------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.translate(self.margin, self.margin)
        descriptor = self.current_path()

        self._paint_grid(painter)
        self._paint_control_lines(painter, descriptor)

        pen = QPen(QColor(CURVE_COLOR), CURVE_LINE_WIDTH)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(path_to_painter_path(descriptor))

        for which in (ControlPoint.FIRST, ControlPoint.SECOND):
            self._paint_handle(painter, which)

        painter.end()

    def _paint_grid(self, painter: QPainter) -> None:
        color = QColor(GRID_COLOR)
        color.setAlphaF(0.35)
        painter.setPen(QPen(color, 1))
        for start, end in self.rect_model.grid_lines(GRID_COLUMNS, GRID_ROWS):
            painter.drawLine(to_qpoint(start), to_qpoint(end))

    def _paint_control_lines(self, painter: QPainter, descriptor: PathDescriptor) -> None:
        color = QColor(CURVE_COLOR)
        color.setAlphaF(0.6)
        pen = QPen(color, 1)
        pen.setStyle(Qt.PenStyle.DashLine)
        painter.setPen(pen)
        for start, end in descriptor.control_polygon():
            painter.drawLine(to_qpoint(start), to_qpoint(end))

    def _paint_handle(self, painter: QPainter, which: ControlPoint) -> None:
        center = self.controller.handle_position(which)
        r = CONTROL_POINT_SIZE / 2
        painter.setPen(QPen(QColor(HANDLE_OUTLINE_COLOR), HANDLE_LINE_WIDTH))
        painter.setBrush(QBrush(QColor(self.HANDLE_COLORS[which])))
        painter.drawEllipse(QRectF(center.x - r, center.y - r, 2 * r, 2 * r))

    # ------------------------------------------------------------------------------
    # Mouse
    # ------------------------------------------------------------------------------

    def viewport_position(self, event: QMouseEvent) -> tuple[float, float]:
        """Pointer position relative to the curve square."""
        pos = event.position()
        return pos.x() - self.margin, pos.y() - self.margin

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if self.controller.press(*self.viewport_position(event)) is None:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if not self.controller.move(*self.viewport_position(event)):
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self.controller.release()
        super().mouseReleaseEvent(event)
