"""
Spiral Canvas
Draws the precomputed spiral geometry with QPainter.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, TYPE_CHECKING

from PySide6.QtCore import Qt, QPointF, QRectF, QLineF, Signal
from PySide6.QtGui import QPainter, QPen, QColor, QFont, QFontMetricsF, QMouseEvent, QPaintEvent
from PySide6.QtWidgets import QWidget

from climatespiral.model.gradient import Colour
from climatespiral.model.layout import (
    CANVAS_SIZE, MARGIN, MONTH_ANGLE, LABEL_RADIUS, TICK_SIZE,
    LABEL_POINT_SIZE, YEAR_POINT_SIZE,
    BACKGROUND_COLOUR, GRID_COLOUR, AXES_COLOUR, LABEL_COLOUR,
)
from climatespiral.model.mapping import RANGE
from climatespiral.model.state import DisplayOptions

if TYPE_CHECKING:
    from climatespiral.controller.playback import AnimationController
    from climatespiral.model.geometry import SpiralGeometry, TextMeasure

logger = logging.getLogger(__name__)


def qcolor(c: Colour) -> QColor:
    return QColor(c.r, c.g, c.b)


class SpiralCanvas(QWidget):
    """
    Renders grid, axes, reference circles, month/year labels and the spiral
    up to the controller's current index.

    Geometry is in plot units (-RANGE..+RANGE, y down); the painter is scaled
    so the plot fills the widget with MARGIN left for the month labels.
    """
    # Emitted on a click inside the plot area
    clicked = Signal()

    def __init__(self, options: DisplayOptions, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.options = options
        self.spiral: Optional[SpiralGeometry] = None
        self.controller: Optional[AnimationController] = None

        self.label_font = QFont()
        self.label_font.setPointSize(LABEL_POINT_SIZE)
        self.year_font = QFont()
        self.year_font.setPointSize(YEAR_POINT_SIZE)

        self.setMinimumSize(CANVAS_SIZE // 2, CANVAS_SIZE // 2)
        self.resize(CANVAS_SIZE, CANVAS_SIZE)
        self.setAutoFillBackground(False)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_spiral(self, spiral: SpiralGeometry | None, controller: AnimationController | None) -> None:
        self.spiral = spiral
        self.controller = controller
        self.update()

    def text_measure(self) -> TextMeasure:
        """Label width in pixels, as drawn with the label font."""
        metrics = QFontMetricsF(self.label_font)
        return metrics.horizontalAdvance

    def scale_factor(self) -> float:
        """Pixels per plot unit for the current widget size."""
        half = min(self.width(), self.height()) / 2
        return half / (1 + MARGIN) / RANGE

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton and self._plot_rect().contains(event.position()):
            self.clicked.emit()
        super().mousePressEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), qcolor(BACKGROUND_COLOUR))

        scale = self.scale_factor()
        painter.translate(self.width() / 2, self.height() / 2)
        painter.scale(scale, scale)
        pixel = 1 / scale
        border = min(self.width(), self.height()) / 2 * pixel

        if self.options.show_grid:
            self._draw_grid(painter, pixel, border)
        if self.options.show_axes:
            self._draw_axes(painter, pixel, border)

        if self.spiral is not None:
            self._draw_references(painter, pixel)
            self._draw_month_labels(painter)
            self._draw_spiral(painter, pixel)
            self._draw_year(painter)

        painter.end()

    # ------------------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------------------

    def _plot_rect(self) -> QRectF:
        side = min(self.width(), self.height())
        return QRectF((self.width() - side) / 2, (self.height() - side) / 2, side, side)

    def _radii(self, table: dict | None) -> list[float]:
        if not table:
            return []
        return table[self.options.mapping]

    def _draw_grid(self, painter: QPainter, pixel: float, border: float) -> None:
        painter.setPen(QPen(qcolor(GRID_COLOUR), 0.5 * pixel))
        painter.drawLine(QLineF(0, -border, 0, border))
        painter.drawLine(QLineF(-border, 0, border, 0))
        for r in self._radii(self.spiral.grid_radii if self.spiral else None):
            painter.drawLine(QLineF(r, -border, r, border))
            painter.drawLine(QLineF(-r, -border, -r, border))
            painter.drawLine(QLineF(-border, r, border, r))
            painter.drawLine(QLineF(-border, -r, border, -r))

    def _draw_axes(self, painter: QPainter, pixel: float, border: float) -> None:
        painter.setPen(QPen(qcolor(AXES_COLOUR), 1 * pixel))
        painter.drawLine(QLineF(0, -border, 0, border))
        painter.drawLine(QLineF(-border, 0, border, 0))
        if not self.options.show_ticks:
            return
        for r in self._radii(self.spiral.tick_radii if self.spiral else None):
            painter.drawLine(QLineF(r, -TICK_SIZE, r, TICK_SIZE))
            painter.drawLine(QLineF(-r, -TICK_SIZE, -r, TICK_SIZE))
            painter.drawLine(QLineF(-TICK_SIZE, r, TICK_SIZE, r))
            painter.drawLine(QLineF(-TICK_SIZE, -r, TICK_SIZE, -r))

    def _draw_references(self, painter: QPainter, pixel: float) -> None:
        height = QFontMetricsF(self.label_font).height()
        for ref in self.spiral.references:
            r = ref.radius[self.options.mapping]
            colour = qcolor(ref.colour)

            painter.setPen(QPen(colour, 4 * pixel))
            painter.setBrush(Qt.NoBrush)
            painter.drawEllipse(QPointF(0, 0), r, r)

            # Label on a background patch at the top of the circle
            painter.save()
            centre = painter.transform().map(QPointF(0, -r))
            painter.resetTransform()
            box = QRectF(0, 0, ref.label_width + 8, height + 2)
            box.moveCenter(centre)
            painter.fillRect(box, qcolor(BACKGROUND_COLOUR))
            painter.setFont(self.label_font)
            painter.setPen(colour)
            painter.drawText(box, Qt.AlignCenter, ref.label)
            painter.restore()

    def _draw_month_labels(self, painter: QPainter) -> None:
        painter.save()
        centre = painter.transform().map(QPointF(0, 0))
        label_r = LABEL_RADIUS * self.scale_factor()
        painter.resetTransform()
        painter.translate(centre)
        painter.setFont(self.label_font)
        painter.setPen(qcolor(LABEL_COLOUR))
        height = QFontMetricsF(self.label_font).height()
        for label in self.spiral.month_labels:
            box = QRectF(-label_r, -label_r - height / 2, 2 * label_r, height)
            painter.drawText(box, Qt.AlignCenter, label)
            painter.rotate(math.degrees(MONTH_ANGLE))
        painter.restore()

    def _draw_spiral(self, painter: QPainter, pixel: float) -> None:
        if self.controller is None:
            return
        segments = self.controller.visible_segments()
        if not segments:
            return
        xy = self.spiral.positions[self.options.mapping]
        rgb = self.spiral.colours
        pen = QPen(QColor(), 2 * pixel)
        pen.setCapStyle(Qt.RoundCap)
        for i in segments:
            pen.setColor(QColor(int(rgb[i, 0]), int(rgb[i, 1]), int(rgb[i, 2])))
            painter.setPen(pen)
            painter.drawLine(QLineF(xy[i - 1, 0], xy[i - 1, 1], xy[i, 0], xy[i, 1]))

    def _draw_year(self, painter: QPainter) -> None:
        if self.controller is None or self.spiral.datalen == 0:
            return
        painter.save()
        centre = painter.transform().map(QPointF(0, 0))
        painter.resetTransform()
        painter.setFont(self.year_font)
        painter.setPen(qcolor(LABEL_COLOUR))
        height = QFontMetricsF(self.year_font).height()
        box = QRectF(centre.x() - 200, centre.y() - height / 2, 400, height)
        painter.drawText(box, Qt.AlignCenter, self.spiral.year_label(self.controller.index))
        painter.restore()
