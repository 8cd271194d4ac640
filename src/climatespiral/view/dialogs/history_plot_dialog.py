"""Dialog plotting the anomaly series as a time line."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QPushButton, QWidget, QFileDialog, QMessageBox

from climatespiral.model.layout import MONTHS

if TYPE_CHECKING:
    from climatespiral.model.geometry import SpiralGeometry


logger = logging.getLogger(__name__)


class HistoryPlotDialog(QDialog):
    """Monthly anomalies over time, with a marker following the animation."""

    def __init__(self, spiral: SpiralGeometry, parent: QWidget | None = None) -> None:
        """Initialize the history plot dialog.

        Args:
            spiral: Precomputed geometry; its anomalies and segment colours are plotted.
            parent: Parent widget
        """
        super().__init__(parent)
        self.spiral = spiral

        self.setWindowTitle("Anomaly History")
        self.resize(1000, 500)

        layout = QVBoxLayout(self)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('k')
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setLabel('bottom', 'Year', color='white')
        self.plot_widget.setLabel('left', 'Anomaly [°C]', color='white')
        self.plot_widget.getAxis('bottom').setPen('w')
        self.plot_widget.getAxis('left').setPen('w')
        self.plot_widget.getAxis('bottom').setTextPen('w')
        self.plot_widget.getAxis('left').setTextPen('w')
        layout.addWidget(self.plot_widget)

        buttons = QHBoxLayout()
        export_btn = QPushButton("Export as image...")
        export_btn.clicked.connect(self._export_image)
        buttons.addWidget(export_btn)
        buttons.addStretch()
        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        buttons.addWidget(close_btn)
        layout.addLayout(buttons)

        self.marker = pg.InfiniteLine(
            pos=self._time_of(0),
            angle=90,
            pen=pg.mkPen(color='w', width=1, style=pg.QtCore.Qt.DashLine),
        )
        self._plot()

    def _time_of(self, index: int) -> float:
        return self.spiral.first_year + index / MONTHS

    def _plot(self) -> None:
        self.plot_widget.clear()
        if self.spiral.datalen == 0:
            text_item = pg.TextItem('No data loaded', color='gray', anchor=(0.5, 0.5))
            self.plot_widget.addItem(text_item)
            return

        times = self._time_of(np.arange(self.spiral.datalen))
        anomalies = self.spiral.anomalies()
        brushes = [pg.mkBrush(point.segment_colour.hex()) for point in self.spiral.points]

        self.plot_widget.plot(times, anomalies, pen=pg.mkPen(color='#7f7f7f', width=1))
        self.plot_widget.addItem(pg.ScatterPlotItem(times, anomalies, size=4, pen=None, brush=brushes))
        self.plot_widget.addItem(pg.InfiniteLine(pos=0.0, angle=0, pen=pg.mkPen(color='w', width=1)))
        self.plot_widget.addItem(self.marker)
        self.plot_widget.autoRange()

    def set_index(self, index: int) -> None:
        self.marker.setValue(self._time_of(index))

    def _export_image(self) -> None:
        """Export the current plot as an image file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save plot as image",
            "anomaly_history.png",
            "PNG image (*.png);;JPEG image (*.jpg)"
        )

        if not file_path:
            return

        try:
            exporter = ImageExporter(self.plot_widget.plotItem)
            exporter.parameters()['width'] = 1920
            exporter.export(file_path)
            logger.info(f"Plot exported to {file_path}")
        except Exception as e:
            logger.exception("Failed to export plot")
            QMessageBox.critical(self, "Export failed", f"Could not export the plot:\n{str(e)}")
