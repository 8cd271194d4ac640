"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the control panel and the
spiral canvas.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the menu actions, the control panel and the frame
   timer to the playback controller.
"""
import logging
import os
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QSplitter, QFileDialog, QMessageBox
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction

from climatespiral.controller.playback import AnimationController
from climatespiral.model.geometry import SpiralGeometry, precompute
from climatespiral.model.series import AnomalyTable
from climatespiral.model.state import DisplayOptions
from climatespiral.view.dialogs.history_plot_dialog import HistoryPlotDialog
from climatespiral.view.tabs.control_panel import ControlPanel
from climatespiral.view.widgets.spiral_canvas import SpiralCanvas


logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Climate Spiral"


class MainWindow(QMainWindow):
    def __init__(self, data_path: Optional[str] = None) -> None:
        super().__init__()
        self.options = DisplayOptions()
        self.spiral: Optional[SpiralGeometry] = None
        self.controller: Optional[AnimationController] = None
        self.history_dialog: Optional[HistoryPlotDialog] = None
        self.data_path: Optional[str] = None

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 850)

        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Controls ---
        self.panel = ControlPanel(self.options)
        splitter.addWidget(self.panel)

        # --- RIGHT SIDE: Spiral ---
        self.canvas = SpiralCanvas(self.options)
        splitter.addWidget(self.canvas)
        splitter.setSizes([250, 850])

        # --- SIGNAL CONNECTIONS ---
        self.panel.options_changed.connect(self.canvas.update)
        self.panel.toggle_requested.connect(self.on_toggle)
        self.panel.pause_requested.connect(self.on_pause)
        self.panel.scrub_requested.connect(self.on_scrub)
        self.panel.fps_changed.connect(self.on_fps_changed)
        self.canvas.clicked.connect(self.on_toggle)

        # Frame timer
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.advance_frame)
        self.on_fps_changed(self.panel.spin_fps.value())

        self._create_menus()

        if data_path:
            self.load_data(data_path)

    # --- ACTIONS & MENUS ---

    def _create_menus(self) -> None:
        menu_file = self.menuBar().addMenu("&File")

        act_open = QAction("&Open CSV...", self)
        act_open.setShortcut("Ctrl+O")
        act_open.triggered.connect(self.on_open)
        menu_file.addAction(act_open)

        act_export = QAction("&Export frame...", self)
        act_export.setShortcut("Ctrl+E")
        act_export.triggered.connect(self.on_export_frame)
        menu_file.addAction(act_export)

        menu_file.addSeparator()

        act_quit = QAction("&Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        menu_file.addAction(act_quit)

        menu_view = self.menuBar().addMenu("&View")
        act_history = QAction("Anomaly &history...", self)
        act_history.triggered.connect(self.on_show_history)
        menu_view.addAction(act_history)

    def on_open(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Open anomaly CSV", "", "CSV (*.csv);;All files (*)")
        if path:
            self.load_data(path)

    def load_data(self, path: str) -> bool:
        """Load a CSV, precompute the spiral and restart playback."""
        try:
            table = AnomalyTable.from_csv(path)
            spiral = precompute(table, self.canvas.text_measure())
        except (OSError, ValueError) as e:
            logger.exception("Loading data failed")
            QMessageBox.critical(self, "Load failed", f"Could not load '{path}':\n{str(e)}")
            return False

        self.data_path = path
        self.spiral = spiral
        self.controller = AnimationController(spiral.datalen)
        self.canvas.set_spiral(spiral, self.controller)
        self.panel.set_series_length(spiral.datalen)

        if self.history_dialog is not None:
            self.history_dialog.close()
            self.history_dialog = None

        self.setWindowTitle(f"{VISIBLE_APP_NAME} - {os.path.basename(path)}")
        self._refresh_playback()
        self.timer.start()
        return True

    def on_export_frame(self) -> None:
        file_path, _ = QFileDialog.getSaveFileName(self, "Save frame", "climate_spiral.png", "PNG image (*.png)")
        if not file_path:
            return
        if self.canvas.grab().save(file_path):
            logger.info(f"Frame exported to {file_path}")
        else:
            QMessageBox.critical(self, "Export failed", f"Could not write '{file_path}'.")

    def on_show_history(self) -> None:
        if self.spiral is None:
            QMessageBox.information(self, VISIBLE_APP_NAME, "Open an anomaly CSV first.")
            return
        if self.history_dialog is None:
            self.history_dialog = HistoryPlotDialog(self.spiral, self)
        self.history_dialog.set_index(self.controller.index)
        self.history_dialog.show()
        self.history_dialog.raise_()

    # --- PLAYBACK ---

    def on_fps_changed(self, value: int) -> None:
        """Update timer interval based on FPS."""
        if value > 0:
            self.timer.setInterval(1000 // value)

    def on_toggle(self) -> None:
        if self.controller is None:
            return
        self.controller.toggle()
        self._refresh_playback()

    def on_pause(self) -> None:
        if self.controller is None:
            return
        self.controller.pause()
        self._refresh_playback()

    def on_scrub(self, index: int) -> None:
        if self.controller is None:
            return
        self.controller.scrub(index)
        self._refresh_playback()

    def advance_frame(self) -> None:
        if self.controller is None:
            return
        was_running = self.controller.running
        self.controller.tick()
        self.controller.sync(self.panel.slider)
        if was_running != self.controller.running:
            self.panel.update_play_icon(self.controller.running)
        self._show_position()
        self.canvas.update()

    def _refresh_playback(self) -> None:
        self.panel.update_play_icon(self.controller.running)
        self._show_position()
        self.canvas.update()

    def _show_position(self) -> None:
        index = self.controller.index
        if self.spiral.datalen:
            point = self.spiral.points[index]
            label = self.spiral.month_labels[point.month]
            self.panel.set_position_text(f"{label} {point.year}: {point.anomaly:+.2f} °C")
        if self.history_dialog is not None:
            self.history_dialog.set_index(index)
