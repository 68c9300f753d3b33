# src/LogScope/application/gui/graph_window.py
# -*- coding: utf-8 -*-
"""
Grid window showing the twelve chart panels for the matched log files.

Panels are laid out four rows by three columns in GRAPH_SPECS order. The
right-click menu copies the whole grid to the clipboard or saves it as an
image file.
"""
import logging
from pathlib import Path
from typing import List, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from LogScope.application.gui.widgets.chart_panel import ChartPanel
from LogScope.core.chart_data import PanelData
from LogScope.core.zoom_sync import ZoomSynchronizer
from LogScope.infrastructure.exporters import ImageExporter, image_format_for_filter
from LogScope.shared.constants import APP_NAME, GRID_COLUMNS, GRID_ROWS, IMAGE_FILE_FILTER, WINDOW_SIZE_RATIO
from LogScope.shared.error_handling import ExportError, PlottingError
from LogScope.shared.plot_factory import LogScopePlotFactory

log = logging.getLogger(__name__)


def resize_to_screen(widget: QtWidgets.QWidget, ratio: float = WINDOW_SIZE_RATIO) -> None:
    """Resize ``widget`` to ``ratio`` of the available screen area."""
    screen = QtWidgets.QApplication.primaryScreen()
    if screen is None:
        log.warning("Could not get screen geometry, using default size.")
        widget.resize(1200, 800)
        return
    available_geometry = screen.availableGeometry()
    widget.resize(int(available_geometry.width() * ratio),
                  int(available_geometry.height() * ratio))


class GraphGridWindow(QtWidgets.QWidget):
    """Top-level window holding one ChartPanel per GraphSpec."""

    closed = QtCore.Signal()

    def __init__(self, panels: List[PanelData], title_suffix: str,
                 synchronizer: ZoomSynchronizer,
                 exporter: Optional[ImageExporter] = None,
                 parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent, QtCore.Qt.WindowType.Window)
        self.setWindowTitle(f"{APP_NAME} - {title_suffix}")
        self.synchronizer = synchronizer
        self.exporter = exporter if exporter is not None else ImageExporter()
        self.chart_panels: List[ChartPanel] = []

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.layout_widget = LogScopePlotFactory.create_graphics_layout(self)
        layout.addWidget(self.layout_widget)

        self._build_panels(panels)
        self._setup_context_menu()
        resize_to_screen(self)

    def _build_panels(self, panels: List[PanelData]) -> None:
        if len(panels) > GRID_ROWS * GRID_COLUMNS:
            raise PlottingError(f"{len(panels)} panels do not fit a {GRID_ROWS}x{GRID_COLUMNS} grid")
        for position, panel_data in enumerate(panels):
            row, col = divmod(position, GRID_COLUMNS)
            plot_item = LogScopePlotFactory.add_plot(self.layout_widget, row, col)
            chart_panel = ChartPanel(plot_item, self.synchronizer, self)
            chart_panel.apply_panel(panel_data)
            self.chart_panels.append(chart_panel)

        self.synchronizer.set_panels(self.chart_panels)
        log.info(f"Grid window built with {len(self.chart_panels)} panels")

    # --- Context menu ---
    def _setup_context_menu(self) -> None:
        self.copy_action = QtGui.QAction("Copy to All Graphs", self)
        self.copy_action.triggered.connect(self.copy_all_graphs)
        self.save_action = QtGui.QAction("Save All Graphs", self)
        self.save_action.triggered.connect(lambda: self.save_all_graphs())
        self.reset_action = QtGui.QAction("Reset Zoom", self)
        self.reset_action.triggered.connect(self.reset_zoom)

        self.layout_widget.setContextMenuPolicy(QtCore.Qt.ContextMenuPolicy.CustomContextMenu)
        self.layout_widget.customContextMenuRequested.connect(self._show_context_menu)

    def _show_context_menu(self, pos: QtCore.QPoint) -> None:
        menu = QtWidgets.QMenu(self)
        menu.addAction(self.copy_action)
        menu.addAction(self.save_action)
        menu.addSeparator()
        menu.addAction(self.reset_action)
        menu.exec(self.layout_widget.mapToGlobal(pos))

    def reset_zoom(self) -> None:
        """Restore every panel to the X axis it was drawn with."""
        for chart_panel in self.chart_panels:
            chart_panel.reset_zoom()

    def copy_all_graphs(self) -> bool:
        """Copy an image of the whole grid to the clipboard."""
        try:
            self.exporter.copy_widget(self.layout_widget)
        except ExportError as e:
            log.error(f"Copy failed: {e}")
            QtWidgets.QMessageBox.warning(self, "Copy Failed", str(e))
            return False
        return True

    def save_all_graphs(self, filename: Optional[str] = None,
                        selected_filter: Optional[str] = None) -> Optional[Path]:
        """
        Save an image of the whole grid.

        Args:
            filename: Target file; asks with a save dialog when omitted.
            selected_filter: Save-dialog filter deciding the image format.

        Returns:
            The written path, or None if cancelled or failed.
        """
        if filename is None:
            filename, selected_filter = QtWidgets.QFileDialog.getSaveFileName(
                self, "Save All Graphs", "", IMAGE_FILE_FILTER)
            if not filename:
                return None

        image_format = image_format_for_filter(selected_filter, filename)
        try:
            return self.exporter.save_widget(self.layout_widget, filename, image_format)
        except ExportError as e:
            log.error(f"Save failed: {e}")
            QtWidgets.QMessageBox.critical(self, "Save Failed", f"Error saving image:\n{e}")
            return None

    def closeEvent(self, event: QtGui.QCloseEvent):
        log.debug("Grid window closing; stopping zoom synchronization")
        self.synchronizer.clear()
        self.closed.emit()
        super().closeEvent(event)
