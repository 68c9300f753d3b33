# src/LogScope/application/gui/single_graph_window.py
# -*- coding: utf-8 -*-
"""
Single-chart window: a checklist of columns next to one plot.

Checking or unchecking a column redraws the plot from the matched files in a
background worker. Zooming the plot propagates its X range to the grid panels
while the grid window is open.
"""
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from PySide6 import QtCore, QtGui, QtWidgets

from LogScope.application.gui.graph_window import resize_to_screen
from LogScope.application.gui.widgets.chart_panel import ChartPanel
from LogScope.application.worker import TaskWorker
from LogScope.core.chart_data import SingleChartData, build_single_chart
from LogScope.core.graph_specs import SELECTABLE_COLUMNS
from LogScope.core.zoom_sync import ZoomSynchronizer
from LogScope.infrastructure.exporters import ImageExporter
from LogScope.shared.constants import (
    APP_NAME,
    SINGLE_VIEW_COLUMN_LIST_WIDTH,
    SINGLE_VIEW_ITEM_HEIGHT,
    SINGLE_X_AXIS_TITLE,
)
from LogScope.shared.error_handling import ExportError
from LogScope.shared.plot_factory import LogScopePlotFactory

log = logging.getLogger(__name__)


class SingleGraphWindow(QtWidgets.QWidget):
    """Plot of user-chosen columns across all matched files."""

    closed = QtCore.Signal()
    chart_updated = QtCore.Signal()

    def __init__(self, files: Sequence[Path], title_suffix: str,
                 synchronizer: Optional[ZoomSynchronizer] = None,
                 thread_pool: Optional[QtCore.QThreadPool] = None,
                 exporter: Optional[ImageExporter] = None,
                 parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent, QtCore.Qt.WindowType.Window)
        self.files = list(files)
        self.title_suffix = title_suffix
        self.thread_pool = thread_pool or QtCore.QThreadPool.globalInstance()
        self.exporter = exporter if exporter is not None else ImageExporter()
        self._generation = 0
        self._workers = []

        self.setWindowTitle(f"{APP_NAME} - {title_suffix}")
        self._setup_ui(synchronizer)
        resize_to_screen(self)

    def _setup_ui(self, synchronizer: Optional[ZoomSynchronizer]) -> None:
        layout = QtWidgets.QHBoxLayout(self)

        self.column_list = QtWidgets.QListWidget()
        self.column_list.setFixedWidth(SINGLE_VIEW_COLUMN_LIST_WIDTH)
        for column in SELECTABLE_COLUMNS:
            item = QtWidgets.QListWidgetItem(column)
            item.setFlags(item.flags() | QtCore.Qt.ItemFlag.ItemIsUserCheckable)
            item.setCheckState(QtCore.Qt.CheckState.Unchecked)
            item.setSizeHint(QtCore.QSize(SINGLE_VIEW_COLUMN_LIST_WIDTH, SINGLE_VIEW_ITEM_HEIGHT))
            self.column_list.addItem(item)
        self.column_list.itemChanged.connect(self._on_column_toggled)
        layout.addWidget(self.column_list)

        self.plot_widget = LogScopePlotFactory.create_plot_widget(self)
        # Acts as a zoom source for the grid but is never registered as a target
        self.chart_panel = ChartPanel(self.plot_widget.getPlotItem(), synchronizer, self)
        self.chart_panel.plot_item.setTitle(self.title_suffix)
        self.chart_panel.plot_item.setLabel('bottom', SINGLE_X_AXIS_TITLE)
        layout.addWidget(self.plot_widget, stretch=1)

        self.save_action = QtGui.QAction("Save Graph", self)
        self.save_action.triggered.connect(lambda: self.save_graph())
        self.plot_widget.setContextMenuPolicy(QtCore.Qt.ContextMenuPolicy.CustomContextMenu)
        self.plot_widget.customContextMenuRequested.connect(self._show_context_menu)

    def checked_columns(self) -> List[str]:
        columns = []
        for row in range(self.column_list.count()):
            item = self.column_list.item(row)
            if item.checkState() == QtCore.Qt.CheckState.Checked:
                columns.append(item.text())
        return columns

    def set_column_checked(self, column: str, checked: bool) -> None:
        for item in self.column_list.findItems(column, QtCore.Qt.MatchFlag.MatchExactly):
            item.setCheckState(QtCore.Qt.CheckState.Checked if checked else QtCore.Qt.CheckState.Unchecked)

    def _on_column_toggled(self, item: QtWidgets.QListWidgetItem) -> None:
        self.update_chart()

    def update_chart(self) -> None:
        """Rebuild the plot for the checked columns in the background."""
        self._generation += 1
        generation = self._generation
        columns = self.checked_columns()
        log.debug(f"Updating single chart for columns {columns}")
        worker = TaskWorker(build_single_chart, columns, self.files)
        worker.signals.result.connect(lambda data, gen=generation: self._on_chart_data(gen, data))
        worker.signals.error.connect(self._on_worker_error)
        worker.signals.finished.connect(lambda w=worker: self._workers.remove(w))
        self._workers.append(worker)
        self.thread_pool.start(worker)

    def _on_chart_data(self, generation: int, data: SingleChartData) -> None:
        if generation != self._generation:
            log.debug("Discarding stale single chart result")
            return
        self.chart_panel.set_series(data.series, data.x_scale,
                                    x_axis_title=SINGLE_X_AXIS_TITLE,
                                    title=self.title_suffix)
        self.chart_updated.emit()

    def _on_worker_error(self, error_info: tuple) -> None:
        exctype, value, tb = error_info
        log.error(f"Single chart update failed: {value}\n{tb}")
        QtWidgets.QMessageBox.critical(self, "Chart Error", f"Could not draw the chart:\n{value}")

    # --- Export ---
    def _show_context_menu(self, pos: QtCore.QPoint) -> None:
        menu = QtWidgets.QMenu(self)
        menu.addAction(self.save_action)
        menu.exec(self.plot_widget.mapToGlobal(pos))

    def save_graph(self, filename: Optional[str] = None) -> Optional[Path]:
        """Export the plot through pyqtgraph; asks for a filename when omitted."""
        if filename is None:
            filename, _ = QtWidgets.QFileDialog.getSaveFileName(
                self, "Save Graph", "", "PNG Image (*.png)")
            if not filename:
                return None
        try:
            return self.exporter.save_plot(self.chart_panel.plot_item, filename)
        except ExportError as e:
            log.error(f"Save failed: {e}")
            QtWidgets.QMessageBox.critical(self, "Save Failed", f"Error saving image:\n{e}")
            return None

    def closeEvent(self, event: QtGui.QCloseEvent):
        # Pending results are dropped once the window is gone
        self._generation += 1
        self.closed.emit()
        super().closeEvent(event)
