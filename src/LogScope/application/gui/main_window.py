# src/LogScope/application/gui/main_window.py
# -*- coding: utf-8 -*-
"""
Main Window for the LogScope GUI application.

Holds the directory field, the three selection lists (test names, barcodes,
test times) and the buttons that open the grid and single-chart windows.
Directory scans, test-time recomputation, file matching and chart data
preparation run in background workers; their results are applied here on
the GUI thread.
"""
import logging
from pathlib import Path
from typing import Callable, List, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from LogScope.application.gui.graph_window import GraphGridWindow, resize_to_screen
from LogScope.application.gui.single_graph_window import SingleGraphWindow
from LogScope.application.gui.widgets.selection_list_widget import SelectionListWidget
from LogScope.application.worker import TaskWorker
from LogScope.core.catalog import (
    Catalog,
    CatalogBuilder,
    collect_csv_files,
    collect_test_times,
    match_files,
    parse_directory_field,
    scan_directories,
)
from LogScope.core.chart_data import build_grid_panels
from LogScope.core.selection import SelectionController
from LogScope.core.zoom_sync import ZoomSynchronizer
from LogScope.infrastructure.exporters import ImageExporter
from LogScope.shared.constants import APP_NAME
from LogScope.shared.error_handling import PlottingError

log = logging.getLogger(__name__)

# Keyed by SelectionList.name
SELECTION_REQUIRED_MESSAGES = {
    "test_names": "Please select a test name.",
    "barcodes": "Please select at least one barcode.",
    "test_times": "Please select at least one test time.",
}


def find_matching_files(directory_text: str, test_names: List[str],
                        barcodes: List[str], test_times: List[str]) -> List[Path]:
    """Gather CSV files from the directory field and keep the matching ones."""
    candidates = collect_csv_files(parse_directory_field(directory_text))
    return match_files(candidates, test_names, barcodes, test_times)


class MainWindow(QtWidgets.QMainWindow):
    """Main application window."""

    # Emitted after a scan result has been applied to the lists
    catalog_loaded = QtCore.Signal()
    # Emitted after the test-time list was rebuilt
    test_times_updated = QtCore.Signal()

    def __init__(self, thread_pool: Optional[QtCore.QThreadPool] = None):
        super().__init__()
        log.info("Initializing MainWindow...")
        self.setWindowTitle(APP_NAME)

        self.settings = QtCore.QSettings("LogScope", "Viewer")
        self.thread_pool = thread_pool or QtCore.QThreadPool.globalInstance()

        self.catalog_builder = CatalogBuilder()
        self.selection = SelectionController()
        self.synchronizer = ZoomSynchronizer()
        self.exporter = ImageExporter()

        self.graph_window: Optional[GraphGridWindow] = None
        self.single_window: Optional[SingleGraphWindow] = None
        self._workers = []
        self._test_time_generation = 0

        self._setup_ui()
        self._restore_window_state()
        self.status_bar.showMessage("Ready. Load a log folder to begin.", 5000)
        log.info("MainWindow initialization complete.")

    @property
    def catalog(self) -> Catalog:
        return self.catalog_builder.catalog

    # --- UI ---
    def _setup_ui(self) -> None:
        central = QtWidgets.QWidget()
        main_layout = QtWidgets.QVBoxLayout(central)

        # Directory row
        path_layout = QtWidgets.QHBoxLayout()
        path_layout.addWidget(QtWidgets.QLabel("Log folder(s):"))
        self.path_edit = QtWidgets.QLineEdit()
        self.path_edit.setPlaceholderText("Folder paths separated by commas")
        path_layout.addWidget(self.path_edit, stretch=1)
        self.load_button = QtWidgets.QPushButton("Load...")
        self.load_button.clicked.connect(self._on_load_clicked)
        path_layout.addWidget(self.load_button)
        self.append_checkbox = QtWidgets.QCheckBox("Append")
        self.append_checkbox.setToolTip("Add the folder to the ones already loaded")
        path_layout.addWidget(self.append_checkbox)
        main_layout.addLayout(path_layout)

        # Selection lists
        lists_layout = QtWidgets.QHBoxLayout()
        self.test_name_list = SelectionListWidget(self.selection.test_names, multi=False)
        self.barcode_list = SelectionListWidget(self.selection.barcodes, multi=True)
        self.barcode_count_label = QtWidgets.QLabel()
        self.test_time_list = SelectionListWidget(self.selection.test_times, multi=True)
        self.test_time_count_label = QtWidgets.QLabel()

        for title, list_widget, count_label in (
                ("Test Name", self.test_name_list, None),
                ("Barcode", self.barcode_list, self.barcode_count_label),
                ("Test Time", self.test_time_list, self.test_time_count_label)):
            group = QtWidgets.QGroupBox(title)
            group_layout = QtWidgets.QVBoxLayout(group)
            group_layout.addWidget(list_widget)
            if count_label is not None:
                group_layout.addWidget(count_label)
            lists_layout.addWidget(group)
        main_layout.addLayout(lists_layout, stretch=1)

        self.barcode_list.row_clicked.connect(self._on_barcode_clicked)
        self.barcode_list.selection_changed.connect(self._update_counts)
        self.test_time_list.selection_changed.connect(self._update_counts)

        # Actions
        button_layout = QtWidgets.QHBoxLayout()
        button_layout.addStretch()
        self.show_all_button = QtWidgets.QPushButton("Show All Graphs")
        self.show_all_button.clicked.connect(self.show_all_graphs)
        button_layout.addWidget(self.show_all_button)
        self.show_one_button = QtWidgets.QPushButton("Show One Graph")
        self.show_one_button.clicked.connect(self.show_one_graph)
        button_layout.addWidget(self.show_one_button)
        main_layout.addLayout(button_layout)

        self.setCentralWidget(central)
        self.status_bar = QtWidgets.QStatusBar()
        self.setStatusBar(self.status_bar)
        self._update_counts()

    def _restore_window_state(self) -> None:
        if self.settings.contains("geometry"):
            self.restoreGeometry(self.settings.value("geometry"))
            log.debug("Restored window geometry.")
        else:
            resize_to_screen(self, 0.5)

    def _update_counts(self) -> None:
        self.barcode_count_label.setText(self.selection.barcodes.count_text())
        self.test_time_count_label.setText(self.selection.test_times.count_text())

    def _refresh_lists(self) -> None:
        self.test_name_list.refresh()
        self.barcode_list.refresh()
        self.test_time_list.refresh()
        self._update_counts()

    # --- Background work ---
    def _run_in_background(self, fn: Callable, *args, on_result: Callable,
                           busy_message: str = "") -> None:
        if busy_message:
            self.status_bar.showMessage(busy_message)
        worker = TaskWorker(fn, *args)
        worker.signals.result.connect(on_result)
        worker.signals.error.connect(self._on_worker_error)
        worker.signals.finished.connect(lambda w=worker: self._on_worker_finished(w))
        self._workers.append(worker)
        self.thread_pool.start(worker)

    def _on_worker_finished(self, worker) -> None:
        if worker in self._workers:
            self._workers.remove(worker)
        if not self._workers:
            self.status_bar.clearMessage()

    def _on_worker_error(self, error_info: tuple) -> None:
        exctype, value, tb = error_info
        log.error(f"Background task failed: {value}\n{tb}")
        QtWidgets.QMessageBox.critical(self, "Error", f"An error occurred:\n{value}")

    # --- Loading ---
    def _on_load_clicked(self) -> None:
        start_dir = str(self.settings.value("lastDirectory", ""))
        directory = QtWidgets.QFileDialog.getExistingDirectory(self, "Select Log Folder", start_dir)
        if not directory:
            return
        self.settings.setValue("lastDirectory", directory)
        self.load_directory(directory)

    def load_directory(self, directory, append: Optional[bool] = None) -> None:
        """
        Scan ``directory`` and refresh the lists.

        Args:
            directory: Folder to scan.
            append: Merge into the loaded catalog instead of replacing it;
                defaults to the Append checkbox.
        """
        if append is None:
            append = self.append_checkbox.isChecked()
        directory = Path(directory)
        log.info(f"Loading {directory} (append={append})")
        self._run_in_background(
            scan_directories, [directory],
            on_result=lambda catalog: self._apply_scan(catalog, append),
            busy_message=f"Scanning {directory}...",
        )

    def _apply_scan(self, scanned: Catalog, append: bool) -> None:
        if not append:
            self.catalog.clear()
        self.catalog.merge(scanned)
        self.path_edit.setText(self.catalog.directory_text)
        self._test_time_generation += 1
        self.selection.load_catalog(self.catalog)
        self._refresh_lists()
        self.status_bar.showMessage(
            f"Found {len(self.catalog.test_names)} test names and {len(self.catalog.barcodes)} barcodes", 5000)
        self.catalog_loaded.emit()

    # --- Barcode / test time ---
    def _on_barcode_clicked(self, row: int, shift: bool, toggled: list) -> None:
        self.update_test_times()

    def update_test_times(self) -> None:
        """Clear the test-time list and rebuild it for the selected barcodes."""
        self._test_time_generation += 1
        generation = self._test_time_generation
        barcodes = self.selection.begin_test_time_update()
        self.test_time_list.refresh()
        self._update_counts()

        if not barcodes:
            self.test_times_updated.emit()
            return
        directories = parse_directory_field(self.path_edit.text())
        self._run_in_background(
            collect_test_times, directories, barcodes,
            on_result=lambda times, gen=generation: self._apply_test_times(gen, times),
        )

    def _apply_test_times(self, generation: int, test_times: List[str]) -> None:
        if generation != self._test_time_generation:
            log.debug("Discarding stale test-time result")
            return
        self.selection.set_test_times(test_times)
        self.test_time_list.refresh()
        self._update_counts()
        self.test_times_updated.emit()

    # --- Rendering ---
    def validate_selection(self) -> bool:
        """Warn and return False unless a folder and every list has a selection."""
        message = None
        if not self.path_edit.text().strip():
            message = "Please select a log folder first."
        elif not self.selection.has_complete_selection():
            message = SELECTION_REQUIRED_MESSAGES[self.selection.first_unselected_list().name]
        if message is not None:
            QtWidgets.QMessageBox.warning(self, "Selection Required", message)
            return False
        return True

    def _find_matches(self, on_result: Callable) -> None:
        self._run_in_background(
            find_matching_files,
            self.path_edit.text(),
            self.selection.test_names.selected_items(),
            self.selection.barcodes.selected_items(),
            self.selection.test_times.selected_items(),
            on_result=on_result,
            busy_message="Matching files...",
        )

    def _report_no_matches(self, files: List[Path]) -> bool:
        if files:
            return False
        QtWidgets.QMessageBox.information(self, "No Files", "No matching files found.")
        return True

    def show_all_graphs(self) -> None:
        """Match files and, after confirmation, open the grid window."""
        if not self.validate_selection():
            return
        title_suffix = self.selection.current_title_suffix()
        self._find_matches(lambda files: self._on_grid_matches(files, title_suffix))

    def _on_grid_matches(self, files: List[Path], title_suffix: str) -> None:
        if self._report_no_matches(files):
            return
        reply = QtWidgets.QMessageBox.question(
            self, "Draw Graphs", f"Found {len(files)} files. Draw the graphs?",
            QtWidgets.QMessageBox.StandardButton.Yes | QtWidgets.QMessageBox.StandardButton.No)
        if reply != QtWidgets.QMessageBox.StandardButton.Yes:
            return
        self._run_in_background(
            build_grid_panels, files,
            on_result=lambda panels: self._open_graph_window(panels, title_suffix),
            busy_message=f"Reading {len(files)} files...",
        )

    def _open_graph_window(self, panels, title_suffix: str) -> None:
        if self.graph_window is not None:
            self.graph_window.close()
        try:
            self.graph_window = GraphGridWindow(panels, title_suffix, self.synchronizer, self.exporter)
        except PlottingError as e:
            log.error(f"Could not build the graph window: {e}")
            self.graph_window = None
            QtWidgets.QMessageBox.critical(self, "Plot Error", str(e))
            return
        self.graph_window.show()

    def show_one_graph(self) -> None:
        """Match files and open the single-chart window."""
        if not self.validate_selection():
            return
        title_suffix = self.selection.current_title_suffix()
        self._find_matches(lambda files: self._open_single_window(files, title_suffix))

    def _open_single_window(self, files: List[Path], title_suffix: str) -> None:
        if self._report_no_matches(files):
            return
        if self.single_window is not None:
            self.single_window.close()
        self.single_window = SingleGraphWindow(files, title_suffix, self.synchronizer,
                                               self.thread_pool, self.exporter)
        self.single_window.show()

    def closeEvent(self, event: QtGui.QCloseEvent):
        """Close chart windows and save the window geometry."""
        log.info("Close event received. Saving state...")
        for window in (self.graph_window, self.single_window):
            if window is not None:
                window.close()
        self.settings.setValue("geometry", self.saveGeometry())
        self.settings.sync()
        event.accept()
