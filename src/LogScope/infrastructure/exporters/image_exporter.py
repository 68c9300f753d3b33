# src/LogScope/infrastructure/exporters/image_exporter.py
# -*- coding: utf-8 -*-
"""
Chart Image Exporter.
Captures chart windows or individual plots and writes them to PNG, JPEG or
TIFF files, or places them on the clipboard.
"""
import logging
from pathlib import Path
from typing import Optional, Union

import pyqtgraph as pg
import pyqtgraph.exporters
from PySide6 import QtGui, QtWidgets

from LogScope.shared.constants import IMAGE_FILE_FILTER, IMAGE_FORMATS
from LogScope.shared.error_handling import ExportError

log = logging.getLogger(__name__)

_SUFFIX_FORMATS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".tif": "TIFF",
    ".tiff": "TIFF",
}


def image_format_for_filter(selected_filter: Optional[str], filename: Union[str, Path] = "") -> str:
    """
    Resolve the Qt image format for a save-dialog filter.

    Falls back to the filename suffix, then to PNG.
    """
    filters = IMAGE_FILE_FILTER.split(";;")
    if selected_filter in filters:
        return IMAGE_FORMATS[filters.index(selected_filter)]
    return _SUFFIX_FORMATS.get(Path(filename).suffix.lower(), IMAGE_FORMATS[0])


class ImageExporter:
    """Writes captured chart images to files or the clipboard."""

    def grab(self, widget: QtWidgets.QWidget) -> QtGui.QPixmap:
        pixmap = widget.grab()
        if pixmap.isNull():
            raise ExportError("Captured image is empty.")
        return pixmap

    def save_widget(self, widget: QtWidgets.QWidget, filename: Union[str, Path], fmt: str) -> Path:
        """
        Capture ``widget`` and save it as ``fmt`` (a Qt image format name).

        Raises:
            ExportError: If the capture is empty or the file cannot be written.
        """
        filename = Path(filename)
        pixmap = self.grab(widget)
        if not pixmap.save(str(filename), fmt):
            raise ExportError(f"Could not write {fmt} image to {filename}")
        log.info(f"Saved {fmt} image to {filename}")
        return filename

    def copy_widget(self, widget: QtWidgets.QWidget) -> None:
        """Capture ``widget`` and place the image on the clipboard."""
        pixmap = self.grab(widget)
        clipboard = QtGui.QGuiApplication.clipboard()
        if clipboard is None:
            raise ExportError("Clipboard is not available.")
        clipboard.setPixmap(pixmap)
        log.info("Copied chart image to clipboard")

    def save_plot(self, plot_item: pg.PlotItem, filename: Union[str, Path]) -> Path:
        """Render a single plot through pyqtgraph's image exporter."""
        filename = Path(filename)
        try:
            exporter = pg.exporters.ImageExporter(plot_item)
            exporter.export(str(filename))
        except Exception as e:
            raise ExportError(f"Could not export plot to {filename}: {e}") from e
        log.info(f"Exported plot to {filename}")
        return filename
