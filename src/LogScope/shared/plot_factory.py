# src/LogScope/shared/plot_factory.py
# -*- coding: utf-8 -*-
"""
Plot factory for LogScope.

Creates pyqtgraph plot widgets and grid layouts with a consistent white
background, visible grid and rectangle-zoom mouse mode.
"""

import logging
import os
from typing import Optional, Sequence

from PySide6 import QtWidgets
import pyqtgraph as pg

log = logging.getLogger(__name__)

FOREGROUND = 'k'
BACKGROUND = 'w'


def is_offscreen() -> bool:
    """True when Qt runs without a display (tests, CI)."""
    return os.environ.get('QT_QPA_PLATFORM', '') == 'offscreen'


def configure_pyqtgraph_globally() -> None:
    """Global pyqtgraph options; call once before creating plots."""
    pg.setConfigOptions(background=BACKGROUND, foreground=FOREGROUND, antialias=True)


def make_pen(color: Sequence[int], width: float = 1.5) -> pg.QtGui.QPen:
    """Pen for a series colour given as RGB or RGBA."""
    return pg.mkPen(color=tuple(color), width=width)


class LogScopePlotFactory:
    """Centralized factory for creating pyqtgraph plots."""

    @staticmethod
    def configure_plot_item(plot_item: pg.PlotItem, mouse_mode: str = 'rect') -> pg.PlotItem:
        """Apply the common grid, mouse mode and menu settings to ``plot_item``."""
        plot_item.showGrid(x=True, y=True, alpha=0.3)
        viewbox = plot_item.getViewBox()
        if viewbox is not None:
            if mouse_mode == 'rect':
                viewbox.setMouseMode(pg.ViewBox.RectMode)
            elif mouse_mode == 'pan':
                viewbox.setMouseMode(pg.ViewBox.PanMode)
            # The window provides its own context menu
            viewbox.setMenuEnabled(False)
        plot_item.hideButtons()
        return plot_item

    @staticmethod
    def create_plot_widget(parent: Optional[QtWidgets.QWidget] = None,
                           background: str = BACKGROUND,
                           mouse_mode: str = 'rect') -> pg.PlotWidget:
        """
        Create a configured PlotWidget.

        Args:
            parent: Parent widget
            background: Background colour
            mouse_mode: Mouse interaction mode ('rect' or 'pan')

        Returns:
            Configured PlotWidget
        """
        kwargs = {"enableMenu": False} if is_offscreen() else {}
        plot_widget = pg.PlotWidget(parent=parent, **kwargs)
        plot_widget.setBackground(background)
        LogScopePlotFactory.configure_plot_item(plot_widget.getPlotItem(), mouse_mode)
        log.debug("Created plot widget")
        return plot_widget

    @staticmethod
    def create_graphics_layout(parent: Optional[QtWidgets.QWidget] = None,
                               background: str = BACKGROUND) -> pg.GraphicsLayoutWidget:
        """Create an empty GraphicsLayoutWidget for a grid of plots."""
        layout_widget = pg.GraphicsLayoutWidget(parent=parent)
        layout_widget.setBackground(background)
        return layout_widget

    @staticmethod
    def add_plot(layout_widget: pg.GraphicsLayoutWidget, row: int, col: int,
                 title: Optional[str] = None, mouse_mode: str = 'rect') -> pg.PlotItem:
        """Add a configured PlotItem to ``layout_widget`` at (row, col)."""
        kwargs = {}
        # ViewBox menu creation crashes PySide6 without a display
        if is_offscreen():
            kwargs["enableMenu"] = False
        plot_item = layout_widget.addPlot(row=row, col=col, title=title, **kwargs)
        return LogScopePlotFactory.configure_plot_item(plot_item, mouse_mode)
