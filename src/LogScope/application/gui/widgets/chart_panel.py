# src/LogScope/application/gui/widgets/chart_panel.py
# -*- coding: utf-8 -*-
"""
Chart panel: draws prepared series into a pyqtgraph PlotItem and reports
user zooms to the ZoomSynchronizer.

The X axis range and tick spacing come from the prepared data (and later from
zoom synchronization); the Y axis auto-scales. Grid panels with a sensor
column also show a right-hand axis backed by its own ViewBox so its range
stays independent from the primary Y axis.
"""
import logging
from typing import List, Optional, Sequence

from PySide6 import QtCore
import pyqtgraph as pg

from LogScope.core.chart_data import AxisScale, ChartState, PanelData, SecondaryAxis, SeriesData
from LogScope.core.zoom_sync import ZoomState, ZoomSynchronizer
from LogScope.shared.constants import GRID_X_AXIS_TITLE
from LogScope.shared.plot_factory import make_pen

log = logging.getLogger(__name__)

# Above this many minor ticks on the visible X range only major ticks are drawn
MAX_MINOR_TICKS = 1000


class ChartPanel(QtCore.QObject):
    """Wraps one PlotItem and its ChartState."""

    zoom_changed = QtCore.Signal(object)  # ZoomState

    def __init__(self, plot_item: pg.PlotItem, synchronizer: Optional[ZoomSynchronizer] = None,
                 parent: Optional[QtCore.QObject] = None):
        super().__init__(parent)
        self.plot_item = plot_item
        self.synchronizer = synchronizer
        self.state: Optional[ChartState] = None
        self.initial_state: Optional[ChartState] = None
        self.curves: List[pg.PlotDataItem] = []
        self.secondary_view: Optional[pg.ViewBox] = None
        self._last_zoom: Optional[ZoomState] = None

        self.legend = self.plot_item.addLegend()
        # Only mouse-driven zoom and pan is synchronized
        self.view_box.sigRangeChangedManually.connect(self._on_user_zoom)

    @property
    def view_box(self) -> pg.ViewBox:
        return self.plot_item.getViewBox()

    # --- Drawing ---
    def apply_panel(self, panel: PanelData) -> None:
        """Draw a grid panel."""
        self.plot_item.setTitle(panel.title)
        self.set_series(panel.series, panel.x_scale,
                        x_axis_title=GRID_X_AXIS_TITLE,
                        y_axis_title=panel.spec.y_axis_title)
        self._apply_secondary_axis(panel.secondary_axis)

    def set_series(self, series: Sequence[SeriesData], x_scale: Optional[AxisScale],
                   x_axis_title: str = "", y_axis_title: str = "",
                   title: Optional[str] = None) -> None:
        """Replace all curves and reset the axes."""
        self.clear()
        if title is not None:
            self.plot_item.setTitle(title)
        self.plot_item.setLabel('bottom', x_axis_title)
        self.plot_item.setLabel('left', y_axis_title)

        for item in series:
            name = item.name if item.legend_visible else None
            curve = self.plot_item.plot(item.x, item.y, pen=make_pen(item.color), name=name)
            self.curves.append(curve)

        self.view_box.enableAutoRange(axis=pg.ViewBox.YAxis, enable=True)
        if x_scale is not None:
            self.state = ChartState(x=AxisScale(x_scale.min, x_scale.max,
                                                x_scale.major_step, x_scale.minor_step),
                                    x_axis_title=x_axis_title, y_axis_title=y_axis_title)
            self.initial_state = self.state.copy()
            self.apply_x_axis(x_scale)
        else:
            self.state = None
            self.initial_state = None
            self.view_box.enableAutoRange(axis=pg.ViewBox.XAxis, enable=True)
        log.debug(f"Panel '{self.plot_item.titleLabel.text}' drew {len(self.curves)} curves")

    def clear(self) -> None:
        for curve in self.curves:
            self.plot_item.removeItem(curve)
        self.curves = []
        if self.legend is not None:
            self.legend.clear()

    def _apply_secondary_axis(self, secondary: Optional[SecondaryAxis]) -> None:
        right_axis = self.plot_item.getAxis('right')
        if secondary is None:
            self.plot_item.hideAxis('right')
            return

        self.plot_item.showAxis('right')
        if secondary.title:
            right_axis.setLabel(secondary.title)
        if secondary.scale is None:
            return

        view = self._ensure_secondary_view()
        view.setYRange(secondary.scale.min, secondary.scale.max, padding=0)
        self._set_tick_spacing(right_axis, secondary.scale)

    def _ensure_secondary_view(self) -> pg.ViewBox:
        if self.secondary_view is None:
            view = pg.ViewBox(enableMenu=False)
            view.setMouseEnabled(x=False, y=False)
            self.plot_item.scene().addItem(view)
            self.plot_item.getAxis('right').linkToView(view)
            view.setXLink(self.plot_item)
            self.view_box.sigResized.connect(self._update_secondary_geometry)
            self.secondary_view = view
            self._update_secondary_geometry()
        return self.secondary_view

    def _update_secondary_geometry(self):
        if self.secondary_view is None:
            return
        self.secondary_view.setGeometry(self.view_box.sceneBoundingRect())
        self.secondary_view.linkedViewChanged(self.view_box, self.secondary_view.XAxis)

    # --- Zoom ---
    def zoom_state(self) -> ZoomState:
        return ZoomState.from_view_range(self.view_box.viewRange())

    def apply_x_axis(self, scale: AxisScale, update_range: bool = True) -> None:
        """Set the X range (optional) and tick spacing; never reported as a zoom."""
        if update_range:
            self.view_box.setXRange(scale.min, scale.max, padding=0)
        self._set_tick_spacing(self.plot_item.getAxis('bottom'), scale)
        self._last_zoom = self.zoom_state()

    def reset_zoom(self) -> None:
        """Return to the X axis the panel was drawn with."""
        if self.initial_state is None:
            return
        self.state = self.initial_state.copy()
        self.apply_x_axis(self.state.x)

    def capture_y_range(self) -> None:
        """Record the current Y bounds into the ChartState."""
        if self.state is None:
            return
        (_, _), (y_min, y_max) = self.view_box.viewRange()
        self.state.y_min, self.state.y_max = float(y_min), float(y_max)

    @staticmethod
    def _set_tick_spacing(axis: pg.AxisItem, scale: AxisScale) -> None:
        if not scale.major_step > 0:
            axis.setTickSpacing()
            return
        minor = scale.minor_step
        if not minor > 0 or scale.span / minor > MAX_MINOR_TICKS:
            axis.setTickSpacing(levels=[(scale.major_step, 0)])
        else:
            axis.setTickSpacing(major=scale.major_step, minor=minor)

    def _on_user_zoom(self, *args):
        new_state = self.zoom_state()
        old_state = self._last_zoom
        self._last_zoom = new_state
        self.capture_y_range()
        if self.synchronizer is not None:
            self.synchronizer.on_zoom(self, old_state, new_state)
        self.zoom_changed.emit(new_state)
