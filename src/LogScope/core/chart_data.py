# src/LogScope/core/chart_data.py
# -*- coding: utf-8 -*-
"""
Chart data preparation for the grid and single-chart views.

Turns matched CSV logs into plain series and axis descriptions that the GUI
hands to pyqtgraph. The X coordinate of every point is its zero-based row
offset in the file, used as a time proxy.

The two views differ on purpose:
- grid panels stop before the last content line, plot unparseable or missing
  cells as 0 and always add a series per configured column;
- the single-chart view includes the last line, skips unparseable cells and
  only adds series that received at least one point.
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np

from LogScope.core.graph_specs import (
    GRAPH_SPECS,
    GraphSpec,
    RGB,
    grid_line_color,
    is_dac_column,
    is_sensor_column,
    secondary_axis_title,
    single_view_line_color,
)
from LogScope.infrastructure.file_readers.csv_log_reader import CsvLog, CsvLogReader
from LogScope.shared.constants import (
    DAC_SCALE,
    GRID_X_MINOR_STEP,
    MINOR_STEPS_PER_MAJOR,
    NO_DATA_LABEL,
    X_AXIS_DIVISIONS,
)

log = logging.getLogger(__name__)

TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)


@dataclass
class AxisScale:
    """Bounds and tick spacing of one axis."""

    min: float
    max: float
    major_step: float
    minor_step: float

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass
class ChartState:
    """Axis state of one rendered panel."""

    x: AxisScale
    y_min: float = 0.0
    y_max: float = 0.0
    y_major_step: float = 0.0
    y_minor_step: float = 0.0
    x_axis_title: str = ""
    y_axis_title: str = ""

    def copy(self) -> "ChartState":
        return ChartState(
            x=AxisScale(self.x.min, self.x.max, self.x.major_step, self.x.minor_step),
            y_min=self.y_min, y_max=self.y_max,
            y_major_step=self.y_major_step, y_minor_step=self.y_minor_step,
            x_axis_title=self.x_axis_title, y_axis_title=self.y_axis_title,
        )


@dataclass
class SeriesData:
    """One line series ready to plot."""

    name: str
    x: np.ndarray
    y: np.ndarray
    color: Sequence[int]
    legend_visible: bool = True
    placeholder: bool = False

    def __len__(self) -> int:
        return len(self.x)


@dataclass
class SecondaryAxis:
    """Right-hand axis driven by a sensor column."""

    title: Optional[str] = None
    scale: Optional[AxisScale] = None


@dataclass
class PanelData:
    """Everything needed to draw one grid panel."""

    spec: GraphSpec
    series: List[SeriesData] = field(default_factory=list)
    x_scale: AxisScale = field(default_factory=lambda: x_axis_scale(0.0, GRID_X_MINOR_STEP))
    secondary_axis: Optional[SecondaryAxis] = None
    has_data: bool = False

    @property
    def title(self) -> str:
        return self.spec.title


@dataclass
class SingleChartData:
    """Series for the single-chart view."""

    series: List[SeriesData] = field(default_factory=list)
    x_scale: Optional[AxisScale] = None


def calculate_major_step(value_range: float) -> float:
    """
    Major tick step for a data range.

    Starts from the power of ten below the range and refines it so the range
    spans at least roughly five ticks.
    """
    if not math.isfinite(value_range) or value_range <= 0:
        return 0.0
    step = 10 ** math.floor(math.log10(value_range))
    if value_range / step < 2:
        step /= 5
    elif value_range / step < 5:
        step /= 2
    return step


def x_axis_scale(max_x: float, minor_step: Optional[float] = None) -> AxisScale:
    """
    X axis from 0 to ``max_x`` rounded up to a multiple of ten, with ten
    major divisions. ``minor_step`` defaults to a fifth of the major step.
    """
    rounded_max = math.ceil(max_x / X_AXIS_DIVISIONS) * X_AXIS_DIVISIONS
    major = rounded_max / X_AXIS_DIVISIONS
    minor = minor_step if minor_step is not None else major / MINOR_STEPS_PER_MAJOR
    return AxisScale(min=0.0, max=float(rounded_max), major_step=major, minor_step=minor)


def scale_value(column: str, value: float) -> float:
    """Apply the per-column unit conversion."""
    if is_dac_column(column):
        return value * DAC_SCALE
    return value


def placeholder_series() -> SeriesData:
    """Invisible single-point series so an empty panel still renders."""
    return SeriesData(
        name=NO_DATA_LABEL,
        x=np.zeros(1),
        y=np.zeros(1),
        color=TRANSPARENT,
        placeholder=True,
    )


class ChartDataBuilder:
    """
    Builds PanelData / SingleChartData from CSV logs.

    Each file is read once per build call, however many panels use it.
    """

    def __init__(self, reader: Optional[CsvLogReader] = None):
        self.reader = reader if reader is not None else CsvLogReader()

    # --- Grid view ---
    def build_grid(self, files: Iterable[Path],
                   specs: Sequence[GraphSpec] = GRAPH_SPECS) -> List[PanelData]:
        """Build every grid panel from the same set of files."""
        logs = self._read_all(files)
        panels = [self._build_panel(spec, logs) for spec in specs]
        log.info(f"Built {len(panels)} panels from {len(logs)} files")
        return panels

    def build_panel(self, spec: GraphSpec, files: Iterable[Path]) -> PanelData:
        return self._build_panel(spec, self._read_all(files))

    def _build_panel(self, spec: GraphSpec, logs: List[CsvLog]) -> PanelData:
        panel = PanelData(spec=spec)
        added_legends: Set[str] = set()
        max_x = 0.0
        data_added = False

        for csv_log in logs:
            file_max = self._add_file_to_panel(panel, csv_log, added_legends)
            max_x = max(max_x, file_max)
            data_added |= file_max > 0

        if not data_added:
            panel.series.append(placeholder_series())
        panel.has_data = data_added
        panel.x_scale = x_axis_scale(max_x, GRID_X_MINOR_STEP)
        return panel

    def _add_file_to_panel(self, panel: PanelData, csv_log: CsvLog, added_legends: Set[str]) -> float:
        """Add one file's series to ``panel``; returns the largest X offset."""
        if csv_log.line_count <= 1:
            return 0.0

        # Rows 1 .. line_count - 2: the last content line is not plotted here
        line_numbers = range(1, csv_log.line_count - 1)
        xs = np.arange(len(line_numbers), dtype=float)
        max_x = float(xs[-1]) if len(xs) else 0.0

        for column in panel.spec.columns:
            column_index = csv_log.column_index(column)
            ys = np.zeros(len(line_numbers), dtype=float)
            for offset, line_number in enumerate(line_numbers):
                value = csv_log.value(line_number, column_index)
                if value is not None:
                    ys[offset] = value

            if is_dac_column(column):
                ys = ys * DAC_SCALE
            elif is_sensor_column(column):
                self._update_secondary_axis(panel, column, ys)

            panel.series.append(SeriesData(
                name=column,
                x=xs.copy(),
                y=ys,
                color=grid_line_color(column),
                legend_visible=column not in added_legends,
            ))
            added_legends.add(column)

        return max_x

    @staticmethod
    def _update_secondary_axis(panel: PanelData, column: str, values: np.ndarray) -> None:
        if panel.secondary_axis is None:
            panel.secondary_axis = SecondaryAxis()
        title = secondary_axis_title(column)
        if title is not None:
            panel.secondary_axis.title = title
        if len(values):
            lo, hi = float(values.min()), float(values.max())
            major = calculate_major_step(hi - lo)
            panel.secondary_axis.scale = AxisScale(lo, hi, major, major / MINOR_STEPS_PER_MAJOR)

    # --- Single-chart view ---
    def build_single_chart(self, columns: Sequence[str], files: Iterable[Path]) -> SingleChartData:
        """Build the single-chart series for the checked ``columns``."""
        chart = SingleChartData()
        if not columns:
            return chart

        shown_legends: Set[str] = set()
        for path in files:
            csv_log = self.reader.read_log(path)
            for column in columns:
                series = self._single_series(csv_log, column)
                if series is not None:
                    series.legend_visible = column not in shown_legends
                    shown_legends.add(column)
                    chart.series.append(series)
            chart.x_scale = x_axis_scale(max(csv_log.line_count - 1, 0))
        return chart

    @staticmethod
    def _single_series(csv_log: CsvLog, column: str) -> Optional[SeriesData]:
        column_index = csv_log.column_index(column)
        if column_index == -1:
            return None

        xs: List[float] = []
        ys: List[float] = []
        for line_number in range(1, csv_log.line_count):
            value = csv_log.value(line_number, column_index)
            if value is None:
                continue
            xs.append(line_number - 1)
            ys.append(scale_value(column, value))

        if not xs:
            return None
        return SeriesData(
            name=column,
            x=np.asarray(xs, dtype=float),
            y=np.asarray(ys, dtype=float),
            color=single_view_line_color(column),
        )

    def _read_all(self, files: Iterable[Path]) -> List[CsvLog]:
        cache: Dict[Path, CsvLog] = {}
        logs = []
        for path in files:
            path = Path(path)
            if path not in cache:
                cache[path] = self.reader.read_log(path)
            logs.append(cache[path])
        return logs


def build_grid_panels(files: Iterable[Path]) -> List[PanelData]:
    """Convenience wrapper used by background workers."""
    return ChartDataBuilder().build_grid(list(files))


def build_single_chart(columns: Sequence[str], files: Iterable[Path]) -> SingleChartData:
    """Convenience wrapper used by background workers."""
    return ChartDataBuilder().build_single_chart(list(columns), list(files))


__all__ = [
    'AxisScale',
    'ChartState',
    'SeriesData',
    'SecondaryAxis',
    'PanelData',
    'SingleChartData',
    'ChartDataBuilder',
    'calculate_major_step',
    'x_axis_scale',
    'scale_value',
    'placeholder_series',
    'build_grid_panels',
    'build_single_chart',
    'RGB',
]
