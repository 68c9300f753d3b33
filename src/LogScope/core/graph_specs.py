# src/LogScope/core/graph_specs.py
# -*- coding: utf-8 -*-
"""
Static chart panel definitions.

Each of the 12 grid panels is described by a GraphSpec naming its source
columns and axis titles. Column names must match the CSV headers verbatim.
Scaling and secondary-axis behaviour are derived from the column names (see
``is_dac_column`` / ``is_sensor_column``).
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from LogScope.shared.constants import DAC_COLUMN_MARKER, SENSOR_COLUMN_MARKER

RGB = Tuple[int, int, int]

# Named colours used by the two colour tables
BLACK: RGB = (0, 0, 0)
BLUE: RGB = (0, 0, 255)
RED: RGB = (255, 0, 0)
GREEN: RGB = (0, 128, 0)
ORANGE: RGB = (255, 165, 0)
DODGER_BLUE: RGB = (30, 144, 255)
BROWN: RGB = (165, 42, 42)
PINK: RGB = (255, 192, 203)
CYAN: RGB = (0, 255, 255)
PURPLE: RGB = (128, 0, 128)
LIME_GREEN: RGB = (50, 205, 50)
POWDER_BLUE: RGB = (176, 224, 230)
TEAL: RGB = (0, 128, 128)
MAROON: RGB = (128, 0, 0)
NAVY: RGB = (0, 0, 128)
DARK_ORANGE: RGB = (255, 140, 0)
DARK_BLUE: RGB = (0, 0, 139)
DEEP_PINK: RGB = (255, 20, 147)


@dataclass(frozen=True)
class GraphSpec:
    """Definition of one grid chart panel."""

    title: str
    columns: Tuple[str, ...]
    y_axis_title: str

    @property
    def has_secondary_axis(self) -> bool:
        return any(is_sensor_column(c) for c in self.columns)


GRAPH_SPECS: Tuple[GraphSpec, ...] = (
    GraphSpec("OISX current", ("OISX_current_DAC",), "OISX driving current (mA)"),
    GraphSpec("OISY Current", ("OISY_current_DAC",), "OISY driving current (mA)"),
    GraphSpec("AF Current", ("AF_current_DAC",), "AF driving current (mA)"),
    GraphSpec("OISX Cmd, FW Pos, LaserPos",
              ("OISX_command_um", "OIS_X", "Laser_OIS_X_um"), "OISX positions"),
    GraphSpec("OISY Cmd, FW Pos, LaserPos",
              ("OISY_command_um", "OIS_Y", "Laser_OIS_Y_um"), "OISY positions"),
    GraphSpec("AF Cmd, FW Pos, LaserPos",
              ("AF_command_um", "AF_Z", "Laser_AF_Z_um"), "AF positions"),
    GraphSpec("OISX Sensors", ("OISX_APS_lsb", "Laser_OIS_X_um"), "OISX sensor (LSB)"),
    GraphSpec("OISY Sensors", ("OISY_APS_lsb", "Laser_OIS_Y_um"), "OISY sensor (LSB)"),
    GraphSpec("AF Sensors", ("AF_APS_lsb", "Laser_AF_Z_um"), "AF sensor (LSB)"),
    GraphSpec("FW Positions", ("OIS_X", "OIS_Y", "AF_Z"), "Linear FW Pos (um)"),
    GraphSpec("Temp NTC vs Temp INT", ("NTC_Temp", "INT_Temp"), "Temperature (degC)"),
    GraphSpec("AF Laser TiltX vs AF Laser TiltY",
              ("Laser_AF_TiltX_min", "Laser_AF_TiltY_min"), ""),
)

# Columns offered in the single-chart view, in display order
SELECTABLE_COLUMNS: Tuple[str, ...] = (
    "AF_current_DAC", "OISX_current_DAC", "OISY_current_DAC",
    "Laser_AF_Z_um", "Laser_OIS_X_um", "Laser_OIS_Y_um",
    "Laser_AF_TiltX_min", "Laser_AF_TiltY_min",
    "AF_command_um", "OISX_command_um", "OISY_command_um",
    "AF_APS_lsb", "OISX_APS_lsb", "OISY_APS_lsb",
    "NTC_Temp", "INT_Temp",
    "b1_coil_res", "b2_coil_res", "b3_coil_res",
    "OIS_X", "OIS_Y", "AF_Z",
)

GRID_LINE_COLORS: Dict[str, RGB] = {
    "AF_current_DAC": ORANGE,
    "OISX_current_DAC": ORANGE,
    "OISY_current_DAC": ORANGE,
    "OISX_command_um": BLUE,
    "OISY_command_um": BLUE,
    "AF_command_um": BLUE,
    "OIS_X": RED,
    "OIS_Y": RED,
    "AF_Z": RED,
    "Laser_OIS_X_um": GREEN,
    "Laser_OIS_Y_um": GREEN,
    "Laser_AF_Z_um": GREEN,
    "OISX_APS_lsb": BLUE,
    "OISY_APS_lsb": BLUE,
    "AF_APS_lsb": BLUE,
    "NTC_Temp": BLUE,
    "INT_Temp": RED,
    "Laser_AF_TiltX_min": GREEN,
    "Laser_AF_TiltY_min": RED,
}

SINGLE_VIEW_LINE_COLORS: Dict[str, RGB] = {
    "AF_current_DAC": BLUE,
    "OISX_current_DAC": RED,
    "OISY_current_DAC": GREEN,
    "Laser_AF_Z_um": ORANGE,
    "Laser_OIS_X_um": DODGER_BLUE,
    "Laser_OIS_Y_um": BROWN,
    "Laser_AF_TiltX_min": PINK,
    "Laser_AF_TiltY_min": CYAN,
    "AF_command_um": PURPLE,
    "OISX_command_um": LIME_GREEN,
    "OISY_command_um": POWDER_BLUE,
    "AF_APS_lsb": TEAL,
    "OISX_APS_lsb": MAROON,
    "OISY_APS_lsb": NAVY,
    "NTC_Temp": BLUE,
    "INT_Temp": RED,
    "b1_coil_res": GREEN,
    "b2_coil_res": ORANGE,
    "b3_coil_res": PURPLE,
    "OIS_X": DARK_ORANGE,
    "OIS_Y": DARK_BLUE,
    "AF_Z": DEEP_PINK,
}

# Secondary axis titles, checked in order against the sensor column name
SECONDARY_AXIS_TITLES: Tuple[Tuple[str, str], ...] = (
    ("OISX", "OISX Laser pos (um)"),
    ("OISY", "OISY Laser pos (um)"),
    ("AF", "AF Laser pos (um)"),
)


def is_dac_column(column: str) -> bool:
    return DAC_COLUMN_MARKER in column


def is_sensor_column(column: str) -> bool:
    return SENSOR_COLUMN_MARKER in column


def grid_line_color(column: str) -> RGB:
    return GRID_LINE_COLORS.get(column, BLACK)


def single_view_line_color(column: str) -> RGB:
    return SINGLE_VIEW_LINE_COLORS.get(column, BLACK)


def secondary_axis_title(column: str) -> Optional[str]:
    """Title for the secondary axis driven by ``column``, or None."""
    for family, title in SECONDARY_AXIS_TITLES:
        if family in column:
            return title
    return None


def get_graph_spec(title: str) -> Optional[GraphSpec]:
    """Look up a GraphSpec by its panel title."""
    for spec in GRAPH_SPECS:
        if spec.title == title:
            return spec
    return None
