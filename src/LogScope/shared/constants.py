# -*- coding: utf-8 -*-
"""Shared constants for the LogScope application."""

# Log File Naming Constants
CSV_EXTENSION = ".csv"
FILENAME_SEPARATOR = "_"
MIN_FILENAME_TOKENS = 5
ALTERNATE_BARCODE_PREFIXES = ("JH", "JG")  # tokens[3] prefixes that shift the layout left by one

# Directory field
DIRECTORY_SEPARATOR = ","
DIRECTORY_JOINER = ", "

# CSV Schema Constants
CSV_DELIMITER = ","

# Scaling: 12-bit DAC code to driving current in mA
DAC_COLUMN_MARKER = "current_DAC"
DAC_SCALE = 200 / 1023
SENSOR_COLUMN_MARKER = "APS_lsb"

# Axis Constants
X_AXIS_DIVISIONS = 10
GRID_X_MINOR_STEP = 5
MINOR_STEPS_PER_MAJOR = 5
ZOOM_EPSILON = 1e-10

# Grid layout
GRID_ROWS = 4
GRID_COLUMNS = 3
WINDOW_SIZE_RATIO = 0.7
SINGLE_VIEW_COLUMN_LIST_WIDTH = 300
SINGLE_VIEW_ITEM_HEIGHT = 30

# Titles
APP_NAME = "LogScope"
GRID_X_AXIS_TITLE = "time (msec)"
SINGLE_X_AXIS_TITLE = "Time (ms)"
NO_DATA_LABEL = "No Data"

# Image export (Qt format names, in the same order as the filter entries)
IMAGE_FILE_FILTER = ";;".join([
    "Portable Network Graphics (*.png)",
    "JPEG-Image (*.jpg)",
    "TIFF Image (*.tiff)",
])
IMAGE_FORMATS = ["PNG", "JPEG", "TIFF"]

# Make all constants available at the module level
__all__ = [
    'CSV_EXTENSION',
    'FILENAME_SEPARATOR',
    'MIN_FILENAME_TOKENS',
    'ALTERNATE_BARCODE_PREFIXES',
    'DIRECTORY_SEPARATOR',
    'DIRECTORY_JOINER',
    'CSV_DELIMITER',
    'DAC_COLUMN_MARKER',
    'DAC_SCALE',
    'SENSOR_COLUMN_MARKER',
    'X_AXIS_DIVISIONS',
    'GRID_X_MINOR_STEP',
    'MINOR_STEPS_PER_MAJOR',
    'ZOOM_EPSILON',
    'GRID_ROWS',
    'GRID_COLUMNS',
    'WINDOW_SIZE_RATIO',
    'SINGLE_VIEW_COLUMN_LIST_WIDTH',
    'SINGLE_VIEW_ITEM_HEIGHT',
    'APP_NAME',
    'GRID_X_AXIS_TITLE',
    'SINGLE_X_AXIS_TITLE',
    'NO_DATA_LABEL',
    'IMAGE_FILE_FILTER',
    'IMAGE_FORMATS',
]
