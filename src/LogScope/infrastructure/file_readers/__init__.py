# -*- coding: utf-8 -*-
"""
File Readers Submodule for LogScope Infrastructure.

Contains the reader that turns CSV test logs into CsvLog objects.
"""

from .csv_log_reader import CsvLog, CsvLogReader, parse_float

__all__ = [
    "CsvLog",
    "CsvLogReader",
    "parse_float",
]
