# src/LogScope/infrastructure/file_readers/csv_log_reader.py
# -*- coding: utf-8 -*-
"""
Reader for CSV test logs.

Logs are plain comma-separated text: the first line names the columns and
every following line holds one sample per column. Lines are split on the
delimiter without quote handling and cells are parsed leniently; the chart
layer decides what an unparseable cell means.
"""
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from LogScope.shared.constants import CSV_DELIMITER
from LogScope.shared.error_handling import LogReadError

log = logging.getLogger(__name__)


def parse_float(text: str) -> Optional[float]:
    """
    Parse a cell as float; returns None when it is not a finite number.

    Digit-group underscores, inf and nan are rejected like any other
    unparseable text.
    """
    if text is None or "_" in text:
        return None
    try:
        value = float(text)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


@dataclass
class CsvLog:
    """The text lines of one CSV log, with the header already split."""

    path: Path
    lines: List[str]
    header: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.header and self.lines:
            self.header = self.lines[0].split(CSV_DELIMITER)

    @property
    def line_count(self) -> int:
        """Number of lines including the header."""
        return len(self.lines)

    def column_index(self, column: str) -> int:
        """Index of ``column`` in the header, or -1 when absent."""
        try:
            return self.header.index(column)
        except ValueError:
            return -1

    def cells(self, line_number: int) -> List[str]:
        return self.lines[line_number].split(CSV_DELIMITER)

    def value(self, line_number: int, column_index: int) -> Optional[float]:
        """Float value of one cell, or None if missing or unparseable."""
        if column_index < 0:
            return None
        cells = self.cells(line_number)
        if len(cells) <= column_index:
            return None
        return parse_float(cells[column_index])


class CsvLogReader:
    """Reads CSV logs from disk."""

    encoding = "utf-8-sig"

    def read_log(self, path: Union[str, Path]) -> CsvLog:
        """
        Read all lines of ``path``.

        Raises:
            LogReadError: If the file cannot be opened or decoded.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding=self.encoding, errors="replace")
        except OSError as e:
            raise LogReadError(f"Could not read log file {path}: {e}") from e
        lines = text.splitlines()
        log.debug(f"Read {len(lines)} lines from {path.name}")
        return CsvLog(path=path, lines=lines)
