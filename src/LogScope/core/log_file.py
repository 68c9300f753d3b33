# src/LogScope/core/log_file.py
# -*- coding: utf-8 -*-
"""
Log file classification from filenames.

A test log is named ``<...>_<token2>_<token3>_<token4>_<rest...>.csv``. The
test time, barcode and test name are taken from fixed token positions; when
token 3 starts with one of the alternate barcode prefixes the layout is
shifted one position to the left.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from LogScope.shared.constants import (
    ALTERNATE_BARCODE_PREFIXES,
    FILENAME_SEPARATOR,
    MIN_FILENAME_TOKENS,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogFile:
    """A CSV test log and the classification tokens parsed from its name."""

    path: Path
    test_time: str
    barcode: str
    test_name: str


def split_filename(path: Union[str, Path]) -> List[str]:
    """Split the base name (without extension) of ``path`` on underscores."""
    return Path(path).stem.split(FILENAME_SEPARATOR)


def parse_log_filename(path: Union[str, Path]) -> Optional[LogFile]:
    """
    Parse a log file path into a LogFile.

    Args:
        path: Path (or bare filename) of the CSV log.

    Returns:
        The parsed LogFile, or None if the name has fewer than
        MIN_FILENAME_TOKENS underscore-separated tokens.
    """
    tokens = split_filename(path)
    if len(tokens) < MIN_FILENAME_TOKENS:
        log.debug(f"Ignoring '{Path(path).name}': {len(tokens)} filename tokens")
        return None

    if tokens[3].startswith(ALTERNATE_BARCODE_PREFIXES):
        test_time = tokens[2]
        barcode = tokens[3]
        test_name = FILENAME_SEPARATOR.join(tokens[4:])
    else:
        test_time = tokens[3]
        barcode = tokens[4]
        # May be empty when the name has exactly five tokens
        test_name = FILENAME_SEPARATOR.join(tokens[5:])

    return LogFile(path=Path(path), test_time=test_time, barcode=barcode, test_name=test_name)
