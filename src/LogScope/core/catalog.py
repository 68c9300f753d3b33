# src/LogScope/core/catalog.py
# -*- coding: utf-8 -*-
"""
Directory scanning, catalog building and file matching.

The Catalog holds the de-duplicated test names, barcodes and test times found
in one or more log directories. Only directory listings are read here; file
contents are left to the chart data layer.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from LogScope.core.log_file import LogFile, parse_log_filename
from LogScope.shared.constants import CSV_EXTENSION, DIRECTORY_JOINER, DIRECTORY_SEPARATOR

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


class OrderedValueSet:
    """Insertion-ordered set of strings."""

    def __init__(self, values: Iterable[str] = ()):
        self._values: Dict[str, None] = {}
        for value in values:
            self.add(value)

    def add(self, value: str) -> bool:
        """Add ``value``; returns True if it was not already present."""
        if value in self._values:
            return False
        self._values[value] = None
        return True

    def clear(self) -> None:
        self._values.clear()

    def to_list(self) -> List[str]:
        return list(self._values)

    def __contains__(self, value) -> bool:
        return value in self._values

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"OrderedValueSet({self.to_list()!r})"


class Catalog:
    """
    De-duplicated value sets derived from scanning log directories.

    Each of the three sets is owned independently so a value seen as a barcode
    never hides the same string appearing as a test name.
    """

    def __init__(self):
        self.test_names = OrderedValueSet()
        self.barcodes = OrderedValueSet()
        self.test_times = OrderedValueSet()
        self.directories: List[Path] = []

    def add(self, log_file: LogFile) -> None:
        self.test_names.add(log_file.test_name)
        self.barcodes.add(log_file.barcode)
        self.test_times.add(log_file.test_time)

    def clear(self) -> None:
        """Drop all values and tracked directories."""
        self.test_names.clear()
        self.barcodes.clear()
        self.test_times.clear()
        self.directories.clear()

    def merge(self, other: "Catalog") -> None:
        """Merge values and tracked directories of ``other`` into this catalog."""
        for value in other.test_names:
            self.test_names.add(value)
        for value in other.barcodes:
            self.barcodes.add(value)
        for value in other.test_times:
            self.test_times.add(value)
        for directory in other.directories:
            if directory not in self.directories:
                self.directories.append(directory)

    @property
    def directory_text(self) -> str:
        """Tracked directories joined for display in the path field."""
        return DIRECTORY_JOINER.join(str(d) for d in self.directories)

    def is_empty(self) -> bool:
        return not (self.test_names or self.barcodes or self.test_times)

    def __repr__(self) -> str:
        return (f"Catalog(test_names={len(self.test_names)}, barcodes={len(self.barcodes)}, "
                f"test_times={len(self.test_times)}, directories={len(self.directories)})")


def parse_directory_field(text: Optional[str]) -> List[Path]:
    """Split a comma-joined directory field into trimmed, non-empty paths."""
    if not text:
        return []
    return [Path(part.strip()) for part in text.split(DIRECTORY_SEPARATOR) if part.strip()]


def list_csv_files(directory: PathLike) -> List[Path]:
    """
    List the CSV files directly inside ``directory``.

    A missing or unreadable directory yields an empty list.
    """
    directory = Path(directory)
    if not directory.is_dir():
        log.warning(f"Skipping missing directory: {directory}")
        return []
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        log.warning(f"Skipping unreadable directory {directory}: {e}")
        return []
    return [p for p in entries if p.is_file() and p.suffix.lower() == CSV_EXTENSION]


def collect_csv_files(directories: Iterable[PathLike]) -> List[Path]:
    """Gather CSV files from every existing directory, in directory order."""
    files: List[Path] = []
    for directory in directories:
        files.extend(list_csv_files(directory))
    return files


class CatalogBuilder:
    """Builds and maintains a Catalog from directory scans."""

    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog if catalog is not None else Catalog()

    def scan(self, directories: Iterable[PathLike], append: bool = False) -> Catalog:
        """
        Scan ``directories`` into the catalog.

        Args:
            directories: Directories to scan.
            append: If False the catalog and its tracked directories are
                cleared first; if True values are merged and new directories
                appended to the tracked list.

        Returns:
            The updated Catalog.
        """
        if not append:
            self.catalog.clear()

        for directory in directories:
            directory = Path(directory)
            if directory not in self.catalog.directories:
                self.catalog.directories.append(directory)
            self._scan_directory(directory)

        log.info(f"Scan complete: {self.catalog!r}")
        return self.catalog

    def _scan_directory(self, directory: Path) -> None:
        added = 0
        for csv_file in list_csv_files(directory):
            log_file = parse_log_filename(csv_file)
            if log_file is None:
                continue
            self.catalog.add(log_file)
            added += 1
        log.debug(f"Scanned {directory}: {added} log files")


def scan_directories(directories: Iterable[PathLike]) -> Catalog:
    """Build a fresh Catalog from ``directories``."""
    return CatalogBuilder().scan(directories)


def match_files(candidates: Iterable[PathLike],
                test_names: Iterable[str],
                barcodes: Iterable[str],
                test_times: Iterable[str]) -> List[Path]:
    """
    Keep the candidates whose parsed test time, barcode AND test name are all
    in the given sets. Input order is preserved.
    """
    test_name_set = set(test_names)
    barcode_set = set(barcodes)
    test_time_set = set(test_times)

    matched: List[Path] = []
    for candidate in candidates:
        log_file = parse_log_filename(candidate)
        if log_file is None:
            continue
        if (log_file.test_time in test_time_set
                and log_file.barcode in barcode_set
                and log_file.test_name in test_name_set):
            matched.append(Path(candidate))

    log.debug(f"Matched {len(matched)} files")
    return matched


def collect_test_times(directories: Iterable[PathLike], barcodes: Iterable[str]) -> List[str]:
    """
    Re-scan ``directories`` and return the de-duplicated test times (first-seen
    order) of every log whose barcode is in ``barcodes``.
    """
    barcode_set = set(barcodes)
    test_times = OrderedValueSet()
    for csv_file in collect_csv_files(directories):
        log_file = parse_log_filename(csv_file)
        if log_file is not None and log_file.barcode in barcode_set:
            test_times.add(log_file.test_time)
    return test_times.to_list()

