# src/LogScope/core/selection.py
# -*- coding: utf-8 -*-
"""
Selection state for the test-name, barcode and test-time lists.

The barcode and test-time lists run in multi-simple mode: a plain click
toggles the clicked row (done by the list widget itself) and records it as
the anchor. A shift-click toggles every row strictly between the anchor and
the clicked row. Rows already selected in that span become unselected, so
repeated shift-clicks over the same span undo each other.
"""

import logging
from typing import Iterable, List, Optional

from LogScope.core.catalog import Catalog

log = logging.getLogger(__name__)


class SelectionList:
    """Ordered list of string items with per-row selection flags."""

    def __init__(self, name: str, items: Iterable[str] = ()):
        self.name = name
        self.items: List[str] = list(items)
        self._selected: List[bool] = [False] * len(self.items)
        self.last_selected_index: int = -1

    # --- Items ---
    def set_items(self, items: Iterable[str], select_all: bool = False) -> None:
        """Replace all items; selection is reset to ``select_all``."""
        self.items = list(items)
        self._selected = [select_all] * len(self.items)

    def clear(self) -> None:
        self.items = []
        self._selected = []

    def __len__(self) -> int:
        return len(self.items)

    # --- Selection ---
    def is_selected(self, index: int) -> bool:
        return self._selected[index]

    def set_selected(self, index: int, selected: bool) -> None:
        self._selected[index] = selected

    def toggle(self, index: int) -> None:
        self._selected[index] = not self._selected[index]

    def select_all(self) -> None:
        self._selected = [True] * len(self.items)

    def clear_selection(self) -> None:
        self._selected = [False] * len(self.items)

    def selected_indices(self) -> List[int]:
        return [i for i, flag in enumerate(self._selected) if flag]

    def selected_items(self) -> List[str]:
        return [item for item, flag in zip(self.items, self._selected) if flag]

    @property
    def selected_count(self) -> int:
        return sum(self._selected)

    def count_text(self) -> str:
        return f"{self.selected_count}/{len(self.items)}"

    # --- Click handling ---
    def click(self, index: int, shift: bool = False) -> List[int]:
        """
        Apply the range logic of a click at ``index``.

        The clicked row itself is not touched; the list widget toggles it.

        Returns:
            The indices whose selection was toggled by the shift range.
        """
        if not shift:
            self.last_selected_index = index
            return []

        if not 0 <= self.last_selected_index < len(self.items):
            return []

        start = min(self.last_selected_index, index) + 1
        end = max(self.last_selected_index, index)
        toggled = list(range(start, end))
        for i in toggled:
            self.toggle(i)
        log.debug(f"{self.name}: shift-click {self.last_selected_index}->{index} toggled {toggled}")
        return toggled


class SelectionController:
    """
    Keeps the three selection lists consistent with the Catalog.

    The test-time list is derived: every barcode click clears it and, when any
    barcode is still selected, replaces it with the test times found for those
    barcodes in a fresh directory scan, all of them selected.
    """

    def __init__(self):
        self.test_names = SelectionList("test_names")
        self.barcodes = SelectionList("barcodes")
        self.test_times = SelectionList("test_times")

    def load_catalog(self, catalog: Catalog) -> None:
        """Refresh the test-name and barcode lists from ``catalog``."""
        self.test_names.set_items(catalog.test_names)
        self.barcodes.set_items(catalog.barcodes)
        self.test_times.clear()
        log.debug(f"Loaded {len(self.test_names)} test names and {len(self.barcodes)} barcodes")

    def begin_test_time_update(self) -> List[str]:
        """
        Start rebuilding the test-time list after a barcode click.

        Clears the test-time list and returns the selected barcodes. The caller
        re-scans the directories for them (see ``collect_test_times``) and hands
        the result to ``set_test_times``; an empty return means nothing to scan.
        """
        self.test_times.clear()
        return self.barcodes.selected_items()

    def set_test_times(self, test_times: Iterable[str]) -> None:
        """Install a recomputed test-time list with every entry selected."""
        self.test_times.set_items(test_times, select_all=True)
        log.debug(f"Test times updated: {self.test_times.count_text()}")

    def first_unselected_list(self) -> Optional[SelectionList]:
        """The first list, in test name / barcode / test time order, with nothing selected."""
        for selection_list in (self.test_names, self.barcodes, self.test_times):
            if not selection_list.selected_count:
                return selection_list
        return None

    def has_complete_selection(self) -> bool:
        """True when at least one value is selected in every list."""
        return self.first_unselected_list() is None

    @staticmethod
    def window_title_suffix(barcodes: List[str], test_names: List[str]) -> str:
        return f"{', '.join(barcodes)} / {', '.join(test_names)}"

    def current_title_suffix(self) -> str:
        return self.window_title_suffix(self.barcodes.selected_items(),
                                        self.test_names.selected_items())
