# src/LogScope/application/gui/widgets/selection_list_widget.py
# -*- coding: utf-8 -*-
"""
List widget bound to a SelectionList.

In multi mode every left click toggles the clicked row and a shift-click
additionally toggles the rows between the previous anchor and the clicked
row (see ``SelectionList.click``). The SelectionList is the source of truth;
the widget only mirrors it. In single mode the widget behaves like a plain
single-selection list and copies its selection into the model.
"""
import logging
from typing import List

from PySide6 import QtCore, QtGui, QtWidgets

from LogScope.core.selection import SelectionList

log = logging.getLogger(__name__)


class SelectionListWidget(QtWidgets.QListWidget):
    """QListWidget mirroring a SelectionList."""

    # row, shift pressed, rows toggled by the shift range
    row_clicked = QtCore.Signal(int, bool, list)
    # any change of the model's selection made through this widget
    selection_changed = QtCore.Signal()

    def __init__(self, model: SelectionList, multi: bool = True, parent=None):
        super().__init__(parent)
        self.model = model
        self.multi = multi
        self._syncing = False
        self.setSelectionMode(
            QtWidgets.QAbstractItemView.SelectionMode.MultiSelection if multi
            else QtWidgets.QAbstractItemView.SelectionMode.SingleSelection
        )
        self.itemSelectionChanged.connect(self._on_item_selection_changed)

    # --- Model -> widget ---
    def refresh(self) -> None:
        """Rebuild the rows from the model items and selection flags."""
        self._syncing = True
        try:
            self.clear()
            self.addItems(self.model.items)
            self._apply_model_selection()
        finally:
            self._syncing = False

    def sync_selection(self) -> None:
        """Copy only the selection flags from the model."""
        self._syncing = True
        try:
            self._apply_model_selection()
        finally:
            self._syncing = False

    def _apply_model_selection(self) -> None:
        for row in range(self.count()):
            self.item(row).setSelected(self.model.is_selected(row))

    # --- Widget -> model ---
    def mousePressEvent(self, event: QtGui.QMouseEvent):
        if not self.multi or event.button() != QtCore.Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        index = self.indexAt(event.position().toPoint())
        if not index.isValid():
            super().mousePressEvent(event)
            return

        row = index.row()
        shift = bool(event.modifiers() & QtCore.Qt.KeyboardModifier.ShiftModifier)
        self.model.toggle(row)
        toggled = self.model.click(row, shift)
        self.sync_selection()
        self.selectionModel().setCurrentIndex(index, QtCore.QItemSelectionModel.SelectionFlag.NoUpdate)
        event.accept()

        log.debug(f"{self.model.name}: row {row} clicked (shift={shift}), selected {self.model.count_text()}")
        self.row_clicked.emit(row, shift, toggled)
        self.selection_changed.emit()

    def mouseMoveEvent(self, event: QtGui.QMouseEvent):
        # Drag-selection would bypass the toggle rules
        if self.multi:
            event.accept()
            return
        super().mouseMoveEvent(event)

    def _on_item_selection_changed(self):
        if self._syncing:
            return
        for row in range(self.count()):
            self.model.set_selected(row, self.item(row).isSelected())
        self.selection_changed.emit()

    def selected_texts(self) -> List[str]:
        return self.model.selected_items()
