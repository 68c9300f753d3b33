# -*- coding: utf-8 -*-
"""
Graphical User Interface (GUI) subpackage for LogScope.

Contains the main window, the chart windows and related UI components built
with PySide6 and pyqtgraph.
"""
__all__ = []
