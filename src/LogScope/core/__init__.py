# -*- coding: utf-8 -*-
"""
Core Domain Layer for LogScope.

Filename classification, catalog building, file matching, selection state,
chart data preparation and zoom synchronization. Nothing here imports Qt.
"""
__all__ = []
