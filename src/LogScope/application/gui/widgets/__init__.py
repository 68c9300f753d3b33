# -*- coding: utf-8 -*-
"""
Reusable widgets for the LogScope GUI.
"""
from .chart_panel import ChartPanel
from .selection_list_widget import SelectionListWidget

__all__ = [
    'ChartPanel',
    'SelectionListWidget',
]
