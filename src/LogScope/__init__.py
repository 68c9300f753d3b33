# -*- coding: utf-8 -*-
"""
LogScope: a CSV test-log browser and multi-panel time-series viewer.

This package provides tools for indexing directories of CSV test logs by the
fields embedded in their filenames, filtering them and plotting the matched
rows using a Qt-based graphical interface.
"""

# PEP 396 style version marker
__version__ = "0.1.0"
__license__ = "AGPL-3.0-or-later"

__all__ = ["__version__", "__license__"]
