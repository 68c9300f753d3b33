# src/LogScope/shared/__init__.py
"""
Shared utilities for the LogScope application.

This module contains:
- Constants (filename layout, scaling, axis and window settings)
- Logging configuration
- Error classes
- Plot factory
"""

from . import constants
from . import error_handling
from . import logging_config
from . import plot_factory

from .error_handling import (
    LogScopeError,
    LogReadError,
    PlottingError,
    ExportError,
)
from .logging_config import setup_logging
from .plot_factory import LogScopePlotFactory, configure_pyqtgraph_globally

__all__ = [
    # Error Handling
    'LogScopeError',
    'LogReadError',
    'PlottingError',
    'ExportError',

    # Logging
    'setup_logging',

    # Plot Factory
    'LogScopePlotFactory',
    'configure_pyqtgraph_globally',

    # Modules
    'constants',
    'error_handling',
    'logging_config',
    'plot_factory',
]
