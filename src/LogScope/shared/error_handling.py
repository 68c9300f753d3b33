"""
Custom Exception classes for LogScope.

This module defines a hierarchy of exception classes specific to LogScope.
All custom exceptions inherit from the base LogScopeError class, which
itself inherits from Python's Exception class.

Malformed filenames, unparseable cells and missing columns are deliberately
NOT errors; they are handled leniently where they occur.
"""


class LogScopeError(Exception):
    """Base class for LogScope specific errors."""

    pass


class LogReadError(LogScopeError, IOError):
    """Error occurred while reading a CSV log file."""

    pass


class PlottingError(LogScopeError):
    """Error occurred during chart generation or update."""

    pass


class ExportError(LogScopeError, IOError):
    """Error occurred while capturing, copying or saving a chart image."""

    pass

