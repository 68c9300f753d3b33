# src/LogScope/application/worker.py
# -*- coding: utf-8 -*-
"""
Background execution of directory scans, file matching and chart data
preparation on a QThreadPool.

The wrapped function runs off the GUI thread and must not touch widgets or
shared state; results come back through ``WorkerSignals`` and are handled
by slots on the GUI thread.
"""
import logging
import traceback
from typing import Any, Callable

from PySide6 import QtCore

log = logging.getLogger(__name__)


class WorkerSignals(QtCore.QObject):
    """
    Signals of a TaskWorker.

    finished: emitted last, after ``result`` or ``error``.
    error: ``(exception type, exception, formatted traceback)``.
    result: the function's return value.
    """
    finished = QtCore.Signal()
    error = QtCore.Signal(tuple)
    result = QtCore.Signal(object)


class TaskWorker(QtCore.QRunnable):
    """Runs ``fn(*args, **kwargs)`` once on a thread pool."""

    def __init__(self, fn: Callable[..., Any], *args, **kwargs):
        super().__init__()
        self.fn = fn
        self.args = args
        self.kwargs = kwargs
        self.signals = WorkerSignals()

    @property
    def name(self) -> str:
        return getattr(self.fn, '__name__', repr(self.fn))

    @QtCore.Slot()
    def run(self):
        log.debug(f"Worker started: {self.name}")
        try:
            result = self.fn(*self.args, **self.kwargs)
        except Exception as e:
            log.exception(f"Worker {self.name} failed")
            self.signals.error.emit((type(e), e, traceback.format_exc()))
        else:
            self.signals.result.emit(result)
        finally:
            self.signals.finished.emit()
