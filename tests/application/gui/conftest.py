"""
Fixtures for application/gui tests.
"""
import pytest
from PySide6 import QtCore, QtWidgets


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    """Keep QSettings written by the windows out of the user's config."""
    for fmt in (QtCore.QSettings.Format.NativeFormat, QtCore.QSettings.Format.IniFormat):
        QtCore.QSettings.setPath(fmt, QtCore.QSettings.Scope.UserScope, str(tmp_path / "settings"))
    yield


@pytest.fixture
def message_boxes(monkeypatch):
    """
    Replace the static QMessageBox helpers with recorders.

    ``question`` answers Yes unless ``calls['answer']`` is changed.
    """
    calls = {"warning": [], "information": [], "critical": [], "question": [],
             "answer": QtWidgets.QMessageBox.StandardButton.Yes}

    def recorder(kind):
        def _record(parent, title, text, *args, **kwargs):
            calls[kind].append(text)
            if kind == "question":
                return calls["answer"]
            return QtWidgets.QMessageBox.StandardButton.Ok
        return _record

    for kind in ("warning", "information", "critical", "question"):
        monkeypatch.setattr(QtWidgets.QMessageBox, kind, recorder(kind))
    return calls
