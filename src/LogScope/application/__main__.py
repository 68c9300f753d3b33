# src/LogScope/application/__main__.py
# -*- coding: utf-8 -*-
"""
GUI startup for LogScope.

``run_gui`` configures logging, creates (or reuses) the QApplication, applies
the global pyqtgraph look, shows the MainWindow and runs the event loop.
"""
import sys
import logging
import argparse

from PySide6 import QtWidgets

from LogScope.application.gui.main_window import MainWindow
from LogScope.shared.logging_config import is_dev_mode_env, setup_logging
from LogScope.shared.plot_factory import configure_pyqtgraph_globally

log = logging.getLogger('LogScope.application')


def parse_arguments(argv=None):
    """Parse the GUI options; unknown arguments are left for Qt."""
    parser = argparse.ArgumentParser(description="LogScope CSV test log viewer")
    parser.add_argument('--dev', action='store_true', help='verbose logging')
    parser.add_argument('--log-dir', help='folder for log files')
    parser.add_argument('--log-file', help='name of the per-run log file')
    args, _unknown = parser.parse_known_args(argv)
    return args


def run_gui(argv=None) -> int:
    """Start the GUI and return the event loop's exit code."""
    args = parse_arguments(argv)
    dev_mode = args.dev or is_dev_mode_env()
    setup_logging(dev_mode=dev_mode, log_dir=args.log_dir, log_filename=args.log_file)

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    configure_pyqtgraph_globally()

    try:
        window = MainWindow()
    except Exception as e:
        log.critical(f"MainWindow could not be created: {e}", exc_info=True)
        QtWidgets.QMessageBox.critical(None, "LogScope", f"Failed to start:\n{e}\n\nSee the log file for details.")
        return 1
    window.show()

    exit_code = app.exec()
    log.info(f"Event loop exited with code {exit_code}")
    return exit_code


if __name__ == '__main__':
    sys.exit(run_gui())
