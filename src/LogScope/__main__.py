#!/usr/bin/env python3
"""
Command line entry point: ``python -m LogScope`` or the ``logscope`` script.

Only logging and version options exist; everything else happens in the GUI.
"""
import argparse
import os
import sys

from LogScope.shared.logging_config import DEV_MODE_ENV_VAR


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="logscope",
        description="Browse and plot CSV test logs.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--dev", action="store_true",
                        help="verbose (DEBUG) logging with source locations")
    parser.add_argument("--log-dir", default=None,
                        help="folder for log files (default: ~/.logscope/logs)")
    parser.add_argument("--version", action="store_true",
                        help="print the version and exit")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.version:
        from LogScope import __version__
        print(f"LogScope version {__version__}")
        return 0

    gui_args = []
    if args.dev:
        os.environ[DEV_MODE_ENV_VAR] = "1"
        gui_args.append("--dev")
    if args.log_dir:
        gui_args += ["--log-dir", args.log_dir]

    # Imported late so --version works without Qt
    from LogScope.application.__main__ import run_gui
    return run_gui(gui_args)


if __name__ == "__main__":
    sys.exit(main())
