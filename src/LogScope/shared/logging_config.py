# src/LogScope/shared/logging_config.py
# -*- coding: utf-8 -*-
"""
Logging setup for LogScope.

Every module logs through ``logging.getLogger(__name__)``; ``setup_logging``
attaches the handlers once at startup to the ``LogScope`` package logger:

- the console (stdout),
- a timestamped file kept per run,
- ``app.log``, rewritten on every run so it always holds the latest session.

Development mode (``--dev`` or ``LOGSCOPE_DEV_MODE=1``) lowers the level to
DEBUG and adds the source location to each record.
"""
import os
import sys
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = 'LogScope'
DEFAULT_LOG_DIR = Path.home() / '.logscope' / 'logs'
LATEST_LOG_NAME = 'app.log'
DEV_MODE_ENV_VAR = 'LOGSCOPE_DEV_MODE'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEV_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


def is_dev_mode_env() -> bool:
    """True if ``LOGSCOPE_DEV_MODE`` is set to 1, true or yes."""
    return os.environ.get(DEV_MODE_ENV_VAR, '').strip().lower() in ('1', 'true', 'yes')


def _attach(logger: logging.Logger, handler: logging.Handler,
            level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(dev_mode: bool = False,
                  log_dir: Optional[Union[str, Path]] = None,
                  log_filename: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again replaces the previous handlers.

    Args:
        dev_mode: DEBUG level and ``file:line`` in every record.
        log_dir: Folder for the log files; defaults to ``~/.logscope/logs``.
        log_filename: Name of the per-run log file; defaults to
            ``logscope_<timestamp>.log``.

    Returns:
        The configured ``LogScope`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)

    level = logging.DEBUG if dev_mode else logging.INFO
    formatter = logging.Formatter(DEV_LOG_FORMAT if dev_mode else LOG_FORMAT)

    directory = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    directory.mkdir(parents=True, exist_ok=True)
    if not log_filename:
        log_filename = f"logscope_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
    run_log = directory / log_filename

    _attach(logger, logging.StreamHandler(sys.stdout), level, formatter)
    _attach(logger, logging.FileHandler(run_log), level, formatter)
    _attach(logger, logging.FileHandler(directory / LATEST_LOG_NAME, mode='w'), level, formatter)

    logger.info(f"Logging to {run_log} ({'development' if dev_mode else 'normal'} mode)")
    return logger

