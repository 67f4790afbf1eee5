"""
Logging setup for grid training runs.

Progress of ``ModelGrid.train`` is reported through the ``model_grid``
logger hierarchy: one record when a model's training starts, one when it
completes and a warning when it fails. ``setup_logging`` attaches a
coloured console handler and, optionally, a per-run log file to that
hierarchy without touching the root logger of the host application.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import coloredlogs

PACKAGE_LOGGER = "model_grid"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_MARKER = "_model_grid_handler"


def _remove_own_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[str] = None,
    run_name: Optional[str] = None,
    propagate: bool = False,
) -> logging.Logger:
    """
    Route training progress of the grid to the console and optionally a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_level: Level for the ``model_grid`` loggers, e.g. ``"DEBUG"`` to
            also see the consolidated configuration of every model.
        log_dir: Directory for a ``<run_name>_<timestamp>.log`` file.
        run_name: Prefix of the log file name, ``grid`` when omitted.
        propagate: Also pass records on to the root logger.

    Returns:
        The ``model_grid`` package logger.
    """
    level = getattr(logging, log_level.upper())
    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_own_handlers(logger)
    logger.setLevel(level)
    logger.propagate = propagate

    known = set(logger.handlers)
    coloredlogs.install(level=level, logger=logger, fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in logger.handlers:
        if handler not in known:
            setattr(handler, _HANDLER_MARKER, True)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"{run_name or 'grid'}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        setattr(file_handler, _HANDLER_MARKER, True)
        logger.addHandler(file_handler)

        logger.info("Logging grid training to file: %s", log_file)

    return logger


__all__ = ["PACKAGE_LOGGER", "setup_logging"]
