"""Utility helpers."""

from .logging import PACKAGE_LOGGER, setup_logging

__all__ = ["PACKAGE_LOGGER", "setup_logging"]
