"""Observability – logging helpers."""
from eventually.observability.logging import LIBRARY_LOGGER, JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "LIBRARY_LOGGER", "get_logger"]
