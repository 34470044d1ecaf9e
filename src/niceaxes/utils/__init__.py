"""Utility functions for niceaxes."""

from .logging import configure_logging, debug_logging, get_logger

__all__ = [
    "configure_logging",
    "debug_logging",
    "get_logger",
]
