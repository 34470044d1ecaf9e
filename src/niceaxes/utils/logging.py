"""
Logging helpers for niceaxes.

Library modules only ever do::

    from niceaxes.utils.logging import get_logger
    logger = get_logger(__name__)

and log step choices and fallbacks at DEBUG. The package logger carries a
NullHandler (see ``niceaxes/__init__.py``) so nothing is printed unless the
host application configures logging.

Scripts and notebooks that want to see those messages call
:func:`configure_logging` once, or wrap a single call in :func:`debug_logging`
to trace how a tick step or a color ramp was chosen::

    from niceaxes.utils.logging import debug_logging
    with debug_logging():
        compute_ticks(0.0, 8803.364)

niceaxes never writes log files.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, Union

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "niceaxes"
LOG_LEVEL_ENV = "NICEAXES_LOG_LEVEL"

LevelLike = Union[str, int]


def _resolve_level(level: Optional[LevelLike]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def _is_stderr_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and handler.stream is sys.stderr


def configure_logging(
    level: Optional[LevelLike] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> logging.Handler:
    """
    Send niceaxes log records to stderr. For scripts, never for library code.

    Only the ``niceaxes`` logger is touched; the root logger and other
    libraries keep whatever configuration the application gave them.

    Parameters
    ----------
    level:
        Level name or number. Defaults to ``$NICEAXES_LOG_LEVEL`` or INFO.
    fmt, datefmt:
        Formatter strings; default to :data:`DEFAULT_FMT` / :data:`DEFAULT_DATEFMT`.
    force:
        Drop every existing handler first. Without it an existing stderr
        handler is reused and only the levels are updated.

    Returns
    -------
    logging.Handler
        The stderr handler now attached to the ``niceaxes`` logger.
    """
    level = _resolve_level(level)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if _is_stderr_handler(h):
                h.setLevel(level)
                return h

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT))
    logger.addHandler(console)
    return console


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger inside the ``niceaxes`` namespace.

    ``None`` gives the package logger. Dotted module names that already start
    with ``niceaxes`` are used as is; anything else is nested under it, so
    ``get_logger("ticks")`` is ``niceaxes.ticks``.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


@contextmanager
def debug_logging(level: LevelLike = logging.DEBUG) -> Iterator[logging.Handler]:
    """Temporarily log niceaxes records at ``level`` to stderr.

    The logger level and handlers are restored on exit.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_level = logger.level
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(_resolve_level(level))
    console.setFormatter(logging.Formatter(fmt=DEFAULT_FMT, datefmt=DEFAULT_DATEFMT))
    logger.addHandler(console)
    logger.setLevel(_resolve_level(level))
    try:
        yield console
    finally:
        logger.removeHandler(console)
        console.close()
        logger.setLevel(saved_level)
