# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Logging for dashview.

All dashview loggers write through rich's RichHandler to stderr so that the
rendered job panels and quota tables on stdout stay clean.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import CFG


def debug_mode() -> bool:
    """Whether the debug-mode environment variable is set."""
    return os.environ.get(CFG.env_vars.debug_mode) is not None


def get_logger(name: str, show_time: bool = False) -> logging.Logger:
    """
    Return a logger writing to stderr through RichHandler.

    In debug mode, the level is lowered to DEBUG, timestamps are always shown
    and the source location of each record is included.

    Args:
        name (str): Name of the logger, usually `__name__`.
        show_time (bool): Show timestamps even outside of debug mode.

    Returns:
        logging.Logger: The configured logger.
    """
    debug = debug_mode()
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # asking for the same logger twice must not duplicate output
    logger.handlers.clear()
    logger.addHandler(_create_handler(level, show_time or debug, debug))
    logger.propagate = False

    return logger


def _create_handler(level: int, show_time: bool, show_path: bool) -> RichHandler:
    handler = RichHandler(
        console=Console(stderr=True),
        markup=False,
        rich_tracebacks=True,
        tracebacks_width=None,
        show_level=True,
        show_time=show_time,
        show_path=show_path,
        omit_repeated_times=False,
        log_time_format=CFG.date_formats.standard,
    )
    handler.setLevel(level)

    return handler
