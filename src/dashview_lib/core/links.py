# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Links into the dashboard's shell and file-browser apps.

Extended job views point the user at the directory holding the job's output,
falling back to the user's home directory when that directory cannot be written to.
"""

import os
from pathlib import Path

from .config import CFG
from .logger import get_logger

logger = get_logger(__name__)


def writable_dir_or_home(directory: Path) -> Path:
    """
    Return `directory` if it is an absolute path to an existing writable directory,
    otherwise the home directory.

    Args:
        directory (Path): The preferred directory.

    Returns:
        Path: A directory the user can work in.
    """
    if (
        directory.is_absolute()
        and directory.is_dir()
        and os.access(directory, os.W_OK)
    ):
        return directory

    logger.debug(f"Directory '{directory}' is not writable, using home directory.")
    return Path.home()


def _join(base_url: str, path: Path) -> str:
    return base_url.rstrip("/") + "/" + str(path).lstrip("/")


def shell_url(path: Path) -> str:
    """Return the URL opening a terminal in `path`."""
    return _join(CFG.links.shell_url, path)


def files_url(path: Path) -> str:
    """Return the URL opening the file browser in `path`."""
    return _join(CFG.links.files_url, path)
