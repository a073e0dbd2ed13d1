# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for the dashview library.

This module provides helpers for lenient integer coercion, blank-value handling,
human-readable number and byte-size formatting, YAML output and panel sizing.
"""

import math
import re
from functools import lru_cache
from typing import Any

import yaml
from rich.console import Console

from .logger import get_logger

logger = get_logger(__name__)

# Unit names used by `number_to_human`, indexed by the power of 1000.
_HUMAN_UNITS = ["", "Thousand", "Million", "Billion", "Trillion", "Quadrillion"]

# Unit names used by `number_to_human_size`, indexed by the power of 1024.
_HUMAN_SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB", "PB", "EB"]


@lru_cache(maxsize=1)
def load_yaml_dumper() -> type[yaml.Dumper]:
    """Return the fastest available YAML dumper (CDumper if possible)."""
    try:
        from yaml import CDumper as Dumper  # type: ignore[attr-defined]

        logger.debug("Loaded YAML CDumper.")
    except ImportError:
        from yaml import Dumper

        logger.debug("Loaded default YAML dumper.")
    return Dumper


def to_int(value: Any) -> int:
    """
    Leniently convert a value to an integer.

    Integers are returned unchanged, floats are truncated and strings are
    converted using their leading integer (`"12abc"` -> 12). Anything that
    does not start with an integer, including `None`, converts to 0.

    Args:
        value (Any): The value to convert.

    Returns:
        int: The converted integer.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return 0 if math.isnan(value) or math.isinf(value) else int(value)
    if isinstance(value, str):
        match = re.match(r"^\s*([+-]?\d+)", value.replace("_", ""))
        return int(match.group(1)) if match else 0

    return 0


def presence(value: Any) -> Any:
    """
    Return the value, or None if it is blank.

    None, empty or whitespace-only strings and empty collections are blank.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    if isinstance(value, (list, tuple, dict, set)) and not value:
        return None

    return value


def _round_significant(value: float, digits: int) -> float:
    """Round a non-negative float to the given number of significant digits."""
    if value == 0:
        return 0.0

    exponent = math.floor(math.log10(abs(value)))
    return round(value, digits - 1 - exponent)


def _strip_zeros(value: float) -> str:
    """Format a float without insignificant trailing zeros."""
    text = f"{value:f}".rstrip("0").rstrip(".")
    return text or "0"


def number_to_human(number: int, precision: int = 3) -> str:
    """
    Convert a count into a short human-readable phrase.

    Numbers are rounded to `precision` significant digits and scaled by
    powers of 1000, e.g. `1234` -> `"1.23 Thousand"`, `500` -> `"500"`.

    Args:
        number (int): The number to convert.
        precision (int): Number of significant digits to keep.

    Returns:
        str: The human-readable representation.
    """
    sign = "-" if number < 0 else ""
    rounded = _round_significant(abs(float(number)), precision)

    exponent = 0
    if rounded >= 1000:
        exponent = min(int(math.log10(rounded) // 3), len(_HUMAN_UNITS) - 1)

    scaled = _round_significant(rounded / 1000**exponent, precision)
    unit = _HUMAN_UNITS[exponent]
    text = f"{sign}{_strip_zeros(scaled)}"
    return f"{text} {unit}" if unit else text


def number_to_human_size(size: int, precision: int = 3) -> str:
    """
    Convert a number of bytes into a human-readable size.

    Sizes are scaled by powers of 1024 and rounded to `precision`
    significant digits, e.g. `1234` -> `"1.21 KB"`, `1` -> `"1 Byte"`.

    Args:
        size (int): Number of bytes.
        precision (int): Number of significant digits to keep.

    Returns:
        str: The human-readable size.
    """
    size = int(size)
    if abs(size) < 1024:
        return f"{size} {'Byte' if abs(size) == 1 else 'Bytes'}"

    exponent = min(
        int(math.log(abs(size), 1024)),
        len(_HUMAN_SIZE_UNITS) - 1,
    )
    # guard against floating point error at exact powers of 1024
    if abs(size) >= 1024 ** (exponent + 1) and exponent + 1 < len(_HUMAN_SIZE_UNITS):
        exponent += 1

    scaled = _round_significant(abs(size) / 1024**exponent, precision)
    sign = "-" if size < 0 else ""
    return f"{sign}{_strip_zeros(scaled)} {_HUMAN_SIZE_UNITS[exponent]}"


def get_panel_width(
    console: Console, factor: int, min_width: int | None, max_width: int | None
):
    """
    Calculate the width of a panel relative to the console width, constrained by
    optional minimum and maximum width values.

    Args:
        console (Console): A rich Console-like object that provides terminal size.
        factor (int): A divisor used to scale down the terminal width.
        min_width (int): The minimum allowable panel width. If None, no lower bound is applied.
        max_width (int): The maximum allowable panel width. If None, no upper bound is applied.

    Returns:
        int: The computed panel width after applying scaling and bounds.
    """

    term_width = console.size.width
    panel_width = term_width // factor
    if min_width is not None:
        panel_width = max(panel_width, min_width)
    if max_width is not None:
        panel_width = min(panel_width, max_width)

    return panel_width
