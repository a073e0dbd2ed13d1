# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import re
from dataclasses import dataclass
from typing import Self

from dashview_lib.core.config import CFG
from dashview_lib.core.error import DVError


@dataclass(init=False)
class Size:
    """
    Represents a memory or storage size.

    The value is stored internally in bytes. When converted to a string,
    it is displayed in the largest human-readable unit such that the relative
    rounding error does not exceed `CFG.size.max_rounding_error`.
    """

    value: int

    _unit_map = {
        "b": 1,
        "kb": 1024,
        "mb": 1024 * 1024,
        "gb": 1024 * 1024 * 1024,
        "tb": 1024 * 1024 * 1024 * 1024,
        "pb": 1024 * 1024 * 1024 * 1024 * 1024,
    }

    def __init__(self, value: int, unit: str = "b"):
        unit = unit.lower()
        if unit not in self._unit_map:
            raise DVError(f"Unsupported unit for size '{unit}'.")

        if value < 0:
            raise DVError(f"Size cannot be negative: '{value}{unit}'.")

        self.value = value * self._unit_map[unit]

    @classmethod
    def fromString(cls, s: str) -> Self:
        """
        Create a Size object from a string.

        Args:
            s (str): A string representation of the size, e.g., "10kb", "10 kb", "10k", "0 b".

        Returns:
            Size: A Size instance with parsed value and unit.

        Raises:
            DVError: If the string cannot be parsed or contains an invalid unit.
        """
        match = re.match(r"^\s*(\d+)\s*([a-zA-Z]+)\s*$", str(s))
        if not match:
            raise DVError(f"Invalid size string: '{s}'.")
        value, unit = match.groups()

        # normalize single-letter units to their full form by appending 'b'
        # but skip bytes
        unit = unit.lower()
        if len(unit) == 1 and unit != "b":
            unit = unit + "b"

        return cls(int(value), unit)

    def __str__(self) -> str:
        for unit, factor in reversed(list(self._unit_map.items())):
            value = self.value / factor

            if value >= 1:
                rounded = round(value)
                # compute relative error from rounding
                error = abs(rounded * factor - self.value) / self.value
                if error <= CFG.size.max_rounding_error or unit == "b":
                    return f"{rounded}{unit}"
                # otherwise, try smaller unit

        # only zero sizes get here
        return f"{self.value}b"
