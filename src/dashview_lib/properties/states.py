# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from enum import Enum
from typing import Self

from dashview_lib.core.logger import get_logger

logger = get_logger(__name__)


class JobStatus(Enum):
    """
    State of a job as reported by the scheduler client.
    """

    UNDETERMINED = 1
    QUEUED = 2
    QUEUED_HELD = 3
    SUSPENDED = 4
    RUNNING = 5
    COMPLETED = 6

    def __str__(self) -> str:
        """
        Return the lowercase string representation of the enum variant.

        Returns:
            str: The name of the state in lowercase.
        """
        return self.name.lower()

    @classmethod
    def _codeToState(cls) -> dict[str, str]:
        """
        Internal mapping from one-letter Torque codes to state names.

        Returns:
            dict[str, str]: Mapping of codes to corresponding state names.
        """
        return {
            "Q": "queued",
            "H": "queued_held",
            "T": "queued_held",
            "W": "queued_held",
            "S": "suspended",
            "R": "running",
            "E": "running",
            "C": "completed",
        }

    @classmethod
    def fromCode(cls, code: str) -> Self:
        """
        Convert a one-letter scheduler code to a JobStatus enum variant.

        Args:
            code (str): One-letter code representing the job state.

        Returns:
            JobStatus: Corresponding enum variant, or UNDETERMINED if the code is invalid.
        """
        code = code.strip().upper()
        if code not in cls._codeToState():
            logger.debug(f"Unknown job state code '{code}'.")
            return cls.UNDETERMINED

        return cls[cls._codeToState()[code].upper()]

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a state name to the corresponding JobStatus enum variant.

        Args:
            s (str): Name of the state (case-insensitive).

        Returns:
            JobStatus: Corresponding enum variant. Returns UNDETERMINED if no match is found.
        """
        try:
            return cls[s.strip().upper()]
        except KeyError:
            return cls.UNDETERMINED

    def hasStarted(self) -> bool:
        """Whether the job has been dispatched to its nodes."""
        return self in (JobStatus.RUNNING, JobStatus.COMPLETED)

    @property
    def color(self) -> str:
        """
        Return the display color associated with this JobStatus.

        Returns:
            str: A string representing the color for presentation purposes.
        """
        return {
            self.UNDETERMINED: "grey70",
            self.QUEUED: "bright_magenta",
            self.QUEUED_HELD: "bright_magenta",
            self.SUSPENDED: "bright_black",
            self.RUNNING: "bright_blue",
            self.COMPLETED: "bright_green",
        }[self]
