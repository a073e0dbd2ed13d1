# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import re
from collections.abc import Mapping
from typing import Any

from dashview_lib.core.common import presence
from dashview_lib.core.error import DVError, DVUnparseableExtendedDataError
from dashview_lib.core.logger import get_logger
from dashview_lib.properties.size import Size

logger = get_logger(__name__)


class TorqueNative:
    """
    Named access to the native payload of a Torque job.

    Absent values fall back to the defaults shown on the dashboard.
    Values that are present but malformed raise `DVUnparseableExtendedDataError`.
    """

    # Size reported for memory usage that is not available.
    DEFAULT_SIZE = "0 b"

    def __init__(self, job_id: str, native: Any):
        if not isinstance(native, Mapping):
            raise DVUnparseableExtendedDataError(
                f"Native data of job '{job_id}' is not a mapping: {type(native).__name__}."
            )

        self._job_id = job_id
        self._native = native

    def getWalltime(self) -> str | None:
        """Requested walltime."""
        return self._resourceList().get("walltime")

    def getWalltimeUsed(self) -> str | int:
        """Walltime used so far, 0 if not reported."""
        return presence(self._resourcesUsed().get("walltime")) or 0

    def getSubmitArgs(self) -> str:
        """Arguments passed to qsub, 'None' if not reported."""
        return presence(self._native.get("submit_args")) or "None"

    def getOutputPath(self) -> str:
        """
        Path to the output file of the job.

        Torque reports the output path as `host:path`; the host is stripped.
        Without a host separator the raw value is returned.
        """
        raw = str(self._native.get("Output_Path") or "")
        parts = raw.split(":")
        if len(parts) > 1 and parts[1]:
            return parts[1]

        return raw

    def getPPN(self) -> int:
        """
        Number of processes per node requested through `nodes=N:ppn=M`.

        Returns 0 if no `ppn` was requested.
        """
        nodes = str(self._resourceList().get("nodes") or "")
        if "ppn=" not in nodes:
            return 0

        ppn = nodes.split("ppn=")[1]
        if not (match := re.match(r"\d+", ppn)):
            raise DVUnparseableExtendedDataError(
                f"Could not parse processes per node of job '{self._job_id}' from '{nodes}'."
            )

        return int(match.group())

    def getQueue(self) -> str | None:
        """Queue the job was submitted to."""
        return self._native.get("queue")

    def getCPUTime(self) -> str | int:
        """CPU time used so far, 0 if not reported."""
        return presence(self._resourcesUsed().get("cput")) or 0

    def getMem(self) -> Size:
        """Resident memory used by the job."""
        return self._getSize("mem", "memory")

    def getVMem(self) -> Size:
        """Virtual memory used by the job."""
        return self._getSize("vmem", "virtual memory")

    def _getSize(self, key: str, property_name: str) -> Size:
        raw = presence(self._resourcesUsed().get(key)) or TorqueNative.DEFAULT_SIZE

        try:
            return Size.fromString(raw)
        except DVError as e:
            raise DVUnparseableExtendedDataError(
                f"Could not parse {property_name} used by job '{self._job_id}': {e}"
            ) from e

    def _resourceList(self) -> Mapping[str, Any]:
        return self._section("Resource_List")

    def _resourcesUsed(self) -> Mapping[str, Any]:
        return self._section("resources_used")

    def _section(self, name: str) -> Mapping[str, Any]:
        """
        Return a nested section of the payload, or an empty mapping if it is absent.

        Raises:
            DVUnparseableExtendedDataError: If the section is not a mapping.
        """
        section = self._native.get(name)
        if section is None:
            logger.debug(f"Job '{self._job_id}' has no '{name}' section.")
            return {}

        if not isinstance(section, Mapping):
            raise DVUnparseableExtendedDataError(
                f"Section '{name}' of job '{self._job_id}' is not a mapping."
            )

        return section
