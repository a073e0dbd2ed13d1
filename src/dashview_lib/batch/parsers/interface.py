# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABC, abstractmethod
from dataclasses import dataclass

from dashview_lib.batch.job import JobInfo


@dataclass(frozen=True)
class ExtendedData:
    """
    Detailed job fields shown in the extended job view.
    """

    # Requested walltime.
    walltime: str | None
    # Walltime used so far.
    walltime_used: str | int
    # Arguments the job was submitted with.
    submit_args: str
    # Path to the output file of the job.
    output_path: str
    # Number of allocated nodes.
    node_count: int
    # Processes per node.
    ppn: int | str
    # Total number of allocated CPUs.
    total_cpu: int | None
    # Queue the job was submitted to.
    queue: str | None
    # CPU time used so far.
    cpu_time: str | int
    # Human-readable resident memory used.
    mem: str
    # Human-readable virtual memory used.
    vmem: str
    # Link opening a terminal in the job's directory.
    terminal_path: str
    # Link opening the file browser in the job's directory.
    fs_path: str


class ExtendedParserInterface(ABC):
    """
    Abstract base class for building the extended view of a job.

    Implementations understanding the native payload of a scheduler are
    registered in `ParserMeta` under the adapter name they support.
    """

    @classmethod
    @abstractmethod
    def adapterName(cls) -> str:
        """
        Return the name of the scheduler adapter this parser understands.

        Returns:
            str: Name of the adapter as used in the cluster configuration.
        """
        pass

    @classmethod
    @abstractmethod
    def parse(cls, info: JobInfo) -> ExtendedData:
        """
        Extract the extended fields of a job.

        Args:
            info (JobInfo): The job record.

        Returns:
            ExtendedData: The extended fields.

        Raises:
            DVUnparseableExtendedDataError: If the native payload is malformed.
        """
        pass
