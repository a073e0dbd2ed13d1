# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import asdict, dataclass, fields
from typing import Any, Self

from dashview_lib.batch.job import JobInfo
from dashview_lib.batch.parsers import (
    DefaultExtendedParser,
    ExtendedData,
    ParserMeta,
)
from dashview_lib.core.config import CFG
from dashview_lib.core.error import DVError
from dashview_lib.core.logger import get_logger
from dashview_lib.properties.states import JobStatus

logger = get_logger(__name__)


@dataclass(frozen=True)
class JobView:
    """
    Display-ready summary of a scheduler job.

    The condensed view carries the fields every scheduler reports.
    The extended view adds resource requests and usage; those fields
    are `None` unless the view was built with `extended=True`.
    """

    job_id: str
    job_name: str | None
    username: str | None
    account: str | None
    status: JobStatus
    cluster: str
    # Whether a native parser exists for the cluster's adapter.
    extended_available: bool
    # Only set for running and completed jobs.
    nodes: list[str] | None = None
    start_time: int | None = None

    walltime: str | None = None
    walltime_used: str | int | None = None
    submit_args: str | None = None
    output_path: str | None = None
    node_count: int | None = None
    ppn: int | str | None = None
    total_cpu: int | None = None
    queue: str | None = None
    cpu_time: str | int | None = None
    mem: str | None = None
    vmem: str | None = None
    terminal_path: str | None = None
    fs_path: str | None = None

    @classmethod
    def fromInfo(
        cls, info: JobInfo, cluster: str | None = None, extended: bool = False
    ) -> Self:
        """
        Project a job record into a view.

        Args:
            info (JobInfo): The job record from the scheduler client.
            cluster (str | None): Identifier of the cluster the job runs on.
                Defaults to the first configured cluster.
            extended (bool): Whether to include the extended fields.

        Returns:
            JobView: The view of the job.

        Raises:
            DVError: If the cluster is not configured.
            DVUnparseableExtendedDataError: If extended data was requested
                and the native payload of the job is malformed.
        """
        if cluster is None:
            cluster = CFG.clusters.default_cluster
        if cluster is None:
            raise DVError("No cluster is configured.")

        values: dict[str, Any] = {
            "job_id": info.id,
            "job_name": info.job_name,
            "username": info.job_owner,
            "account": info.accounting_id,
            "status": info.status,
            "cluster": cluster,
            "extended_available": ParserMeta.hasNativeParser(cluster),
        }
        values |= JobView._dispatchFields(info)

        if extended:
            parser = (
                ParserMeta.fromAdapter(ParserMeta.adapterOf(cluster))
                or DefaultExtendedParser
            )
            logger.debug(
                f"Parsing extended data of job '{info.id}' using '{parser.adapterName()}'."
            )
            values |= asdict(parser.parse(info))
            values |= JobView._dispatchFields(info)

        return cls(**values)

    def toDict(self) -> dict[str, Any]:
        """
        Return the view as a plain dictionary.

        The status is converted to its string name. The extended fields are
        omitted from condensed views.
        """
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, JobStatus):
                value = str(value)
            result[f.name] = value

        # extended views always carry a rendered memory usage
        if self.mem is None:
            for name in (f.name for f in fields(ExtendedData)):
                result.pop(name, None)

        return result

    @staticmethod
    def _dispatchFields(info: JobInfo) -> dict[str, Any]:
        """
        Node names and start time of jobs that were dispatched.

        A started job without a known dispatch time keeps `start_time` unset.
        """
        if not info.status.hasStarted():
            return {}

        return {
            "nodes": [node.name for node in info.allocated_nodes],
            "start_time": (
                int(info.dispatch_time.timestamp())
                if info.dispatch_time is not None
                else None
            ),
        }
