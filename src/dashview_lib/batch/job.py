# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from dashview_lib.properties.states import JobStatus


@dataclass(frozen=True)
class NodeInfo:
    """
    A compute node allocated to a job.
    """

    # Hostname of the node.
    name: str
    # Number of processors allocated on the node.
    procs: int | None = None


@dataclass(frozen=True)
class JobInfo:
    """
    A job record as returned by the scheduler client.

    Only `id` and `status` are always known; everything else is `None`
    (or empty) when the scheduler does not report it. The `native` mapping
    holds the adapter-specific payload in the scheduler's own nested layout.
    """

    # Scheduler job identifier.
    id: str
    # State of the job.
    status: JobStatus = JobStatus.UNDETERMINED
    # Name of the job.
    job_name: str | None = None
    # Owner of the job.
    job_owner: str | None = None
    # Account the job is charged to.
    accounting_id: str | None = None
    # Nodes allocated to the job.
    allocated_nodes: list[NodeInfo] = field(default_factory=list)
    # Time at which the job was dispatched to its nodes.
    dispatch_time: datetime | None = None
    # Total number of processors allocated to the job.
    procs: int | None = None
    # Queue the job was submitted to.
    queue_name: str | None = None
    # Adapter-specific payload.
    native: dict[str, Any] = field(default_factory=dict)
