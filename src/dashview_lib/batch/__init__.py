# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Job records handed over by the scheduler client and the parsers of their
scheduler-specific payloads.

It provides:

- `JobInfo` and `NodeInfo`: the shape of a job record as returned by the
  scheduler client, with an adapter-specific `native` payload attached.

- `TorqueNative` and `jobInfosFromDump`: named access to Torque's native
  payload and a reader for `qstat -f` dumps.

- `ExtendedParserInterface` and `ParserMeta`: native extended-data parsers and
  the registry selecting one by the cluster's adapter name.
"""

from .job import JobInfo, NodeInfo

__all__ = [
    "JobInfo",
    "NodeInfo",
]
