# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Reading of Torque `qstat -f` dumps into job records.
"""

import re
from datetime import datetime
from typing import Any

from dashview_lib.batch.job import JobInfo, NodeInfo
from dashview_lib.core.common import to_int
from dashview_lib.core.config import CFG
from dashview_lib.core.error import DVError
from dashview_lib.core.logger import get_logger
from dashview_lib.properties.states import JobStatus

logger = get_logger(__name__)


def parseTorqueDumpToDictionary(text: str) -> dict[str, str]:
    """
    Parse a Torque info dump into a flat dictionary.

    Long values wrapped by qstat onto tab-indented continuation lines are joined.

    Returns:
        dict[str, str]: Dictionary mapping keys to values.
    """
    result: dict[str, str] = {}
    last_key: str | None = None

    for raw_line in text.splitlines():
        line = raw_line.rstrip()

        if " = " not in line:
            # continuation of a wrapped value
            if last_key is not None and raw_line.startswith("\t") and line.strip():
                result[last_key] += line.strip()
            continue

        key, value = line.split(" = ", 1)
        last_key = key.strip()
        result[last_key] = value.strip()

    return result


def parseMultiTorqueDumpToDictionaries(text: str) -> list[tuple[dict[str, str], str]]:
    """
    Parse a Torque dump containing metadata for multiple jobs into structured dictionaries.

    Args:
        text (str): The raw dump containing information about one or more jobs.

    Returns:
        list[tuple[dict[str, str], str]]: A list of tuples, each containing:
            - dict[str, str]: Parsed metadata for a single job.
            - str: Job ID extracted from the metadata.

    Raises:
        DVError: If the job ID cannot be extracted.
    """
    if not text.strip():
        return []

    data = []
    block, identifier = [], None
    pattern = re.compile(r"^\s*Job Id:\s*(.*)$")

    for line in text.splitlines():
        # if the line is empty, start a new block
        if not line.strip():
            if block:
                data.append((parseTorqueDumpToDictionary("\n".join(block)), identifier))
                block, identifier = [], None
            continue

        if not block:
            m = pattern.match(line)
            if not m:
                raise DVError(
                    f"Invalid Torque dump format. Could not extract job ID from:\n{line}"
                )
            identifier = m.group(1).strip()
        block.append(line)

    # last block (no trailing newline)
    if block:
        data.append((parseTorqueDumpToDictionary("\n".join(block)), identifier))

    logger.debug(f"Detected and parsed metadata for {len(data)} Torque jobs.")
    return data


def nestDottedKeys(info: dict[str, str]) -> dict[str, Any]:
    """
    Turn `Resource_List.walltime`-style keys into nested mappings.

    Example:
        {"Resource_List.walltime": "01:00:00"} -> {"Resource_List": {"walltime": "01:00:00"}}
    """
    nested: dict[str, Any] = {}
    for key, value in info.items():
        section, _, name = key.partition(".")
        if not name:
            nested[key] = value
            continue

        target = nested.setdefault(section, {})
        if not isinstance(target, dict):
            logger.debug(f"Key '{section}' is both a value and a section, keeping the value.")
            continue
        target[name] = value

    return nested


def jobInfoFromDictionary(job_id: str, info: dict[str, str]) -> JobInfo:
    """
    Construct a JobInfo from the flat dictionary of a single Torque job.

    Args:
        job_id (str): The identifier of the job.
        info (dict[str, str]): Parsed `qstat -f` metadata of the job.

    Returns:
        JobInfo: The job record, with the nested metadata attached as the native payload.
    """
    nodes = _parseExecHost(info.get("exec_host"))
    if nodes:
        procs = sum(node.procs or 0 for node in nodes)
    else:
        procs = to_int(info.get("Resource_List.procs") or info.get("Resource_List.ncpus")) or None

    owner = info.get("Job_Owner")

    return JobInfo(
        id=job_id,
        status=JobStatus.fromCode(info.get("job_state", "")),
        job_name=info.get("Job_Name"),
        job_owner=owner.split("@")[0] if owner else None,
        accounting_id=info.get("Account_Name"),
        allocated_nodes=nodes,
        dispatch_time=_parseDispatchTime(job_id, info),
        procs=procs,
        queue_name=info.get("queue"),
        native=nestDottedKeys(info),
    )


def jobInfosFromDump(text: str) -> list[JobInfo]:
    """
    Construct JobInfo records for all jobs in a `qstat -f` dump.

    Raises:
        DVError: If the dump is malformed.
    """
    return [
        jobInfoFromDictionary(job_id, info)
        for info, job_id in parseMultiTorqueDumpToDictionaries(text)
    ]


def _parseExecHost(raw: str | None) -> list[NodeInfo]:
    """
    Parse the `exec_host` attribute into allocated nodes.

    Torque reports one `host/slots` item per allocation, joined by `+`,
    where slots are either single indices or ranges (`n1/0-3+n2/0,2`).
    """
    if not raw:
        return []

    procs: dict[str, int] = {}
    for item in raw.split("+"):
        host, _, slots = item.strip().partition("/")
        if not host:
            continue
        procs[host] = procs.get(host, 0) + _countSlots(slots)

    return [NodeInfo(name=name, procs=count) for name, count in procs.items()]


def _countSlots(slots: str) -> int:
    if not slots:
        return 1

    count = 0
    for part in slots.split(","):
        start, _, end = part.partition("-")
        count += to_int(end) - to_int(start) + 1 if end else 1

    return count


def _parseDispatchTime(job_id: str, info: dict[str, str]) -> datetime | None:
    if raw := info.get("start_time"):
        try:
            return datetime.fromtimestamp(int(raw))
        except ValueError:
            pass

        # some Torque versions report a formatted date instead of an epoch
        try:
            return datetime.strptime(raw, CFG.date_formats.pbs)
        except ValueError:
            logger.warning(f"Could not parse the start time of job '{job_id}': '{raw}'.")
            return None

    return None
