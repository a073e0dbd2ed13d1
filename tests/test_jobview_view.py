# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from dataclasses import fields
from datetime import datetime

import pytest

from dashview_lib.batch.job import JobInfo, NodeInfo
from dashview_lib.batch.parsers import ExtendedData
from dashview_lib.core.config import CFG
from dashview_lib.core.error import DVError, DVUnparseableExtendedDataError
from dashview_lib.jobview.view import JobView
from dashview_lib.properties.states import JobStatus


@pytest.fixture
def clusters(monkeypatch):
    monkeypatch.setattr(
        CFG.clusters, "adapters", {"owens": "torque", "pitzer": "slurm"}
    )


def _info(status=JobStatus.RUNNING, native=None):
    return JobInfo(
        id="123.server",
        status=status,
        job_name="test_job",
        job_owner="alice",
        accounting_id="proj1",
        allocated_nodes=[NodeInfo("n1", 4), NodeInfo("n2", 4)],
        dispatch_time=datetime.fromtimestamp(1700000000),
        procs=8,
        queue_name="batch",
        native=native
        if native is not None
        else {
            "Resource_List": {"nodes": "nodes=2:ppn=4", "walltime": "01:00:00"},
            "resources_used": {"mem": "1024kb", "vmem": "2048kb"},
            "Output_Path": "login:/nonexistent/out.o123",
            "queue": "batch",
        },
    )


def test_condensed_view_of_running_job(clusters):
    view = JobView.fromInfo(_info(), "owens")

    assert view.job_id == "123.server"
    assert view.job_name == "test_job"
    assert view.username == "alice"
    assert view.account == "proj1"
    assert view.status == JobStatus.RUNNING
    assert view.cluster == "owens"
    assert view.extended_available
    assert view.nodes == ["n1", "n2"]
    assert view.start_time == 1700000000
    assert view.mem is None
    assert view.ppn is None


@pytest.mark.parametrize(
    "status", [JobStatus.QUEUED, JobStatus.QUEUED_HELD, JobStatus.SUSPENDED]
)
def test_condensed_view_of_job_not_started(clusters, status):
    view = JobView.fromInfo(_info(status), "owens")

    assert view.nodes is None
    assert view.start_time is None


def test_completed_job_has_nodes_and_start_time(clusters):
    view = JobView.fromInfo(_info(JobStatus.COMPLETED), "owens")

    assert view.nodes == ["n1", "n2"]
    assert view.start_time == 1700000000


def test_started_job_without_dispatch_time(clusters):
    info = JobInfo(id="1", status=JobStatus.RUNNING)
    view = JobView.fromInfo(info, "owens")

    assert view.nodes == []
    assert view.start_time is None


def test_extended_not_available_without_native_parser(clusters):
    assert not JobView.fromInfo(_info(), "pitzer").extended_available


def test_cluster_defaults_to_first_configured(clusters):
    assert JobView.fromInfo(_info()).cluster == "owens"


def test_no_cluster_configured_raises(monkeypatch):
    monkeypatch.setattr(CFG.clusters, "adapters", {})
    with pytest.raises(DVError, match="No cluster"):
        JobView.fromInfo(_info())


def test_unknown_cluster_raises(clusters):
    with pytest.raises(DVError, match="Unknown cluster"):
        JobView.fromInfo(_info(), "ruby")


def test_extended_view_with_native_parser(clusters):
    view = JobView.fromInfo(_info(), "owens", extended=True)

    assert view.ppn == 4
    assert view.node_count == 2
    assert view.total_cpu == 8
    assert view.walltime == "01:00:00"
    assert view.walltime_used == 0
    assert view.submit_args == "None"
    assert view.output_path == "/nonexistent/out.o123"
    assert view.queue == "batch"
    assert view.mem == "1mb"
    assert view.vmem == "2mb"
    assert view.terminal_path.startswith(CFG.links.shell_url)
    assert view.fs_path.startswith(CFG.links.files_url)
    assert view.nodes == ["n1", "n2"]
    assert view.start_time == 1700000000


def test_extended_view_falls_back_to_default_parser(clusters):
    view = JobView.fromInfo(_info(native={"unknown": "layout"}), "pitzer", extended=True)

    assert not view.extended_available
    assert view.node_count == 2
    assert view.total_cpu == 8
    assert view.queue == "batch"
    assert view.mem == "0b"
    assert view.ppn == ""
    assert view.terminal_path == ""


def test_extended_view_of_malformed_payload_raises(clusters):
    info = _info(native={"resources_used": {"mem": "plenty"}})
    with pytest.raises(DVUnparseableExtendedDataError):
        JobView.fromInfo(info, "owens", extended=True)


def test_condensed_view_ignores_malformed_payload(clusters):
    view = JobView.fromInfo(_info(native={"resources_used": "broken"}), "owens")
    assert view.mem is None


def test_to_dict_condensed(clusters):
    result = JobView.fromInfo(_info(), "owens").toDict()

    assert result["status"] == "running"
    assert result["nodes"] == ["n1", "n2"]
    for f in fields(ExtendedData):
        assert f.name not in result


def test_to_dict_extended(clusters):
    result = JobView.fromInfo(_info(), "owens", extended=True).toDict()

    assert result["status"] == "running"
    assert result["ppn"] == 4
    assert result["mem"] == "1mb"
    for f in fields(ExtendedData):
        assert f.name in result


def test_view_is_immutable(clusters):
    view = JobView.fromInfo(_info(), "owens")
    with pytest.raises(AttributeError):
        view.job_id = "other"
