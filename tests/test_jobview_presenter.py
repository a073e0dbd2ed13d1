# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from datetime import datetime
from io import StringIO

import pytest
import yaml
from rich.console import Console

from dashview_lib.batch.job import JobInfo, NodeInfo
from dashview_lib.core.config import CFG
from dashview_lib.jobview.presenter import JobViewPresenter
from dashview_lib.jobview.view import JobView
from dashview_lib.properties.states import JobStatus


@pytest.fixture
def clusters(monkeypatch):
    monkeypatch.setattr(
        CFG.clusters, "adapters", {"owens": "torque", "pitzer": "slurm"}
    )


def _info(status=JobStatus.RUNNING):
    return JobInfo(
        id="123.server",
        status=status,
        job_name="test_job",
        job_owner="alice",
        accounting_id="proj1",
        allocated_nodes=[NodeInfo("n1", 4), NodeInfo("n2", 4)],
        dispatch_time=datetime(2025, 1, 2, 3, 4, 5),
        procs=8,
        queue_name="batch",
        native={
            "Resource_List": {"nodes": "2:ppn=4", "walltime": "01:00:00"},
            "resources_used": {"mem": "1024kb"},
            "queue": "batch",
        },
    )


def _render(renderable) -> str:
    buffer = StringIO()
    Console(file=buffer, width=150).print(renderable)
    return buffer.getvalue()


def test_condensed_panel(clusters):
    view = JobView.fromInfo(_info(), "owens")
    presenter = JobViewPresenter([view])
    console = Console(width=150)

    output = _render(presenter.createJobPanel(view, console))

    assert "JOB: 123.server" in output
    assert "test_job" in output
    assert "alice" in output
    assert "proj1" in output
    assert "owens" in output
    assert "running" in output
    assert "n1 + n2" in output
    assert "2025-01-02 03:04:05" in output
    assert "extended data available" in output
    assert "PPN:" not in output


def test_condensed_panel_without_native_parser(clusters):
    view = JobView.fromInfo(_info(), "pitzer")
    output = _render(JobViewPresenter([view]).createJobPanel(view, Console(width=150)))

    assert "extended data available" not in output


def test_queued_job_panel_has_no_nodes(clusters):
    view = JobView.fromInfo(_info(JobStatus.QUEUED), "owens")
    output = _render(JobViewPresenter([view]).createJobPanel(view, Console(width=150)))

    assert "queued" in output
    assert "Nodes:" not in output
    assert "Started at:" not in output


def test_extended_panel(clusters):
    view = JobView.fromInfo(_info(), "owens", extended=True)
    output = _render(JobViewPresenter([view]).createJobPanel(view, Console(width=150)))

    assert "PPN:" in output
    assert "Total CPUs:" in output
    assert "01:00:00" in output
    assert "1mb" in output
    assert "extended data available" not in output


def test_create_panels_shows_every_job(clusters):
    views = [
        JobView.fromInfo(_info(), "owens"),
        JobView.fromInfo(JobInfo(id="124.server", status=JobStatus.QUEUED), "owens"),
    ]
    output = _render(JobViewPresenter(views).createPanels(Console(width=150)))

    assert "JOB: 123.server" in output
    assert "JOB: 124.server" in output


def test_dump_yaml(clusters, capsys):
    views = [
        JobView.fromInfo(_info(), "owens", extended=True),
        JobView.fromInfo(JobInfo(id="124.server", status=JobStatus.QUEUED), "owens"),
    ]
    JobViewPresenter(views).dumpYaml()

    documents = [
        yaml.safe_load(chunk)
        for chunk in capsys.readouterr().out.split("\n\n")
        if chunk.strip()
    ]

    assert len(documents) == 2
    assert documents[0]["job_id"] == "123.server"
    assert documents[0]["status"] == "running"
    assert documents[0]["ppn"] == 4
    assert documents[0]["start_time"] == int(datetime(2025, 1, 2, 3, 4, 5).timestamp())
    assert documents[1]["job_id"] == "124.server"
    assert documents[1]["status"] == "queued"
    assert "ppn" not in documents[1]
