# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from dashview_lib.core.config import CFG
from dashview_lib.jobview import cli as job_cli
from dashview_lib.jobview.cli import job

SAMPLE_DUMP = """Job Id: 123.server
    Job_Name = test_job
    Job_Owner = alice@login.cluster
    job_state = R
    queue = batch
    exec_host = n1/0-3+n2/0-3
    Resource_List.nodes = 2:ppn=4
    Resource_List.walltime = 01:00:00
    resources_used.mem = 1024kb
    start_time = 1700000000

Job Id: 124.server
    Job_Name = queued_job
    Job_Owner = bob@login.cluster
    job_state = Q
"""


@pytest.fixture
def clusters(monkeypatch):
    monkeypatch.setattr(
        CFG.clusters, "adapters", {"owens": "torque", "pitzer": "slurm"}
    )


def _documents(output: str) -> list[dict]:
    return [yaml.safe_load(chunk) for chunk in output.split("\n\n") if chunk.strip()]


def test_job_yaml(clusters):
    result = CliRunner().invoke(job, ["--yaml"], input=SAMPLE_DUMP)

    assert result.exit_code == 0
    documents = _documents(result.output)
    assert [doc["job_id"] for doc in documents] == ["123.server", "124.server"]
    assert documents[0]["cluster"] == "owens"
    assert documents[0]["nodes"] == ["n1", "n2"]
    assert documents[0]["extended_available"] is True
    assert "mem" not in documents[0]


def test_job_yaml_extended(clusters):
    result = CliRunner().invoke(job, ["-e", "--yaml"], input=SAMPLE_DUMP)

    assert result.exit_code == 0
    documents = _documents(result.output)
    assert documents[0]["ppn"] == 4
    assert documents[0]["total_cpu"] == 8
    assert documents[0]["mem"] == "1mb"


def test_job_yaml_extended_default_parser(clusters):
    result = CliRunner().invoke(
        job, ["-c", "pitzer", "-e", "--yaml"], input=SAMPLE_DUMP
    )

    assert result.exit_code == 0
    documents = _documents(result.output)
    assert documents[0]["extended_available"] is False
    assert documents[0]["node_count"] == 2
    assert documents[0]["mem"] == "0b"


def test_job_reads_file(clusters, tmp_path):
    dump = tmp_path / "qstat.txt"
    dump.write_text(SAMPLE_DUMP)

    result = CliRunner().invoke(job, [str(dump), "--yaml"])

    assert result.exit_code == 0
    assert len(_documents(result.output)) == 2


def test_job_panels(clusters):
    result = CliRunner().invoke(job, ["-c", "owens"], input=SAMPLE_DUMP)

    assert result.exit_code == 0
    assert "123.server" in result.output
    assert "124.server" in result.output


def test_job_empty_dump(clusters):
    with patch.object(job_cli.logger, "info") as mock_info:
        result = CliRunner().invoke(job, [], input="")

    assert result.exit_code == 0
    mock_info.assert_called_once_with("No jobs found.")


def test_job_malformed_dump(clusters):
    with patch.object(job_cli.logger, "error") as mock_error:
        result = CliRunner().invoke(job, [], input="not a dump\n")

    assert result.exit_code == CFG.exit_codes.default
    mock_error.assert_called_once()


def test_job_unknown_cluster(clusters):
    with patch.object(job_cli.logger, "error") as mock_error:
        result = CliRunner().invoke(job, ["-c", "ruby"], input=SAMPLE_DUMP)

    assert result.exit_code == CFG.exit_codes.default
    assert "ruby" in str(mock_error.call_args.args[0])


def test_job_unparseable_extended_data(clusters):
    dump = SAMPLE_DUMP.replace("1024kb", "a lot")
    with patch.object(job_cli.logger, "error") as mock_error:
        result = CliRunner().invoke(job, ["-e"], input=dump)

    assert result.exit_code == CFG.exit_codes.default
    mock_error.assert_called_once()


def test_job_unexpected_error(clusters):
    with (
        patch.object(job_cli, "jobInfosFromDump", side_effect=RuntimeError("boom")),
        patch.object(job_cli.logger, "critical") as mock_critical,
    ):
        result = CliRunner().invoke(job, [], input=SAMPLE_DUMP)

    assert result.exit_code == CFG.exit_codes.unexpected_error
    mock_critical.assert_called_once()
