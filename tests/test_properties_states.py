# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from dashview_lib.properties.states import JobStatus


@pytest.mark.parametrize(
    "code, expected_state",
    [
        ("Q", JobStatus.QUEUED),
        ("H", JobStatus.QUEUED_HELD),
        ("T", JobStatus.QUEUED_HELD),
        ("W", JobStatus.QUEUED_HELD),
        ("S", JobStatus.SUSPENDED),
        ("R", JobStatus.RUNNING),
        ("E", JobStatus.RUNNING),
        ("C", JobStatus.COMPLETED),
        ("c", JobStatus.COMPLETED),
        (" r ", JobStatus.RUNNING),
        ("X", JobStatus.UNDETERMINED),
        ("", JobStatus.UNDETERMINED),
    ],
)
def test_from_code(code, expected_state):
    assert JobStatus.fromCode(code) == expected_state


@pytest.mark.parametrize(
    "input_str, expected_state",
    [
        ("running", JobStatus.RUNNING),
        ("RUNNING", JobStatus.RUNNING),
        ("queued_held", JobStatus.QUEUED_HELD),
        ("completed", JobStatus.COMPLETED),
        ("nonexistent", JobStatus.UNDETERMINED),
        ("", JobStatus.UNDETERMINED),
    ],
)
def test_from_str(input_str, expected_state):
    assert JobStatus.fromStr(input_str) == expected_state


def test_str_is_lowercase():
    assert str(JobStatus.QUEUED_HELD) == "queued_held"


@pytest.mark.parametrize("state", list(JobStatus))
def test_has_started(state):
    assert state.hasStarted() == (state in (JobStatus.RUNNING, JobStatus.COMPLETED))


@pytest.mark.parametrize("state", list(JobStatus))
def test_every_state_has_color(state):
    assert isinstance(state.color, str)
