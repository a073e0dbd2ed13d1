# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Condensed and extended views of scheduler jobs.

This module provides `JobView`, a display-ready projection of a job record
returned by the scheduler client, and `JobViewPresenter`, which renders job
views as Rich panels or YAML. The `job` CLI command is defined in `cli`.
"""

from .cli import job
from .presenter import JobViewPresenter
from .view import JobView

__all__ = ["JobView", "JobViewPresenter", "job"]
