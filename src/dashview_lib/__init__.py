# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of dashview.

This package projects the data shown on an HPC dashboard into display-ready
view models: condensed and extended views of scheduler jobs, built from the
job records of the scheduler client, and disk quota utilization, read from
JSON quota snapshots. The dashview CLI delegates to the functionality
implemented here.
"""

from .dashview import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "batch",
    "core",
    "jobview",
    "properties",
    "quota",
]
