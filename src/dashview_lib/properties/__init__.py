# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Value types shared by the job and quota views.

This module provides the `Size` type used to parse and render memory usage
and the `JobStatus` enum describing the state of a scheduler job.
"""
