# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for dashview.

This module collects the foundational utilities used across the dashview
codebase: configuration, error types, structured logging, number formatting
and dashboard app links.
"""
