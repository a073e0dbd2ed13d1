# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Disk quota utilization read from JSON quota snapshots.

This module provides `QuotaRecord`, describing the usage of one resource
(file count or blocks) on one volume, `QuotaSet`, which reads records from
snapshot files, and `QuotaPresenter`, which renders them as a Rich table or YAML.
"""

from .cli import quota
from .presenter import QuotaPresenter
from .quota_set import QuotaSet
from .record import QuotaRecord, ResourceType

__all__ = ["QuotaPresenter", "QuotaRecord", "QuotaSet", "ResourceType", "quota"]
