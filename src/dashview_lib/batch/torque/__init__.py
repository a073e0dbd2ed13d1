# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Torque support: named access to a job's native payload and `qstat -f` dump reading.
"""

from .dump import jobInfosFromDump
from .native import TorqueNative

__all__ = [
    "TorqueNative",
    "jobInfosFromDump",
]
