# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Parsers building the extended view of a job.

`ParserMeta` keeps a registry of native parsers keyed by the scheduler adapter
they understand; the `@native_parser` decorator registers an implementation.
Adapters without a native parser fall back to `DefaultExtendedParser`.
"""

from .default import DefaultExtendedParser
from .interface import ExtendedData, ExtendedParserInterface
from .meta import ParserMeta, native_parser
from .torque import TorqueExtendedParser

__all__ = [
    "DefaultExtendedParser",
    "ExtendedData",
    "ExtendedParserInterface",
    "ParserMeta",
    "TorqueExtendedParser",
    "native_parser",
]
