# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dashview_lib.batch.job import JobInfo
from dashview_lib.batch.parsers.interface import ExtendedData, ExtendedParserInterface
from dashview_lib.batch.torque.native import TorqueNative
from dashview_lib.properties.size import Size


class DefaultExtendedParser(ExtendedParserInterface):
    """
    Fallback for adapters without a native parser.

    Only the fields available in every job record are filled in; the rest are
    placeholders. Use it as a template when writing a parser for a new adapter.
    """

    @classmethod
    def adapterName(cls) -> str:
        return "default"

    @classmethod
    def parse(cls, info: JobInfo) -> ExtendedData:
        no_usage = str(Size.fromString(TorqueNative.DEFAULT_SIZE))

        return ExtendedData(
            walltime="",
            walltime_used="",
            submit_args="",
            output_path="",
            node_count=len(info.allocated_nodes),
            ppn="",
            total_cpu=info.procs,
            queue=info.queue_name,
            cpu_time="",
            mem=no_usage,
            vmem=no_usage,
            terminal_path="",
            fs_path="",
        )
