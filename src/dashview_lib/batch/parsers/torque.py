# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

from dashview_lib.batch.job import JobInfo
from dashview_lib.batch.parsers.interface import ExtendedData, ExtendedParserInterface
from dashview_lib.batch.parsers.meta import ParserMeta, native_parser
from dashview_lib.batch.torque.native import TorqueNative
from dashview_lib.core.links import files_url, shell_url, writable_dir_or_home
from dashview_lib.core.logger import get_logger

logger = get_logger(__name__)


@native_parser
class TorqueExtendedParser(ExtendedParserInterface, metaclass=ParserMeta):
    """
    Builds the extended job view from the native payload of Torque jobs.
    """

    @classmethod
    def adapterName(cls) -> str:
        return "torque"

    @classmethod
    def parse(cls, info: JobInfo) -> ExtendedData:
        native = TorqueNative(info.id, info.native)

        node_count = len(info.allocated_nodes)
        ppn = native.getPPN()
        output_path = native.getOutputPath()

        directory = writable_dir_or_home(Path(output_path).parent)
        logger.debug(f"Linking job '{info.id}' to directory '{directory}'.")

        return ExtendedData(
            walltime=native.getWalltime(),
            walltime_used=native.getWalltimeUsed(),
            submit_args=native.getSubmitArgs(),
            output_path=output_path,
            node_count=node_count,
            ppn=ppn,
            total_cpu=ppn * node_count,
            queue=native.getQueue(),
            cpu_time=native.getCPUTime(),
            mem=str(native.getMem()),
            vmem=str(native.getVMem()),
            terminal_path=shell_url(directory),
            fs_path=files_url(directory),
        )
