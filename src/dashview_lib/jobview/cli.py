# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from typing import IO, NoReturn

import click
from click_help_colors import HelpColorsCommand
from rich.console import Console

from dashview_lib.batch.torque import jobInfosFromDump
from dashview_lib.core.config import CFG
from dashview_lib.core.error import DVError
from dashview_lib.core.logger import get_logger
from dashview_lib.jobview.presenter import JobViewPresenter
from dashview_lib.jobview.view import JobView

logger = get_logger(__name__)


@click.command(
    short_help="Display the status of jobs from a qstat dump.",
    help="""Display the status of jobs described by a Torque `qstat -f` dump.

DUMP is a file containing the output of `qstat -f`. Use `-` to read from standard input.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument("dump", type=click.File("r"), default="-")
@click.option(
    "-c",
    "--cluster",
    type=str,
    default=None,
    help="Cluster the jobs run on. Defaults to the first configured cluster.",
)
@click.option(
    "-e",
    "--extended",
    is_flag=True,
    help="Show resource requests and usage of the jobs.",
)
@click.option("--yaml", is_flag=True, help="Output job views in YAML format.")
def job(dump: IO[str], cluster: str | None, extended: bool, yaml: bool) -> NoReturn:
    try:
        infos = jobInfosFromDump(dump.read())
        if not infos:
            logger.info("No jobs found.")
            sys.exit(0)

        views = [JobView.fromInfo(info, cluster, extended) for info in infos]
        presenter = JobViewPresenter(views)
        if yaml:
            presenter.dumpYaml()
        else:
            console = Console(record=False, markup=False)
            console.print(presenter.createPanels(console))

        sys.exit(0)
    except DVError as e:
        logger.error(e)
        print()
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        print()
        sys.exit(CFG.exit_codes.unexpected_error)
