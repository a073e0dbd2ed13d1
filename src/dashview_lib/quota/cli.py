# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from rich.console import Console

from dashview_lib.core.config import CFG
from dashview_lib.core.error import DVError
from dashview_lib.core.logger import get_logger
from dashview_lib.quota.presenter import QuotaPresenter
from dashview_lib.quota.quota_set import QuotaSet

logger = get_logger(__name__)


@click.command(
    short_help="Display disk quota utilization.",
    help="""Display disk quota utilization read from JSON quota snapshots.

FILES are quota snapshot files. If none are given, the files configured for the dashboard are used.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "-u",
    "--user",
    type=str,
    default=None,
    help="Only show quotas of this user. Defaults to all users.",
)
@click.option(
    "-t",
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=CFG.quota.threshold,
    show_default=True,
    help="Fraction of the limit above which a quota is reported as insufficient.",
)
@click.option("--yaml", is_flag=True, help="Output quota records in YAML format.")
def quota(
    files: tuple[Path, ...], user: str | None, threshold: float, yaml: bool
) -> NoReturn:
    try:
        quotas = QuotaSet.findAll(list(files) if files else None, user)
        if not quotas:
            logger.info("No quotas found.")
            sys.exit(0)

        presenter = QuotaPresenter(quotas, threshold)
        if yaml:
            presenter.dumpYaml()
        else:
            console = Console(record=False, markup=False)
            console.print(presenter.createQuotaTable())

        sys.exit(0)
    except DVError as e:
        logger.error(e)
        print()
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        print()
        sys.exit(CFG.exit_codes.unexpected_error)
