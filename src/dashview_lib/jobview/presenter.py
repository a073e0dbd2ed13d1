# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from datetime import datetime

import yaml
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dashview_lib.core.common import get_panel_width, load_yaml_dumper
from dashview_lib.core.config import CFG
from dashview_lib.jobview.view import JobView

Dumper: type[yaml.Dumper] = load_yaml_dumper()


class JobViewPresenter:
    """
    Present job views in the terminal or as YAML.
    """

    def __init__(self, views: list[JobView]):
        self._views = views

    def createJobPanel(self, view: JobView, console: Console | None = None) -> Group:
        """
        Create a Rich panel displaying a single job view.

        Args:
            view (JobView): The job to show.
            console (Console | None): Optional Rich Console instance.
                If None, a new Console will be created.

        Returns:
            Group: Rich Group containing the job panel.
        """
        console = console or Console()

        panel = Panel(
            self._createInfoTable(view),
            title=Text(
                f"JOB: {view.job_id}",
                style=CFG.presenter.title_style,
                justify="center",
            ),
            border_style=CFG.presenter.border_style,
            padding=(1, 2),
            width=get_panel_width(
                console, 1, CFG.presenter.min_width, CFG.presenter.max_width
            ),
            expand=False,
        )

        return Group(Text(""), panel, Text(""))

    def createPanels(self, console: Console | None = None) -> Group:
        """
        Create panels for all job views.
        """
        console = console or Console()
        return Group(*(self.createJobPanel(view, console) for view in self._views))

    def dumpYaml(self) -> None:
        """
        Print the YAML representation of all job views to stdout.
        """
        for view in self._views:
            print(
                yaml.dump(
                    view.toDict(),
                    default_flow_style=False,
                    sort_keys=False,
                    Dumper=Dumper,
                )
            )

    def _createInfoTable(self, view: JobView) -> Table:
        """
        Create a table of key-value pairs describing the job.
        """
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(justify="right", style=CFG.presenter.key_style)
        table.add_column(
            justify="left", overflow="fold", style=CFG.presenter.value_style
        )

        table.add_row("Job name:", Text(str(view.job_name or "")))
        table.add_row("User:", Text(str(view.username or "")))
        if view.account:
            table.add_row("Account:", Text(view.account))
        table.add_row("Cluster:", Text(view.cluster))
        table.add_row("Status:", Text(str(view.status), style=view.status.color))

        if view.nodes:
            label = "Node:" if len(view.nodes) == 1 else "Nodes:"
            table.add_row(label, Text(" + ".join(view.nodes)))
        if view.start_time is not None:
            started = datetime.fromtimestamp(view.start_time)
            table.add_row(
                "Started at:", Text(started.strftime(CFG.date_formats.standard))
            )

        if view.mem is None:
            if view.extended_available:
                table.add_row(
                    "",
                    Text("extended data available", style=CFG.presenter.notes_style),
                )
            return table

        rows = [
            ("Queue:", view.queue),
            ("Walltime:", view.walltime),
            ("Walltime used:", view.walltime_used),
            ("CPU time:", view.cpu_time),
            ("Nodes count:", view.node_count),
            ("PPN:", view.ppn),
            ("Total CPUs:", view.total_cpu),
            ("Memory:", view.mem),
            ("Virtual memory:", view.vmem),
            ("Submit args:", view.submit_args),
            ("Output path:", view.output_path),
            ("Terminal:", view.terminal_path),
            ("Files:", view.fs_path),
        ]
        for key, value in rows:
            if value is None or value == "":
                continue
            table.add_row(key, Text(str(value)))

        return table
