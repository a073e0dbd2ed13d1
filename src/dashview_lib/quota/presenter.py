# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import yaml
from rich.console import Group
from rich.table import Table
from rich.text import Text

from dashview_lib.core.common import load_yaml_dumper
from dashview_lib.core.config import CFG
from dashview_lib.quota.record import QuotaRecord

Dumper: type[yaml.Dumper] = load_yaml_dumper()


class QuotaPresenter:
    """
    Present quota records in the terminal or as YAML.
    """

    def __init__(
        self, quotas: list[QuotaRecord], threshold: float = CFG.quota.threshold
    ):
        """
        Initialize the presenter with a list of quota records.

        Args:
            quotas (list[QuotaRecord]): Records to present.
            threshold (float): Fraction of the limit above which a quota
                is highlighted as insufficient.
        """
        self._quotas = quotas
        self._threshold = threshold

    def createQuotaTable(self) -> Group:
        """
        Create a Rich table with one row per quota record.

        Returns:
            Group: Rich Group containing the table followed by a short
            description of each record.
        """
        table = Table(
            header_style=CFG.presenter.headers_style,
            border_style=CFG.presenter.border_style,
        )
        for header in ["Path", "User", "Type", "Resource", "Used", "Limit", "%"]:
            table.add_column(header, justify="right" if header == "%" else "left")

        messages = []
        for quota in self._quotas:
            style = (
                CFG.presenter.insufficient_style
                if quota.isInsufficient(self._threshold)
                else CFG.presenter.sufficient_style
            )
            table.add_row(
                str(quota.path),
                quota.user,
                quota.type,
                str(quota.resource_type),
                str(quota.total_usage),
                str(quota.limit) if quota.isLimited() else "unlimited",
                Text(str(quota.percentTotalUsage()), style=style),
            )
            messages.append(
                Text(f"{quota.path}: {quota}", style=CFG.presenter.notes_style)
            )

        return Group(table, *messages)

    def dumpYaml(self) -> None:
        """
        Print the YAML representation of all quota records to stdout.
        """
        to_dump = [
            {
                "type": quota.type,
                "path": str(quota.path),
                "user": quota.user,
                "resource_type": str(quota.resource_type),
                "user_usage": quota.user_usage,
                "total_usage": quota.total_usage,
                "limit": quota.limit,
                "grace": quota.grace,
                "updated_at": quota.updated_at.strftime(CFG.date_formats.standard),
                "percent_user_usage": quota.percentUserUsage(),
                "percent_total_usage": quota.percentTotalUsage(),
                "sufficient": quota.isSufficient(self._threshold),
                "message": str(quota),
            }
            for quota in self._quotas
        ]
        print(
            yaml.dump(to_dump, default_flow_style=False, sort_keys=False, Dumper=Dumper)
        )
