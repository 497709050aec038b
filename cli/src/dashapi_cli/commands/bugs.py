"""
External reporting commands: poll pending bug reports and update bugs.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


from enum import Enum
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dashapi import BugStatus, BugUpdate, PollRequest, PollResponse, ReproLevel

from ..config import create_dashboard, load_config
from ..constants import MAX_MAINTAINERS_DISPLAY, MAX_TITLE_LENGTH, REPRO_EMOJIS
from ..exceptions import DashapiCLIError, handle_errors

console = Console()


class StatusChoice(str, Enum):
    open = "open"
    upstream = "upstream"
    invalid = "invalid"
    dup = "dup"

    def to_bug_status(self) -> BugStatus:
        return BugStatus[self.name.upper()]


class ReproChoice(str, Enum):
    none = "none"
    syz = "syz"
    c = "c"

    def to_repro_level(self) -> ReproLevel:
        return ReproLevel[self.name.upper()]


def _shorten(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def render_reports(response: PollResponse, table_style: str = "rich") -> Table:
    """Build a table of polled bug reports, in server order."""
    table = Table(box=box.SIMPLE_HEAD if table_style == "simple" else box.ROUNDED)
    table.add_column("ID", style="bold cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Maintainers")
    table.add_column("Repro", justify="center")

    for report in response.reports:
        maintainers = report.maintainers[:MAX_MAINTAINERS_DISPLAY]
        if len(report.maintainers) > MAX_MAINTAINERS_DISPLAY:
            maintainers.append(f"+{len(report.maintainers) - MAX_MAINTAINERS_DISPLAY} more")
        level = report.repro_level.name.lower()
        table.add_row(
            escape(report.id),
            escape(_shorten(report.title, MAX_TITLE_LENGTH)),
            escape(", ".join(maintainers)),
            f"{REPRO_EMOJIS[level]} {level}",
        )

    return table


@handle_errors
def poll(
    report_type: str = typer.Argument(..., help="Reporting type to poll (e.g., 'email')"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON reply"),
):
    """
    📥 Poll bug reports waiting for external reporting
    """
    config = load_config()
    with create_dashboard(config) as dash:
        response = dash.poll(PollRequest(type=report_type))

    if as_json:
        typer.echo(response.model_dump_json(by_alias=True, indent=2))
        return

    if not response.reports:
        console.print(f"📭 No pending reports for [bold]{escape(report_type)}[/bold]")
        return

    console.print(f"\n📥 [bold]{len(response.reports)} pending report(s)[/bold]\n")
    console.print(render_reports(response, config.preferences.table_style))


@handle_errors
def update_bug(
    bug_id: str = typer.Argument(..., help="Bug identifier"),
    status: StatusChoice = typer.Option(..., "--status", "-s", help="New bug status"),
    repro_level: ReproChoice = typer.Option(
        ReproChoice.none, "--repro-level", "-r", help="Strongest reproducer available"
    ),
    dup_of: Optional[str] = typer.Option(None, "--dup-of", help="Bug this one duplicates"),
):
    """
    🐛 Send a status update for a reported bug
    """
    if status is StatusChoice.dup and not dup_of:
        raise DashapiCLIError(
            "--status dup requires the bug it duplicates",
            hint="Pass --dup-of BUG_ID",
            exit_code=2,
        )
    if dup_of and status is not StatusChoice.dup:
        raise DashapiCLIError(
            "--dup-of is only valid with --status dup",
            exit_code=2,
        )

    update = BugUpdate(
        id=bug_id,
        status=status.to_bug_status(),
        repro_level=repro_level.to_repro_level(),
        dup_of=dup_of or "",
    )

    with create_dashboard(load_config()) as dash:
        dash.update_bug(update)

    console.print(
        f"✅ Updated bug [bold cyan]{escape(bug_id)}[/bold cyan]: {status.value}",
        style="green",
    )
