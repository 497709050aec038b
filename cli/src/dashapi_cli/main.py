"""
Main CLI application.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


import logging
import typer
from rich.console import Console
from rich.logging import RichHandler

from .commands import bugs, report, config as config_cmd
from .exceptions import set_verbose

console = Console()

app = typer.Typer(
    name="dashapi",
    help="🛰️  Report builds, crashes and bug updates to a crash dashboard",
    rich_markup_mode="rich",
    no_args_is_help=True,
    context_settings={
        "help_option_names": ["--help", "-h"],
    },
)


# === Reporting commands ===

app.command("upload-build")(report.upload_build)
app.command("report-crash")(report.report_crash)
app.command("report-failed-repro")(report.report_failed_repro)
app.command("log-error")(report.log_error)

# === External reporting ===

app.command("poll")(bugs.poll)
app.command("update-bug")(bugs.update_bug)

app.add_typer(config_cmd.app, name="config", help="⚙️  Manage configuration")


@app.command()
def version():
    """
    📦 Show version information
    """
    from . import __version__
    console.print(f"dashapi CLI v{__version__}")


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
    # httpx logs every request line at INFO, including the keyed URL
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Show debug logs and detailed error context"
    ),
):
    """
    🛰️  dashapi CLI - talk to a crash dashboard from the shell

    Quick start:
    • dashapi config init --client NAME --address URL --key KEY
    • dashapi upload-build --id BUILD --manager MGR
    • dashapi poll email
    """
    setup_logging(verbose)
    set_verbose(verbose)


def main():
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
