"""
Reporting commands: builds, crashes, failed reproductions and error logs.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from dashapi import Build, Crash, FailedRepro

from ..config import create_dashboard, load_config
from ..exceptions import FileOperationError, handle_errors

console = Console()


def read_artifact(path: Optional[Path]) -> bytes:
    """Read an optional artifact file; a missing option means empty."""
    if path is None:
        return b""
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileOperationError("read", path, e)


@handle_errors
def upload_build(
    build_id: str = typer.Option(..., "--id", help="Build identifier"),
    manager: str = typer.Option(..., "--manager", "-m", help="Manager that produced the build"),
    syzkaller_commit: str = typer.Option("", "--syzkaller-commit", help="Fuzzer commit hash"),
    compiler_id: str = typer.Option("", "--compiler-id", help="Compiler identification string"),
    kernel_repo: str = typer.Option("", "--kernel-repo", help="Kernel repository URL"),
    kernel_branch: str = typer.Option("", "--kernel-branch", help="Kernel branch"),
    kernel_commit: str = typer.Option("", "--kernel-commit", help="Kernel commit hash"),
    kernel_config: Optional[Path] = typer.Option(
        None, "--kernel-config", help="Path to the kernel .config"
    ),
):
    """
    📦 Upload metadata of a kernel build
    """
    build = Build(
        id=build_id,
        manager=manager,
        syzkaller_commit=syzkaller_commit,
        compiler_id=compiler_id,
        kernel_repo=kernel_repo,
        kernel_branch=kernel_branch,
        kernel_commit=kernel_commit,
        kernel_config=read_artifact(kernel_config),
    )

    with create_dashboard(load_config()) as dash:
        dash.upload_build(build)

    console.print(f"✅ Uploaded build [bold cyan]{escape(build_id)}[/bold cyan]", style="green")


@handle_errors
def report_crash(
    build_id: str = typer.Option(..., "--build-id", "-b", help="Build the crash happened on"),
    title: str = typer.Option(..., "--title", "-t", help="Crash title"),
    maintainers: Optional[List[str]] = typer.Option(
        None, "--maintainer", help="Maintainer email (repeatable, order is kept)"
    ),
    log: Optional[Path] = typer.Option(None, "--log", help="Path to the console log"),
    report: Optional[Path] = typer.Option(None, "--report", help="Path to the crash report"),
    repro_opts: Optional[Path] = typer.Option(None, "--repro-opts", help="Path to reproducer options"),
    repro_syz: Optional[Path] = typer.Option(None, "--repro-syz", help="Path to the syz reproducer"),
    repro_c: Optional[Path] = typer.Option(None, "--repro-c", help="Path to the C reproducer"),
):
    """
    💥 Report a kernel crash
    """
    crash = Crash(
        build_id=build_id,
        title=title,
        maintainers=maintainers or [],
        log=read_artifact(log),
        report=read_artifact(report),
        repro_opts=read_artifact(repro_opts),
        repro_syz=read_artifact(repro_syz),
        repro_c=read_artifact(repro_c),
    )

    with create_dashboard(load_config()) as dash:
        dash.report_crash(crash)

    console.print(f"✅ Reported crash: [bold]{escape(title)}[/bold]", style="green")


@handle_errors
def report_failed_repro(
    manager: str = typer.Option(..., "--manager", "-m", help="Manager that tried to reproduce"),
    build_id: str = typer.Option(..., "--build-id", "-b", help="Build the crash happened on"),
    title: str = typer.Option(..., "--title", "-t", help="Crash title"),
):
    """
    🔁 Report a failed reproduction attempt
    """
    with create_dashboard(load_config()) as dash:
        dash.report_failed_repro(FailedRepro(manager=manager, build_id=build_id, title=title))

    console.print(f"✅ Reported failed repro for: [bold]{escape(title)}[/bold]", style="green")


@handle_errors
def log_error(
    name: str = typer.Argument(..., help="Name of the reporting component"),
    text: str = typer.Argument(..., help="Message to log"),
):
    """
    📝 Send an error message to the dashboard log (best effort)
    """
    with create_dashboard(load_config()) as dash:
        dash.log_error(name, text)

    console.print("📝 Error log sent", style="dim")
