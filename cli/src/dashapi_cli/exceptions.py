"""
Exception handling for the dashapi CLI.

CLI-specific errors carry a hint and an exit code on top of the SDK's
DashboardError; handle_errors renders any of them as a rich panel.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.

import functools
from pathlib import Path
from typing import Callable, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from dashapi.exceptions import DashboardError, ErrorContext

from .constants import SETTING_ENV_VARS

__all__ = [
    "DashapiCLIError",
    "ConfigurationError",
    "FileOperationError",
    "handle_errors",
    "show_error",
    "set_verbose",
]

console = Console(stderr=True)

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Show detailed error context in handle_errors."""
    global _verbose
    _verbose = enabled


class DashapiCLIError(DashboardError):
    """Base exception for dashapi CLI errors.

    Attributes:
        message: Error message
        hint: Optional hint for fixing the error
        exit_code: Exit code to use when exiting
    """

    def __init__(
        self,
        message: str,
        hint: Optional[str] = None,
        exit_code: int = 1,
        context: Optional[ErrorContext] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message, context, original_exception)
        self.hint = hint
        self.exit_code = exit_code

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class ConfigurationError(DashapiCLIError):
    """Required dashboard settings are missing."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        settings = ", ".join(f"dashboard.{name}" for name in missing)
        env_vars = ", ".join(SETTING_ENV_VARS[name] for name in missing)
        super().__init__(
            f"Missing dashboard settings: {settings}",
            hint=f"Run 'dashapi config set dashboard.<setting> VALUE' or export {env_vars}",
            exit_code=2,
        )


class FileOperationError(DashapiCLIError):
    """Reading an artifact file failed."""

    def __init__(self, operation: str, path: Path, original_error: Exception):
        self.path = path
        self.original_error = original_error

        if isinstance(original_error, FileNotFoundError):
            hint = "Check that the path exists"
        elif isinstance(original_error, PermissionError):
            hint = "Check file permissions"
        else:
            hint = None

        super().__init__(
            f"Failed to {operation} {path}: {original_error}",
            hint=hint,
            original_exception=original_error,
        )


# =============================================================================
# Error Display Utilities
# =============================================================================


def show_error(error: Exception, verbose: bool = False):
    """Display an error with rich formatting.

    Args:
        error: The exception to display
        verbose: Whether to show detailed context
    """
    if isinstance(error, DashapiCLIError):
        console.print(
            Panel(
                f"[bold red]{escape(error.message)}[/bold red]",
                title=error.__class__.__name__,
                border_style="red",
            )
        )

        if error.hint:
            console.print(f"\n[bold yellow]Hint:[/bold yellow] {error.hint}")

    elif isinstance(error, DashboardError):
        console.print(
            Panel(
                f"[bold red]Error:[/bold red] {escape(str(error))}",
                title=error.__class__.__name__,
                border_style="red",
            )
        )

        if error.context and error.context.suggested_fixes:
            console.print("\n[bold yellow]Suggested fixes:[/bold yellow]")
            for fix in error.context.suggested_fixes:
                console.print(f"  • {escape(fix)}")

        if verbose and error.context:
            console.print("\n[dim]Detailed context:[/dim]")
            console.print(error.get_detailed_info())
    else:
        console.print(
            Panel(
                f"[bold red]{escape(str(error))}[/bold red]",
                title=error.__class__.__name__,
                border_style="red",
            )
        )


def handle_errors(func: Callable) -> Callable:
    """Decorator to handle and display errors consistently.

    Usage:
        @handle_errors
        def my_command():
            raise DashapiCLIError("Something went wrong")
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DashapiCLIError as e:
            show_error(e)
            raise typer.Exit(e.exit_code)
        except DashboardError as e:
            show_error(e, verbose=_verbose)
            raise typer.Exit(1)

    return wrapper
