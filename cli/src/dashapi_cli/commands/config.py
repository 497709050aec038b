"""
Configuration management commands.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


import typer
from pathlib import Path
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from ..config import (
    DashapiConfig,
    get_global_config,
    get_global_config_path,
    get_project_config,
    get_project_config_path,
    load_config,
    save_global_config,
)
from ..constants import ENV_KEY, REDACTED

console = Console()
app = typer.Typer()

_BOOL_TRUE = ("true", "yes", "1", "on")


def _config_path(global_config: bool) -> Path:
    return get_global_config_path() if global_config else get_project_config_path()


@app.command("show")
def show_config(
    global_config: bool = typer.Option(
        False, "--global", "-g",
        help="Show global configuration instead of the effective one"
    )
):
    """
    📋 Display current configuration settings
    """
    if global_config:
        config = get_global_config()
        config_type = "Global"
        config_path = get_global_config_path()
    else:
        config = load_config()
        project_path = get_project_config_path()
        config_type = "Project" if project_path.exists() else "Global"
        config_path = project_path if project_path.exists() else get_global_config_path()

    data = config.redacted()
    console.print(f"\n⚙️  [bold]{config_type} Configuration[/bold]\n")

    dashboard_table = Table(show_header=False, box=box.SIMPLE)
    dashboard_table.add_column("Setting", style="bold cyan")
    dashboard_table.add_column("Value")

    dashboard = data["dashboard"]
    dashboard_table.add_row("Client", dashboard["client"] or "[dim]not set[/dim]")
    dashboard_table.add_row("Address", dashboard["address"] or "[dim]not set[/dim]")
    dashboard_table.add_row("Key", dashboard["key"] or "[dim]not set[/dim]")
    dashboard_table.add_row("Timeout", f"{dashboard['timeout']}s")

    console.print(
        Panel.fit(
            dashboard_table,
            title="📡 Dashboard",
            box=box.ROUNDED
        )
    )

    prefs_table = Table(show_header=False, box=box.SIMPLE)
    prefs_table.add_column("Setting", style="bold cyan")
    prefs_table.add_column("Value")

    prefs_table.add_row("Table Style", config.preferences.table_style)
    prefs_table.add_row("Color Output", "✅ Yes" if config.preferences.color_output else "❌ No")

    console.print(
        Panel.fit(
            prefs_table,
            title="🎨 Preferences",
            box=box.ROUNDED
        )
    )

    console.print(f"\n📍 Config file: [dim]{config_path}[/dim]")


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key to set (e.g., 'dashboard.address')"),
    value: str = typer.Argument(..., help="Value to set"),
    global_config: bool = typer.Option(
        False, "--global", "-g",
        help="Set in global configuration instead of project config"
    )
):
    """
    ⚙️  Set a configuration value
    """
    if global_config:
        config = get_global_config()
        config_type = "global"
    else:
        config = get_project_config() or DashapiConfig()
        config_type = "project"

    # Parse the key path
    key_parts = key.split('.')
    if len(key_parts) != 2:
        console.print("❌ Key must be in format 'section.setting' (e.g., 'dashboard.client')", style="red")
        raise typer.Exit(1)

    section, setting = key_parts

    try:
        if section == "dashboard":
            if setting in ("client", "address", "key"):
                setattr(config.dashboard, setting, value)
            elif setting == "timeout":
                config.dashboard.timeout = float(value)
            else:
                console.print(f"❌ Unknown dashboard setting: {setting}", style="red")
                raise typer.Exit(1)

        elif section == "preferences":
            if setting == "table_style":
                config.preferences.table_style = value
            elif setting == "color_output":
                config.preferences.color_output = value.lower() in _BOOL_TRUE
            else:
                console.print(f"❌ Unknown preferences setting: {setting}", style="red")
                raise typer.Exit(1)

        else:
            console.print(f"❌ Unknown configuration section: {section}", style="red")
            console.print("Valid sections: dashboard, preferences", style="dim")
            raise typer.Exit(1)

    except ValueError as e:
        console.print(f"❌ Invalid value for {key}: {e}", style="red")
        raise typer.Exit(1)

    if global_config:
        save_global_config(config)
    else:
        config.save_to_file(get_project_config_path())

    shown = REDACTED if setting == "key" else value
    console.print(f"✅ Set {config_type} configuration: [bold cyan]{key}[/bold cyan] = [bold]{shown}[/bold]", style="green")


@app.command("init")
def init_config(
    client: str = typer.Option("", "--client", "-c", help="Client name registered on the dashboard"),
    address: str = typer.Option("", "--address", "-a", help="Dashboard address"),
    key: str = typer.Option("", "--key", "-k", help="Shared key of the client"),
    global_config: bool = typer.Option(
        False, "--global", "-g",
        help="Create the global configuration instead of a project one"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """
    📁 Create a configuration file
    """
    config_path = _config_path(global_config)
    if config_path.exists() and not force:
        console.print(f"❌ Configuration already exists: {config_path}", style="red")
        console.print("Use --force to overwrite", style="dim")
        raise typer.Exit(1)

    config = DashapiConfig()
    if client:
        config.dashboard.client = client
    if address:
        config.dashboard.address = address
    if key:
        config.dashboard.key = key

    config.save_to_file(config_path)
    console.print(f"✅ Created configuration: [dim]{config_path}[/dim]", style="green")
    if not key:
        console.print(
            f"💡 Set the shared key with 'dashapi config set dashboard.key KEY' or {ENV_KEY}",
            style="dim",
        )
