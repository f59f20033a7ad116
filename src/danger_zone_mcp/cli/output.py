"""Rich output formatting helpers."""

from pathlib import Path

from rich.console import Console
from rich.table import Table

from danger_zone_mcp.config import DangerZoneConfig
from danger_zone_mcp.dispatch import CommandKind, iter_commands


def create_tools_table(title: str) -> Table:
    """Create the table used to list configured tools.

    Args:
        title: Table title.

    Returns:
        Configured Rich Table.
    """
    table = Table(title=title)
    table.add_column("Tool", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Confirmation", style="bold")
    table.add_column("Command")
    return table


def print_tools(console: Console, config: DangerZoneConfig, source: Path | None) -> None:
    """Print the configured tools and where they were loaded from.

    Args:
        console: Rich console for output.
        config: Resolved configuration.
        source: Config file path, or None when no config was found.
    """
    if source is None:
        console.print("[yellow]No danger-zone config found.[/yellow]")
    else:
        console.print(f"[dim]Config: {source}[/dim]")

    if config.is_empty:
        console.print("No tools configured.")
        return

    table = create_tools_table("Configured tools")
    for ref in iter_commands(config):
        entry = ref.entry
        if ref.kind is CommandKind.PLAIN:
            command = " ".join([entry.command, *entry.args])
            table.add_row(entry.name, "plain", "[green]none[/green]", command)
        else:
            confirmation = (
                "[yellow]pre-authorized[/yellow]"
                if entry.pre_authorized
                else "[red]required[/red]"
            )
            table.add_row(entry.name, "danger", confirmation, entry.command)
    console.print(table)
