"""CLI entry point for the danger-zone MCP server."""

import asyncio
import logging
import sys

import click
from rich.console import Console

from danger_zone_mcp import __version__
from danger_zone_mcp.cli.output import print_tools
from danger_zone_mcp.config import locate_config
from danger_zone_mcp.confirm import AlwaysDeny, default_confirmer
from danger_zone_mcp.engine import DangerZoneEngine
from danger_zone_mcp.server import create_server, run_stdio

console = Console()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ["debug", "info", "warning", "error"]


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="danger-zone-mcp")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="info",
    help="Log verbosity (logs go to stderr).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Danger Zone MCP server.

    Exposes the commands configured in .claude/.danger-zone-exec files as
    MCP tools. Runs the stdio server when no subcommand is given.
    """
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["console"] = console

    if ctx.invoked_subcommand is None:
        ctx.invoke(serve)


@cli.command()
@click.option(
    "--no-confirm-dialog",
    is_flag=True,
    default=False,
    help="Deny danger zone commands that need confirmation instead of "
    "opening a dialog.",
)
def serve(no_confirm_dialog: bool) -> None:
    """Run the MCP server over stdio."""
    confirmer = AlwaysDeny() if no_confirm_dialog else default_confirmer()
    server = create_server(DangerZoneEngine(confirmer=confirmer))
    asyncio.run(run_stdio(server))


@cli.command("list")
@click.pass_context
def list_tools(ctx: click.Context) -> None:
    """List the tools defined by the active configuration."""
    loaded = locate_config()
    print_tools(ctx.obj["console"], loaded.config, loaded.path)
