"""Tests for Rich output helpers."""

from pathlib import Path

from rich.console import Console
from rich.table import Table

from danger_zone_mcp.cli.output import create_tools_table, print_tools
from danger_zone_mcp.testing import make_config, make_danger_command, make_plain_command


def _console() -> Console:
    return Console(record=True, width=120)


class TestCreateToolsTable:
    """create_tools_table."""

    def test_returns_table(self) -> None:
        table = create_tools_table("Tools")
        assert isinstance(table, Table)
        assert table.title == "Tools"

    def test_columns(self) -> None:
        table = create_tools_table("Tools")
        headers = [col.header for col in table.columns]
        assert headers == ["Tool", "Kind", "Confirmation", "Command"]


class TestPrintTools:
    """print_tools."""

    def test_rows(self) -> None:
        console = _console()
        config = make_config(
            commands=[make_plain_command(name="greet", command="echo", args=("hi",))],
            danger_zone=[
                make_danger_command(name="wipe"),
                make_danger_command(name="deploy", pre_authorized=True),
            ],
        )
        print_tools(console, config, Path("/tmp/cfg.json"))
        text = console.export_text()
        assert "/tmp/cfg.json" in text
        assert "echo hi" in text
        assert "required" in text
        assert "pre-authorized" in text

    def test_empty(self) -> None:
        console = _console()
        print_tools(console, make_config(), None)
        text = console.export_text()
        assert "No danger-zone config found" in text
        assert "No tools configured" in text
