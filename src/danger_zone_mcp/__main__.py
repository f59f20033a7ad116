"""Allow ``python -m danger_zone_mcp``."""

from danger_zone_mcp.cli.main import cli

cli()
