"""Expose configured shell commands as MCP tools, with a confirmation
step for commands in the danger zone.
"""

__version__ = "0.1.0"

from danger_zone_mcp.config import DangerZoneConfig, load_config  # noqa: E402
from danger_zone_mcp.engine import DangerZoneEngine  # noqa: E402
from danger_zone_mcp.server import create_server  # noqa: E402

__all__ = [
    "DangerZoneConfig",
    "DangerZoneEngine",
    "__version__",
    "create_server",
    "load_config",
]
