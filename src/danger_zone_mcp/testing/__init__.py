"""Shared test utilities, fixtures, and factories."""

from danger_zone_mcp.testing.factories import (
    make_config,
    make_danger_command,
    make_plain_command,
    write_config,
)
from danger_zone_mcp.testing.fixtures import (
    RecordingConfirmer,
    SpyExecutor,
)

__all__ = [
    "RecordingConfirmer",
    "SpyExecutor",
    "make_config",
    "make_danger_command",
    "make_plain_command",
    "write_config",
]
