"""Name-based lookup of configured commands."""

from dataclasses import dataclass
from enum import Enum

from danger_zone_mcp.config import DangerCommand, DangerZoneConfig, PlainCommand


class CommandKind(str, Enum):
    """Which configured set a command came from."""

    PLAIN = "plain"
    DANGER = "danger"


@dataclass(frozen=True)
class CommandRef:
    """A resolved command and the set it belongs to."""

    kind: CommandKind
    entry: PlainCommand | DangerCommand


def iter_commands(config: DangerZoneConfig) -> list[CommandRef]:
    """All configured commands in dispatch order: plain, then danger zone."""
    refs = [CommandRef(CommandKind.PLAIN, cmd) for cmd in config.commands]
    refs += [CommandRef(CommandKind.DANGER, cmd) for cmd in config.danger_zone]
    return refs


def resolve_command(name: str, config: DangerZoneConfig) -> CommandRef | None:
    """Find the first command whose name matches exactly.

    A plain command shadows a danger zone command of the same name, and an
    earlier entry shadows a later one within a set.

    Args:
        name: Requested tool name (case-sensitive).
        config: Resolved configuration.

    Returns:
        The matching reference, or None if nothing matches.
    """
    for ref in iter_commands(config):
        if ref.entry.name == name:
            return ref
    return None
