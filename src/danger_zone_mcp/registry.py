"""Tool descriptors synthesized from the configuration."""

from mcp.types import Tool

from danger_zone_mcp.config import DangerCommand, DangerZoneConfig, PlainCommand

DANGER_PREFIX = "[DANGER ZONE] "


def plain_tool(cmd: PlainCommand) -> Tool:
    """Describe a plain command as a tool accepting extra arguments."""
    return Tool(
        name=cmd.name,
        description=cmd.description,
        inputSchema={
            "type": "object",
            "properties": {
                "args": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Additional arguments to pass to the command",
                },
            },
        },
    )


def danger_tool(cmd: DangerCommand) -> Tool:
    """Describe a danger zone command.

    ``confirm`` is only marked required when the command is not
    pre-authorized. It is a hint for the calling agent; the confirmation
    gate enforces the actual check.
    """
    return Tool(
        name=cmd.name,
        description=f"{DANGER_PREFIX}{cmd.description}",
        inputSchema={
            "type": "object",
            "properties": {
                "confirm": {
                    "type": "boolean",
                    "description": "Must be true to execute this dangerous command",
                },
            },
            "required": [] if cmd.pre_authorized else ["confirm"],
        },
    )


def list_tools(config: DangerZoneConfig) -> list[Tool]:
    """Build tool descriptors, plain commands first, in configured order.

    Args:
        config: Resolved configuration.

    Returns:
        One descriptor per configured entry.
    """
    tools = [plain_tool(cmd) for cmd in config.commands]
    tools += [danger_tool(cmd) for cmd in config.danger_zone]
    return tools
