"""Exception types raised by the danger-zone engine."""


class DangerZoneError(Exception):
    """Base exception for danger-zone-mcp errors."""


class ConfigError(DangerZoneError):
    """A configuration candidate could not be parsed or validated."""


class ToolNotFoundError(DangerZoneError):
    """No configured command matches the requested tool name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidToolArguments(DangerZoneError):
    """Caller-supplied tool arguments do not match the tool's input schema."""
