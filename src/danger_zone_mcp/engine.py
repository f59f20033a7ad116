"""Tool engine: ties config resolution, dispatch, confirmation and execution."""

import logging
from pathlib import Path
from typing import Any

from mcp.types import Tool
from pydantic import BaseModel, ValidationError

from danger_zone_mcp.config import (
    DangerCommand,
    DangerZoneConfig,
    PlainCommand,
    Reader,
    load_config,
)
from danger_zone_mcp.confirm import (
    ConfirmationCapability,
    ConfirmationGate,
    default_confirmer,
)
from danger_zone_mcp.dispatch import CommandKind, resolve_command
from danger_zone_mcp.errors import InvalidToolArguments, ToolNotFoundError
from danger_zone_mcp.executor import CommandExecutor, build_command_line
from danger_zone_mcp.registry import list_tools

logger = logging.getLogger(__name__)

DANGER_SUCCESS_MESSAGE = "Danger command executed successfully"
DANGER_ERROR_PREFIX = "Error executing danger command: "


class PlainCommandInput(BaseModel):
    """Arguments accepted by a plain command tool."""

    args: list[str] | None = None


def cancellation_message(name: str) -> str:
    return f"Execution of danger zone command '{name}' was cancelled by the user."


class DangerZoneEngine:
    """Serves tool listings and tool calls from the current configuration.

    The configuration is resolved again for every call; nothing is cached
    between calls.

    Args:
        confirmer: Confirmation capability for danger zone commands.
        executor: Command executor.
        cwd: Project directory used for config lookup and execution.
            Defaults to the process working directory at call time.
        home: Home directory for the global config. Defaults to the user's.
        reader: File reader for config candidates.
    """

    def __init__(
        self,
        confirmer: ConfirmationCapability | None = None,
        executor: CommandExecutor | None = None,
        cwd: Path | None = None,
        home: Path | None = None,
        reader: Reader | None = None,
    ) -> None:
        self.gate = ConfirmationGate(confirmer or default_confirmer())
        self.executor = executor or CommandExecutor()
        self.cwd = cwd
        self.home = home
        self.reader = reader

    def load_config(self) -> DangerZoneConfig:
        return load_config(self.cwd, self.home, self.reader)

    def list_tools(self) -> list[Tool]:
        """Describe every configured command as a tool."""
        return list_tools(self.load_config())

    def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """Run the tool called ``name``.

        Args:
            name: Tool name.
            arguments: Tool arguments from the client.

        Returns:
            Text payload for the client. Execution failures and cancelled
            confirmations are reported here, not raised.

        Raises:
            ToolNotFoundError: If no configured command has this name.
            InvalidToolArguments: If plain command arguments are malformed.
        """
        ref = resolve_command(name, self.load_config())
        if ref is None:
            logger.warning("Unknown tool requested: %s", name)
            raise ToolNotFoundError(name)

        if ref.kind is CommandKind.PLAIN:
            return self._run_plain(ref.entry, arguments or {})
        return self._run_danger(ref.entry)

    def _run_plain(self, cmd: PlainCommand, arguments: dict[str, Any]) -> str:
        try:
            params = PlainCommandInput.model_validate(arguments)
        except ValidationError as e:
            raise InvalidToolArguments(
                f"Invalid arguments for '{cmd.name}': {e}"
            ) from e

        command_line = build_command_line(cmd.command, cmd.args, params.args or ())
        return self.executor.execute(command_line, cwd=self.cwd).text

    def _run_danger(self, cmd: DangerCommand) -> str:
        state = self.gate.evaluate(cmd)
        if not state.allows_execution:
            return cancellation_message(cmd.name)

        return self.executor.execute(
            cmd.command,
            cwd=self.cwd,
            success_message=DANGER_SUCCESS_MESSAGE,
            error_prefix=DANGER_ERROR_PREFIX,
        ).text
