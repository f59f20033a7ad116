"""Shell command execution with normalized results.

Command lines are joined with plain spaces and run through the shell. No
quoting or escaping is applied, so caller-supplied arguments can inject
shell syntax. Only expose commands you would let the client run freely.
"""

import logging
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Command executed successfully"
ERROR_PREFIX = "Error executing command: "


@dataclass(frozen=True)
class ExecutionOutcome:
    """Normalized result of running a command.

    Attributes:
        text: Payload returned to the client.
        ok: Whether the process launched and exited with status 0.
        returncode: Exit status, or None if the process never started.
    """

    text: str
    ok: bool
    returncode: int | None = None


def build_command_line(
    command: str,
    static_args: Iterable[str] = (),
    caller_args: Iterable[str] = (),
) -> str:
    """Join a command with its configured and caller-supplied arguments."""
    return " ".join([command, *static_args, *caller_args])


class CommandExecutor:
    """Runs command lines in a shell and captures their output."""

    def execute(
        self,
        command_line: str,
        cwd: Path | None = None,
        success_message: str = SUCCESS_MESSAGE,
        error_prefix: str = ERROR_PREFIX,
    ) -> ExecutionOutcome:
        """Run ``command_line`` and wait for it to finish.

        Failures are reported in the outcome text rather than raised, so
        the client can read them.

        Args:
            command_line: Full shell command line.
            cwd: Working directory. Defaults to the process working directory.
            success_message: Text used when the command prints nothing.
            error_prefix: Prefix for failure messages.

        Returns:
            The execution outcome.
        """
        workdir = cwd or Path.cwd()
        logger.info("Executing: %s (cwd=%s)", command_line, workdir)

        try:
            result = subprocess.run(
                command_line,
                shell=True,
                cwd=str(workdir),
                capture_output=True,
                text=True,
                errors="replace",
            )
        except Exception as e:
            logger.warning("Failed to launch '%s': %s", command_line, e)
            return ExecutionOutcome(text=f"{error_prefix}{e}", ok=False)

        if result.returncode != 0:
            logger.warning(
                "Command '%s' exited with status %s", command_line, result.returncode
            )
            detail = result.stderr or result.stdout
            return ExecutionOutcome(
                text=(
                    f"{error_prefix}Command failed (exit {result.returncode}): "
                    f"{command_line}\n{detail}"
                ),
                ok=False,
                returncode=result.returncode,
            )

        return ExecutionOutcome(
            text=result.stdout or result.stderr or success_message,
            ok=True,
            returncode=0,
        )
