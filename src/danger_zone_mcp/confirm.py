"""Confirmation gate for danger zone commands.

The gate asks a confirmation capability before a danger zone command runs.
Capabilities range from non-interactive variants to a native desktop dialog
launched as a subprocess, since stdin and stdout belong to the MCP
transport.
"""

import logging
import platform as platform_mod
import shutil
import subprocess
from enum import Enum
from typing import Protocol, runtime_checkable

from danger_zone_mcp.config import DangerCommand

logger = logging.getLogger(__name__)

DIALOG_TITLE = "Danger Zone"
DEFAULT_DIALOG_TIMEOUT = 300


class ConfirmationState(str, Enum):
    """Outcome of the confirmation gate for a single call."""

    NOT_REQUIRED = "not_required"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DENIED = "denied"

    @property
    def allows_execution(self) -> bool:
        return self in (ConfirmationState.NOT_REQUIRED, ConfirmationState.CONFIRMED)


@runtime_checkable
class ConfirmationCapability(Protocol):
    """Yields a yes/no decision for a pending dangerous execution."""

    def confirm(self, command_text: str, description: str) -> bool:
        """Ask whether ``command_text`` may run.

        Args:
            command_text: The exact command line about to execute.
            description: Human-readable description of the command.

        Returns:
            True to allow execution.
        """
        ...


class AlwaysAllow:
    """Approves every request without asking."""

    def confirm(self, command_text: str, description: str) -> bool:
        return True


class AlwaysDeny:
    """Rejects every request; for hosts with no way to ask an operator."""

    def confirm(self, command_text: str, description: str) -> bool:
        return False


def _applescript_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class DialogConfirmer:
    """Asks the operator through a native desktop dialog.

    Uses ``osascript`` on macOS and ``zenity`` or ``kdialog`` on Linux. An
    unanswered dialog is treated as a refusal once ``timeout`` seconds pass.

    Args:
        timeout: Seconds to wait for an answer.
        system: Platform name override, as returned by ``platform.system()``.
    """

    def __init__(
        self, timeout: int = DEFAULT_DIALOG_TIMEOUT, system: str | None = None
    ) -> None:
        self.timeout = timeout
        self.system = system or platform_mod.system()

    def _message(self, command_text: str, description: str) -> str:
        return (
            f"{description}\n\nCommand:\n{command_text}\n\n"
            "Do you want to execute this command?"
        )

    def build_argv(self, command_text: str, description: str) -> list[str] | None:
        """Build the dialog command line for this platform.

        Returns:
            The argv to run, or None if no dialog program is available.
        """
        message = self._message(command_text, description)

        if self.system == "Darwin":
            script = (
                f"display dialog {_applescript_string(message)} "
                f"with title {_applescript_string(DIALOG_TITLE)} "
                'buttons {"Cancel", "Execute"} default button "Cancel" '
                'cancel button "Cancel" with icon caution '
                f"giving up after {self.timeout}"
            )
            return ["osascript", "-e", script]

        if self.system == "Linux":
            if shutil.which("zenity"):
                return [
                    "zenity",
                    "--question",
                    "--no-markup",
                    f"--title={DIALOG_TITLE}",
                    f"--text={message}",
                    "--ok-label=Execute",
                    "--cancel-label=Cancel",
                    f"--timeout={self.timeout}",
                ]
            if shutil.which("kdialog"):
                return [
                    "kdialog",
                    "--title",
                    DIALOG_TITLE,
                    "--warningyesno",
                    message,
                    "--yes-label",
                    "Execute",
                    "--no-label",
                    "Cancel",
                ]

        return None

    def confirm(self, command_text: str, description: str) -> bool:
        argv = self.build_argv(command_text, description)
        if argv is None:
            logger.warning(
                "No confirmation dialog available on %s; denying", self.system
            )
            return False

        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=self.timeout + 5,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Confirmation dialog timed out after %ss", self.timeout)
            return False
        except OSError as e:
            logger.warning("Could not open confirmation dialog: %s", e)
            return False

        if result.returncode != 0:
            return False
        if argv[0] == "osascript":
            return (
                "button returned:Execute" in result.stdout
                and "gave up:true" not in result.stdout
            )
        return True


def default_confirmer() -> ConfirmationCapability:
    """The interactive confirmer for the host platform."""
    return DialogConfirmer()


class ConfirmationGate:
    """One-shot, per-call confirmation check for danger zone commands.

    Args:
        capability: Source of yes/no decisions.
    """

    def __init__(self, capability: ConfirmationCapability) -> None:
        self.capability = capability

    def evaluate(self, command: DangerCommand) -> ConfirmationState:
        """Decide whether ``command`` may run now.

        Pre-authorized commands skip the capability. Otherwise the gate is
        PENDING while the capability is asked, exactly once; a refusal or an
        error from the capability denies. PENDING is transient and never
        returned.

        Args:
            command: The danger zone command about to run.

        Returns:
            NOT_REQUIRED, CONFIRMED or DENIED.
        """
        if command.pre_authorized:
            return ConfirmationState.NOT_REQUIRED

        logger.info(
            "Confirmation %s for danger command '%s'",
            ConfirmationState.PENDING.value,
            command.name,
        )
        try:
            approved = self.capability.confirm(command.command, command.description)
        except Exception:
            logger.exception("Confirmation for '%s' failed", command.name)
            approved = False

        state = (
            ConfirmationState.CONFIRMED if approved is True else ConfirmationState.DENIED
        )
        logger.info("Danger command '%s' %s", command.name, state.value)
        return state
