"""Test doubles for the confirmation and execution seams."""

from pathlib import Path

from danger_zone_mcp.executor import ERROR_PREFIX, SUCCESS_MESSAGE, ExecutionOutcome


class RecordingConfirmer:
    """Confirmation capability that records every request.

    Args:
        answer: Value returned from confirm().
        error: Exception raised from confirm() instead of answering.
    """

    def __init__(self, answer: bool = True, error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def confirm(self, command_text: str, description: str) -> bool:
        self.calls.append((command_text, description))
        if self.error is not None:
            raise self.error
        return self.answer


class SpyExecutor:
    """Executor that records command lines instead of running them.

    Args:
        text: Text returned in every outcome.
    """

    def __init__(self, text: str = "spy output") -> None:
        self.text = text
        self.calls: list[tuple[str, Path | None]] = []

    def execute(
        self,
        command_line: str,
        cwd: Path | None = None,
        success_message: str = SUCCESS_MESSAGE,
        error_prefix: str = ERROR_PREFIX,
    ) -> ExecutionOutcome:
        self.calls.append((command_line, cwd))
        return ExecutionOutcome(text=self.text, ok=True, returncode=0)

    @property
    def command_lines(self) -> list[str]:
        return [line for line, _ in self.calls]
