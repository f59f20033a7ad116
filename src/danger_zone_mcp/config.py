"""Configuration model and config file resolution.

The configuration is read from the first valid file among a fixed list of
project-local and user-global candidates. It is resolved again on every
request so edits take effect without restarting the server.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import NamedTuple

import json5
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from danger_zone_mcp.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR = ".claude"
LOCAL_CONFIG_STEM = ".danger-zone-exec.local"
GLOBAL_CONFIG_STEM = ".danger-zone-exec"
CONFIG_SUFFIXES = (".jsonc", ".json")

Reader = Callable[[Path], str]


class PlainCommand(BaseModel):
    """A command exposed as a tool that runs without confirmation.

    Args:
        name: Tool name, unique across the configuration.
        description: Tool description shown to the client.
        command: Shell command prefix.
        args: Static arguments appended before caller-supplied ones.
        confirm: Reserved flag, not used when executing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str
    command: str
    args: tuple[str, ...] = ()
    confirm: bool = False


class DangerCommand(BaseModel):
    """A command that needs operator confirmation before it runs.

    Args:
        name: Tool name, unique across the configuration.
        description: Tool description shown to the client.
        command: Exact shell command line to execute.
        pre_authorized: Skip the confirmation step entirely.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str
    command: str
    pre_authorized: bool = Field(False, alias="preAuthorized")


class DangerZoneConfig(BaseModel):
    """Root configuration: plain commands and danger zone commands."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    commands: tuple[PlainCommand, ...] = ()
    danger_zone: tuple[DangerCommand, ...] = Field((), alias="dangerZone")

    @property
    def is_empty(self) -> bool:
        return not self.commands and not self.danger_zone


class LoadedConfig(NamedTuple):
    """A resolved configuration and the file it came from (None if empty)."""

    config: DangerZoneConfig
    path: Path | None


def _read_utf8(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def candidate_paths(cwd: Path, home: Path) -> list[Path]:
    """Build the ordered list of config file candidates.

    Project-local files under ``cwd`` come first, then user-global files
    under ``home``. For each location the comment-tolerant ``.jsonc``
    variant is tried before ``.json``.

    Args:
        cwd: Project directory.
        home: User home directory.

    Returns:
        Candidate paths in lookup order.
    """
    paths = [cwd / CONFIG_DIR / f"{LOCAL_CONFIG_STEM}{s}" for s in CONFIG_SUFFIXES]
    paths += [home / CONFIG_DIR / f"{GLOBAL_CONFIG_STEM}{s}" for s in CONFIG_SUFFIXES]
    return paths


def parse_config(text: str) -> DangerZoneConfig:
    """Parse and validate configuration text.

    Comments and trailing commas are accepted.

    Args:
        text: Raw file contents.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the text is not valid JSON5 or fails validation.
    """
    try:
        raw = json5.loads(text)
    except ValueError as e:
        raise ConfigError(f"Invalid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(
            f"Configuration must be an object, got {type(raw).__name__}"
        )

    try:
        return DangerZoneConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def locate_config(
    cwd: Path | None = None,
    home: Path | None = None,
    reader: Reader | None = None,
) -> LoadedConfig:
    """Resolve the active configuration.

    Never raises: unreadable or invalid candidates are skipped, and when no
    candidate works an empty configuration is returned.

    Args:
        cwd: Project directory. Defaults to the process working directory.
        home: Home directory. Defaults to the user's home.
        reader: File reader used for candidates. Defaults to UTF-8 reads.

    Returns:
        The configuration together with its source path.
    """
    cwd = Path.cwd() if cwd is None else cwd
    home = Path.home() if home is None else home
    reader = reader or _read_utf8

    for path in candidate_paths(cwd, home):
        try:
            text = reader(path)
        except OSError as e:
            logger.debug("Config candidate %s not readable: %s", path, e)
            continue
        except UnicodeDecodeError as e:
            logger.warning("Skipping config %s: not valid UTF-8 (%s)", path, e)
            continue

        try:
            config = parse_config(text)
        except ConfigError as e:
            logger.warning("Skipping config %s: %s", path, e)
            continue

        logger.info("Loaded config from: %s", path)
        return LoadedConfig(config, path)

    logger.warning("No valid danger-zone config found; no tools available")
    return LoadedConfig(DangerZoneConfig(), None)


def load_config(
    cwd: Path | None = None,
    home: Path | None = None,
    reader: Reader | None = None,
) -> DangerZoneConfig:
    """Resolve the active configuration, discarding its source path."""
    return locate_config(cwd, home, reader).config
