"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest

from danger_zone_mcp.engine import DangerZoneEngine
from danger_zone_mcp.testing import RecordingConfirmer, SpyExecutor


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def confirmer() -> RecordingConfirmer:
    return RecordingConfirmer(answer=True)


@pytest.fixture
def spy_executor() -> SpyExecutor:
    return SpyExecutor()


@pytest.fixture
def engine(
    project_dir: Path,
    home_dir: Path,
    confirmer: RecordingConfirmer,
    spy_executor: SpyExecutor,
) -> DangerZoneEngine:
    """Engine reading config from temp dirs, with doubles for side effects."""
    return DangerZoneEngine(
        confirmer=confirmer,
        executor=spy_executor,
        cwd=project_dir,
        home=home_dir,
    )
