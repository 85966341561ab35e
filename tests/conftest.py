# Kodebase Config Test Fixtures
# Pytest fixtures for kodebase-config tests

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
import yaml


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_root(temp_dir: Path) -> Path:
    """Create an empty project directory."""
    root = temp_dir / "project"
    root.mkdir()
    return root


@pytest.fixture
def settings_path(project_root: Path) -> Path:
    """Default settings file location inside the project (not created)."""
    return project_root / ".kodebase" / "config" / "settings.yml"


@pytest.fixture
def sample_config() -> dict:
    """A small-team style document touching most blocks."""
    return {
        "version": "1.0",
        "artifactsDir": ".kodebase/artifacts",
        "gitOps": {
            "post_merge": {
                "strategy": "cascade_pr",
                "cascade_pr": {"auto_merge": False, "labels": ["cascade"]},
            },
            "hooks": {
                "enabled": True,
                "pre_commit": {"validate_dependencies": False, "non_blocking": False},
            },
            "platform": {
                "type": "gitlab",
                "gitlab": {"api_url": "https://gitlab.example.com/api/v4"},
            },
            "cascades": {"mode": "batched", "batch_delay_seconds": 60},
            "commits": {"format": "conventional", "conventional": {"scope": "core"}},
        },
    }


@pytest.fixture
def write_settings(settings_path: Path):
    """Write a document (or raw text) to the project's settings file."""

    def _write(content) -> Path:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            settings_path.write_text(content, encoding="utf-8")
        else:
            with open(settings_path, "w", encoding="utf-8") as f:
                yaml.dump(content, f, default_flow_style=False)
        return settings_path

    return _write
