"""Shared pytest fixtures for artifact-model tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from structlog.testing import capture_logs
from builders import Repository


@pytest.fixture(autouse=True)
def captured_logs():
    """Capture structlog events instead of printing them."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture(autouse=True)
def _default_layout_env(monkeypatch):
    for key in (
        "ARTIFACT_MODEL_DESCRIPTOR_PATH",
        "ARTIFACT_MODEL_CLASSES_DIR",
        "ARTIFACT_MODEL_CONFIG_DIR",
        "ARTIFACT_MODEL_REPOSITORY_DIR",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def unit_root(tmp_path: Path) -> Path:
    root = tmp_path / "test-app"
    (root / "classes").mkdir(parents=True)
    return root


@pytest.fixture
def repository(unit_root: Path) -> Repository:
    return Repository(unit_root / "repository")
