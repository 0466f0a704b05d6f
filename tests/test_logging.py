"""Tests for logging setup and emitted structlog events."""

from __future__ import annotations

import logging
import sys

import pytest
import structlog
from builders import Repository

from artifact_model.core.logging import setup_logging
from artifact_model.models.descriptor import Coordinate, DependencySpec
from artifact_model.resolution import LocalRepositoryResolver


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_level_from_env(self, monkeypatch, restore_logging):
        monkeypatch.setenv("ARTIFACT_MODEL_LOG_LEVEL", "warning")
        setup_logging()
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("artifact_model").level == logging.WARNING

    def test_explicit_level_overrides_env(self, monkeypatch, restore_logging):
        monkeypatch.setenv("ARTIFACT_MODEL_LOG_LEVEL", "ERROR")
        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_json_renderer(self, monkeypatch, restore_logging):
        monkeypatch.setenv("ARTIFACT_MODEL_LOG_FORMAT", "json")
        setup_logging()
        formatter = logging.getLogger().handlers[0].formatter
        assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
        assert any(
            isinstance(p, structlog.processors.JSONRenderer) for p in formatter.processors
        )


    def test_single_stderr_handler(self, restore_logging):
        setup_logging()
        setup_logging()
        (handler,) = logging.getLogger().handlers
        assert handler.stream is sys.stderr


class TestEvents:
    def test_cycle_warning_emitted(self, repository: Repository, captured_logs):
        repository.add("g", "a", dependencies=[{"groupId": "g", "artifactId": "a", "version": "1.0.0"}])
        LocalRepositoryResolver(repository.root).resolve(
            [DependencySpec(Coordinate("g", "a", "1.0.0"))]
        )
        events = [e for e in captured_logs if e["event"] == "resolver.cycle_skipped"]
        assert len(events) == 1
        assert events[0]["log_level"] == "warning"
        assert events[0]["parent"] == "g:a:1.0.0"
