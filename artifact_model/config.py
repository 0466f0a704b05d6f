"""Unit directory layout and environment configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_DESCRIPTOR_PATH = "META-INF/mule-artifact/mule-artifact.json"
DEFAULT_CLASSES_DIR = "classes"
DEFAULT_CONFIG_DIR = "classes"
DEFAULT_REPOSITORY_DIR = "repository"


@dataclass(frozen=True)
class UnitLayout:
    """Relative locations inside a deployed unit's root directory."""

    descriptor_path: str = DEFAULT_DESCRIPTOR_PATH
    classes_dir: str = DEFAULT_CLASSES_DIR
    config_dir: str = DEFAULT_CONFIG_DIR
    repository_dir: str = DEFAULT_REPOSITORY_DIR


def layout_from_env() -> UnitLayout:
    """Build a UnitLayout, overriding defaults from environment variables.

    Reads:
        ARTIFACT_MODEL_DESCRIPTOR_PATH
        ARTIFACT_MODEL_CLASSES_DIR
        ARTIFACT_MODEL_CONFIG_DIR
        ARTIFACT_MODEL_REPOSITORY_DIR
    """
    return UnitLayout(
        descriptor_path=os.environ.get("ARTIFACT_MODEL_DESCRIPTOR_PATH", DEFAULT_DESCRIPTOR_PATH),
        classes_dir=os.environ.get("ARTIFACT_MODEL_CLASSES_DIR", DEFAULT_CLASSES_DIR),
        config_dir=os.environ.get("ARTIFACT_MODEL_CONFIG_DIR", DEFAULT_CONFIG_DIR),
        repository_dir=os.environ.get("ARTIFACT_MODEL_REPOSITORY_DIR", DEFAULT_REPOSITORY_DIR),
    )
