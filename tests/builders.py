"""Builders for unit directories, jars and Maven-layout repositories on disk."""

from __future__ import annotations

import json
import zipfile
from pathlib import Path

from artifact_model.config import DEFAULT_DESCRIPTOR_PATH

_POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>{group}</groupId>
  <artifactId>{artifact}</artifactId>
  <version>{version}</version>
  <properties>
{properties}
  </properties>
  <dependencies>
{dependencies}
  </dependencies>
</project>
"""

MANIFEST_ONLY = {"META-INF/MANIFEST.MF": "Manifest-Version: 1.0\n"}


def write_jar(path: Path, entries: dict[str, str] | None = None) -> Path:
    """Write a zip archive from entry name → text content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in (entries if entries is not None else MANIFEST_ONLY).items():
            zf.writestr(name, content)
    return path


def write_descriptor(unit_root: Path, data: dict | str) -> Path:
    path = unit_root / DEFAULT_DESCRIPTOR_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data if isinstance(data, str) else json.dumps(data))
    return path


class Repository:
    """Maven-layout repository rooted at *root*."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def artifact_dir(self, group: str, artifact: str, version: str) -> Path:
        return self.root.joinpath(*group.split("."), artifact, version)

    def add(
        self,
        group: str,
        artifact: str,
        version: str = "1.0.0",
        *,
        classifier: str | None = None,
        entries: dict[str, str] | None = None,
        dependencies: list[dict[str, str]] | None = None,
        properties: dict[str, str] | None = None,
    ) -> Path:
        """Add a jar, plus a pom when *dependencies* is given. Returns the jar path."""
        directory = self.artifact_dir(group, artifact, version)
        suffix = f"-{classifier}" if classifier else ""
        jar = write_jar(directory / f"{artifact}-{version}{suffix}.jar", entries)
        if dependencies is not None:
            rendered = "\n".join(
                "    <dependency>"
                + "".join(f"<{key}>{value}</{key}>" for key, value in dep.items())
                + "</dependency>"
                for dep in dependencies
            )
            props = "\n".join(
                f"    <{key}>{value}</{key}>" for key, value in (properties or {}).items()
            )
            (directory / f"{artifact}-{version}.pom").write_text(
                _POM_TEMPLATE.format(
                    group=group,
                    artifact=artifact,
                    version=version,
                    properties=props,
                    dependencies=rendered,
                )
            )
        return jar
