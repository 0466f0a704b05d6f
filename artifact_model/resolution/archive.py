"""Archive inspection — list the packages and resources inside a jar."""

from __future__ import annotations

import zipfile
from dataclasses import dataclass, field
from pathlib import Path

import structlog

log = structlog.get_logger("artifact_model.resolution")


@dataclass(frozen=True)
class ArchiveContents:
    """Packages (dotted) and resource entries contained in a binary."""

    packages: frozenset[str] = field(default_factory=frozenset)
    resources: frozenset[str] = field(default_factory=frozenset)


def inspect_archive(path: Path) -> ArchiveContents:
    """Read a jar and split its entries into class packages and resources.

    A package is any directory holding at least one ``.class`` entry, except
    under ``META-INF``. Every other file entry is a resource. Unreadable
    archives yield empty contents.
    """
    try:
        with zipfile.ZipFile(path) as zf:
            names = zf.namelist()
    except (OSError, zipfile.BadZipFile) as e:
        log.warning("archive.unreadable", path=str(path), error=str(e))
        return ArchiveContents()

    packages: set[str] = set()
    resources: set[str] = set()
    for name in names:
        if name.endswith("/"):
            continue
        if name.endswith(".class"):
            directory, _, _ = name.rpartition("/")
            if directory and not directory.startswith("META-INF"):
                packages.add(directory.replace("/", "."))
            continue
        resources.add(name)

    return ArchiveContents(packages=frozenset(packages), resources=frozenset(resources))
