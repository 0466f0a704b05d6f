"""Dependency resolution — resolver interface, adapter and local repository resolver."""

from artifact_model.resolution.adapter import DependencyResolutionAdapter
from artifact_model.resolution.archive import ArchiveContents, inspect_archive
from artifact_model.resolution.base import DependencyResolver
from artifact_model.resolution.local_repository import LocalRepositoryResolver

__all__ = [
    "ArchiveContents",
    "DependencyResolutionAdapter",
    "DependencyResolver",
    "LocalRepositoryResolver",
    "inspect_archive",
]
