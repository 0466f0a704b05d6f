"""Resolution and class-loading data models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from pathlib import Path

from artifact_model.models.descriptor import (
    BundleScope,
    Coordinate,
    DependencySpec,
    RuntimeVersion,
)


@dataclass(frozen=True)
class ResolvedDependency:
    """
    A dependency spec materialized to a binary location.
    Children form this node's own transitive closure; the same coordinate
    reached through two parents is two independent values.
    """

    spec: DependencySpec
    location: str  # URI of the binary
    dependencies: tuple[ResolvedDependency, ...] = ()
    packages: frozenset[str] = field(default_factory=frozenset)
    resources: frozenset[str] = field(default_factory=frozenset)

    @property
    def coordinate(self) -> Coordinate:
        return self.spec.coordinate

    @property
    def is_plugin(self) -> bool:
        return self.spec.is_plugin

    @property
    def is_shared(self) -> bool:
        return self.spec.is_shared

    def with_spec(self, spec: DependencySpec) -> ResolvedDependency:
        return replace(self, spec=spec)

    def walk(self) -> Iterator[ResolvedDependency]:
        """Yield this node and every node of its closure, depth-first."""
        yield self
        for child in self.dependencies:
            yield from child.walk()


@dataclass(frozen=True)
class BundleDependency:
    """Read-only projection of a direct dependency, for reporting."""

    coordinate: Coordinate
    scope: BundleScope
    location: str

    @classmethod
    def of(cls, resolved: ResolvedDependency) -> BundleDependency:
        return cls(
            coordinate=resolved.coordinate,
            scope=resolved.spec.scope,
            location=resolved.location,
        )


@dataclass(frozen=True)
class ClassLoaderModel:
    """Final class-loading model of a unit."""

    urls: tuple[str, ...]
    dependencies: tuple[BundleDependency, ...] = ()
    exported_packages: frozenset[str] = field(default_factory=frozenset)
    exported_resources: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class ArtifactDescriptor:
    """Everything needed to deploy one unit; replaced on redeploy, never mutated."""

    name: str
    root: Path
    min_runtime_version: RuntimeVersion
    config_resources: tuple[str, ...]
    absolute_resource_paths: tuple[str, ...]
    class_loader_model: ClassLoaderModel
