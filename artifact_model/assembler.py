"""Classpath & isolation assembler — descriptor + resolved forest → ClassLoaderModel."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from artifact_model.exceptions import InvalidDependencyShapeError
from artifact_model.models.classloader import (
    BundleDependency,
    ClassLoaderModel,
    ResolvedDependency,
)
from artifact_model.models.descriptor import UnitDescriptor

log = structlog.get_logger("artifact_model.assembler")


class ClasspathAssembler:
    """
    Build the class-loading model of a unit.

    Rules, per direct dependency in declared order:
      1. every direct dependency is reported as a BundleDependency;
      2. a plugin-classified dependency is an isolation boundary: neither it
         nor anything in its closure reaches the classpath or the export
         surface, even when also reachable through a non-plugin path;
      3. a non-plugin dependency contributes its location (first seen wins)
         and is walked depth-first in declared order;
      4. a shared non-plugin dependency exports its packages and resources.
    The unit's own classes location is always first, and the descriptor's own
    export lists are always included.
    """

    def assemble(
        self,
        descriptor: UnitDescriptor,
        resolved: Iterable[ResolvedDependency],
        *,
        classes_location: str,
    ) -> ClassLoaderModel:
        direct = tuple(resolved)
        self.validate(direct)

        isolated = self._isolated_locations(direct)

        urls: dict[str, None] = {classes_location: None}
        packages: set[str] = set(descriptor.exported_packages)
        resources: set[str] = set(descriptor.exported_resources)
        bundles: dict[BundleDependency, None] = {}

        for dependency in direct:
            bundles[BundleDependency.of(dependency)] = None
            self._collect(dependency, isolated, urls, packages, resources)

        model = ClassLoaderModel(
            urls=tuple(urls),
            dependencies=tuple(bundles),
            exported_packages=frozenset(packages),
            exported_resources=frozenset(resources),
        )
        log.debug(
            "assembler.assembled",
            urls=len(model.urls),
            dependencies=len(model.dependencies),
            isolated=len(isolated),
            exported_packages=len(model.exported_packages),
        )
        return model

    @staticmethod
    def validate(direct: Iterable[ResolvedDependency]) -> None:
        """Reject any node that is both plugin-classified and shared."""
        for dependency in direct:
            for node in dependency.walk():
                if node.is_plugin and node.is_shared:
                    raise InvalidDependencyShapeError(node.coordinate)

    @staticmethod
    def _isolated_locations(direct: tuple[ResolvedDependency, ...]) -> set[str]:
        """Locations of every plugin node and its closure, wherever it sits in the forest."""
        isolated: set[str] = set()
        for dependency in direct:
            for node in dependency.walk():
                if node.is_plugin:
                    isolated.update(member.location for member in node.walk())
        return isolated

    def _collect(
        self,
        dependency: ResolvedDependency,
        isolated: set[str],
        urls: dict[str, None],
        packages: set[str],
        resources: set[str],
    ) -> None:
        if dependency.is_plugin:
            return

        # An isolated location stays off the classpath, but this copy's
        # children may still be reachable only through non-plugin paths.
        if dependency.location not in isolated:
            urls.setdefault(dependency.location, None)
            if dependency.is_shared:
                packages.update(dependency.packages)
                resources.update(dependency.resources)

        for child in dependency.dependencies:
            self._collect(child, isolated, urls, packages, resources)
