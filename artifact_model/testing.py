"""Test doubles for artifact_model — use in unit and integration tests.

Usage::

    from artifact_model.testing import StaticResolver, resolved

    lib = resolved("org.foo", "lib", "1.0")
    resolver = StaticResolver([lib])
    factory = ArtifactDescriptorFactory(resolver)
"""

from __future__ import annotations

from collections.abc import Iterable

from artifact_model.exceptions import UnresolvableDependencyError
from artifact_model.models.classloader import ResolvedDependency
from artifact_model.models.descriptor import (
    BundleScope,
    Coordinate,
    DependencySpec,
)


def resolved(
    group: str,
    artifact: str,
    version: str = "1.0.0",
    *,
    classifier: str | None = None,
    scope: BundleScope = BundleScope.COMPILE,
    shared: bool = False,
    location: str | None = None,
    dependencies: Iterable[ResolvedDependency] = (),
    packages: Iterable[str] = (),
    resources: Iterable[str] = (),
) -> ResolvedDependency:
    """Build a ResolvedDependency with a predictable fake location."""
    coordinate = Coordinate(group, artifact, version, classifier)
    if location is None:
        suffix = f"-{classifier}" if classifier else ""
        location = f"file:///repo/{group.replace('.', '/')}/{artifact}/{version}/{artifact}-{version}{suffix}.jar"
    return ResolvedDependency(
        spec=DependencySpec(coordinate, scope, shared),
        location=location,
        dependencies=tuple(dependencies),
        packages=frozenset(packages),
        resources=frozenset(resources),
    )


class StaticResolver:
    """Resolver that answers from a fixed set of pre-built results.

    Records every call so tests can assert on what was asked.
    """

    def __init__(self, results: Iterable[ResolvedDependency] = ()) -> None:
        self._by_coordinate = {r.coordinate: r for r in results}
        self.calls: list[list[DependencySpec]] = []

    def resolve(self, specs: list[DependencySpec]) -> list[ResolvedDependency]:
        self.calls.append(list(specs))
        out: list[ResolvedDependency] = []
        for spec in specs:
            result = self._by_coordinate.get(spec.coordinate)
            if result is None:
                raise UnresolvableDependencyError(spec.coordinate, "not known to StaticResolver")
            out.append(result)
        return out
