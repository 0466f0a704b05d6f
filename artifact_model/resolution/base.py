"""Resolver interface — the single call made to dependency-resolution infrastructure."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from artifact_model.models.classloader import ResolvedDependency
from artifact_model.models.descriptor import DependencySpec


@runtime_checkable
class DependencyResolver(Protocol):
    """Interface that every resolver must satisfy.

    Returns one ResolvedDependency per input spec, each carrying its own
    transitive closure. Raises UnresolvableDependencyError when a coordinate
    cannot be located. Retries and timeouts are the resolver's own business.
    """

    def resolve(self, specs: list[DependencySpec]) -> list[ResolvedDependency]: ...
