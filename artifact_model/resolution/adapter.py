"""DependencyResolutionAdapter — materialize declared specs through a resolver."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from artifact_model.exceptions import UnresolvableDependencyError
from artifact_model.models.classloader import ResolvedDependency
from artifact_model.models.descriptor import Coordinate, DependencySpec
from artifact_model.resolution.base import DependencyResolver

log = structlog.get_logger("artifact_model.resolution")


class DependencyResolutionAdapter:
    """Thin wrapper around a DependencyResolver.

    Guarantees one result per direct spec, in declaration order, stamped with
    the declared spec. Performs no isolation logic and no retries.
    """

    def __init__(self, resolver: DependencyResolver) -> None:
        self._resolver = resolver

    def resolve(self, specs: Iterable[DependencySpec]) -> tuple[ResolvedDependency, ...]:
        declared = list(dict.fromkeys(specs))
        if not declared:
            return ()

        results = self._resolver.resolve(declared)

        by_coordinate: dict[Coordinate, ResolvedDependency] = {}
        for resolved in results:
            by_coordinate.setdefault(resolved.coordinate, resolved)

        ordered: list[ResolvedDependency] = []
        for spec in declared:
            resolved = by_coordinate.get(spec.coordinate)
            if resolved is None:
                raise UnresolvableDependencyError(
                    spec.coordinate, "resolver returned no result for this coordinate"
                )
            ordered.append(resolved if resolved.spec == spec else resolved.with_spec(spec))

        log.debug(
            "resolution.resolved",
            direct=len(ordered),
            total=sum(1 for d in ordered for _ in d.walk()),
        )
        return tuple(ordered)
