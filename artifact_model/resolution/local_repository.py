"""Resolver backed by a Maven-layout repository directory bundled with the unit."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

import structlog

from artifact_model.exceptions import UnresolvableDependencyError
from artifact_model.models.classloader import ResolvedDependency
from artifact_model.models.descriptor import BundleScope, Coordinate, DependencySpec
from artifact_model.resolution.archive import inspect_archive

log = structlog.get_logger("artifact_model.resolution")

_NS = "{http://maven.apache.org/POM/4.0.0}"

_PROP_RE = re.compile(r"\$\{([^}]+)\}")

# Scopes that do not propagate to dependents.
_NON_TRANSITIVE_SCOPES = {BundleScope.TEST, BundleScope.PROVIDED}


def _resolve_props(value: str, props: dict[str, str]) -> str:
    """Replace ${property} placeholders with values from <properties>."""

    def _replace(m: re.Match) -> str:
        key = m.group(1)
        return props.get(key, m.group(0))  # keep original if not found

    return _PROP_RE.sub(_replace, value)


def _text(element: ET.Element | None) -> str | None:
    if element is None:
        return None
    return element.text.strip() if element.text else None


def _local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


class LocalRepositoryResolver:
    """Resolve coordinates against ``<root>/<group path>/<artifact>/<version>/``.

    The binary is ``<artifact>-<version>[-<classifier>].jar``; its transitive
    dependencies are read from the sibling ``<artifact>-<version>.pom``.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def resolve(self, specs: list[DependencySpec]) -> list[ResolvedDependency]:
        return [self._resolve_one(spec, ancestors=()) for spec in specs]

    # ── layout ──────────────────────────────────────────────────────────

    def artifact_dir(self, coordinate: Coordinate) -> Path:
        return self.root.joinpath(
            *coordinate.group.split("."), coordinate.artifact, coordinate.version
        )

    def binary_path(self, coordinate: Coordinate) -> Path:
        suffix = f"-{coordinate.classifier}" if coordinate.classifier else ""
        filename = f"{coordinate.artifact}-{coordinate.version}{suffix}.jar"
        return self.artifact_dir(coordinate) / filename

    def pom_path(self, coordinate: Coordinate) -> Path:
        return self.artifact_dir(coordinate) / f"{coordinate.artifact}-{coordinate.version}.pom"

    # ── resolution ──────────────────────────────────────────────────────

    def _resolve_one(
        self, spec: DependencySpec, ancestors: tuple[Coordinate, ...]
    ) -> ResolvedDependency:
        coordinate = spec.coordinate
        binary = self.binary_path(coordinate)
        if not binary.is_file():
            raise UnresolvableDependencyError(
                coordinate, f"{binary} not found in repository {self.root}"
            )

        children: list[ResolvedDependency] = []
        for child_spec in self._read_pom_dependencies(coordinate):
            if child_spec.coordinate in ancestors or child_spec.coordinate == coordinate:
                log.warning(
                    "resolver.cycle_skipped",
                    parent=str(coordinate),
                    child=str(child_spec.coordinate),
                )
                continue
            children.append(self._resolve_one(child_spec, ancestors + (coordinate,)))

        contents = inspect_archive(binary)
        return ResolvedDependency(
            spec=spec,
            location=binary.resolve().as_uri(),
            dependencies=tuple(children),
            packages=contents.packages,
            resources=contents.resources,
        )

    def _read_pom_dependencies(self, coordinate: Coordinate) -> list[DependencySpec]:
        pom = self.pom_path(coordinate)
        if not pom.is_file():
            return []
        try:
            root = ET.fromstring(pom.read_text(encoding="utf-8", errors="replace"))
        except ET.ParseError as e:
            raise UnresolvableDependencyError(coordinate, f"invalid pom {pom}: {e}") from e

        props = self._extract_properties(root)
        props.setdefault("project.version", coordinate.version)

        specs: list[DependencySpec] = []
        # Try both namespaced and non-namespaced
        for ns in (_NS, ""):
            deps_el = root.find(f"{ns}dependencies")
            if deps_el is None:
                continue
            for dep_el in deps_el.findall(f"{ns}dependency"):
                spec = self._dependency_spec(dep_el, ns, props, coordinate)
                if spec is not None:
                    specs.append(spec)
        return specs

    @staticmethod
    def _dependency_spec(
        dep_el: ET.Element, ns: str, props: dict[str, str], parent: Coordinate
    ) -> DependencySpec | None:
        group_id = _text(dep_el.find(f"{ns}groupId"))
        artifact_id = _text(dep_el.find(f"{ns}artifactId"))
        version = _text(dep_el.find(f"{ns}version"))
        classifier = _text(dep_el.find(f"{ns}classifier"))
        scope_text = (_text(dep_el.find(f"{ns}scope")) or "compile").lower()
        optional = (_text(dep_el.find(f"{ns}optional")) or "").lower() == "true"

        if not group_id or not artifact_id:
            return None
        try:
            scope = BundleScope(scope_text)
        except ValueError:
            log.warning("resolver.unknown_scope", parent=str(parent), scope=scope_text)
            return None
        if scope in _NON_TRANSITIVE_SCOPES or optional:
            return None

        group_id = _resolve_props(group_id, props)
        artifact_id = _resolve_props(artifact_id, props)
        classifier = _resolve_props(classifier, props) if classifier else None
        coordinate_version = _resolve_props(version, props) if version else None
        if not coordinate_version or _PROP_RE.search(coordinate_version):
            raise UnresolvableDependencyError(
                Coordinate(group_id, artifact_id, coordinate_version or "?", classifier),
                f"no concrete version declared by {parent}",
            )

        return DependencySpec(
            Coordinate(group_id, artifact_id, coordinate_version, classifier), scope
        )

    @staticmethod
    def _extract_properties(root: ET.Element) -> dict[str, str]:
        """Extract <properties> key-value pairs from the POM root."""
        props: dict[str, str] = {}
        for ns in (_NS, ""):
            props_el = root.find(f"{ns}properties")
            if props_el is not None:
                for child in props_el:
                    if child.text:
                        props[_local_name(child.tag)] = child.text.strip()
        return props
