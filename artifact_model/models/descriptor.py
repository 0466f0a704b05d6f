"""Descriptor-side data models: coordinates, dependency specs, unit descriptor."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering

# Classifier value that marks a dependency as a pluggable unit with its own
# isolation boundary.
PLUGIN_CLASSIFIER = "mule-plugin"

# Configuration resource used when the descriptor declares none.
DEFAULT_CONFIG_RESOURCE = "mule-config.xml"

_DOTTED_NUMERIC_RE = re.compile(r"^\d+(\.\d+)*$")


class BundleScope(Enum):
    """Declared intent of a dependency."""

    COMPILE = "compile"
    RUNTIME = "runtime"
    PROVIDED = "provided"
    TEST = "test"


@total_ordering
@dataclass(frozen=True)
class RuntimeVersion:
    """Dotted-numeric version such as ``4.0.0``.

    Trailing zero components are ignored for comparison, so ``4.0`` equals
    ``4.0.0``.
    """

    parts: tuple[int, ...]

    @classmethod
    def parse(cls, value: str) -> RuntimeVersion:
        text = value.strip()
        if not _DOTTED_NUMERIC_RE.match(text):
            raise ValueError(f"not a dotted-numeric version: {value!r}")
        return cls(tuple(int(p) for p in text.split(".")))

    def _key(self) -> tuple[int, ...]:
        parts = list(self.parts)
        while len(parts) > 1 and parts[-1] == 0:
            parts.pop()
        return tuple(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuntimeVersion):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: RuntimeVersion) -> bool:
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return ".".join(str(p) for p in self.parts)


@dataclass(frozen=True)
class Coordinate:
    """Maven-style artifact coordinate."""

    group: str
    artifact: str
    version: str
    classifier: str | None = None

    def __str__(self) -> str:
        base = f"{self.group}:{self.artifact}:{self.version}"
        return f"{base}:{self.classifier}" if self.classifier else base


@dataclass(frozen=True)
class DependencySpec:
    """A declared dependency of a unit."""

    coordinate: Coordinate
    scope: BundleScope = BundleScope.COMPILE
    is_shared: bool = False

    @property
    def is_plugin(self) -> bool:
        return self.coordinate.classifier == PLUGIN_CLASSIFIER


@dataclass(frozen=True)
class SharedLibrarySpec:
    """Declares that the dependency with this group/artifact is shared."""

    group: str
    artifact: str

    def matches(self, coordinate: Coordinate) -> bool:
        return coordinate.group == self.group and coordinate.artifact == self.artifact


@dataclass(frozen=True)
class UnitDescriptor:
    """Normalized, immutable view of a unit's declarative descriptor."""

    min_runtime_version: RuntimeVersion
    config_resources: tuple[str, ...] = (DEFAULT_CONFIG_RESOURCE,)
    dependencies: tuple[DependencySpec, ...] = ()
    shared_libraries: tuple[SharedLibrarySpec, ...] = ()
    exported_packages: frozenset[str] = field(default_factory=frozenset)
    exported_resources: frozenset[str] = field(default_factory=frozenset)
    name: str | None = None
    format_version: RuntimeVersion = field(default_factory=lambda: RuntimeVersion((1, 0)))

    def __post_init__(self) -> None:
        if not self.config_resources:
            object.__setattr__(self, "config_resources", (DEFAULT_CONFIG_RESOURCE,))
