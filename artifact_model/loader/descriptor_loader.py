"""DescriptorLoader — parse raw descriptor bytes into a UnitDescriptor."""

from __future__ import annotations

import json
from pathlib import Path

import pydantic
import structlog

from artifact_model.exceptions import MalformedDescriptorError, UnsupportedVersionError
from artifact_model.loader.schema import UnitDescriptorSchema
from artifact_model.models.descriptor import (
    Coordinate,
    DependencySpec,
    RuntimeVersion,
    SharedLibrarySpec,
    UnitDescriptor,
)

log = structlog.get_logger("artifact_model.loader")

SUPPORTED_FORMAT_VERSION = RuntimeVersion((1, 0))


def _format_errors(exc: pydantic.ValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        loc = " → ".join(str(part) for part in err["loc"]) or "<root>"
        messages.append(f"{loc}: {err['msg']}")
    return messages


class DescriptorLoader:
    """Loads unit descriptors (JSON documents).

    Defaults: no configuration resources means the single default resource;
    no export lists means nothing is exported.
    """

    def __init__(self, supported_format: RuntimeVersion = SUPPORTED_FORMAT_VERSION) -> None:
        self._supported_format = supported_format

    def load(self, raw: bytes) -> UnitDescriptor:
        try:
            data = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise MalformedDescriptorError(f"Descriptor is not valid UTF-8 ({e.reason})") from e
        except json.JSONDecodeError as e:
            raise MalformedDescriptorError(f"Descriptor is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedDescriptorError(
                f"Descriptor must be a JSON object, got {type(data).__name__}"
            )

        self._check_format_version(data.get("format-version"))

        try:
            schema = UnitDescriptorSchema.model_validate(data)
        except pydantic.ValidationError as e:
            raise MalformedDescriptorError("Invalid unit descriptor", _format_errors(e)) from e

        return self._normalize(schema)

    def load_path(self, path: Path) -> UnitDescriptor:
        """Read and load a descriptor file."""
        return self.load(Path(path).read_bytes())

    def _check_format_version(self, value: object) -> None:
        # Shape errors are left to schema validation.
        if not isinstance(value, str):
            return
        try:
            found = RuntimeVersion.parse(value)
        except ValueError:
            return
        # Patch-level differences are compatible; only major.minor is checked.
        if RuntimeVersion(found.parts[:2]) > RuntimeVersion(self._supported_format.parts[:2]):
            raise UnsupportedVersionError(str(found), str(self._supported_format))

    @staticmethod
    def _normalize(schema: UnitDescriptorSchema) -> UnitDescriptor:
        shared_libraries = tuple(
            dict.fromkeys(SharedLibrarySpec(s.group, s.artifact) for s in schema.shared_libraries)
        )

        specs: dict[Coordinate, DependencySpec] = {}
        for dep in schema.dependencies:
            coordinate = Coordinate(dep.group, dep.artifact, dep.version, dep.classifier)
            if coordinate in specs:
                log.debug("loader.duplicate_dependency", coordinate=str(coordinate))
                continue
            is_shared = dep.shared or any(s.matches(coordinate) for s in shared_libraries)
            specs[coordinate] = DependencySpec(coordinate, dep.scope, is_shared)

        for lib in shared_libraries:
            if not any(lib.matches(c) for c in specs):
                log.warning(
                    "loader.shared_library_not_declared",
                    group=lib.group,
                    artifact=lib.artifact,
                )

        return UnitDescriptor(
            name=schema.name or None,
            format_version=RuntimeVersion.parse(schema.format_version),
            min_runtime_version=RuntimeVersion.parse(schema.minimum_runtime_version),
            config_resources=tuple(dict.fromkeys(schema.configuration_resources)),
            dependencies=tuple(specs.values()),
            shared_libraries=shared_libraries,
            exported_packages=frozenset(schema.exported_packages),
            exported_resources=frozenset(schema.exported_resources),
        )
