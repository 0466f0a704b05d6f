"""Custom exceptions for artifact-model."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from artifact_model.models.descriptor import Coordinate


class ArtifactModelError(Exception):
    """Base exception for all artifact-model errors.

    ``unit_root`` is attached by the factory when the error surfaces from a
    build, so callers can tell which unit failed.
    """

    def __init__(self, message: str, *, unit_root: str | None = None):
        self.message = message
        self.unit_root = unit_root
        super().__init__(message)

    def __str__(self) -> str:
        if self.unit_root:
            return f"{self.message} (unit: {self.unit_root})"
        return self.message


class DescriptorError(ArtifactModelError):
    """Raised when a unit descriptor cannot be read."""


class MalformedDescriptorError(DescriptorError):
    """Raised when required fields are absent or of the wrong shape."""

    def __init__(self, message: str, errors: list[str] | None = None, **kwargs):
        self.errors = errors or []
        if self.errors:
            message = f"{message}: {'; '.join(self.errors)}"
        super().__init__(message, **kwargs)


class UnsupportedVersionError(DescriptorError):
    """Raised when the descriptor format is newer than this loader understands."""

    def __init__(self, found: str, supported: str, **kwargs):
        self.found = found
        self.supported = supported
        super().__init__(
            f"Descriptor format version {found} is not supported "
            f"(highest supported: {supported})",
            **kwargs,
        )


class MissingDescriptorError(DescriptorError):
    """Raised when no descriptor file exists at the expected location."""

    def __init__(self, descriptor_path: str, **kwargs):
        self.descriptor_path = descriptor_path
        super().__init__(f"No unit descriptor found at {descriptor_path}", **kwargs)


class UnresolvableDependencyError(ArtifactModelError):
    """Raised when a dependency coordinate cannot be located."""

    def __init__(self, coordinate: Coordinate, reason: str = "", **kwargs):
        self.coordinate = coordinate
        message = f"Cannot resolve dependency {coordinate}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, **kwargs)


class InvalidDependencyShapeError(ArtifactModelError):
    """Raised when a resolved dependency is both plugin-classified and shared."""

    def __init__(self, coordinate: Coordinate, **kwargs):
        self.coordinate = coordinate
        super().__init__(
            f"Dependency {coordinate} is plugin-classified and shared; "
            "an isolated dependency cannot be exported",
            **kwargs,
        )
