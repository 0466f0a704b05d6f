"""Data models for unit descriptors and class-loader models."""

from artifact_model.models.classloader import (
    ArtifactDescriptor,
    BundleDependency,
    ClassLoaderModel,
    ResolvedDependency,
)
from artifact_model.models.descriptor import (
    DEFAULT_CONFIG_RESOURCE,
    PLUGIN_CLASSIFIER,
    BundleScope,
    Coordinate,
    DependencySpec,
    RuntimeVersion,
    SharedLibrarySpec,
    UnitDescriptor,
)

__all__ = [
    "DEFAULT_CONFIG_RESOURCE",
    "PLUGIN_CLASSIFIER",
    "ArtifactDescriptor",
    "BundleDependency",
    "BundleScope",
    "ClassLoaderModel",
    "Coordinate",
    "DependencySpec",
    "ResolvedDependency",
    "RuntimeVersion",
    "SharedLibrarySpec",
    "UnitDescriptor",
]
