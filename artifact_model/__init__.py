"""artifact-model: classpath and isolation model for deployable units."""

__version__ = "0.1.0"

from artifact_model.assembler import ClasspathAssembler
from artifact_model.config import UnitLayout, layout_from_env
from artifact_model.exceptions import (
    ArtifactModelError,
    DescriptorError,
    InvalidDependencyShapeError,
    MalformedDescriptorError,
    MissingDescriptorError,
    UnresolvableDependencyError,
    UnsupportedVersionError,
)
from artifact_model.factory import ArtifactDescriptorFactory
from artifact_model.loader import DescriptorLoader
from artifact_model.models import (
    ArtifactDescriptor,
    BundleDependency,
    BundleScope,
    ClassLoaderModel,
    Coordinate,
    DependencySpec,
    ResolvedDependency,
    RuntimeVersion,
    SharedLibrarySpec,
    UnitDescriptor,
)
from artifact_model.resolution import (
    DependencyResolutionAdapter,
    DependencyResolver,
    LocalRepositoryResolver,
)

__all__ = [
    "ArtifactDescriptor",
    "ArtifactDescriptorFactory",
    "ArtifactModelError",
    "BundleDependency",
    "BundleScope",
    "ClassLoaderModel",
    "ClasspathAssembler",
    "Coordinate",
    "DependencyResolutionAdapter",
    "DependencyResolver",
    "DependencySpec",
    "DescriptorError",
    "DescriptorLoader",
    "InvalidDependencyShapeError",
    "LocalRepositoryResolver",
    "MalformedDescriptorError",
    "MissingDescriptorError",
    "ResolvedDependency",
    "RuntimeVersion",
    "SharedLibrarySpec",
    "UnitDescriptor",
    "UnitLayout",
    "UnresolvableDependencyError",
    "UnsupportedVersionError",
    "layout_from_env",
]
