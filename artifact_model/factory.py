"""ArtifactDescriptorFactory — the entry point that builds a unit's descriptor."""

from __future__ import annotations

from pathlib import Path

import structlog

from artifact_model.assembler import ClasspathAssembler
from artifact_model.config import UnitLayout, layout_from_env
from artifact_model.exceptions import ArtifactModelError, MissingDescriptorError
from artifact_model.loader.descriptor_loader import DescriptorLoader
from artifact_model.models.classloader import ArtifactDescriptor
from artifact_model.resolution.adapter import DependencyResolutionAdapter
from artifact_model.resolution.base import DependencyResolver
from artifact_model.resolution.local_repository import LocalRepositoryResolver

log = structlog.get_logger("artifact_model.factory")


class ArtifactDescriptorFactory:
    """Load → resolve → assemble, for one unit root at a time.

    Holds no per-build state, so one factory may serve concurrent builds of
    distinct units. Builds of the same unit root must be serialized by the
    caller.
    """

    def __init__(
        self,
        resolver: DependencyResolver | None = None,
        *,
        layout: UnitLayout | None = None,
        loader: DescriptorLoader | None = None,
        assembler: ClasspathAssembler | None = None,
    ) -> None:
        self._resolver = resolver
        self.layout = layout or layout_from_env()
        self._loader = loader or DescriptorLoader()
        self._assembler = assembler or ClasspathAssembler()

    def build(self, unit_root: str | Path) -> ArtifactDescriptor:
        """Build the ArtifactDescriptor for the unit deployed at *unit_root*.

        Library errors propagate unchanged in type, with ``unit_root`` set.
        """
        root = Path(unit_root).absolute()
        log.info("factory.build_started", unit_root=str(root))
        try:
            descriptor = self._build(root)
        except ArtifactModelError as e:
            e.unit_root = str(root)
            log.warning(
                "factory.build_failed",
                unit_root=str(root),
                error_type=type(e).__name__,
                coordinate=str(getattr(e, "coordinate", "")) or None,
            )
            raise
        log.info(
            "factory.build_completed",
            unit_root=str(root),
            name=descriptor.name,
            urls=len(descriptor.class_loader_model.urls),
            dependencies=len(descriptor.class_loader_model.dependencies),
        )
        return descriptor

    def descriptor_file(self, root: Path) -> Path:
        return root / self.layout.descriptor_path

    def _build(self, root: Path) -> ArtifactDescriptor:
        descriptor_file = self.descriptor_file(root)
        if not descriptor_file.is_file():
            raise MissingDescriptorError(str(descriptor_file))

        unit = self._loader.load_path(descriptor_file)

        config_dir = root / self.layout.config_dir
        resource_paths = tuple(
            str((config_dir / name).absolute()) for name in unit.config_resources
        )

        resolver = self._resolver or LocalRepositoryResolver(root / self.layout.repository_dir)
        resolved = DependencyResolutionAdapter(resolver).resolve(unit.dependencies)

        model = self._assembler.assemble(
            unit,
            resolved,
            classes_location=(root / self.layout.classes_dir).as_uri(),
        )

        return ArtifactDescriptor(
            name=unit.name or root.name,
            root=root,
            min_runtime_version=unit.min_runtime_version,
            config_resources=unit.config_resources,
            absolute_resource_paths=resource_paths,
            class_loader_model=model,
        )
