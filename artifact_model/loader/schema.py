"""Raw descriptor schemas (JSON document shape)."""

from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from artifact_model.models.descriptor import BundleScope, RuntimeVersion


class _RawModel(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True, populate_by_name=True)


class DependencySchema(_RawModel):
    group: str = Field(min_length=1)
    artifact: str = Field(min_length=1)
    version: str = Field(min_length=1)
    classifier: str | None = None
    scope: BundleScope = BundleScope.COMPILE
    shared: bool = False

    @field_validator("classifier", mode="before")
    @classmethod
    def _empty_classifier_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("scope", mode="before")
    @classmethod
    def _lower_scope(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class SharedLibrarySchema(_RawModel):
    group: str = Field(min_length=1)
    artifact: str = Field(min_length=1)


class UnitDescriptorSchema(_RawModel):
    format_version: str = Field(default="1.0", alias="format-version")
    name: str | None = None
    minimum_runtime_version: str = Field(alias="minimum-runtime-version")
    configuration_resources: list[str] = Field(
        default_factory=list, alias="configuration-resources"
    )
    dependencies: list[DependencySchema] = Field(default_factory=list)
    shared_libraries: list[SharedLibrarySchema] = Field(
        default_factory=list, alias="shared-libraries"
    )
    exported_packages: list[str] = Field(default_factory=list, alias="exported-packages")
    exported_resources: list[str] = Field(default_factory=list, alias="exported-resources")

    @field_validator("minimum_runtime_version", "format_version")
    @classmethod
    def _dotted_numeric(cls, v: str) -> str:
        RuntimeVersion.parse(v)
        return v

    @field_validator("configuration_resources")
    @classmethod
    def _relative_resources(cls, v: list[str]) -> list[str]:
        for name in v:
            if not name.strip():
                raise ValueError("configuration resource names must not be blank")
            # Names are joined under the configuration folder and must stay there.
            if PurePosixPath(name).is_absolute() or PureWindowsPath(name).is_absolute():
                raise ValueError(f"configuration resource must be relative: {name!r}")
            if ".." in PurePosixPath(name.replace("\\", "/")).parts:
                raise ValueError(f"configuration resource must not contain '..': {name!r}")
        return v
