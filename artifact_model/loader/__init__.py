"""Descriptor loader — unit descriptor JSON → UnitDescriptor."""

from artifact_model.loader.descriptor_loader import SUPPORTED_FORMAT_VERSION, DescriptorLoader

__all__ = ["SUPPORTED_FORMAT_VERSION", "DescriptorLoader"]
