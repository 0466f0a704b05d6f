"""Tests for data models — versions, coordinates, immutability."""

from __future__ import annotations

import dataclasses

import pytest

from artifact_model.models.classloader import BundleDependency, ClassLoaderModel
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
from artifact_model.testing import resolved


class TestRuntimeVersion:
    def test_parse_and_str(self):
        assert str(RuntimeVersion.parse(" 4.1.2 ")) == "4.1.2"

    @pytest.mark.parametrize("value", ["", "4.", "v4", "4.x.0", "4..1"])
    def test_rejects_non_dotted_numeric(self, value):
        with pytest.raises(ValueError):
            RuntimeVersion.parse(value)

    def test_ordering(self):
        assert RuntimeVersion.parse("4.0.0") < RuntimeVersion.parse("4.1")
        assert RuntimeVersion.parse("4.10") > RuntimeVersion.parse("4.9.9")

    def test_trailing_zeros_equal(self):
        assert RuntimeVersion.parse("4.0") == RuntimeVersion.parse("4.0.0")
        assert hash(RuntimeVersion.parse("4")) == hash(RuntimeVersion.parse("4.0.0"))


class TestCoordinate:
    def test_str_without_classifier(self):
        assert str(Coordinate("g", "a", "1")) == "g:a:1"

    def test_str_with_classifier(self):
        assert str(Coordinate("g", "a", "1", PLUGIN_CLASSIFIER)) == "g:a:1:mule-plugin"

    def test_plugin_derived_from_classifier(self):
        assert DependencySpec(Coordinate("g", "a", "1", PLUGIN_CLASSIFIER)).is_plugin
        assert not DependencySpec(Coordinate("g", "a", "1", "sources")).is_plugin
        assert not DependencySpec(Coordinate("g", "a", "1")).is_plugin

    def test_shared_library_match(self):
        lib = SharedLibrarySpec("g", "a")
        assert lib.matches(Coordinate("g", "a", "2.0"))
        assert not lib.matches(Coordinate("g", "b", "2.0"))


class TestUnitDescriptor:
    def test_empty_config_resources_default(self):
        desc = UnitDescriptor(min_runtime_version=RuntimeVersion((4,)), config_resources=())
        assert desc.config_resources == (DEFAULT_CONFIG_RESOURCE,)

    def test_frozen(self):
        desc = UnitDescriptor(min_runtime_version=RuntimeVersion((4,)))
        with pytest.raises(dataclasses.FrozenInstanceError):
            desc.name = "changed"  # type: ignore[misc]


class TestResolvedDependency:
    def test_walk_depth_first(self):
        c = resolved("g", "c")
        b = resolved("g", "b", dependencies=[c])
        d = resolved("g", "d")
        a = resolved("g", "a", dependencies=[b, d])
        assert [n.coordinate.artifact for n in a.walk()] == ["a", "b", "c", "d"]

    def test_with_spec_keeps_location(self):
        dep = resolved("g", "a")
        shared = DependencySpec(dep.coordinate, BundleScope.RUNTIME, is_shared=True)
        restamped = dep.with_spec(shared)
        assert restamped.is_shared
        assert restamped.location == dep.location
        assert not dep.is_shared

    def test_bundle_projection(self):
        dep = resolved("g", "a", scope=BundleScope.PROVIDED)
        bundle = BundleDependency.of(dep)
        assert bundle == BundleDependency(dep.coordinate, BundleScope.PROVIDED, dep.location)

    def test_class_loader_model_frozen(self):
        model = ClassLoaderModel(urls=("file:///x",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            model.urls = ()  # type: ignore[misc]
