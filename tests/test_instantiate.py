"""Tests for prototype instantiation and fallback substitution."""

from __future__ import annotations

import pytest

from brutalist.catalog import get_catalog
from brutalist.errors import InstantiationError
from brutalist.generation.instantiate import (
    FALLBACK_SUFFIX,
    BuildResult,
    collect_results,
    failed,
    fallback_element,
    instantiate,
    try_instantiate,
)
from brutalist.models import Module, Vec3


def _wall():
    return get_catalog().get("modules", "basicWall")


class TestInstantiate:
    def test_places_copy(self):
        wall = instantiate(_wall(), "a/wall", dimensions=(2, 3, 0.5), position=(1, 2, 3), rotation=(0, 1, 0))
        assert isinstance(wall, Module)
        assert wall.id == "a/wall"
        assert wall.dimensions == Vec3(x=2, y=3, z=0.5)
        assert wall.position == Vec3(x=1, y=2, z=3)
        assert wall.geometry.rotation.y == 1

    def test_prototype_untouched(self):
        prototype = _wall()
        before = prototype.model_dump()
        instantiate(prototype, "copy", dimensions=(9, 9, 9), position=(5, 5, 5))
        assert prototype.model_dump() == before

    def test_instances_share_nothing(self):
        first = instantiate(_wall(), "first", dimensions=(1, 1, 1), position=(0, 0, 0))
        second = instantiate(_wall(), "second", dimensions=(1, 1, 1), position=(0, 0, 0))
        assert first.geometry is not second.geometry
        assert first.material is not second.material
        assert first.material == second.material

    def test_default_scale_from_prototype(self):
        wall = instantiate(_wall(), "w", dimensions=(1, 1, 1), position=(0, 0, 0))
        assert wall.geometry.scale == Vec3(x=1, y=1, z=1)

    def test_material_override(self):
        primary = get_catalog().primary_material
        wall = instantiate(_wall(), "w", dimensions=(1, 1, 1), position=(0, 0, 0), material=primary)
        assert wall.material == primary

    @pytest.mark.parametrize("dimensions", [(1, -1, 1), (0, 1, 1), (float("nan"), 1, 1)])
    def test_invalid_dimensions(self, dimensions):
        with pytest.raises(InstantiationError) as exc_info:
            instantiate(_wall(), "bad", dimensions=dimensions, position=(0, 0, 0))
        assert exc_info.value.element_id == "bad"
        assert "dimensions" in exc_info.value.reason

    def test_non_finite_position(self):
        with pytest.raises(InstantiationError):
            instantiate(_wall(), "bad", dimensions=(1, 1, 1), position=(0, float("inf"), 0))


class TestBuildResults:
    def test_try_instantiate_success(self):
        result = try_instantiate(_wall(), "ok", dimensions=(1, 1, 1), position=(1, 2, 3))
        assert result.ok
        assert result.position == (1, 2, 3)
        assert result.element.id == "ok"

    def test_try_instantiate_failure(self):
        result = try_instantiate(_wall(), "bad", dimensions=(1, 0, 1), position=(1, 2, 3))
        assert not result.ok
        assert result.element is None
        assert isinstance(result.error, InstantiationError)

    def test_failed_helper(self):
        result = failed("x/y", "no prototype", (4, 5, 6))
        assert not result.ok
        assert result.error.reason == "no prototype"
        assert result.position == (4, 5, 6)


class TestFallback:
    def test_fallback_element(self):
        cube = fallback_element(get_catalog(), "a/wall", (1, 2, 3))
        assert cube.id == "a/wall" + FALLBACK_SUFFIX
        assert cube.category.value == "floating"
        assert cube.dimensions == Vec3(x=1, y=1, z=1)
        assert cube.position == Vec3(x=1, y=2, z=3)

    def test_unusable_position_uses_origin(self):
        cube = fallback_element(get_catalog(), "a/wall", (float("nan"), 0, 0), origin=(-3, 0, -3))
        assert cube.position == Vec3(x=-3, y=0, z=-3)

    def test_collect_results_replaces_failures_in_place(self):
        catalog = get_catalog()
        results = [
            try_instantiate(_wall(), "n/first", dimensions=(1, 1, 1), position=(0, 0, 0)),
            try_instantiate(_wall(), "n/broken", dimensions=(1, -1, 1), position=(2, 0, 0)),
            try_instantiate(_wall(), "n/last", dimensions=(1, 1, 1), position=(0, 0, 0)),
        ]
        elements, diagnostics = collect_results(results, catalog)
        assert [e.id for e in elements] == ["n/first", "n/broken#fallback", "n/last"]
        assert elements[1].position == Vec3(x=2, y=0, z=0)
        assert len(diagnostics) == 1
        assert diagnostics[0].element_id == "n/broken"
        assert diagnostics[0].severity == "warning"

    def test_collect_results_logs(self, caplog):
        result = BuildResult(element_id="n/x", position=(0, 0, 0),
                             error=InstantiationError("n/x", "boom"))
        with caplog.at_level("WARNING", logger="brutalist"):
            collect_results([result], get_catalog())
        assert "n/x" in caplog.text

    def test_collect_results_empty(self):
        assert collect_results([], get_catalog()) == ([], [])
