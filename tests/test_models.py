"""Tests for element and assembly models."""

from __future__ import annotations

import pydantic
import pytest

from brutalist.catalog import get_catalog
from brutalist.errors import IdCollisionError
from brutalist.models import Assembly, Dimensions, Euler, GeometricProperties, Vec3, evolve


def _make_assembly(*ids: str) -> Assembly:
    wall = get_catalog().get("modules", "basicWall")
    return Assembly(
        seed=0.42,
        composition="wide",
        elements=[evolve(wall, id=element_id) for element_id in ids],
    )


class TestVectors:
    def test_tuple_coercion(self):
        assert Vec3.model_validate((1, 2, 3)) == Vec3(x=1, y=2, z=3)
        assert Euler.model_validate([0.0, 1.5, 0.0]).y == 1.5

    def test_wrong_arity_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Vec3.model_validate((1, 2))

    def test_non_finite_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Vec3(x=float("nan"))
        with pytest.raises(pydantic.ValidationError):
            Euler(y=float("inf"))

    def test_add_and_largest(self):
        total = Vec3(x=1, y=2, z=3) + Vec3(x=1, y=1, z=1)
        assert total.as_tuple() == (2, 3, 4)
        assert total.largest() == 4


class TestGeometry:
    def test_dimensions_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            GeometricProperties(dimensions=(1, 0, 1))
        with pytest.raises(pydantic.ValidationError):
            GeometricProperties(dimensions=(1, -2, 1))

    def test_defaults(self):
        geometry = GeometricProperties(dimensions=(1, 1, 1))
        assert geometry.position == Vec3()
        assert geometry.rotation == Euler()
        assert geometry.scale == Vec3(x=1, y=1, z=1)

    def test_bounding_dimensions_positive(self):
        with pytest.raises(pydantic.ValidationError):
            Dimensions(width=1, height=0, depth=1)
        assert Dimensions(width=1, height=5, depth=2).largest() == 5


class TestEvolve:
    def test_copy_is_independent(self):
        wall = get_catalog().get("modules", "basicWall")
        copy = evolve(wall, id="copy")
        assert copy.id == "copy"
        assert copy.geometry is not wall.geometry
        assert copy.material is not wall.material
        assert copy.material == wall.material

    def test_updates_are_validated(self):
        wall = get_catalog().get("modules", "basicWall")
        with pytest.raises(pydantic.ValidationError):
            evolve(wall, id="")

    def test_nested_model_update_is_not_aliased(self):
        wall = get_catalog().get("modules", "basicWall")
        material = get_catalog().primary_material
        copy = evolve(wall, material=material)
        assert copy.material == material
        assert copy.material is not material


class TestAssembly:
    def test_unique_ids_pass(self):
        _make_assembly("a", "b").require_unique_ids()

    def test_duplicate_ids_reported(self):
        assembly = _make_assembly("b", "a", "b", "a", "c")
        assert assembly.duplicate_ids() == ["a", "b"]
        with pytest.raises(IdCollisionError) as exc_info:
            assembly.require_unique_ids()
        assert exc_info.value.duplicates == ["a", "b"]
        assert str(exc_info.value) == "Duplicate ids: a, b"

    def test_in_namespace(self):
        assembly = _make_assembly("wide_0/floor_plane", "tall_1/floor_plane", "wide_0/roof_plane")
        assert [e.id for e in assembly.in_namespace("wide_0")] == ["wide_0/floor_plane", "wide_0/roof_plane"]

    def test_elements_round_trip_through_discriminator(self):
        assembly = _make_assembly("a")
        restored = Assembly.model_validate(assembly.model_dump(mode="json"))
        assert restored == assembly

    def test_is_hybrid(self):
        assert Assembly(seed=0.1, composition="hybrid").is_hybrid
        assert not Assembly(seed=0.1, composition="tall").is_hybrid
