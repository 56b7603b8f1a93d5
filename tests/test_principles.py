"""Tests for the principle-transform pass."""

from __future__ import annotations

import math

import pytest

from brutalist.catalog import get_catalog
from brutalist.generation.instantiate import instantiate
from brutalist.generation.principles import apply_principles, snap_yaw
from brutalist.sampling import seeded_random


def _place(prototype_id: str, rotation=(0.0, 0.0, 0.0), category: str = "modules"):
    prototype = get_catalog().get(category, prototype_id)
    return instantiate(prototype, f"wide_0/{prototype_id}", dimensions=(2.0, 3.0, 0.5),
                       position=(1.0, 2.0, 3.0), rotation=rotation)


class TestSnapYaw:
    @pytest.mark.parametrize("yaw, expected", [
        (0.0, 0.0),
        (0.3, 0.0),
        (math.pi / 4, math.pi / 2),
        (1.2, math.pi / 2),
        (math.pi, math.pi),
        (-0.9, -math.pi / 2),
        (5.0, 3 * math.pi / 2),
    ])
    def test_nearest_quarter_turn(self, yaw, expected):
        assert snap_yaw(yaw) == pytest.approx(expected)


class TestApplyPrinciples:
    def test_orthogonal_rotation(self):
        (wall,) = apply_principles([_place("basicWall", rotation=(0.4, 1.3, -0.2))], 0.42)
        assert wall.geometry.rotation.x == 0.0
        assert wall.geometry.rotation.z == 0.0
        assert wall.geometry.rotation.y == pytest.approx(math.pi / 2)

    def test_every_yaw_is_a_quarter_turn(self):
        elements = [_place("flatRoof", rotation=(0.0, yaw, 0.0)) for yaw in (0.1, 0.9, 2.0, 3.5, -2.7)]
        for element in apply_principles(elements, 1.5):
            quarter_turns = element.geometry.rotation.y / (math.pi / 2)
            assert quarter_turns == pytest.approx(round(quarter_turns))

    def test_walls_emphasised(self):
        seed = 0.42
        (wall,) = apply_principles([_place("thickWall")], seed)
        emphasis = seeded_random(1.5, 2.5, seed)
        assert 1.5 <= emphasis < 2.5
        assert wall.dimensions.x == pytest.approx(2.0 * emphasis)
        assert wall.dimensions.y == pytest.approx(3.0)
        assert wall.dimensions.z == pytest.approx(0.5 * 1.2)

    def test_non_walls_keep_dimensions(self):
        (slab, window) = apply_principles(
            [_place("flatRoof"), _place("brutalWindow", category="decorative")], 0.42
        )
        assert slab.dimensions.as_tuple() == (2.0, 3.0, 0.5)
        assert window.dimensions.as_tuple() == (2.0, 3.0, 0.5)

    def test_rough_material_replaced(self):
        catalog = get_catalog()
        rough = _place("basicWall")
        assert rough.material.roughness > 0.3
        (result,) = apply_principles([rough], 0.42)
        assert result.material == catalog.primary_material

    def test_smooth_material_kept(self):
        cube = _place("floatingCube")
        (result,) = apply_principles([cube], 0.42)
        assert result.material == cube.material

    def test_inputs_unchanged(self):
        wall = _place("basicWall", rotation=(0.4, 1.3, -0.2))
        before = wall.model_dump()
        (result,) = apply_principles([wall], 0.42)
        assert wall.model_dump() == before
        assert result is not wall

    def test_ids_and_positions_preserved(self):
        elements = [_place("basicWall"), _place("flatRoof")]
        results = apply_principles(elements, 3.0)
        assert [e.id for e in results] == [e.id for e in elements]
        assert [e.position for e in results] == [e.position for e in elements]

    def test_empty(self):
        assert apply_principles([], 0.42) == []
