"""Tests for the asset catalog, materials and style selectors."""

from __future__ import annotations

import pydantic
import pytest

from brutalist.catalog import (
    CATEGORIES,
    MATERIALS,
    PRIMARY_MATERIAL,
    Catalog,
    get_catalog,
    select_column_type,
    select_roof_type,
    select_wall_type,
)
from brutalist.catalog.assets import build_connectors, build_decorative, build_modules
from brutalist.errors import CatalogError, IdCollisionError
from brutalist.models import Connector, Decorative, ElementKind, Module, Vec3, evolve
from brutalist.sampling import Noise3D


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_catalog(**overrides) -> Catalog:
    mappings = {
        "modules": build_modules(),
        "connectors": build_connectors(),
        "decorative": build_decorative(),
    }
    mappings.update(overrides)
    return Catalog(**mappings)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestCatalogLookup:
    def test_get_module(self):
        wall = get_catalog().get("modules", "basicWall")
        assert isinstance(wall, Module)
        assert wall.kind == ElementKind.MODULE
        assert wall.dimensions == Vec3(x=4, y=3, z=0.3)

    def test_get_connector_and_decorative(self):
        catalog = get_catalog()
        assert isinstance(catalog.get("connectors", "wallConnector"), Connector)
        assert isinstance(catalog.get("decorative", "brutalWindow"), Decorative)

    def test_unknown_category_raises_key_error(self):
        with pytest.raises(KeyError, match="category"):
            get_catalog().get("furniture", "basicWall")

    def test_unknown_id_raises_key_error(self):
        with pytest.raises(KeyError, match="noSuchWall"):
            get_catalog().get("modules", "noSuchWall")

    def test_find_searches_every_category(self):
        catalog = get_catalog()
        assert catalog.find("sunshade").id == "sunshade"
        assert catalog.find("beamConnector").id == "beamConnector"
        with pytest.raises(KeyError):
            catalog.find("missing")

    def test_contains_and_len(self):
        catalog = get_catalog()
        assert "floatingCube" in catalog
        assert "missing" not in catalog
        assert len(catalog) == 14 + 5 + 4
        assert len(catalog.ids()) == len(catalog)

    def test_categories(self):
        assert CATEGORIES == ("modules", "connectors", "decorative")

    def test_get_catalog_is_cached(self):
        assert get_catalog() is get_catalog()

    def test_mappings_are_read_only(self):
        catalog = get_catalog()
        with pytest.raises(TypeError):
            catalog.modules["extra"] = catalog.get("modules", "basicWall")

    def test_prototypes_are_frozen(self):
        wall = get_catalog().get("modules", "basicWall")
        with pytest.raises(pydantic.ValidationError):
            wall.id = "changed"

    def test_prototypes_sit_at_origin(self):
        for prototype in get_catalog():
            assert prototype.position == Vec3()
            assert prototype.geometry.scale == Vec3(x=1, y=1, z=1)


class TestCatalogInvariants:
    def test_ids_unique_across_mappings(self):
        clash = evolve(get_catalog().get("decorative", "ribPattern"), id="basicWall")
        with pytest.raises(IdCollisionError) as exc_info:
            _make_catalog(decorative={"basicWall": clash})
        assert exc_info.value.duplicates == ["basicWall"]

    def test_id_collision_is_a_key_error(self):
        assert issubclass(IdCollisionError, KeyError)

    def test_key_must_match_id(self):
        wall = get_catalog().get("modules", "basicWall")
        with pytest.raises(CatalogError, match="does not match"):
            _make_catalog(modules={"otherWall": wall})

    def test_dangling_connection_rejected(self):
        wall = evolve(get_catalog().get("modules", "basicWall"), allowed_connections=("nowhere",))
        with pytest.raises(CatalogError, match="nowhere"):
            _make_catalog(modules={"basicWall": wall})

    def test_every_connection_resolves(self):
        catalog = get_catalog()
        for prototype in catalog:
            for target in prototype.allowed_connections or ():
                assert target in catalog.connectors

    def test_unknown_primary_material(self):
        with pytest.raises(CatalogError):
            Catalog(build_modules(), build_connectors(), build_decorative(), primary_material="marble")


class TestMaterials:
    def test_primary_is_monolithic_wall_finish(self):
        catalog = get_catalog()
        assert catalog.primary_material == catalog.get("modules", "monolithicWall").material

    def test_material_lookup(self):
        catalog = get_catalog()
        assert catalog.material(PRIMARY_MATERIAL) == catalog.primary_material
        with pytest.raises(KeyError, match="marble"):
            catalog.material("marble")

    def test_primary_is_not_rough(self):
        assert get_catalog().primary_material.roughness <= 0.3

    def test_palette_colors_are_hex(self):
        for material in MATERIALS.values():
            assert material.color.startswith("#")
            assert len(material.color) == 7


# ---------------------------------------------------------------------------
# Style selectors
# ---------------------------------------------------------------------------


class TestStyleSelectors:
    POINTS = [(0.0, 0.0, 0.0), (1.3, 2.7, -4.1), (10.5, 0.2, 3.3), (-7.0, 5.5, 8.25)]

    def test_wall_types(self):
        for point in self.POINTS:
            assert select_wall_type(*point) in {"basicWall", "thickWall"}

    def test_column_types(self):
        for point in self.POINTS:
            assert select_column_type(*point) in {"massiveColumn", "tColumn", "crossColumn"}

    def test_roof_types(self):
        for point in self.POINTS:
            assert select_roof_type(*point) in {"flatRoof", "cantileverRoof", "cofferedRoof"}

    def test_selected_ids_exist(self):
        catalog = get_catalog()
        noise = Noise3D(3.0)
        for point in self.POINTS:
            for selector in (select_wall_type, select_column_type, select_roof_type):
                assert selector(*point, noise=noise) in catalog.modules

    def test_deterministic_for_a_noise_field(self):
        noise = Noise3D(0.42)
        first = [select_roof_type(*p, noise=noise) for p in self.POINTS]
        second = [select_roof_type(*p, noise=Noise3D(0.42)) for p in self.POINTS]
        assert first == second
