"""Prototype definitions: unplaced templates for every reusable element.

Each prototype sits at the origin with unit scale.  Generation never
places a prototype directly; it instantiates a copy through
:func:`brutalist.generation.instantiate.instantiate`.
"""

from __future__ import annotations

from brutalist.catalog.materials import MATERIALS
from brutalist.models.element import (
    Connector,
    ConnectorCategory,
    Decorative,
    DecorativeCategory,
    GeometricProperties,
    Module,
    ModuleCategory,
    StructuralRole,
    Vec3,
)

Triple = tuple[float, float, float]


def _geometry(dimensions: Triple, rotation: Triple = (0.0, 0.0, 0.0)) -> GeometricProperties:
    return GeometricProperties(dimensions=dimensions, rotation=rotation)


def _module(
    prototype_id: str,
    category: ModuleCategory,
    dimensions: Triple,
    material: str,
    symmetry: str,
    connections: tuple[str, ...],
    role: StructuralRole = StructuralRole.PRIMARY,
    load_bearing: bool = True,
    rotation: Triple = (0.0, 0.0, 0.0),
) -> Module:
    return Module(
        id=prototype_id,
        category=category,
        structural_role=role,
        load_bearing=load_bearing,
        geometry=_geometry(dimensions, rotation),
        material=MATERIALS[material],
        symmetry_axes=tuple(symmetry),
        allowed_connections=connections,
    )


def _connector(
    prototype_id: str,
    dimensions: Triple,
    material: str,
    points: list[Triple],
    category: ConnectorCategory = ConnectorCategory.JOINT,
) -> Connector:
    return Connector(
        id=prototype_id,
        category=category,
        geometry=_geometry(dimensions),
        material=MATERIALS[material],
        connection_points=tuple(Vec3.model_validate(p) for p in points),
    )


def _decorative(
    prototype_id: str,
    category: DecorativeCategory,
    depth: float,
    dimensions: Triple,
    material: str,
) -> Decorative:
    return Decorative(
        id=prototype_id,
        category=category,
        depth=depth,
        geometry=_geometry(dimensions),
        material=MATERIALS[material],
    )


def build_modules() -> dict[str, Module]:
    W, F, C, P = (
        ModuleCategory.WALL,
        ModuleCategory.FLOATING,
        ModuleCategory.COLUMN,
        ModuleCategory.PLATFORM,
    )
    wall_links = ("wallConnector", "columnConnector")
    slab_links = ("beamConnector", "columnConnector")
    modules = [
        # Floating sculptural pieces
        _module("floatingCube", F, (1, 1, 1), "copiedCityWhite", "xyz", ("cubeConnector",),
                role=StructuralRole.DECORATIVE, load_bearing=False),
        _module("floatingPlane", F, (2, 0.2, 2), "copiedCityWhite", "xz", ("cubeConnector",),
                role=StructuralRole.DECORATIVE, load_bearing=False),
        # Walls
        _module("monolithicWall", W, (8, 6, 0.4), "copiedCityWhite", "xy", ("wallConnector",)),
        _module("basicWall", W, (4, 3, 0.3), "roughConcrete", "xy", wall_links),
        _module("thickWall", W, (4, 3, 0.6), "boardformedConcrete", "xy", wall_links),
        _module("buttressWall", W, (5, 4, 0.4), "boardformedConcrete", "xy", wall_links),
        # Columns
        _module("massiveColumn", C, (1, 4, 1), "smoothConcrete", "xz",
                ("columnConnector", "floorConnector")),
        _module("tColumn", C, (2, 4, 1), "smoothConcrete", "z", ("columnConnector", "beamConnector")),
        _module("crossColumn", C, (1.5, 5, 1.5), "exposedAggregateConcrete", "xz",
                ("columnConnector", "beamConnector")),
        # Roofs and slabs
        _module("flatRoof", P, (6, 0.4, 6), "smoothConcrete", "xz", slab_links),
        _module("cantileverRoof", P, (8, 0.5, 6), "smoothConcrete", "z", slab_links),
        _module("cofferedRoof", P, (6, 0.6, 6), "boardformedConcrete", "xz", slab_links),
        # Beams
        _module("mainBeam", ModuleCategory.FLOOR, (6, 0.8, 0.4), "smoothConcrete", "x", slab_links),
        _module("crossBeam", ModuleCategory.FLOOR, (4, 0.6, 0.3), "smoothConcrete", "x",
                ("beamConnector",), role=StructuralRole.SECONDARY, rotation=(0, 1.5707963267948966, 0)),
    ]
    return {m.id: m for m in modules}


def build_connectors() -> dict[str, Connector]:
    connectors = [
        _connector("wallConnector", (0.3, 3, 0.3), "roughConcrete", [(0, 1.5, 0), (0, -1.5, 0)]),
        _connector("beamConnector", (0.4, 0.8, 0.4), "smoothConcrete", [(0.2, 0, 0), (-0.2, 0, 0)]),
        _connector("columnConnector", (1, 0.4, 1), "smoothConcrete", [(0, 0.2, 0), (0, -0.2, 0)]),
        _connector("floorConnector", (1, 0.3, 1), "smoothConcrete", [(0, 0.15, 0), (0, -0.15, 0)],
                   category=ConnectorCategory.TRANSITION),
        _connector("cubeConnector", (0.2, 0.2, 0.2), "copiedCityWhite",
                   [(0.1, 0, 0), (-0.1, 0, 0), (0, 0.1, 0), (0, -0.1, 0), (0, 0, 0.1), (0, 0, -0.1)]),
    ]
    return {c.id: c for c in connectors}


def build_decorative() -> dict[str, Decorative]:
    pieces = [
        _decorative("ribPattern", DecorativeCategory.PATTERN, 0.05, (2, 2, 0.05), "roughConcrete"),
        _decorative("boardformTexture", DecorativeCategory.PATTERN, 0.02, (2, 2, 0.02),
                    "boardformedConcrete"),
        _decorative("brutalWindow", DecorativeCategory.DETAIL, 0.3, (1.5, 2, 0.3), "weatheredConcrete"),
        _decorative("sunshade", DecorativeCategory.DETAIL, 0.8, (2, 0.3, 0.8), "smoothConcrete"),
    ]
    return {d.id: d for d in pieces}
