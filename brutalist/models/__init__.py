"""Data models for elements and assemblies."""

from brutalist.models.assembly import (
    HYBRID,
    Archetype,
    Assembly,
    Diagnostic,
    Dimensions,
    SubAssembly,
)
from brutalist.models.element import (
    AnyElement,
    Axis,
    ConnectorCategory,
    Connector,
    DecorativeCategory,
    Decorative,
    Element,
    ElementKind,
    Euler,
    GeometricProperties,
    MaterialProperties,
    Module,
    ModuleCategory,
    StructuralRole,
    TextureType,
    Vec3,
    evolve,
)

__all__ = [
    "HYBRID",
    "AnyElement",
    "Archetype",
    "Assembly",
    "Axis",
    "Connector",
    "ConnectorCategory",
    "Decorative",
    "DecorativeCategory",
    "Diagnostic",
    "Dimensions",
    "Element",
    "ElementKind",
    "Euler",
    "GeometricProperties",
    "MaterialProperties",
    "Module",
    "ModuleCategory",
    "StructuralRole",
    "SubAssembly",
    "TextureType",
    "Vec3",
    "evolve",
]
