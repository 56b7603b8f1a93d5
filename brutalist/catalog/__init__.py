"""Asset catalog: prototypes, materials and style selectors."""

from brutalist.catalog.materials import MATERIALS, PRIMARY_MATERIAL
from brutalist.catalog.registry import (
    CATEGORIES,
    CONNECTORS,
    DECORATIVE,
    MODULES,
    Catalog,
    get_catalog,
)
from brutalist.catalog.styles import select_column_type, select_roof_type, select_wall_type

__all__ = [
    "CATEGORIES",
    "CONNECTORS",
    "DECORATIVE",
    "MATERIALS",
    "MODULES",
    "PRIMARY_MATERIAL",
    "Catalog",
    "get_catalog",
    "select_column_type",
    "select_roof_type",
    "select_wall_type",
]
