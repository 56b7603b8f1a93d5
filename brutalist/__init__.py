"""brutalist: procedural brutalist architecture assemblies."""

__version__ = "0.1.0"

from brutalist.api.controls import GenerationControls
from brutalist.api.facade import Brutalist
from brutalist.catalog.registry import Catalog, get_catalog
from brutalist.errors import (
    BrutalistError,
    CatalogError,
    IdCollisionError,
    InstantiationError,
    ValidationError,
)
from brutalist.generation.composer import CompositionEngine, compose, generate
from brutalist.generation.params import CompositionParams
from brutalist.models.assembly import Archetype, Assembly

__all__ = [
    "Archetype",
    "Assembly",
    "Brutalist",
    "BrutalistError",
    "Catalog",
    "CatalogError",
    "CompositionEngine",
    "CompositionParams",
    "GenerationControls",
    "IdCollisionError",
    "InstantiationError",
    "ValidationError",
    "compose",
    "generate",
    "get_catalog",
    "__version__",
]
