"""Procedural generation: composition engine, builders and transform passes."""

from brutalist.generation.composer import (
    CompositionEngine,
    compose,
    compute_dimensions,
    generate,
    select_archetype,
    select_composition,
)
from brutalist.generation.instantiate import BuildResult, collect_results, fallback_element, instantiate
from brutalist.generation.params import CompositionParams
from brutalist.generation.principles import apply_principles

__all__ = [
    "BuildResult",
    "CompositionEngine",
    "CompositionParams",
    "apply_principles",
    "collect_results",
    "compose",
    "compute_dimensions",
    "fallback_element",
    "generate",
    "instantiate",
    "select_archetype",
    "select_composition",
]
