"""Massing builders: one per archetype, plus shell, floating and debris."""

from brutalist.generation.builders.balanced import BalancedBuilder
from brutalist.generation.builders.base import ArchetypeBuilder, BuildContext, MassingBuilder
from brutalist.generation.builders.floating import FloatingBuilder
from brutalist.generation.builders.fragments import disintegrate, generate_fragments, is_disintegrated
from brutalist.generation.builders.shell import LivingSpaceBuilder
from brutalist.generation.builders.tall import TallBuilder
from brutalist.generation.builders.wide import WideBuilder
from brutalist.models.assembly import Archetype

BUILDER_REGISTRY: dict[Archetype, type[ArchetypeBuilder]] = {
    Archetype.WIDE: WideBuilder,
    Archetype.TALL: TallBuilder,
    Archetype.BALANCED: BalancedBuilder,
}

_missing = set(Archetype) - set(BUILDER_REGISTRY)
if _missing:
    raise ImportError(f"No builder registered for archetypes: {sorted(a.value for a in _missing)}")


def get_builder(archetype: Archetype | str) -> ArchetypeBuilder:
    """Return the builder instance for *archetype*."""
    return BUILDER_REGISTRY[Archetype(archetype)]()


__all__ = [
    "ArchetypeBuilder",
    "BalancedBuilder",
    "BuildContext",
    "FloatingBuilder",
    "LivingSpaceBuilder",
    "MassingBuilder",
    "TallBuilder",
    "WideBuilder",
    "BUILDER_REGISTRY",
    "disintegrate",
    "generate_fragments",
    "get_builder",
    "is_disintegrated",
]
