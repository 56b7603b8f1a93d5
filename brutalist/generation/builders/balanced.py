"""BalancedBuilder: three overlapping split levels."""

from __future__ import annotations

from brutalist.generation.builders.base import ArchetypeBuilder, BuildContext
from brutalist.generation.instantiate import BuildResult
from brutalist.models.assembly import Archetype

NUM_LEVELS = 3


class BalancedBuilder(ArchetypeBuilder):
    """Builder for the split-level archetype."""

    @property
    def archetype(self) -> Archetype:
        return Archetype.BALANCED

    def build(self, ctx: BuildContext) -> list[BuildResult]:
        dims = ctx.dimensions
        level_height = dims.height / 2
        results: list[BuildResult] = []

        for i in range(NUM_LEVELS):
            y = i * level_height / 2
            step = 0.3 + i * 0.2
            results.append(
                self._place(ctx, "monolithicWall", f"level_{i}",
                            dimensions=(
                                dims.width * ctx.rand(0.6, 0.8, i, lane=0),
                                level_height,
                                dims.depth * ctx.rand(0.6, 0.8, i, lane=1),
                            ),
                            position=ctx.at(dims.width * step, y + level_height / 2, dims.depth * step))
            )
            # Platform linking this level to the next
            if i < NUM_LEVELS - 1:
                results.append(
                    self._place(ctx, "flatRoof", f"link_platform_{i}",
                                dimensions=(dims.width * 0.3, 0.4, dims.depth * 0.3),
                                position=ctx.at(dims.width * (step + 0.1), y + level_height, dims.depth * (step + 0.1)))
                )
        return results
