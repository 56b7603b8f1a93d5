"""WideBuilder: single-story massing with extended terraces."""

from __future__ import annotations

import math

from brutalist.catalog.registry import DECORATIVE
from brutalist.catalog.styles import select_roof_type
from brutalist.generation.builders.base import ArchetypeBuilder, BuildContext
from brutalist.generation.instantiate import BuildResult
from brutalist.models.assembly import Archetype


class WideBuilder(ArchetypeBuilder):
    """Builder for the single-story archetype."""

    @property
    def archetype(self) -> Archetype:
        return Archetype.WIDE

    def build(self, ctx: BuildContext) -> list[BuildResult]:
        dims = ctx.dimensions
        results: list[BuildResult] = []

        # Terraces at varying levels
        num_terraces = math.floor(ctx.rand(2, 4, lane=0))
        for i in range(num_terraces):
            position = ctx.at(
                dims.width * ctx.rand(0.2, 0.8, i, lane=4),
                dims.height * ctx.rand(0.2, 0.4, i, lane=1),
                dims.depth * ctx.rand(0.5, 1.0, i, lane=5),
            )
            results.append(
                self._place(ctx, select_roof_type(*position, noise=ctx.noise), f"extended_terrace_{i}",
                            dimensions=(
                                dims.width * ctx.rand(0.3, 0.6, i, lane=2),
                                0.4,
                                dims.depth * ctx.rand(0.3, 0.5, i, lane=3),
                            ),
                            position=position)
            )

        num_windows = math.floor(ctx.rand(3, 5, lane=6))
        for i in range(num_windows):
            results.append(
                self._place(ctx, "brutalWindow", f"large_window_{i}",
                            dimensions=(2.5, 2.0, 0.4),
                            position=ctx.at(dims.width * (i + 1) / (num_windows + 1), dims.height * 0.4, 0.0),
                            category=DECORATIVE)
            )
        return results
