"""LivingSpaceBuilder: the L- or U-shaped shell under every archetype."""

from __future__ import annotations

import math

from brutalist.catalog.registry import DECORATIVE
from brutalist.catalog.styles import select_wall_type
from brutalist.config import SHELL_DEPTH_RATIO, WALL_THICKNESS
from brutalist.generation.builders.base import BuildContext, MassingBuilder
from brutalist.generation.instantiate import BuildResult


class LivingSpaceBuilder(MassingBuilder):
    """Builder for the base living volume.

    The footprint is ``width`` by ``width * 0.7``; a seeded coin flip
    decides between an L (two walls plus a corner column) and a U (three
    walls around a courtyard platform).
    """

    @property
    def name(self) -> str:
        return "living_space"

    def build(self, ctx: BuildContext) -> list[BuildResult]:
        cell = ctx.dimensions.width
        height = ctx.dimensions.height
        t = WALL_THICKNESS
        depth = cell * SHELL_DEPTH_RATIO
        mid_z = depth / 2
        is_l_shaped = ctx.rand(0.0, 1.0, lane=0) < 0.5

        results = [
            self._place(ctx, "monolithicWall", "main_wall_long",
                        dimensions=(cell, height, t),
                        position=ctx.at(cell / 2, height / 2, 0.0)),
            self._place(ctx, "monolithicWall", "main_wall_short",
                        dimensions=(t, height, depth),
                        position=ctx.at(0.0, height / 2, mid_z)),
        ]
        if not is_l_shaped:
            results.append(
                self._place(ctx, "monolithicWall", "main_wall_third",
                            dimensions=(t, height, depth),
                            position=ctx.at(cell, height / 2, mid_z))
            )

        results.append(
            self._place(ctx, "flatRoof", "floor_plane",
                        dimensions=(cell, t, depth),
                        position=ctx.at(cell / 2, 0.0, mid_z))
        )
        results.append(
            self._place(ctx, "flatRoof", "roof_plane",
                        dimensions=(cell, t, depth),
                        position=ctx.at(cell / 2, height, mid_z))
        )

        num_dividers = math.floor(ctx.rand(1, 3, lane=1))
        for i in range(num_dividers):
            position = ctx.at(cell * ctx.rand(0.3, 0.7, i, lane=2), height * 0.4, mid_z)
            wall_type = select_wall_type(*position, noise=ctx.noise)
            results.append(
                self._place(ctx, wall_type, f"divider_{i}",
                            dimensions=(t, height * 0.8, cell * 0.4),
                            position=position)
            )

        num_windows = math.floor(ctx.rand(2, 4, lane=3))
        for i in range(num_windows):
            results.append(
                self._place(ctx, "brutalWindow", f"window_{i}",
                            dimensions=(2.0, height * 0.4, 0.3),
                            position=ctx.at(cell * (i + 1) / (num_windows + 1), height * 0.5, 0.0),
                            category=DECORATIVE)
            )

        if is_l_shaped:
            results.append(
                self._place(ctx, "massiveColumn", "corner_feature",
                            dimensions=(1.0, height * 0.7, 1.0),
                            position=ctx.at(cell * 0.8, height * 0.35, cell * 0.6),
                            rotation=(0.0, math.pi / 4, 0.0))
            )
        else:
            results.append(
                self._place(ctx, "flatRoof", "courtyard_platform",
                            dimensions=(cell * 0.4, 0.2, cell * 0.4),
                            position=ctx.at(cell * 0.5, 0.1, mid_z))
            )
        return results
