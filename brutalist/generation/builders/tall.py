"""TallBuilder: multi-story stacked volumes around a vertical core."""

from __future__ import annotations

import enum
import math

from brutalist.catalog.registry import DECORATIVE
from brutalist.catalog.styles import select_column_type
from brutalist.config import STOREY_HEIGHT
from brutalist.generation.builders.base import ArchetypeBuilder, BuildContext
from brutalist.generation.instantiate import BuildResult
from brutalist.models.assembly import Archetype


class FloorVariant(str, enum.Enum):
    """Massing volume of one floor, chosen by ``floor % 3``."""

    CANTILEVER = "cantilever"
    PERPENDICULAR = "perpendicular"
    OFFSET_VOLUME = "offset_volume"

    @classmethod
    def for_floor(cls, i: int) -> FloorVariant:
        return tuple(cls)[i % len(cls)]


class TallBuilder(ArchetypeBuilder):
    """Builder for the multi-story archetype.

    One floor per ``STOREY_HEIGHT`` of bounding height, never fewer than
    one.  Each floor gets a massing volume chosen by
    :meth:`FloorVariant.for_floor` and 2-4 windows; even floors also get a
    horizontal cantilever plane and a circulation column.
    """

    @property
    def archetype(self) -> Archetype:
        return Archetype.TALL

    def build(self, ctx: BuildContext) -> list[BuildResult]:
        dims = ctx.dimensions
        num_floors = max(1, math.floor(dims.height / STOREY_HEIGHT))
        base_width = dims.width * 0.6

        results = [
            self._place(ctx, "monolithicWall", "vertical_core",
                        dimensions=(base_width * 0.4, dims.height, dims.depth * 0.4),
                        position=ctx.at(dims.width * 0.3, dims.height / 2, dims.depth * 0.3)),
        ]

        for i in range(num_floors):
            floor_height = dims.height / num_floors
            y = i * floor_height
            results.append(self._floor_volume(ctx, i, y, floor_height, base_width))

            if i % 2 == 0:
                results.append(
                    self._place(ctx, "cantileverRoof", f"horizontal_plane_{i}",
                                dimensions=(base_width * ctx.rand(1.2, 1.8, i, lane=2), 0.4, dims.depth * 0.3),
                                position=ctx.at(
                                    dims.width * ctx.rand(0.2, 0.6, i, lane=3),
                                    y + floor_height * 0.8,
                                    dims.depth * ctx.rand(0.3, 0.7, i, lane=4),
                                ),
                                rotation=(0.0, ctx.rand(-math.pi / 4, math.pi / 4, i, lane=5), 0.0))
                )
                position = ctx.at(dims.width * 0.15, y + floor_height, dims.depth * 0.15)
                results.append(
                    self._place(ctx, select_column_type(*position, noise=ctx.noise), f"vertical_element_{i}",
                                dimensions=(base_width * 0.2, floor_height * 2, base_width * 0.2),
                                position=position)
                )

            num_windows = math.floor(ctx.rand(2, 5, i, lane=6))
            for w in range(num_windows):
                front = w % 2 == 0
                results.append(
                    self._place(ctx, "brutalWindow", f"window_{i}_{w}",
                                dimensions=(1.5, floor_height * 0.6, 0.3),
                                position=ctx.at(
                                    dims.width * (0.2 + w * 0.25),
                                    y + floor_height * 0.5,
                                    dims.depth * (0.95 if front else 0.05),
                                ),
                                rotation=(0.0, 0.0 if front else math.pi, 0.0),
                                category=DECORATIVE)
                )
        return results

    def _floor_volume(
        self, ctx: BuildContext, i: int, y: float, floor_height: float, base_width: float
    ) -> BuildResult:
        dims = ctx.dimensions
        variant = FloorVariant.for_floor(i)
        local_id = f"{variant.value}_{i}"
        mid_y = y + floor_height / 2

        if variant is FloorVariant.CANTILEVER:
            return self._place(ctx, "monolithicWall", local_id,
                               dimensions=(base_width * ctx.rand(0.8, 1.2, i), floor_height * 1.2, dims.depth * 0.6),
                               position=ctx.at(dims.width * 0.6, mid_y, dims.depth * 0.4))
        if variant is FloorVariant.PERPENDICULAR:
            return self._place(ctx, "monolithicWall", local_id,
                               dimensions=(base_width * 0.5, floor_height * 1.5, dims.depth * ctx.rand(0.8, 1.2, i)),
                               position=ctx.at(dims.width * 0.2, mid_y, dims.depth * 0.7))
        shift = ctx.rand(-0.3, 0.3, i)
        return self._place(ctx, "monolithicWall", local_id,
                           dimensions=(base_width * 0.7, floor_height * 0.9, dims.depth * 0.7),
                           position=ctx.at(dims.width * (0.4 + shift), mid_y, dims.depth * 0.5),
                           rotation=(0.0, ctx.rand(-math.pi / 6, math.pi / 6, i, lane=1), 0.0))
