"""FloatingBuilder: sculptural cube cluster around an assembly."""

from __future__ import annotations

import math

from brutalist.generation.builders.base import BuildContext, MassingBuilder
from brutalist.generation.instantiate import BuildResult

TWO_PI = 2 * math.pi


class FloatingBuilder(MassingBuilder):
    """Scatter floatingCube instances inside a sphere over the volume.

    The sphere is centred on the bounding volume with radius equal to its
    largest dimension; each radial distance is scaled by
    ``1 - aggregation_factor``.  With ``symmetry`` on, every odd cube is the
    mirror image of the one before it across the centre x-plane.
    """

    @property
    def name(self) -> str:
        return "floating"

    def build(self, ctx: BuildContext) -> list[BuildResult]:
        params = ctx.params
        dims = ctx.dimensions
        count = math.floor(ctx.rand(10, 20) * params.floating_density)
        cx, cy, cz = ctx.at(dims.width / 2, dims.height / 2, dims.depth / 2)
        radius = dims.largest()
        unit = ctx.catalog.get("modules", "floatingCube").dimensions.as_tuple()

        results: list[BuildResult] = []
        previous: tuple | None = None
        for i in range(count):
            if params.symmetry and i % 2 == 1 and previous is not None:
                (px, py, pz), size, (rx, ry, rz) = previous
                placement = ((2 * cx - px, py, pz), size, (rx, -ry, -rz))
            else:
                size = ctx.rand(0.3, 1.0, i, lane=1)
                distance = ctx.rand(0.0, radius, i, lane=2) * (1 - params.aggregation_factor)
                azimuth = ctx.rand(0.0, TWO_PI, i, lane=3)
                cos_polar = ctx.rand(-1.0, 1.0, i, lane=4)
                sin_polar = math.sqrt(max(0.0, 1.0 - cos_polar * cos_polar))
                position = (
                    cx + distance * sin_polar * math.cos(azimuth),
                    cy + distance * cos_polar,
                    cz + distance * sin_polar * math.sin(azimuth),
                )
                rotation = (
                    ctx.rand(0.0, TWO_PI, i, lane=5),
                    ctx.rand(0.0, TWO_PI, i, lane=6),
                    ctx.rand(0.0, TWO_PI, i, lane=7),
                )
                placement = (position, size, rotation)
            previous = placement

            position, size, rotation = placement
            results.append(
                self._place(ctx, "floatingCube", f"floating_cube_{i}",
                            dimensions=unit,
                            position=position,
                            rotation=rotation,
                            scale=(size, size, size))
            )
        return results
