"""Disintegration: noise-driven replacement of solids with debris.

Purely cosmetic: fragments carry no structural bookkeeping.
"""

from __future__ import annotations

import logging
import math

from brutalist.catalog.registry import Catalog, get_catalog
from brutalist.config import DISINTEGRATION_INTENSITY, DISINTEGRATION_NOISE_SCALE, FRAGMENT_SIZE_RATIO
from brutalist.generation.builders.base import BuildContext
from brutalist.generation.instantiate import BuildResult, try_instantiate
from brutalist.models.element import Element, Module, ModuleCategory, Vec3
from brutalist.sampling.noise import Noise3D, get_noise
from brutalist.sampling.seeded import derive_seed, seeded_random

logger = logging.getLogger(__name__)

# Module categories that read as solid mass
SOLID_CATEGORIES = frozenset({ModuleCategory.WALL, ModuleCategory.PLATFORM, ModuleCategory.COLUMN})

FRAGMENT_PROTOTYPE = "basicWall"
_TWO_PI = 2 * math.pi


def is_disintegrated(
    position: Vec3,
    total_height: float,
    noise: Noise3D | None = None,
    base_y: float = 0.0,
) -> bool:
    """True when the solid at *position* should break apart.

    Higher points break more often: the test is
    ``noise < (y - base_y) / total_height * 0.6``.
    """
    if total_height <= 0:
        return False
    height_fraction = (position.y - base_y) / total_height
    noise_value = get_noise(position.x, position.y, position.z, DISINTEGRATION_NOISE_SCALE, noise)
    return noise_value < height_fraction * DISINTEGRATION_INTENSITY


def generate_fragments(element: Element, seed: float, catalog: Catalog | None = None) -> list[BuildResult]:
    """Return 3-8 debris cubes scattered around *element*.

    Cube edge is ``0.2 *`` the element's largest dimension; fragments rise
    0.5 to 2 sizes above the original point.
    """
    catalog = catalog or get_catalog()
    prototype = catalog.get("modules", FRAGMENT_PROTOTYPE)
    size = element.dimensions.largest()
    edge = size * FRAGMENT_SIZE_RATIO
    origin = element.position
    count = math.floor(seeded_random(3, 9, seed))

    results = []
    for k in range(count):
        def draw(low: float, high: float, lane: int) -> float:
            return seeded_random(low, high, derive_seed(seed, k, lane))

        results.append(
            try_instantiate(
                prototype,
                f"{element.id}/fragment_{k}",
                dimensions=(edge, edge, edge),
                position=(
                    origin.x + draw(-1, 1, 1) * size,
                    origin.y + draw(0.5, 2, 2) * size,
                    origin.z + draw(-1, 1, 3) * size,
                ),
                rotation=(draw(0, _TWO_PI, 4), draw(0, _TWO_PI, 5), draw(0, _TWO_PI, 6)),
            )
        )
    return results


def disintegrate(elements: list[Element], ctx: BuildContext) -> list[BuildResult]:
    """Pass *elements* through, replacing disintegrated solids with fragments."""
    results: list[BuildResult] = []
    replaced = 0
    for index, element in enumerate(elements):
        solid = isinstance(element, Module) and element.category in SOLID_CATEGORIES
        if solid and is_disintegrated(element.position, ctx.dimensions.height, ctx.noise, ctx.offset.y):
            # Hash the per-element key so neighbouring elements do not share draws
            fragment_seed = seeded_random(0.0, 1000.0, ctx.key(index, lane=8))
            results.extend(generate_fragments(element, fragment_seed, ctx.catalog))
            replaced += 1
        else:
            results.append(BuildResult(element_id=element.id, position=element.position.as_tuple(), element=element))
    logger.debug("Disintegrated %d of %d elements in %s", replaced, len(elements), ctx.namespace)
    return results
