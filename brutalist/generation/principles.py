"""Principle-transform pass: stylistic constraints over placed elements.

Three rules, applied to every element:

1. Raw materiality: a finish rougher than ``ROUGHNESS_THRESHOLD`` is
   replaced by the catalog's primary material.
2. Horizontal emphasis: walls are widened by one seeded factor per pass
   and deepened by ``DEPTH_EMPHASIS``.
3. Orthogonality: yaw snaps to the nearest quarter turn; pitch and roll
   become zero.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from brutalist.catalog.registry import Catalog, get_catalog
from brutalist.config import DEPTH_EMPHASIS, HORIZONTAL_EMPHASIS_RANGE, RIGHT_ANGLE, ROUGHNESS_THRESHOLD
from brutalist.models.element import Element, Euler, Module, ModuleCategory, evolve
from brutalist.sampling.seeded import seeded_random

logger = logging.getLogger(__name__)


def snap_yaw(yaw: float) -> float:
    """Nearest multiple of a right angle; halves round up."""
    return math.floor(yaw / RIGHT_ANGLE + 0.5) * RIGHT_ANGLE


def apply_principles(
    elements: Iterable[Element],
    seed: float,
    catalog: Catalog | None = None,
) -> list[Element]:
    """Return transformed copies of *elements*; the inputs are untouched."""
    catalog = catalog or get_catalog()
    primary = catalog.primary_material
    emphasis = seeded_random(*HORIZONTAL_EMPHASIS_RANGE, seed)

    transformed: list[Element] = []
    for element in elements:
        material = primary if element.material.roughness > ROUGHNESS_THRESHOLD else element.material

        dims = element.dimensions
        if isinstance(element, Module) and element.category == ModuleCategory.WALL:
            dims = (dims.x * emphasis, dims.y, dims.z * DEPTH_EMPHASIS)

        geometry = evolve(
            element.geometry,
            dimensions=dims,
            rotation=Euler(x=0.0, y=snap_yaw(element.geometry.rotation.y), z=0.0),
        )
        transformed.append(evolve(element, geometry=geometry, material=material))

    logger.debug("Applied principles to %d elements (emphasis %.3f)", len(transformed), emphasis)
    return transformed
