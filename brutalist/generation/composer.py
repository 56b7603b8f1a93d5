"""CompositionEngine: main entry point for assembly generation.

Usage::

    from brutalist.generation import compose

    assembly = compose(cell_size=6, height=4, offset=(-3, 0, -3), seed=0.42)
    for element in assembly.elements:
        ...

One run:

1. Draw the type roll from the seed stream.  Below ``HYBRID_THRESHOLD``
   the result is a hybrid of a wide and a tall sub-assembly; otherwise one
   archetype is picked by weighted range.
2. Each sub-assembly gets bounding dimensions, a living-space shell (run
   through the principle pass), archetype massing (optionally
   disintegrated) and a floating cluster.
3. Element ids are checked for duplicates.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from brutalist.catalog.registry import Catalog, get_catalog
from brutalist.config import (
    BALANCED_THRESHOLD,
    DISINTEGRATION_COMPLEXITY,
    HYBRID_TALL_CELL,
    HYBRID_TALL_HEIGHT,
    HYBRID_TALL_SHIFT,
    HYBRID_THRESHOLD,
    HYBRID_WIDE_CELL,
    HYBRID_WIDE_HEIGHT,
    HYBRID_WIDE_SHIFT,
    WIDE_THRESHOLD,
)
from brutalist.generation.builders import (
    BuildContext,
    FloatingBuilder,
    LivingSpaceBuilder,
    disintegrate,
    get_builder,
)
from brutalist.generation.instantiate import collect_results
from brutalist.generation.params import CompositionParams, coerce_params
from brutalist.generation.principles import apply_principles
from brutalist.models.assembly import HYBRID, Archetype, Assembly, Diagnostic, Dimensions, SubAssembly
from brutalist.models.element import Element, Vec3
from brutalist.sampling.noise import Noise3D
from brutalist.sampling.seeded import SeedStream, derive_seed

logger = logging.getLogger(__name__)

# (width, height, depth) ratio ranges; width/depth scale the cell size,
# height scales the requested height
_DIMENSION_RATIOS: dict[Archetype, tuple[tuple[float, float], ...]] = {
    Archetype.WIDE: ((2.0, 3.0), (0.8, 1.2), (1.5, 2.0)),
    Archetype.TALL: ((0.8, 1.2), (2.0, 3.0), (0.8, 1.2)),
    Archetype.BALANCED: ((1.2, 1.8), (1.2, 1.8), (1.2, 1.8)),
}


def select_archetype(type_roll: float) -> Archetype:
    """Weighted archetype choice: wide below 0.5, balanced below 0.7, else tall."""
    if type_roll < WIDE_THRESHOLD:
        return Archetype.WIDE
    if type_roll < BALANCED_THRESHOLD:
        return Archetype.BALANCED
    return Archetype.TALL


def select_composition(type_roll: float) -> Archetype | str:
    """Return ``"hybrid"`` below ``HYBRID_THRESHOLD``, else :func:`select_archetype`."""
    if type_roll < HYBRID_THRESHOLD:
        return HYBRID
    return select_archetype(type_roll)


def compute_dimensions(
    archetype: Archetype,
    cell_size: float,
    height: float,
    stream: SeedStream,
) -> Dimensions:
    """Draw a bounding volume for *archetype* from *stream*.

    Draw order is width, height, depth.
    """
    (w_lo, w_hi), (h_lo, h_hi), (d_lo, d_hi) = _DIMENSION_RATIOS[Archetype(archetype)]
    width = cell_size * stream.uniform(w_lo, w_hi)
    vertical = height * stream.uniform(h_lo, h_hi)
    depth = cell_size * stream.uniform(d_lo, d_hi)
    return Dimensions(width=width, height=vertical, depth=depth)


def _shifted(offset: Vec3, shift: tuple[float, float, float], cell_size: float) -> Vec3:
    return Vec3(
        x=offset.x + shift[0] * cell_size,
        y=offset.y + shift[1] * cell_size,
        z=offset.z + shift[2] * cell_size,
    )


class CompositionEngine:
    """Builds :class:`Assembly` records from :class:`CompositionParams`.

    Parameters
    ----------
    catalog:
        Prototype catalog.  Defaults to the process-wide
        :func:`brutalist.catalog.get_catalog`.
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or get_catalog()

    def compose(
        self,
        params: CompositionParams | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> Assembly:
        """Run one composition.

        Raises
        ------
        ValidationError
            If any parameter is out of domain.  Nothing is built.
        """
        params = coerce_params(params, **overrides)
        seed = params.seed if params.seed is not None else SeedStream.fresh_seed()
        stream = SeedStream(seed)
        noise = Noise3D(seed)

        if params.archetype is not None:
            composition: Archetype | str = params.archetype
        else:
            composition = select_composition(stream.uniform())

        if composition == HYBRID:
            plan = [
                (Archetype.WIDE,
                 _shifted(params.offset, HYBRID_WIDE_SHIFT, params.cell_size),
                 params.cell_size * HYBRID_WIDE_CELL,
                 params.height * HYBRID_WIDE_HEIGHT),
                (Archetype.TALL,
                 _shifted(params.offset, HYBRID_TALL_SHIFT, params.cell_size),
                 params.cell_size * HYBRID_TALL_CELL,
                 params.height * HYBRID_TALL_HEIGHT),
            ]
        else:
            plan = [(composition, params.offset, params.cell_size, params.height)]

        elements: list[Element] = []
        sub_assemblies: list[SubAssembly] = []
        diagnostics: list[Diagnostic] = []
        for index, (archetype, offset, cell_size, height) in enumerate(plan):
            dims = compute_dimensions(archetype, cell_size, height, stream)
            ctx = BuildContext(
                namespace=f"{archetype.value}_{index}",
                offset=offset,
                dimensions=dims,
                seed=derive_seed(seed, index),
                params=params,
                catalog=self.catalog,
                noise=noise,
            )
            built, found = self._build_structure(archetype, ctx)
            elements.extend(built)
            diagnostics.extend(found)
            sub_assemblies.append(
                SubAssembly(
                    namespace=ctx.namespace,
                    archetype=archetype,
                    dimensions=dims,
                    offset=offset,
                    element_count=len(built),
                )
            )

        assembly = Assembly(
            seed=seed,
            composition=composition.value if isinstance(composition, Archetype) else composition,
            elements=elements,
            sub_assemblies=sub_assemblies,
            diagnostics=diagnostics,
        )
        for element_id in assembly.duplicate_ids():
            logger.warning("Duplicate element id in assembly: %s", element_id)
            assembly.diagnostics.append(
                Diagnostic(element_id=element_id, severity="warning", message="Duplicate element id")
            )

        logger.info(
            "Composed %s assembly: %d elements, %d diagnostics (seed=%r)",
            assembly.composition, len(assembly.elements), len(assembly.diagnostics), seed,
        )
        return assembly

    def generate(
        self,
        params: CompositionParams | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> list[Element]:
        """Like :meth:`compose` but returns only the element stream."""
        return self.compose(params, **overrides).elements

    def _build_structure(self, archetype: Archetype, ctx: BuildContext) -> tuple[list[Element], list[Diagnostic]]:
        origin = ctx.offset.as_tuple()
        diagnostics: list[Diagnostic] = []

        shell, found = collect_results(LivingSpaceBuilder().run(ctx), self.catalog, origin)
        diagnostics.extend(found)
        shell = apply_principles(shell, ctx.scoped("principles").key(), self.catalog)

        massing, found = collect_results(get_builder(archetype).run(ctx), self.catalog, origin)
        diagnostics.extend(found)
        if ctx.params.complexity > DISINTEGRATION_COMPLEXITY:
            massing, found = collect_results(disintegrate(massing, ctx.scoped("fragments")), self.catalog, origin)
            diagnostics.extend(found)

        floating, found = collect_results(FloatingBuilder().run(ctx), self.catalog, origin)
        diagnostics.extend(found)

        logger.debug(
            "%s: %d shell, %d massing, %d floating elements",
            ctx.namespace, len(shell), len(massing), len(floating),
        )
        return shell + massing + floating, diagnostics


def compose(params: CompositionParams | Mapping[str, Any] | None = None, **overrides: Any) -> Assembly:
    """Compose with the default catalog."""
    return CompositionEngine().compose(params, **overrides)


def generate(params: CompositionParams | Mapping[str, Any] | None = None, **overrides: Any) -> list[Element]:
    """Generate the element stream with the default catalog."""
    return CompositionEngine().generate(params, **overrides)
