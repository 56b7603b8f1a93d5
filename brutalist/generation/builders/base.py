"""Abstract massing-builder interface.

A builder turns a :class:`BuildContext` (bounding volume, offset, seed,
catalog) into an ordered list of :class:`BuildResult`.  Builders never
raise for a single bad element; they return a failed result and let
:func:`brutalist.generation.instantiate.collect_results` degrade it.
"""

from __future__ import annotations

import abc
import dataclasses
from dataclasses import dataclass
from typing import Sequence

from brutalist.catalog.registry import MODULES, Catalog
from brutalist.generation.instantiate import BuildResult, failed, try_instantiate
from brutalist.generation.params import CompositionParams
from brutalist.models.assembly import Archetype, Dimensions
from brutalist.models.element import Vec3
from brutalist.sampling.noise import Noise3D
from brutalist.sampling.seeded import derive_seed, seeded_random, stream_salt


@dataclass(frozen=True)
class BuildContext:
    """Everything one builder invocation needs.

    ``stream`` salts every draw key; :meth:`scoped` gives each builder of a
    sub-assembly its own stream so no two builders replay the same keys.
    """

    namespace: str
    offset: Vec3
    dimensions: Dimensions
    seed: float
    params: CompositionParams
    catalog: Catalog
    noise: Noise3D
    stream: float = 0.0

    def scoped(self, label: str) -> BuildContext:
        """Copy whose draws are keyed on ``<namespace>/<label>``."""
        return dataclasses.replace(self, stream=stream_salt(f"{self.namespace}/{label}"))

    def qualify(self, local_id: str) -> str:
        """Prefix a builder-local id with this invocation's namespace."""
        return f"{self.namespace}/{local_id}" if self.namespace else local_id

    def key(self, index: int = 0, lane: int = 0) -> float:
        return derive_seed(self.seed, index, lane, self.stream)

    def rand(self, low: float, high: float, index: int = 0, lane: int = 0) -> float:
        """Seeded draw for item *index*; distinct *lane* values are independent."""
        return seeded_random(low, high, self.key(index, lane))

    def at(self, dx: float, dy: float, dz: float) -> tuple[float, float, float]:
        """World position at ``offset + (dx, dy, dz)``."""
        return (self.offset.x + dx, self.offset.y + dy, self.offset.z + dz)


class MassingBuilder(abc.ABC):
    """Base class for every builder that emits elements into an assembly."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short label used in logs and as the draw-stream label."""

    @abc.abstractmethod
    def build(self, ctx: BuildContext) -> list[BuildResult]:
        """Return one result per element, in emission order."""

    def run(self, ctx: BuildContext) -> list[BuildResult]:
        """:meth:`build` under this builder's own draw stream."""
        return self.build(ctx.scoped(self.name))

    # Helpers shared by all builders

    @staticmethod
    def _place(
        ctx: BuildContext,
        prototype_id: str,
        local_id: str,
        *,
        dimensions: Sequence[float],
        position: Sequence[float],
        rotation: Sequence[float] = (0.0, 0.0, 0.0),
        scale: Sequence[float] | None = None,
        category: str = MODULES,
    ) -> BuildResult:
        element_id = ctx.qualify(local_id)
        try:
            prototype = ctx.catalog.get(category, prototype_id)
        except KeyError as exc:
            return failed(element_id, str(exc), position)
        return try_instantiate(
            prototype,
            element_id,
            dimensions=dimensions,
            position=position,
            rotation=rotation,
            scale=scale,
        )


class ArchetypeBuilder(MassingBuilder):
    """A massing strategy selected by :class:`Archetype`."""

    @property
    @abc.abstractmethod
    def archetype(self) -> Archetype:
        """The archetype this builder implements."""

    @property
    def name(self) -> str:
        return self.archetype.value
