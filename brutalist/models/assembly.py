"""Assembly: the ordered element stream plus the record of how it was made."""

from __future__ import annotations

from collections import Counter
from enum import Enum

from pydantic import BaseModel, Field, PositiveFloat

from brutalist.errors import IdCollisionError
from brutalist.models.element import AnyElement, Element, Vec3

HYBRID = "hybrid"


class Archetype(str, Enum):
    """Top-level massing strategy."""

    WIDE = "wide"
    TALL = "tall"
    BALANCED = "balanced"


class Dimensions(BaseModel):
    """Bounding volume of one sub-assembly."""

    width: PositiveFloat
    height: PositiveFloat
    depth: PositiveFloat

    def largest(self) -> float:
        return max(self.width, self.height, self.depth)


class Diagnostic(BaseModel):
    """A non-fatal problem recorded during generation."""

    element_id: str
    severity: str = "warning"
    """Severity: 'error', 'warning', 'info'."""

    message: str


class SubAssembly(BaseModel):
    """One builder invocation inside an assembly."""

    namespace: str
    archetype: Archetype
    dimensions: Dimensions
    offset: Vec3
    element_count: int = 0


class Assembly(BaseModel):
    """The output of one composition run."""

    seed: float
    composition: str
    """Either an :class:`Archetype` value or ``"hybrid"``."""

    elements: list[AnyElement] = Field(default_factory=list)
    sub_assemblies: list[SubAssembly] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def is_hybrid(self) -> bool:
        return self.composition == HYBRID

    def in_namespace(self, namespace: str) -> list[Element]:
        """Elements emitted by the sub-assembly *namespace*."""
        prefix = f"{namespace}/"
        return [e for e in self.elements if e.id.startswith(prefix)]

    def duplicate_ids(self) -> list[str]:
        counts = Counter(e.id for e in self.elements)
        return sorted(eid for eid, n in counts.items() if n > 1)

    def require_unique_ids(self) -> None:
        """Raise :class:`IdCollisionError` if any element id repeats."""
        duplicates = self.duplicate_ids()
        if duplicates:
            raise IdCollisionError(duplicates)
