"""CompositionParams: validated inputs of one composition run."""

from __future__ import annotations

import math
from typing import Any, Mapping

import pydantic
from pydantic import BaseModel, ConfigDict, Field, model_validator

from brutalist.errors import ValidationError
from brutalist.models.assembly import Archetype
from brutalist.models.element import Vec3


class CompositionParams(BaseModel):
    """Scalar controls for :func:`brutalist.generation.compose`.

    Out-of-domain values raise :class:`brutalist.errors.ValidationError`
    before any geometry is emitted.
    """

    model_config = ConfigDict(frozen=True)

    cell_size: float
    """Base plan dimension; must be finite and > 0."""

    height: float
    """Base vertical dimension; must be finite and > 0."""

    offset: Vec3 = Field(default_factory=Vec3)
    """World-space origin of the composition."""

    complexity: float = 0.5
    """0-1.  Above 0.5 the massing is partially disintegrated."""

    symmetry: bool = False
    """Mirror every other floating cube across the centre x-plane."""

    seed: float | None = None
    """Seed for every draw.  ``None`` draws one from OS entropy."""

    floating_density: float = 0.5
    """Multiplier on the floating-cube count; >= 0."""

    aggregation_factor: float = 0.6
    """0-1.  Higher values cluster floating cubes more tightly."""

    archetype: Archetype | None = None
    """Force a single archetype, skipping the type roll and hybrid path."""

    @model_validator(mode="after")
    def _check_domain(self) -> CompositionParams:
        for name in ("cell_size", "height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValidationError(name, f"must be a finite number > 0, got {value}")
        for name in ("complexity", "aggregation_factor"):
            value = getattr(self, name)
            if not math.isfinite(value) or not 0.0 <= value <= 1.0:
                raise ValidationError(name, f"must be within [0, 1], got {value}")
        if not math.isfinite(self.floating_density) or self.floating_density < 0:
            raise ValidationError(
                "floating_density", f"must be a finite number >= 0, got {self.floating_density}"
            )
        if self.seed is not None and not math.isfinite(self.seed):
            raise ValidationError("seed", f"must be finite, got {self.seed}")
        return self


def coerce_params(params: CompositionParams | Mapping[str, Any] | None = None, **overrides: Any) -> CompositionParams:
    """Build a :class:`CompositionParams` from a model, a mapping or keywords.

    Type errors reported by pydantic are re-raised as
    :class:`ValidationError` naming the first offending field.
    """
    if isinstance(params, CompositionParams):
        data: dict[str, Any] = params.model_dump()
    else:
        data = dict(params or {})
    data.update(overrides)
    try:
        return CompositionParams.model_validate(data)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "params"
        raise ValidationError(field, first["msg"]) from exc
