"""GenerationControls: the two numeric inputs of the parameter form."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, model_validator

from brutalist.config import CELL_SIZE_CONTROL, CONTROLS_CENTERING, HEIGHT_CONTROL
from brutalist.errors import ValidationError
from brutalist.generation.params import CompositionParams

# Tolerance when checking that a value sits on the step grid
_STEP_TOLERANCE = 1e-9


def check_control(name: str, value: float, control: tuple[float, float, float, float]) -> float:
    """Return *value* if it lies in range and on the step grid of *control*."""
    low, high, step, _default = control
    if not math.isfinite(value) or not low <= value <= high:
        raise ValidationError(name, f"must be within [{low}, {high}], got {value}")
    steps = (value - low) / step
    if abs(steps - round(steps)) > _STEP_TOLERANCE:
        raise ValidationError(name, f"must be a multiple of {step} from {low}, got {value}")
    return value


class GenerationControls(BaseModel):
    """Height and cell size as entered by the user."""

    model_config = ConfigDict(frozen=True)

    height: float = HEIGHT_CONTROL[3]
    """1 to 10 in steps of 0.5."""

    cell_size: float = CELL_SIZE_CONTROL[3]
    """2 to 12 in steps of 0.5."""

    @model_validator(mode="after")
    def _check_ranges(self) -> GenerationControls:
        check_control("height", self.height, HEIGHT_CONTROL)
        check_control("cell_size", self.cell_size, CELL_SIZE_CONTROL)
        return self

    def to_params(self, seed: float | None = None) -> CompositionParams:
        """Composition parameters centred on the origin."""
        shift = -self.cell_size * CONTROLS_CENTERING
        return CompositionParams(
            cell_size=self.cell_size,
            height=self.height,
            offset=(shift, 0.0, shift),
            seed=seed,
        )
