"""Element: the typed geometric building block of an assembly.

Every record here is frozen.  Prototypes in the catalog and placed
instances in the output stream share these types; instances are always
rebuilt from a dumped copy of their prototype (see :func:`evolve`) so no
nested vector or material is ever shared between two elements.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator, model_validator


class ElementKind(str, Enum):
    MODULE = "module"
    CONNECTOR = "connector"
    DECORATIVE = "decorative"


class ModuleCategory(str, Enum):
    WALL = "wall"
    FLOOR = "floor"
    COLUMN = "column"
    STAIR = "stair"
    PLATFORM = "platform"
    FLOATING = "floating"


class StructuralRole(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    DECORATIVE = "decorative"


class ConnectorCategory(str, Enum):
    JOINT = "joint"
    BRIDGE = "bridge"
    TRANSITION = "transition"


class DecorativeCategory(str, Enum):
    PATTERN = "pattern"
    RELIEF = "relief"
    DETAIL = "detail"


class TextureType(str, Enum):
    SMOOTH = "smooth"
    ROUGH = "rough"
    WEATHERED = "weathered"
    BOARDFORMED = "boardformed"


class Axis(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"


def _coerce_triple(value: Any) -> Any:
    """Accept ``(x, y, z)`` sequences wherever a 3-vector is expected."""
    if isinstance(value, (tuple, list)):
        if len(value) != 3:
            raise ValueError(f"expected 3 components, got {len(value)}")
        return {"x": value[0], "y": value[1], "z": value[2]}
    return value


class Vec3(BaseModel):
    """A 3-vector."""

    model_config = ConfigDict(frozen=True)

    x: FiniteFloat = 0.0
    y: FiniteFloat = 0.0
    z: FiniteFloat = 0.0

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> Any:
        return _coerce_triple(value)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def largest(self) -> float:
        return max(self.x, self.y, self.z)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)


class Euler(BaseModel):
    """Rotation in radians, applied in XYZ order.  ``y`` is the yaw."""

    model_config = ConfigDict(frozen=True)

    x: FiniteFloat = 0.0
    y: FiniteFloat = 0.0
    z: FiniteFloat = 0.0

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> Any:
        return _coerce_triple(value)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


def _unit() -> Vec3:
    return Vec3(x=1.0, y=1.0, z=1.0)


class GeometricProperties(BaseModel):
    """Box dimensions plus placement transform."""

    model_config = ConfigDict(frozen=True)

    dimensions: Vec3
    position: Vec3 = Field(default_factory=Vec3)
    rotation: Euler = Field(default_factory=Euler)
    scale: Vec3 = Field(default_factory=_unit)

    @field_validator("dimensions")
    @classmethod
    def _positive_dimensions(cls, value: Vec3) -> Vec3:
        if min(value.as_tuple()) <= 0:
            raise ValueError(f"dimensions must be positive, got {value.as_tuple()}")
        return value


class MaterialProperties(BaseModel):
    """Physically-based shading parameters for a concrete finish."""

    model_config = ConfigDict(frozen=True)

    roughness: float = Field(ge=0.0, le=1.0)
    metalness: float = Field(ge=0.0, le=1.0)
    color: str = Field(pattern=r"^#[0-9a-fA-F]{6}$")
    bump_scale: float | None = None
    texture_type: TextureType | None = None


class Element(BaseModel):
    """Fields shared by modules, connectors and decorative pieces."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    geometry: GeometricProperties
    material: MaterialProperties
    symmetry_axes: tuple[Axis, ...] | None = None
    allowed_connections: tuple[str, ...] | None = None

    @property
    def position(self) -> Vec3:
        return self.geometry.position

    @property
    def dimensions(self) -> Vec3:
        return self.geometry.dimensions


class Module(Element):
    """Core massing piece: walls, slabs, columns, floating cubes."""

    kind: Literal[ElementKind.MODULE] = ElementKind.MODULE
    category: ModuleCategory
    structural_role: StructuralRole
    load_bearing: bool = False


class Connector(Element):
    """Joint between modules, with local attachment points."""

    kind: Literal[ElementKind.CONNECTOR] = ElementKind.CONNECTOR
    category: ConnectorCategory
    connection_points: tuple[Vec3, ...] = ()


class Decorative(Element):
    """Surface pattern, relief or detail (windows, sunshades)."""

    kind: Literal[ElementKind.DECORATIVE] = ElementKind.DECORATIVE
    category: DecorativeCategory
    depth: float = Field(ge=0.0)


AnyElement = Annotated[Union[Module, Connector, Decorative], Field(discriminator="kind")]


def evolve(model: BaseModel, **updates: Any) -> Any:
    """Return a validated, fully independent copy of *model* with *updates*.

    Unlike ``model_copy(update=...)`` the result is re-validated, and nested
    models passed in *updates* are dumped first so the copy never aliases
    them.
    """
    data = model.model_dump()
    for key, value in updates.items():
        data[key] = value.model_dump() if isinstance(value, BaseModel) else value
    return type(model).model_validate(data)


def is_finite_vector(values: tuple[float, ...]) -> bool:
    return all(math.isfinite(v) for v in values)
