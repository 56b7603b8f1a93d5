"""Scene model: box meshes, materials and camera for 3D visualization."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterable

import numpy as np

from brutalist.config import FALLBACK_COLOR, FALLBACK_SIZE
from brutalist.errors import BrutalistError, InstantiationError
from brutalist.models.assembly import Assembly
from brutalist.models.element import Element

logger = logging.getLogger(__name__)

DEFAULT_CAMERA_POSITION = (10.0, 10.0, 10.0)

# Unit box corners (+-1); scaled by half the dimensions
_BOX_CORNERS = np.array([
    (-1, -1, -1),  # 0
    (1, -1, -1),   # 1
    (1, 1, -1),    # 2
    (-1, 1, -1),   # 3
    (-1, -1, 1),   # 4
    (1, -1, 1),    # 5
    (1, 1, 1),     # 6
    (-1, 1, 1),    # 7
], dtype=np.float64)

_BOX_FACES = [
    # Back
    (0, 2, 1), (0, 3, 2),
    # Front
    (4, 5, 6), (4, 6, 7),
    # Bottom
    (0, 1, 5), (0, 5, 4),
    # Top
    (3, 6, 2), (3, 7, 6),
    # Left
    (0, 4, 7), (0, 7, 3),
    # Right
    (1, 2, 6), (1, 6, 5),
]


@dataclass
class MeshData:
    """A single box primitive in world coordinates."""

    vertices: list[tuple[float, float, float]]
    faces: list[tuple[int, int, int]]
    color: str = FALLBACK_COLOR
    roughness: float = 1.0
    metalness: float = 0.0
    name: str = ""
    user_data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_fallback(self) -> bool:
        return bool(self.user_data.get("error"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "vertices": [list(v) for v in self.vertices],
            "faces": [list(f) for f in self.faces],
            "color": self.color,
            "roughness": self.roughness,
            "metalness": self.metalness,
            "userData": self.user_data,
        }


@dataclass
class Camera:
    """Perspective camera, y-up."""

    position: tuple[float, float, float] = DEFAULT_CAMERA_POSITION
    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)
    fov: float = 75.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": list(self.position),
            "target": list(self.target),
            "up": list(self.up),
            "fov": self.fov,
        }


@dataclass
class Scene:
    """3D scene containing meshes and camera configuration."""

    meshes: list[MeshData] = field(default_factory=list)
    camera: Camera = field(default_factory=Camera)
    seed: float | None = None
    composition: str = ""

    @property
    def fallback_count(self) -> int:
        return sum(1 for m in self.meshes if m.is_fallback)

    def to_dict(self) -> dict[str, Any]:
        return {
            "seed": self.seed,
            "composition": self.composition,
            "meshes": [m.to_dict() for m in self.meshes],
            "camera": self.camera.to_dict(),
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_elements(
        cls,
        elements: Iterable[Element],
        *,
        seed: float | None = None,
        composition: str = "",
    ) -> Scene:
        """Build one box mesh per element.

        An element whose mesh cannot be built is replaced by a red unit
        cube tagged ``{error: True, originalElementId}``.  If nothing at all
        is produced the scene holds a single marker cube.
        """
        meshes: list[MeshData] = []
        for element in elements:
            try:
                meshes.append(build_element_mesh(element))
            except (BrutalistError, AttributeError, TypeError, ValueError) as exc:
                element_id = getattr(element, "id", None)
                logger.warning("Mesh for element %s failed: %s; using fallback", element_id, exc)
                meshes.append(fallback_mesh({"error": True, "originalElementId": element_id}))

        if not meshes:
            logger.warning("No meshes created, adding fallback marker")
            meshes.append(fallback_mesh({"error": True, "message": "Failed to create any meshes"}))

        return cls(
            meshes=meshes,
            camera=_frame_camera(meshes),
            seed=seed,
            composition=composition,
        )

    @classmethod
    def from_assembly(cls, assembly: Assembly) -> Scene:
        return cls.from_elements(
            assembly.elements,
            seed=assembly.seed,
            composition=assembly.composition,
        )


def rotation_matrix(x: float, y: float, z: float) -> np.ndarray:
    """Rotation for Euler angles applied in XYZ order (``Rx @ Ry @ Rz``)."""
    cx, sx = math.cos(x), math.sin(x)
    cy, sy = math.cos(y), math.sin(y)
    cz, sz = math.cos(z), math.sin(z)
    rx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    ry = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    rz = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])
    return rx @ ry @ rz


def build_element_mesh(element: Element) -> MeshData:
    """Box sized by ``dimensions``, transformed scale -> rotation -> position.

    Raises
    ------
    InstantiationError
        If any transform component is non-finite or a dimension is not
        positive.
    """
    geometry = element.geometry
    dims = np.array(geometry.dimensions.as_tuple(), dtype=np.float64)
    scale = np.array(geometry.scale.as_tuple(), dtype=np.float64)
    rotation = np.array(geometry.rotation.as_tuple(), dtype=np.float64)
    position = np.array(geometry.position.as_tuple(), dtype=np.float64)

    if not all(np.isfinite(v).all() for v in (dims, scale, rotation, position)):
        raise InstantiationError(element.id, "non-finite geometry")
    if (dims <= 0).any():
        raise InstantiationError(element.id, f"non-positive dimensions {dims.tolist()}")

    local = _BOX_CORNERS * (dims / 2) * scale
    world = local @ rotation_matrix(*rotation).T + position

    allowed = element.allowed_connections
    return MeshData(
        vertices=[tuple(float(c) for c in row) for row in world],
        faces=list(_BOX_FACES),
        color=element.material.color,
        roughness=element.material.roughness,
        metalness=element.material.metalness,
        name=element.id,
        user_data={
            "elementId": element.id,
            "elementType": element.kind.value,
            "allowedConnections": list(allowed) if allowed is not None else None,
        },
    )


def fallback_mesh(user_data: dict[str, Any]) -> MeshData:
    """Red cube of edge ``FALLBACK_SIZE`` at the origin."""
    corners = _BOX_CORNERS * (FALLBACK_SIZE / 2)
    return MeshData(
        vertices=[tuple(float(c) for c in row) for row in corners],
        faces=list(_BOX_FACES),
        color=FALLBACK_COLOR,
        name="fallback",
        user_data=dict(user_data),
    )


def _frame_camera(meshes: list[MeshData]) -> Camera:
    """Isometric camera aimed at the scene centre.

    Never closer than the default (10, 10, 10) offset.
    """
    points = np.array([v for m in meshes for v in m.vertices], dtype=np.float64)
    if points.size == 0:
        return Camera()

    lo, hi = points.min(axis=0), points.max(axis=0)
    center = (lo + hi) / 2
    diagonal = float(np.linalg.norm(hi - lo))
    offset = max(diagonal * 1.5 / math.sqrt(3), DEFAULT_CAMERA_POSITION[0])
    return Camera(
        position=tuple(round(float(c + offset), 4) for c in center),
        target=tuple(round(float(c), 4) for c in center),
    )
