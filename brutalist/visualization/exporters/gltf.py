"""Binary glTF 2.0 exporter built on pygltflib."""

from __future__ import annotations

import logging
import struct
from pathlib import Path

import numpy as np
import pygltflib

from brutalist.visualization.exporters.base import ExportResult, Exporter, hex_to_rgb
from brutalist.visualization.exporters.json3d import JSON3DExporter
from brutalist.visualization.scene import MeshData, Scene

logger = logging.getLogger(__name__)


def _align(blob: bytearray) -> None:
    blob.extend(b"\x00" * (-len(blob) % 4))


class _GLBBuilder:
    """Accumulates one shared binary buffer plus the glTF index tables."""

    def __init__(self) -> None:
        self.gltf = pygltflib.GLTF2(scene=0, scenes=[pygltflib.Scene(nodes=[])])
        self.blob = bytearray()

    def _view(self, payload: bytes, target: int) -> int:
        offset = len(self.blob)
        self.blob.extend(payload)
        _align(self.blob)
        self.gltf.bufferViews.append(
            pygltflib.BufferView(buffer=0, byteOffset=offset, byteLength=len(payload), target=target)
        )
        return len(self.gltf.bufferViews) - 1

    def _accessor(self, **kwargs) -> int:
        self.gltf.accessors.append(pygltflib.Accessor(**kwargs))
        return len(self.gltf.accessors) - 1

    def add(self, mesh: MeshData, name: str) -> None:
        positions = np.asarray(mesh.vertices, dtype=np.float32)
        indices = np.asarray(mesh.faces, dtype=np.uint16).ravel()

        position_accessor = self._accessor(
            bufferView=self._view(positions.tobytes(), pygltflib.ARRAY_BUFFER),
            componentType=pygltflib.FLOAT,
            count=len(positions),
            type=pygltflib.VEC3,
            min=positions.min(axis=0).tolist(),
            max=positions.max(axis=0).tolist(),
        )
        index_accessor = self._accessor(
            bufferView=self._view(indices.tobytes(), pygltflib.ELEMENT_ARRAY_BUFFER),
            componentType=pygltflib.UNSIGNED_SHORT,
            count=len(indices),
            type=pygltflib.SCALAR,
            min=[int(indices.min())],
            max=[int(indices.max())],
        )

        self.gltf.materials.append(
            pygltflib.Material(
                name=f"{name}_concrete",
                pbrMetallicRoughness=pygltflib.PbrMetallicRoughness(
                    baseColorFactor=[*hex_to_rgb(mesh.color), 1.0],
                    metallicFactor=mesh.metalness,
                    roughnessFactor=mesh.roughness,
                ),
            )
        )
        self.gltf.meshes.append(
            pygltflib.Mesh(
                name=name,
                primitives=[
                    pygltflib.Primitive(
                        attributes=pygltflib.Attributes(POSITION=position_accessor),
                        indices=index_accessor,
                        material=len(self.gltf.materials) - 1,
                    )
                ],
                extras=dict(mesh.user_data),
            )
        )
        self.gltf.nodes.append(pygltflib.Node(name=name, mesh=len(self.gltf.meshes) - 1))
        self.gltf.scenes[0].nodes.append(len(self.gltf.nodes) - 1)

    def save(self, path: Path) -> None:
        self.gltf.buffers = [pygltflib.Buffer(byteLength=len(self.blob))]
        self.gltf.set_binary_blob(bytes(self.blob))
        self.gltf.save_binary(str(path))


class GLTFExporter(Exporter):
    """``assembly.glb``: one node, mesh and PBR material per scene mesh.

    Element metadata travels in each mesh's ``extras``.  If the GLB cannot
    be written the scene is exported as JSON3D instead and the result says
    so.
    """

    filename = "assembly.glb"

    @property
    def format_name(self) -> str:
        return "gltf"

    def export(self, scene: Scene, output_dir: Path) -> ExportResult:
        try:
            return super().export(scene, output_dir)
        except (OSError, ValueError, struct.error) as exc:
            logger.warning("glTF export failed (%s); writing JSON3D instead", exc)
            result = JSON3DExporter().export(scene, output_dir)
            result.message = f"glTF export failed ({exc}); exported as JSON3D instead."
            return result

    def write(self, scene: Scene, path: Path) -> list[Path]:
        builder = _GLBBuilder()
        for i, mesh in enumerate(scene.meshes):
            builder.add(mesh, mesh.name or f"mesh_{i}")
        builder.save(path)
        return []
