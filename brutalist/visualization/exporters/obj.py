"""Wavefront OBJ exporter with a companion MTL library."""

from __future__ import annotations

from pathlib import Path

from brutalist.visualization.exporters.base import Exporter, hex_to_rgb
from brutalist.visualization.scene import MeshData, Scene


def _material_block(name: str, mesh: MeshData) -> list[str]:
    r, g, b = hex_to_rgb(mesh.color)
    specular = mesh.metalness
    return [
        f"newmtl {name}",
        f"Kd {r:.4f} {g:.4f} {b:.4f}",
        f"Ks {specular:.4f} {specular:.4f} {specular:.4f}",
        f"Ns {(1.0 - mesh.roughness) * 100.0:.1f}",
        # PBR extension statements
        f"Pr {mesh.roughness:.4f}",
        f"Pm {mesh.metalness:.4f}",
        "d 1.0",
        "",
    ]


class OBJExporter(Exporter):
    """``assembly.obj`` plus ``assembly.mtl``, one object and material per mesh.

    Each object is preceded by a comment carrying the element type, so the
    file stays traceable to the element stream.
    """

    filename = "assembly.obj"

    @property
    def format_name(self) -> str:
        return "obj"

    def write(self, scene: Scene, path: Path) -> list[Path]:
        mtl_path = path.with_suffix(".mtl")
        obj_lines = [f"mtllib {mtl_path.name}"]
        mtl_lines: list[str] = []

        base = 1  # OBJ indices are 1-based and global across objects
        for i, mesh in enumerate(scene.meshes):
            material = f"material_{i}"
            mtl_lines += _material_block(material, mesh)

            element_type = mesh.user_data.get("elementType", "fallback" if mesh.is_fallback else "unknown")
            obj_lines.append(f"# {element_type}")
            obj_lines.append(f"o {mesh.name or f'mesh_{i}'}")
            obj_lines.append(f"usemtl {material}")
            obj_lines += [f"v {x:.6f} {y:.6f} {z:.6f}" for x, y, z in mesh.vertices]
            obj_lines += [f"f {a + base} {b + base} {c + base}" for a, b, c in mesh.faces]
            base += len(mesh.vertices)

        mtl_path.write_text("\n".join(mtl_lines) + "\n", encoding="utf-8")
        path.write_text("\n".join(obj_lines) + "\n", encoding="utf-8")
        return [mtl_path]
