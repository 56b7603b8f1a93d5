"""JSON3D exporter: the scene graph as plain JSON."""

from __future__ import annotations

from pathlib import Path

from brutalist.visualization.exporters.base import Exporter
from brutalist.visualization.scene import Scene


class JSON3DExporter(Exporter):
    """``scene.json``: ``{seed, composition, meshes, camera}``.

    Needs no third-party library, so it is also the fallback for every
    other format.
    """

    filename = "scene.json"

    @property
    def format_name(self) -> str:
        return "json3d"

    def write(self, scene: Scene, path: Path) -> list[Path]:
        path.write_text(scene.to_json(indent=2), encoding="utf-8")
        return []
