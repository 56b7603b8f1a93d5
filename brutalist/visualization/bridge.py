"""VisualizationBridge: turns assemblies into files on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from brutalist.config import DEFAULT_OUTPUT_DIR
from brutalist.models.assembly import Assembly
from brutalist.visualization.exporters.base import ExportResult, Exporter
from brutalist.visualization.exporters.gltf import GLTFExporter
from brutalist.visualization.exporters.json3d import JSON3DExporter
from brutalist.visualization.exporters.obj import OBJExporter
from brutalist.visualization.scene import Scene
from brutalist.visualization.viewer import generate_viewer

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_FORMATS", "ExportResult", "VisualizationBridge"]

# "glb" is accepted as an alias of "gltf"; both write a binary .glb
_EXPORTERS: dict[str, type[Exporter]] = {
    "json3d": JSON3DExporter,
    "obj": OBJExporter,
    "gltf": GLTFExporter,
    "glb": GLTFExporter,
}

DEFAULT_FORMATS = ("json3d", "obj")
VIEWER_FILENAME = "viewer.html"


class VisualizationBridge:
    """Exports to a fixed output directory.

    Every method accepts either an :class:`Assembly` or a :class:`Scene`
    already built from one, so one scene can be shared across formats.
    """

    def __init__(self, output_dir: str | Path = DEFAULT_OUTPUT_DIR) -> None:
        self.output_dir = Path(output_dir)

    @staticmethod
    def to_scene(source: Assembly | Scene) -> Scene:
        return source if isinstance(source, Scene) else Scene.from_assembly(source)

    def export(self, source: Assembly | Scene, format: str = "json3d") -> ExportResult:
        """Write *source* in *format*; unknown formats fall back to json3d."""
        scene = self.to_scene(source)
        result = self._exporter_for(format).export(scene, self.output_dir)
        if result.fallback_count:
            logger.warning("%s export contains %d fallback meshes", result.format, result.fallback_count)
        logger.info("Exported %d meshes as %s to %s", result.mesh_count, result.format, result.file_path)
        return result

    def export_all(
        self,
        source: Assembly | Scene,
        formats: Iterable[str] | None = None,
    ) -> list[ExportResult]:
        """Export to each of *formats* (default json3d and obj), then write the viewer."""
        scene = self.to_scene(source)
        results = [self.export(scene, fmt) for fmt in (formats or DEFAULT_FORMATS)]
        self.generate_viewer(scene)
        return results

    def generate_viewer(self, source: Assembly | Scene) -> Path:
        return generate_viewer(self.to_scene(source), self.output_dir / VIEWER_FILENAME)

    def _exporter_for(self, format: str) -> Exporter:
        try:
            return _EXPORTERS[format.lower()]()
        except KeyError:
            logger.warning("Unknown export format %r, using json3d", format)
            return JSON3DExporter()
