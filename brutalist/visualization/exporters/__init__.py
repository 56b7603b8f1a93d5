"""Scene exporters: multiple format support."""

from brutalist.visualization.exporters.base import ExportResult, Exporter
from brutalist.visualization.exporters.gltf import GLTFExporter
from brutalist.visualization.exporters.json3d import JSON3DExporter
from brutalist.visualization.exporters.obj import OBJExporter

__all__ = [
    "ExportResult",
    "Exporter",
    "GLTFExporter",
    "JSON3DExporter",
    "OBJExporter",
]
