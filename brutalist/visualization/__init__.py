"""Mesh emission: scenes, exporters and the HTML viewer."""

from brutalist.visualization.bridge import ExportResult, VisualizationBridge
from brutalist.visualization.scene import Camera, MeshData, Scene, build_element_mesh, fallback_mesh

__all__ = [
    "Camera",
    "ExportResult",
    "MeshData",
    "Scene",
    "VisualizationBridge",
    "build_element_mesh",
    "fallback_mesh",
]
