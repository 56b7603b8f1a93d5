"""Exporter interface shared by every scene format."""

from __future__ import annotations

import abc
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from brutalist.visualization.scene import Scene

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """What one export wrote, and whether it went to plan."""

    file_path: Path | None
    format: str
    success: bool = True
    message: str = ""
    mesh_count: int = 0
    fallback_count: int = 0
    extra_files: list[Path] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["file_path"] = str(self.file_path) if self.file_path is not None else None
        data["extra_files"] = [str(p) for p in self.extra_files]
        return data


class Exporter(abc.ABC):
    """Writes a :class:`Scene` to one file format.

    Subclasses name the format and the main file, and implement
    :meth:`write`; :meth:`export` creates the directory and fills in the
    result bookkeeping.
    """

    filename: str = ""

    @property
    @abc.abstractmethod
    def format_name(self) -> str:
        """Short format identifier (``json3d``, ``obj``, ``gltf``)."""

    @abc.abstractmethod
    def write(self, scene: Scene, path: Path) -> list[Path]:
        """Write *scene* to *path*; return any companion files written."""

    def export(self, scene: Scene, output_dir: Path) -> ExportResult:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / self.filename
        extra = self.write(scene, path)
        logger.debug("%s: wrote %d meshes to %s", self.format_name, len(scene.meshes), path)
        return ExportResult(
            file_path=path,
            format=self.format_name,
            message=f"{self.format_name} export written to {path.name}",
            mesh_count=len(scene.meshes),
            fallback_count=scene.fallback_count,
            extra_files=extra,
        )


def hex_to_rgb(color: str) -> tuple[float, float, float]:
    """``#rrggbb`` as floats in [0, 1]; anything unparseable is mid grey."""
    try:
        raw = bytes.fromhex(color.removeprefix("#"))
    except ValueError:
        raw = b""
    if len(raw) != 3:
        return (0.8, 0.8, 0.8)
    return tuple(channel / 255.0 for channel in raw)
