"""Brutalist: the single unified entry point.

Usage::

    from brutalist import Brutalist, GenerationControls

    app = Brutalist()
    assembly = app.regenerate(GenerationControls(height=6, cell_size=8))
    app.export(assembly, format="gltf")
    app.export_all(assembly, formats=["json3d", "obj"])
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from brutalist.api.controls import GenerationControls
from brutalist.catalog.registry import Catalog
from brutalist.config import Settings, load_settings
from brutalist.generation.composer import CompositionEngine
from brutalist.generation.params import CompositionParams
from brutalist.models.assembly import Assembly
from brutalist.sampling.seeded import SeedStream
from brutalist.visualization.bridge import ExportResult, VisualizationBridge
from brutalist.visualization.scene import Scene

logger = logging.getLogger(__name__)


class Brutalist:
    """The public interface for composing and exporting assemblies.

    Parameters
    ----------
    settings:
        Resolved settings.  Defaults to :func:`brutalist.config.load_settings`.
    catalog:
        Prototype catalog.  Defaults to the process-wide catalog.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        catalog: Catalog | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        logging.getLogger("brutalist").setLevel(self.settings.log_level)
        self.engine = CompositionEngine(catalog)
        self.bridge = VisualizationBridge(self.settings.output_dir)

    @property
    def output_dir(self) -> Path:
        return self.bridge.output_dir

    # -- generation -------------------------------------------------------------

    def compose(
        self,
        params: CompositionParams | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> Assembly:
        """Compose an assembly.

        A seed fixed in the settings applies when neither *params* nor
        *overrides* carry one.
        """
        if self.settings.seed is not None and "seed" not in overrides:
            has_seed = (
                params.seed is not None
                if isinstance(params, CompositionParams)
                else params is not None and params.get("seed") is not None
            )
            if not has_seed:
                overrides["seed"] = self.settings.seed
        return self.engine.compose(params, **overrides)

    def regenerate(self, controls: GenerationControls | None = None) -> Assembly:
        """Full regeneration from the form controls with a fresh seed."""
        controls = controls or GenerationControls()
        seed = SeedStream.fresh_seed()
        logger.info(
            "Regenerating: height=%s cell_size=%s seed=%r", controls.height, controls.cell_size, seed
        )
        return self.engine.compose(controls.to_params(seed))

    # -- emission ---------------------------------------------------------------

    def scene(self, assembly: Assembly) -> Scene:
        return Scene.from_assembly(assembly)

    def export(self, assembly: Assembly, format: str | None = None) -> ExportResult:
        """Export *assembly* in *format* (default: the configured format)."""
        return self.bridge.export(assembly, format or self.settings.export_format)

    def export_all(self, assembly: Assembly, formats: list[str] | None = None) -> list[ExportResult]:
        return self.bridge.export_all(assembly, formats)

    def generate_viewer(self, assembly: Assembly) -> Path:
        return self.bridge.generate_viewer(assembly)
