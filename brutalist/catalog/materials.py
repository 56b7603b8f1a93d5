"""Concrete finishes used by the catalog prototypes."""

from __future__ import annotations

from brutalist.models.element import MaterialProperties, TextureType


def _finish(roughness: float, metalness: float, color: str, texture: TextureType) -> MaterialProperties:
    return MaterialProperties(
        roughness=roughness,
        metalness=metalness,
        color=color,
        texture_type=texture,
    )


MATERIALS: dict[str, MaterialProperties] = {
    # Cast-in-place white concrete, lightest to darkest
    "copiedCityWhite": _finish(0.3, 0.1, "#ffffff", TextureType.SMOOTH),
    "copiedCityLight": _finish(0.4, 0.15, "#f5f5f5", TextureType.SMOOTH),
    "copiedCityMedium": _finish(0.5, 0.1, "#f0f0f0", TextureType.SMOOTH),
    "copiedCityDark": _finish(0.6, 0.05, "#e8e8e8", TextureType.SMOOTH),
    "roughConcrete": _finish(0.9, 0.1, "#cccccc", TextureType.ROUGH),
    "smoothConcrete": _finish(0.6, 0.15, "#d6d6d6", TextureType.SMOOTH),
    "weatheredConcrete": _finish(0.85, 0.05, "#b4b4b4", TextureType.WEATHERED),
    "boardformedConcrete": _finish(0.8, 0.1, "#c8c8c8", TextureType.BOARDFORMED),
    "exposedAggregateConcrete": _finish(0.95, 0.05, "#c0c0c0", TextureType.ROUGH),
}

# Reference finish that rough surfaces converge to
PRIMARY_MATERIAL = "copiedCityWhite"
