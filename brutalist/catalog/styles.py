"""Noise-driven style selection among interchangeable prototypes."""

from __future__ import annotations

from brutalist.sampling.noise import Noise3D, get_noise


def select_wall_type(x: float, y: float, z: float, noise: Noise3D | None = None) -> str:
    style = get_noise(x, y, z, 0.2, noise)
    if style < 0.5:
        return "basicWall"
    return "thickWall"


def select_column_type(x: float, y: float, z: float, noise: Noise3D | None = None) -> str:
    style = get_noise(x, y, z, 0.3, noise)
    if style < 0.33:
        return "massiveColumn"
    if style < 0.66:
        return "tColumn"
    return "crossColumn"


def select_roof_type(x: float, y: float, z: float, noise: Noise3D | None = None) -> str:
    style = get_noise(x, y, z, 0.25, noise)
    if style < 0.4:
        return "flatRoof"
    if style < 0.7:
        return "cantileverRoof"
    return "cofferedRoof"
