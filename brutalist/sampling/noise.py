"""Coherent 3D gradient noise.

Improved-Perlin noise over a seeded 256-entry permutation table.  Output is
clipped to ``[-1, 1]``; :func:`get_noise` remaps it to ``[0, 1]``.
"""

from __future__ import annotations

import numpy as np

from brutalist.sampling.seeded import seed_entropy


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


def _grad(h: np.ndarray, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
    # One of the 12 cube-edge gradients, picked by the low 4 bits of the hash
    h = h & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    return np.where((h & 1) == 0, u, -u) + np.where((h & 2) == 0, v, -v)


class Noise3D:
    """Seeded 3D noise field."""

    def __init__(self, seed: float = 0.0) -> None:
        self.seed = float(seed)
        perm = np.random.default_rng(seed_entropy(self.seed)).permutation(256)
        self._perm = np.concatenate([perm, perm]).astype(np.int64)

    def sample(self, x, y, z) -> np.ndarray:
        """Vectorised noise at arrays of coordinates."""
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        z = np.asarray(z, dtype=np.float64)

        fx, fy, fz = np.floor(x), np.floor(y), np.floor(z)
        xi = fx.astype(np.int64) & 255
        yi = fy.astype(np.int64) & 255
        zi = fz.astype(np.int64) & 255
        x, y, z = x - fx, y - fy, z - fz
        u, v, w = _fade(x), _fade(y), _fade(z)

        p = self._perm
        a = p[xi] + yi
        aa = p[a] + zi
        ab = p[a + 1] + zi
        b = p[xi + 1] + yi
        ba = p[b] + zi
        bb = p[b + 1] + zi

        result = _lerp(
            w,
            _lerp(
                v,
                _lerp(u, _grad(p[aa], x, y, z), _grad(p[ba], x - 1, y, z)),
                _lerp(u, _grad(p[ab], x, y - 1, z), _grad(p[bb], x - 1, y - 1, z)),
            ),
            _lerp(
                v,
                _lerp(u, _grad(p[aa + 1], x, y, z - 1), _grad(p[ba + 1], x - 1, y, z - 1)),
                _lerp(u, _grad(p[ab + 1], x, y - 1, z - 1), _grad(p[bb + 1], x - 1, y - 1, z - 1)),
            ),
        )
        return np.clip(result, -1.0, 1.0)

    def __call__(self, x: float, y: float, z: float) -> float:
        return float(self.sample(x, y, z))

    def normalized(self, x: float, y: float, z: float, scale: float = 1.0) -> float:
        """Noise at ``(x, y, z) * scale`` remapped to ``[0, 1]``."""
        return (self(x * scale, y * scale, z * scale) + 1.0) / 2.0


_DEFAULT_NOISE = Noise3D()


def noise3d(x: float, y: float, z: float) -> float:
    """Noise in ``[-1, 1]`` from the default (seed 0) field."""
    return _DEFAULT_NOISE(x, y, z)


def get_noise(
    x: float,
    y: float,
    z: float,
    scale: float = 1.0,
    noise: Noise3D | None = None,
) -> float:
    """Noise remapped to ``[0, 1]``; uses the default field unless *noise* is given."""
    return (noise or _DEFAULT_NOISE).normalized(x, y, z, scale)
