"""Seeded sampling: scalar hash draws, seed streams, and coherent noise."""

from brutalist.sampling.noise import Noise3D, get_noise, noise3d
from brutalist.sampling.seeded import SeedStream, derive_seed, frac, seeded_random, stream_salt

__all__ = [
    "Noise3D",
    "SeedStream",
    "derive_seed",
    "frac",
    "get_noise",
    "noise3d",
    "seeded_random",
    "stream_salt",
]
