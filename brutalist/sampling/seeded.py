"""Seeded scalar sampling.

Two kinds of draw are used during generation:

* :func:`seeded_random`: a pure hash of ``(min, max, seed)``.  Builders key
  every placement draw on ``derive_seed(seed, index, lane, stream)`` so that
  a different lane gives an uncorrelated value for the same element, and a
  different stream (one per builder and sub-assembly, see
  :func:`stream_salt`) never replays another builder's keys.
* :class:`SeedStream`: an explicit numpy ``Generator`` derived from the
  seed, consumed in order for branch and dimension choices.
"""

from __future__ import annotations

import math
import zlib

import numpy as np

# Spacing between lanes of the same index; lanes must stay below 10.
_LANE_STEP = 0.1

# Stream salts fall in [0, _STREAM_SPAN)
_STREAM_SPAN = 1000.0


def frac(value: float) -> float:
    """Fractional part, always in ``[0, 1)``."""
    return value - math.floor(value)


def seeded_random(min_value: float, max_value: float, seed: float) -> float:
    """Deterministic value in ``[min_value, max_value)`` for *seed*."""
    return min_value + (max_value - min_value) * frac(
        math.sin(seed * 12.9898 + 78.233) * 43758.5453123
    )


def derive_seed(seed: float, index: int = 0, lane: int = 0, stream: float = 0.0) -> float:
    """Key for the *lane*-th independent draw of item *index* in *stream*."""
    return seed + stream + index + lane * _LANE_STEP


def stream_salt(label: str) -> float:
    """Offset in ``[0, 1000)`` that separates the draw keys of *label*.

    Depends only on the CRC-32 of *label*, never on ``PYTHONHASHSEED``.
    """
    return zlib.crc32(label.encode("utf-8")) / 2**32 * _STREAM_SPAN


def seed_entropy(seed: float) -> int:
    """Map a float seed onto the integer entropy numpy expects."""
    return int(np.array(float(seed), dtype=np.float64).view(np.uint64))


class SeedStream:
    """Ordered, reproducible source of uniform draws for one composition."""

    def __init__(self, seed: float) -> None:
        self.seed = float(seed)
        self._rng = np.random.default_rng(seed_entropy(self.seed))

    @staticmethod
    def fresh_seed() -> float:
        """Draw a new seed from OS entropy."""
        return float(np.random.default_rng().random())

    @classmethod
    def fresh(cls) -> SeedStream:
        return cls(cls.fresh_seed())

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        return float(self._rng.uniform(low, high))

    def __repr__(self) -> str:
        return f"SeedStream(seed={self.seed!r})"
