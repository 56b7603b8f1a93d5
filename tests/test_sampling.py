"""Tests for seeded draws, seed streams and the noise field."""

from __future__ import annotations

import math

import numpy as np
import pytest

from brutalist.sampling import (
    Noise3D,
    SeedStream,
    derive_seed,
    frac,
    get_noise,
    noise3d,
    seeded_random,
    stream_salt,
)


# ---------------------------------------------------------------------------
# Scalar draws
# ---------------------------------------------------------------------------


class TestSeededRandom:
    def test_pure_function_of_arguments(self):
        assert seeded_random(0, 1, 0.42) == seeded_random(0, 1, 0.42)

    def test_within_range(self):
        for seed in np.linspace(-50, 50, 101):
            value = seeded_random(2.0, 5.0, float(seed))
            assert 2.0 <= value < 5.0

    def test_matches_hash_formula(self):
        seed = 0.42
        raw = math.sin(seed * 12.9898 + 78.233) * 43758.5453123
        expected = 10 + 10 * (raw - math.floor(raw))
        assert seeded_random(10, 20, seed) == pytest.approx(expected)

    def test_degenerate_range(self):
        assert seeded_random(3.0, 3.0, 1.7) == 3.0

    def test_frac_of_negative_is_positive(self):
        assert frac(-0.25) == 0.75
        assert frac(2.5) == 0.5

    def test_derive_seed(self):
        assert derive_seed(1.0) == 1.0
        assert derive_seed(1.0, 2) == 3.0
        assert derive_seed(1.0, 2, 3) == pytest.approx(3.3)
        assert derive_seed(1.0, 2, 3, stream=10.0) == pytest.approx(13.3)

    def test_lanes_give_different_draws(self):
        draws = {seeded_random(0, 1, derive_seed(0.42, 0, lane)) for lane in range(8)}
        assert len(draws) == 8

    def test_stream_salt_is_stable_and_bounded(self):
        assert stream_salt("wide_0/living_space") == stream_salt("wide_0/living_space")
        for label in ("wide_0/living_space", "wide_0/wide", "tall_1/tall", ""):
            assert 0.0 <= stream_salt(label) < 1000.0

    def test_streams_do_not_share_keys(self):
        labels = ["wide_0/living_space", "wide_0/wide", "wide_0/floating", "wide_0/principles"]
        keys = {derive_seed(0.42, 0, 0, stream_salt(label)) for label in labels}
        assert len(keys) == len(labels)


class TestSeedStream:
    def test_reproducible(self):
        first = SeedStream(0.42)
        second = SeedStream(0.42)
        assert [first.uniform() for _ in range(5)] == [second.uniform() for _ in range(5)]

    def test_different_seeds_differ(self):
        assert SeedStream(0.42).uniform() != SeedStream(0.43).uniform()

    def test_uniform_bounds(self):
        stream = SeedStream(7.0)
        for _ in range(50):
            assert 2.0 <= stream.uniform(2.0, 3.0) < 3.0

    def test_fresh_seed_in_unit_interval(self):
        for _ in range(10):
            assert 0.0 <= SeedStream.fresh_seed() < 1.0

    def test_fresh_stream(self):
        stream = SeedStream.fresh()
        assert 0.0 <= stream.seed < 1.0
        assert "SeedStream" in repr(stream)


# ---------------------------------------------------------------------------
# Noise
# ---------------------------------------------------------------------------


class TestNoise:
    POINTS = [(0.5, 0.5, 0.5), (1.25, -3.7, 2.2), (10.1, 4.4, -8.8), (-0.3, 0.9, 7.5)]

    def test_zero_on_lattice(self):
        assert noise3d(0, 0, 0) == 0.0
        assert noise3d(3, -2, 5) == 0.0

    def test_raw_range(self):
        for point in self.POINTS:
            assert -1.0 <= noise3d(*point) <= 1.0

    def test_normalized_range(self):
        field = Noise3D(0.42)
        for point in self.POINTS:
            assert 0.0 <= get_noise(*point) <= 1.0
            assert 0.0 <= get_noise(*point, scale=2.0, noise=field) <= 1.0

    def test_same_seed_same_field(self):
        for point in self.POINTS:
            assert Noise3D(0.42)(*point) == Noise3D(0.42)(*point)

    def test_seed_changes_field(self):
        values_a = [Noise3D(1.0)(*p) for p in self.POINTS]
        values_b = [Noise3D(2.0)(*p) for p in self.POINTS]
        assert values_a != values_b

    def test_vectorised_sample_matches_scalar(self):
        field = Noise3D(5.0)
        xs, ys, zs = zip(*self.POINTS)
        sampled = field.sample(xs, ys, zs)
        assert sampled.shape == (len(self.POINTS),)
        for value, point in zip(sampled, self.POINTS):
            assert float(value) == pytest.approx(field(*point))

    def test_continuity(self):
        field = Noise3D(0.42)
        assert abs(field(1.5, 1.5, 1.5) - field(1.5001, 1.5, 1.5)) < 1e-2
