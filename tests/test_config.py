"""Tests for environment settings."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from brutalist.config import DEFAULT_OUTPUT_DIR, Settings, load_settings


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings({})
        assert settings.env == "development"
        assert settings.log_level == "DEBUG"
        assert settings.output_dir == DEFAULT_OUTPUT_DIR
        assert settings.export_format == "json3d"
        assert settings.seed is None

    def test_production_profile(self):
        settings = load_settings({"BRUTALIST_ENV": "production"})
        assert settings.log_level == "WARNING"

    def test_testing_profile_fixes_seed(self):
        settings = load_settings({"BRUTALIST_ENV": "testing"})
        assert settings.seed == 0.42

    def test_unknown_profile_uses_defaults(self):
        settings = load_settings({"BRUTALIST_ENV": "staging"})
        assert settings.env == "staging"
        assert settings.log_level == "INFO"

    def test_environment_overrides_profile(self):
        settings = load_settings({
            "BRUTALIST_ENV": "production",
            "BRUTALIST_LOG_LEVEL": "error",
            "BRUTALIST_OUTPUT_DIR": "/tmp/scenes",
            "BRUTALIST_EXPORT_FORMAT": "gltf",
            "BRUTALIST_SEED": " 1.5 ",
        })
        assert settings.log_level == "ERROR"
        assert settings.output_dir == Path("/tmp/scenes")
        assert settings.export_format == "gltf"
        assert settings.seed == 1.5

    def test_bad_seed_ignored(self, caplog):
        settings = load_settings({"BRUTALIST_SEED": "forty-two"})
        assert settings.seed is None
        assert "BRUTALIST_SEED" in caplog.text

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("BRUTALIST_EXPORT_FORMAT", "obj")
        assert load_settings().export_format == "obj"

    def test_settings_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Settings().seed = 1.0
