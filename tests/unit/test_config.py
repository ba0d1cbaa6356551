"""Tests for the pydantic-settings configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from docassembly.core.config import AppSettings, ObservabilityConfig, OutputConfig


class TestDefaults:
    def test_observability(self) -> None:
        config = ObservabilityConfig()
        assert config.log_level == "INFO"
        assert config.json_logs is None

    def test_output(self) -> None:
        config = OutputConfig()
        assert config.json_indent == 2
        assert config.slug_max_length == 80
        assert config.output_dir == Path("./documents")

    def test_app_settings_nests_sub_configs(self) -> None:
        settings = AppSettings()
        assert isinstance(settings.observability, ObservabilityConfig)
        assert isinstance(settings.output, OutputConfig)


class TestEnvOverrides:
    def test_observability_env(self, monkeypatch) -> None:
        monkeypatch.setenv("DOCASSEMBLY_OBSERVABILITY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DOCASSEMBLY_OBSERVABILITY_JSON_LOGS", "true")
        settings = AppSettings()
        assert settings.observability.log_level == "DEBUG"
        assert settings.observability.json_logs is True

    def test_output_env(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("DOCASSEMBLY_OUTPUT_JSON_INDENT", "0")
        monkeypatch.setenv("DOCASSEMBLY_OUTPUT_SLUG_MAX_LENGTH", "40")
        monkeypatch.setenv("DOCASSEMBLY_OUTPUT_OUTPUT_DIR", str(tmp_path))
        config = OutputConfig()
        assert config.json_indent == 0
        assert config.slug_max_length == 40
        assert config.output_dir == tmp_path

    def test_out_of_range_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("DOCASSEMBLY_OUTPUT_SLUG_MAX_LENGTH", "2")
        with pytest.raises(ValidationError):
            OutputConfig()
