"""Tests for routelens.config — ScanConfig defaults and copies."""

import dataclasses

import pytest

from routelens.config import DEFAULT_CONFIG, DEFAULT_SKIP_DIRS, ScanConfig


class TestScanConfig:
    def test_defaults(self) -> None:
        config = ScanConfig()
        assert config.app_dir == "app"
        assert config.api_segment == "api"
        assert config.handler_extensions == (".ts", ".tsx", ".js", ".jsx")
        assert config.fallback_extensions == config.view_extensions
        assert config.fallback_kinds == ("loading", "error")
        assert "node_modules" in config.skip_dirs

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.app_dir = "src"  # type: ignore[misc]

    def test_with_skip_dirs_returns_copy(self) -> None:
        extended = DEFAULT_CONFIG.with_skip_dirs("vendor", "tmp")
        assert {"vendor", "tmp"} <= extended.skip_dirs
        assert DEFAULT_CONFIG.skip_dirs == DEFAULT_SKIP_DIRS
