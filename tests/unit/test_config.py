"""Unit tests for settings."""

import pytest

from kgraph.config import Environment, Settings, get_settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self) -> None:
        config = Settings()
        assert config.max_supported_depth == 10
        assert config.shell_base_radius == 80.0
        assert config.shell_depth_spacing == 120.0

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KGRAPH_MAX_SUPPORTED_DEPTH", "4")
        assert Settings().max_supported_depth == 4

    def test_presets(self, test_settings: Settings) -> None:
        assert test_settings.default_knowledge_map_id == "test-map"
        assert get_settings("dev").log_level == "DEBUG"
        assert get_settings(Environment.PROD).log_level == "INFO"

    def test_unknown_environment(self) -> None:
        with pytest.raises(ValueError):
            get_settings("staging")
