"""Tests for config loading and dotted-key lookup."""

from pathlib import Path

import pytest
import yaml

from wanniweather.config.loader import get_config_value, load_config
from wanniweather.config.schema import OPENWEATHER_BASE_URL
from wanniweather.models.common import Unit


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.provider.api_key == "yaml-key"
        assert config.provider.base_url == "https://test-owm.example.com/data/2.5"
        assert config.display.default_unit == Unit.IMPERIAL

    def test_none_path_uses_defaults(self):
        config = load_config(None)
        assert config.provider.base_url == OPENWEATHER_BASE_URL
        assert config.provider.api_key == ""
        assert config.display.default_unit == Unit.METRIC

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "nope.yaml")
        assert config.display.forecast_days == 5

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.display.noon_marker == "12:00:00"

    def test_env_overrides_api_key(self, config_yaml_path: Path, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
        config = load_config(config_yaml_path)
        assert config.provider.api_key == "env-key"

    def test_env_key_without_file(self, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
        config = load_config(None)
        assert config.provider.api_key == "env-key"

    def test_invalid_yaml_value_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"display": {"forecast_days": 9}}, f)
        with pytest.raises(ValueError):
            load_config(path)


class TestGetConfigValue:
    def test_nested(self, default_config):
        assert get_config_value(default_config, "provider.api_key") == "test-key"
        assert get_config_value(default_config, "display.forecast_days") == 5

    def test_missing_key(self, default_config):
        with pytest.raises(KeyError):
            get_config_value(default_config, "provider.nonexistent")
