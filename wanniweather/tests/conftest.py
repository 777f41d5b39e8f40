"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from wanniweather.config.schema import AppConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _no_api_key_env(monkeypatch):
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def current_payload() -> dict:
    with open(FIXTURE_DIR / "owm_current_paris.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "owm_forecast_paris.json") as f:
        return json.load(f)


@pytest.fixture
def not_found_payload() -> dict:
    with open(FIXTURE_DIR / "owm_not_found.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig(provider={"api_key": "test-key"})


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {
            "api_key": "yaml-key",
            "base_url": "https://test-owm.example.com/data/2.5",
        },
        "display": {"default_unit": "imperial"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
