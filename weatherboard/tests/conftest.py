"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from weatherboard.config.defaults import DEFAULT_CITIES
from weatherboard.config.schema import ApiConfig, BoardConfig
from weatherboard.tests.helpers import FIXTURE_DIR, make_snapshot


@pytest.fixture
def default_config() -> BoardConfig:
    """Default BoardConfig with default cities and a test API URL."""
    return BoardConfig(
        api=ApiConfig(base_url="https://test-weather.example.com", retry_delay_ms=0),
        cities=DEFAULT_CITIES,
    )


@pytest.fixture
def five_cities() -> dict:
    """Snapshots for the five enabled default cities."""
    return {
        "zagreb": make_snapshot("Zagreb", 3),
        "split": make_snapshot("Split", 11, condition="Sunny", emoji="☀️"),
        "dubrovnik": make_snapshot("Dubrovnik", 13, condition="Sunny", emoji="☀️"),
        "rijeka": make_snapshot("Rijeka", 5, condition="Rainy", emoji="🌧️"),
        "zadar": make_snapshot("Zadar", 10, condition="Partly cloudy", emoji="⛅"),
    }


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"base_url": "https://test-weather.example.com", "retry_attempts": 2},
        "refresh": {"data_interval_minutes": 5},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR
