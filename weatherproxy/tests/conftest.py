"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherproxy.config.schema import FormattingConfig, ProxyConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-weather.example.com/v4/weather/forecast"
TEST_CITY_TEMPLATE = "https://test-city.example.com/weather?q=<CITY>&appid=<APIKEY>&units=imperial"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def config() -> ProxyConfig:
    """Config pointing at mocked upstream hosts."""
    return ProxyConfig(
        upstream={
            "base_url": TEST_BASE_URL,
            "api_key": "test-key-123",
            "city_url_template": TEST_CITY_TEMPLATE,
        }
    )


@pytest.fixture
def sun_config(config: ProxyConfig) -> ProxyConfig:
    """Config with sunrise/sunset enabled, rendered in Riyadh local time."""
    return ProxyConfig(
        upstream=config.upstream,
        formatting=FormattingConfig(timezone="Asia/Riyadh", include_sun_times=True),
    )


@pytest.fixture
def current_payload() -> dict:
    return load_fixture("timelines_current.json")


@pytest.fixture
def daily_payload() -> dict:
    return load_fixture("timelines_daily.json")


@pytest.fixture
def city_payload() -> dict:
    return load_fixture("city_weather.json")


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "upstream": {"base_url": "https://yaml.example.com", "api_key": "yaml-key"},
        "server": {"port": 5000},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
