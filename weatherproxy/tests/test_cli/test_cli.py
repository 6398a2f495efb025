"""Tests for CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
import respx

from weatherproxy.cli import main
from weatherproxy.config.defaults import ENV_OVERRIDES

BASE_URL = "https://test-weather.example.com/v4/weather/forecast"


@pytest.fixture
def env_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.env"
    path.write_text(
        f"BASE_URL={BASE_URL}\n"
        "TOMORROW_API_KEY=cli-key\n"
        "WEATHER_URL_TEMPLATE=https://test-city.example.com/weather?q=<CITY>&appid=<APIKEY>\n"
    )
    return path


@pytest.fixture
def cli_args(tmp_path: Path, env_file: Path) -> list[str]:
    return ["--config", str(tmp_path / "none.yaml"), "--env-file", str(env_file)]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_config_show_redacts_key(self, cli_args: list[str], capsys):
        result = main([*cli_args, "config", "show"])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["upstream"]["base_url"] == BASE_URL
        assert data["upstream"]["api_key"] == "***"
        assert data["server"]["port"] == 4000

    def test_config_get(self, cli_args: list[str], capsys):
        result = main([*cli_args, "config", "get", "location.lat"])
        assert result == 0
        assert "21.422510" in capsys.readouterr().out

    def test_config_get_unknown(self, cli_args: list[str], capsys):
        result = main([*cli_args, "config", "get", "nope.key"])
        assert result == 1

    @respx.mock
    def test_current(self, cli_args: list[str], current_payload: dict, capsys):
        respx.get(BASE_URL).mock(return_value=httpx.Response(200, json=current_payload))

        result = main([*cli_args, "current"])
        assert result == 0
        assert json.loads(capsys.readouterr().out)["windSpeed"] == "36.0"

    @respx.mock
    def test_forecast(self, cli_args: list[str], daily_payload: dict, capsys):
        respx.get(BASE_URL).mock(return_value=httpx.Response(200, json=daily_payload))

        result = main([*cli_args, "forecast"])
        assert result == 0
        assert len(json.loads(capsys.readouterr().out)) == 7

    @respx.mock
    def test_city(self, cli_args: list[str], city_payload: dict, capsys):
        respx.get("https://test-city.example.com/weather").mock(
            return_value=httpx.Response(200, json=city_payload)
        )

        result = main([*cli_args, "city", "London", "--unit", "F"])
        assert result == 0
        assert json.loads(capsys.readouterr().out)["temp"] == "212.0"

    @respx.mock
    def test_fetch_error_returns_1(self, cli_args: list[str], capsys):
        respx.get(BASE_URL).mock(return_value=httpx.Response(401, json={"message": "bad key"}))

        result = main([*cli_args, "current"])
        assert result == 1
        assert "bad key" in capsys.readouterr().out

    def test_serve_uses_configured_port(self, cli_args: list[str]):
        with patch("uvicorn.run") as run:
            result = main([*cli_args, "serve", "--port", "4555"])
        assert result == 0
        assert run.call_args.kwargs["port"] == 4555
        assert run.call_args.kwargs["host"] == "0.0.0.0"
