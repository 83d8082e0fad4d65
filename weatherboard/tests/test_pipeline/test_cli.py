"""Tests for CLI commands."""

from pathlib import Path

import httpx
import respx
import yaml

from weatherboard.cli import main
from weatherboard.tests.helpers import load_fixture

BASE = "https://test-weather.example.com"


def _write_config(tmp_path: Path, **api) -> Path:
    path = tmp_path / "board.yaml"
    data = {"api": {"base_url": BASE, "retry_attempts": 0, "retry_delay_ms": 0, **api}}
    path.write_text(yaml.dump(data))
    return path


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        assert main(["--config", str(config_path), "config", "show"]) == 0
        out = capsys.readouterr().out
        assert "zagreb" in out
        assert "retry_attempts" in out

    def test_config_set_persists(self, tmp_path: Path, capsys):
        config_path = _write_config(tmp_path)
        result = main([
            "--config", str(config_path),
            "config", "set", "refresh.data_interval_minutes=30",
        ])
        assert result == 0
        assert "30" in capsys.readouterr().out
        saved = yaml.safe_load(config_path.read_text())
        assert saved["refresh"]["data_interval_minutes"] == 30

    def test_config_set_bad_format(self, tmp_path: Path, capsys):
        config_path = _write_config(tmp_path)
        assert main(["--config", str(config_path), "config", "set", "oops"]) == 1

    def test_config_set_invalid_value(self, tmp_path: Path, capsys):
        config_path = _write_config(tmp_path)
        result = main([
            "--config", str(config_path), "config", "set", "api.retry_attempts=-4",
        ])
        assert result == 1
        assert "Error" in capsys.readouterr().out

    @respx.mock
    def test_weather(self, tmp_path: Path, capsys):
        respx.get(f"{BASE}/api/weather/zagreb").mock(
            return_value=httpx.Response(200, json=load_fixture("weather_zagreb.json"))
        )
        config_path = _write_config(tmp_path)
        assert main(["--config", str(config_path), "weather", "Zagreb"]) == 0
        out = capsys.readouterr().out
        assert "Temperature: 3°C" in out
        assert "Clouds cover the sky!" in out

    @respx.mock
    def test_weather_failure(self, tmp_path: Path, capsys):
        respx.get(f"{BASE}/api/weather/split").mock(return_value=httpx.Response(503))
        config_path = _write_config(tmp_path)
        assert main(["--config", str(config_path), "weather", "split"]) == 1
        assert "try again" in capsys.readouterr().out

    @respx.mock
    def test_forecast(self, tmp_path: Path, capsys):
        respx.get(f"{BASE}/api/forecast/split").mock(
            return_value=httpx.Response(200, json=load_fixture("forecast_split.json"))
        )
        config_path = _write_config(tmp_path)
        assert main(["--config", str(config_path), "forecast", "split"]) == 0
        out = capsys.readouterr().out
        assert "Monday: ☀️ 14°C/6°C - Sunny" in out
        assert "Friday" in out

    @respx.mock
    def test_cards_partial_failure(self, tmp_path: Path, capsys):
        for city in ("zagreb", "split", "rijeka", "zadar"):
            respx.get(f"{BASE}/api/weather/{city}").mock(
                return_value=httpx.Response(200, json=load_fixture("weather_zagreb.json"))
            )
        respx.get(f"{BASE}/api/weather/dubrovnik").mock(return_value=httpx.Response(500))
        config_path = _write_config(tmp_path)

        assert main(["--config", str(config_path), "cards"]) == 1
        out = capsys.readouterr().out
        assert "Last refreshed: just now" in out
        assert out.count("Data unavailable") == 1
