"""Tests for payload normalization and the noon forecast reduction."""

import pytest

from wanniweather.errors import MalformedResponseError
from wanniweather.ingest.parsing import parse_current_weather, reduce_forecast


def _sample(dt: int, dt_txt: str, temp: float = 10.0) -> dict:
    return {
        "dt": dt,
        "dt_txt": dt_txt,
        "main": {"temp": temp},
        "weather": [{"description": "clear sky", "icon": "01d"}],
    }


class TestParseCurrentWeather:
    def test_paris(self, current_payload: dict):
        current = parse_current_weather(current_payload)
        assert current.name == "Paris"
        assert current.country == "FR"
        assert current.description == "clear sky"
        assert current.icon == "01d"
        assert current.temp == 20.4
        assert current.feels_like == 19.8
        assert current.humidity == 55
        assert current.pressure == 1012
        assert current.wind_speed == 3.1

    def test_missing_main(self, current_payload: dict):
        del current_payload["main"]
        with pytest.raises(MalformedResponseError):
            parse_current_weather(current_payload)

    def test_empty_weather_list(self, current_payload: dict):
        current_payload["weather"] = []
        with pytest.raises(MalformedResponseError):
            parse_current_weather(current_payload)

    def test_missing_country_is_blank(self, current_payload: dict):
        del current_payload["sys"]
        assert parse_current_weather(current_payload).country == ""


class TestReduceForecast:
    def test_fixture_yields_five_noon_entries(self, forecast_payload: dict):
        entries = reduce_forecast(forecast_payload)
        assert len(entries) == 5
        assert all(e.dt_txt.endswith("12:00:00") for e in entries)
        assert [e.dt for e in entries] == sorted(e.dt for e in entries)
        assert entries[0].dt_txt == "2024-01-02 12:00:00"
        assert entries[0].description == "scattered clouds"

    def test_only_noon_entries_kept(self):
        payload = {
            "list": [
                _sample(1704110400, "2024-01-01 12:00:00"),
                _sample(1704121200, "2024-01-01 15:00:00"),
                _sample(1704196800, "2024-01-02 12:00:00"),
            ]
        }
        entries = reduce_forecast(payload)
        assert [e.dt_txt for e in entries] == [
            "2024-01-01 12:00:00",
            "2024-01-02 12:00:00",
        ]

    def test_truncated_to_max_days(self):
        day = 86400
        payload = {
            "list": [
                _sample(1704110400 + i * day, f"2024-01-0{i + 1} 12:00:00")
                for i in range(7)
            ]
        }
        assert len(reduce_forecast(payload)) == 5
        assert len(reduce_forecast(payload, max_days=3)) == 3

    def test_fewer_matches_not_padded(self):
        payload = {"list": [_sample(1704121200, "2024-01-01 15:00:00")]}
        assert reduce_forecast(payload) == []

    def test_custom_marker(self):
        payload = {
            "list": [
                _sample(1704110400, "2024-01-01 12:00:00"),
                _sample(1704121200, "2024-01-01 15:00:00"),
            ]
        }
        entries = reduce_forecast(payload, marker="15:00:00")
        assert [e.dt for e in entries] == [1704121200]

    def test_missing_list(self):
        with pytest.raises(MalformedResponseError):
            reduce_forecast({"cod": "200"})

    def test_broken_noon_entry(self):
        payload = {"list": [{"dt": 1, "dt_txt": "2024-01-01 12:00:00"}]}
        with pytest.raises(MalformedResponseError):
            reduce_forecast(payload)

    def test_idempotent(self, forecast_payload: dict):
        assert reduce_forecast(forecast_payload) == reduce_forecast(forecast_payload)
