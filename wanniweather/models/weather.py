"""Normalized weather data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentWeather:
    name: str
    country: str
    description: str
    icon: str
    temp: float
    feels_like: float
    humidity: int
    wind_speed: float
    pressure: int  # hPa


@dataclass(frozen=True)
class ForecastEntry:
    dt: int  # Unix timestamp
    dt_txt: str
    description: str
    icon: str
    temp: float
