"""Display formatters for weather results."""

import json
import math
from datetime import UTC, datetime, tzinfo
from typing import Any

from wanniweather.config.schema import OPENWEATHER_ICON_BASE_URL
from wanniweather.controller import WeatherQueryController
from wanniweather.models.common import Unit
from wanniweather.models.weather import CurrentWeather, ForecastEntry


def round_half_up(value: float) -> int:
    """Round halves toward +inf (20.5 -> 21, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def format_temperature(value: float, unit: Unit) -> str:
    return f"{round_half_up(value)}{unit.temp_symbol}"


def format_wind(speed: float, unit: Unit) -> str:
    return f"{speed:g} {unit.speed_label}"


def format_date(timestamp: int, tz: tzinfo = UTC) -> str:
    """Unix timestamp -> 'Mon, Jan 1'."""
    dt = datetime.fromtimestamp(timestamp, tz)
    return f"{dt:%a}, {dt:%b} {dt.day}"


def icon_url(icon_code: str, base_url: str = OPENWEATHER_ICON_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{icon_code}@2x.png"


def current_view(
    c: CurrentWeather, unit: Unit, icon_base: str = OPENWEATHER_ICON_BASE_URL
) -> dict[str, Any]:
    return {
        "location": f"{c.name}, {c.country}" if c.country else c.name,
        "name": c.name,
        "country": c.country,
        "description": c.description,
        "icon": c.icon,
        "icon_url": icon_url(c.icon, icon_base),
        "temp": c.temp,
        "feels_like": c.feels_like,
        "humidity": c.humidity,
        "wind_speed": c.wind_speed,
        "pressure": c.pressure,
        "temp_display": format_temperature(c.temp, unit),
        "feels_like_display": format_temperature(c.feels_like, unit),
        "humidity_display": f"{c.humidity}%",
        "wind_display": format_wind(c.wind_speed, unit),
        "pressure_display": f"{c.pressure} hPa",
    }


def forecast_view(
    entries: list[ForecastEntry],
    unit: Unit,
    icon_base: str = OPENWEATHER_ICON_BASE_URL,
) -> list[dict[str, Any]]:
    return [
        {
            "dt": e.dt,
            "date": format_date(e.dt),
            "description": e.description,
            "icon": e.icon,
            "icon_url": icon_url(e.icon, icon_base),
            "temp": e.temp,
            "temp_display": format_temperature(e.temp, unit),
        }
        for e in entries
    ]


def build_view(
    controller: WeatherQueryController,
    icon_base: str = OPENWEATHER_ICON_BASE_URL,
) -> dict[str, Any]:
    """JSON-ready snapshot of the controller for a presentation layer."""
    unit = controller.state.unit
    outcome = controller.outcome
    return {
        "city": controller.state.city,
        "unit": unit.value,
        "unit_symbol": unit.temp_symbol,
        "status": outcome.status.value,
        "loading": outcome.is_loading,
        "error": outcome.message,
        "current": (
            current_view(controller.current, unit, icon_base)
            if controller.current is not None
            else None
        ),
        "forecast": (
            forecast_view(controller.forecast, unit, icon_base)
            if controller.forecast is not None
            else None
        ),
    }


def format_view_text(view: dict[str, Any]) -> str:
    """Plain text rendering for the terminal."""
    if view["error"]:
        return view["error"]
    current = view["current"]
    if current is None:
        return f"No weather data ({view['status']})"

    lines = [
        f"=== Current Weather in {current['location']} ===",
        f"{current['description'].capitalize()}",
        f"Temperature: {current['temp_display']} "
        f"(feels like {current['feels_like_display']})",
        f"Humidity: {current['humidity_display']} | "
        f"Wind: {current['wind_display']} | "
        f"Pressure: {current['pressure_display']}",
    ]
    forecast = view["forecast"] or []
    if forecast:
        lines.append(f"--- {len(forecast)}-Day Forecast ---")
        for day in forecast:
            lines.append(
                f"{day['date']:<12} {day['temp_display']:>6}  {day['description']}"
            )
    return "\n".join(lines)


def format_view_json(view: dict[str, Any]) -> str:
    return json.dumps(view, indent=2, ensure_ascii=False)
