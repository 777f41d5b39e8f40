"""Normalize OpenWeatherMap payloads into display models."""

import logging

from wanniweather.errors import MalformedResponseError
from wanniweather.models.weather import CurrentWeather, ForecastEntry

logger = logging.getLogger(__name__)

NOON_MARKER = "12:00:00"
MAX_FORECAST_DAYS = 5


def parse_current_weather(payload: dict) -> CurrentWeather:
    """Project a current-conditions response onto CurrentWeather."""
    try:
        condition = payload["weather"][0]
        main = payload["main"]
        return CurrentWeather(
            name=str(payload["name"]),
            country=str(payload.get("sys", {}).get("country", "")),
            description=str(condition["description"]),
            icon=str(condition["icon"]),
            temp=float(main["temp"]),
            feels_like=float(main["feels_like"]),
            humidity=int(main["humidity"]),
            wind_speed=float(payload["wind"]["speed"]),
            pressure=int(main["pressure"]),
        )
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        raise MalformedResponseError(
            f"Current weather response missing field: {e}"
        ) from e


def reduce_forecast(
    payload: dict,
    max_days: int = MAX_FORECAST_DAYS,
    marker: str = NOON_MARKER,
) -> list[ForecastEntry]:
    """Reduce the 3-hour forecast list to one noon sample per day.

    Provider order is kept. Fewer than ``max_days`` matches are returned
    as-is.
    """
    items = payload.get("list")
    if not isinstance(items, list):
        raise MalformedResponseError("Forecast response has no list")

    entries: list[ForecastEntry] = []
    for item in items:
        if len(entries) >= max_days:
            break
        try:
            if marker not in item["dt_txt"]:
                continue
            condition = item["weather"][0]
            entries.append(
                ForecastEntry(
                    dt=int(item["dt"]),
                    dt_txt=item["dt_txt"],
                    description=str(condition["description"]),
                    icon=str(condition["icon"]),
                    temp=float(item["main"]["temp"]),
                )
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise MalformedResponseError(
                f"Forecast entry missing field: {e}"
            ) from e

    if len(entries) < max_days:
        logger.info(
            "Forecast yielded %d noon entries from %d samples",
            len(entries), len(items),
        )
    return entries
