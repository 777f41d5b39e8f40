"""Query controller: owns input state and orchestrates provider fetches."""

import asyncio
import logging

import httpx

from wanniweather.errors import MalformedResponseError, ProviderError
from wanniweather.ingest.openweather_client import OpenWeatherClient
from wanniweather.ingest.parsing import (
    MAX_FORECAST_DAYS,
    NOON_MARKER,
    parse_current_weather,
    reduce_forecast,
)
from wanniweather.models.common import Unit
from wanniweather.models.query import QueryState, RequestOutcome
from wanniweather.models.weather import CurrentWeather, ForecastEntry

logger = logging.getLogger(__name__)

CANCELLED_MESSAGE = "Request cancelled"


class WeatherQueryController:
    """Holds the query state and drives current + forecast lookups.

    State only changes through ``set_city``, ``query`` and ``toggle_unit``.
    Each query gets a generation number; a response belonging to an older
    generation is dropped when it resolves.
    """

    def __init__(
        self,
        client: OpenWeatherClient,
        unit: Unit = Unit.METRIC,
        forecast_days: int = MAX_FORECAST_DAYS,
        noon_marker: str = NOON_MARKER,
    ):
        self.client = client
        self.forecast_days = forecast_days
        self.noon_marker = noon_marker
        self.state = QueryState(unit=Unit(unit))
        self.outcome = RequestOutcome.idle()
        self.current: CurrentWeather | None = None
        self.forecast: list[ForecastEntry] | None = None
        self._generation = 0
        self._task: asyncio.Task | None = None

    @property
    def generation(self) -> int:
        return self._generation

    def set_city(self, city: str) -> None:
        self.state.city = city

    async def query(self, city: str, unit: Unit | None = None) -> RequestOutcome:
        """Fetch current conditions, then the forecast, for ``city``.

        An empty city is ignored and the existing outcome is returned.
        """
        if not city or not city.strip():
            logger.debug("Ignoring query with empty city")
            return self.outcome

        unit = Unit(unit) if unit is not None else self.state.unit
        self._generation += 1
        token = self._generation

        self.state.city = city
        self.state.unit = unit
        self.current = None
        self.forecast = None
        self.outcome = RequestOutcome.loading()
        logger.info("Query %d: city=%r units=%s", token, city, unit.value)

        try:
            current = parse_current_weather(
                await self.client.get_current(city, unit)
            )
            if token != self._generation:
                return self._discard(token)

            forecast = reduce_forecast(
                await self.client.get_forecast(city, unit),
                max_days=self.forecast_days,
                marker=self.noon_marker,
            )
            if token != self._generation:
                return self._discard(token)

            self.current = current
            self.forecast = forecast
            self.outcome = RequestOutcome.success()
            logger.info(
                "Query %d succeeded: %s, %s with %d forecast days",
                token, current.name, current.country, len(forecast),
            )
        except ProviderError as e:
            self._fail(
                token,
                f"Error: {e.message}. Please check the city name or your API key.",
            )
        except (httpx.HTTPError, MalformedResponseError) as e:
            logger.warning("Query %d transport/parse failure: %s", token, e)
            self._fail(token, f"Unable to fetch weather data: {_describe(e)}")
        except Exception as e:
            logger.exception("Query %d failed unexpectedly", token)
            self._fail(token, f"Unable to fetch weather data: {_describe(e)}")
        finally:
            # Cancellation is the only way to get here still loading.
            if token == self._generation and self.outcome.is_loading:
                self.outcome = RequestOutcome.failed(CANCELLED_MESSAGE)
        return self.outcome

    async def toggle_unit(self) -> Unit:
        """Flip metric/imperial, refreshing a displayed or in-flight result.

        A query still loading was issued in the old unit; it is superseded by
        one in the new unit so results never carry the wrong label.
        """
        new_unit = self.state.unit.toggled()
        self.state.unit = new_unit
        logger.info("Unit toggled to %s", new_unit.value)
        if self.current is not None or self.outcome.is_loading:
            await self.query(self.state.city, new_unit)
        return new_unit

    def submit(self, city: str | None = None) -> asyncio.Task:
        """Schedule a query, cancelling any submission still in flight."""
        target = self.state.city if city is None else city
        if not target.strip():
            # Empty input is a no-op and must not cancel a running query.
            return asyncio.create_task(self.query(target))
        if self._task is not None and not self._task.done():
            logger.debug("Cancelling in-flight query %d", self._generation)
            self._task.cancel()
        self._task = asyncio.create_task(self.query(target))
        return self._task

    def _fail(self, token: int, message: str) -> None:
        if token != self._generation:
            self._discard(token)
            return
        self.current = None
        self.forecast = None
        self.outcome = RequestOutcome.failed(message)

    def _discard(self, token: int) -> RequestOutcome:
        logger.debug(
            "Discarding stale response for query %d (current %d)",
            token, self._generation,
        )
        return self.outcome


def _describe(error: Exception) -> str:
    return str(error) or type(error).__name__
