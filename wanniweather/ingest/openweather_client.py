"""OpenWeatherMap API client for current conditions and 5-day forecasts."""

import logging

import httpx

from wanniweather.config.schema import (
    DEFAULT_USER_AGENT,
    OPENWEATHER_BASE_URL,
    ProviderConfig,
)
from wanniweather.errors import MalformedResponseError, ProviderError
from wanniweather.models.common import Unit

logger = logging.getLogger(__name__)

SUCCESS_CODE = "200"
CURRENT_FALLBACK_MESSAGE = "City not found or API error"
FORECAST_FALLBACK_MESSAGE = "Forecast data not available"


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OPENWEATHER_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "OpenWeatherClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout=config.timeout_seconds,
        )

    async def get_current(self, city: str, unit: Unit) -> dict:
        """Fetch current conditions for a city.

        The endpoint reports success as the number 200.
        """
        payload = await self._get("weather", city, unit)
        cod = payload.get("cod")
        if not _is_success(cod):
            message = payload.get("message") or CURRENT_FALLBACK_MESSAGE
            logger.warning(
                "Current weather rejected for %r: cod=%s message=%s",
                city, cod, message,
            )
            raise ProviderError(str(message), code=cod)
        return payload

    async def get_forecast(self, city: str, unit: Unit) -> dict:
        """Fetch the 5-day / 3-hour forecast for a city.

        The endpoint reports success as the string "200".
        """
        payload = await self._get("forecast", city, unit)
        cod = payload.get("cod")
        if not _is_success(cod):
            message = payload.get("message") or FORECAST_FALLBACK_MESSAGE
            logger.warning(
                "Forecast rejected for %r: cod=%s message=%s",
                city, cod, message,
            )
            raise ProviderError(str(message), code=cod)
        return payload

    async def _get(self, endpoint: str, city: str, unit: Unit) -> dict:
        url = f"{self.base_url}/{endpoint}"
        params = {"q": city, "units": unit.value, "appid": self.api_key}
        headers = {"User-Agent": self.user_agent}
        logger.debug("GET %s q=%r units=%s", url, city, unit.value)

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            resp = await client.get(url, params=params, headers=headers)

        # Error bodies carry cod/message, so decode before checking HTTP status.
        try:
            payload = resp.json()
        except ValueError as e:
            _raise_for_status(resp, endpoint)
            raise MalformedResponseError(
                f"{endpoint} response is not valid JSON"
            ) from e
        if not isinstance(payload, dict):
            _raise_for_status(resp, endpoint)
            raise MalformedResponseError(
                f"{endpoint} response is not a JSON object"
            )
        return payload


def _is_success(cod: object) -> bool:
    """Accept the success code as either 200 or "200"."""
    if isinstance(cod, bool) or cod is None:
        return False
    return str(cod).strip() == SUCCESS_CODE


def _raise_for_status(resp: httpx.Response, endpoint: str) -> None:
    """Like ``raise_for_status`` but with the API key stripped from the message."""
    if not resp.is_error:
        return
    safe_url = resp.request.url.copy_remove_param("appid")
    raise httpx.HTTPStatusError(
        f"{endpoint} returned HTTP {resp.status_code} for url '{safe_url}'",
        request=resp.request,
        response=resp,
    )
