"""WanniWeather web widget: FastAPI backend driving the query controller."""

import asyncio
import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from pydantic import BaseModel

from wanniweather.config.loader import load_config
from wanniweather.config.schema import AppConfig
from wanniweather.controller import WeatherQueryController
from wanniweather.ingest.openweather_client import OpenWeatherClient
from wanniweather.reporting.formatters import build_view

logger = logging.getLogger(__name__)

WIDGET_HTML = Path(__file__).parent / "static" / "index.html"


class CityInput(BaseModel):
    city: str


def create_app(
    config: AppConfig | None = None, client: OpenWeatherClient | None = None
) -> FastAPI:
    """Build the app with one controller owning the session's query state."""
    config = config or load_config()
    if client is None:
        if not config.provider.api_key:
            logger.warning("No OpenWeatherMap API key configured")
        client = OpenWeatherClient.from_config(config.provider)

    controller = WeatherQueryController(
        client,
        unit=config.display.default_unit,
        forecast_days=config.display.forecast_days,
        noon_marker=config.display.noon_marker,
    )
    icon_base = config.provider.icon_base_url

    app = FastAPI(title="WanniWeather", version="0.1.0")
    app.state.controller = controller

    @app.get("/api/state")
    def get_state():
        """Current query state, outcome and results."""
        return build_view(controller, icon_base)

    @app.put("/api/city")
    def set_city(body: CityInput):
        controller.set_city(body.city)
        return build_view(controller, icon_base)

    @app.post("/api/query")
    async def run_query(body: CityInput):
        """Submit a city. A failed lookup is reported in the view, not as an HTTP error.

        A newer submission cancels this one; the view then shows the newer query.
        """
        await asyncio.wait({controller.submit(body.city)})
        return build_view(controller, icon_base)

    @app.post("/api/unit/toggle")
    async def toggle_unit():
        await controller.toggle_unit()
        return build_view(controller, icon_base)

    @app.get("/")
    def serve_widget():
        return FileResponse(WIDGET_HTML, media_type="text/html")

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8777)
