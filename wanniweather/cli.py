"""CLI entry point for the WanniWeather widget."""

import argparse
import asyncio
import logging

from wanniweather.config.loader import get_config_value, load_config
from wanniweather.controller import WeatherQueryController
from wanniweather.ingest.openweather_client import OpenWeatherClient
from wanniweather.models.common import Unit
from wanniweather.models.query import OutcomeStatus
from wanniweather.reporting.formatters import (
    build_view,
    format_view_json,
    format_view_text,
)

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wanniweather",
        description="Current conditions and 5-day forecast for a city",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser("weather", help="Look up weather for a city")
    weather_p.add_argument("city", help="City name, e.g. 'Paris' or 'Paris,FR'")
    weather_p.add_argument(
        "--unit", choices=[u.value for u in Unit], default=None,
        help="Overrides display.default_unit",
    )
    weather_p.add_argument(
        "--format", choices=["text", "json"], default="text", dest="fmt"
    )

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. provider.base_url")

    # serve
    serve_p = sub.add_parser("serve", help="Run the web widget")
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8777)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_weather(config, args) -> int:
    if not config.provider.api_key:
        print("Error: no API key configured (set OPENWEATHER_API_KEY)")
        return 1
    unit = Unit(args.unit) if args.unit else config.display.default_unit
    controller = WeatherQueryController(
        OpenWeatherClient.from_config(config.provider),
        unit=unit,
        forecast_days=config.display.forecast_days,
        noon_marker=config.display.noon_marker,
    )
    outcome = asyncio.run(controller.query(args.city, unit))
    view = build_view(controller, config.provider.icon_base_url)
    if args.fmt == "json":
        print(format_view_json(view))
    else:
        print(format_view_text(view))
    return 0 if outcome.status == OutcomeStatus.SUCCESS else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from wanniweather.dashboard import create_app

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0
