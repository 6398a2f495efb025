"""CLI entry point for the weather proxy."""

import argparse
import asyncio
import json
import logging

import httpx

from weatherproxy.config.loader import DEFAULT_ENV_FILE, get_config_value, load_config, redacted
from weatherproxy.config.schema import ProxyConfig
from weatherproxy.ingest.city_client import CityWeatherClient
from weatherproxy.ingest.errors import WeatherClientError
from weatherproxy.ingest.weather_client import WeatherClient

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "config.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherproxy",
        description="Reshaping proxy for a timelines weather API",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--env-file", default=DEFAULT_ENV_FILE, help="dotenv file with overrides"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", help="Override server.host")
    serve_p.add_argument("--port", type=int, help="Override server.port")

    # one-off fetches
    sub.add_parser("current", help="Print current conditions as JSON")
    sub.add_parser("forecast", help="Print the daily forecast as JSON")
    city_p = sub.add_parser("city", help="Print weather for a city as JSON")
    city_p.add_argument("name", help="City name")
    city_p.add_argument("--unit", default="C", help="C, K or F")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. server.port")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config, env_file=args.env_file)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command in ("current", "forecast", "city"):
        return asyncio.run(_cmd_fetch(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config: ProxyConfig, args) -> int:
    import uvicorn

    from weatherproxy.server.app import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    logger.info("Server is listening on port %d", port)
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


async def _cmd_fetch(config: ProxyConfig, args) -> int:
    async with httpx.AsyncClient(timeout=config.upstream.timeout_seconds) as http:
        try:
            if args.command == "current":
                result = (await WeatherClient(config, http).get_current_weather()).to_dict()
            elif args.command == "forecast":
                days = await WeatherClient(config, http).get_weather_forecast()
                result = [d.to_dict() for d in days]
            else:
                city = await CityWeatherClient(config, http).get_city_weather(
                    args.name, args.unit
                )
                result = city.to_dict()
        except WeatherClientError as e:
            print(f"Error: {e}")
            print(json.dumps(e.details, indent=2, default=str))
            return 1
    print(json.dumps(result, indent=2))
    return 0


def _cmd_config(config: ProxyConfig, args) -> int:
    if args.config_command == "show":
        print(json.dumps(redacted(config), indent=2))
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
