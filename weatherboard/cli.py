"""CLI entry point for the weather card board."""

import argparse
import asyncio
import logging
import signal

from weatherboard.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherboard.config.schema import BoardConfig
from weatherboard.ingest.weather_client import WeatherClient
from weatherboard.pipeline.loaders import load_forecast, load_weather
from weatherboard.render.formatters import format_board_text
from weatherboard.session import BoardSession
from weatherboard.state.app_state import AppState

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherboard",
        description="Weather cards for a fixed set of cities",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # cards
    sub.add_parser("cards", help="Load every city once and print the board")

    # weather / forecast
    weather_p = sub.add_parser("weather", help="Show current weather for a city")
    weather_p.add_argument("city")
    forecast_p = sub.add_parser("forecast", help="Show the 5-day forecast for a city")
    forecast_p.add_argument("city")

    # watch / serve
    sub.add_parser("watch", help="Keep the board refreshed in the terminal")
    sub.add_parser("serve", help="Run the dashboard web UI")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "cards":
        return asyncio.run(_cmd_cards(config))
    elif args.command == "weather":
        return asyncio.run(_cmd_weather(config, args.city.lower()))
    elif args.command == "forecast":
        return asyncio.run(_cmd_forecast(config, args.city.lower()))
    elif args.command == "watch":
        return asyncio.run(_cmd_watch(config))
    elif args.command == "serve":
        return _cmd_serve(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


async def _cmd_cards(config: BoardConfig) -> int:
    async with WeatherClient.from_config(config.api) as client:
        session = BoardSession(config, client)
        summary = await session.initial_load()
        print(format_board_text(session.cards(), session.status_line()))
    return 0 if summary.ok else 1


async def _cmd_weather(config: BoardConfig, city: str) -> int:
    async with WeatherClient.from_config(config.api) as client:
        result = await load_weather(client, AppState(), city)
    print(result.message)
    return 0 if result.ok else 1


async def _cmd_forecast(config: BoardConfig, city: str) -> int:
    async with WeatherClient.from_config(config.api) as client:
        result = await load_forecast(client, AppState(), city)
    print(result.message)
    return 0 if result.ok else 1


async def _cmd_watch(config: BoardConfig) -> int:
    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)

    async with WeatherClient.from_config(config.api) as client:
        session = BoardSession(
            config,
            client,
            on_render=lambda cards: print(
                format_board_text(cards, session.status_line()), flush=True
            ),
        )
        await session.initial_load()
        session.start()
        print(f"Refreshing every {config.refresh.data_interval_minutes:g} min. Ctrl+C to stop.")
        try:
            await stop.wait()
        finally:
            await session.stop()
    print("Stopped")
    return 0


def _cmd_serve(config: BoardConfig) -> int:
    import uvicorn

    from weatherboard.dashboard import create_app

    uvicorn.run(
        create_app(config), host=config.dashboard.host, port=config.dashboard.port
    )
    return 0


def _cmd_config(config: BoardConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except Exception as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"Set {key} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1
