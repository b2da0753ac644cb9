"""CLI entry point for the region weather page."""

import argparse
import logging

from weatherpage.app import build_fetcher, create_app
from weatherpage.config.loader import load_config
from weatherpage.models.common import Region
from weatherpage.models.forecast import WeatherFound
from weatherpage.view.formatters import format_result_json, format_result_text
from weatherpage.view.page import resolve_region

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherpage",
        description="Current weather for Taiwanese counties and cities",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Serve the weather page")
    serve_p.add_argument("--host", help="Bind address (overrides config)")
    serve_p.add_argument("--port", type=int, help="Port (overrides config)")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch one region and print it")
    fetch_p.add_argument("--city", help="Region name (default from config)")
    fetch_p.add_argument(
        "--format", choices=["text", "json"], default="text", dest="fmt"
    )

    # regions
    sub.add_parser("regions", help="List selectable regions")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "regions":
        return _cmd_regions()
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_fetch(config, args) -> int:
    region = resolve_region(args.city, config.display.default_region)
    result = build_fetcher(config).fetch(region)
    if args.fmt == "json":
        print(format_result_json(region, result))
    else:
        print(format_result_text(region, result))
    return 0 if isinstance(result, WeatherFound) else 1


def _cmd_regions() -> int:
    for region in Region:
        print(region.value)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
