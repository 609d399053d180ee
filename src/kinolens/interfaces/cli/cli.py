from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Iterable
from dataclasses import asdict
from pathlib import Path
from typing import Any

import structlog

from kinolens.domain.entities.lookup import LookupResult, LookupStatus
from kinolens.infrastructure.config import AppConfig, load_config
from kinolens.infrastructure.logging.setup import configure_logging
from kinolens.interfaces.composition import lifespan

log = structlog.get_logger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_UNAVAILABLE = 3


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kinolens",
        description="Query the PoiskKino catalog and print the outcome as JSON.",
    )

    # Config wiring flags (no business logic)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="Override the PoiskKino API key.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="Search movies and series by title.")
    search.add_argument("title")
    search.add_argument("--year", type=int, default=None)

    item = commands.add_parser("item", help="Fetch a movie or series by id.")
    item.add_argument("item_id", type=int)

    season = commands.add_parser("season", help="Fetch one season of a series.")
    season.add_argument("parent_id", type=int)
    season.add_argument("season_number", type=int)

    return parser.parse_args(argv)


def _render(result: LookupResult[Any]) -> str:
    body: dict[str, Any] = {
        "status": result.status.value,
        "cached": result.cached,
        "status_code": result.status_code,
        "message": result.message,
        "payload": asdict(result.payload) if result.payload is not None else None,
    }
    return json.dumps(body, ensure_ascii=False, indent=2)


def _exit_code(result: LookupResult[Any]) -> int:
    if result.status is LookupStatus.FOUND:
        return EXIT_FOUND
    if result.status is LookupStatus.NOT_FOUND:
        return EXIT_NOT_FOUND
    return EXIT_UNAVAILABLE


async def _run(config: AppConfig, args: argparse.Namespace) -> LookupResult[Any]:
    api_key = config.poiskkino.api_key
    async with lifespan(config) as state:
        if args.command == "search":
            return await state.catalog.search(args.title, args.year, api_key)
        if args.command == "item":
            return await state.catalog.get_by_id(args.item_id, api_key)
        return await state.catalog.get_season(
            args.parent_id, args.season_number, api_key
        )


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint.

    Loads config exactly once, configures logging, runs one lookup and
    prints it to stdout. Logs go to stderr.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    config_path = Path(args.config) if args.config else None
    dotenv_path = Path(args.dotenv) if args.dotenv else None

    cli_overrides: dict[str, Any] = {}
    if args.api_key is not None:
        cli_overrides["api_key"] = args.api_key
    if args.log_level:
        cli_overrides["log_level"] = args.log_level
    if args.log_format:
        cli_overrides["log_format"] = args.log_format

    config = load_config(
        config_path=config_path,
        dotenv_path=dotenv_path,
        cli_overrides=cli_overrides,
    )

    configure_logging(config)

    result = asyncio.run(_run(config, args))
    print(_render(result))
    return _exit_code(result)


if __name__ == "__main__":
    raise SystemExit(start())
