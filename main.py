#!/usr/bin/env python
"""CLI for the Tymout Explore BFF."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import uvicorn
from pydantic import BaseModel, field_validator

from tymout_bff.api import create_app
from tymout_bff.config import BffConfig, create_from_config, resolve_config

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: str
    config: Path | None = None
    host: str | None = None
    port: int | None = None
    query: str | None = None
    city: str | None = None
    tags: list[str] = []
    view: str | None = None
    user_interests: str | None = None
    device_type: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def _setup_logging(config: BffConfig) -> None:
    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def serve(args: CLIArgs, config: BffConfig) -> None:
    """Run the HTTP server."""
    host = args.host or config.server.host
    port = args.port or config.server.port
    logger.info(f"Starting Tymout BFF on {host}:{port}")
    uvicorn.run(create_app(config), host=host, port=port, log_level=config.logging.level.lower())


async def explore(args: CLIArgs, config: BffConfig) -> None:
    """Run a single aggregation and print the response as JSON."""
    raw_query: dict[str, list[str]] = {}
    if args.query:
        raw_query["q"] = [args.query]
    if args.city:
        raw_query["city"] = [args.city]
    if args.tags:
        raw_query["tag"] = args.tags
    if args.view:
        raw_query["view"] = [args.view]
    if args.user_interests:
        raw_query["userInterests"] = [args.user_interests]
    if args.device_type:
        raw_query["deviceType"] = [args.device_type]

    aggregator = create_from_config(config)
    response = await aggregator.handle(raw_query)
    print(json.dumps(response.to_dict(), indent=2))


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Tymout Explore BFF.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: $TYMOUT_BFF_CONFIG or configs/default.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", type=str, default=None)
    serve_parser.add_argument("--port", type=int, default=None)

    explore_parser = subparsers.add_parser("explore", help="Run one Explore aggregation")
    explore_parser.add_argument("query", nargs="?", default=None, help="Free-text search term")
    explore_parser.add_argument("--city", type=str, default=None)
    explore_parser.add_argument("--tag", dest="tags", action="append", default=[])
    explore_parser.add_argument("--view", type=str, default=None)
    explore_parser.add_argument(
        "--user-interests",
        type=str,
        default=None,
        help="Comma-separated interests, used with --view 'Only For You'",
    )
    explore_parser.add_argument("--device-type", choices=["mobile", "desktop"], default=None)

    ns = parser.parse_args()

    try:
        args = CLIArgs(**vars(ns))
        config = resolve_config(args.config)
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    _setup_logging(config)

    try:
        if args.command == "serve":
            serve(args, config)
        else:
            asyncio.run(explore(args, config))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
