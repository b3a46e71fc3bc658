"""CLI entry point for the tenki.jp forecast client."""

import argparse
import logging
import sys
from datetime import timedelta

import yaml
from pydantic import ValidationError

from tenki.config.defaults import resolve_location
from tenki.config.loader import load_config
from tenki.config.schema import TenkiConfig
from tenki.ingest.errors import FetchError
from tenki.ingest.tenki_client import TenkiClient
from tenki.models.common import Granularity
from tenki.pipeline.forecast_pipeline import ForecastPipeline
from tenki.reporting.progress import Spinner
from tenki.reporting.table import format_forecast_table
from tenki.storage.snapshot_cache import SnapshotCache

MIN_DAYS = 1
MAX_DAYS = 3


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tenki",
        description="tenki.jp unofficial CLI client",
    )
    parser.add_argument(
        "days", nargs="?", help=f"Days to show ({MIN_DAYS}-{MAX_DAYS})"
    )
    parser.add_argument(
        "-l", "--location", help="Location name or tenki.jp key, e.g. 3/11/4020/8220"
    )
    parser.add_argument(
        "--hourly", action="store_true", help="Use the 1-hour forecast table"
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--cache", default=None, help="Cache file path")
    parser.add_argument(
        "--no-cache", action="store_true", help="Neither read nor write the cache"
    )
    parser.add_argument(
        "--refresh", action="store_true", help="Ignore a fresh cache and refetch"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, ValidationError, yaml.YAMLError) as e:
        print(f"Error: invalid config {args.config}: {e}", file=sys.stderr)
        return 1

    days = _parse_days(args.days, config.display.days)
    if days is None:
        print(
            f"tenki: 'days' must be an integer between {MIN_DAYS} and {MAX_DAYS}",
            file=sys.stderr,
        )
        parser.print_usage(sys.stderr)
        return 1

    location = resolve_location(args.location or config.display.location)
    granularity = Granularity.EVERY_1H if args.hourly else config.display.granularity
    pipeline = build_pipeline(config, args.cache, use_cache=not args.no_cache)

    try:
        with Spinner():
            forecasts = pipeline.fetch(location, granularity, refresh=args.refresh)
    except FetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    color = config.display.color and not args.no_color and sys.stdout.isatty()
    print(format_forecast_table(forecasts.take(days), color=color))
    return 0


def _parse_days(value: str | None, default: int) -> int | None:
    if value is None:
        return default
    try:
        days = int(value)
    except ValueError:
        return None
    if MIN_DAYS <= days <= MAX_DAYS:
        return days
    return None


def build_pipeline(
    config: TenkiConfig, cache_path: str | None = None, use_cache: bool = True
) -> ForecastPipeline:
    client = TenkiClient(
        base_url=config.source.base_url,
        user_agent=config.source.user_agent,
        timeout=config.source.timeout,
    )
    cache = None
    if use_cache and config.cache.enabled:
        cache = SnapshotCache(cache_path or config.cache.path)
    return ForecastPipeline(
        client,
        cache=cache,
        freshness_window=timedelta(minutes=config.cache.freshness_minutes),
    )
