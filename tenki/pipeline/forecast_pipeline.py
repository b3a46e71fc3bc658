"""Forecast pipeline: cache gate -> fetch -> extract -> cache write-through."""

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta

from tenki.ingest.forecast_parser import parse_forecast_page
from tenki.ingest.staleness import (
    FRESHNESS_WINDOW,
    CacheState,
    snapshot_age_minutes,
    snapshot_state,
)
from tenki.ingest.tenki_client import TenkiClient
from tenki.models.common import Granularity, utc_now
from tenki.models.forecast import ForecastSet
from tenki.models.snapshot import CachedSnapshot
from tenki.storage.snapshot_cache import SnapshotCache

logger = logging.getLogger(__name__)


class ForecastPipeline:
    """Fetches a location's three-day forecast, serving a fresh cache if any.

    Errors from the client and the parser (all FetchError subclasses)
    propagate unchanged; nothing is cached unless the whole set parsed.
    """

    def __init__(
        self,
        client: TenkiClient,
        cache: SnapshotCache | None = None,
        freshness_window: timedelta = FRESHNESS_WINDOW,
        now: Callable[[], datetime] = utc_now,
        today: Callable[[], date] = date.today,
    ):
        self.client = client
        self.cache = cache
        self.freshness_window = freshness_window
        self._now = now
        self._today = today

    def fetch(
        self,
        location_key: str,
        granularity: Granularity = Granularity.EVERY_3H,
        refresh: bool = False,
    ) -> ForecastSet:
        if self.cache is not None and not refresh:
            cached = self._cached(location_key, granularity)
            if cached is not None:
                return cached

        html = self.client.get_forecast_page(location_key, granularity)
        forecasts = parse_forecast_page(html, granularity, self._today())

        if self.cache is not None:
            self._write_through(
                CachedSnapshot(
                    forecasts=forecasts,
                    location_key=location_key,
                    granularity=granularity,
                    fetched_at=self._now(),
                )
            )
        return forecasts

    def _cached(self, location_key: str, granularity: Granularity) -> ForecastSet | None:
        assert self.cache is not None
        snapshot = self.cache.load()
        now = self._now()
        state = snapshot_state(
            snapshot, location_key, granularity, now=now, window=self.freshness_window
        )
        if state == CacheState.FRESH:
            assert snapshot is not None
            logger.info(
                "Serving cached forecast for %s (%.0f min old)",
                location_key, snapshot_age_minutes(snapshot, now),
            )
            return snapshot.forecasts
        logger.info("Cache stale or missing for %s, fetching", location_key)
        return None

    def _write_through(self, snapshot: CachedSnapshot) -> None:
        assert self.cache is not None
        try:
            self.cache.save(snapshot)
        except OSError as e:
            logger.warning("Failed to write forecast cache %s: %s", self.cache.path, e)
