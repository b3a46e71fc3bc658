"""Cached forecast snapshot model."""

from dataclasses import dataclass
from datetime import datetime

from tenki.models.common import Granularity, LocationKey
from tenki.models.forecast import ForecastSet


@dataclass(frozen=True)
class CachedSnapshot:
    forecasts: ForecastSet
    location_key: LocationKey
    granularity: Granularity
    fetched_at: datetime  # aware, UTC
