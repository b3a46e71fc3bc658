"""Freshness checks for cached forecast snapshots."""

from datetime import datetime, timedelta
from enum import StrEnum

from tenki.models.common import Granularity, utc_now
from tenki.models.snapshot import CachedSnapshot

FRESHNESS_WINDOW = timedelta(hours=1)


class CacheState(StrEnum):
    FRESH = "fresh"
    STALE = "stale"


def cache_state(
    requested_key: str,
    cached_key: str,
    age: timedelta,
    window: timedelta = FRESHNESS_WINDOW,
) -> CacheState:
    """FRESH iff the location keys match exactly and age < window."""
    if requested_key == cached_key and age < window:
        return CacheState.FRESH
    return CacheState.STALE


def snapshot_state(
    snapshot: CachedSnapshot | None,
    requested_key: str,
    granularity: Granularity,
    now: datetime | None = None,
    window: timedelta = FRESHNESS_WINDOW,
) -> CacheState:
    """Decide whether a snapshot can be served for a request."""
    if snapshot is None or snapshot.granularity != granularity:
        return CacheState.STALE
    if now is None:
        now = utc_now()
    return cache_state(requested_key, snapshot.location_key, now - snapshot.fetched_at, window)


def snapshot_age_minutes(snapshot: CachedSnapshot, now: datetime | None = None) -> float:
    """Get the age of a snapshot in minutes."""
    if now is None:
        now = utc_now()
    return (now - snapshot.fetched_at).total_seconds() / 60
