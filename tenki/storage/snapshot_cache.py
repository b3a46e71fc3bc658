"""Single-snapshot forecast cache persisted as a JSON file."""

import json
import logging
import os
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

from tenki.models.common import Granularity
from tenki.models.forecast import (
    AnnounceStatus,
    Announcement,
    DailyForecast,
    ForecastSet,
    Observation,
)
from tenki.models.snapshot import CachedSnapshot
from tenki.models.weather import (
    decode_condition,
    decode_wind_direction,
    encode_condition,
    encode_wind_direction,
)

logger = logging.getLogger(__name__)

CACHE_FORMAT_VERSION = 1
DEFAULT_CACHE_PATH = "tenki.dump"


class SnapshotCache:
    def __init__(self, path: str | Path = DEFAULT_CACHE_PATH):
        self.path = Path(path)

    def load(self) -> CachedSnapshot | None:
        """Read the cached snapshot. Returns None if absent or unreadable."""
        if not self.path.exists():
            logger.debug("No cache file at %s", self.path)
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            return snapshot_from_dict(data)
        except (OSError, ValueError, KeyError, TypeError, AttributeError, RecursionError) as e:
            logger.warning("Ignoring unreadable cache file %s: %s", self.path, e)
            return None

    def save(self, snapshot: CachedSnapshot) -> None:
        """Overwrite the cache file with a snapshot. Raises OSError on failure."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(snapshot_to_dict(snapshot), f, ensure_ascii=False)
        os.replace(tmp_path, self.path)
        logger.debug("Wrote cache file %s", self.path)


def _observation_to_dict(obs: Observation) -> dict[str, Any]:
    return {
        "condition": encode_condition(obs.condition),
        "temperature": obs.temperature,
        "prob_precip": obs.prob_precip,
        "precipitation": obs.precipitation,
        "humidity": obs.humidity,
        "wind_direction": encode_wind_direction(obs.wind_direction),
        "wind_speed": obs.wind_speed,
    }


def _observation_from_dict(data: dict[str, Any]) -> Observation:
    prob_precip = data["prob_precip"]
    return Observation(
        condition=decode_condition(data["condition"]),
        temperature=float(data["temperature"]),
        prob_precip=None if prob_precip is None else int(prob_precip),
        precipitation=int(data["precipitation"]),
        humidity=int(data["humidity"]),
        wind_direction=decode_wind_direction(data["wind_direction"]),
        wind_speed=int(data["wind_speed"]),
    )


def _daily_to_dict(daily: DailyForecast) -> dict[str, Any]:
    return {
        "location": daily.location,
        "date": daily.date.isoformat(),
        "hours": [
            {
                "hour": hour,
                "status": announcement.status.value,
                "observation": (
                    None
                    if announcement.observation is None
                    else _observation_to_dict(announcement.observation)
                ),
            }
            for hour, announcement in daily.hours
        ],
    }


def _daily_from_dict(data: dict[str, Any]) -> DailyForecast:
    hours = []
    for entry in data["hours"]:
        obs = entry["observation"]
        announcement = Announcement(
            status=AnnounceStatus(entry["status"]),
            observation=None if obs is None else _observation_from_dict(obs),
        )
        hours.append((int(entry["hour"]), announcement))
    return DailyForecast(
        location=data["location"],
        date=date.fromisoformat(data["date"]),
        hours=tuple(hours),
    )


def snapshot_to_dict(snapshot: CachedSnapshot) -> dict[str, Any]:
    return {
        "version": CACHE_FORMAT_VERSION,
        "location_key": snapshot.location_key,
        "granularity": snapshot.granularity.value,
        "fetched_at": snapshot.fetched_at.isoformat(),
        "forecasts": [_daily_to_dict(d) for d in snapshot.forecasts],
    }


def snapshot_from_dict(data: dict[str, Any]) -> CachedSnapshot:
    """Rebuild a snapshot. Raises ValueError/KeyError/TypeError on bad input."""
    if data.get("version") != CACHE_FORMAT_VERSION:
        raise ValueError(f"unsupported cache format version {data.get('version')!r}")
    fetched_at = datetime.fromisoformat(data["fetched_at"])
    if fetched_at.tzinfo is None:
        fetched_at = fetched_at.replace(tzinfo=UTC)
    return CachedSnapshot(
        forecasts=ForecastSet(days=tuple(_daily_from_dict(d) for d in data["forecasts"])),
        location_key=data["location_key"],
        granularity=Granularity(data["granularity"]),
        fetched_at=fetched_at,
    )
