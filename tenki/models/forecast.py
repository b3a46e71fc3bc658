"""Hourly observation and daily forecast models."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from tenki.models.weather import WeatherCondition, WindDirection

DAYS_PER_SET = 3


@dataclass(frozen=True)
class Observation:
    condition: WeatherCondition
    temperature: float  # deg C
    prob_precip: int | None  # %, None when not reported
    precipitation: int  # mm/h
    humidity: int  # %
    wind_direction: WindDirection
    wind_speed: int  # m/s


class AnnounceStatus(StrEnum):
    PAST = "past"
    REGULAR = "regular"
    NOT_YET = "not_yet"


@dataclass(frozen=True)
class Announcement:
    status: AnnounceStatus
    observation: Observation | None = None

    def __post_init__(self) -> None:
        if (self.status == AnnounceStatus.NOT_YET) != (self.observation is None):
            raise ValueError(
                f"{self.status} announcement with observation={self.observation!r}"
            )

    @classmethod
    def past(cls, observation: Observation) -> "Announcement":
        return cls(AnnounceStatus.PAST, observation)

    @classmethod
    def regular(cls, observation: Observation) -> "Announcement":
        return cls(AnnounceStatus.REGULAR, observation)

    @classmethod
    def not_yet(cls) -> "Announcement":
        return cls(AnnounceStatus.NOT_YET)


@dataclass(frozen=True)
class DailyForecast:
    location: str  # location and announcement time label
    date: date
    hours: tuple[tuple[int, Announcement], ...]


@dataclass(frozen=True)
class ForecastSet:
    """Today, tomorrow and the day after tomorrow, in that order."""

    days: tuple[DailyForecast, ...]

    def __post_init__(self) -> None:
        if len(self.days) != DAYS_PER_SET:
            raise ValueError(
                f"ForecastSet needs exactly {DAYS_PER_SET} days, got {len(self.days)}"
            )

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[DailyForecast]:
        return iter(self.days)

    def __getitem__(self, index: int) -> DailyForecast:
        return self.days[index]

    def take(self, n: int) -> tuple[DailyForecast, ...]:
        return self.days[:n]
