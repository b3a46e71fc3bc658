"""Weather condition and wind direction vocabulary used by tenki.jp tables."""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class WeatherKind(StrEnum):
    SUNNY = "晴れ"
    CLOUDY = "曇り"
    LITTLE_RAIN = "小雨"
    WEAK_RAIN = "弱雨"
    RAIN = "雨"
    HEAVY_RAIN = "強雨"
    STORM = "豪雨"
    DRY_SNOW = "乾雪"
    WET_SNOW = "湿雪"
    SLEET = "みぞれ"


@dataclass(frozen=True)
class OtherWeather:
    """A condition label outside the known vocabulary, kept verbatim."""

    label: str

    def __str__(self) -> str:
        return self.label


WeatherCondition: TypeAlias = WeatherKind | OtherWeather


class WindDirection(StrEnum):
    N = "北"
    NNE = "北北東"
    NE = "北東"
    ENE = "東北東"
    E = "東"
    ESE = "東南東"
    SE = "南東"
    SSE = "南南東"
    S = "南"
    SSW = "南南西"
    SW = "南西"
    WSW = "西南西"
    W = "西"
    WNW = "西北西"
    NW = "北西"
    NNW = "北北西"
    CALM = "静穏"


_CONDITIONS = {kind.value: kind for kind in WeatherKind}
_DIRECTIONS = {direction.value: direction for direction in WindDirection}


def decode_condition(label: str) -> WeatherCondition:
    """Map a condition label to a WeatherKind, or OtherWeather if unknown."""
    label = label.strip()
    kind = _CONDITIONS.get(label)
    if kind is None:
        return OtherWeather(label)
    return kind


def encode_condition(condition: WeatherCondition) -> str:
    return str(condition)


def decode_wind_direction(label: str) -> WindDirection:
    """Map a compass label to a WindDirection.

    Raises ValueError for labels outside the 17 known tokens.
    """
    direction = _DIRECTIONS.get(label.strip())
    if direction is None:
        raise ValueError(f"unknown wind direction {label!r}")
    return direction


def encode_wind_direction(direction: WindDirection) -> str:
    return direction.value
