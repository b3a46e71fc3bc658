"""Assemble typed hourly announcements from raw table cells."""

import re
from collections.abc import Callable
from datetime import date
from typing import TypeVar

from tenki.ingest.document import HourCell, RawSection
from tenki.ingest.errors import StructuralError
from tenki.models.forecast import Announcement, DailyForecast, Observation
from tenki.models.weather import decode_condition, decode_wind_direction

# Condition cell text for hour slots the source has not published yet
NOT_YET_SENTINEL = "---"

T = TypeVar("T")

_TEMPERATURE_RE = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")


def _parse(text: str, convert: Callable[[str], T], column: str, raw: RawSection) -> T:
    try:
        return convert(text)
    except ValueError as e:
        raise StructuralError(
            f"section {raw.section.value!r}: failed to parse {text!r} as {column}"
        ) from e


def _parse_count(text: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"not a non-negative integer: {text!r}")
    return int(text)


def _parse_temperature(text: str) -> float:
    if _TEMPERATURE_RE.fullmatch(text) is None:
        raise ValueError(f"not a decimal number: {text!r}")
    return float(text)


def _parse_optional_count(text: str) -> int | None:
    try:
        return _parse_count(text)
    except ValueError:
        return None


def _assemble_row(
    raw: RawSection,
    hour_cell: HourCell,
    condition: str,
    temperature: str,
    prob_precip: str,
    precipitation: str,
    humidity: str,
    wind_direction: str,
    wind_speed: str,
) -> tuple[int, Announcement]:
    # "24" is the last slot of the day; stored as 0 under the same date
    hour = _parse(hour_cell.text, _parse_count, "hour", raw) % 24

    if condition == NOT_YET_SENTINEL:
        return hour, Announcement.not_yet()

    observation = Observation(
        condition=decode_condition(condition),
        temperature=_parse(temperature, _parse_temperature, "temperature", raw),
        prob_precip=_parse_optional_count(prob_precip),
        precipitation=_parse(precipitation, _parse_count, "precipitation", raw),
        humidity=_parse(humidity, _parse_count, "humidity", raw),
        wind_direction=_parse(wind_direction, decode_wind_direction, "wind direction", raw),
        wind_speed=_parse(wind_speed, _parse_count, "wind speed", raw),
    )
    if hour_cell.elapsed:
        return hour, Announcement.past(observation)
    return hour, Announcement.regular(observation)


def assemble_hours(raw: RawSection) -> tuple[tuple[int, Announcement], ...]:
    """Zip the columns of a section into (hour, Announcement) pairs.

    Any unparsable mandatory field raises StructuralError for the whole
    section.
    """
    rows = zip(
        raw.hours,
        raw.conditions,
        raw.temperatures,
        raw.prob_precips,
        raw.precipitations,
        raw.humidities,
        raw.wind_directions,
        raw.wind_speeds,
    )
    return tuple(_assemble_row(raw, *row) for row in rows)


def assemble_daily(raw: RawSection, location: str, day: date) -> DailyForecast:
    return DailyForecast(location=location, date=day, hours=assemble_hours(raw))
