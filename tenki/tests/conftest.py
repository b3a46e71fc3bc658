"""Shared test fixtures."""

import copy
from collections.abc import Callable
from datetime import UTC, date, datetime
from pathlib import Path

import pytest

from tenki.models.common import Granularity
from tenki.models.forecast import Announcement, DailyForecast, ForecastSet, Observation
from tenki.models.snapshot import CachedSnapshot
from tenki.models.weather import WeatherKind, WindDirection

TSUKUBA = "3/11/4020/8220"

COLUMN_CLASSES = (
    "weather",
    "temperature",
    "prob-precip",
    "precipitation",
    "humidity",
    "wind-direction",
    "wind-speed",
)

_SECTIONS = {
    "today": {
        "header": "今日&nbsp;2026年10月18日(日)",
        "hours": [("03", True), ("06", True), ("09", False), ("12", False)],
        "weather": ["晴れ", "曇り", "雨", "曇り"],
        "temperature": ["12.3", "15.0", "14.0", "-1.5"],
        "prob-precip": ["---", "---", "60", "30"],
        "precipitation": ["0", "0", "2", "0"],
        "humidity": ["82", "70", "92", "88"],
        "wind-direction": ["北", "東", "静穏", "北西"],
        "wind-speed": ["2", "3", "0", "1"],
    },
    "tomorrow": {
        "header": "明日&nbsp;10月19日(月)",
        "hours": [("06", False), ("12", False), ("18", False), ("24", False)],
        "weather": ["曇り", "晴れ", "弱雨", "強雨"],
        "temperature": ["11.5", "19.8", "16.9", "14.8"],
        "prob-precip": ["10", "0", "40", "60"],
        "precipitation": ["0", "0", "1", "5"],
        "humidity": ["82", "55", "85", "95"],
        "wind-direction": ["北東", "南", "西", "西北西"],
        "wind-speed": ["2", "5", "3", "2"],
    },
    "dayaftertomorrow": {
        "header": "明後日",
        "hours": [("06", False), ("12", False), ("18", False), ("24", False)],
        "weather": ["乾雪", "ひょう", "晴れ", "---"],
        "temperature": ["5.0", "4.1", "6.0", "---"],
        "prob-precip": ["60", "40", "30", "---"],
        "precipitation": ["3", "1", "0", "---"],
        "humidity": ["93", "88", "80", "---"],
        "wind-direction": ["北西", "西", "静穏", "---"],
        "wind-speed": ["6", "4", "0", "---"],
    },
}


def _render_section(table_id: str, columns: dict) -> str:
    n = len(columns["hours"])
    rows = []
    if columns.get("header") is not None:
        rows.append(
            f'<tr class="head"><td colspan="{n + 1}"><div class="head-cell">'
            f'<p>{columns["header"]}</p></div></td></tr>'
        )
    hour_cells = "".join(
        f'<td><span class="past">{text}</span></td>' if past else f"<td><span>{text}</span></td>"
        for text, past in columns["hours"]
    )
    rows.append(f'<tr class="hour"><th>時刻</th>{hour_cells}</tr>')
    for cls in COLUMN_CLASSES:
        cells = "".join(f"<td><p>{v}</p></td>" for v in columns[cls])
        rows.append(f'<tr class="{cls}"><th>{cls}</th>{cells}</tr>')
    return f'<table id="{table_id}">{"".join(rows)}</table>'


def build_forecast_page(
    sections: dict[str, dict],
    granularity: Granularity = Granularity.EVERY_3H,
    title: tuple[str, str] | None = ("つくば市の天気", "18日11:00発表"),
) -> str:
    """Render a minimal tenki.jp-shaped page from per-section columns."""
    parts = ["<html><body>"]
    if title is not None:
        parts.append(f'<h2>{title[0]}<time class="date-time">{title[1]}</time></h2>')
    for name, columns in sections.items():
        parts.append(_render_section(f"forecast-point-{granularity.hours}h-{name}", columns))
    parts.append("</body></html>")
    return "\n".join(parts)


@pytest.fixture
def sections() -> dict[str, dict]:
    """Valid columns for the three daily tables; safe to mutate."""
    return copy.deepcopy(_SECTIONS)


@pytest.fixture
def page_builder() -> Callable[..., str]:
    return build_forecast_page


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_html(fixtures_dir: Path) -> str:
    return (fixtures_dir / "tenki_3hours.html").read_text(encoding="utf-8")


def make_observation(**overrides) -> Observation:
    fields = {
        "condition": WeatherKind.SUNNY,
        "temperature": 15.5,
        "prob_precip": 10,
        "precipitation": 0,
        "humidity": 60,
        "wind_direction": WindDirection.N,
        "wind_speed": 3,
    }
    fields.update(overrides)
    return Observation(**fields)


@pytest.fixture
def observation_factory() -> Callable[..., Observation]:
    return make_observation


@pytest.fixture
def forecast_set() -> ForecastSet:
    label = "つくば市の天気 (18日11:00発表)"
    return ForecastSet(
        days=(
            DailyForecast(
                location=label,
                date=date(2026, 10, 18),
                hours=(
                    (9, Announcement.past(make_observation(prob_precip=None))),
                    (12, Announcement.regular(make_observation(temperature=18.6))),
                ),
            ),
            DailyForecast(
                location=label,
                date=date(2026, 10, 19),
                hours=(
                    (9, Announcement.regular(make_observation(condition=WeatherKind.RAIN))),
                    (12, Announcement.regular(make_observation(wind_direction=WindDirection.CALM))),
                ),
            ),
            DailyForecast(
                location=label,
                date=date(2026, 10, 20),
                hours=(
                    (9, Announcement.regular(make_observation())),
                    (0, Announcement.not_yet()),
                ),
            ),
        )
    )


@pytest.fixture
def snapshot(forecast_set: ForecastSet) -> CachedSnapshot:
    return CachedSnapshot(
        forecasts=forecast_set,
        location_key=TSUKUBA,
        granularity=Granularity.EVERY_3H,
        fetched_at=datetime(2026, 10, 18, 3, 0, 0, tzinfo=UTC),
    )
