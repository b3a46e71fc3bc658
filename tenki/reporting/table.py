"""Box-drawn text table of daily forecasts for terminal output."""

import unicodedata
from collections.abc import Sequence

from tenki.models.forecast import AnnounceStatus, Announcement, DailyForecast, Observation
from tenki.models.weather import OtherWeather, WeatherCondition, WeatherKind

NOT_YET_TEXT = "------"
MIN_CELL_WIDTH = 6

WEEKDAYS = ("月", "火", "水", "木", "金", "土", "日")

ROW_LABELS = (
    ("天気", lambda o: str(o.condition)),
    ("気温(度)", lambda o: format(o.temperature, "g")),
    (
        "降水確率(%)",
        lambda o: NOT_YET_TEXT if o.prob_precip is None else str(o.prob_precip),
    ),
    ("降水量(mm/h)", lambda o: str(o.precipitation)),
    ("湿度(%)", lambda o: str(o.humidity)),
    ("風向", lambda o: str(o.wind_direction)),
    ("風速(m/s)", lambda o: str(o.wind_speed)),
)

CONDITION_RGB: dict[WeatherKind, tuple[int, int, int]] = {
    WeatherKind.SUNNY: (255, 159, 33),
    WeatherKind.CLOUDY: (194, 189, 182),
    WeatherKind.LITTLE_RAIN: (85, 208, 242),
    WeatherKind.WEAK_RAIN: (85, 150, 242),
    WeatherKind.RAIN: (0, 106, 255),
    WeatherKind.HEAVY_RAIN: (143, 74, 255),
    WeatherKind.STORM: (255, 18, 97),
    WeatherKind.DRY_SNOW: (64, 219, 154),
    WeatherKind.WET_SNOW: (108, 224, 211),
    WeatherKind.SLEET: (139, 180, 247),
}
OTHER_RGB = (255, 18, 180)

# (left, fill, after label column, between cells, right)
TOP = ("╔", "═", "╦", "╤", "╗")
DAY_SEPARATOR = ("╠", "═", "╬", "╪", "╣")
HEADER_SEPARATOR = ("╟", "─", "╫", "┼", "╢")
BOTTOM = ("╚", "═", "╩", "╧", "╝")


def display_width(text: str) -> int:
    """Terminal column count; East Asian wide and fullwidth chars take two."""
    w = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        if unicodedata.east_asian_width(ch) in ("W", "F"):
            w += 2
        else:
            w += 1
    return w


def pad(text: str, width: int, align_right: bool = False) -> str:
    fill = " " * max(width - display_width(text), 0)
    return fill + text if align_right else text + fill


def condition_style(condition: WeatherCondition, past: bool) -> str:
    """ANSI SGR prefix for a condition cell: bold, 24-bit colour, dim if past."""
    if isinstance(condition, OtherWeather):
        r, g, b = OTHER_RGB
    else:
        r, g, b = CONDITION_RGB[condition]
    codes = ["1"]
    if past:
        codes.append("2")
    codes.append(f"38;2;{r};{g};{b}")
    return "\x1b[" + ";".join(codes) + "m"


def date_label(daily: DailyForecast) -> str:
    d = daily.date
    return f"{d.month}月{d.day}日({WEEKDAYS[d.weekday()]})"


def _cell(announcement: Announcement, render) -> str:
    if announcement.observation is None:
        return NOT_YET_TEXT
    return render(announcement.observation)


def _border(parts: tuple[str, str, str, str, str], widths: list[int]) -> str:
    left, fill, label_sep, cell_sep, right = parts
    label_width, *cell_widths = widths
    cells = cell_sep.join(fill * (w + 2) for w in cell_widths)
    return f"{left}{fill * (label_width + 2)}{label_sep}{cells}{right}"


def format_forecast_table(forecasts: Sequence[DailyForecast], color: bool = False) -> str:
    """Render daily forecasts as one table, title line first.

    Each day is a block of a date/hour header row followed by the seven
    observation rows. NOT_YET slots and missing probabilities show as
    ``------``.
    """
    if not forecasts:
        return ""

    n_cells = max(len(daily.hours) for daily in forecasts)

    # Each block row: (label, [(text, style)])
    blocks: list[list[tuple[str, list[tuple[str, str]]]]] = []
    for daily in forecasts:
        rows = [(date_label(daily), [(f"{hour:02}", "\x1b[1m") for hour, _ in daily.hours])]
        for label, render in ROW_LABELS:
            cells = []
            for _, announcement in daily.hours:
                style = ""
                obs: Observation | None = announcement.observation
                if label == "天気" and obs is not None:
                    style = condition_style(
                        obs.condition, announcement.status == AnnounceStatus.PAST
                    )
                cells.append((_cell(announcement, render), style))
            rows.append((label, cells))
        blocks.append(rows)

    widths = [max(display_width(label) for rows in blocks for label, _ in rows)]
    for i in range(n_cells):
        column = [
            cells[i][0] for rows in blocks for _, cells in rows if i < len(cells)
        ]
        widths.append(max([MIN_CELL_WIDTH] + [display_width(t) for t in column]))

    lines = [forecasts[0].location]
    for block_index, rows in enumerate(blocks):
        lines.append(_border(TOP if block_index == 0 else DAY_SEPARATOR, widths))
        for row_index, (label, cells) in enumerate(rows):
            if row_index == 1:
                lines.append(_border(HEADER_SEPARATOR, widths))
            rendered = []
            for i in range(n_cells):
                text, style = cells[i] if i < len(cells) else ("", "")
                padded = pad(text, widths[i + 1])
                if color and style:
                    padded = f"{style}{padded}\x1b[0m"
                rendered.append(f" {padded} ")
            lines.append(f"║ {pad(label, widths[0], align_right=True)} ║{'│'.join(rendered)}║")
    lines.append(_border(BOTTOM, widths))
    return "\n".join(lines)
