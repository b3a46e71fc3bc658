"""Cell extraction from tenki.jp point forecast pages.

The page carries three daily tables (today, tomorrow, day after tomorrow),
each with one ``tr`` per observed quantity and one ``td`` per hour slot.
``ForecastDocument`` is the view the rest of the pipeline depends on;
``SoupForecastDocument`` implements it for the current markup with
BeautifulSoup CSS selectors.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from bs4 import BeautifulSoup, Tag

from tenki.ingest.errors import StructuralError
from tenki.models.common import Granularity

logger = logging.getLogger(__name__)


class Section(StrEnum):
    TODAY = "today"
    TOMORROW = "tomorrow"
    DAY_AFTER_TOMORROW = "dayaftertomorrow"

    def table_id(self, granularity: Granularity) -> str:
        return f"forecast-point-{granularity.hours}h-{self.value}"


SECTION_ORDER = (Section.TODAY, Section.TOMORROW, Section.DAY_AFTER_TOMORROW)


@dataclass(frozen=True)
class HourCell:
    text: str
    elapsed: bool


@dataclass(frozen=True)
class RawSection:
    section: Section
    date_header: str | None
    hours: list[HourCell]
    conditions: list[str]
    temperatures: list[str]
    prob_precips: list[str]
    precipitations: list[str]
    humidities: list[str]
    wind_directions: list[str]
    wind_speeds: list[str]


class ForecastDocument(Protocol):
    def title(self) -> tuple[str, str]: ...

    def has_section(self, section: Section) -> bool: ...

    def date_header(self, section: Section) -> str | None: ...

    def hour_cells(self, section: Section) -> list[HourCell]: ...

    def condition_cells(self, section: Section) -> list[str]: ...

    def temperature_cells(self, section: Section) -> list[str]: ...

    def prob_precip_cells(self, section: Section) -> list[str]: ...

    def precipitation_cells(self, section: Section) -> list[str]: ...

    def humidity_cells(self, section: Section) -> list[str]: ...

    def wind_direction_cells(self, section: Section) -> list[str]: ...

    def wind_speed_cells(self, section: Section) -> list[str]: ...


# Selectors for the current tenki.jp markup
TITLE_SELECTOR = "h2"
HEAD_SELECTOR = "tr.head > td > div"
HOUR_SELECTOR = "tr.hour > td > span"
CONDITION_SELECTOR = "tr.weather > td"
TEMPERATURE_SELECTOR = "tr.temperature > td"
PROB_PRECIP_SELECTOR = "tr.prob-precip > td"
PRECIPITATION_SELECTOR = "tr.precipitation > td"
HUMIDITY_SELECTOR = "tr.humidity > td"
WIND_DIRECTION_SELECTOR = "tr.wind-direction > td, tr.wind-blow > td"
WIND_SPEED_SELECTOR = "tr.wind-speed > td"

ELAPSED_CLASS = "past"


def _cell_text(elem: Tag) -> str:
    return elem.get_text().strip()


class SoupForecastDocument:
    def __init__(self, html: str, granularity: Granularity):
        self.soup = BeautifulSoup(html, "html.parser")
        self.granularity = granularity

    def _table(self, section: Section) -> Tag | None:
        return self.soup.find(id=section.table_id(self.granularity))

    def _texts(self, section: Section, selector: str) -> list[str]:
        table = self._table(section)
        if table is None:
            return []
        return [_cell_text(td) for td in table.select(selector)]

    def title(self) -> tuple[str, str]:
        heading = self.soup.select_one(TITLE_SELECTOR)
        if heading is None:
            raise StructuralError("location/announced time heading not found")
        texts = list(heading.stripped_strings)
        if len(texts) < 2:
            raise StructuralError(
                f"heading {heading.get_text(strip=True)!r} lacks announced time"
            )
        return texts[0], texts[1]

    def has_section(self, section: Section) -> bool:
        return self._table(section) is not None

    def date_header(self, section: Section) -> str | None:
        table = self._table(section)
        if table is None:
            return None
        head = table.select_one(HEAD_SELECTOR)
        if head is None:
            return None
        return head.get_text()

    def hour_cells(self, section: Section) -> list[HourCell]:
        table = self._table(section)
        if table is None:
            return []
        cells = []
        for span in table.select(HOUR_SELECTOR):
            classes = [c.lower() for c in span.get("class", [])]
            cells.append(HourCell(text=_cell_text(span), elapsed=ELAPSED_CLASS in classes))
        return cells

    def condition_cells(self, section: Section) -> list[str]:
        return self._texts(section, CONDITION_SELECTOR)

    def temperature_cells(self, section: Section) -> list[str]:
        return self._texts(section, TEMPERATURE_SELECTOR)

    def prob_precip_cells(self, section: Section) -> list[str]:
        return self._texts(section, PROB_PRECIP_SELECTOR)

    def precipitation_cells(self, section: Section) -> list[str]:
        return self._texts(section, PRECIPITATION_SELECTOR)

    def humidity_cells(self, section: Section) -> list[str]:
        return self._texts(section, HUMIDITY_SELECTOR)

    def wind_direction_cells(self, section: Section) -> list[str]:
        return self._texts(section, WIND_DIRECTION_SELECTOR)

    def wind_speed_cells(self, section: Section) -> list[str]:
        return self._texts(section, WIND_SPEED_SELECTOR)


def extract_section(doc: ForecastDocument, section: Section) -> RawSection:
    """Pull the raw cell texts of one daily table.

    Raises StructuralError if the table is missing, has no hour slots, or
    any column's cell count differs from the hour row.
    """
    if not doc.has_section(section):
        raise StructuralError(f"section {section.value!r} not found")

    hours = doc.hour_cells(section)
    if not hours:
        raise StructuralError(f"section {section.value!r} has no hour cells")

    raw = RawSection(
        section=section,
        date_header=doc.date_header(section),
        hours=hours,
        conditions=doc.condition_cells(section),
        temperatures=doc.temperature_cells(section),
        prob_precips=doc.prob_precip_cells(section),
        precipitations=doc.precipitation_cells(section),
        humidities=doc.humidity_cells(section),
        wind_directions=doc.wind_direction_cells(section),
        wind_speeds=doc.wind_speed_cells(section),
    )

    columns = {
        "weather": raw.conditions,
        "temperature": raw.temperatures,
        "prob-precip": raw.prob_precips,
        "precipitation": raw.precipitations,
        "humidity": raw.humidities,
        "wind-direction": raw.wind_directions,
        "wind-speed": raw.wind_speeds,
    }
    for name, cells in columns.items():
        if len(cells) != len(hours):
            raise StructuralError(
                f"section {section.value!r}: column {name!r} has {len(cells)} "
                f"cells, expected {len(hours)}"
            )

    logger.debug("Extracted %d hour slots from section %s", len(hours), section.value)
    return raw
