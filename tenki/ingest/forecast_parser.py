"""Parse a tenki.jp point forecast page into a ForecastSet."""

import logging
from datetime import date

from tenki.ingest.assembler import assemble_daily
from tenki.ingest.date_inference import infer_date
from tenki.ingest.document import (
    SECTION_ORDER,
    ForecastDocument,
    SoupForecastDocument,
    extract_section,
)
from tenki.models.common import Granularity
from tenki.models.forecast import DailyForecast, ForecastSet

logger = logging.getLogger(__name__)


def extract_forecasts(doc: ForecastDocument, today: date) -> ForecastSet:
    """Extract today, tomorrow and the day after tomorrow from a document.

    All three sections must extract cleanly; the first StructuralError
    aborts the whole set.
    """
    location, announced_time = doc.title()
    label = f"{location} ({announced_time})"

    days: list[DailyForecast] = []
    previous: date | None = None
    for section in SECTION_ORDER:
        raw = extract_section(doc, section)
        day = infer_date(raw.date_header, today, previous)
        days.append(assemble_daily(raw, label, day))
        previous = day

    return ForecastSet(days=tuple(days))


def parse_forecast_page(html: str, granularity: Granularity, today: date) -> ForecastSet:
    doc = SoupForecastDocument(html, granularity)
    forecasts = extract_forecasts(doc, today)
    logger.debug(
        "Parsed %s page: %s",
        granularity.value,
        ", ".join(f"{d.date.isoformat()} ({len(d.hours)} slots)" for d in forecasts),
    )
    return forecasts
