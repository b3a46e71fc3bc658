"""Infer absolute dates from the day labels of tenki.jp tables."""

import re
from datetime import date, timedelta

from tenki.ingest.errors import StructuralError

# "1月5日" or "2025年1月5日", anywhere in the header
_DATE_RE = re.compile(r"(?:(\d+)年)?(\d+)月(\d+)日")


def infer_date(header: str | None, today: date, previous: date | None) -> date:
    """Resolve a table's date label to a calendar date.

    Without an explicit year, January labels seen in December belong to
    next year. A header with no date at all is the day after ``previous``.
    """
    m = _DATE_RE.search(header.replace("&nbsp;", " ")) if header else None
    if m is None:
        if previous is None:
            raise StructuralError(f"no date in header {header!r} and no previous day")
        return previous + timedelta(days=1)

    year_str, month_str, day_str = m.groups()
    try:
        month = int(month_str)
        day = int(day_str)
        if year_str is not None:
            year = int(year_str)
        elif month == 1 and today.month == 12:
            year = today.year + 1
        else:
            year = today.year
        return date(year, month, day)
    except ValueError as e:
        raise StructuralError(f"invalid date in header {header!r}: {e}") from e
