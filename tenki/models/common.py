"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import TypeAlias

LocationKey: TypeAlias = str


class Granularity(StrEnum):
    EVERY_1H = "1hour"
    EVERY_3H = "3hours"

    @property
    def hours(self) -> int:
        return 1 if self is Granularity.EVERY_1H else 3


def utc_now() -> datetime:
    return datetime.now(UTC)
