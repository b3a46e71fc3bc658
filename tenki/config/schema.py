"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from tenki.models.common import Granularity


class SourceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://tenki.jp/forecast"
    user_agent: str = "tenki-cli/0.1.0"
    timeout: float = Field(default=10.0, gt=0.0)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = True
    path: str = "tenki.dump"
    freshness_minutes: int = Field(default=60, ge=1)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    days: int = Field(default=2, ge=1, le=3)
    color: bool = True
    location: str = "3/11/4020/8220"  # Tsukuba
    granularity: Granularity = Granularity.EVERY_3H


class TenkiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    source: SourceConfig = SourceConfig()
    cache: CacheConfig = CacheConfig()
    display: DisplayConfig = DisplayConfig()
