"""
Pydantic request/response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RowIn(BaseModel):
    """One transaction row, passed through as-is; fields are free text or numbers."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: Any = None
    service: Any = None
    amount: Any = None
    date_time: Any = Field(None, alias="dateTime")

    def as_row(self) -> dict:
        return {
            "type": self.type,
            "service": self.service,
            "amount": self.amount,
            "dateTime": self.date_time,
        }


class RowsRequest(BaseModel):
    rows: list[RowIn]
    allowlist: Optional[list[str]] = None

    def raw_rows(self) -> list[dict]:
        return [r.as_row() for r in self.rows]


class HealthResponse(BaseModel):
    status: str
    version: str


class TopEntry(BaseModel):
    key: str
    value: Union[int, float]


class HourBucket(BaseModel):
    hour: int
    count: int


class WeekdayBucket(BaseModel):
    day: str
    count: int


class MonthSpend(BaseModel):
    month: str
    spend: float


class StatsMeta(BaseModel):
    total_rows: int
    dining_rows: int
    cat_counts: dict[str, int]


class StatsResponse(BaseModel):
    txns: int
    total_spend: float
    top_spend: list[TopEntry]
    top_visits: list[TopEntry]
    favorite: str
    favorite_count: int
    peak_hour: HourBucket
    peak_weekday: WeekdayBucket
    hours: list[HourBucket]
    weekdays: list[WeekdayBucket]
    months: list[MonthSpend]
    valid_time: int
    meta: StatsMeta


class Personality(BaseModel):
    name: str
    desc: str


class Achievement(BaseModel):
    icon: str
    name: str
    desc: str


class RecapResponse(BaseModel):
    stats: StatsResponse
    personality: Personality
    achievements: list[Achievement]
    comparisons: list[str]
    predictions: list[str]
    quotes: list[str]
    memories: list[str]


class ClassifiedRow(BaseModel):
    category: str
    is_dining: bool
    spend: float


class ClassifyResponse(BaseModel):
    rows: list[ClassifiedRow]
