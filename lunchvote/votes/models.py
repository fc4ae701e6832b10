from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field


class VoteRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    venue_key: str
    date: datetime.date
    voter: str


class TallyRow(BaseModel):
    venue_key: str
    name: str
    count: int = Field(..., ge=0)


class VenueOut(BaseModel):
    key: str
    name: str


class VenuesResponse(BaseModel):
    venues: list[VenueOut]


class ResultsResponse(BaseModel):
    date: datetime.date
    rows: list[TallyRow]
    total_votes: int


class RawResultsResponse(BaseModel):
    frequency: dict[str, int]
    votes: list[VoteRecord]


class ErrorResponse(BaseModel):
    error: str
    detail: str
