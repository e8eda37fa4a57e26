"""Pydantic response schemas for the phrase search API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class Phrase(BaseModel):
    """A phrase hit as returned by /search."""

    id: int
    text: str
    start_time: str
    end_time: str
    clip_filename: str
    clip_duration: float


class PhraseDetail(Phrase):
    """Full phrase record returned by /clip/{id}."""

    text_normalized: str
    created_at: datetime | None = None


class SearchResponse(BaseModel):
    """Response body for /search.

    Either ``count`` and ``query`` are set, or ``message`` explains why the
    query was rejected.
    """

    results: list[Phrase] = []
    count: int | None = None
    query: str | None = None
    message: str | None = None


class StatsResponse(BaseModel):
    total_phrases: int
    total_duration: float


class HealthResponse(BaseModel):
    status: str
    message: str


class ErrorResponse(BaseModel):
    error: str
