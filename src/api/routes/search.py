"""Search endpoints: phrase lookup, single clip detail and corpus stats."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.api.dependencies import get_phrase_index
from src.api.models import ErrorResponse, Phrase, PhraseDetail, SearchResponse, StatsResponse
from src.search.index import PhraseIndex

router = APIRouter()

IndexDep = Annotated[PhraseIndex, Depends(get_phrase_index)]


@router.get("/search", response_model=SearchResponse, response_model_exclude_none=True)
async def search(index: IndexDep, q: Annotated[str, Query()] = "") -> SearchResponse:
    """Find phrases containing *q*, ignoring case, punctuation and spacing.

    A query under two characters is not an error: it returns no results and
    a ``message`` instead of ``count``/``query``.
    """
    outcome = index.search(q)
    if outcome.too_short:
        return SearchResponse(results=[], message="Query too short")

    return SearchResponse(
        results=[Phrase(**asdict(hit)) for hit in outcome.results],
        count=outcome.count,
        query=q,
    )


@router.get(
    "/clip/{phrase_id}",
    response_model=PhraseDetail,
    responses={404: {"model": ErrorResponse}},
)
async def get_clip(phrase_id: int, index: IndexDep) -> PhraseDetail | JSONResponse:
    """Return the full stored record for one phrase."""
    record = index.get_by_id(phrase_id)
    if record is None:
        return JSONResponse(status_code=404, content={"error": "Clip not found"})
    return PhraseDetail(**asdict(record))


@router.get("/stats", response_model=StatsResponse)
async def stats(index: IndexDep) -> StatsResponse:
    """Total number of indexed phrases and the summed clip duration."""
    result = index.stats()
    return StatsResponse(
        total_phrases=result.total_phrases,
        total_duration=result.total_duration,
    )
