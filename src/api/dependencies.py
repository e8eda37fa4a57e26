"""Request-scoped access to the shared phrase index."""

from __future__ import annotations

from fastapi import Request

from src.search.index import PhraseIndex


def get_phrase_index(request: Request) -> PhraseIndex:
    """Return the index opened during application startup."""
    return request.app.state.phrase_index  # type: ignore[no-any-return]
