"""Data models for the phrase index."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class PhraseInput:
    """A phrase ready for insertion; the normalized form is derived on insert."""

    text: str
    start_time: str
    end_time: str
    clip_filename: str
    clip_duration: float = 0.0


@dataclass
class PhraseHit:
    """The public view of a phrase returned by search."""

    id: int
    text: str
    start_time: str
    end_time: str
    clip_filename: str
    clip_duration: float


@dataclass
class PhraseRecord(PhraseHit):
    """A full stored phrase, including internal fields."""

    text_normalized: str = ""
    created_at: datetime | None = None


@dataclass
class SearchOutcome:
    results: list[PhraseHit] = field(default_factory=list)
    too_short: bool = False

    @property
    def count(self) -> int:
        return len(self.results)


@dataclass
class IndexStats:
    total_phrases: int = 0
    total_duration: float = 0.0
