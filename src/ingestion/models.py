"""Data models for the ingestion pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SubtitleCue:
    """One subtitle entry, with times in milliseconds."""

    start_ms: int
    end_ms: int
    text: str


@dataclass
class ClipPlan:
    """Where to cut a clip for a cue and what to call it."""

    index: int
    cue: SubtitleCue
    clip_start_ms: int
    clip_end_ms: int
    filename: str

    @property
    def duration(self) -> float:
        return (self.clip_end_ms - self.clip_start_ms) / 1000.0


@dataclass
class ClipMetadata:
    """A cut clip as recorded in the metadata file read by the loader."""

    filename: str
    text: str
    start_time: str
    end_time: str
    clip_duration: float
