"""Pipeline configuration: tool option enums and the ClipConfig dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.config import Settings


class WhisperModel(str, Enum):
    """Whisper model sizes accepted by the transcription stage."""

    TINY = "tiny"
    BASE = "base"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class WhisperDevice(str, Enum):
    """Compute devices Whisper can run on."""

    CPU = "cpu"
    CUDA = "cuda"
    MPS = "mps"


@dataclass(frozen=True)
class ClipConfig:
    """Immutable configuration for the clip-cutting stage.

    Defaults mirror the settings defaults: clips start two seconds before a
    cue, end two seconds after it and never run longer than nine seconds.
    """

    max_clip_duration: float = 9.0
    context_padding: float = 2.0
    max_clips: int | None = None
    width: int = 640

    @classmethod
    def from_settings(cls, settings: Settings) -> ClipConfig:
        return cls(
            max_clip_duration=settings.max_clip_duration,
            context_padding=settings.context_padding,
            max_clips=settings.max_clips,
        )
