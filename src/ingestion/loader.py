"""Load clip metadata into the phrase index."""

from __future__ import annotations

import logging
from pathlib import Path

from src.ingestion.clips import read_metadata
from src.ingestion.models import ClipMetadata
from src.search.index import PhraseIndex
from src.search.models import PhraseInput

logger = logging.getLogger(__name__)


def to_phrase_input(clip: ClipMetadata) -> PhraseInput:
    return PhraseInput(
        text=clip.text,
        start_time=clip.start_time,
        end_time=clip.end_time,
        clip_filename=clip.filename,
        clip_duration=clip.clip_duration,
    )


def load_metadata(index: PhraseIndex, metadata_path: Path, rebuild: bool = False) -> int:
    """Insert every clip listed in *metadata_path* as one batch.

    With *rebuild* the existing corpus is replaced in the same transaction.

    Returns:
        The number of phrases inserted.

    Raises:
        FileNotFoundError: If the metadata file does not exist.
        InvalidPhraseError: If any clip entry is malformed.
    """
    if not metadata_path.exists():
        raise FileNotFoundError(f"Metadata file not found: {metadata_path}")

    clips = read_metadata(metadata_path)
    logger.info("Read %d clips from %s", len(clips), metadata_path)

    inserted = index.insert((to_phrase_input(c) for c in clips), replace=rebuild)
    stats = index.stats()
    logger.info(
        "Index now holds %d phrases (%.1fs of clips)", stats.total_phrases, stats.total_duration
    )
    return inserted
