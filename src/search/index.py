"""Phrase index: bulk insert and substring search over normalized text."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import delete, func, select

from src.search.models import IndexStats, PhraseHit, PhraseInput, PhraseRecord, SearchOutcome
from src.search.normalizer import normalize
from src.search.storage import Database, PhraseRow

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
MAX_RESULTS = 50


class InvalidPhraseError(ValueError):
    """Raised when a record in an insert batch cannot be stored."""


def _validate(record: PhraseInput, position: int) -> None:
    if not isinstance(record.text, str) or not record.text.strip():
        raise InvalidPhraseError(f"Record {position} has no text")
    if not record.clip_filename:
        raise InvalidPhraseError(f"Record {position} has no clip filename")
    if not record.start_time or not record.end_time:
        raise InvalidPhraseError(f"Record {position} is missing a timestamp")
    # Zero-padded HH:MM:SS strings order the same as the times they encode.
    if record.start_time > record.end_time:
        raise InvalidPhraseError(
            f"Record {position} starts after it ends ({record.start_time} > {record.end_time})"
        )
    if record.clip_duration is None or record.clip_duration < 0:
        raise InvalidPhraseError(f"Record {position} has an invalid clip duration")


def _to_hit(row: PhraseRow) -> PhraseHit:
    return PhraseHit(
        id=row.id,
        text=row.text,
        start_time=row.start_time,
        end_time=row.end_time,
        clip_filename=row.clip_filename,
        clip_duration=row.clip_duration,
    )


class PhraseIndex:
    """Search and load phrase records held in a :class:`Database`."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def insert(self, records: Iterable[PhraseInput], replace: bool = False) -> int:
        """Insert *records* in a single transaction and return how many were stored.

        The normalized text is always derived here from ``text``.  Any invalid
        record aborts the whole batch.  With *replace* the existing corpus is
        deleted in the same transaction, so a failed rebuild keeps the old one.

        Raises:
            InvalidPhraseError: If a record is malformed.
        """
        with self.database.session() as session:
            if replace:
                session.execute(delete(PhraseRow))
            count = 0
            for position, record in enumerate(records):
                _validate(record, position)
                session.add(
                    PhraseRow(
                        text=record.text,
                        text_normalized=normalize(record.text),
                        start_time=record.start_time,
                        end_time=record.end_time,
                        clip_filename=record.clip_filename,
                        clip_duration=float(record.clip_duration),
                    )
                )
                count += 1
        logger.info("Inserted %d phrases", count)
        return count

    def search(self, query: str) -> SearchOutcome:
        """Return phrases whose normalized text contains the normalized *query*.

        Queries shorter than two characters after trimming are rejected
        without touching storage.  Results are ordered by id and capped at
        ``MAX_RESULTS``.
        """
        if len(query.strip()) < MIN_QUERY_LENGTH:
            return SearchOutcome(results=[], too_short=True)

        needle = normalize(query)
        stmt = (
            select(PhraseRow)
            .where(PhraseRow.text_normalized.contains(needle, autoescape=True))
            .order_by(PhraseRow.id)
            .limit(MAX_RESULTS)
        )
        with self.database.session() as session:
            rows = session.scalars(stmt).all()
            return SearchOutcome(results=[_to_hit(r) for r in rows])

    def get_by_id(self, phrase_id: int) -> PhraseRecord | None:
        """Return the full record for *phrase_id*, or ``None`` if it does not exist."""
        with self.database.session() as session:
            row = session.get(PhraseRow, phrase_id)
            if row is None:
                return None
            return PhraseRecord(
                id=row.id,
                text=row.text,
                start_time=row.start_time,
                end_time=row.end_time,
                clip_filename=row.clip_filename,
                clip_duration=row.clip_duration,
                text_normalized=row.text_normalized,
                created_at=row.created_at,
            )

    def stats(self) -> IndexStats:
        stmt = select(
            func.count(PhraseRow.id),
            func.coalesce(func.sum(PhraseRow.clip_duration), 0.0),
        )
        with self.database.session() as session:
            total, duration = session.execute(stmt).one()
        return IndexStats(total_phrases=int(total), total_duration=float(duration))
