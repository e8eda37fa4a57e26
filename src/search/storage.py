"""SQLAlchemy storage for phrase records."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Column, DateTime, Float, Index, Integer, Text, create_engine, func
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class PhraseRow(Base):
    """One transcribed phrase and the clip that plays it."""

    __tablename__ = "phrases"
    __table_args__ = (
        Index("idx_text_normalized", "text_normalized"),
        Index("idx_text", "text"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    text_normalized = Column(Text, nullable=False)
    start_time = Column(Text, nullable=False)
    end_time = Column(Text, nullable=False)
    clip_filename = Column(Text, nullable=False)
    clip_duration = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())


def _is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


class Database:
    """Explicitly opened handle on the phrase store.

    Lifecycle is ``open() -> session() ... -> close()``; the object also
    works as a context manager.  In-memory SQLite URLs share one connection
    so every session sees the same data.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self._engine: Engine | None = None
        self._sessions: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    def open(self) -> Database:
        if self._engine is not None:
            return self
        kwargs: dict[str, object] = {}
        if self.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_url(self.url):
                kwargs["poolclass"] = StaticPool
            else:
                db_file = make_url(self.url).database
                if db_file:
                    Path(db_file).parent.mkdir(parents=True, exist_ok=True)
        self._engine = create_engine(self.url, **kwargs)
        Base.metadata.create_all(self._engine)
        self._sessions = sessionmaker(bind=self._engine, expire_on_commit=False)
        logger.info("Opened phrase store at %s", self.url)
        return self

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Closed phrase store at %s", self.url)
        self._engine = None
        self._sessions = None

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        if self._sessions is None:
            raise RuntimeError("Database is not open")
        session = self._sessions()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def __enter__(self) -> Database:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()
