"""Shared fixtures: a fresh in-memory phrase store per test."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.search.index import PhraseIndex
from src.search.models import PhraseInput
from src.search.storage import Database


def _make_phrase(text: str, n: int = 0, duration: float = 4.0) -> PhraseInput:
    return PhraseInput(
        text=text,
        start_time=f"00:{n // 60:02d}:{n % 60:02d}",
        end_time=f"00:{n // 60:02d}:{n % 60:02d}",
        clip_filename=f"clip_{n:04d}.mp4",
        clip_duration=duration,
    )


PhraseFactory = Callable[..., PhraseInput]


@pytest.fixture
def make_phrase() -> PhraseFactory:
    """Build valid phrase inputs whose timestamps follow their position."""
    return _make_phrase


@pytest.fixture
def database() -> Iterator[Database]:
    with Database("sqlite://") as db:
        yield db


@pytest.fixture
def index(database: Database) -> PhraseIndex:
    return PhraseIndex(database)


@pytest.fixture
def client(index: PhraseIndex, tmp_path) -> TestClient:  # type: ignore[no-untyped-def]
    return TestClient(create_app(index=index, clips_dir=str(tmp_path)))
