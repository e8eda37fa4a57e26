"""Tests for API endpoints against an in-memory phrase store."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from src.api.main import create_app
from src.search.index import PhraseIndex

if TYPE_CHECKING:
    from tests.conftest import PhraseFactory


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Server is running"}


def test_health_does_not_need_index() -> None:
    broken = MagicMock(spec=PhraseIndex)
    response = TestClient(create_app(index=broken)).get("/health")
    assert response.status_code == 200
    broken.stats.assert_not_called()


# --- /search ---


def test_search_query_too_short(client: TestClient) -> None:
    for q in ["a", " ", ""]:
        response = client.get("/search", params={"q": q})
        assert response.status_code == 200
        assert response.json() == {"results": [], "message": "Query too short"}


def test_search_missing_query_is_too_short(client: TestClient) -> None:
    response = client.get("/search")
    assert response.status_code == 200
    assert response.json() == {"results": [], "message": "Query too short"}


def test_search_returns_matches(
    client: TestClient, index: PhraseIndex, make_phrase: PhraseFactory
) -> None:
    index.insert([make_phrase("Merhaba, nasılsın?", 5, duration=6.0), make_phrase("Selam", 9)])

    response = client.get("/search", params={"q": "NASILSIN"})
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    assert data["query"] == "NASILSIN"
    assert "message" not in data
    assert data["results"] == [
        {
            "id": 1,
            "text": "Merhaba, nasılsın?",
            "start_time": "00:00:05",
            "end_time": "00:00:05",
            "clip_filename": "clip_0005.mp4",
            "clip_duration": 6.0,
        }
    ]


def test_search_no_results(client: TestClient) -> None:
    response = client.get("/search", params={"q": "hiçbir şey"})
    assert response.status_code == 200
    assert response.json() == {"results": [], "count": 0, "query": "hiçbir şey"}


def test_search_capped_at_50(
    client: TestClient, index: PhraseIndex, make_phrase: PhraseFactory
) -> None:
    index.insert(make_phrase(f"aynı söz {i}", i) for i in range(60))
    data = client.get("/search", params={"q": "aynı söz"}).json()
    assert data["count"] == 50
    assert len(data["results"]) == 50
    assert [r["id"] for r in data["results"]] == list(range(1, 51))


def test_search_storage_failure_returns_500() -> None:
    broken = MagicMock(spec=PhraseIndex)
    broken.search.side_effect = OperationalError("SELECT", {}, Exception("disk gone"))
    client = TestClient(create_app(index=broken), raise_server_exceptions=False)
    response = client.get("/search", params={"q": "merhaba"})
    assert response.status_code == 500


# --- /clip/{id} ---


def test_clip_found(client: TestClient, index: PhraseIndex, make_phrase: PhraseFactory) -> None:
    index.insert([make_phrase("Ne oldu?", 12, duration=7.5)])
    response = client.get("/clip/1")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["text"] == "Ne oldu?"
    assert data["text_normalized"] == "ne oldu"
    assert data["clip_filename"] == "clip_0012.mp4"
    assert data["clip_duration"] == 7.5
    assert data["created_at"] is not None


def test_clip_not_found(client: TestClient) -> None:
    response = client.get("/clip/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Clip not found"}


def test_clip_non_integer_id(client: TestClient) -> None:
    response = client.get("/clip/abc")
    assert response.status_code == 422


# --- /stats ---


def test_stats_empty(client: TestClient) -> None:
    response = client.get("/stats")
    assert response.status_code == 200
    assert response.json() == {"total_phrases": 0, "total_duration": 0}


def test_stats_totals(client: TestClient, index: PhraseIndex, make_phrase: PhraseFactory) -> None:
    index.insert([make_phrase("bir", 1, 3.0), make_phrase("iki", 2, 4.5)])
    assert client.get("/stats").json() == {"total_phrases": 2, "total_duration": 7.5}


# --- /clips static files ---


def test_clip_files_served(index: PhraseIndex, tmp_path) -> None:  # type: ignore[no-untyped-def]
    (tmp_path / "clip_0001.mp4").write_bytes(b"\x00\x00\x00\x18ftypmp42")
    client = TestClient(create_app(index=index, clips_dir=str(tmp_path)))
    response = client.get("/clips/clip_0001.mp4")
    assert response.status_code == 200
    assert response.content.startswith(b"\x00\x00\x00\x18ftyp")


# --- dependency wiring ---


def test_lifespan_opens_configured_database(monkeypatch, tmp_path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr("src.api.main.settings.database_url", f"sqlite:///{tmp_path / 'p.db'}")
    app = create_app(clips_dir=str(tmp_path))
    with TestClient(app) as client:
        assert client.get("/stats").json() == {"total_phrases": 0, "total_duration": 0}
