"""HTTP client wrapper for the phrase search FastAPI backend."""

from __future__ import annotations

import os

import httpx
import streamlit as st

API_URL = os.getenv("API_URL", "http://localhost:3000")


def check_health() -> bool:
    """Return True if the API server responds to /health."""
    try:
        r = httpx.get(f"{API_URL}/health", timeout=5.0)
        return r.status_code == 200
    except httpx.ConnectError:
        return False


def search_phrases(query: str) -> dict:  # type: ignore[type-arg]
    """Send a phrase query to the search endpoint."""
    try:
        r = httpx.get(f"{API_URL}/search", params={"q": query}, timeout=10.0)
        r.raise_for_status()
        return r.json()  # type: ignore[no-any-return]
    except httpx.HTTPError as e:
        st.error(f"Search failed: {e}")
        return {}


def get_stats() -> dict:  # type: ignore[type-arg]
    """Fetch corpus totals."""
    try:
        r = httpx.get(f"{API_URL}/stats", timeout=10.0)
        r.raise_for_status()
        return r.json()  # type: ignore[no-any-return]
    except httpx.HTTPError:
        return {}


def clip_url(clip_filename: str) -> str:
    return f"{API_URL}/clips/{clip_filename}"
