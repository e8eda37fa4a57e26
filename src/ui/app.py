"""Phrase Clip Finder -- Streamlit UI.

Search the transcribed phrases and play the matching clips.
"""

from __future__ import annotations

import streamlit as st

from src.ui.api_client import check_health, clip_url, get_stats, search_phrases

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Phrase Clip Finder", layout="wide")

# ---------------------------------------------------------------------------
# Sidebar -- API status + corpus stats
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("Phrase Clip Finder")
    st.markdown("---")

    api_healthy = check_health()
    if api_healthy:
        st.markdown(":green_circle: API connected")
        stats = get_stats()
        if stats:
            st.metric("Phrases", stats.get("total_phrases", 0))
            minutes = (stats.get("total_duration") or 0) / 60
            st.metric("Clip footage", f"{minutes:.1f} min")
    else:
        st.markdown(":red_circle: API unreachable")

# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
st.header("Search")
query = st.text_input("Phrase", placeholder="e.g. nasılsın")

if query:
    if not api_healthy:
        st.error("Cannot search: the API server is not reachable.")
    else:
        result = search_phrases(query)
        if result.get("message"):
            st.info("Type at least two characters to search.")
        elif result:
            hits = result.get("results", [])
            st.caption(f"{result.get('count', len(hits))} matches (showing at most 50)")
            if not hits:
                st.write("No phrases found.")

            for hit in hits:
                label = f"{hit['start_time']} -- {hit['text']}"
                with st.expander(label):
                    col_a, col_b = st.columns(2)
                    col_a.write(f"**Start:** {hit['start_time']}  **End:** {hit['end_time']}")
                    col_b.write(f"**Clip length:** {hit['clip_duration']:.1f}s")
                    st.video(clip_url(hit["clip_filename"]))
