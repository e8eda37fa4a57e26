"""SubRip (.srt) subtitle parsing."""

from __future__ import annotations

import re

from src.ingestion.models import SubtitleCue

_TIMESTAMP_RE = re.compile(
    r"(\d{1,2}:\d{2}:\d{2}[.,]\d{3})\s*-->\s*(\d{1,2}:\d{2}:\d{2}[.,]\d{3})"
)
_TAG_RE = re.compile(r"<[^>]*>")


def _parse_srt_timestamp(ts: str) -> int:
    """Convert an SRT timestamp (HH:MM:SS,mmm) to milliseconds."""
    hours, minutes, rest = ts.strip().replace(",", ".").split(":")
    seconds, _, millis = rest.partition(".")
    return (int(hours) * 3600 + int(minutes) * 60 + int(seconds)) * 1000 + int(millis or 0)


def ms_to_timestamp(ms: int) -> str:
    """Format milliseconds as ``HH:MM:SS``, dropping the fractional second."""
    total = int(ms) // 1000
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_srt(content: str) -> list[SubtitleCue]:
    """Parse an SRT file into subtitle cues.

    Cue numbers are ignored; multi-line cue text is joined with spaces and
    inline markup such as ``<i>`` or ``<font color=...>`` is removed.  Cues
    left empty after cleaning are skipped.
    """
    cues: list[SubtitleCue] = []

    lines = content.lstrip("\ufeff").strip().splitlines()
    i = 0
    while i < len(lines):
        match = _TIMESTAMP_RE.search(lines[i])
        if not match:
            i += 1
            continue

        start = _parse_srt_timestamp(match.group(1))
        end = _parse_srt_timestamp(match.group(2))

        # Collect text lines until blank line or next timestamp / end
        text_lines: list[str] = []
        i += 1
        while i < len(lines) and lines[i].strip() and not _TIMESTAMP_RE.search(lines[i]):
            text_lines.append(lines[i].strip())
            i += 1

        text = _TAG_RE.sub("", " ".join(text_lines)).strip()
        if text:
            cues.append(SubtitleCue(start_ms=start, end_ms=end, text=text))

    return cues
