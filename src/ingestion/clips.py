"""Clip cutting: plan a padded clip per subtitle cue and cut it with ffmpeg."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

from src.ingestion.media import CommandError, CutRequest, run_command
from src.ingestion.models import ClipMetadata, ClipPlan, SubtitleCue
from src.ingestion.subtitles import ms_to_timestamp
from src.pipeline_config import ClipConfig
from src.search.normalizer import slugify

logger = logging.getLogger(__name__)


def plan_clip(cue: SubtitleCue, index: int, config: ClipConfig) -> ClipPlan:
    """Pad *cue* on both sides and clamp the result to the maximum clip length."""
    padding_ms = int(config.context_padding * 1000)
    max_ms = int(config.max_clip_duration * 1000)

    clip_start = max(0, cue.start_ms - padding_ms)
    clip_end = cue.end_ms + padding_ms
    if clip_end - clip_start > max_ms:
        clip_end = clip_start + max_ms

    stamp = ms_to_timestamp(cue.start_ms).replace(":", "-")
    filename = f"clip_{index:04d}_{stamp}_{slugify(cue.text)}.mp4"
    return ClipPlan(
        index=index,
        cue=cue,
        clip_start_ms=clip_start,
        clip_end_ms=clip_end,
        filename=filename,
    )


def cut_clip(
    plan: ClipPlan,
    video_path: Path,
    clips_dir: Path,
    config: ClipConfig,
    ffmpeg_bin: str = "ffmpeg",
) -> ClipMetadata:
    """Cut the clip described by *plan* and return its metadata entry."""
    request = CutRequest(
        source=video_path,
        output=clips_dir / plan.filename,
        start=plan.clip_start_ms / 1000.0,
        duration=plan.duration,
        width=config.width,
    )
    run_command(request.to_args(ffmpeg_bin))
    return ClipMetadata(
        filename=plan.filename,
        text=plan.cue.text,
        start_time=ms_to_timestamp(plan.cue.start_ms),
        end_time=ms_to_timestamp(plan.cue.end_ms),
        clip_duration=plan.duration,
    )


def process_clips(
    video_path: Path,
    cues: list[SubtitleCue],
    clips_dir: Path,
    config: ClipConfig,
    ffmpeg_bin: str = "ffmpeg",
) -> list[ClipMetadata]:
    """Cut one clip per cue, skipping cues whose cut fails.

    Stops after ``config.max_clips`` cues when a cap is set.

    Raises:
        FileNotFoundError: If *video_path* does not exist.
    """
    if not video_path.exists():
        raise FileNotFoundError(f"Video file not found: {video_path}")
    clips_dir.mkdir(parents=True, exist_ok=True)

    clips: list[ClipMetadata] = []
    total = len(cues)
    for i, cue in enumerate(cues):
        if config.max_clips is not None and i >= config.max_clips:
            logger.info("Clip cap reached after %d cues; stopping", config.max_clips)
            break

        plan = plan_clip(cue, i + 1, config)
        logger.info(
            "[%d/%d] Creating clip at %s (%.1fs): %s",
            plan.index,
            total,
            ms_to_timestamp(plan.clip_start_ms),
            plan.duration,
            cue.text,
        )
        try:
            clips.append(cut_clip(plan, video_path, clips_dir, config, ffmpeg_bin))
        except (CommandError, ValueError):
            logger.exception("Failed to create clip %d, continuing", plan.index)

    logger.info("Created %d clips in %s", len(clips), clips_dir)
    return clips


def write_metadata(clips: list[ClipMetadata], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps([asdict(c) for c in clips], ensure_ascii=False, indent=2),
        encoding="utf-8",
    )


def read_metadata(path: Path) -> list[ClipMetadata]:
    """Read the metadata file written by :func:`write_metadata`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not a list of clip entries.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        msg = f"Expected a list of clips in {path}, got {type(data).__name__}"
        raise ValueError(msg)
    return [
        ClipMetadata(
            filename=item.get("filename", ""),
            text=item.get("text", ""),
            start_time=item.get("start_time", ""),
            end_time=item.get("end_time", ""),
            clip_duration=float(item.get("clip_duration") or 0.0),
        )
        for item in data
    ]
