"""Transcription stage: run Whisper over the source video to produce an SRT file."""

from __future__ import annotations

import logging
from pathlib import Path

from src.ingestion.media import ExtractRequest, WhisperRequest, run_command
from src.pipeline_config import WhisperDevice, WhisperModel

logger = logging.getLogger(__name__)


def transcribe_video(
    video_path: Path,
    subtitle_path: Path,
    model: WhisperModel = WhisperModel.LARGE,
    language: str = "Turkish",
    device: WhisperDevice | None = None,
    fp16: bool = False,
    threads: int = 4,
    temp_dir: Path | None = None,
    excerpt: tuple[float, float] | None = None,
    whisper_bin: str = "whisper",
    ffmpeg_bin: str = "ffmpeg",
) -> Path:
    """Transcribe *video_path* and store the subtitles at *subtitle_path*.

    Args:
        video_path: Source video.
        subtitle_path: Where the final ``.srt`` file should live.
        model: Whisper model size.
        language: Spoken language passed to Whisper.
        device: Compute device; ``None`` lets Whisper decide.
        fp16: Use half precision.
        threads: CPU threads for preprocessing.
        temp_dir: Scratch directory for the excerpt when *excerpt* is set.
        excerpt: Optional ``(start, duration)`` in seconds; only that part of
            the video is transcribed.
        whisper_bin: Whisper executable.
        ffmpeg_bin: ffmpeg executable.

    Returns:
        The subtitle path.

    Raises:
        FileNotFoundError: If the video is missing or Whisper produced no file.
        CommandError: If ffmpeg or Whisper fails.
    """
    if not video_path.exists():
        raise FileNotFoundError(f"Video file not found: {video_path}")

    subtitle_dir = subtitle_path.parent
    subtitle_dir.mkdir(parents=True, exist_ok=True)

    source = video_path
    if excerpt is not None:
        scratch = temp_dir or subtitle_dir
        scratch.mkdir(parents=True, exist_ok=True)
        start, duration = excerpt
        source = scratch / f"excerpt{video_path.suffix}"
        logger.info("Extracting %.0fs excerpt starting at %.0fs", duration, start)
        run_command(ExtractRequest(video_path, source, start, duration).to_args(ffmpeg_bin))

    request = WhisperRequest(
        source=source,
        output_dir=subtitle_dir,
        model=model,
        language=language,
        device=device,
        fp16=fp16,
        threads=threads,
    )
    logger.info("Transcribing %s with Whisper model %s", source.name, request.model.value)
    run_command(request.to_args(whisper_bin))

    produced = request.output_path
    if not produced.exists():
        raise FileNotFoundError(f"Whisper did not produce {produced}")
    if produced != subtitle_path:
        produced.replace(subtitle_path)

    logger.info("Subtitle file created: %s", subtitle_path)
    return subtitle_path
