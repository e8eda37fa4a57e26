"""Transcribe the source video with Whisper, producing the SRT subtitle file."""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import settings
from src.ingestion.media import CommandError
from src.ingestion.transcribe import transcribe_video
from src.pipeline_config import WhisperDevice, WhisperModel

logger = logging.getLogger("transcribe")


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--video", default=settings.video_path)
    parser.add_argument("--output", default=settings.subtitle_path)
    parser.add_argument(
        "--model", default=settings.whisper_model, choices=[m.value for m in WhisperModel]
    )
    parser.add_argument("--language", default=settings.whisper_language)
    parser.add_argument(
        "--device", default=settings.whisper_device, choices=[d.value for d in WhisperDevice]
    )
    parser.add_argument("--fp16", action="store_true", default=settings.whisper_fp16)
    parser.add_argument("--threads", type=int, default=settings.whisper_threads)
    parser.add_argument("--start", type=float, default=None, help="Excerpt start (seconds)")
    parser.add_argument("--duration", type=float, default=None, help="Excerpt length (seconds)")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    excerpt = None
    if args.start is not None or args.duration is not None:
        excerpt = (args.start or 0.0, args.duration or 120.0)

    try:
        subtitle_path = transcribe_video(
            Path(args.video),
            Path(args.output),
            model=WhisperModel(args.model),
            language=args.language,
            device=WhisperDevice(args.device) if args.device else None,
            fp16=args.fp16,
            threads=args.threads,
            temp_dir=Path(settings.temp_dir),
            excerpt=excerpt,
            whisper_bin=settings.whisper_bin,
            ffmpeg_bin=settings.ffmpeg_bin,
        )
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except CommandError as e:
        logger.error("Transcription failed: %s", e)
        logger.error("Check that whisper and ffmpeg are installed and on PATH")
        return 1

    logger.info("Review and correct %s before cutting clips", subtitle_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
