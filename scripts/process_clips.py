"""Cut one short clip per subtitle cue and write the clip metadata file."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import settings
from src.ingestion.clips import process_clips, write_metadata
from src.ingestion.subtitles import parse_srt
from src.pipeline_config import ClipConfig

logger = logging.getLogger("process_clips")


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--video", default=settings.video_path)
    parser.add_argument("--subtitles", default=settings.subtitle_path)
    parser.add_argument("--clips-dir", default=settings.clips_dir)
    parser.add_argument("--metadata", default=settings.metadata_path)
    parser.add_argument("--max", type=int, default=settings.max_clips)
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    subtitle_path = Path(args.subtitles)
    if not subtitle_path.exists():
        logger.error("Subtitle file not found: %s (run transcribe.py first)", subtitle_path)
        return 1

    cues = parse_srt(subtitle_path.read_text(encoding="utf-8"))
    logger.info("Found %d subtitle entries", len(cues))

    config = replace(ClipConfig.from_settings(settings), max_clips=args.max)

    try:
        clips = process_clips(
            Path(args.video), cues, Path(args.clips_dir), config, ffmpeg_bin=settings.ffmpeg_bin
        )
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1

    metadata_path = Path(args.metadata)
    write_metadata(clips, metadata_path)
    logger.info("Metadata saved to %s (%d clips)", metadata_path, len(clips))
    return 0


if __name__ == "__main__":
    sys.exit(main())
