from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # Storage
    database_url: str = "sqlite:///data/phrases.db"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8501"]

    # Source media and pipeline outputs
    video_path: str = "data/original/source.mp4"
    subtitle_path: str = "data/subtitles/source.srt"
    clips_dir: str = "data/clips"
    metadata_path: str = "data/clips-metadata.json"
    temp_dir: str = "data/temp"

    # External tools
    ffmpeg_bin: str = "ffmpeg"
    whisper_bin: str = "whisper"
    whisper_model: str = "large"
    whisper_language: str = "Turkish"
    whisper_device: str | None = None  # "cuda", "mps", or None for CPU
    whisper_fp16: bool = False
    whisper_threads: int = 4

    # Clip cutting
    max_clip_duration: float = 9.0
    context_padding: float = 2.0
    max_clips: int | None = None  # Cap for trial runs; None processes every cue

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
