"""Typed requests for the external media tools (ffmpeg, whisper).

Each request renders to an argument list that is executed without a shell,
so paths and text never need quoting.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path

from src.pipeline_config import WhisperDevice, WhisperModel

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    """An external tool could not be started or exited with an error."""

    def __init__(self, args: list[str], returncode: int | None, detail: str = "") -> None:
        self.args_list = args
        self.returncode = returncode
        rendered = " ".join(shlex.quote(part) for part in args)
        message = f"Command failed ({returncode}): {rendered}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)


def run_command(args: list[str]) -> subprocess.CompletedProcess[str]:
    """Run *args* and return the completed process.

    Raises:
        CommandError: If the binary is missing or exits non-zero.
    """
    logger.debug("Running: %s", " ".join(shlex.quote(a) for a in args))
    try:
        return subprocess.run(args, check=True, capture_output=True, text=True)
    except FileNotFoundError as exc:
        raise CommandError(args, None, f"{args[0]} not found on PATH") from exc
    except subprocess.CalledProcessError as exc:
        raise CommandError(args, exc.returncode, (exc.stderr or "").strip()) from exc


@dataclass(frozen=True)
class CutRequest:
    """Re-encode ``duration`` seconds of ``source`` starting at ``start`` into ``output``."""

    source: Path
    output: Path
    start: float
    duration: float
    width: int = 640
    video_codec: str = "libx264"
    audio_codec: str = "aac"

    def to_args(self, ffmpeg_bin: str = "ffmpeg") -> list[str]:
        if self.duration <= 0:
            raise ValueError(f"Invalid clip duration: {self.duration}")
        return [
            ffmpeg_bin,
            "-y",
            "-ss",
            f"{self.start:.3f}",
            "-i",
            str(self.source),
            "-t",
            f"{self.duration:.3f}",
            "-vf",
            f"scale={self.width}:-2",
            "-c:v",
            self.video_codec,
            "-c:a",
            self.audio_codec,
            str(self.output),
        ]


@dataclass(frozen=True)
class ExtractRequest:
    """Stream-copy an excerpt of ``source`` without re-encoding."""

    source: Path
    output: Path
    start: float
    duration: float

    def to_args(self, ffmpeg_bin: str = "ffmpeg") -> list[str]:
        return [
            ffmpeg_bin,
            "-y",
            "-ss",
            str(self.start),
            "-i",
            str(self.source),
            "-t",
            str(self.duration),
            "-c",
            "copy",
            str(self.output),
        ]


@dataclass(frozen=True)
class WhisperRequest:
    """Transcribe ``source`` into an SRT file inside ``output_dir``."""

    source: Path
    output_dir: Path
    model: WhisperModel = WhisperModel.LARGE
    language: str = "Turkish"
    device: WhisperDevice | None = None
    fp16: bool = False
    threads: int = 4

    @property
    def output_path(self) -> Path:
        return self.output_dir / f"{self.source.stem}.srt"

    def to_args(self, whisper_bin: str = "whisper") -> list[str]:
        args = [
            whisper_bin,
            str(self.source),
            "--model",
            self.model.value,
            "--language",
            self.language,
            "--output_format",
            "srt",
            "--output_dir",
            str(self.output_dir),
            "--fp16",
            str(self.fp16),
            "--threads",
            str(self.threads),
        ]
        if self.device is not None:
            args += ["--device", self.device.value]
        return args
