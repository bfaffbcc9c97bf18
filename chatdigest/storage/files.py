"""
File storage for transcripts and summaries.

Layout:
  <logs_dir>/YYYY-MM-DD/<channel>.md        raw transcripts
  <summaries_dir>/YYYY-MM-DD/<channel>.md   rendered summaries

Every write replaces the whole file (UTF-8), so re-running a day is
idempotent. There is no partial-write protection.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from ..errors import IOFailure

logger = logging.getLogger(__name__)

TRANSCRIPT_SUFFIX = ".md"
_DAY_DIR = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class TranscriptStore:
    def __init__(self, logs_dir: Path, summaries_dir: Path):
        self.logs_dir = Path(logs_dir)
        self.summaries_dir = Path(summaries_dir)

    # ── Paths ─────────────────────────────────────────────────────────────────

    def transcripts_dir(self, day: str) -> Path:
        return self.logs_dir / day

    def summaries_day_dir(self, day: str) -> Path:
        return self.summaries_dir / day

    def transcript_path(self, day: str, channel: str) -> Path:
        return self.transcripts_dir(day) / f"{channel}{TRANSCRIPT_SUFFIX}"

    def summary_path(self, day: str, channel: str) -> Path:
        return self.summaries_day_dir(day) / f"{channel}{TRANSCRIPT_SUFFIX}"

    # ── Directories ───────────────────────────────────────────────────────────

    def has_transcripts(self, day: str) -> bool:
        return self.transcripts_dir(day).is_dir()

    def ensure_transcripts_dir(self, day: str) -> Path:
        return _mkdir(self.transcripts_dir(day))

    def ensure_summaries_dir(self, day: str) -> Path:
        return _mkdir(self.summaries_day_dir(day))

    def list_channels(self, day: str) -> list[str]:
        """Channels with a transcript for `day`, sorted by name."""
        folder = self.transcripts_dir(day)
        if not folder.is_dir():
            return []
        return sorted(
            p.stem for p in folder.iterdir()
            if p.is_file() and p.suffix == TRANSCRIPT_SUFFIX
        )

    def list_days(self) -> list[str]:
        """Collected days, newest first."""
        if not self.logs_dir.is_dir():
            return []
        return sorted(
            (p.name for p in self.logs_dir.iterdir() if p.is_dir() and _DAY_DIR.match(p.name)),
            reverse=True,
        )

    def count_summaries(self, day: str) -> int:
        folder = self.summaries_day_dir(day)
        if not folder.is_dir():
            return 0
        return sum(1 for p in folder.glob(f"*{TRANSCRIPT_SUFFIX}") if p.is_file())

    # ── Read / write ──────────────────────────────────────────────────────────

    def write_transcript(self, day: str, channel: str, text: str) -> Path:
        return _write(self.transcript_path(day, channel), text)

    def read_transcript(self, day: str, channel: str) -> str:
        return _read(self.transcript_path(day, channel))

    def write_summary(self, day: str, channel: str, text: str) -> Path:
        return _write(self.summary_path(day, channel), text)

    def read_summary(self, day: str, channel: str) -> str:
        return _read(self.summary_path(day, channel))


def _mkdir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise IOFailure(f"Cannot create {path}: {exc}") from exc
    return path


def _write(path: Path, text: str) -> Path:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise IOFailure(f"Cannot write {path}: {exc}") from exc
    logger.debug(f"Wrote {path}")
    return path


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IOFailure(f"Cannot read {path}: {exc}") from exc
