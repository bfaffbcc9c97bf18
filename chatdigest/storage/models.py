"""
Data models for chat messages, extracted signals, and job results.
Plain dataclasses — no ORM, transcripts and summaries live as Markdown files.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RawMessage:
    """A message record as returned by the chat API."""
    created_at: datetime
    user_id: str
    content: str = ""
    display_name: Optional[str] = None
    id: Optional[str] = None

    @property
    def author(self) -> str:
        return self.display_name or self.user_id


@dataclass(frozen=True)
class Message:
    """A transcript message: only the fields that survive encoding."""
    time: str
    author: str
    content: str = ""


@dataclass(frozen=True)
class SignalEntry:
    author: str
    excerpt: str = ""
    url: Optional[str] = None


@dataclass
class SignalSet:
    decisions: list[SignalEntry] = field(default_factory=list)
    actions: list[SignalEntry] = field(default_factory=list)
    links: list[SignalEntry] = field(default_factory=list)
    questions: list[SignalEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.decisions or self.actions or self.links or self.questions)


@dataclass(frozen=True)
class DateWindow:
    """Collection window [after, before), labelled with the day of `after`."""
    after: datetime
    before: datetime
    label: str

    @property
    def after_date(self) -> str:
        return self.after.date().isoformat()

    @property
    def before_date(self) -> str:
        return self.before.date().isoformat()


class ChannelStatus(str, Enum):
    WRITTEN = "written"
    EMPTY = "empty"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class ChannelResult:
    channel: str
    status: ChannelStatus
    message_count: int = 0
    path: Optional[Path] = None
    error: Optional[str] = None


@dataclass
class JobReport:
    """Outcome of one collect or summarize run over all channels."""
    day: str
    results: list[ChannelResult] = field(default_factory=list)
    found: bool = True

    def with_status(self, status: ChannelStatus) -> list[ChannelResult]:
        return [r for r in self.results if r.status == status]

    @property
    def failed(self) -> list[ChannelResult]:
        return self.with_status(ChannelStatus.FAILED)

    @property
    def written(self) -> list[ChannelResult]:
        return self.with_status(ChannelStatus.WRITTEN)
