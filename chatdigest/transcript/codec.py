"""
Transcript codec: messages ⇄ daily Markdown transcript.

Format:
  # <channel> — YYYY-MM-DD

  ### HH:MM — <author>

  <content, possibly several lines>

  ### HH:MM — <author>
  ...

Content is written verbatim. A content line that itself starts with "### "
and looks like a heading will be read back as a new message; that ambiguity
is part of the format and is not escaped.
"""
from __future__ import annotations

import re
from datetime import datetime, tzinfo
from typing import Iterable, Optional

from ..storage.models import Message, RawMessage

HEADING_SEPARATOR = " — "
_MESSAGE_HEADER = re.compile(r"^### (\d{2}:\d{2}) — (.+)$")
_TITLE_PREFIX = "# "


def format_time(instant: datetime, tz: Optional[tzinfo] = None) -> str:
    """24h zero-padded HH:MM in `tz` (local zone when None). Locale independent."""
    local = instant.astimezone(tz) if instant.tzinfo is not None or tz is not None else instant
    return f"{local.hour:02d}:{local.minute:02d}"


def to_message(raw: RawMessage, tz: Optional[tzinfo] = None) -> Message:
    """Collapse an API record into the fields a transcript keeps."""
    return Message(
        time=format_time(raw.created_at, tz),
        author=raw.author,
        content=raw.content or "",
    )


def encode(channel: str, messages: Iterable[Message], now: datetime) -> str:
    lines = [f"# {channel}{HEADING_SEPARATOR}{now.date().isoformat()}", ""]

    for msg in messages:
        lines.append(f"### {msg.time}{HEADING_SEPARATOR}{msg.author}")
        lines.append("")
        lines.append(msg.content)
        lines.append("")

    return "\n".join(lines)


def decode(text: str) -> list[Message]:
    """
    Parse a transcript back into messages.

    encode() writes one blank line after each heading and one after each
    body; exactly one of each is dropped when present, so content may itself
    start or end with blank lines. A message still open at end of input is
    emitted.
    """
    messages: list[Message] = []
    current: Optional[tuple[str, str]] = None
    body: list[str] = []

    def close() -> None:
        if current is None:
            return
        if body and body[0] == "":
            body.pop(0)
        if body and body[-1] == "":
            body.pop()
        messages.append(Message(time=current[0], author=current[1], content="\n".join(body)))

    for line in text.split("\n"):
        header = _MESSAGE_HEADER.match(line)
        if header:
            close()
            current = (header.group(1), header.group(2))
            body = []
            continue

        if current is None or line.startswith(_TITLE_PREFIX):
            continue
        body.append(line)

    close()
    return messages
