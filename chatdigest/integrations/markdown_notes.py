"""
Channel summary generator: renders a SignalSet as a short Markdown report.

Format:
  - Header: channel title, message count, horizontal rule
  - Key Decisions   (first 5)
  - Action Items    (first 5)
  - Links Shared    (first 10)
  - Open Questions  (first 5)

Sections with nothing to show are left out entirely.
Files saved to: <summaries_dir>/YYYY-MM-DD/<channel>.md
"""
from __future__ import annotations

from ..storage.models import SignalEntry, SignalSet

MAX_DECISIONS = 5
MAX_ACTIONS = 5
MAX_LINKS = 10
MAX_QUESTIONS = 5

# Second truncation applied on top of the 200-char extraction excerpt
BULLET_EXCERPT_CHARS = 150


def render_summary(channel: str, message_count: int, signals: SignalSet) -> str:
    lines = _header(channel, message_count)

    _add_section(lines, "Key Decisions", signals.decisions[:MAX_DECISIONS], _excerpt_bullet)
    _add_section(lines, "Action Items", signals.actions[:MAX_ACTIONS], _excerpt_bullet)
    _add_section(lines, "Links Shared", signals.links[:MAX_LINKS], _link_bullet)
    _add_section(lines, "Open Questions", signals.questions[:MAX_QUESTIONS], _question_bullet)

    return "\n".join(lines)


# ── Building helpers ──────────────────────────────────────────────────────────

def _header(channel: str, message_count: int) -> list[str]:
    return [
        f"# {channel} — Summary",
        "",
        f"**Messages:** {message_count}",
        "",
        "---",
        "",
    ]


def _add_section(lines: list[str], heading: str, entries: list[SignalEntry], bullet) -> None:
    if not entries:
        return
    lines.append(f"## {heading}")
    lines.append("")
    lines.extend(bullet(e) for e in entries)
    lines.append("")


def _excerpt_bullet(entry: SignalEntry) -> str:
    return f"- **{entry.author}**: {entry.excerpt[:BULLET_EXCERPT_CHARS]}..."


def _link_bullet(entry: SignalEntry) -> str:
    return f"- {entry.url} ({entry.author})"


def _question_bullet(entry: SignalEntry) -> str:
    # "?" is appended even when the excerpt was cut mid-sentence
    return f"- **{entry.author}**: {entry.excerpt}?"
