"""
Rich display helpers for the chatdigest CLI.
All terminal output goes through this module for consistency.
"""
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..storage.models import ChannelStatus, DateWindow, JobReport

console = Console()

_STATUS_COLORS = {
    ChannelStatus.WRITTEN: "green",
    ChannelStatus.EMPTY: "dim",
    ChannelStatus.SKIPPED: "yellow",
    ChannelStatus.FAILED: "red",
}


# ── Banners ───────────────────────────────────────────────────────────────────

def print_banner(action: str, day: str) -> None:
    console.print()
    console.print(Panel.fit(
        f"[bold]chatdigest[/bold]  ·  {action} {day}",
        border_style="dim",
        padding=(0, 2),
    ))
    console.print()


def print_window(window: DateWindow) -> None:
    console.print(f"[bold]Label:[/bold]  {window.label}")
    console.print(f"[bold]After:[/bold]  {window.after.isoformat()}")
    console.print(f"[bold]Before:[/bold] {window.before.isoformat()}")
    console.print(
        f"[dim]API params: after_date={window.after_date} "
        f"before_date={window.before_date}[/dim]"
    )


# ── Job results ───────────────────────────────────────────────────────────────

def print_report(report: JobReport) -> None:
    if not report.results:
        console.print("[dim]No channels processed.[/dim]")
        return

    table = Table(
        show_header=True,
        header_style="bold",
        box=None,
        padding=(0, 1),
        show_edge=False,
    )
    table.add_column("Channel", style="cyan", min_width=14, no_wrap=True)
    table.add_column("Status", width=8, no_wrap=True)
    table.add_column("Msgs", width=5, no_wrap=True, justify="right")
    table.add_column("Output", min_width=24)

    for r in report.results:
        if r.status == ChannelStatus.FAILED:
            detail = Text(r.error or "", style="red")
        else:
            detail = Text(str(r.path) if r.path else "—", style="dim")
        table.add_row(
            f"#{r.channel}",
            Text(r.status.value, style=_STATUS_COLORS.get(r.status, "white")),
            str(r.message_count) if r.message_count else "—",
            detail,
        )

    console.print(table)
    console.print()

    written = len(report.written)
    failed = len(report.failed)
    print_success(f"{written} file{'s' if written != 1 else ''} written for {report.day}")
    if failed:
        print_warn(f"{failed} channel{'s' if failed != 1 else ''} failed — re-run to retry")


# ── Day list ──────────────────────────────────────────────────────────────────

def print_day_list(rows: list[tuple[str, int, int]]) -> None:
    if not rows:
        console.print("[dim]No transcripts found. Run 'chatdigest collect' first.[/dim]")
        return

    table = Table(
        show_header=True,
        header_style="bold",
        box=None,
        padding=(0, 1),
        show_edge=False,
    )
    table.add_column("Day", width=12, no_wrap=True)
    table.add_column("Transcripts", width=11, justify="right")
    table.add_column("Summaries", width=9, justify="right")

    for day, transcripts, summaries in rows:
        table.add_row(day, str(transcripts), str(summaries) if summaries else "[dim]—[/dim]")

    console.print(table)


def print_markdown(text: str, title: Optional[str] = None) -> None:
    if title:
        console.print(f"[dim]{title}[/dim]")
        console.print()
    console.print(Markdown(text))


# ── Doctor ────────────────────────────────────────────────────────────────────

def print_check(label: str, ok: bool, note: str = "") -> None:
    icon = "[green]✓[/green]" if ok else "[red]✗[/red]"
    line = f"  {icon}  {label}"
    if note:
        line += f"  [dim]{note}[/dim]"
    console.print(line)


# ── Utility ───────────────────────────────────────────────────────────────────

def print_error(msg: str) -> None:
    console.print(f"\n[bold red]Error:[/bold red] {msg}\n")


def print_success(msg: str) -> None:
    console.print(f"[bold green]✓[/bold green]  {msg}")


def print_warn(msg: str) -> None:
    console.print(f"[yellow]⚠[/yellow]   {msg}")


def print_info(msg: str) -> None:
    console.print(f"[dim]{msg}[/dim]")
