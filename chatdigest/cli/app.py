"""
chatdigest CLI — all commands.

Commands:
  collect       Fetch yesterday's messages for every channel (run at 03:00)
  summarize     Summarize a day's transcripts (default: today's folder)
  window        Show the collection window for the current time
  list          List collected days
  show          Print a stored summary or transcript
  doctor        Diagnose setup issues
  config show   Print current configuration
  config path   Show path to the config file
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

import typer
import yaml
from rich.console import Console

from ..config import CONFIG_FILE, Config, load_config, make_token_provider
from ..errors import ChatDigestError
from ..integrations.chat_api import ChatClient
from ..jobs.collect import Collector
from ..jobs.summarize import Summarizer
from ..jobs.window import compute_window
from ..storage.files import TranscriptStore
from . import display

app = typer.Typer(
    name="chatdigest",
    help="Daily chat transcripts and summaries.",
    no_args_is_help=True,
    add_completion=False,
    pretty_exceptions_enable=False,
)
console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load() -> Config:
    try:
        config = load_config()
    except ChatDigestError as exc:
        display.print_error(str(exc))
        raise typer.Exit(1)
    _setup_logging(config.display.log_level)
    return config


def _get_store(config: Config) -> TranscriptStore:
    return TranscriptStore(config.logs_path, config.summaries_path)


def _parse_day(value: Optional[str]) -> str:
    if value is None:
        return date.today().isoformat()
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not a YYYY-MM-DD date")


# ── collect ───────────────────────────────────────────────────────────────────

@app.command()
def collect() -> None:
    """Fetch messages for the last collection window and save transcripts."""
    config = _load()
    now = datetime.now()
    window = compute_window(now)
    display.print_banner("collecting", window.label)

    try:
        with ChatClient.from_config(config.chat, make_token_provider(config.chat)) as client:
            collector = Collector(client, _get_store(config), config.channels)
            report = collector.run(now)
    except ChatDigestError as exc:
        logger.error(f"Fatal error: {exc}")
        display.print_error(str(exc))
        raise typer.Exit(1)

    display.print_report(report)


# ── summarize ─────────────────────────────────────────────────────────────────

@app.command()
def summarize(
    day: Optional[str] = typer.Argument(
        None, help="Day to summarize as YYYY-MM-DD (default: today)"
    ),
) -> None:
    """Summarize every channel transcript saved for a day."""
    target = _parse_day(day)
    config = _load()
    display.print_banner("summarizing", target)

    summarizer = Summarizer(_get_store(config), min_messages=config.summary.min_messages)
    try:
        report = summarizer.run(target)
    except ChatDigestError as exc:
        logger.error(f"Fatal error: {exc}")
        display.print_error(str(exc))
        raise typer.Exit(1)

    if not report.found:
        display.print_info(f"No logs found for {target}")
        return
    display.print_report(report)


# ── window ────────────────────────────────────────────────────────────────────

@app.command()
def window() -> None:
    """Show the window 'collect' would fetch right now."""
    display.print_window(compute_window(datetime.now()))


# ── list ──────────────────────────────────────────────────────────────────────

@app.command(name="list")
def list_days(
    limit: int = typer.Option(14, "--limit", "-n", help="Number of days to show"),
) -> None:
    """List collected days with transcript and summary counts."""
    store = _get_store(_load())
    rows = [
        (day, len(store.list_channels(day)), store.count_summaries(day))
        for day in store.list_days()[:limit]
    ]
    display.print_day_list(rows)


# ── show ──────────────────────────────────────────────────────────────────────

@app.command()
def show(
    day: str = typer.Argument(..., help="Day as YYYY-MM-DD"),
    channel: str = typer.Argument(..., help="Channel name"),
    transcript: bool = typer.Option(
        False, "--transcript", "-t", help="Show the raw transcript instead of the summary"
    ),
) -> None:
    """Print a stored summary (or transcript) for one channel."""
    target = _parse_day(day)
    store = _get_store(_load())
    channel = channel.lstrip("#")

    path = store.transcript_path(target, channel) if transcript else store.summary_path(target, channel)
    if not path.exists():
        display.print_error(f"Nothing stored at {path}")
        raise typer.Exit(1)

    try:
        text = store.read_transcript(target, channel) if transcript else store.read_summary(target, channel)
    except ChatDigestError as exc:
        display.print_error(str(exc))
        raise typer.Exit(1)
    display.print_markdown(text, title=str(path))


# ── doctor ────────────────────────────────────────────────────────────────────

@app.command()
def doctor() -> None:
    """Diagnose chatdigest setup — token, folders and API."""
    config = _load()
    console.print("\n[bold]chatdigest doctor[/bold]\n")
    all_ok = True

    # Token
    token_ok = True
    try:
        make_token_provider(config.chat)()
    except ChatDigestError as exc:
        token_ok = False
        display.print_check("API token", False, str(exc))
    else:
        display.print_check("API token", True)
    all_ok = all_ok and token_ok

    # Folders
    for label, path in (("Logs folder", config.logs_path), ("Summaries folder", config.summaries_path)):
        exists = path.is_dir()
        display.print_check(
            f"{label} ({path})",
            exists,
            "will be created on first run" if not exists else "",
        )

    # API
    if token_ok:
        with ChatClient.from_config(config.chat, make_token_provider(config.chat)) as client:
            api_ok = client.ping()
        display.print_check(
            f"API reachable ({config.chat.api_base})",
            api_ok,
            "no response" if not api_ok else "",
        )
        all_ok = all_ok and api_ok

    display.print_check(f"Channels configured ({len(config.channels)})", bool(config.channels))
    all_ok = all_ok and bool(config.channels)

    # Config
    config_exists = CONFIG_FILE.exists()
    display.print_check(
        f"Config file ({CONFIG_FILE})",
        config_exists,
        "using defaults" if not config_exists else "",
    )

    console.print()
    if all_ok:
        display.print_success("All checks passed. Run 'chatdigest collect' to fetch transcripts.")
    else:
        display.print_error("Some checks failed. Fix issues above, then re-run 'chatdigest doctor'.")


# ── config ────────────────────────────────────────────────────────────────────

config_app = typer.Typer(name="config", help="View configuration.", no_args_is_help=True)
app.add_typer(config_app)


@config_app.command("show")
def config_show() -> None:
    """Print current configuration."""
    config = _load()
    console.print(yaml.dump(config.model_dump(), default_flow_style=False))


@config_app.command("path")
def config_path() -> None:
    """Show path to the config file."""
    console.print(str(CONFIG_FILE))
