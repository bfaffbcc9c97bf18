"""
Layered configuration for chatdigest.
Priority: defaults → ~/.chatdigest/config.yaml → environment variables
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional

import yaml
from pydantic import BaseModel, Field

from .errors import ConfigError

CONFIG_DIR = Path.home() / ".chatdigest"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

DEFAULT_CHANNELS = [
    "general",
    "coding",
    "bear-agency",
    "bears-only",
    "beramonium",
    "consciousness",
]


class ChatConfig(BaseModel):
    api_base: str = "https://chat.roffhenryaidev.cc/api"
    token_file: str = "~/.chat-token"
    channels: list[str] = Field(default_factory=lambda: list(DEFAULT_CHANNELS))
    limit: int = 500
    timeout: float = 30.0

    @property
    def token_path(self) -> Path:
        return Path(self.token_file).expanduser()


class StorageConfig(BaseModel):
    logs_dir: str = "~/chat-knowledge/chat-logs"
    summaries_dir: str = "~/chat-knowledge/chat-summaries"

    @property
    def logs_path(self) -> Path:
        return Path(self.logs_dir).expanduser()

    @property
    def summaries_path(self) -> Path:
        return Path(self.summaries_dir).expanduser()


class SummaryConfig(BaseModel):
    min_messages: int = 3


class DisplayConfig(BaseModel):
    log_level: str = "INFO"


class Config(BaseModel):
    chat: ChatConfig = Field(default_factory=ChatConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    # Convenience proxies
    @property
    def logs_path(self) -> Path:
        return self.storage.logs_path

    @property
    def summaries_path(self) -> Path:
        return self.storage.summaries_path

    @property
    def channels(self) -> list[str]:
        return self.chat.channels


def load_config(path: Optional[Path] = None) -> Config:
    """Load config from file with safe defaults for any missing key."""
    config_file = path or CONFIG_FILE
    raw: dict = {}

    if config_file.exists():
        try:
            with open(config_file, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read config file {config_file}: {exc}") from exc
        if isinstance(loaded, dict):
            raw = loaded

    # Environment variable overrides (CHATDIGEST_KEY format)
    _apply_env_overrides(raw)

    return Config(**raw)


def _apply_env_overrides(raw: dict) -> None:
    mappings = {
        "CHATDIGEST_API_BASE": ("chat", "api_base"),
        "CHATDIGEST_TOKEN_FILE": ("chat", "token_file"),
        "CHATDIGEST_LOGS_DIR": ("storage", "logs_dir"),
        "CHATDIGEST_SUMMARIES_DIR": ("storage", "summaries_dir"),
        "CHATDIGEST_LOG_LEVEL": ("display", "log_level"),
    }
    for env_key, (section, key) in mappings.items():
        val = os.getenv(env_key)
        if val:
            raw.setdefault(section, {})[key] = val

    channels = os.getenv("CHATDIGEST_CHANNELS")
    if channels:
        raw.setdefault("chat", {})["channels"] = [
            c.strip() for c in channels.split(",") if c.strip()
        ]


# ── Token provider ────────────────────────────────────────────────────────────

TokenProvider = Callable[[], str]


def make_token_provider(chat: ChatConfig) -> TokenProvider:
    """
    Build a callable returning the API bearer token.

    CHATDIGEST_TOKEN wins over the token file. The token is read lazily so
    commands that never talk to the API do not need one.
    """
    def _provide() -> str:
        token = os.getenv("CHATDIGEST_TOKEN", "").strip()
        if token:
            return token

        path = chat.token_path
        try:
            token = path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read API token from {path}: {exc}") from exc
        if not token:
            raise ConfigError(f"API token file {path} is empty")
        return token

    return _provide
