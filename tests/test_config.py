"""Tests for configuration loading and the token provider."""

from pathlib import Path

import pytest

from chatdigest.config import (
    DEFAULT_CHANNELS,
    ChatConfig,
    Config,
    load_config,
    make_token_provider,
)
from chatdigest.errors import ConfigError


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_when_file_missing(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config.channels == DEFAULT_CHANNELS
        assert config.chat.limit == 500
        assert config.summary.min_messages == 3
        assert config.logs_path == Path("~/chat-knowledge/chat-logs").expanduser()

    def test_yaml_values_override_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "chat:\n"
            "  channels: [general, random]\n"
            "  limit: 50\n"
            "storage:\n"
            f"  logs_dir: {tmp_path / 'logs'}\n"
        )
        config = load_config(path)
        assert config.channels == ["general", "random"]
        assert config.chat.limit == 50
        assert config.logs_path == tmp_path / "logs"
        # Untouched sections keep their defaults
        assert config.display.log_level == "INFO"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("storage:\n  summaries_dir: /from/file\n")
        monkeypatch.setenv("CHATDIGEST_SUMMARIES_DIR", str(tmp_path / "env"))
        monkeypatch.setenv("CHATDIGEST_CHANNELS", "a, b ,,c")
        monkeypatch.setenv("CHATDIGEST_LOG_LEVEL", "DEBUG")

        config = load_config(path)
        assert config.summaries_path == tmp_path / "env"
        assert config.channels == ["a", "b", "c"]
        assert config.display.log_level == "DEBUG"

    def test_non_mapping_file_ignored(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        assert load_config(path) == Config()

    def test_broken_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("chat: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(path)


class TestTokenProvider:
    """Tests for make_token_provider."""

    def test_reads_and_strips_token_file(self, tmp_path):
        token_file = tmp_path / "token"
        token_file.write_text("  secret-token\n")
        provide = make_token_provider(ChatConfig(token_file=str(token_file)))
        assert provide() == "secret-token"

    def test_env_token_wins(self, tmp_path, monkeypatch):
        token_file = tmp_path / "token"
        token_file.write_text("from-file")
        monkeypatch.setenv("CHATDIGEST_TOKEN", "from-env")
        assert make_token_provider(ChatConfig(token_file=str(token_file)))() == "from-env"

    def test_missing_file_raises(self, tmp_path):
        provide = make_token_provider(ChatConfig(token_file=str(tmp_path / "nope")))
        with pytest.raises(ConfigError):
            provide()

    def test_empty_file_raises(self, tmp_path):
        token_file = tmp_path / "token"
        token_file.write_text("\n")
        with pytest.raises(ConfigError):
            make_token_provider(ChatConfig(token_file=str(token_file)))()

    def test_token_read_lazily(self, tmp_path):
        token_file = tmp_path / "token"
        provide = make_token_provider(ChatConfig(token_file=str(token_file)))
        token_file.write_text("late")
        assert provide() == "late"
