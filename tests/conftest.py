"""Test configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from chatdigest.storage.files import TranscriptStore
from chatdigest.storage.models import Message, RawMessage


@pytest.fixture
def store(tmp_path):
    """A transcript store rooted in a temporary directory."""
    return TranscriptStore(tmp_path / "chat-logs", tmp_path / "chat-summaries")


@pytest.fixture
def sample_messages():
    """A short channel conversation covering every signal category."""
    return [
        Message(time="09:05", author="henry", content="Morning! Anyone looked at the deploy?"),
        Message(time="09:07", author="paddington", content="Let's ship it after lunch ✅"),
        Message(time="09:10", author="henry", content="I'll update the runbook, todo for today"),
        Message(
            time="09:12",
            author="paddington",
            content="Docs: https://example.com/runbook and (https://example.com/faq)",
        ),
    ]


@pytest.fixture
def raw_messages():
    """API records as the chat collaborator returns them."""
    return [
        RawMessage(
            created_at=datetime(2024, 3, 14, 8, 5, tzinfo=timezone.utc),
            user_id="u-1",
            display_name="henry",
            content="first",
            id="1",
        ),
        RawMessage(
            created_at=datetime(2024, 3, 14, 21, 40, tzinfo=timezone.utc),
            user_id="u-2",
            content="second\nwith two lines",
            id="2",
        ),
    ]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's CHATDIGEST_* environment out of tests."""
    for key in (
        "CHATDIGEST_API_BASE",
        "CHATDIGEST_TOKEN",
        "CHATDIGEST_TOKEN_FILE",
        "CHATDIGEST_CHANNELS",
        "CHATDIGEST_LOGS_DIR",
        "CHATDIGEST_SUMMARIES_DIR",
        "CHATDIGEST_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
