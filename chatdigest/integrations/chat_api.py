"""
Chat API client: fetches one channel's messages for a collection window.

Uses the REST API via httpx. The API filters by whole days, so the window
is sent as date-only after_date / before_date parameters.
No retries: a failed channel is simply missing from that day's output.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from ..config import ChatConfig, TokenProvider
from ..errors import FetchFailure, ParseFailure
from ..storage.models import DateWindow, RawMessage

logger = logging.getLogger(__name__)


class ChatClient:
    def __init__(
        self,
        api_base: str,
        token: str,
        limit: int = 500,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.limit = limit
        self._client = httpx.Client(
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls,
        chat: ChatConfig,
        token_provider: TokenProvider,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "ChatClient":
        return cls(
            chat.api_base,
            token_provider(),
            limit=chat.limit,
            timeout=chat.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ChatClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def messages_url(self, channel: str) -> str:
        return f"{self.api_base}/channels/{channel}/messages"

    def fetch_messages(self, channel: str, window: DateWindow) -> list[RawMessage]:
        """
        Fetch messages posted in `channel` during `window`, oldest first
        as returned by the API.

        Raises FetchFailure on transport errors and non-2xx responses,
        ParseFailure when the body is not the expected JSON.
        """
        params = {
            "after_date": window.after_date,
            "before_date": window.before_date,
            "limit": self.limit,
        }
        try:
            response = self._client.get(self.messages_url(channel), params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchFailure(f"Request for #{channel} failed: {exc}") from exc

        if not response.is_success:
            raise FetchFailure(
                f"HTTP {response.status_code}: {response.text[:300]}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ParseFailure(f"Failed to parse JSON: {exc}") from exc

        records = parse_message_list(body)
        logger.debug(f"#{channel}: {len(records)} messages from API")
        return records

    def ping(self) -> bool:
        """True when the API answers at all (any HTTP status)."""
        try:
            self._client.get(self.api_base)
            return True
        except (httpx.HTTPError, httpx.InvalidURL):
            return False


# ── Response parsing ──────────────────────────────────────────────────────────

def parse_message_list(body: Any) -> list[RawMessage]:
    """Accept either a bare list of records or {"messages": [...]}."""
    if isinstance(body, dict) and "messages" in body:
        body = body["messages"]
    if not isinstance(body, list):
        raise ParseFailure(f"Expected a list of messages, got {type(body).__name__}")
    return [parse_record(r) for r in body]


def parse_record(record: Any) -> RawMessage:
    if not isinstance(record, dict):
        raise ParseFailure(f"Expected a message object, got {type(record).__name__}")

    created_raw = record.get("createdAt")
    if created_raw is None:
        raise ParseFailure(f"Message {record.get('id', '?')} has no createdAt")

    # An empty author would produce a heading decode() cannot match
    user_id = record.get("userId")
    user_id = str(user_id).strip() if user_id is not None else ""
    return RawMessage(
        created_at=parse_instant(created_raw),
        user_id=user_id or "unknown",
        display_name=record.get("displayName") or None,
        content=record.get("content") or "",
        id=str(record["id"]) if record.get("id") is not None else None,
    )


def parse_instant(value: Any) -> datetime:
    """ISO-8601 string (a trailing Z is accepted) or epoch milliseconds."""
    if isinstance(value, bool):
        raise ParseFailure(f"Invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            instant = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ParseFailure(f"Invalid timestamp: {value!r}") from exc
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return instant
    raise ParseFailure(f"Invalid timestamp: {value!r}")
