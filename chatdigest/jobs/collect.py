"""
Daily collection: fetch every configured channel for the collection window
and save one transcript per channel.

Channels are processed one at a time. A failure in one channel is logged and
recorded; the remaining channels still run. Creating the day's output
directory happens before the loop and is fatal when it fails.
"""
from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Optional

from ..integrations.chat_api import ChatClient
from ..storage.files import TranscriptStore
from ..storage.models import ChannelResult, ChannelStatus, DateWindow, JobReport
from ..transcript.codec import encode, to_message
from .window import compute_window

logger = logging.getLogger(__name__)


class Collector:
    def __init__(
        self,
        client: ChatClient,
        store: TranscriptStore,
        channels: list[str],
        tz: Optional[tzinfo] = None,
    ):
        self.client = client
        self.store = store
        self.channels = channels
        self.tz = tz

    def run(self, now: datetime) -> JobReport:
        window = compute_window(now)
        report = JobReport(day=window.label)

        self.store.ensure_transcripts_dir(window.label)
        logger.info(f"Collecting transcripts for {window.label}")
        logger.info(f"Range: {window.after.isoformat()} to {window.before.isoformat()}")

        for channel in self.channels:
            report.results.append(self.collect_channel(channel, window, now))

        logger.info(
            f"Collection complete: {len(report.written)} written, "
            f"{len(report.failed)} failed"
        )
        return report

    def collect_channel(self, channel: str, window: DateWindow, now: datetime) -> ChannelResult:
        logger.info(f"Fetching #{channel}...")
        try:
            raw_messages = self.client.fetch_messages(channel, window)
            if not raw_messages:
                logger.info(f"No messages in #{channel}")
                return ChannelResult(channel=channel, status=ChannelStatus.EMPTY)

            messages = [to_message(raw, self.tz) for raw in raw_messages]
            transcript = encode(channel, messages, now)
            path = self.store.write_transcript(window.label, channel, transcript)
        except Exception as exc:
            logger.error(f"Error collecting #{channel}: {exc}")
            return ChannelResult(channel=channel, status=ChannelStatus.FAILED, error=str(exc))

        logger.info(f"#{channel}: {len(messages)} messages → {path}")
        return ChannelResult(
            channel=channel,
            status=ChannelStatus.WRITTEN,
            message_count=len(messages),
            path=path,
        )
