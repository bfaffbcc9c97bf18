"""
Daily summarization: read each channel transcript for a day, classify its
messages and write a Markdown summary next to the other summaries.

Channels with fewer than `min_messages` messages get no summary file.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..extraction.classifier import Classifier, KeywordClassifier
from ..integrations.markdown_notes import render_summary
from ..storage.files import TranscriptStore
from ..storage.models import ChannelResult, ChannelStatus, JobReport
from ..transcript.codec import decode

logger = logging.getLogger(__name__)

DEFAULT_MIN_MESSAGES = 3


class Summarizer:
    def __init__(
        self,
        store: TranscriptStore,
        classifier: Optional[Classifier] = None,
        min_messages: int = DEFAULT_MIN_MESSAGES,
    ):
        self.store = store
        self.classifier = classifier or KeywordClassifier()
        self.min_messages = min_messages

    def run(self, day: str) -> JobReport:
        report = JobReport(day=day)

        if not self.store.has_transcripts(day):
            logger.info(f"No logs found for {day}")
            report.found = False
            return report

        self.store.ensure_summaries_dir(day)
        logger.info(f"Summarizing transcripts for {day}")

        for channel in self.store.list_channels(day):
            report.results.append(self.summarize_channel(day, channel))

        logger.info(
            f"Summarization complete: {len(report.written)} written, "
            f"{len(report.failed)} failed"
        )
        return report

    def summarize_channel(self, day: str, channel: str) -> ChannelResult:
        try:
            messages = decode(self.store.read_transcript(day, channel))

            if len(messages) < self.min_messages:
                logger.info(f"Skipping #{channel} ({len(messages)} messages)")
                return ChannelResult(
                    channel=channel,
                    status=ChannelStatus.SKIPPED,
                    message_count=len(messages),
                )

            signals = self.classifier.classify(messages)
            summary = render_summary(channel, len(messages), signals)
            path = self.store.write_summary(day, channel, summary)
        except Exception as exc:
            logger.error(f"Error processing #{channel}: {exc}")
            return ChannelResult(channel=channel, status=ChannelStatus.FAILED, error=str(exc))

        logger.info(f"#{channel}: {len(messages)} messages → summary")
        return ChannelResult(
            channel=channel,
            status=ChannelStatus.WRITTEN,
            message_count=len(messages),
            path=path,
        )
