"""
Signal classifier: sorts transcript messages into decisions, action items,
shared links and open questions.

KeywordClassifier is the rule-based implementation. Anything exposing
classify(messages) -> SignalSet can stand in for it (e.g. an LLM-backed
classifier) without touching the codec or the summary renderer.
"""
from __future__ import annotations

import logging
from typing import Iterable, Protocol

from ..storage.models import Message, SignalEntry, SignalSet
from . import rules

logger = logging.getLogger(__name__)


class Classifier(Protocol):
    def classify(self, messages: Iterable[Message]) -> SignalSet:
        ...


class KeywordClassifier:
    """
    Substring rules from `rules`. Each message is checked against every
    category independently, so one message can land in several.
    Entries keep message order; links also keep their order inside a message.
    """

    def classify(self, messages: Iterable[Message]) -> SignalSet:
        signals = SignalSet()
        count = 0

        for msg in messages:
            count += 1
            content = msg.content
            lowered = content.lower()

            if rules.is_decision(lowered):
                signals.decisions.append(
                    SignalEntry(author=msg.author, excerpt=content[:rules.DECISION_EXCERPT_CHARS])
                )

            if rules.is_action(lowered):
                signals.actions.append(
                    SignalEntry(author=msg.author, excerpt=content[:rules.ACTION_EXCERPT_CHARS])
                )

            for url in rules.find_urls(content):
                signals.links.append(SignalEntry(author=msg.author, url=url))

            if rules.is_question(lowered):
                signals.questions.append(
                    SignalEntry(author=msg.author, excerpt=content[:rules.QUESTION_EXCERPT_CHARS])
                )

        logger.debug(
            f"Classified {count} messages: {len(signals.decisions)} decisions, "
            f"{len(signals.actions)} actions, {len(signals.links)} links, "
            f"{len(signals.questions)} questions"
        )
        return signals


def classify(messages: Iterable[Message]) -> SignalSet:
    return KeywordClassifier().classify(messages)
