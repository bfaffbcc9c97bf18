"""Tests for the heuristic signal classifier."""

import pytest

from chatdigest.extraction import rules
from chatdigest.extraction.classifier import KeywordClassifier, classify
from chatdigest.storage.models import Message, SignalEntry


def _msg(content: str, author: str = "henry", time: str = "10:00") -> Message:
    return Message(time=time, author=author, content=content)


class TestRules:
    """Tests for the individual keyword rules."""

    @pytest.mark.parametrize(
        "content",
        [
            "We decided to move on",
            "podjęliśmy decyzję",
            "Let's do it",
            "ok we'll try",
            "so: monday",
            "Plan: ship",
            "done ✓",
            "merged ✅",
        ],
    )
    def test_decision_triggers(self, content):
        assert rules.is_decision(content.lower())

    @pytest.mark.parametrize(
        "content",
        ["TODO: write docs", "new task", "actionable", "I'll check", "it will rain", "we should try"],
    )
    def test_action_triggers(self, content):
        assert rules.is_action(content.lower())

    def test_trigger_needs_trailing_space(self):
        assert not rules.is_action("i'll")
        assert not rules.is_decision("let's")

    def test_url_stops_at_whitespace_and_paren(self):
        urls = rules.find_urls("see (https://a.com/x) and http://b.org/y?z=1 ok")
        assert urls == ["https://a.com/x", "http://b.org/y?z=1"]


class TestClassify:
    """Tests for KeywordClassifier.classify."""

    def test_sample_conversation(self, sample_messages):
        signals = classify(sample_messages)

        assert [e.author for e in signals.decisions] == ["paddington"]
        assert [e.excerpt for e in signals.actions] == ["I'll update the runbook, todo for today"]
        assert [e.url for e in signals.links] == [
            "https://example.com/runbook",
            "https://example.com/faq",
        ]
        assert signals.questions == [
            SignalEntry(author="henry", excerpt="Morning! Anyone looked at the deploy?")
        ]

    def test_message_in_several_categories(self):
        content = "We decided: todo list goes live"
        signals = classify([_msg(content)])
        assert signals.decisions[0].excerpt == content
        assert signals.actions[0].excerpt == content

    def test_excerpt_keeps_original_case(self):
        signals = classify([_msg("DECIDED: Use Postgres")])
        assert signals.decisions[0].excerpt == "DECIDED: Use Postgres"

    def test_excerpt_lengths(self):
        content = "decided todo? " + "x" * 400
        signals = classify([_msg(content)])
        assert len(signals.decisions[0].excerpt) == 200
        assert len(signals.actions[0].excerpt) == 200
        assert len(signals.questions[0].excerpt) == 150
        assert signals.questions[0].excerpt == content[:150]

    def test_url_query_is_not_a_question(self):
        signals = classify([_msg("check https://x.com/search?q=1")])
        assert signals.questions == []
        assert signals.links == [SignalEntry(author="henry", url="https://x.com/search?q=1")]

    def test_http_mention_suppresses_question(self):
        assert classify([_msg("Is the HTTP server down?")]).questions == []

    def test_link_order_within_and_across_messages(self):
        messages = [
            _msg("https://one.com https://two.com", author="a"),
            _msg("nothing here", author="b"),
            _msg("http://three.com", author="c"),
        ]
        signals = classify(messages)
        assert [(e.author, e.url) for e in signals.links] == [
            ("a", "https://one.com"),
            ("a", "https://two.com"),
            ("c", "http://three.com"),
        ]
        assert all(e.excerpt == "" for e in signals.links)

    def test_order_preserved(self):
        messages = [_msg(f"decided #{i}", author=f"user{i}") for i in range(7)]
        signals = classify(messages)
        assert [e.author for e in signals.decisions] == [f"user{i}" for i in range(7)]

    def test_duplicates_not_collapsed(self):
        signals = classify([_msg("todo"), _msg("todo")])
        assert len(signals.actions) == 2

    def test_plain_chatter_has_no_signals(self):
        signals = KeywordClassifier().classify([_msg("good morning"), _msg("hi bears")])
        assert signals.is_empty
