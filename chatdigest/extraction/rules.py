"""
Keyword rules for the heuristic classifier.

All triggers are matched as plain substrings of the lower-cased message,
so "actionable" counts as an action and "also:" as a decision. That is
accepted noise for a daily skim.
"""
from __future__ import annotations

import re

# "decyzj" is the Polish stem of decyzja / decyzje / decyzji
DECISION_TRIGGERS: tuple[str, ...] = (
    "decyzj",
    "decided",
    "let's ",
    "we'll ",
    "so:",
    "plan:",
    "✓",
    "✅",
)

ACTION_TRIGGERS: tuple[str, ...] = (
    "todo",
    "task",
    "action",
    "i'll ",
    "will ",
    "should ",
)

URL_PATTERN = re.compile(r"https?://[^\s)]+")

QUESTION_MARK = "?"
# A "?" inside a URL query string is not a question
QUESTION_EXCLUDE = "http"

DECISION_EXCERPT_CHARS = 200
ACTION_EXCERPT_CHARS = 200
QUESTION_EXCERPT_CHARS = 150


def matches_any(lowered: str, triggers: tuple[str, ...]) -> bool:
    return any(t in lowered for t in triggers)


def is_decision(lowered: str) -> bool:
    return matches_any(lowered, DECISION_TRIGGERS)


def is_action(lowered: str) -> bool:
    return matches_any(lowered, ACTION_TRIGGERS)


def is_question(lowered: str) -> bool:
    return QUESTION_MARK in lowered and QUESTION_EXCLUDE not in lowered


def find_urls(content: str) -> list[str]:
    return URL_PATTERN.findall(content)
