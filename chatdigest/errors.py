"""
Error types raised by the chatdigest collaborators.

Jobs catch these per channel; anything raised outside the channel loop
ends the run.
"""
from __future__ import annotations

from typing import Optional


class ChatDigestError(Exception):
    """Base class for chatdigest errors."""


class ConfigError(ChatDigestError):
    """Missing token or unreadable configuration."""


class FetchFailure(ChatDigestError):
    """Non-2xx response or transport error from the chat API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseFailure(ChatDigestError):
    """Response body or record could not be interpreted."""


class IOFailure(ChatDigestError):
    """Transcript or summary file could not be read or written."""
