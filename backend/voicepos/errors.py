# Overview: Exception types shared by services, routes and the CLI.

from __future__ import annotations


class CommandError(Exception):
    """Raised when a command cannot be accepted for processing."""
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class EmptyCommandError(CommandError):
    """Submission with no text; rejected before classification."""


class AmountOutOfRangeError(CommandError):
    """An amount, quantity or resulting balance the store cannot hold."""


class QueryError(ValueError):
    """400-level problem with a filter or sort argument."""


class SpeechError(Exception):
    """Base class for speech capture failures. Never touches the store."""


class UnsupportedCapabilityError(SpeechError):
    """The platform has no speech recognition support."""


class RecognitionError(SpeechError):
    """A capture session failed or produced no transcript."""
