"""Domain errors."""

from __future__ import annotations


class ArgsLessonError(Exception):
    """Base class for errors raised by the core services."""


class NonIntegerArgumentError(ArgsLessonError, ValueError):
    """A command-line token is not a valid base-10 signed integer.

    Subclasses `ValueError` so callers that only know the builtin parse
    failure still catch it.
    """

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(reason)
        self.token = token
        self.reason = reason
