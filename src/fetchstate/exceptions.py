"""Custom exception hierarchy for fetchstate."""

from __future__ import annotations


class FetchStateError(Exception):
    """Base exception for all fetchstate errors."""


class FetchStateConfigError(FetchStateError):
    """Invalid or missing configuration."""


class TransitionTableError(FetchStateError):
    """The transition table does not cover every (state, event) pair.

    Raised at import time of :mod:`fetchstate.machine.transitions` when a
    pair is missing or a successor names a tag outside :class:`StateType`.
    """

    def __init__(self, message: str, *, missing: tuple[tuple[str, str], ...] = ()) -> None:
        self.missing = missing
        super().__init__(message)
