"""Human-readable trace lines for applied events.

The transition engine is pure; this module turns a
:class:`~fetchstate.machine.transitions.TransitionResult` into a log
record. :func:`log_transition` is the hook installed by
:class:`~fetchstate.machine.runner.StateMachine` when tracing is enabled.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import assert_never

from fetchstate.machine.transitions import TransitionResult
from fetchstate.models import Error, Idle, Loading, Success

_logger = logging.getLogger(__name__)

TransitionHook = Callable[[TransitionResult], None]
"""Callable invoked with every result produced by a dispatch."""


def describe(result: TransitionResult) -> str:
    """Format the trace line for *result*."""
    src = result.previous.type.label
    if not result.accepted:
        return f"Invalid event '{result.event.type}' for {src} state. Staying {src}."

    nxt = result.next
    if isinstance(nxt, Loading):
        return f"Transitioning from {src} to Loading for ID: {nxt.data_id}"
    if isinstance(nxt, Success):
        return f"Transitioning from {src} to Success with data: {nxt.data}"
    if isinstance(nxt, Error):
        return f"Transitioning from {src} to Error: {nxt.message}"
    if isinstance(nxt, Idle):
        return f"Transitioning from {src} to Idle."
    assert_never(nxt)


def log_transition(result: TransitionResult) -> None:
    """Log *result* at INFO when it moved the machine, WARNING when ignored."""
    level = logging.INFO if result.accepted else logging.WARNING
    if _logger.isEnabledFor(level):
        _logger.log(level, "%s", describe(result))
