"""Transition engine, tracing and the single-slot runner.

:func:`transition` is the whole machine; everything else in this package
observes or stores its results.
"""

from fetchstate.machine.runner import HistoryEntry, StateMachine
from fetchstate.machine.trace import TransitionHook, describe, log_transition
from fetchstate.machine.transitions import (
    TRANSITION_TABLE,
    TransitionResult,
    allowed_events,
    check_table,
    is_accepted,
    step,
    transition,
)

__all__ = [
    "HistoryEntry",
    "StateMachine",
    "TRANSITION_TABLE",
    "TransitionHook",
    "TransitionResult",
    "allowed_events",
    "check_table",
    "describe",
    "is_accepted",
    "log_transition",
    "step",
    "transition",
]
