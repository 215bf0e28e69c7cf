"""The transition engine.

:func:`transition` is a pure function from (current state, event) to the
next state. Events that are not meaningful for the current state are
ignored: the current value is returned unchanged. Nothing here logs;
tracing is attached by :mod:`fetchstate.machine.trace` through
:func:`step` results.

:data:`TRANSITION_TABLE` restates the same machine as a lookup keyed by
(state tag, event tag). It is checked for completeness when the module
is imported, and the test-suite checks it agrees with :func:`transition`
for every pair.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import assert_never

from pydantic import BaseModel, ConfigDict

from fetchstate.exceptions import TransitionTableError
from fetchstate.models import (
    Error,
    Event,
    EventType,
    Idle,
    Load,
    Loading,
    Reject,
    Reset,
    Resolve,
    State,
    StateType,
    Success,
    parse_event,
    parse_state,
)


def transition(current: State, event: Event) -> State:
    """Return the state that follows *current* once *event* is applied."""
    if isinstance(current, Idle):
        if isinstance(event, Load):
            return Loading(data_id=event.data_id)
        return current

    if isinstance(current, Loading):
        if isinstance(event, Resolve):
            return Success(data=event.data)
        if isinstance(event, Reject):
            return Error(message=event.message)
        return current

    if isinstance(current, Success):
        if isinstance(event, Reset):
            return Idle()
        return current

    if isinstance(current, Error):
        if isinstance(event, Reset):
            return Idle()
        return current

    assert_never(current)


# ------------------------------------------------------------------
# Tabular view
# ------------------------------------------------------------------

_ACCEPTED: dict[tuple[StateType, EventType], StateType] = {
    (StateType.IDLE, EventType.LOAD): StateType.LOADING,
    (StateType.LOADING, EventType.RESOLVE): StateType.SUCCESS,
    (StateType.LOADING, EventType.REJECT): StateType.ERROR,
    (StateType.SUCCESS, EventType.RESET): StateType.IDLE,
    (StateType.ERROR, EventType.RESET): StateType.IDLE,
}


def _build_table(
    accepted: Mapping[tuple[StateType, EventType], StateType],
) -> dict[tuple[StateType, EventType], StateType]:
    """Fill every pair not in *accepted* with a self-loop."""
    table: dict[tuple[StateType, EventType], StateType] = {}
    for state_type in StateType:
        for event_type in EventType:
            table[(state_type, event_type)] = accepted.get((state_type, event_type), state_type)
    return table


def check_table(table: Mapping[tuple[StateType, EventType], StateType]) -> None:
    """Raise :class:`TransitionTableError` unless *table* covers all pairs with known tags."""
    missing = tuple(
        (str(state_type), str(event_type))
        for state_type in StateType
        for event_type in EventType
        if (state_type, event_type) not in table
    )
    if missing:
        raise TransitionTableError(
            f"transition table is missing {len(missing)} of {len(StateType) * len(EventType)} pairs",
            missing=missing,
        )
    for key, successor in table.items():
        if not isinstance(successor, StateType):
            raise TransitionTableError(f"transition {key} names unknown state {successor!r}")


TRANSITION_TABLE: Mapping[tuple[StateType, EventType], StateType] = MappingProxyType(_build_table(_ACCEPTED))
"""Successor tag for every (state tag, event tag) pair."""

check_table(TRANSITION_TABLE)


def allowed_events(state: State | StateType) -> frozenset[EventType]:
    """Events that move *state* (a state value or tag) somewhere else."""
    state_type = state if isinstance(state, StateType) else state.type
    return frozenset(event_type for (src, event_type) in _ACCEPTED if src == state_type)


def is_accepted(state: State, event: Event) -> bool:
    """Return ``True`` when *event* is not ignored in *state*."""
    return (state.type, event.type) in _ACCEPTED


# ------------------------------------------------------------------
# Step results
# ------------------------------------------------------------------


class TransitionResult(BaseModel):
    """One applied event: where the machine was, what arrived, where it went."""

    model_config = ConfigDict(frozen=True)

    previous: State
    event: Event
    next: State
    accepted: bool


def step(current: State, event: Event) -> TransitionResult:
    """Apply *event* to *current* and describe the outcome.

    Both values pass through the model layer first, so a wire dict is
    dispatched as the variant it names. Raises
    :class:`pydantic.ValidationError` for anything that is not a state or
    an event.
    """
    current = parse_state(current)
    event = parse_event(event)
    next_state = transition(current, event)
    return TransitionResult(
        previous=current,
        event=event,
        next=next_state,
        accepted=next_state is not current,
    )
