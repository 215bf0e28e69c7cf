"""Single-slot state machine.

:func:`~fetchstate.machine.transitions.transition` needs no shared
state. :class:`StateMachine` is for callers that want one object to own
"the" current state; it serializes access to that slot.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict

from fetchstate.config import FsmConfig
from fetchstate.machine.trace import TransitionHook, log_transition
from fetchstate.machine.transitions import TransitionResult, allowed_events, step
from fetchstate.models import Event, EventType, Idle, State, parse_state

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class HistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: TransitionResult
    observed_at: datetime


class StateMachine:
    """Owns the current state and applies events to it one at a time.

    Given the same initial state and sequence of events, the machine
    always ends in the same state with the same history.
    """

    def __init__(
        self,
        initial: State | None = None,
        *,
        config: FsmConfig | None = None,
        hooks: Iterable[TransitionHook] = (),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config or FsmConfig()
        self._clock = clock
        self._lock = threading.Lock()
        self._state: State = parse_state(initial) if initial is not None else Idle()
        self._history: deque[HistoryEntry] = deque(maxlen=self._config.history_limit)
        self._hooks: list[TransitionHook] = []
        if self._config.trace_enabled:
            self._hooks.append(log_transition)
        self._hooks.extend(hooks)

    @property
    def config(self) -> FsmConfig:
        return self._config

    @property
    def state(self) -> State:
        """The current state."""
        return self._state

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Recorded transitions, oldest first."""
        with self._lock:
            return tuple(self._history)

    def add_hook(self, hook: TransitionHook) -> None:
        with self._lock:
            self._hooks.append(hook)

    def allowed_events(self) -> frozenset[EventType]:
        return allowed_events(self._state)

    def dispatch(self, event: Event) -> State:
        """Apply *event* and return the new current state.

        Hooks run after the new state is committed. An exception raised
        by a hook propagates to the caller; the state is already updated.
        """
        with self._lock:
            result = step(self._state, event)
            self._state = result.next
            if self._config.history_limit:
                self._history.append(HistoryEntry(result=result, observed_at=self._clock()))
            hooks = tuple(self._hooks)

        for hook in hooks:
            hook(result)
        return result.next

    def dispatch_all(self, events: Iterable[Event]) -> State:
        """Apply *events* in order and return the final state."""
        state = self._state
        for event in events:
            state = self.dispatch(event)
        return state

    def reset_to(self, state: State) -> None:
        """Replace the current state without recording a transition.

        Raises :class:`pydantic.ValidationError` when *state* is not a state.
        """
        state = parse_state(state)
        with self._lock:
            _logger.debug("State slot replaced: %s -> %s", self._state.type, state.type)
            self._state = state
