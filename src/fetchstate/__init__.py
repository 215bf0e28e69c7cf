"""fetchstate - Four-state fetch lifecycle machine built on discriminated unions."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyfetchstate")
except PackageNotFoundError:
    __version__ = "0+local"
from fetchstate.config import FsmConfig
from fetchstate.exceptions import FetchStateConfigError, FetchStateError, TransitionTableError
from fetchstate.machine import (
    TRANSITION_TABLE,
    HistoryEntry,
    StateMachine,
    TransitionResult,
    allowed_events,
    is_accepted,
    step,
    transition,
)
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

__all__ = [
    "__version__",
    "Error",
    "Event",
    "EventType",
    "FetchStateConfigError",
    "FetchStateError",
    "FsmConfig",
    "HistoryEntry",
    "Idle",
    "Load",
    "Loading",
    "Reject",
    "Reset",
    "Resolve",
    "State",
    "StateMachine",
    "StateType",
    "Success",
    "TRANSITION_TABLE",
    "TransitionResult",
    "TransitionTableError",
    "allowed_events",
    "is_accepted",
    "parse_event",
    "parse_state",
    "step",
    "transition",
]
