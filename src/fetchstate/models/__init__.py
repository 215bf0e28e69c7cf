"""State and event models."""

from fetchstate.models._base import EventType, FsmBaseModel, StateType
from fetchstate.models.event import Event, Load, Reject, Reset, Resolve, parse_event
from fetchstate.models.state import STATE_VARIANTS, Error, Idle, Loading, State, Success, parse_state, state_to_json

__all__ = [
    "Error",
    "Event",
    "EventType",
    "FsmBaseModel",
    "Idle",
    "Load",
    "Loading",
    "Reject",
    "Reset",
    "Resolve",
    "STATE_VARIANTS",
    "State",
    "StateType",
    "Success",
    "parse_event",
    "parse_state",
    "state_to_json",
]
