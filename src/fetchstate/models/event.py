"""The four events that drive the fetch lifecycle."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from fetchstate.models._base import EventType, FsmBaseModel


class Load(FsmBaseModel):
    """Start loading ``data_id``."""

    type: Literal[EventType.LOAD] = EventType.LOAD
    data_id: str


class Resolve(FsmBaseModel):
    """The pending request succeeded with ``data``."""

    type: Literal[EventType.RESOLVE] = EventType.RESOLVE
    data: str


class Reject(FsmBaseModel):
    """The pending request failed with ``message``."""

    type: Literal[EventType.REJECT] = EventType.REJECT
    message: str


class Reset(FsmBaseModel):
    type: Literal[EventType.RESET] = EventType.RESET


Event = Annotated[Load | Resolve | Reject | Reset, Field(discriminator="type")]
"""Any one of the four events, discriminated by ``type``."""

_EVENT_ADAPTER: TypeAdapter[Load | Resolve | Reject | Reset] = TypeAdapter(Event)


def parse_event(value: Any) -> Load | Resolve | Reject | Reset:
    """Validate a wire dict (or an existing event) into an event variant."""
    return _EVENT_ADAPTER.validate_python(value)
