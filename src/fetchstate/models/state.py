"""The four states of the fetch lifecycle."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from fetchstate.models._base import FsmBaseModel, StateType


class Idle(FsmBaseModel):
    """Nothing requested yet, or the previous outcome was cleared."""

    type: Literal[StateType.IDLE] = StateType.IDLE


class Loading(FsmBaseModel):
    """A request for ``data_id`` is in flight."""

    type: Literal[StateType.LOADING] = StateType.LOADING
    data_id: str


class Success(FsmBaseModel):
    """The request finished and produced ``data``."""

    type: Literal[StateType.SUCCESS] = StateType.SUCCESS
    data: str


class Error(FsmBaseModel):
    """The request failed with ``message``."""

    type: Literal[StateType.ERROR] = StateType.ERROR
    message: str


State = Annotated[Idle | Loading | Success | Error, Field(discriminator="type")]
"""Any one of the four states, discriminated by ``type``."""

STATE_VARIANTS: tuple[type[FsmBaseModel], ...] = (Idle, Loading, Success, Error)

_STATE_ADAPTER: TypeAdapter[Idle | Loading | Success | Error] = TypeAdapter(State)


def parse_state(value: Any) -> Idle | Loading | Success | Error:
    """Validate a wire dict (or an existing state) into a state variant.

    Raises :class:`pydantic.ValidationError` for unknown tags, missing
    payload fields or fields that belong to another variant.
    """
    return _STATE_ADAPTER.validate_python(value)


def state_to_json(state: Idle | Loading | Success | Error) -> str:
    """Serialise *state* to its camelCase JSON form."""
    return _STATE_ADAPTER.dump_json(state, by_alias=True).decode()
