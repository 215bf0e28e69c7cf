"""Base model and discriminator enums for fetchstate values.

Every state and event inherits from :class:`FsmBaseModel` which
provides:

* ``frozen=True`` so a value never changes after construction.
* ``extra="forbid"`` so a variant cannot carry another variant's payload.
* ``alias_generator=to_camel`` so payloads serialise as ``dataId`` while
  the Python attribute stays ``data_id``.

The ``type`` field of each variant is a ``Literal`` of one member of
:class:`StateType` or :class:`EventType`; it is the discriminator
pydantic uses to pick the variant when parsing.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StateType(enum.StrEnum):
    """Discriminator values of the four states."""

    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Loading"``."""
        return self.value.capitalize()


class EventType(enum.StrEnum):
    """Discriminator values of the four events."""

    LOAD = "LOAD"
    RESOLVE = "RESOLVE"
    REJECT = "REJECT"
    RESET = "RESET"


class FsmBaseModel(BaseModel):
    """Base for state and event variants."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-compatible camelCase form, e.g. ``{"type": "LOADING", "dataId": "x"}``."""
        return self.model_dump(mode="json", by_alias=True)
