"""Machine configuration for fetchstate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from fetchstate.exceptions import FetchStateConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class FsmConfig:
    """State machine configuration.

    Parameters
    ----------
    trace_enabled : bool
        Install the logging hook so every dispatched event emits a
        trace line (INFO for transitions, WARNING for ignored events).
    history_limit : int
        Maximum number of transitions kept by
        :class:`~fetchstate.machine.runner.StateMachine`. ``0`` disables
        history.
    """

    trace_enabled: bool = True
    history_limit: int = 100

    def __post_init__(self) -> None:
        if isinstance(self.history_limit, bool) or not isinstance(self.history_limit, int):
            raise FetchStateConfigError(f"history_limit must be an int, got {self.history_limit!r}")
        if self.history_limit < 0:
            raise FetchStateConfigError(f"history_limit must be >= 0, got {self.history_limit}")

    @classmethod
    def from_env(cls, **overrides: Any) -> FsmConfig:
        """Create configuration from environment variables.

        Reads ``FETCHSTATE_TRACE_ENABLED`` and ``FETCHSTATE_HISTORY_LIMIT``.
        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "trace_enabled" not in overrides:
            config_kwargs["trace_enabled"] = _env_bool(env.get("FETCHSTATE_TRACE_ENABLED"), True)

        limit_env = env.get("FETCHSTATE_HISTORY_LIMIT")
        if limit_env is not None and "history_limit" not in overrides:
            try:
                config_kwargs["history_limit"] = int(limit_env)
            except ValueError as exc:
                raise FetchStateConfigError(f"FETCHSTATE_HISTORY_LIMIT is not an integer: {limit_env!r}") from exc

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
