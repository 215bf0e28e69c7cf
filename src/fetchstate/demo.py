"""Walk the fetch lifecycle through a fixed script of events.

Usage
-----
::

    fetchstate-demo              # narrated run with INFO trace lines
    fetchstate-demo --json       # one JSON state per line, tracing off
    fetchstate-demo --no-trace   # narration only

Environment variables understood by :meth:`FsmConfig.from_env` apply.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Sequence

from fetchstate.config import FsmConfig
from fetchstate.machine.runner import StateMachine
from fetchstate.models import Error, Event, Load, Loading, Reject, Reset, Resolve, State, Success

DEMO_SCRIPT: tuple[tuple[str, Event, bool], ...] = (
    ("after Load", Load(data_id="user-123"), True),
    ("after Invalid Reset", Reset(), False),
    ("after Resolve", Resolve(data="User data fetched successfully!"), True),
    ("after Invalid Load", Load(data_id="another-id"), False),
    ("after Reset", Reset(), False),
    ("after another Load", Load(data_id="product-456"), False),
    ("after Reject", Reject(message="Network connection lost."), True),
    ("after final Reset", Reset(), False),
)
"""(narration label, event, print the payload of the resulting state)."""


def _narrow(state: State) -> str | None:
    """Payload line for states that carry one."""
    if isinstance(state, Loading):
        return f"Loading for ID: {state.data_id}"
    if isinstance(state, Success):
        return f"Fetched Data: {state.data}"
    if isinstance(state, Error):
        return f"Error Message: {state.message}"
    return None


def run_demo(
    *,
    emit: Callable[[str], None] = print,
    machine: StateMachine | None = None,
) -> list[State]:
    """Run :data:`DEMO_SCRIPT` and return the state after every step."""
    machine = machine or StateMachine()
    emit("--- FSM Simulation Start ---")
    emit(f"Initial State: {machine.state.to_wire()}")

    states: list[State] = []
    for label, event, narrate in DEMO_SCRIPT:
        current = machine.dispatch(event)
        emit(f"Current State {label}: {current.to_wire()}")
        detail = _narrow(current) if narrate else None
        if detail is not None:
            emit(detail)
        states.append(current)

    emit("--- FSM Simulation End ---")
    return states


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the fetch lifecycle demonstration script.")
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_mode",
        help="Print each state as a JSON line (implies --no-trace, overriding FETCHSTATE_TRACE_ENABLED)",
    )
    parser.add_argument("--no-trace", action="store_true", help="Do not log transitions")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides = {"trace_enabled": False} if args.no_trace or args.json_mode else {}
    machine = StateMachine(config=FsmConfig.from_env(**overrides))

    if args.json_mode:
        for _label, event, _narrate in DEMO_SCRIPT:
            print(json.dumps(machine.dispatch(event).to_wire()))
        return 0

    run_demo(machine=machine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
