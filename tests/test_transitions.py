"""Tests for the pure transition engine."""

from __future__ import annotations

import itertools

import pytest
from pydantic import ValidationError

from fetchstate.exceptions import TransitionTableError
from fetchstate.machine.transitions import (
    TRANSITION_TABLE,
    allowed_events,
    check_table,
    is_accepted,
    step,
    transition,
)
from fetchstate.models import (
    STATE_VARIANTS,
    Error,
    EventType,
    Idle,
    Load,
    Loading,
    Reject,
    Reset,
    Resolve,
    StateType,
    Success,
)

SAMPLE_STATES = (Idle(), Loading(data_id="d"), Success(data="X"), Error(message="E"))
SAMPLE_EVENTS = (Load(data_id="other"), Resolve(data="R"), Reject(message="M"), Reset())
ALL_PAIRS = list(itertools.product(SAMPLE_STATES, SAMPLE_EVENTS))
IGNORED_PAIRS = [(s, e) for s, e in ALL_PAIRS if not is_accepted(s, e)]


def _pair_id(pair: tuple) -> str:
    state, event = pair
    return f"{state.type}-{event.type}"


# ------------------------------------------------------------------
# Valid transitions
# ------------------------------------------------------------------


class TestValidTransitions:
    def test_idle_load(self) -> None:
        assert transition(Idle(), Load(data_id="user-123")) == Loading(data_id="user-123")

    def test_loading_resolve(self) -> None:
        assert transition(Loading(data_id="user-123"), Resolve(data="X")) == Success(data="X")

    def test_loading_reject(self) -> None:
        result = transition(Loading(data_id="user-123"), Reject(message="Network connection lost."))
        assert result == Error(message="Network connection lost.")

    def test_success_reset(self) -> None:
        assert transition(Success(data="X"), Reset()) == Idle()

    def test_error_reset(self) -> None:
        assert transition(Error(message="E"), Reset()) == Idle()

    def test_new_value_is_returned(self) -> None:
        current = Idle()
        result = transition(current, Load(data_id="d"))
        assert result is not current
        assert current == Idle()


# ------------------------------------------------------------------
# Ignored events
# ------------------------------------------------------------------


class TestIgnoredEvents:
    def test_idle_reset(self) -> None:
        assert transition(Idle(), Reset()) == Idle()

    def test_loading_keeps_original_data_id(self) -> None:
        current = Loading(data_id="d")
        result = transition(current, Load(data_id="other"))
        assert result == Loading(data_id="d")
        assert result is current

    def test_success_load(self) -> None:
        assert transition(Success(data="X"), Load(data_id="y")) == Success(data="X")

    @pytest.mark.parametrize(("state", "event"), IGNORED_PAIRS, ids=[_pair_id(p) for p in IGNORED_PAIRS])
    def test_ignored_events_are_idempotent(self, state: object, event: object) -> None:
        once = transition(state, event)  # type: ignore[arg-type]
        twice = transition(once, event)
        assert once == state
        assert twice == once


# ------------------------------------------------------------------
# Totality and closure
# ------------------------------------------------------------------


class TestTotality:
    @pytest.mark.parametrize(("state", "event"), ALL_PAIRS, ids=[_pair_id(p) for p in ALL_PAIRS])
    def test_every_pair_yields_a_state(self, state: object, event: object) -> None:
        result = transition(state, event)  # type: ignore[arg-type]
        assert isinstance(result, STATE_VARIANTS)

    @pytest.mark.parametrize(("state", "event"), ALL_PAIRS, ids=[_pair_id(p) for p in ALL_PAIRS])
    def test_function_agrees_with_table(self, state: object, event: object) -> None:
        result = transition(state, event)  # type: ignore[arg-type]
        assert result.type == TRANSITION_TABLE[(state.type, event.type)]  # type: ignore[attr-defined]

    def test_table_covers_all_pairs(self) -> None:
        assert len(TRANSITION_TABLE) == len(StateType) * len(EventType)

    def test_event_sequences_stay_closed(self) -> None:
        for events in itertools.product(SAMPLE_EVENTS, repeat=4):
            state = Idle()
            for event in events:
                state = transition(state, event)
                assert state.type in set(StateType)

    def test_non_state_input_is_rejected(self) -> None:
        with pytest.raises(AssertionError):
            transition(Load(data_id="x"), Reset())  # type: ignore[arg-type]


class TestTableChecks:
    def test_incomplete_table_rejected(self) -> None:
        partial = dict(TRANSITION_TABLE)
        del partial[(StateType.ERROR, EventType.RESET)]
        with pytest.raises(TransitionTableError) as exc_info:
            check_table(partial)
        assert exc_info.value.missing == (("ERROR", "RESET"),)

    def test_unknown_successor_rejected(self) -> None:
        broken = dict(TRANSITION_TABLE)
        broken[(StateType.IDLE, EventType.LOAD)] = "FETCHING"  # type: ignore[assignment]
        with pytest.raises(TransitionTableError):
            check_table(broken)


# ------------------------------------------------------------------
# Introspection helpers
# ------------------------------------------------------------------


class TestAllowedEvents:
    def test_by_tag(self) -> None:
        assert allowed_events(StateType.IDLE) == {EventType.LOAD}
        assert allowed_events(StateType.LOADING) == {EventType.RESOLVE, EventType.REJECT}
        assert allowed_events(StateType.SUCCESS) == {EventType.RESET}
        assert allowed_events(StateType.ERROR) == {EventType.RESET}

    def test_by_value(self) -> None:
        assert allowed_events(Loading(data_id="d")) == {EventType.RESOLVE, EventType.REJECT}

    def test_is_accepted(self) -> None:
        assert is_accepted(Idle(), Load(data_id="d"))
        assert not is_accepted(Idle(), Reset())


class TestStep:
    def test_accepted_step(self) -> None:
        result = step(Idle(), Load(data_id="user-123"))
        assert result.accepted is True
        assert result.previous == Idle()
        assert result.next == Loading(data_id="user-123")
        assert result.event == Load(data_id="user-123")

    def test_ignored_step(self) -> None:
        result = step(Success(data="X"), Load(data_id="y"))
        assert result.accepted is False
        assert result.next == result.previous == Success(data="X")

    @pytest.mark.parametrize(("state", "event"), ALL_PAIRS, ids=[_pair_id(p) for p in ALL_PAIRS])
    def test_accepted_flag_matches_table(self, state: object, event: object) -> None:
        assert step(state, event).accepted is is_accepted(state, event)  # type: ignore[arg-type]


class TestStepValidation:
    def test_wire_event_matches_table(self) -> None:
        result = step(Idle(), {"type": "LOAD", "dataId": "a"})  # type: ignore[arg-type]
        assert result.accepted is True
        assert result.next == Loading(data_id="a")
        assert TRANSITION_TABLE[(result.previous.type, result.event.type)] == result.next.type

    def test_wire_state_is_parsed(self) -> None:
        result = step({"type": "SUCCESS", "data": "X"}, Reset())  # type: ignore[arg-type]
        assert result.accepted is True
        assert result.next == Idle()

    def test_ignored_wire_event_is_not_accepted(self) -> None:
        result = step(Loading(data_id="d"), {"type": "RESET"})  # type: ignore[arg-type]
        assert result.accepted is False
        assert result.next == Loading(data_id="d")

    def test_non_event_rejected(self) -> None:
        with pytest.raises(ValidationError):
            step(Idle(), Idle())  # type: ignore[arg-type]

    def test_non_state_rejected(self) -> None:
        with pytest.raises(ValidationError):
            step(Reset(), Reset())  # type: ignore[arg-type]
