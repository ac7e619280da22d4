"""Testes dos dumps de tabela e histórico."""

from __future__ import annotations

import io

from efsm.application.fsm_engine import create_state_machine
from efsm.application.introspection import render_history, render_table
from efsm.domain.table import StateDescription


class TestRenderTable:
    def test_header_and_rows(self, make_fsm) -> None:
        fsm = make_fsm(number_states=2, number_events=2, handlers={(1, 0): None})
        text = render_table(fsm)

        assert "FSM: test-fsm" in text
        assert "number_states = 2" in text
        assert "number_events = 2" in text
        assert "curr_state = state-0" in text
        assert " State: state-1" in text
        assert "  1-event-1 / state-1" in text
        assert "  0-event-0 / state-0 (quiet)" in text

    def test_unknown_next_state_rendered_as_placeholder(self, make_fsm) -> None:
        fsm = make_fsm(next_states={(0, 0): 40})
        assert "  0-event-0 / ?" in render_table(fsm)

    def test_dump_to_stream(self, make_fsm) -> None:
        fsm = make_fsm()
        buffer = io.StringIO()
        fsm.dump_table(buffer)
        assert buffer.getvalue() == render_table(fsm)

    def test_empty_description_is_not_placeholder(self, build_tables) -> None:
        states, events, table = build_tables(number_states=2)
        states[1] = StateDescription(1, "")
        fsm = create_state_machine("blank", 0, states, events, table)
        assert "  0-event-0 / \n" in render_table(fsm)


class TestRenderHistory:
    def test_most_recent_first(self, make_fsm) -> None:
        fsm = make_fsm(number_states=3)
        fsm.process_event(0)
        fsm.process_event(1)

        lines = render_history(fsm).splitlines()
        rows = [line for line in lines if line.startswith(" ")]
        assert rows[0] == " 1-state-1  /  1-event-1  /  2-state-2  /  OK"
        assert rows[1] == " 0-state-0  /  0-event-0  /  1-state-1  /  OK"

    def test_invalid_event_rendered_with_placeholder(self, make_fsm) -> None:
        fsm = make_fsm()
        fsm.process_event(9)
        assert " 0-state-0  /  9-?  /  0-state-0  /  INVALID_EVENT" in render_history(fsm)

    def test_empty_history(self, make_fsm) -> None:
        fsm = make_fsm()
        buffer = io.StringIO()
        fsm.dump_history(buffer)
        assert "FSM: test-fsm History" in buffer.getvalue()
        assert " 0-" not in buffer.getvalue()
