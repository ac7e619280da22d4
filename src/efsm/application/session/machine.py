"""Tabelas da sessão de exemplo e fábrica da FSM.

As tabelas são tuplas de módulo: imutáveis e vivas durante todo o processo,
atendendo ao contrato de empréstimo do engine.
"""

from __future__ import annotations

from efsm.application.fsm_engine import StateMachine, create_state_machine
from efsm.application.session.handlers import (
    event_ignore,
    event_init_ack_rcvd,
    event_init_ack_tmo,
    event_init_rcvd,
    event_start_init,
    event_start_term,
    event_term_ack_rcvd,
    event_term_rcvd,
)
from efsm.domain.session.events import EVENT_DESCRIPTIONS, SessionEvent
from efsm.domain.session.states import STATE_DESCRIPTIONS, SessionState
from efsm.domain.table import EventDescription, EventTuple, StateDescription, StateTuple

SESSION_MACHINE_NAME = "Demo State Machine"

E = SessionEvent
S = SessionState

SESSION_STATE_DESCRIPTIONS: tuple[StateDescription, ...] = tuple(
    StateDescription(state, STATE_DESCRIPTIONS[state]) for state in SessionState
)

SESSION_EVENT_DESCRIPTIONS: tuple[EventDescription, ...] = tuple(
    EventDescription(event, EVENT_DESCRIPTIONS[event]) for event in SessionEvent
)

# === IDLE ===
_IDLE_EVENTS = (
    EventTuple(E.START_INIT, event_start_init, S.WAIT_INIT_ACK),  # cliente envia INIT
    EventTuple(E.INIT_RCVD, event_init_rcvd, S.ESTABLISHED),  # servidor recebeu INIT
    EventTuple(E.INIT_TMO, event_ignore, S.IDLE),
    EventTuple(E.INIT_ACK, event_ignore, S.IDLE),
    EventTuple(E.START_TERM, event_ignore, S.IDLE),
    EventTuple(E.TERM_RCVD, event_ignore, S.IDLE),
    EventTuple(E.TERM_ACK, event_ignore, S.IDLE),
)

# === WAIT_INIT_ACK ===
_WAIT_INIT_ACK_EVENTS = (
    EventTuple(E.START_INIT, event_ignore, S.WAIT_INIT_ACK),
    EventTuple(E.INIT_RCVD, event_ignore, S.WAIT_INIT_ACK),
    EventTuple(E.INIT_TMO, event_init_ack_tmo, S.WAIT_INIT_ACK),
    EventTuple(E.INIT_ACK, event_init_ack_rcvd, S.ESTABLISHED),
    EventTuple(E.START_TERM, event_term_rcvd, S.WAIT_INIT_ACK),
    EventTuple(E.TERM_RCVD, event_term_rcvd, S.IDLE),
    EventTuple(E.TERM_ACK, event_ignore, S.WAIT_INIT_ACK),
)

# === ESTABLISHED ===
_ESTABLISHED_EVENTS = (
    EventTuple(E.START_INIT, event_ignore, S.ESTABLISHED),
    EventTuple(E.INIT_RCVD, event_ignore, S.ESTABLISHED),
    EventTuple(E.INIT_TMO, event_ignore, S.ESTABLISHED),
    EventTuple(E.INIT_ACK, event_ignore, S.ESTABLISHED),
    EventTuple(E.START_TERM, event_start_term, S.WAIT_TERM_ACK),
    EventTuple(E.TERM_RCVD, event_term_rcvd, S.IDLE),
    EventTuple(E.TERM_ACK, event_ignore, S.ESTABLISHED),
)

# === WAIT_TERM_ACK ===
_WAIT_TERM_ACK_EVENTS = (
    EventTuple(E.START_INIT, event_ignore, S.WAIT_TERM_ACK),
    EventTuple(E.INIT_RCVD, event_ignore, S.WAIT_TERM_ACK),
    EventTuple(E.INIT_TMO, event_ignore, S.WAIT_TERM_ACK),
    EventTuple(E.INIT_ACK, event_ignore, S.WAIT_TERM_ACK),
    EventTuple(E.START_TERM, event_ignore, S.WAIT_TERM_ACK),
    EventTuple(E.TERM_RCVD, event_ignore, S.IDLE),
    EventTuple(E.TERM_ACK, event_term_ack_rcvd, S.IDLE),
)

SESSION_STATE_TABLE: tuple[StateTuple, ...] = (
    StateTuple(S.IDLE, _IDLE_EVENTS),
    StateTuple(S.WAIT_INIT_ACK, _WAIT_INIT_ACK_EVENTS),
    StateTuple(S.ESTABLISHED, _ESTABLISHED_EVENTS),
    StateTuple(S.WAIT_TERM_ACK, _WAIT_TERM_ACK_EVENTS),
)


def create_session_machine(
    name: str | None = SESSION_MACHINE_NAME,
    initial_state: SessionState = SessionState.IDLE,
) -> StateMachine:
    """Cria a FSM da sessão de exemplo."""

    return create_state_machine(
        name,
        initial_state,
        SESSION_STATE_DESCRIPTIONS,
        SESSION_EVENT_DESCRIPTIONS,
        SESSION_STATE_TABLE,
    )
