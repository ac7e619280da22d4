"""Superfície funcional com verificação de handle.

Cada operação recebe a instância como primeiro argumento:
- None → NullHandleError
- objeto que não é StateMachine ou instância destruída → InvalidHandleError

destroy() retorna None para permitir `fsm = destroy(fsm)` no ponto de chamada,
de forma que o handle antigo não seja reutilizado por engano.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import IO, Any

from efsm.application.fsm_engine import StateMachine, create_state_machine
from efsm.domain.codes import ResultCode
from efsm.domain.errors import InvalidHandleError, NullHandleError
from efsm.domain.table import EventDescription, StateDescription, StateTuple


def _checked(fsm: StateMachine | None) -> StateMachine:
    if fsm is None:
        raise NullHandleError("handle de FSM nulo")
    if not isinstance(fsm, StateMachine):
        raise InvalidHandleError(f"objeto {type(fsm).__name__} não é uma StateMachine")
    if not fsm.is_alive:
        raise InvalidHandleError(f"FSM '{fsm.name}' já foi destruída")
    return fsm


def create(
    name: str | None,
    initial_state: int,
    state_descriptions: Sequence[StateDescription] | None,
    event_descriptions: Sequence[EventDescription] | None,
    state_table: Sequence[StateTuple] | None,
) -> StateMachine:
    return create_state_machine(
        name, initial_state, state_descriptions, event_descriptions, state_table
    )


def destroy(fsm: StateMachine | None) -> None:
    _checked(fsm).destroy()
    return None


def process_event(
    fsm: StateMachine | None,
    event_id: int,
    payload: Any = None,
    context: Any = None,
) -> ResultCode:
    return _checked(fsm).process_event(event_id, payload, context)


def get_current_state(fsm: StateMachine | None) -> int:
    return _checked(fsm).get_current_state()


def set_exception_state(fsm: StateMachine | None, state: int) -> ResultCode:
    return _checked(fsm).set_exception_state(state)


def dump_table(fsm: StateMachine | None, stream: IO[str] | None = None) -> None:
    _checked(fsm).dump_table(stream)


def dump_history(fsm: StateMachine | None, stream: IO[str] | None = None) -> None:
    _checked(fsm).dump_history(stream)
