"""Dump legível da tabela e do histórico de uma FSM (diagnóstico, não parseável)."""

from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from efsm.application.fsm_engine import StateMachine

_UNKNOWN = "?"


def render_table(fsm: StateMachine) -> str:
    """Lista, por estado, cada evento normalizado e o próximo estado declarado."""

    lines = [
        "",
        f"FSM: {fsm.name}",
        f"    number_states = {fsm.number_states}",
        f"    number_events = {fsm.number_events}",
        f"    curr_state = {_state_label(fsm, fsm.get_current_state())}",
        "",
    ]
    for state_id in range(fsm.number_states):
        lines.append(f" State: {_state_label(fsm, state_id)}")
        lines.append(" Event   /   Next State")
        lines.append("----------------------------")
        for event_id, event_tuple in enumerate(fsm.transitions(state_id)):
            quiet = "" if event_tuple.handler is not None else " (quiet)"
            lines.append(
                f"  {event_id}-{_event_label(fsm, event_id)} / "
                f"{_state_label(fsm, event_tuple.next_state)}{quiet}"
            )
        lines.append("")
    return "\n".join(lines) + "\n"


def render_history(fsm: StateMachine) -> str:
    """Histórico do mais recente para o mais antigo."""

    lines = [
        "",
        f"FSM: {fsm.name} History",
        "Current State  /   Event   /  New State  /  rc",
        "------------------------------------------------",
    ]
    for entry in fsm.history():
        lines.append(
            f" {entry.previous_state}-{_state_label(fsm, entry.previous_state)}  /  "
            f"{entry.event_id}-{_event_label(fsm, entry.event_id)}  /  "
            f"{entry.new_state}-{_state_label(fsm, entry.new_state)}  /  "
            f"{entry.handler_result.value}"
        )
    return "\n".join(lines) + "\n"


def write_table(fsm: StateMachine, stream: IO[str] | None = None) -> None:
    (stream or sys.stdout).write(render_table(fsm))


def write_history(fsm: StateMachine, stream: IO[str] | None = None) -> None:
    (stream or sys.stdout).write(render_history(fsm))


def _state_label(fsm: StateMachine, state_id: int) -> str:
    description = fsm.state_description(state_id)
    return _UNKNOWN if description is None else description


def _event_label(fsm: StateMachine, event_id: int) -> str:
    description = fsm.event_description(event_id)
    return _UNKNOWN if description is None else description
