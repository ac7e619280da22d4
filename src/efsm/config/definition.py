"""Definição declarativa de uma FSM (dict/JSON → tabelas validadas).

Formato:
    {
      "name": "Demo State Machine",
      "initial_state": 0,
      "states": [{"id": 0, "description": "Idle State"}, ...],
      "events": [{"id": 0, "description": "Start Session Init"}, ...],
      "transitions": [
        [{"event": 0, "handler": "start_init", "next_state": 1}, ...],  # estado 0
        ...
      ]
    }

`handler` é o nome de um handler registrado em `build(handlers)`; null marca
um evento silencioso. As verificações estruturais continuam sendo feitas pelo
validador da FSM durante a construção.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from efsm.application.fsm_engine import StateMachine, create_state_machine
from efsm.config.settings import get_settings
from efsm.domain.errors import InvalidEventTableError
from efsm.domain.protocols.event_handler import EventHandler
from efsm.domain.table import (
    EventDescription,
    EventTuple,
    StateDescription,
    StateTuple,
)


class StateSpec(BaseModel):
    """Estado normalizado."""

    model_config = ConfigDict(extra="forbid")

    id: int
    description: str


class EventSpec(BaseModel):
    """Evento normalizado."""

    model_config = ConfigDict(extra="forbid")

    id: int
    description: str


class TransitionSpec(BaseModel):
    """Tupla de transição; handler referenciado por nome."""

    model_config = ConfigDict(extra="forbid")

    event: int
    handler: str | None = None
    next_state: int


class MachineDefinition(BaseModel):
    """Contrato declarativo de uma FSM."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    initial_state: int = 0
    states: list[StateSpec] = Field(default_factory=list)
    events: list[EventSpec] = Field(default_factory=list)
    transitions: list[list[TransitionSpec]] = Field(default_factory=list)

    def handler_names(self) -> set[str]:
        """Nomes de handler referenciados pela definição."""
        return {
            spec.handler
            for row in self.transitions
            for spec in row
            if spec.handler is not None
        }

    def to_tables(
        self, handlers: Mapping[str, EventHandler] | None = None
    ) -> tuple[list[StateDescription], list[EventDescription], list[StateTuple]]:
        """Converte a definição nas três tabelas esperadas pelo engine.

        Raises:
            InvalidEventTableError: handler referenciado não registrado
        """
        registry = handlers or {}
        missing = sorted(self.handler_names() - set(registry))
        if missing:
            raise InvalidEventTableError(f"handlers não registrados: {', '.join(missing)}")

        state_descriptions = [StateDescription(s.id, s.description) for s in self.states]
        event_descriptions = [EventDescription(e.id, e.description) for e in self.events]
        state_table = [
            StateTuple(
                state_id=index,
                events=[
                    EventTuple(
                        event_id=spec.event,
                        handler=registry[spec.handler] if spec.handler is not None else None,
                        next_state=spec.next_state,
                    )
                    for spec in row
                ],
            )
            for index, row in enumerate(self.transitions)
        ]
        return state_descriptions, event_descriptions, state_table

    def build(self, handlers: Mapping[str, EventHandler] | None = None) -> StateMachine:
        """Resolve handlers e cria a FSM (validada).

        Sem `name`, usa `default_machine_name` das Settings.
        """
        state_descriptions, event_descriptions, state_table = self.to_tables(handlers)
        return create_state_machine(
            self.name or get_settings().default_machine_name,
            self.initial_state,
            state_descriptions,
            event_descriptions,
            state_table,
        )


def load_definition(path: str | Path) -> MachineDefinition:
    """Carrega uma definição a partir de um arquivo JSON."""

    return MachineDefinition.model_validate_json(Path(path).read_text(encoding="utf-8"))
