"""Tipos das tabelas fornecidas pelo chamador.

A FSM não copia nem altera essas tabelas: elas são emprestadas e devem
permanecer válidas e inalteradas durante toda a vida da instância.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from efsm.domain.protocols.event_handler import EventHandler

# Tabelas com no máximo 64 entradas; contagens válidas ficam em [1, 63]
FSM_MAX_STATES = 64
FSM_MAX_EVENTS = 64
FSM_HISTORY = 64
FSM_NAME_LEN = 32
FSM_DEFAULT_NAME = "State Machine"


@dataclass(frozen=True, slots=True)
class StateDescription:
    """Estado normalizado com descrição legível."""

    state_id: int
    description: str


@dataclass(frozen=True, slots=True)
class EventDescription:
    """Evento normalizado com descrição legível."""

    event_id: int
    description: str


@dataclass(frozen=True, slots=True)
class EventTuple:
    """Tupla de transição (evento, handler, próximo estado).

    handler=None marca um evento silencioso: next_state é apenas documental.
    """

    event_id: int
    handler: EventHandler | None
    next_state: int


@dataclass(frozen=True, slots=True)
class StateTuple:
    """Estado e a sequência de tuplas de transição indexada por event_id."""

    state_id: int
    events: Sequence[EventTuple] | None


@dataclass(frozen=True, slots=True)
class TableCounts:
    """Contagens normalizadas produzidas pelo validador."""

    number_states: int
    number_events: int
