"""Validador das tabelas da FSM.

Executa apenas durante a construção e não altera nada:
- IDs de estado e de evento contíguos (índice == id)
- Tabela de estados alinhada com a tabela de descrições de estado
- Cada estado com exatamente uma tupla por evento, em ordem de event_id
- Estado inicial dentro do intervalo normalizado
"""

from __future__ import annotations

from collections.abc import Sequence

from efsm.domain.errors import (
    InvalidEventTableError,
    InvalidInitialStateError,
    InvalidStateTableError,
)
from efsm.domain.table import (
    FSM_MAX_EVENTS,
    FSM_MAX_STATES,
    EventDescription,
    StateDescription,
    StateTuple,
    TableCounts,
)


def validate_tables(
    initial_state: int,
    state_descriptions: Sequence[StateDescription] | None,
    event_descriptions: Sequence[EventDescription] | None,
    state_table: Sequence[StateTuple] | None,
) -> TableCounts:
    """Valida as três tabelas e retorna as contagens normalizadas.

    Raises:
        InvalidStateTableError: descrições/tabela de estados malformadas
        InvalidInitialStateError: estado inicial fora do intervalo
        InvalidEventTableError: descrições de evento ou tuplas malformadas
    """
    if state_descriptions is None:
        raise InvalidStateTableError("tabela de descrições de estado ausente")
    if event_descriptions is None:
        raise InvalidEventTableError("tabela de descrições de evento ausente")
    if state_table is None:
        raise InvalidStateTableError("tabela de estados ausente")

    number_states = _count_states(state_descriptions, state_table)

    if initial_state < 0 or initial_state >= number_states:
        raise InvalidInitialStateError(
            f"estado inicial {initial_state} fora de [0, {number_states})"
        )

    number_events = _count_events(event_descriptions)

    for state_id in range(number_states):
        _check_event_tuples(state_id, state_table[state_id], number_events)

    return TableCounts(number_states=number_states, number_events=number_events)


def _count_states(
    state_descriptions: Sequence[StateDescription],
    state_table: Sequence[StateTuple],
) -> int:
    if len(state_descriptions) > FSM_MAX_STATES:
        raise InvalidStateTableError(
            f"{len(state_descriptions)} estados excede o máximo de {FSM_MAX_STATES}"
        )

    for index, description in enumerate(state_descriptions):
        if description.state_id != index:
            raise InvalidStateTableError(
                f"descrição de estado no índice {index} tem state_id {description.state_id}"
            )
        if index >= len(state_table):
            raise InvalidStateTableError(f"tabela de estados sem entrada para o estado {index}")
        entry = state_table[index]
        if entry.state_id != index:
            raise InvalidStateTableError(
                f"tabela de estados no índice {index} tem state_id {entry.state_id}"
            )
        if entry.events is None:
            raise InvalidStateTableError(f"estado {index} sem tuplas de transição")

    if len(state_table) != len(state_descriptions):
        raise InvalidStateTableError(
            f"tabela de estados tem {len(state_table)} entradas, "
            f"esperado {len(state_descriptions)}"
        )

    number_states = len(state_descriptions)
    if number_states < 1 or number_states > FSM_MAX_STATES - 1:
        raise InvalidStateTableError(
            f"number_states={number_states} fora de [1, {FSM_MAX_STATES - 1}]"
        )
    return number_states


def _count_events(event_descriptions: Sequence[EventDescription]) -> int:
    if len(event_descriptions) > FSM_MAX_EVENTS:
        raise InvalidEventTableError(
            f"{len(event_descriptions)} eventos excede o máximo de {FSM_MAX_EVENTS}"
        )

    for index, description in enumerate(event_descriptions):
        if description.event_id != index:
            raise InvalidEventTableError(
                f"descrição de evento no índice {index} tem event_id {description.event_id}"
            )

    number_events = len(event_descriptions)
    if number_events < 1 or number_events > FSM_MAX_EVENTS - 1:
        raise InvalidEventTableError(
            f"number_events={number_events} fora de [1, {FSM_MAX_EVENTS - 1}]"
        )
    return number_events


def _check_event_tuples(state_id: int, entry: StateTuple, number_events: int) -> None:
    events = entry.events or ()
    if len(events) != number_events:
        raise InvalidEventTableError(
            f"estado {state_id} tem {len(events)} tuplas, esperado {number_events}"
        )
    for index, event_tuple in enumerate(events):
        if event_tuple.event_id != index:
            raise InvalidEventTableError(
                f"estado {state_id}: tupla no índice {index} tem event_id {event_tuple.event_id}"
            )
