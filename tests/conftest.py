from __future__ import annotations

import pytest

from efsm.application.fsm_engine import create_state_machine
from efsm.config.settings import get_settings
from efsm.domain.table import EventDescription, EventTuple, StateDescription, StateTuple


def _accept(event, context):
    return None


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def build_tables():
    """Fábrica de tabelas válidas.

    Por padrão todo (estado, evento) tem handler de sucesso e next_state
    (state + 1) % number_states. `handlers` e `next_states` sobrescrevem
    pares específicos; handler None marca evento silencioso.
    """

    def _build(number_states=3, number_events=2, handlers=None, next_states=None):
        handlers = handlers or {}
        next_states = next_states or {}
        states = [StateDescription(i, f"state-{i}") for i in range(number_states)]
        events = [EventDescription(j, f"event-{j}") for j in range(number_events)]
        table = [
            StateTuple(
                i,
                [
                    EventTuple(
                        j,
                        handlers.get((i, j), _accept),
                        next_states.get((i, j), (i + 1) % number_states),
                    )
                    for j in range(number_events)
                ],
            )
            for i in range(number_states)
        ]
        return states, events, table

    return _build


@pytest.fixture()
def make_fsm(build_tables):
    def _make(initial_state=0, name="test-fsm", **kwargs):
        states, events, table = build_tables(**kwargs)
        return create_state_machine(name, initial_state, states, events, table)

    return _make
