"""Engine FSM dirigido por tabela.

- Construção valida as tabelas e aloca a instância + histórico como unidade
- process_event: lookup → handler → resolução do próximo estado → commit
- Erros em tempo de execução nunca alteram current_state
- STOP_PROCESSING: nenhum acesso à instância após o handler retornar
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import IO, Any

from efsm.application import introspection
from efsm.application.validation import validate_tables
from efsm.domain.codes import ResultCode
from efsm.domain.errors import FSMTableError, InvalidHandleError, NoResourcesError
from efsm.domain.history import HistoryRecord, HistoryRing
from efsm.domain.protocols.event_handler import (
    EventHandler,
    HandlerResult,
    coerce_handler_result,
)
from efsm.domain.table import (
    FSM_DEFAULT_NAME,
    FSM_HISTORY,
    FSM_NAME_LEN,
    EventDescription,
    EventTuple,
    StateDescription,
    StateTuple,
)
from efsm.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)


class StateMachine:
    """Instância de FSM.

    As três tabelas são emprestadas (não copiadas); o chamador deve mantê-las
    válidas e inalteradas enquanto a instância existir. O histórico pertence
    à instância e é liberado em destroy().
    """

    def __init__(
        self,
        name: str | None,
        initial_state: int,
        state_descriptions: Sequence[StateDescription] | None,
        event_descriptions: Sequence[EventDescription] | None,
        state_table: Sequence[StateTuple] | None,
    ) -> None:
        counts = validate_tables(
            initial_state, state_descriptions, event_descriptions, state_table
        )

        try:
            history = HistoryRing(FSM_HISTORY)
        except MemoryError as exc:
            raise NoResourcesError("sem memória para o histórico") from exc

        if not name:
            name = FSM_DEFAULT_NAME
        self._name = name[:FSM_NAME_LEN]

        self._current_state = initial_state
        self._exception_state = initial_state
        self._exception_armed = False
        self._in_handler = False

        self._number_states = counts.number_states
        self._number_events = counts.number_events

        # Tabelas emprestadas do chamador
        self._state_descriptions = state_descriptions
        self._event_descriptions = event_descriptions
        self._state_table = state_table

        self._history: HistoryRing | None = history

    # ------------------------------------------------------------------
    # Acessores
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def number_states(self) -> int:
        return self._number_states

    @property
    def number_events(self) -> int:
        return self._number_events

    @property
    def is_alive(self) -> bool:
        return self._history is not None

    @property
    def current_state(self) -> int:
        return self.get_current_state()

    def get_current_state(self) -> int:
        """Retorna o estado corrente."""
        self._require_alive()
        return self._current_state

    def state_description(self, state_id: int) -> str | None:
        self._require_alive()
        if 0 <= state_id < self._number_states:
            return self._state_descriptions[state_id].description
        return None

    def event_description(self, event_id: int) -> str | None:
        self._require_alive()
        if 0 <= event_id < self._number_events:
            return self._event_descriptions[event_id].description
        return None

    def transitions(self, state_id: int) -> Sequence[EventTuple]:
        """Tuplas de transição de um estado, indexadas por event_id."""
        self._require_alive()
        if not 0 <= state_id < self._number_states:
            raise IndexError(f"estado {state_id} fora de [0, {self._number_states})")
        return self._state_table[state_id].events

    def history(self) -> list[HistoryRecord]:
        """Histórico do mais recente para o mais antigo."""
        return list(self._require_alive())

    def get_state_summary(self) -> dict[str, Any]:
        """Retorna resumo do estado atual."""
        history = self._require_alive()
        return {
            "name": self._name,
            "current_state": self._current_state,
            "current_state_description": self.state_description(self._current_state),
            "number_states": self._number_states,
            "number_events": self._number_events,
            "history_size": len(history),
        }

    # ------------------------------------------------------------------
    # Engine
    # ------------------------------------------------------------------

    def set_exception_state(self, state: int) -> ResultCode:
        """Permite ao handler em execução sobrescrever o próximo estado.

        O override é consumido uma única vez, na resolução que segue o
        retorno do handler corrente.
        """
        self._require_alive()

        if not self._in_handler:
            logger.warning(
                "fsm_exception_state_outside_handler",
                extra={"fsm": self._name, "requested_state": state},
            )
            return ResultCode.NOT_IN_HANDLER

        if state < 0 or state >= self._number_states:
            return ResultCode.INVALID_STATE

        self._exception_state = state
        self._exception_armed = True
        return ResultCode.OK

    def process_event(
        self,
        event_id: int,
        payload: Any = None,
        context: Any = None,
    ) -> ResultCode:
        """Processa um evento normalizado.

        Args:
            event_id: evento normalizado em [0, number_events)
            payload: evento bruto, repassado ao handler sem modificação
            context: contexto do chamador, repassado ao handler sem modificação

        Returns:
            ResultCode.OK, STOP_PROCESSING ou o código de erro correspondente

        Contrato:
        - current_state só muda no commit final
        - Todo evento gera registro no histórico, exceto STOP_PROCESSING
        """
        history = self._require_alive()
        self._exception_armed = False
        self._in_handler = False

        current = self._current_state
        if event_id < 0 or event_id >= self._number_events:
            history.record(current, current, event_id, ResultCode.INVALID_EVENT)
            logger.warning(
                "fsm_invalid_event",
                extra={"fsm": self._name, "event_id": event_id, "current_state": current},
            )
            return ResultCode.INVALID_EVENT

        event_tuple = self._state_table[current].events[event_id]

        # Evento silencioso: next_state é apenas documental
        if event_tuple.handler is None:
            history.record(
                current, event_tuple.next_state, event_id, ResultCode.INVALID_EVENT_HANDLER
            )
            logger.debug(
                "fsm_quiet_event",
                extra={"fsm": self._name, "event_id": event_id, "current_state": current},
            )
            return ResultCode.OK

        name = self._name
        result = self._invoke(event_tuple.handler, payload, context)

        if result.is_stop:
            # O handler pode ter destruído a instância: não tocar em self
            logger.info("fsm_stop_processing", extra={"fsm": name, "event_id": event_id})
            return ResultCode.STOP_PROCESSING

        if self._history is None:
            raise InvalidHandleError(
                f"FSM '{name}' destruída pelo handler sem retornar STOP_PROCESSING"
            )
        self._in_handler = False
        armed = self._exception_armed
        self._exception_armed = False

        if result.code == ResultCode.IGNORE_EVENT:
            history.record(current, event_tuple.next_state, event_id, ResultCode.IGNORE_EVENT)
            return ResultCode.OK

        if result.code != ResultCode.OK:
            history.record(current, event_tuple.next_state, event_id, result.code)
            logger.warning(
                "fsm_handler_failed",
                extra={
                    "fsm": name,
                    "event_id": event_id,
                    "current_state": current,
                    "result": result.code.value,
                },
            )
            return result.code

        if result.override_state is not None:
            next_state = result.override_state
        elif armed:
            next_state = self._exception_state
        else:
            next_state = event_tuple.next_state

        if next_state < 0 or next_state >= self._number_states:
            history.record(current, next_state, event_id, ResultCode.INVALID_STATE)
            logger.warning(
                "fsm_invalid_next_state",
                extra={
                    "fsm": name,
                    "event_id": event_id,
                    "current_state": current,
                    "next_state": next_state,
                },
            )
            return ResultCode.INVALID_STATE

        history.record(current, next_state, event_id, ResultCode.OK)
        self._current_state = next_state

        logger.debug(
            "fsm_event_processed",
            extra={
                "fsm": name,
                "event_id": event_id,
                "previous_state": current,
                "next_state": next_state,
            },
        )
        return ResultCode.OK

    def _invoke(self, handler: EventHandler, payload: Any, context: Any) -> HandlerResult:
        self._in_handler = True
        try:
            return coerce_handler_result(handler(payload, context))
        except Exception:
            self._in_handler = False
            self._exception_armed = False
            raise

    # ------------------------------------------------------------------
    # Lifecycle / introspecção
    # ------------------------------------------------------------------

    def destroy(self) -> ResultCode:
        """Libera o histórico e invalida a instância."""
        history = self._require_alive()
        history.release()
        self._history = None
        logger.info("fsm_destroyed", extra={"fsm": self._name})
        return ResultCode.OK

    def dump_table(self, stream: IO[str] | None = None) -> None:
        self._require_alive()
        introspection.write_table(self, stream)

    def dump_history(self, stream: IO[str] | None = None) -> None:
        self._require_alive()
        introspection.write_history(self, stream)

    def _require_alive(self) -> HistoryRing:
        if self._history is None:
            raise InvalidHandleError(f"FSM '{self._name}' já foi destruída")
        return self._history

    def __repr__(self) -> str:
        if self._history is None:
            return f"StateMachine(name={self._name!r}, destroyed)"
        return f"StateMachine(name={self._name!r}, current_state={self._current_state})"


def create_state_machine(
    name: str | None,
    initial_state: int,
    state_descriptions: Sequence[StateDescription] | None,
    event_descriptions: Sequence[EventDescription] | None,
    state_table: Sequence[StateTuple] | None,
) -> StateMachine:
    """Cria e valida uma FSM.

    Falha atomicamente: em qualquer erro de validação nenhuma instância é
    retornada e a exceção específica (FSMTableError) é propagada.
    """
    try:
        fsm = StateMachine(
            name, initial_state, state_descriptions, event_descriptions, state_table
        )
    except FSMTableError as exc:
        logger.warning(
            "fsm_create_failed",
            extra={"fsm": name, "result": exc.code.value, "reason": exc.reason},
        )
        raise

    logger.info(
        "fsm_created",
        extra={
            "fsm": fsm.name,
            "initial_state": initial_state,
            "number_states": fsm.number_states,
            "number_events": fsm.number_events,
        },
    )
    return fsm
