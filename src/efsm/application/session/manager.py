"""SessionManager: dono explícito da FSM de uma sessão de exemplo.

Cada sessão carrega sua própria instância de FSM, config e contexto; não há
estado global de processo.
"""

from __future__ import annotations

import logging
import uuid
from typing import IO, Any

from efsm.application import operations
from efsm.application.fsm_engine import StateMachine
from efsm.application.session.machine import create_session_machine
from efsm.application.session.models import SessionConfig, SessionContext
from efsm.config.settings import get_settings
from efsm.domain.codes import NON_ERROR_CODES, ResultCode
from efsm.domain.session.events import SessionEvent
from efsm.domain.session.states import SessionState
from efsm.observability.context import bind_correlation_id
from efsm.observability.logging import get_logger


class SessionManager:
    """Gerencia o ciclo de vida (create, drive, close) de uma sessão."""

    def __init__(
        self,
        config: SessionConfig | None = None,
        session_id: str | None = None,
        logger: logging.Logger | None = None,
        settings: Any | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._logger = logger or get_logger(__name__)
        self.session_id = session_id or str(uuid.uuid4())
        self.config = config or SessionConfig(
            timeout_threshold=self._settings.session_timeout_threshold
        )
        self.context = SessionContext()
        self._fsm: StateMachine | None = create_session_machine()

    @property
    def fsm(self) -> StateMachine | None:
        return self._fsm

    @property
    def state(self) -> SessionState:
        """Estado corrente; NullHandleError se a sessão já foi fechada."""
        return SessionState(operations.get_current_state(self._fsm))

    def handle(self, event: SessionEvent | int) -> ResultCode:
        """Submete um evento à FSM da sessão."""
        with bind_correlation_id(self.session_id):
            rc = operations.process_event(self._fsm, event, self.config, self.context)

            if rc == ResultCode.STOP_PROCESSING:
                # Handler encerrou a sessão; o handle não é mais usado
                self._fsm = None
            elif rc not in NON_ERROR_CODES:
                self._logger.warning(
                    "session_event_failed",
                    extra={"event_id": int(event), "result": rc.value},
                )
        return rc

    def show_table(self, stream: IO[str] | None = None) -> None:
        operations.dump_table(self._fsm, stream)

    def show_history(self, stream: IO[str] | None = None) -> None:
        operations.dump_history(self._fsm, stream)

    def close(self) -> None:
        """Destrói a FSM; operações posteriores levantam NullHandleError."""
        if self._fsm is None:
            return
        self._fsm = operations.destroy(self._fsm)
        self._logger.info("session_closed", extra={"session_id": self.session_id[:8] + "..."})
