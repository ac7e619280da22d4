"""Exceções da FSM.

Erros de construção e de uso indevido de handle são exceções; resultados de
eventos em tempo de execução são `ResultCode` retornados por process_event.
"""

from __future__ import annotations

from efsm.domain.codes import ResultCode


class FSMError(Exception):
    """Erro base da FSM; subclasses fixam o ResultCode correspondente."""

    code: ResultCode | None = None

    def __init__(self, reason: str, code: ResultCode | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        if self.code is None:
            return self.reason
        return f"{self.code}: {self.reason}"


class FSMTableError(FSMError):
    """Falha estrutural detectada durante a construção."""

    code = ResultCode.INVALID_STATE_TABLE


class InvalidStateTableError(FSMTableError):
    """IDs de estado não contíguos, tabelas desalinhadas ou eventos ausentes."""

    code = ResultCode.INVALID_STATE_TABLE


class InvalidEventTableError(FSMTableError):
    """IDs de evento não contíguos ou tuplas de transição desalinhadas."""

    code = ResultCode.INVALID_EVENT_TABLE


class InvalidInitialStateError(FSMTableError):
    """Estado inicial fora de [0, number_states)."""

    code = ResultCode.INVALID_STATE


class NoResourcesError(FSMError):
    code = ResultCode.NO_RESOURCES


class FSMHandleError(FSMError):
    """Uso indevido de handle (nulo ou inválido)."""

    code = ResultCode.INVALID_HANDLE


class NullHandleError(FSMHandleError):
    code = ResultCode.NULL_HANDLE


class InvalidHandleError(FSMHandleError):
    """Instância destruída ou objeto que não é uma StateMachine."""

    code = ResultCode.INVALID_HANDLE
