"""Códigos de retorno do engine FSM e dos handlers de evento."""

from __future__ import annotations

from enum import StrEnum


class ResultCode(StrEnum):
    """Códigos canônicos retornados pelas operações da FSM."""

    OK = "OK"
    """Sucesso (transição aplicada ou evento silencioso)."""

    NULL_HANDLE = "NULL_HANDLE"
    """Nenhuma instância foi informada."""

    INVALID_HANDLE = "INVALID_HANDLE"
    """Instância destruída ou objeto que não é uma FSM."""

    INVALID_EVENT_HANDLER = "INVALID_EVENT_HANDLER"
    """Evento sem handler no estado corrente (registrado no histórico)."""

    INVALID_STATE_TABLE = "INVALID_STATE_TABLE"
    """Tabela de estados malformada."""

    INVALID_STATE = "INVALID_STATE"
    """Estado fora do intervalo normalizado."""

    INVALID_EVENT_TABLE = "INVALID_EVENT_TABLE"
    """Tabela de eventos malformada."""

    INVALID_EVENT = "INVALID_EVENT"
    """Evento fora do intervalo normalizado."""

    NO_RESOURCES = "NO_RESOURCES"
    """Falha de alocação."""

    IGNORE_EVENT = "IGNORE_EVENT"
    """Handler pediu para ignorar o evento; sem transição."""

    STOP_PROCESSING = "STOP_PROCESSING"
    """Handler encerrou a FSM; nenhum acesso posterior à instância."""

    NOT_IN_HANDLER = "NOT_IN_HANDLER"
    """Operação permitida apenas durante a execução de um handler."""


# Códigos que não representam erro para quem chamou process_event
NON_ERROR_CODES = frozenset({
    ResultCode.OK,
    ResultCode.IGNORE_EVENT,
    ResultCode.STOP_PROCESSING,
})
