"""Eventos normalizados da sessão de exemplo."""

from __future__ import annotations

from enum import IntEnum


class SessionEvent(IntEnum):
    """7 eventos; o valor é o índice em cada tabela de tuplas."""

    START_INIT = 0
    """Cliente inicia a sessão enviando INIT."""

    INIT_RCVD = 1
    """Servidor recebeu um INIT."""

    INIT_TMO = 2
    """Guard timer expirou sem ACK do INIT."""

    INIT_ACK = 3
    """Cliente recebeu o ACK do INIT."""

    START_TERM = 4
    """Encerramento da sessão estabelecida (envia TERMINATE)."""

    TERM_RCVD = 5
    """TERMINATE recebido; encerra e envia ACK."""

    TERM_ACK = 6
    """ACK do TERMINATE."""


EVENT_DESCRIPTIONS: dict[SessionEvent, str] = {
    SessionEvent.START_INIT: "Start Session Init",
    SessionEvent.INIT_RCVD: "Session Init",
    SessionEvent.INIT_TMO: "Session Init ACK TMO",
    SessionEvent.INIT_ACK: "Session Init ACK",
    SessionEvent.START_TERM: "Start Session Termination",
    SessionEvent.TERM_RCVD: "Session Terminate",
    SessionEvent.TERM_ACK: "Session Terminate ACK",
}
