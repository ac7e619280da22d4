"""Estados normalizados da sessão de exemplo (protocolo init/terminate)."""

from __future__ import annotations

from enum import IntEnum


class SessionState(IntEnum):
    """4 estados; o valor é o índice na tabela de estados."""

    IDLE = 0
    """Sessão dormente; START_INIT dá início ao handshake."""

    WAIT_INIT_ACK = 1
    """INIT enviado; aguardando ACK ou expiração do guard timer."""

    ESTABLISHED = 2
    """INIT e INIT ACK trocados."""

    WAIT_TERM_ACK = 3
    """TERMINATE enviado; aguardando ACK."""


STATE_DESCRIPTIONS: dict[SessionState, str] = {
    SessionState.IDLE: "Idle State",
    SessionState.WAIT_INIT_ACK: "Wait for Init Ack State",
    SessionState.ESTABLISHED: "Established State",
    SessionState.WAIT_TERM_ACK: "Wait for Terminate Ack State",
}
