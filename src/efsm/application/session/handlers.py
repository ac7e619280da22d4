"""Handlers de evento da sessão de exemplo."""

from __future__ import annotations

from efsm.application.session.models import SessionConfig, SessionContext
from efsm.domain.protocols.event_handler import HandlerResult, HandlerReturn
from efsm.domain.session.states import SessionState
from efsm.observability.logging import get_logger

logger = get_logger(__name__)


def event_ignore(config: SessionConfig, context: SessionContext) -> HandlerReturn:
    """Evento sem efeito no estado corrente (mantém o next_state da tabela)."""
    context.events_handled += 1
    return None


def event_start_init(config: SessionConfig, context: SessionContext) -> HandlerReturn:
    context.events_handled += 1
    context.timeout_count = 0
    context.sent.append("INIT")
    return None


def event_init_rcvd(config: SessionConfig, context: SessionContext) -> HandlerReturn:
    context.events_handled += 1
    context.sent.append("INIT_ACK")
    return None


def event_init_ack_rcvd(config: SessionConfig, context: SessionContext) -> HandlerReturn:
    context.events_handled += 1
    context.timeout_count = 0
    return None


def event_init_ack_tmo(config: SessionConfig, context: SessionContext) -> HandlerReturn:
    """Conta expirações do INIT.

    Abaixo do limite reenvia o INIT e permanece aguardando o ACK; ao atingir o
    limite desiste do handshake e volta para IDLE via override.
    """
    context.events_handled += 1
    context.timeout_count += 1

    if context.timeout_count >= config.timeout_threshold:
        logger.warning(
            "session_init_timeouts_exceeded",
            extra={
                "timeout_count": context.timeout_count,
                "threshold": config.timeout_threshold,
            },
        )
        context.timeout_count = 0
        return HandlerResult.override(SessionState.IDLE)

    logger.debug(
        "session_init_timeout",
        extra={
            "timeout_count": context.timeout_count,
            "threshold": config.timeout_threshold,
        },
    )
    context.sent.append("INIT")
    return None


def event_start_term(config: SessionConfig, context: SessionContext) -> HandlerReturn:
    context.events_handled += 1
    context.sent.append("TERM")
    return None


def event_term_rcvd(config: SessionConfig, context: SessionContext) -> HandlerReturn:
    context.events_handled += 1
    context.sent.append("TERM_ACK")
    return None


def event_term_ack_rcvd(config: SessionConfig, context: SessionContext) -> HandlerReturn:
    context.events_handled += 1
    return None
