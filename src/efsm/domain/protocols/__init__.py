"""Re-exports dos Protocolos de domínio para uso por Application."""

from __future__ import annotations

from efsm.domain.protocols.event_handler import (
    EventHandler,
    HandlerResult,
    HandlerReturn,
    coerce_handler_result,
)

__all__ = [
    "EventHandler",
    "HandlerResult",
    "HandlerReturn",
    "coerce_handler_result",
]
