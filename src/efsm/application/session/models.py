"""Models da sessão de exemplo.

SessionConfig chega aos handlers como payload do evento; SessionContext como
contexto do chamador. Ambos são repassados pelo engine sem modificação.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SessionConfig(BaseModel):
    """Parâmetros da sessão."""

    timeout_threshold: int = Field(default=3, ge=1)


class SessionContext(BaseModel):
    """Estado mutável da sessão mantido pelo chamador.

    - timeout_count: expirações consecutivas do INIT
    - events_handled: eventos que chegaram a um handler
    - sent: mensagens de protocolo "enviadas" pelos handlers, em ordem
    """

    timeout_count: int = 0
    events_handled: int = 0
    sent: list[str] = Field(default_factory=list)
