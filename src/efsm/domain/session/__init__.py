"""Sessão de exemplo: estados e eventos normalizados.

Exporta:
- SessionState: 4 estados
- SessionEvent: 7 eventos
- STATE_DESCRIPTIONS / EVENT_DESCRIPTIONS: textos usados nos dumps
"""

from efsm.domain.session.events import EVENT_DESCRIPTIONS, SessionEvent
from efsm.domain.session.states import STATE_DESCRIPTIONS, SessionState

__all__ = [
    "SessionState",
    "SessionEvent",
    "STATE_DESCRIPTIONS",
    "EVENT_DESCRIPTIONS",
]
