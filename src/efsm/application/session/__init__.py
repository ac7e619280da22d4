"""Package `session`: sessão de exemplo dirigida pela FSM.

Exports principais:
- SessionConfig / SessionContext: payload e contexto repassados aos handlers
- create_session_machine: fábrica da FSM com as tabelas da sessão
- SessionManager: dono da FSM de uma sessão (de session/manager.py)
"""

from __future__ import annotations

from efsm.application.session.machine import create_session_machine
from efsm.application.session.manager import SessionManager
from efsm.application.session.models import SessionConfig, SessionContext

__all__ = ["SessionConfig", "SessionContext", "create_session_machine", "SessionManager"]
