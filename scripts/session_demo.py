#!/usr/bin/env python
"""Script de diagnóstico da sessão de exemplo.

Executa:
1. Criação da FSM da sessão (IDLE)
2. START_INIT, dois INIT_TMO, INIT_ACK, START_TERM, TERM_ACK
3. Dump do histórico e da tabela de estados

Uso:
    python scripts/session_demo.py
"""

import sys
from pathlib import Path

# Adicionar src ao path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from efsm.application.session import SessionManager
from efsm.config.settings import get_settings
from efsm.domain.codes import ResultCode
from efsm.domain.session import SessionEvent
from efsm.observability.logging import configure_logging

SCENARIO = (
    SessionEvent.START_INIT,
    SessionEvent.INIT_TMO,
    SessionEvent.INIT_TMO,
    SessionEvent.INIT_ACK,
    SessionEvent.START_TERM,
    SessionEvent.TERM_ACK,
)


def main() -> int:
    settings = get_settings()
    errors = settings.validate_logging_config() + settings.validate_fsm_config()
    if errors:
        for error in errors:
            print(f"❌ {error}")
        return 1
    configure_logging(settings.log_level, settings.service_name, settings.log_format)

    session = SessionManager()
    failures = 0
    for event in SCENARIO:
        rc = session.handle(event)
        print(f"{event.name:<12} -> {session.state.name:<14} rc={rc.value}")
        if rc != ResultCode.OK:
            failures += 1

    session.show_history()
    session.show_table()
    session.close()
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
