"""Correlation id em contextvars para logs da FSM."""

from __future__ import annotations

import contextlib
import uuid
from collections.abc import Generator
from contextvars import ContextVar

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id corrente (ou vazio)."""

    return _correlation_id.get()


@contextlib.contextmanager
def bind_correlation_id(correlation_id: str | None = None) -> Generator[str, None, None]:
    """Associa um correlation_id aos logs emitidos dentro do bloco.

    Usage:
        with bind_correlation_id("sess-42"):
            fsm.process_event(...)
    """
    value = correlation_id or str(uuid.uuid4())
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
