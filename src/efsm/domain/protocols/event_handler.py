"""Contrato dos handlers de evento.

Um handler recebe o payload do evento e o contexto do chamador (ambos
repassados sem modificação) e devolve o desfecho do processamento:

- None ou ResultCode.OK: sucesso, usa o next_state da tabela
- HandlerResult.override(state): sucesso, com estado de exceção
- HandlerResult.ignore(): evento ignorado, sem transição
- HandlerResult.error(code): falha, sem transição
- HandlerResult.stop(): encerra; o engine não toca mais na instância
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from efsm.domain.codes import ResultCode


@dataclass(frozen=True, slots=True)
class HandlerResult:
    """Desfecho tipado de um handler."""

    code: ResultCode = ResultCode.OK
    override_state: int | None = None

    @classmethod
    def ok(cls) -> HandlerResult:
        return cls()

    @classmethod
    def override(cls, state: int) -> HandlerResult:
        """Sucesso com próximo estado diferente do declarado na tabela."""
        return cls(code=ResultCode.OK, override_state=state)

    @classmethod
    def ignore(cls) -> HandlerResult:
        return cls(code=ResultCode.IGNORE_EVENT)

    @classmethod
    def error(cls, code: ResultCode) -> HandlerResult:
        if code == ResultCode.OK:
            raise ValueError("error() requer um código diferente de OK")
        return cls(code=code)

    @classmethod
    def stop(cls) -> HandlerResult:
        return cls(code=ResultCode.STOP_PROCESSING)

    @property
    def is_stop(self) -> bool:
        return self.code == ResultCode.STOP_PROCESSING


HandlerReturn = HandlerResult | ResultCode | None


class EventHandler(Protocol):
    """Callable invocado pelo engine para processar um evento."""

    def __call__(self, event: Any, context: Any) -> HandlerReturn: ...


def coerce_handler_result(raw: HandlerReturn) -> HandlerResult:
    """Normaliza o retorno de um handler para HandlerResult."""

    if raw is None:
        return HandlerResult.ok()
    if isinstance(raw, HandlerResult):
        return raw
    if isinstance(raw, ResultCode):
        return HandlerResult(code=raw)
    raise TypeError(f"Retorno de handler não suportado: {type(raw).__name__}")
