"""Histórico circular de eventos processados pela FSM."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime

from efsm.domain.codes import ResultCode
from efsm.domain.table import FSM_HISTORY


@dataclass(frozen=True, slots=True)
class HistoryRecord:
    """Registro de um evento processado (aplicado ou não)."""

    number: int
    previous_state: int
    new_state: int
    event_id: int
    handler_result: ResultCode
    recorded_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))


class HistoryRing:
    """Buffer circular de capacidade fixa; sobrescreve o registro mais antigo.

    Slots vazios (None) são o sentinela inicial e nunca aparecem na
    travessia, que vai do mais recente ao mais antigo.
    """

    def __init__(self, capacity: int = FSM_HISTORY) -> None:
        if capacity < 1:
            raise ValueError("capacity deve ser >= 1")
        self._capacity = capacity
        self._slots: list[HistoryRecord | None] | None = [None] * capacity
        self._write_index = 0
        self._sequence = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def released(self) -> bool:
        return self._slots is None

    def record(
        self,
        previous_state: int,
        new_state: int,
        event_id: int,
        handler_result: ResultCode,
    ) -> HistoryRecord:
        """Grava um registro na posição corrente e avança o índice."""

        slots = self._require_slots()
        self._sequence += 1
        entry = HistoryRecord(
            number=self._sequence,
            previous_state=previous_state,
            new_state=new_state,
            event_id=event_id,
            handler_result=handler_result,
        )
        slots[self._write_index] = entry
        self._write_index = (self._write_index + 1) % self._capacity
        return entry

    def latest(self) -> HistoryRecord | None:
        return next(iter(self), None)

    def release(self) -> None:
        """Libera o buffer; usado na destruição da FSM."""
        self._slots = None

    def __iter__(self) -> Iterator[HistoryRecord]:
        slots = self._require_slots()
        index = self._write_index
        for _ in range(self._capacity):
            index = (index - 1) % self._capacity
            entry = slots[index]
            if entry is not None:
                yield entry

    def __len__(self) -> int:
        if self._slots is None:
            return 0
        return sum(1 for entry in self._slots if entry is not None)

    def _require_slots(self) -> list[HistoryRecord | None]:
        if self._slots is None:
            raise RuntimeError("histórico já foi liberado")
        return self._slots
