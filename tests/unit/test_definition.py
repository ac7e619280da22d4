"""Testes da definição declarativa (dict/JSON → FSM)."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from efsm.config.definition import MachineDefinition, load_definition
from efsm.domain.codes import ResultCode
from efsm.domain.errors import InvalidEventTableError, InvalidStateTableError


def _toggle_definition() -> dict:
    return {
        "name": "Toggle",
        "initial_state": 0,
        "states": [{"id": 0, "description": "Off"}, {"id": 1, "description": "On"}],
        "events": [{"id": 0, "description": "Flip"}, {"id": 1, "description": "Noop"}],
        "transitions": [
            [
                {"event": 0, "handler": "flip", "next_state": 1},
                {"event": 1, "handler": None, "next_state": 0},
            ],
            [
                {"event": 0, "handler": "flip", "next_state": 0},
                {"event": 1, "next_state": 1},
            ],
        ],
    }


def _flip(event, context):
    context.append(event)
    return None


class TestMachineDefinition:
    def test_build_from_dict(self) -> None:
        definition = MachineDefinition.model_validate(_toggle_definition())
        fsm = definition.build({"flip": _flip})
        seen: list = []

        assert fsm.name == "Toggle"
        assert fsm.process_event(0, "payload", seen) == ResultCode.OK
        assert fsm.get_current_state() == 1
        assert seen == ["payload"]
        assert fsm.process_event(1) == ResultCode.OK
        assert fsm.get_current_state() == 1

    def test_handler_names(self) -> None:
        definition = MachineDefinition.model_validate(_toggle_definition())
        assert definition.handler_names() == {"flip"}

    def test_unknown_handler(self) -> None:
        definition = MachineDefinition.model_validate(_toggle_definition())
        with pytest.raises(InvalidEventTableError, match="flip"):
            definition.build({})

    def test_structural_errors_reported_by_validator(self) -> None:
        raw = _toggle_definition()
        raw["states"][1]["id"] = 5
        definition = MachineDefinition.model_validate(raw)
        with pytest.raises(InvalidStateTableError):
            definition.build({"flip": _flip})

    def test_extra_fields_rejected(self) -> None:
        raw = _toggle_definition()
        raw["unexpected"] = True
        with pytest.raises(ValidationError):
            MachineDefinition.model_validate(raw)

    def test_load_definition_from_file(self, tmp_path) -> None:
        path = tmp_path / "toggle.json"
        path.write_text(json.dumps(_toggle_definition()), encoding="utf-8")

        definition = load_definition(path)
        assert len(definition.states) == 2
        assert definition.transitions[1][1].handler is None

    def test_unnamed_definition_uses_settings_default(self, monkeypatch) -> None:
        monkeypatch.setenv("EFSM_DEFAULT_MACHINE_NAME", "Configured")
        raw = _toggle_definition()
        raw["name"] = None
        fsm = MachineDefinition.model_validate(raw).build({"flip": _flip})
        assert fsm.name == "Configured"
