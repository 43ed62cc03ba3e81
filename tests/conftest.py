"""Common test fixtures."""
from __future__ import annotations

import types
from typing import Any
from unittest.mock import MagicMock

import pytest
from homeassistant.core import State


def make_snapshot(*entity_ids: str, value: Any = "on") -> dict[str, Any]:
    return {entity_id: value for entity_id in entity_ids}


@pytest.fixture
def snapshot() -> dict[str, Any]:
    return make_snapshot(
        "input_text.front_door_name_2",
        "input_text.front_door_name_1",
        "input_text.back_gate_name_5",
        "lock.front_door",
        "binary_sensor.front_door_door",
        "timer.keymaster_front_door_autolock",
        "sensor.unrelated_temperature",
    )


@pytest.fixture
def hass(snapshot) -> types.SimpleNamespace:
    states = [State(entity_id, value) for entity_id, value in snapshot.items()]
    return types.SimpleNamespace(
        data={},
        states=types.SimpleNamespace(async_all=lambda: list(states)),
    )


@pytest.fixture
def connection() -> MagicMock:
    return MagicMock()
