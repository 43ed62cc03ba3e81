from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Optional

from homeassistant.core import HomeAssistant, callback

from .const import DATA_STRATEGIES, DOMAIN
from .strategy import snapshot_from_hass

_LOGGER = logging.getLogger(__name__)

StrategyGenerator = Callable[[Mapping[str, Any]], dict]


def _strategies(hass: HomeAssistant) -> dict[str, StrategyGenerator]:
    return hass.data.setdefault(DOMAIN, {}).setdefault(DATA_STRATEGIES, {})


@callback
def async_register_strategy(hass: HomeAssistant, key: str, generator: StrategyGenerator) -> None:
    """Register a dashboard strategy under ``key``.

    Registering the same generator again is a no-op so reloads don't crash;
    a different generator under a taken key raises ValueError.
    """
    strategies = _strategies(hass)
    existing = strategies.get(key)
    if existing is generator:
        return
    if existing is not None:
        raise ValueError(f"Overwriting strategy {key}")
    strategies[key] = generator
    _LOGGER.debug("Keymaster: Registered dashboard strategy %s", key)


@callback
def async_unregister_strategy(hass: HomeAssistant, key: str) -> None:
    if _strategies(hass).pop(key, None) is not None:
        _LOGGER.debug("Keymaster: Unregistered dashboard strategy %s", key)


def get_strategy(hass: HomeAssistant, key: str) -> Optional[StrategyGenerator]:
    return _strategies(hass).get(key)


@callback
def async_generate(hass: HomeAssistant, key: str) -> dict:
    """Run the strategy registered under ``key`` against the current states."""
    generator = get_strategy(hass, key)
    if generator is None:
        raise KeyError(key)
    return generator(snapshot_from_hass(hass))
