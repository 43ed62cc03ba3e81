from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import DOMAIN, STRATEGY_KEY, STRATEGY_TYPE
from .registry import async_register_strategy, async_unregister_strategy
from .strategy import generate
from .websocket import register_ws_handlers

_LOGGER = logging.getLogger(__name__)


async def async_setup(hass: HomeAssistant, config: dict) -> bool:
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Register the dashboard strategy and its WS API."""
    domain_data = hass.data.setdefault(DOMAIN, {})

    async_register_strategy(hass, STRATEGY_KEY, generate)

    # WS commands cannot be unregistered, so register once per HA run
    if not domain_data.get("ws_registered"):
        register_ws_handlers(hass)
        domain_data["ws_registered"] = True

    _LOGGER.info("Keymaster: Dashboard strategy %s loaded", STRATEGY_TYPE)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry, drop the strategy registration."""
    async_unregister_strategy(hass, STRATEGY_KEY)
    return True
