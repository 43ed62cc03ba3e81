from __future__ import annotations

import voluptuous as vol

from homeassistant.core import HomeAssistant, callback
from homeassistant.components import websocket_api

from .const import STRATEGY_KEY, WS_GENERATE
from .registry import async_generate


@websocket_api.websocket_command(
    {
        vol.Required("type"): WS_GENERATE,
        vol.Optional("strategy", default=STRATEGY_KEY): str,
    }
)
@callback
def ws_generate(hass: HomeAssistant, connection: websocket_api.ActiveConnection, msg: dict) -> None:
    key = msg.get("strategy", STRATEGY_KEY)
    try:
        dashboard = async_generate(hass, key)
    except KeyError:
        connection.send_error(msg["id"], "not_found", f"Unknown strategy {key}")
        return
    connection.send_result(msg["id"], dashboard)


def register_ws_handlers(hass: HomeAssistant) -> None:
    websocket_api.async_register_command(hass, ws_generate)
