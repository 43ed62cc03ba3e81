from __future__ import annotations

from typing import Any

import voluptuous as vol

from homeassistant import config_entries

from .const import DOMAIN


class KeymasterDashboardFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Config flow for the Keymaster dashboard strategy."""

    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None):
        """Single instance; nothing to configure beyond confirming."""
        if self._async_current_entries():
            return self.async_abort(reason="single_instance_allowed")

        if user_input is not None:
            return self.async_create_entry(title="Keymaster Dashboard", data={})

        return self.async_show_form(step_id="user", data_schema=vol.Schema({}))

    async def async_step_import(self, user_input: dict[str, Any] | None = None):
        """YAML import path, delegates to user step."""
        return await self.async_step_user(user_input if user_input is not None else {})
