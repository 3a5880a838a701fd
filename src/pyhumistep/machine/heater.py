"""On/off heater controller.

Heaters are plugged into a SwitchBot plug, so power is both readable and
settable through built-in commands.  Temperature is not controllable; the
getters report fixed values.
"""

from __future__ import annotations

import logging

from pyhumistep._common import unreachable
from pyhumistep._constants import COMMAND_TYPE_COMMAND, DEFAULT_PARAMETER
from pyhumistep.machine.base import DeviceClient
from pyhumistep.models.state import AccessoryContext, HeaterState

_logger = logging.getLogger(__name__)

FIXED_TARGET_TEMPERATURE = 25.0
FIXED_CURRENT_TEMPERATURE = 22.0


class HeaterController:
    def __init__(
        self,
        context: AccessoryContext,
        client: DeviceClient,
    ) -> None:
        state = context.state
        if not isinstance(state, HeaterState):
            state = HeaterState()
            context.state = state
        if context.device is None:
            unreachable(context.device)

        self._state = state
        self._device_id = context.device.device_id
        self._client = client

    @property
    def device_id(self) -> str:
        return self._device_id

    @property
    def state(self) -> HeaterState:
        return self._state

    async def get_active(self) -> bool:
        """Read the plug's power state; API errors propagate to the adapter."""
        status = await self._client.get_device_status(self._device_id)
        return status.is_on

    async def set_active(self, value: bool) -> None:
        try:
            await self._client.send_command(
                self._device_id,
                "turnOn" if value else "turnOff",
                command_type=COMMAND_TYPE_COMMAND,
                parameter=DEFAULT_PARAMETER,
            )
        except Exception:
            _logger.debug("Power command failed for heater %s", self._device_id, exc_info=True)

    async def get_target_temperature(self) -> float:
        return FIXED_TARGET_TEMPERATURE

    async def set_target_temperature(self, value: float) -> None:
        _logger.debug("Ignoring target temperature %s for heater %s", value, self._device_id)

    async def get_temperature(self) -> float:
        return FIXED_CURRENT_TEMPERATURE
