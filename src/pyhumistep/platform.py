"""Device discovery: match infrared remotes by name and build controllers."""

from __future__ import annotations

import logging
import re

from pyhumistep.client import SwitchBotClient
from pyhumistep.config import HumistepConfig
from pyhumistep.machine.heater import HeaterController
from pyhumistep.machine.humidifier import HumidifierController
from pyhumistep.models.device import Device
from pyhumistep.models.state import AccessoryContext
from pyhumistep.state.store import ContextStore

_logger = logging.getLogger(__name__)

Controller = HumidifierController | HeaterController


class HumistepPlatform:
    """Discover supported remotes and own one controller per device.

    Usage::

        async with SwitchBotClient(config) as client:
            platform = HumistepPlatform(config, client, ContextStore.load(saved))
            await platform.discover_devices()
            humidifier = platform.controllers["02-2021..."]
    """

    def __init__(
        self,
        config: HumistepConfig,
        client: SwitchBotClient,
        store: ContextStore | None = None,
    ) -> None:
        self._config = config
        self._client = client
        self._store = store if store is not None else ContextStore()
        self._humidifier_re = re.compile(config.humidifier_pattern, re.IGNORECASE)
        self._heater_re = re.compile(config.heater_pattern, re.IGNORECASE)
        self._controllers: dict[str, Controller] = {}

    @property
    def store(self) -> ContextStore:
        return self._store

    @property
    def controllers(self) -> dict[str, Controller]:
        return dict(self._controllers)

    async def discover_devices(self) -> dict[str, Controller]:
        """List remotes and build controllers for the ones that match.

        Devices already known keep their controller (and its in-memory
        transition state).
        """
        devices = await self._client.get_devices()

        for device in devices.infrared_remote_list:
            if device.device_id in self._controllers:
                continue
            if self._humidifier_re.search(device.device_name):
                context = self._get_context(device)
                self._controllers[device.device_id] = HumidifierController(context, self._config, self._client)
            elif self._heater_re.search(device.device_name):
                context = self._get_context(device)
                self._controllers[device.device_id] = HeaterController(context, self._client)
            else:
                _logger.debug("Skipping unsupported remote %s (%s)", device.device_name, device.device_id)

        return self.controllers

    def _get_context(self, device: Device) -> AccessoryContext:
        existing = self._store.get(device.device_id)
        if existing is not None:
            _logger.info("Restoring existing accessory from cache: %s", device.device_name)
            if existing.device is None:
                existing.device = device
            return existing

        _logger.info("Adding new accessory: %s", device.device_name)
        return self._store.register(device)

    async def aclose(self) -> None:
        for controller in self._controllers.values():
            if isinstance(controller, HumidifierController):
                await controller.aclose()
