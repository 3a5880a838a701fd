"""Interfaces between controllers, the API client and adapters."""

from __future__ import annotations

from typing import Protocol

from pyhumistep.models.device import DeviceStatus


class CommandSender(Protocol):
    """Outbound command channel; raises on failure, returns ``None`` on success.

    :class:`pyhumistep.client.SwitchBotClient` is the production
    implementation.
    """

    async def send_command(
        self,
        device_id: str,
        command: str,
        *,
        command_type: str = ...,
        parameter: str = ...,
    ) -> None:
        ...


class StatusReader(Protocol):
    async def get_device_status(self, device_id: str) -> DeviceStatus:
        ...


class HumidifierMachine(Protocol):
    """What an accessory adapter needs from a humidifier."""

    async def get_humidity(self) -> int:
        ...

    async def get_active(self) -> bool:
        ...

    async def set_active(self, value: bool) -> None:
        ...

    async def get_target_humidity(self) -> int:
        ...

    async def set_target_humidity(self, value: float) -> None:
        ...


class HeaterMachine(Protocol):
    """What an accessory adapter needs from a heater."""

    async def get_temperature(self) -> float:
        ...

    async def get_active(self) -> bool:
        ...

    async def set_active(self, value: bool) -> None:
        ...

    async def get_target_temperature(self) -> float:
        ...

    async def set_target_temperature(self, value: float) -> None:
        ...


class DeviceClient(CommandSender, StatusReader, Protocol):
    """A client that can both command a device and read its status."""
