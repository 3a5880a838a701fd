"""High-level async client for the SwitchBot cloud API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyhumistep._api.commands import post_command
from pyhumistep._api.devices import fetch_device_status, fetch_devices
from pyhumistep._constants import COMMAND_TYPE_CUSTOMIZE, DEFAULT_PARAMETER
from pyhumistep._transport import HttpTransport, Transport
from pyhumistep.config import HumistepConfig
from pyhumistep.exceptions import HumistepError
from pyhumistep.models.device import DeviceList, DeviceStatus
from pyhumistep.models.requests import CommandRequest

_logger = logging.getLogger(__name__)


class SwitchBotClient:
    """Async client for the SwitchBot API.

    Usage::

        async with SwitchBotClient(config) as client:
            devices = await client.get_devices()
            await client.send_command(device_id, "電源")

    A pre-built *transport* can be injected instead of an aiohttp session,
    which is how the tests drive the client.
    """

    def __init__(
        self,
        config: HumistepConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport

    @property
    def config(self) -> HumistepConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> SwitchBotClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise HumistepError("Client not initialized. Use 'async with SwitchBotClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_devices(self) -> DeviceList:
        """List devices and infrared remotes on the account."""
        return await fetch_devices(self._require_transport())

    async def get_device_status(self, device_id: str) -> DeviceStatus:
        """Read the status of a physical device."""
        return await fetch_device_status(self._require_transport(), device_id)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def send_command(
        self,
        device_id: str,
        command: str,
        *,
        command_type: str = COMMAND_TYPE_CUSTOMIZE,
        parameter: str = DEFAULT_PARAMETER,
    ) -> None:
        """Send one command to a device.

        Returns normally on success and raises a
        :class:`~pyhumistep.exceptions.HumistepError` subclass otherwise.
        """
        request = CommandRequest(
            device_id=device_id,
            command=command,
            command_type=command_type,
            parameter=parameter,
        )
        await post_command(self._require_transport(), request)
