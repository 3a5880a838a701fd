"""Command endpoint: /devices/{deviceId}/commands.

Infrared remotes learned in the SwitchBot app are driven with
``commandType="customize"`` and the button name as ``command``.
Built-in commands (``turnOn``, ``turnOff``) use ``commandType="command"``.
"""

from __future__ import annotations

import logging

from pyhumistep._api._common import parse_envelope
from pyhumistep._transport import Transport
from pyhumistep.models.requests import CommandRequest

_logger = logging.getLogger(__name__)


def _commands_endpoint(device_id: str) -> str:
    return f"/devices/{device_id}/commands"


async def post_command(transport: Transport, request: CommandRequest) -> None:
    """Send one command; raises on any non-success response."""
    endpoint = _commands_endpoint(request.device_id)
    _logger.debug(
        "Sending command=%s type=%s to device=%s",
        request.command,
        request.command_type,
        request.device_id,
    )
    response = await transport.request("POST", endpoint, request.to_payload())
    parse_envelope(endpoint, response)
