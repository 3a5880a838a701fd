"""Device listing endpoints: /devices and /devices/{deviceId}/status."""

from __future__ import annotations

from pyhumistep._api._common import parse_envelope
from pyhumistep._transport import Transport
from pyhumistep.models.device import DeviceList, DeviceStatus

DEVICES_ENDPOINT = "/devices"


def _status_endpoint(device_id: str) -> str:
    return f"{DEVICES_ENDPOINT}/{device_id}/status"


async def fetch_devices(transport: Transport) -> DeviceList:
    """List physical devices and infrared remotes on the account."""
    response = await transport.request("GET", DEVICES_ENDPOINT)
    envelope = parse_envelope(DEVICES_ENDPOINT, response)
    return DeviceList.model_validate(envelope.body)


async def fetch_device_status(transport: Transport, device_id: str) -> DeviceStatus:
    """Read the live status of a physical device.

    Infrared remotes have no status; the API answers with an error code
    for them.
    """
    endpoint = _status_endpoint(device_id)
    response = await transport.request("GET", endpoint)
    envelope = parse_envelope(endpoint, response)
    return DeviceStatus.model_validate(envelope.body)
