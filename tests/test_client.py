from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from pyhumistep.client import SwitchBotClient
from pyhumistep.config import HumistepConfig
from pyhumistep.exceptions import (
    HumistepApiError,
    HumistepCommandNotSupportedError,
    HumistepDeviceNotFoundError,
    HumistepDeviceOfflineError,
    HumistepError,
    HumistepTransportError,
)

_DEVICES_RESPONSE = {
    "statusCode": 100,
    "body": {
        "deviceList": [
            {
                "deviceId": "483FDA0AFD5D",
                "deviceName": "Plug 1",
                "deviceType": "Plug",
                "enableCloudService": True,
                "hubDeviceId": "000000000000",
            },
            {
                "deviceId": "F3709208082A",
                "deviceName": "Hub Mini",
                "deviceType": "Hub Mini",
                "hubDeviceId": "000000000000",
            },
        ],
        "infraredRemoteList": [
            {
                "deviceId": "02-202102111506-97603093",
                "deviceName": "加湿器",
                "remoteType": "Others",
                "hubDeviceId": "F3709208082A",
            }
        ],
    },
    "message": "success",
}


class _FakeTransport:
    def __init__(self, response: dict[str, Any]) -> None:
        self._response = response
        self.requests: list[tuple[str, str, Mapping[str, Any] | None]] = []

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        self.requests.append((method, endpoint, payload))
        return self._response


def _client(response: dict[str, Any]) -> tuple[SwitchBotClient, _FakeTransport]:
    transport = _FakeTransport(response)
    return SwitchBotClient(HumistepConfig(token="token-1"), transport=transport), transport


@pytest.mark.asyncio
async def test_get_devices_parses_both_lists() -> None:
    client, transport = _client(_DEVICES_RESPONSE)

    devices = await client.get_devices()

    assert transport.requests == [("GET", "/devices", None)]
    assert [d.device_id for d in devices.device_list] == ["483FDA0AFD5D", "F3709208082A"]
    remote = devices.infrared_remote_list[0]
    assert remote.device_name == "加湿器"
    assert remote.remote_type == "Others"
    assert remote.hub_device_id == "F3709208082A"
    assert remote.raw["deviceId"] == "02-202102111506-97603093"


@pytest.mark.asyncio
async def test_get_device_status() -> None:
    client, transport = _client(
        {
            "statusCode": 100,
            "body": {"deviceId": "483FDA0AFD5D", "deviceType": "Plug", "hubDeviceId": "000000000000", "power": "on"},
            "message": "success",
        }
    )

    status = await client.get_device_status("483FDA0AFD5D")

    assert transport.requests == [("GET", "/devices/483FDA0AFD5D/status", None)]
    assert status.is_on is True


@pytest.mark.asyncio
async def test_send_command_posts_camel_case_body() -> None:
    client, transport = _client({"statusCode": 100, "body": {}, "message": "success"})

    await client.send_command("02-202102111506-97603093", "電源")

    assert transport.requests == [
        (
            "POST",
            "/devices/02-202102111506-97603093/commands",
            {"command": "電源", "commandType": "customize", "parameter": "default"},
        )
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "error_cls"),
    [
        (152, HumistepDeviceNotFoundError),
        (160, HumistepCommandNotSupportedError),
        (161, HumistepDeviceOfflineError),
        (171, HumistepDeviceOfflineError),
        (190, HumistepApiError),
    ],
)
async def test_send_command_maps_status_codes(status_code: int, error_cls: type[HumistepApiError]) -> None:
    client, _ = _client({"statusCode": status_code, "body": {}, "message": "error"})

    with pytest.raises(error_cls) as exc_info:
        await client.send_command("dev-1", "電源")

    assert exc_info.value.status_code == status_code
    assert exc_info.value.endpoint == "/devices/dev-1/commands"


@pytest.mark.asyncio
async def test_malformed_envelope_is_a_transport_error() -> None:
    client, _ = _client({"body": {}})

    with pytest.raises(HumistepTransportError):
        await client.get_devices()


@pytest.mark.asyncio
async def test_calls_require_entered_client() -> None:
    client = SwitchBotClient(HumistepConfig(token="token-1"))

    with pytest.raises(HumistepError, match="not initialized"):
        await client.get_devices()
