from __future__ import annotations

import pytest

from pyhumistep.exceptions import HumistepDeviceOfflineError, UnreachableError
from pyhumistep.machine.heater import HeaterController
from pyhumistep.models.device import Device, DeviceStatus
from pyhumistep.models.state import AccessoryContext, HeaterState, HumidifierState


class _FakeClient:
    def __init__(self, *, power: str = "off", fail_commands: bool = False) -> None:
        self.power = power
        self.fail_commands = fail_commands
        self.calls: list[tuple[str, str, str, str]] = []

    async def get_device_status(self, device_id: str) -> DeviceStatus:
        return DeviceStatus.model_validate({"deviceId": device_id, "deviceType": "Plug", "power": self.power})

    async def send_command(
        self,
        device_id: str,
        command: str,
        *,
        command_type: str = "customize",
        parameter: str = "default",
    ) -> None:
        self.calls.append((device_id, command, command_type, parameter))
        if self.fail_commands:
            raise HumistepDeviceOfflineError("offline", status_code=161)


def _context() -> AccessoryContext:
    return AccessoryContext(device=Device(device_id="483FDA0AFD5D", device_name="Heater"))


@pytest.mark.asyncio
async def test_get_active_reads_plug_power() -> None:
    controller = HeaterController(_context(), _FakeClient(power="on"))
    assert await controller.get_active() is True

    controller = HeaterController(_context(), _FakeClient(power="off"))
    assert await controller.get_active() is False


@pytest.mark.asyncio
async def test_set_active_sends_builtin_commands() -> None:
    client = _FakeClient()
    controller = HeaterController(_context(), client)

    await controller.set_active(True)
    await controller.set_active(False)

    assert client.calls == [
        ("483FDA0AFD5D", "turnOn", "command", "default"),
        ("483FDA0AFD5D", "turnOff", "command", "default"),
    ]


@pytest.mark.asyncio
async def test_set_active_failure_is_swallowed() -> None:
    client = _FakeClient(fail_commands=True)
    controller = HeaterController(_context(), client)

    await controller.set_active(True)

    assert len(client.calls) == 1


@pytest.mark.asyncio
async def test_temperature_values_are_fixed() -> None:
    controller = HeaterController(_context(), _FakeClient())

    await controller.set_target_temperature(30.0)

    assert await controller.get_target_temperature() == 25.0
    assert await controller.get_temperature() == 22.0


def test_humidifier_state_is_replaced_by_heater_state() -> None:
    context = _context()
    context.state = HumidifierState(active=True)

    HeaterController(context, _FakeClient())

    assert context.state == HeaterState()


def test_context_without_device_is_rejected() -> None:
    with pytest.raises(UnreachableError):
        HeaterController(AccessoryContext(), _FakeClient())
