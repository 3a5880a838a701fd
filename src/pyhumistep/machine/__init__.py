"""Device controllers exposed to accessory adapters."""

from pyhumistep.machine.abort import AbortOutcome, AbortSignal
from pyhumistep.machine.base import CommandSender, DeviceClient, HeaterMachine, HumidifierMachine, StatusReader
from pyhumistep.machine.heater import HeaterController
from pyhumistep.machine.humidifier import HumidifierController

__all__ = [
    "AbortOutcome",
    "AbortSignal",
    "CommandSender",
    "DeviceClient",
    "HeaterController",
    "HeaterMachine",
    "HumidifierController",
    "HumidifierMachine",
    "StatusReader",
]
