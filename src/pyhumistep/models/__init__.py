"""Data models for SwitchBot API responses and controller state."""

from pyhumistep.models._base import ApiResponse, SwitchBotBaseModel
from pyhumistep.models.device import Device, DeviceList, DeviceStatus
from pyhumistep.models.requests import CommandRequest
from pyhumistep.models.state import AccessoryContext, HeaterState, HumidifierState, MachineState

__all__ = [
    "AccessoryContext",
    "ApiResponse",
    "CommandRequest",
    "Device",
    "DeviceList",
    "DeviceStatus",
    "HeaterState",
    "HumidifierState",
    "MachineState",
    "SwitchBotBaseModel",
]
