"""pyhumistep - Async controller for step-only humidifiers behind a SwitchBot hub."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyhumistep")
except PackageNotFoundError:
    __version__ = "0+local"
from pyhumistep.client import SwitchBotClient
from pyhumistep.config import CommandMapping, HumistepConfig
from pyhumistep.exceptions import (
    HumistepApiError,
    HumistepAuthenticationError,
    HumistepCommandNotSupportedError,
    HumistepConfigError,
    HumistepDeviceNotFoundError,
    HumistepDeviceOfflineError,
    HumistepError,
    HumistepRateLimitError,
    HumistepTransportError,
    UnreachableError,
)
from pyhumistep.machine import (
    AbortOutcome,
    AbortSignal,
    HeaterController,
    HeaterMachine,
    HumidifierController,
    HumidifierMachine,
)
from pyhumistep.models import (
    AccessoryContext,
    Device,
    DeviceList,
    DeviceStatus,
    HeaterState,
    HumidifierState,
)
from pyhumistep.platform import HumistepPlatform
from pyhumistep.state import ContextStore

__all__ = [
    "__version__",
    "AbortOutcome",
    "AbortSignal",
    "AccessoryContext",
    "CommandMapping",
    "ContextStore",
    "Device",
    "DeviceList",
    "DeviceStatus",
    "HeaterController",
    "HeaterMachine",
    "HeaterState",
    "HumidifierController",
    "HumidifierMachine",
    "HumidifierState",
    "HumistepApiError",
    "HumistepAuthenticationError",
    "HumistepCommandNotSupportedError",
    "HumistepConfig",
    "HumistepConfigError",
    "HumistepDeviceNotFoundError",
    "HumistepDeviceOfflineError",
    "HumistepError",
    "HumistepPlatform",
    "HumistepRateLimitError",
    "HumistepTransportError",
    "SwitchBotClient",
    "UnreachableError",
]
