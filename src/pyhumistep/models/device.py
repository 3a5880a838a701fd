"""Device listing and status models."""

from __future__ import annotations

from pydantic import Field

from pyhumistep.models._base import SwitchBotBaseModel


class Device(SwitchBotBaseModel):
    """A device or infrared remote registered on the account.

    Physical devices carry ``device_type``; infrared remotes carry
    ``remote_type`` and the id of the hub that emits their signals.
    """

    device_id: str
    device_name: str = ""
    device_type: str | None = None
    remote_type: str | None = None
    hub_device_id: str = ""
    enable_cloud_service: bool | None = None


class DeviceList(SwitchBotBaseModel):
    """Body of ``GET /devices``."""

    device_list: list[Device] = Field(default_factory=list)
    infrared_remote_list: list[Device] = Field(default_factory=list)


class DeviceStatus(SwitchBotBaseModel):
    """Body of ``GET /devices/{deviceId}/status``.

    Only the fields shared by plugs and meters are modelled; the full
    payload stays available in ``raw``.
    """

    device_id: str = ""
    device_type: str = ""
    hub_device_id: str = ""
    power: str | None = None
    humidity: int | None = None
    temperature: float | None = None

    @property
    def is_on(self) -> bool:
        return self.power == "on"
