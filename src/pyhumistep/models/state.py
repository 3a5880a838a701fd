"""Per-device state records.

These are the only records the controllers persist.  They are handed to a
controller inside an :class:`AccessoryContext` and mutated in place, so
the owner of the context can store them again after any call.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from pyhumistep.models.device import Device


class HumidifierState(BaseModel):
    """State of a step-controlled humidifier."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["humidifier"] = "humidifier"
    active: bool = False
    target_humidity: int = 50
    """Absolute humidity the user asked for (30-90, step 5)."""
    internal_position: int | None = None
    """Best estimate of the device's current setting; ``None`` = humidity control off."""


class HeaterState(BaseModel):
    """State of an on/off heater (power is read from the API)."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["heater"] = "heater"


MachineState = Annotated[HumidifierState | HeaterState, Field(discriminator="type")]


class AccessoryContext(BaseModel):
    """Device identity plus its persisted state record."""

    model_config = ConfigDict(extra="ignore")

    device: Device | None = None
    state: MachineState | None = None
