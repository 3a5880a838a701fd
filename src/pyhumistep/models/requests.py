"""Pydantic request models for client entrypoints.

These models provide a consistent "validate → normalize → execute" flow.
They are used internally by :class:`pyhumistep.client.SwitchBotClient`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from pyhumistep._constants import COMMAND_TYPE_COMMAND, COMMAND_TYPE_CUSTOMIZE, DEFAULT_PARAMETER


class CommandRequest(BaseModel):
    """Body of ``POST /devices/{deviceId}/commands``."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    device_id: str
    command: str
    command_type: str = COMMAND_TYPE_CUSTOMIZE
    parameter: str = DEFAULT_PARAMETER

    @field_validator("device_id", "command")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must be non-empty")
        return value

    @field_validator("command_type")
    @classmethod
    def _known_command_type(cls, value: str) -> str:
        if value not in (COMMAND_TYPE_COMMAND, COMMAND_TYPE_CUSTOMIZE):
            raise ValueError(f"command_type must be 'command' or 'customize', got {value!r}")
        return value

    def to_payload(self) -> dict[str, Any]:
        """JSON body as sent on the wire (camelCase, no device id)."""
        return self.model_dump(by_alias=True, exclude={"device_id"})
