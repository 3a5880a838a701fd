"""Shared helpers for SwitchBot API endpoint modules.

This module centralizes the most repeated patterns:
- parsing the ``{statusCode, body, message}`` envelope
- mapping common ``statusCode`` values to exceptions

It is internal to pyhumistep and may change at any time.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from pyhumistep._constants import (
    STATUS_COMMAND_NOT_SUPPORTED,
    STATUS_DEVICE_NOT_FOUND,
    STATUS_DEVICE_OFFLINE,
    STATUS_HUB_OFFLINE,
    STATUS_SUCCESS,
)
from pyhumistep.exceptions import (
    HumistepApiError,
    HumistepCommandNotSupportedError,
    HumistepDeviceNotFoundError,
    HumistepDeviceOfflineError,
    HumistepTransportError,
)
from pyhumistep.models._base import ApiResponse

_ERRORS_BY_STATUS: dict[int, type[HumistepApiError]] = {
    STATUS_DEVICE_NOT_FOUND: HumistepDeviceNotFoundError,
    STATUS_COMMAND_NOT_SUPPORTED: HumistepCommandNotSupportedError,
    STATUS_DEVICE_OFFLINE: HumistepDeviceOfflineError,
    STATUS_HUB_OFFLINE: HumistepDeviceOfflineError,
}


def _raise_for_status(*, endpoint: str, status_code: int, message: str) -> None:
    error_cls = _ERRORS_BY_STATUS.get(status_code, HumistepApiError)
    raise error_cls(
        f"{endpoint} failed: statusCode={status_code} message={message}",
        status_code=status_code,
        endpoint=endpoint,
    )


def parse_envelope(endpoint: str, response: dict[str, Any]) -> ApiResponse:
    """Validate the response envelope and raise on a non-success status."""
    try:
        envelope = ApiResponse.model_validate(response)
    except ValidationError as exc:
        raise HumistepTransportError(
            f"Malformed response envelope from {endpoint}",
            endpoint=endpoint,
        ) from exc

    if envelope.status_code != STATUS_SUCCESS:
        _raise_for_status(
            endpoint=endpoint,
            status_code=envelope.status_code,
            message=envelope.message,
        )
    return envelope
