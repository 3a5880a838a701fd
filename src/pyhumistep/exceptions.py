"""Custom exception hierarchy for pyhumistep."""

from __future__ import annotations


class HumistepError(Exception):
    """Base exception for all pyhumistep errors."""


class HumistepConfigError(HumistepError):
    """Invalid or missing configuration."""


class UnreachableError(HumistepError):
    """A value outside its defined set reached a code path.

    Signals a broken caller contract (e.g. a raw power flag that is
    neither ``0`` nor ``1``).  The library never catches it.
    """


class HumistepTransportError(HumistepError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class HumistepApiError(HumistepError):
    """API returned a ``statusCode`` other than ``100``."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class HumistepAuthenticationError(HumistepApiError):
    """Token rejected by the server (HTTP 401)."""


class HumistepRateLimitError(HumistepApiError):
    """Daily request quota exhausted (HTTP 429)."""


class HumistepDeviceNotFoundError(HumistepApiError):
    """Device id unknown to the account (code 152)."""


class HumistepCommandNotSupportedError(HumistepApiError):
    """Command not supported by the device (code 160)."""


class HumistepDeviceOfflineError(HumistepApiError):
    """Device or its hub is offline (codes 161 and 171).

    Infrared remotes are reached through a hub, so a hub outage surfaces
    the same way as an offline device.
    """
