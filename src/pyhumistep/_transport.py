"""HTTP transport with token authorization and API status handling."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyhumistep._constants import USER_AGENT
from pyhumistep._redact import redact_for_log
from pyhumistep.config import HumistepConfig
from pyhumistep.exceptions import (
    HumistepAuthenticationError,
    HumistepRateLimitError,
    HumistepTransportError,
)

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        ...


class HttpTransport:
    """HTTP transport that authorizes every request with the account token."""

    def __init__(
        self,
        config: HumistepConfig,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._http = http_session

    def _headers(self) -> dict[str, str]:
        return {
            "authorization": self._config.token,
            "content-type": "application/json; charset=utf8",
            "user-agent": USER_AGENT,
        }

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON envelope.

        The ``statusCode`` inside the envelope is left to the endpoint
        modules; only HTTP-level failures are raised here.
        """
        headers = self._headers()
        url = f"{self._config.base_url}{endpoint}"
        body = json.dumps(payload, ensure_ascii=False) if payload is not None else None

        _logger.debug(
            "%s %s headers=%s payload=%s",
            method,
            url,
            redact_for_log(headers),
            redact_for_log(payload),
        )

        try:
            async with self._http.request(method, url, data=body, headers=headers) as resp:
                text = await resp.text()
                status = resp.status
        except aiohttp.ClientError as exc:
            raise HumistepTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        if status == 401:
            raise HumistepAuthenticationError(
                f"Token rejected by {endpoint}",
                status_code=status,
                endpoint=endpoint,
            )
        if status == 429:
            raise HumistepRateLimitError(
                f"Request quota exceeded on {endpoint}",
                status_code=status,
                endpoint=endpoint,
            )
        if not 200 <= status < 300:
            raise HumistepTransportError(
                f"HTTP {status} from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            )

        try:
            result = json.loads(text)
        except json.JSONDecodeError as exc:
            raise HumistepTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            ) from exc

        if not isinstance(result, dict):
            raise HumistepTransportError(
                f"Unexpected response shape from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            )

        _logger.debug("Response from %s: %s", endpoint, redact_for_log(result))
        return result
