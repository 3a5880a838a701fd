"""Client configuration for pyhumistep."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyhumistep._constants import BASE_URL, HOT_GRACE_PERIOD
from pyhumistep.exceptions import HumistepConfigError

DEFAULT_HUMIDIFIER_PATTERN = r"加湿器|humidifier"
DEFAULT_HEATER_PATTERN = r"ヒーター|heater"


@dataclasses.dataclass(frozen=True)
class CommandMapping:
    """Names of the learned infrared buttons on the hub.

    Both are sent as ``customize`` commands, so they must match the
    button names configured in the SwitchBot app exactly.
    """

    power: str = "電源"
    humidity: str = "湿度"


@dataclasses.dataclass(frozen=True)
class HumistepConfig:
    """Client configuration.

    Parameters
    ----------
    token : str
        SwitchBot open API token.
    base_url : str
        API base URL. Defaults to the v1.0 endpoint.
    mapping : CommandMapping
        Button names for the power toggle and the humidity "advance" press.
    hot_grace_period : float
        Seconds the humidifier stays in its adjustment mode after the last
        press.  Requests arriving inside this window skip the entry press.
    step_retry_delay : float
        Seconds to wait before re-sending a failed step.  ``0`` retries
        immediately (after yielding to the event loop).
    humidifier_pattern : str
        Regular expression matched (case-insensitive) against device names
        during discovery to pick humidifiers.
    heater_pattern : str
        Same, for heaters.
    """

    token: str
    base_url: str = BASE_URL
    mapping: CommandMapping = dataclasses.field(default_factory=CommandMapping)
    hot_grace_period: float = HOT_GRACE_PERIOD
    step_retry_delay: float = 0.0
    humidifier_pattern: str = DEFAULT_HUMIDIFIER_PATTERN
    heater_pattern: str = DEFAULT_HEATER_PATTERN

    def __post_init__(self) -> None:
        if not self.token or not self.token.strip():
            raise HumistepConfigError("token must be non-empty")
        if self.hot_grace_period < 0:
            raise HumistepConfigError(f"hot_grace_period must be >= 0, got {self.hot_grace_period}")
        if self.step_retry_delay < 0:
            raise HumistepConfigError(f"step_retry_delay must be >= 0, got {self.step_retry_delay}")

    @classmethod
    def from_env(cls, **overrides: Any) -> HumistepConfig:
        """Create configuration from environment variables.

        Reads ``SWITCHBOT_TOKEN`` and the optional ``SWITCHBOT_BASE_URL``
        and ``HUMISTEP_*`` variables. Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        HumistepConfig
            Populated configuration.
        """
        env = os.environ

        mapping_kwargs: dict[str, str] = {}
        _ENV_MAPPING_MAP = {
            "HUMISTEP_POWER_COMMAND": "power",
            "HUMISTEP_HUMIDITY_COMMAND": "humidity",
        }
        for env_key, field_name in _ENV_MAPPING_MAP.items():
            val = env.get(env_key)
            if val is not None:
                mapping_kwargs[field_name] = val

        # Allow overriding mapping fields via a nested dict
        mapping_overrides = overrides.pop("mapping", None)
        if isinstance(mapping_overrides, dict):
            mapping_kwargs.update(mapping_overrides)
        elif isinstance(mapping_overrides, CommandMapping):
            mapping_kwargs = dataclasses.asdict(mapping_overrides)

        config_kwargs: dict[str, Any] = {"mapping": CommandMapping(**mapping_kwargs)}

        _ENV_CONFIG_MAP = {
            "SWITCHBOT_TOKEN": "token",
            "SWITCHBOT_BASE_URL": "base_url",
            "HUMISTEP_HUMIDIFIER_PATTERN": "humidifier_pattern",
            "HUMISTEP_HEATER_PATTERN": "heater_pattern",
        }
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # Numeric fields, handle separately
        _ENV_FLOAT_MAP = {
            "HUMISTEP_HOT_GRACE_PERIOD": "hot_grace_period",
            "HUMISTEP_STEP_RETRY_DELAY": "step_retry_delay",
        }
        for env_key, field_name in _ENV_FLOAT_MAP.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = float(val)
            except ValueError as exc:
                raise HumistepConfigError(f"{env_key} must be a number, got {val!r}") from exc

        config_kwargs.update(overrides)
        config_kwargs.setdefault("token", "")

        return cls(**config_kwargs)
