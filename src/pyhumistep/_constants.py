"""Internal constants shared across the library."""

import math

BASE_URL = "https://api.switch-bot.com/v1.0"
USER_AGENT = "pyhumistep"

#: ``statusCode`` returned in the response body on success.
STATUS_SUCCESS = 100
STATUS_DEVICE_NOT_FOUND = 152
STATUS_COMMAND_NOT_SUPPORTED = 160
STATUS_DEVICE_OFFLINE = 161
STATUS_HUB_OFFLINE = 171

COMMAND_TYPE_CUSTOMIZE = "customize"
COMMAND_TYPE_COMMAND = "command"
DEFAULT_PARAMETER = "default"

# ------------------------------------------------------------------
# Humidity scale  (30-90 %, step 5)
# ------------------------------------------------------------------

HUMIDITY_MIN = 30
HUMIDITY_MAX = 90
HUMIDITY_STEP = 5

#: Seconds the device stays in its adjustment mode after the last press.
HOT_GRACE_PERIOD = 3.0


def snap_humidity(value: float) -> int:
    """Snap *value* to the nearest multiple of 5 and clamp it to 30-90.

    Halves round up, so ``47.5`` becomes ``50``.
    """
    snapped = int(math.floor(float(value) / HUMIDITY_STEP + 0.5)) * HUMIDITY_STEP
    return max(HUMIDITY_MIN, min(HUMIDITY_MAX, snapped))


def next_position(position: int | None) -> int | None:
    """Return the position one "advance" press moves the device to.

    The cycle is forward-only: ``None -> 30 -> 35 -> ... -> 90 -> None``.
    """
    if position is None:
        return HUMIDITY_MIN
    if position < HUMIDITY_MAX:
        return position + HUMIDITY_STEP
    return None
