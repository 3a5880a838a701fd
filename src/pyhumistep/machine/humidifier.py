"""Step-based humidity controller.

The supported humidifiers only understand one relative button: each press
advances the setting along a fixed cycle ``off -> 30 -> 35 -> ... -> 90 ->
off``.  The first press after a few idle seconds does not change the
setting; it only wakes the device into its adjustment mode.

:class:`HumidifierController` turns absolute targets into the right number
of presses, keeping its own estimate of where the device is
(``internal_position``) in lock-step with every successful press.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from pyhumistep._common import unreachable
from pyhumistep._constants import COMMAND_TYPE_CUSTOMIZE, DEFAULT_PARAMETER, next_position, snap_humidity
from pyhumistep.config import HumistepConfig
from pyhumistep.machine.abort import AbortOutcome, AbortSignal
from pyhumistep.machine.base import CommandSender
from pyhumistep.models.state import AccessoryContext, HumidifierState

_logger = logging.getLogger(__name__)

# No sensor on the supported devices.
FIXED_CURRENT_HUMIDITY = 1


class HumidifierController:
    """Drive one step-controlled humidifier toward absolute targets.

    All methods must be called from the same event loop.  At most one step
    loop runs at a time; a newer :meth:`set_target_humidity` preempts the
    running loop at its next step boundary, and earlier waiting calls
    return silently.
    """

    def __init__(
        self,
        context: AccessoryContext,
        config: HumistepConfig,
        sender: CommandSender,
    ) -> None:
        state = context.state
        if not isinstance(state, HumidifierState):
            state = HumidifierState()
            context.state = state
        if context.device is None:
            unreachable(context.device)

        self._state = state
        self._device_id = context.device.device_id
        self._config = config
        self._sender = sender

        # In adjustment mode (entry press done, grace period not over).
        self._hot = False
        # A step loop owns the device.
        self._requesting = False
        self._abort_signal: AbortSignal | None = None
        self._drain_handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def device_id(self) -> str:
        return self._device_id

    @property
    def state(self) -> HumidifierState:
        return self._state

    @property
    def hot(self) -> bool:
        return self._hot

    @property
    def requesting(self) -> bool:
        return self._requesting

    # ------------------------------------------------------------------
    # Power
    # ------------------------------------------------------------------

    async def get_active(self) -> bool:
        return self._state.active

    async def set_active(self, target: bool) -> None:
        """Toggle power; on success after being off, re-apply the stored target."""
        current = self._state.active
        if current == target:
            return

        self._state.active = target

        try:
            await self._send(self._config.mapping.power)
        except Exception:
            _logger.debug("Power command failed for device %s", self._device_id, exc_info=True)
            self._state.active = current
            return

        if target:
            # A power cycle resets the device; neither the old position nor hot mode hold.
            self._state.internal_position = None
            self._cool_down()
            self._spawn(
                self.set_target_humidity(self._state.target_humidity),
                name=f"humistep-activate-{self._device_id}",
            )

    # ------------------------------------------------------------------
    # Humidity
    # ------------------------------------------------------------------

    async def get_humidity(self) -> int:
        return FIXED_CURRENT_HUMIDITY

    async def get_target_humidity(self) -> int:
        return self._state.target_humidity

    async def set_target_humidity(self, value: float) -> None:
        """Remember *value* and start converging toward it.

        Returns once this call's loop has been started, or once a newer
        call has superseded it.  Never waits for convergence.
        """
        target = snap_humidity(value)
        self._state.target_humidity = target

        if not self._state.active:
            return

        if self._requesting:
            if self._abort_signal is not None:
                self._abort_signal.supersede()
            signal = AbortSignal()
            self._abort_signal = signal
            if await signal.wait() is AbortOutcome.ABANDON:
                return
            # The stopped loop handed its ownership over; _requesting is still set.
        else:
            self._requesting = True

        self._spawn(self._transition(target), name=f"humistep-transition-{self._device_id}")

    async def _transition(self, target: int) -> None:
        """Press the advance button until ``internal_position`` equals *target*.

        Must only run while ``_requesting`` is held by the caller.
        """
        if self._state.internal_position == target:
            # Nothing was pressed, so the grace window is left as it is.
            self._release(rearm=False)
            return

        self._cancel_drain()

        if not self._hot:
            try:
                await self._send(self._config.mapping.humidity)
            except Exception:
                _logger.debug("Entering humidity mode failed for device %s", self._device_id, exc_info=True)
                self._release()
                return
            self._hot = True

        while self._state.internal_position != target:
            if self._abort_signal is not None:
                self._release()
                return

            current = self._state.internal_position
            self._state.internal_position = next_position(current)

            try:
                await self._send(self._config.mapping.humidity)
            except Exception:
                _logger.debug(
                    "Humidity step %s -> %s failed for device %s, retrying",
                    current,
                    self._state.internal_position,
                    self._device_id,
                    exc_info=True,
                )
                self._state.internal_position = current
                # Always yields, so a newer request can get its abort signal in.
                await asyncio.sleep(self._config.step_retry_delay)

        self._release()

    def _release(self, *, rearm: bool = True) -> None:
        """Give up ownership of the device at the end of a loop.

        A pending abort signal receives ownership directly, so no other
        caller can start a loop in between.  Otherwise the device goes idle
        and, if still in adjustment mode, the grace timer starts.  With
        *rearm* false a timer that is already pending is kept as it is.
        """
        signal = self._abort_signal
        self._abort_signal = None
        if signal is not None and signal.acknowledge():
            return

        self._requesting = False
        if self._hot and (rearm or self._drain_handle is None):
            self._schedule_drain()

    # ------------------------------------------------------------------
    # Hot mode timer
    # ------------------------------------------------------------------

    def _schedule_drain(self) -> None:
        self._cancel_drain()
        loop = asyncio.get_running_loop()
        self._drain_handle = loop.call_later(self._config.hot_grace_period, self._cool_down)

    def _cancel_drain(self) -> None:
        if self._drain_handle is not None:
            self._drain_handle.cancel()
            self._drain_handle = None

    def _cool_down(self) -> None:
        self._cancel_drain()
        self._hot = False

    # ------------------------------------------------------------------
    # Background work
    # ------------------------------------------------------------------

    async def _send(self, command: str) -> None:
        await self._sender.send_command(
            self._device_id,
            command,
            command_type=COMMAND_TYPE_CUSTOMIZE,
            parameter=DEFAULT_PARAMETER,
        )

    def _spawn(self, coro: Coroutine[Any, Any, None], *, name: str) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _logger.error("Background task %s failed", task.get_name(), exc_info=exc)

    async def join(self) -> None:
        """Wait until all background work (activation follow-ups, step loops) is done.

        The grace timer is not background work; it keeps running.
        """
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel background work and the grace timer."""
        self._cancel_drain()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
        self._abort_signal = None
        self._requesting = False
        self._hot = False
