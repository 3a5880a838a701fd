"""Cooperative cancellation handle for humidity transitions.

A newer target request registers an :class:`AbortSignal` and awaits it.
The running step loop polls for it once per iteration and acknowledges
it, which lets the waiter start its own loop.  A still-newer request
supersedes the waiter instead, which then gives up silently.
"""

from __future__ import annotations

import asyncio
import enum


class AbortOutcome(enum.Enum):
    """How a wait on an :class:`AbortSignal` ended."""

    PROCEED = "proceed"
    """The running loop stopped; the waiter now owns the device."""
    ABANDON = "abandon"
    """A newer request took over; the waiter must do nothing."""


class AbortSignal:
    """Single-use handshake between a waiting setter and the running loop."""

    def __init__(self) -> None:
        self._future: asyncio.Future[AbortOutcome] = asyncio.get_running_loop().create_future()

    @property
    def settled(self) -> bool:
        return self._future.done()

    def acknowledge(self) -> bool:
        """Hand control to the waiter.

        Returns ``False`` when nobody is left to receive it (the signal
        was already settled or its waiter was cancelled).
        """
        if self._future.done():
            return False
        self._future.set_result(AbortOutcome.PROCEED)
        return True

    def supersede(self) -> None:
        """Tell the waiter that a newer request replaced it."""
        if not self._future.done():
            self._future.set_result(AbortOutcome.ABANDON)

    async def wait(self) -> AbortOutcome:
        return await self._future
