"""In-memory store of accessory contexts.

Controllers mutate the state record inside their context in place; the
store only owns the mapping from device id to context and the
dump/load round trip used by whatever persists it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pyhumistep.models.device import Device
from pyhumistep.models.state import AccessoryContext


class ContextStore:
    """Contexts keyed by device id."""

    def __init__(self) -> None:
        self._contexts: dict[str, AccessoryContext] = {}

    def __contains__(self, device_id: object) -> bool:
        return device_id in self._contexts

    def __iter__(self) -> Iterator[str]:
        return iter(self._contexts)

    def __len__(self) -> int:
        return len(self._contexts)

    def get(self, device_id: str) -> AccessoryContext | None:
        return self._contexts.get(device_id)

    def restore(self, device_id: str, context: AccessoryContext) -> None:
        """Register a context loaded from a previous run."""
        self._contexts[device_id] = context

    def register(self, device: Device) -> AccessoryContext:
        """Create and register a fresh context for *device*."""
        context = AccessoryContext(device=device)
        self._contexts[device.device_id] = context
        return context

    def dump(self) -> dict[str, dict[str, Any]]:
        """Plain-dict snapshot of every context, suitable for JSON."""
        return {device_id: context.model_dump(mode="json") for device_id, context in self._contexts.items()}

    @classmethod
    def load(cls, data: Mapping[str, Mapping[str, Any]]) -> ContextStore:
        """Rebuild a store from :meth:`dump` output."""
        store = cls()
        for device_id, raw in data.items():
            store.restore(device_id, AccessoryContext.model_validate(raw))
        return store
