"""Accessory context storage."""

from pyhumistep.state.store import ContextStore

__all__ = ["ContextStore"]
