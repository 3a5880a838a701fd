"""Helpers for the raw power flag exchanged with adapters."""

from __future__ import annotations

from typing import Any, Literal, NoReturn

from pyhumistep.exceptions import UnreachableError

RawActive = Literal[0, 1]


def unreachable(value: Any = None) -> NoReturn:
    """Fail on a value that the caller's contract rules out."""
    raise UnreachableError(f"unreachable ({value!r})")


def derive_active(value: RawActive) -> bool:
    """Map a raw ``0``/``1`` flag to a bool, rejecting anything else."""
    if value == 1:
        return True
    if value == 0:
        return False
    unreachable(value)


def derive_raw_active(value: bool) -> RawActive:
    return 1 if value else 0
