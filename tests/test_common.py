from __future__ import annotations

import pytest

from pyhumistep._common import derive_active, derive_raw_active
from pyhumistep._constants import next_position, snap_humidity
from pyhumistep.exceptions import UnreachableError


def test_derive_active() -> None:
    assert derive_active(1) is True
    assert derive_active(0) is False
    assert derive_raw_active(True) == 1
    assert derive_raw_active(False) == 0


def test_derive_active_rejects_unknown_flag() -> None:
    with pytest.raises(UnreachableError, match="2"):
        derive_active(2)  # type: ignore[arg-type]


def test_next_position_cycles_forward() -> None:
    position = None
    seen = []
    for _ in range(14):
        position = next_position(position)
        seen.append(position)

    assert seen == [30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, None]


@pytest.mark.parametrize(("value", "expected"), [(0, 30), (32.4, 30), (32.5, 35), (88, 90), (1000, 90)])
def test_snap_humidity(value: float, expected: int) -> None:
    assert snap_humidity(value) == expected
