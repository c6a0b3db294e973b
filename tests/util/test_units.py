from __future__ import annotations

import math

import pytest

from common import settings
from util.units import dp_to_px, resolve_density


def test_explicit_density() -> None:
    assert dp_to_px(20, 2.0) == 40.0
    assert dp_to_px(14, 1.5) == pytest.approx(21.0)


def test_none_uses_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_density() == 1.0
    monkeypatch.setenv("WAVY_DENSITY", "3.5")
    settings.reload_from_env()
    assert resolve_density(None) == 3.5
    assert dp_to_px(2) == 7.0


@pytest.mark.parametrize("bad", [0, -1.0, math.inf, math.nan])
def test_invalid_density_raises(bad: float) -> None:
    with pytest.raises(ValueError):
        resolve_density(bad)
