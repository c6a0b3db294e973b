from __future__ import annotations

import dataclasses
import math

import pytest

from common.wave_params import WaveDirection, WaveParameters


def test_defaults() -> None:
    p = WaveParameters()
    assert p.wave_count == 5
    assert p.wave_amplitude == 20.0
    assert p.wave_speed == 1200.0
    assert p.vertical_oscillation_speed == 1500.0
    assert p.direction is WaveDirection.TOP
    assert not p.reverse_direction
    assert p.animate_shape


def test_is_immutable() -> None:
    p = WaveParameters()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.wave_count = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"wave_speed": 0},
        {"wave_speed": -100},
        {"wave_speed": math.inf},
        {"vertical_oscillation_speed": 0},
        {"vertical_oscillation_speed": math.nan},
        {"wave_amplitude": -0.1},
        {"wave_amplitude": math.inf},
    ],
)
def test_invalid_values_raise(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        WaveParameters(**kwargs)


@pytest.mark.parametrize("count, effective", [(-2, 1), (0, 1), (1, 1), (7, 7)])
def test_effective_wave_count(count: int, effective: int) -> None:
    p = WaveParameters(wave_count=count)
    assert p.wave_count == count
    assert p.effective_wave_count == effective


def test_direction_is_parsed_from_string() -> None:
    assert WaveParameters(direction="Bottom").direction is WaveDirection.BOTTOM  # type: ignore[arg-type]
    assert WaveDirection.parse(" top ") is WaveDirection.TOP
    with pytest.raises(ValueError):
        WaveDirection.parse("left")


def test_numeric_fields_are_coerced() -> None:
    p = WaveParameters(wave_count=3.0, wave_amplitude=10, wave_speed=900)  # type: ignore[arg-type]
    assert isinstance(p.wave_count, int)
    assert isinstance(p.wave_amplitude, float)
    assert isinstance(p.wave_speed, float)
