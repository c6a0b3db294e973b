from __future__ import annotations

import math

import numpy as np
import pytest

from api import WavyBackground, WaveDirection, WaveParameters, wavy_background
from engine.core.animation import TAU


def test_factory_defaults() -> None:
    bg = wavy_background()
    p = bg.params
    assert (p.wave_count, p.wave_amplitude, p.wave_speed, p.vertical_oscillation_speed) == (
        5,
        20.0,
        1200.0,
        1500.0,
    )
    assert p.direction is WaveDirection.TOP
    assert p.reverse_direction is False
    assert p.animate_shape is True
    assert bg.color == (0.0, 0.0, 0.0, 1.0)
    assert bg.density == 1.0


def test_style_overrides_individual_parameters() -> None:
    bg = wavy_background(
        color=0xFF4DB6AC,
        wave_direction="bottom",
        wave_count=99,
        wave_amplitude=1.0,
        style="energetic",
        reverse_direction=True,
    )
    p = bg.params
    assert (p.wave_count, p.wave_amplitude, p.wave_speed, p.vertical_oscillation_speed) == (
        7,
        28.0,
        900.0,
        1200.0,
    )
    # スタイル対象外の引数はそのまま
    assert p.direction is WaveDirection.BOTTOM
    assert p.reverse_direction is True


@pytest.mark.parametrize(
    "kwargs",
    [
        {"wave_speed": 0},
        {"vertical_oscillation_speed": -1},
        {"wave_amplitude": -5},
        {"wave_direction": "left"},
        {"color": "not-a-color"},
        {"density": 0},
    ],
)
def test_invalid_configuration_raises_value_error(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        wavy_background(**kwargs)


def test_unknown_style_raises_key_error() -> None:
    with pytest.raises(KeyError):
        wavy_background(style="stormy")


def test_state_is_created_on_first_tick() -> None:
    bg = WavyBackground()
    assert bg.state is None
    bg.tick(1000.0)
    assert bg.state is not None
    assert bg.state.last_frame_time_ms == 1000.0
    assert bg.state.horizontal_phase == 0.0


def test_frame_advances_phase_and_returns_outline() -> None:
    bg = wavy_background(wave_amplitude=10, animate_wave_shape=False, reverse_direction=True)
    bg.frame(0.0, 300, 100)
    o = bg.frame(300.0, 300, 100)
    assert bg.state is not None
    assert math.isclose(bg.state.horizontal_phase, 300.0 / 1200.0 * TAU, rel_tol=1e-12)
    # x=0: y = 10 + 10·sin(π/2) = 20
    assert o.vertices[1, 1] == pytest.approx(20.0, abs=1e-4)


def test_build_before_tick_uses_zero_phase() -> None:
    bg = wavy_background(wave_count=3, wave_amplitude=10, animate_wave_shape=False)
    o = bg.build(300, 100)
    assert o.vertices[1, 1] == pytest.approx(10.0, abs=1e-5)
    assert bg.state is None


def test_independent_instances_do_not_share_state() -> None:
    a = wavy_background()
    b = wavy_background()
    a.tick(0.0)
    a.tick(500.0)
    assert b.state is None


def test_dispose_stops_ticks_and_rejects_build() -> None:
    bg = wavy_background()
    bg.tick(0.0)
    bg.dispose()
    assert bg.disposed
    assert bg.state is None
    bg.tick(100.0)  # no-op
    assert bg.state is None
    with pytest.raises(RuntimeError):
        bg.build(100, 100)
    bg.dispose()  # 冪等


def test_density_doubles_pixel_amplitude() -> None:
    one = wavy_background(wave_amplitude=20, density=1.0).build(200, 400)
    two = wavy_background(wave_amplitude=20, density=2.0).build(200, 400)
    assert two.amplitude == pytest.approx(2 * one.amplitude)


def test_explicit_params_are_used_verbatim() -> None:
    p = WaveParameters(wave_count=2, wave_amplitude=5.0, direction=WaveDirection.BOTTOM)
    bg = WavyBackground(p, color="#FF0000")
    o = bg.build(120, 60)
    assert o.baseline == pytest.approx(55.0)
    assert o.color == (1.0, 0.0, 0.0, 1.0)
    assert np.all(np.isfinite(o.vertices))
