from __future__ import annotations

import pytest

from api import wavy_background
from engine.core.frame_clock import FrameClock
from engine.runtime.loop import FrameLoop


def test_each_frame_signal_ticks_builds_and_fills_once(surface) -> None:
    bg = wavy_background(style="gentle")
    loop = FrameLoop(bg, surface)
    n = loop.run([0.0, 16.0, 32.0])
    assert n == 3
    assert loop.frames_rendered == 3
    assert len(surface.outlines) == 3
    assert bg.state is not None
    assert bg.state.last_frame_time_ms == 32.0


def test_outline_tracks_current_surface_size(surface) -> None:
    loop = FrameLoop(wavy_background(), surface)
    loop.step(0.0)
    surface.width, surface.height = 120.0, 40.0
    loop.step(16.0)
    first, second = surface.outlines
    assert (first.width, first.height) == (300.0, 100.0)
    assert (second.width, second.height) == (120.0, 40.0)


def test_dispose_stops_the_loop(surface) -> None:
    bg = wavy_background()

    def frames():
        yield 0.0
        yield 16.0
        bg.dispose()
        yield 32.0
        yield 48.0

    loop = FrameLoop(bg, surface)
    assert loop.run(frames()) == 2
    assert len(surface.outlines) == 2
    assert loop.step(64.0) is False


def test_zero_height_surface_gets_solid_fill(surface) -> None:
    surface.height = 0.0
    FrameLoop(wavy_background(), surface).step(0.0)
    assert surface.outlines[0].is_solid


@pytest.mark.integration
def test_frame_clock_drives_loop(surface) -> None:
    bg = wavy_background(reverse_direction=True, animate_wave_shape=False)
    loop = FrameLoop(bg, surface)
    clock = FrameClock([loop], start_ms=0.0)
    for _ in range(4):
        clock.tick(0.1)
    assert loop.frames_rendered == 4
    assert bg.state is not None
    assert bg.state.last_frame_time_ms == pytest.approx(400.0)
    # 最初のフレームは基準時刻、残り 3 フレーム分（300ms）だけ位相が進む
    assert bg.state.horizontal_phase == pytest.approx(300.0 / 1200.0 * 6.283185307179586)
