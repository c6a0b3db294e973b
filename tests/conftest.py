"""共通フィクスチャ。

- 既定/プリセットの WaveParameters
- 塗り結果を記録するだけの描画面
- 環境変数設定のリセット
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings as settings_mod
from common.wave_params import WaveDirection, WaveParameters
from engine.core.outline import Outline


class RecordingSurface:
    """`DrawSurface` のテスト実装（塗られた Outline を順に保持）。"""

    def __init__(self, width: float = 300.0, height: float = 100.0) -> None:
        self.width = width
        self.height = height
        self.outlines: list[Outline] = []

    def fill(self, outline: Outline) -> None:
        self.outlines.append(outline)


@pytest.fixture()
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture()
def flat_params() -> WaveParameters:
    """ブリージング無しの 3 周期・振幅 10dp（Top）。"""
    return WaveParameters(
        wave_count=3,
        wave_amplitude=10.0,
        wave_speed=1200.0,
        vertical_oscillation_speed=1500.0,
        direction=WaveDirection.TOP,
        animate_shape=False,
    )


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """`WAVY_*` を消した状態で設定を読み直し、テスト後も元に戻す。"""
    for name in ("WAVY_DENSITY", "WAVY_FPS", "WAVY_DEBUG_FRAMES"):
        monkeypatch.delenv(name, raising=False)
    settings_mod.reload_from_env()
    yield
    monkeypatch.undo()
    settings_mod.reload_from_env()
