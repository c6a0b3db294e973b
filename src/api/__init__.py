"""
どこで: `api` 入口（高レベル公開 API）。
何を: 波形背景 `WavyBackground`/`wavy_background`・スタイル・向き・プレビューランナーを再輸出。
なぜ: 利用者が単一名前空間から構成→フレーム駆動→描画まで完結できるようにするため。

Usage:
    from api import wavy_background, WaveStyle

    bg = wavy_background(color="#4FC3F7", style=WaveStyle.GENTLE)
    outline = bg.frame(t_ms, 360, 160)   # 1 フレーム分の塗りアウトライン
"""

from common.wave_params import WaveDirection, WaveParameters
from engine.core.outline import Outline

from .runner import PREVIEWS, run_preview, run_wavy
from .style import WaveStyle, WaveStyleData, resolve_style
from .wavy import WavyBackground, wavy_background

__all__ = [
    # メインAPI
    "wavy_background",
    "WavyBackground",
    "WaveStyle",
    "WaveStyleData",
    "resolve_style",
    "WaveDirection",
    "WaveParameters",
    "Outline",
    # プレビュー
    "run_wavy",
    "run_preview",
    "PREVIEWS",
]

__version__ = "2025.10"
