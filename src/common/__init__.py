"""
どこで: `common` パッケージ。
何を: 設定・環境変数・ロギング・波形パラメータ・名前付きレジストリなどの軽量基盤。
なぜ: core/shapes/api の各層から依存の向きを一方向に保ったまま再利用するため。
"""

from .base_registry import BaseRegistry
from .wave_params import WaveDirection, WaveParameters

__all__ = [
    "BaseRegistry",
    "WaveDirection",
    "WaveParameters",
]
