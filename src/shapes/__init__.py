"""
どこで: `shapes` パッケージ。
何を: 波形アウトラインの生成関数とその部品（振幅スケール/ベースライン/サンプリング）を再輸出。
なぜ: 生成ステージの入口を一箇所に集約するため。
"""

from .wave import (
    SAMPLE_STEP_PX,
    local_amplitude,
    sample_positions,
    scale_amplitude,
    wave_baseline,
    wave_outline,
)

__all__ = [
    "SAMPLE_STEP_PX",
    "local_amplitude",
    "sample_positions",
    "scale_amplitude",
    "wave_baseline",
    "wave_outline",
]
