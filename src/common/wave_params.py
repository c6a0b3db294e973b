"""
どこで: `common.wave_params`
何を: 波形の向き `WaveDirection` と、1 描画分の不変設定 `WaveParameters` を定義。
なぜ: クロック（engine.core.animation）とビルダ（shapes.wave）が同じ検証済み設定を共有するため。

検証方針:
- 速度（`wave_speed` / `vertical_oscillation_speed`）は毎フレームの除数になるため、
  0 以下や非有限値は生成時に `ValueError` で拒否する（フレーム中に例外を出さない）。
- `wave_count` は保持値をそのままにし、幾何計算では `effective_wave_count`（>=1）を使う。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class WaveDirection(Enum):
    """波の山が接する辺。"""

    TOP = "top"
    BOTTOM = "bottom"

    @classmethod
    def parse(cls, value: "WaveDirection | str") -> "WaveDirection":
        """列挙値または名前（大文字小文字不問）から解決する。"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"wave_direction は 'top' または 'bottom': {value!r}") from None


def _require_positive(name: str, value: float) -> float:
    v = float(value)
    if not math.isfinite(v) or v <= 0.0:
        raise ValueError(f"{name} は正の有限値が必要: {value!r}")
    return v


@dataclass(frozen=True)
class WaveParameters:
    """波形 1 本ぶんの設定（ミリ秒/論理単位）。

    引数:
        wave_count: 幅全体に並ぶ正弦波の周期数（幾何計算では最低 1）。
        wave_amplitude: 山の高さ [dp]（スケール前）。0 以上。
        wave_speed: 水平 1 周（2π）に要する時間 [ms]。正。
        vertical_oscillation_speed: ブリージング 1 周に要する時間 [ms]。正。
        direction: 山が接する辺。
        reverse_direction: True で左→右、False で右→左へ流れる。
        animate_shape: ブリージング（振幅のゆらぎ）の有無。
    """

    wave_count: int = 5
    wave_amplitude: float = 20.0
    wave_speed: float = 1200.0
    vertical_oscillation_speed: float = 1500.0
    direction: WaveDirection = WaveDirection.TOP
    reverse_direction: bool = False
    animate_shape: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "wave_count", int(self.wave_count))
        amp = float(self.wave_amplitude)
        if not math.isfinite(amp) or amp < 0.0:
            raise ValueError(f"wave_amplitude は 0 以上の有限値が必要: {self.wave_amplitude!r}")
        object.__setattr__(self, "wave_amplitude", amp)
        object.__setattr__(self, "wave_speed", _require_positive("wave_speed", self.wave_speed))
        object.__setattr__(
            self,
            "vertical_oscillation_speed",
            _require_positive("vertical_oscillation_speed", self.vertical_oscillation_speed),
        )
        object.__setattr__(self, "direction", WaveDirection.parse(self.direction))
        object.__setattr__(self, "reverse_direction", bool(self.reverse_direction))
        object.__setattr__(self, "animate_shape", bool(self.animate_shape))

    @property
    def effective_wave_count(self) -> int:
        """幾何計算で使う周期数（0 以下は 1 に丸める）。"""
        return max(1, self.wave_count)


__all__ = ["WaveDirection", "WaveParameters"]
