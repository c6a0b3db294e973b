"""
どこで: `api.style`（スタイルプリセット）。
何を: `WaveStyle`（Calm/Gentle/Energetic）を 4 つの調整値 `WaveStyleData` へ解決する純粋なルックアップ。
なぜ: 周期数・振幅・速度の組をまとめて指定できるようにするため。

プリセット表（周期数, 振幅 [dp], 水平速度 [ms], ブリージング速度 [ms]）:
- Calm:      (3, 14, 2600, 3000)  ゆっくり・浅い
- Gentle:    (5, 20, 1500, 2000)  標準
- Energetic: (7, 28,  900, 1200)  速い・深い
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from common.base_registry import BaseRegistry


class WaveStyle(Enum):
    """定義済みの波形スタイル。"""

    CALM = "calm"
    GENTLE = "gentle"
    ENERGETIC = "energetic"


@dataclass(frozen=True)
class WaveStyleData:
    """スタイルを解決した生の調整値。"""

    wave_count: int
    wave_amplitude: float
    wave_speed: float
    vertical_oscillation_speed: float

    def as_tuple(self) -> tuple[int, float, float, float]:
        return (
            self.wave_count,
            self.wave_amplitude,
            self.wave_speed,
            self.vertical_oscillation_speed,
        )


_style_registry: BaseRegistry[WaveStyleData] = BaseRegistry()
_style_registry.add("calm", WaveStyleData(3, 14.0, 2600.0, 3000.0))
_style_registry.add("gentle", WaveStyleData(5, 20.0, 1500.0, 2000.0))
_style_registry.add("energetic", WaveStyleData(7, 28.0, 900.0, 1200.0))


def resolve_style(style: WaveStyle | str) -> WaveStyleData:
    """スタイル（列挙値または名前、大文字小文字不問）を調整値へ解決する。

    例外:
        KeyError: 未知のスタイル名。
    """
    name = style.value if isinstance(style, WaveStyle) else str(style)
    try:
        return _style_registry.get(name)
    except KeyError:
        allowed = ", ".join(list_styles())
        raise KeyError(f"unknown wave style: {style!r}; allowed={allowed}") from None


def list_styles() -> list[str]:
    """登録済みスタイル名（定義順）。"""
    return _style_registry.list_all()


__all__ = ["WaveStyle", "WaveStyleData", "resolve_style", "list_styles"]
