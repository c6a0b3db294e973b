"""
どこで: `common` の型定義。
何を: RGBA 色の軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して core/render/api 間の循環を避けるため。
"""

RGBA = tuple[float, float, float, float]

__all__ = ["RGBA"]
