"""
どこで: `util.color`。
何を: 塗り色トークン（Hex 文字列 / RGB(A) タプル / 0xAARRGGBB 整数 / 色名）を RGBA(0–1) に正規化。
なぜ: 波形の塗り指定とプレビューの背景色を同一の受理仕様で扱うため。
"""

from __future__ import annotations

from typing import Sequence

from common.types import RGBA

# よく使う色名（大文字/小文字は不問）
NAMED_COLORS: dict[str, RGBA] = {
    "black": (0.0, 0.0, 0.0, 1.0),
    "white": (1.0, 1.0, 1.0, 1.0),
    "transparent": (0.0, 0.0, 0.0, 0.0),
}

ColorLike = str | int | Sequence[float] | Sequence[int]


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> RGBA:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def argb_int_to_rgba(value: int) -> RGBA:
    """32bit の ARGB 整数（例: `0xFF4FC3F7`）を RGBA(0–1) に変換する。

    アルファは常に上位 8bit から取る（`0x00RRGGBB` は透明）。
    不透明の 6 桁指定は Hex 文字列（`"#RRGGBB"`）を使う。
    """
    if value < 0 or value > 0xFFFFFFFF:
        raise ValueError(f"ARGB integer out of range: {value:#x}")
    a = (value >> 24) & 0xFF
    r = (value >> 16) & 0xFF
    g = (value >> 8) & 0xFF
    b = value & 0xFF
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def _normalize_sequence(seq: Sequence[float | int]) -> RGBA:
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        vals = [float(v) for v in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {seq!r}") from e
    if len(vals) == 3:
        vals.append(1.0)
    # 全要素が 0..1 ならそのまま、それ以外は 0–255 とみなす
    if all(0.0 <= v <= 1.0 for v in vals):
        r, g, b, a = vals
        return (_clamp01(r), _clamp01(g), _clamp01(b), _clamp01(a))
    if len(seq) == 3:
        vals[3] = 255.0
    r, g, b, a = (max(0, min(255, int(round(v)))) for v in vals)
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: 色名, Hex 文字列, ARGB 整数, (r,g,b[,a])（0–1 または 0–255）
    - 返値: (r,g,b,a)（0–1）
    """
    if isinstance(value, bool):
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if isinstance(value, str):
        named = NAMED_COLORS.get(value.strip().lower())
        if named is not None:
            return named
        return parse_hex_color_str(value)
    if isinstance(value, int):
        return argb_int_to_rgba(value)
    if isinstance(value, (list, tuple)):
        return _normalize_sequence(value)
    raise ValueError(f"unsupported color type: {type(value)!r}")


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


__all__ = [
    "ColorLike",
    "NAMED_COLORS",
    "parse_hex_color_str",
    "argb_int_to_rgba",
    "normalize_color",
    "to_u8_rgba",
]
