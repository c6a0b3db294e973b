"""
どこで: `util.units`。
何を: 論理単位（dp）→ デバイスピクセルの変換。
なぜ: 振幅は論理単位で指定され、幾何計算はピクセルで行うため（密度はホストが与える）。
"""

from __future__ import annotations


def resolve_density(density: float | None = None) -> float:
    """密度を解決する。`None` は設定（`WAVY_DENSITY`）の値。

    0 以下/非有限は `ValueError`。
    """
    if density is None:
        from common.settings import get as _get_settings

        return float(_get_settings().DENSITY)
    d = float(density)
    if not (d > 0.0) or d == float("inf"):
        raise ValueError(f"density は正の有限値が必要: {density!r}")
    return d


def dp_to_px(value: float, density: float | None = None) -> float:
    """論理単位 `value` [dp] をピクセルへ変換する。"""
    return float(value) * resolve_density(density)


__all__ = ["dp_to_px", "resolve_density"]
