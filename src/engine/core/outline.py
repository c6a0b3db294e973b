"""
塗りアウトライン型（1 フレーム分の描画命令）

`shapes.wave` が毎フレーム返す唯一の描画表現 `Outline` を提供する。
レンダラ（`engine.render`）やホスト側の描画面は、この型だけを受け取れば塗りを再現できる。

データモデル（不変条件）:
- `vertices: float32 ndarray (N, 2)`: 閉じた多角形の頂点列（行は XY、原点は左上・Y 下向き）。
  末尾から先頭へ戻る辺は暗黙に閉じる（先頭頂点を末尾に複製しない）。
- `color: RGBA (0–1)`: 単色塗り。ストローク・頂点色は持たない。
- `kind: "path" | "rect"`: "rect" は描画面全体の矩形（振幅 0 時のフォールバック）。
- `amplitude` / `baseline`: 生成に使ったスケール後振幅とベースライン（rect では 0 / None）。

補足:
- 頂点数 3 未満は `ValueError`（面を持たない）。
- 生成後は読み取り専用（`vertices.flags.writeable == False`）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np

from common.types import RGBA

OutlineKind = Literal["path", "rect"]


def _normalize_vertices(vertices: np.ndarray) -> np.ndarray:
    arr = np.asarray(vertices, dtype=np.float32)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"vertices は形状 (N, 2) の配列である必要があります: {arr.shape}")
    if arr.shape[0] < 3:
        raise ValueError("vertices は少なくとも 3 頂点が必要です。")
    if not arr.flags.c_contiguous:
        arr = np.ascontiguousarray(arr, dtype=np.float32)
    if arr is vertices:
        arr = arr.copy()
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Outline:
    """閉じた多角形 + 単色塗り命令。"""

    vertices: np.ndarray
    color: RGBA
    kind: OutlineKind = "path"
    width: float = 0.0
    height: float = 0.0
    amplitude: float = 0.0
    baseline: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", _normalize_vertices(self.vertices))
        if self.kind not in ("path", "rect"):
            raise ValueError(f"kind は 'path' または 'rect': {self.kind!r}")

    # ── ファクトリ ───────────────────
    @classmethod
    def solid_rect(cls, width: float, height: float, color: RGBA) -> "Outline":
        """描画面全体 `(0,0)-(width,height)` を塗る矩形。"""
        w = float(width)
        h = float(height)
        verts = np.array([[0.0, 0.0], [w, 0.0], [w, h], [0.0, h]], dtype=np.float32)
        return cls(verts, color, kind="rect", width=w, height=h)

    # ── 参照 ─────────────────────────
    @property
    def is_solid(self) -> bool:
        """波を描かず全面を塗るフォールバックか。"""
        return self.kind == "rect"

    @property
    def n_vertices(self) -> int:
        return int(self.vertices.shape[0])

    def flipped_y(self) -> np.ndarray:
        """Y 上向き座標系（左下原点）へ変換した頂点のコピーを返す。"""
        out = self.vertices.copy()
        out[:, 1] = np.float32(self.height) - out[:, 1]
        return out

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return (
            f"Outline(kind={self.kind}, N={self.n_vertices}, "
            f"size={self.width:g}x{self.height:g}, amp={self.amplitude:g})"
        )


__all__ = ["Outline", "OutlineKind"]
