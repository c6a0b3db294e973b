"""
どこで: `engine.render` の塗り描画。
何を: `Outline` を pyglet の `shapes.Polygon`（波形）/`shapes.Rectangle`（全面フォールバック）に変換して描く。
なぜ: 毎フレームの形状差し替えと描画リソースの寿命を一箇所に集約するため。

座標系:
- `Outline` は左上原点・Y 下向き、pyglet は左下原点・Y 上向き。転送時に Y を反転する。
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import pyglet

from engine.core.outline import Outline
from util.color import to_u8_rgba

logger = logging.getLogger(__name__)


class _Sized(Protocol):
    width: int
    height: int


class FillRenderer:
    """ウィンドウ（サイズの供給元）に対する `DrawSurface` 実装。

    `fill()` で形状を差し替え、`draw()` でバッチを描く。
    """

    def __init__(self, target: _Sized, *, batch: Any | None = None) -> None:
        self._target = target
        self._batch = batch if batch is not None else pyglet.graphics.Batch()
        self._shape: Any | None = None
        self._last_kind: str | None = None
        self._fills = 0

    # ---- DrawSurface ------------------------------------------------------
    @property
    def width(self) -> float:
        return float(self._target.width)

    @property
    def height(self) -> float:
        return float(self._target.height)

    def fill(self, outline: Outline) -> None:
        """直前の形状を破棄し、`outline` を新しい塗り形状としてバッチへ載せる。"""
        self._release_shape()
        color = to_u8_rgba(outline.color)
        if outline.is_solid:
            self._shape = pyglet.shapes.Rectangle(
                x=0.0,
                y=0.0,
                width=outline.width,
                height=outline.height,
                color=color,
                batch=self._batch,
            )
        else:
            points = [(float(x), float(y)) for x, y in outline.flipped_y()]
            self._shape = pyglet.shapes.Polygon(*points, color=color, batch=self._batch)
        if outline.kind != self._last_kind:
            logger.debug("fill kind changed: %s -> %s", self._last_kind, outline.kind)
            self._last_kind = outline.kind
        self._fills += 1

    # ---- 描画/解放 -------------------------------------------------------
    @property
    def fill_count(self) -> int:
        """`fill()` が呼ばれた累計回数。"""
        return self._fills

    @property
    def current_shape(self) -> Any | None:
        return self._shape

    def draw(self) -> None:
        """バッチを描画する（`on_draw` から呼ぶ）。"""
        self._batch.draw()

    def release(self) -> None:
        """描画リソースを解放。"""
        self._release_shape()

    def _release_shape(self) -> None:
        shape = self._shape
        self._shape = None
        if shape is not None:
            shape.delete()


__all__ = ["FillRenderer"]
