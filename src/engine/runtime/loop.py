"""
どこで: `engine.runtime.loop`（明示的レンダーループ）。
何を: ホストのフレームシグナル（ms 時刻の反復子）ごとに「tick → build → fill」を 1 回ずつ実行する。
なぜ: 宣言的な再描画トリガーを持たないホストでも、同じ順序と破棄規約で波形を駆動するため。

停止条件:
- 背景が `dispose()` された（協調的キャンセル）。
- フレームシグナルが尽きた。
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from engine.core.outline import Outline

logger = logging.getLogger(__name__)


class DrawSurface(Protocol):
    """ホストの描画面。現在サイズ [px] と塗り操作を持つ。"""

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    def fill(self, outline: Outline) -> None:
        """閉じたアウトラインを単色で塗る。"""


class FrameSource(Protocol):
    """1 フレーム分の更新を受け取る側（`api.wavy.WavyBackground` 互換）。"""

    @property
    def disposed(self) -> bool: ...

    def frame(self, frame_time_ms: float, width: float, height: float) -> Outline: ...


class FrameLoop:
    """背景 1 つと描画面 1 つを結ぶループ。"""

    def __init__(self, background: FrameSource, surface: DrawSurface) -> None:
        self.background = background
        self.surface = surface
        self._frames = 0

    @property
    def frames_rendered(self) -> int:
        return self._frames

    def step(self, frame_time_ms: float) -> bool:
        """1 フレーム進める。破棄済みなら何もせず False。"""
        if self.background.disposed:
            return False
        outline = self.background.frame(
            frame_time_ms, self.surface.width, self.surface.height
        )
        self.surface.fill(outline)
        self._frames += 1
        return True

    # Tickable（`engine.core.frame_clock.FrameClock` から呼ばれる）
    def tick(self, frame_time_ms: float) -> None:
        self.step(frame_time_ms)

    def run(self, frame_times: Iterable[float]) -> int:
        """フレームシグナルが尽きるか破棄されるまで回し、描画したフレーム数を返す。"""
        rendered = 0
        for t in frame_times:
            if not self.step(t):
                logger.debug("frame loop stopped: background disposed")
                break
            rendered += 1
        return rendered


__all__ = ["DrawSurface", "FrameSource", "FrameLoop"]
