"""
どこで: `engine.core` の簡易フレームドライバ。
何を: ホストのフレームコールバック（pyglet は経過秒 dt を渡す）を単調なミリ秒時刻に変換し、
`Tickable` の列を固定順序で呼び出す。
なぜ: クロック更新 → ジオメトリ生成 → 描画 の順序を 1 箇所で固定するため。
"""

from __future__ import annotations

import time
from typing import Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。"""

    def __init__(self, tickables: Sequence[Tickable], *, start_ms: float | None = None):
        self._tickables = tuple(tickables)
        self._now_ms = float(start_ms) if start_ms is not None else time.perf_counter() * 1000.0
        self._stopped = False

    @property
    def now_ms(self) -> float:
        """直近に配ったフレーム時刻 [ms]。"""
        return self._now_ms

    # GUI フレームワークから schedule_interval で呼ばせる
    def tick(self, dt: float | None = None) -> None:
        if self._stopped:
            return
        if dt is None:  # 他フレームワーク用
            self._now_ms = max(self._now_ms, time.perf_counter() * 1000.0)
        else:  # pyglet は dt [s] を渡してくれる
            self._now_ms += max(0.0, float(dt)) * 1000.0

        for t in self._tickables:
            t.tick(self._now_ms)

    def stop(self) -> None:
        """以後の tick を no-op にする（ホストの破棄シグナル）。"""
        self._stopped = True
