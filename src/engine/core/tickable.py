"""
どこで: `engine.core` の更新インターフェース。
何を: フレーム時刻 [ms] を受け取る `tick(frame_time_ms)` を持つ `Tickable` Protocol を定義。
なぜ: 波形背景/レンダラなどフレーム駆動のオブジェクトを一様に扱うため。
"""

from typing import Protocol


class Tickable(Protocol):
    """1 フレーム分の更新を行うインターフェース。"""

    def tick(self, frame_time_ms: float) -> None:
        """単調増加するフレーム時刻 `frame_time_ms` [ms] で内部状態を進める。"""
