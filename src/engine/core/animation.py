"""
どこで: `engine.core.animation`（アニメーションクロック）。
何を: フレーム時刻 [ms] の差分から、水平位相と垂直（ブリージング）位相の 2 つを進める。
なぜ: フレームをまたいで保持する状態をこの 2 位相 + 直前時刻だけに限定し、
ジオメトリ生成（`shapes.wave`）を純関数のまま保つため。

位相規約:
- 1 周期 = 2π。水平は `wave_speed` [ms]、垂直は `vertical_oscillation_speed` [ms] で 1 周。
- 水平の向きは `reverse_direction=False` で負（右→左へ流れる）、True で正。
- 更新後の位相は常に [0, 2π)。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from common.wave_params import WaveParameters

TAU = 2.0 * math.pi

logger = logging.getLogger(__name__)


def wrap_phase(x: float) -> float:
    """位相を [0, 2π) に折り返す。負の値は周期を足して補正する。"""
    r = math.fmod(float(x), TAU)
    if r < 0.0:
        r += TAU
    # ULP 誤差で 2π ちょうどに丸まるケースのガード
    if r >= TAU:
        return 0.0
    return r


@dataclass
class AnimationState:
    """1 インスタンスが占有する可変アニメーション状態。"""

    horizontal_phase: float = 0.0
    vertical_phase: float = 0.0
    last_frame_time_ms: float | None = None

    @property
    def started(self) -> bool:
        """最初のフレーム時刻を受け取り済みか。"""
        return self.last_frame_time_ms is not None


def frame_delta_ms(state: AnimationState, frame_time_ms: float) -> float | None:
    """直前時刻との差分 [ms] を返し、直前時刻を更新する。

    - 初回（直前時刻なし）は `None`。
    - 時刻が巻き戻った場合は 0 に丸める。
    - 非有限の時刻はフレームごと読み飛ばす（`None`、直前時刻は据え置き）。
    """
    now = float(frame_time_ms)
    if not math.isfinite(now):
        logger.debug("non-finite frame time %r skipped", frame_time_ms)
        return None
    prev = state.last_frame_time_ms
    state.last_frame_time_ms = now
    if prev is None:
        logger.debug("animation session started at %.3f ms", now)
        return None
    delta = now - prev
    if not math.isfinite(delta):
        logger.debug("frame delta overflow (%r -> %r); frame skipped", prev, now)
        return None
    if delta < 0.0:
        logger.debug("non-monotonic frame time (%.3f -> %.3f); delta clamped to 0", prev, now)
        return 0.0
    return delta


def _cycle_fraction(delta_ms: float, period_ms: float) -> float:
    """経過時間を 1 周期未満へ畳んだ割合 [0, 1)。巨大な差分でも有限に保つ。"""
    return math.fmod(delta_ms, period_ms) / period_ms


def advance_phases(
    state: AnimationState, frame_time_ms: float, params: WaveParameters
) -> None:
    """1 フレーム分だけ `state` の位相を進める（副作用は `state` の更新のみ）。"""
    delta = frame_delta_ms(state, frame_time_ms)
    if delta is None:
        return

    direction = 1.0 if params.reverse_direction else -1.0
    state.horizontal_phase = wrap_phase(
        state.horizontal_phase + _cycle_fraction(delta, params.wave_speed) * TAU * direction
    )

    if params.animate_shape:
        state.vertical_phase = wrap_phase(
            state.vertical_phase
            + _cycle_fraction(delta, params.vertical_oscillation_speed) * TAU
        )


__all__ = ["TAU", "AnimationState", "advance_phases", "frame_delta_ms", "wrap_phase"]
