"""
どこで: `api.wavy`（埋め込み用の波形背景インスタンス）。
何を: `AnimationState` を 1 つ占有し、フレームごとに「クロック更新 → アウトライン生成」を行う `WavyBackground`。
なぜ: ホストの宣言的再描画の代わりに、明示的なレンダーループから 1 フレームずつ駆動できるようにするため。

ライフサイクル:
- 状態は最初の `tick()` で生成し、`dispose()` で破棄する（永続化しない）。
- `dispose()` 後の `tick()` は no-op、`build()` は `RuntimeError`。

使用例:
    from api import wavy_background

    bg = wavy_background(color=0xFF4FC3F7, style="gentle")
    for t_ms in host_frame_times():
        outline = bg.frame(t_ms, surface.width, surface.height)
        surface.fill(outline)
"""

from __future__ import annotations

import logging

from common.settings import get as _get_settings
from common.types import RGBA
from common.wave_params import WaveDirection, WaveParameters
from engine.core.animation import AnimationState, advance_phases
from engine.core.outline import Outline
from shapes.wave import wave_outline
from util.color import normalize_color
from util.units import resolve_density

from .style import WaveStyle, resolve_style

logger = logging.getLogger(__name__)


class WavyBackground:
    """アニメーションする波形背景（1 インスタンス = 1 描画セッション）。"""

    def __init__(
        self,
        params: WaveParameters | None = None,
        *,
        color: object = "black",
        density: float | None = None,
    ) -> None:
        self.params = params if params is not None else WaveParameters()
        self.color: RGBA = normalize_color(color)
        self.density = resolve_density(density)
        self._state: AnimationState | None = None
        self._disposed = False

    # ---- 状態 -----------------------------------------------------------
    @property
    def state(self) -> AnimationState | None:
        """現在のアニメーション状態（最初の tick 前/破棄後は None）。"""
        return self._state

    @property
    def disposed(self) -> bool:
        return self._disposed

    # ---- Tickable -------------------------------------------------------
    def tick(self, frame_time_ms: float) -> None:
        """フレーム時刻 [ms] で位相を進める。破棄後は何もしない。"""
        if self._disposed:
            return
        if self._state is None:
            self._state = AnimationState()
        advance_phases(self._state, frame_time_ms, self.params)
        if _get_settings().DEBUG_FRAMES:
            logger.debug(
                "tick %.3f ms: phase=(%.4f, %.4f)",
                frame_time_ms,
                self._state.horizontal_phase,
                self._state.vertical_phase,
            )

    # ---- 生成 -----------------------------------------------------------
    def build(self, width: float, height: float) -> Outline:
        """現在の位相で `width x height` [px] のアウトラインを生成する。"""
        if self._disposed:
            raise RuntimeError("WavyBackground は破棄済みです")
        state = self._state or AnimationState()
        return wave_outline(
            width,
            height,
            horizontal_phase=state.horizontal_phase,
            vertical_phase=state.vertical_phase,
            params=self.params,
            color=self.color,
            density=self.density,
        )

    def frame(self, frame_time_ms: float, width: float, height: float) -> Outline:
        """1 フレーム分（tick → build）をまとめて実行する。"""
        self.tick(frame_time_ms)
        return self.build(width, height)

    def dispose(self) -> None:
        """状態を破棄し、以後のフレーム更新を止める（冪等）。"""
        if self._disposed:
            return
        self._disposed = True
        self._state = None
        logger.debug("wavy background disposed")

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"WavyBackground(params={self.params!r}, disposed={self._disposed})"


def wavy_background(
    *,
    color: object = "black",
    wave_direction: WaveDirection | str = WaveDirection.TOP,
    wave_count: int = 5,
    wave_amplitude: float = 20.0,
    wave_speed: float = 1200.0,
    vertical_oscillation_speed: float = 1500.0,
    reverse_direction: bool = False,
    animate_wave_shape: bool = True,
    style: WaveStyle | str | None = None,
    density: float | None = None,
) -> WavyBackground:
    """公開設定から `WavyBackground` を構成して返すファクトリ。

    引数:
        color: 塗り色（Hex / RGB(A) / 0xAARRGGBB / 色名）。既定は黒。
        wave_direction: 山が接する辺（"top"/"bottom"）。
        wave_count: 幅全体の周期数（0 以下は 1 とみなす）。
        wave_amplitude: 山の高さ [dp]。描画面が低いと自動で縮む。
        wave_speed: 水平 1 周の時間 [ms]。小さいほど速い。
        vertical_oscillation_speed: ブリージング 1 周の時間 [ms]。
        reverse_direction: True で左→右へ流れる（既定は右→左）。
        animate_wave_shape: ブリージングの有無。
        style: プリセット。指定時は周期数/振幅/速度 2 種を上書きする。
        density: dp→px 係数。None で設定値。

    例外:
        ValueError: 速度が 0 以下、振幅が負、色が不正など。
        KeyError: 未知のスタイル名。
    """
    if style is not None:
        data = resolve_style(style)
        wave_count = data.wave_count
        wave_amplitude = data.wave_amplitude
        wave_speed = data.wave_speed
        vertical_oscillation_speed = data.vertical_oscillation_speed

    params = WaveParameters(
        wave_count=wave_count,
        wave_amplitude=wave_amplitude,
        wave_speed=wave_speed,
        vertical_oscillation_speed=vertical_oscillation_speed,
        direction=WaveDirection.parse(wave_direction),
        reverse_direction=reverse_direction,
        animate_shape=animate_wave_shape,
    )
    return WavyBackground(params, color=color, density=density)


__all__ = ["WavyBackground", "wavy_background"]
