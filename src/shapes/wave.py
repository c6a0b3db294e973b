"""
どこで: `shapes.wave`（波形アウトライン生成）。
何を: 現在の位相・描画面サイズ・`WaveParameters` から、塗りつぶし用の閉じた多角形 `Outline` を作る。
なぜ: 1 フレームの形状を純関数で決め、クロック（状態）とレンダラ（描画）から切り離すため。

手順:
1. 振幅の自動スケール: `scale = min(1, height / (amplitude_px * 2))`。
   山〜谷の幅が高さを超えないので、小さな描画面でも波がクリップ/反転しない。
2. スケール後振幅が 0 なら、波を描かず全面矩形を返す（高さ 0 付近の NaN/ゼロ除算を避ける）。
3. ベースライン: Top は `amp`、Bottom は `height - amp`。
4. 波長 `width / max(1, wave_count)`、x を 3px 刻みでサンプリングして
   `y = baseline + local_amp(p) * sin(p + horizontal_phase)`、`p = x / wavelength * 2π`。
5. ブリージング有効時は `local_amp(p) = amp * (0.8 + 0.2 * sin(vertical_phase + |p| * 0.5))`。

頂点の並び（原点は左上、Y 下向き）:
- Top:    (0,0) → 曲線（左→右） → (w,h) → (0,h) → 閉じる。曲線より下側を塗る。
- Bottom: (0,0) → (w,0) → 曲線（右→左） → (0,h) → 閉じる。曲線より上側を塗る。
"""

from __future__ import annotations

import logging

import numpy as np

from common.settings import get as _get_settings
from common.types import RGBA
from common.wave_params import WaveDirection, WaveParameters
from engine.core.animation import TAU
from engine.core.outline import Outline
from util.color import normalize_color
from util.units import dp_to_px

# x 方向のサンプリング間隔 [px]
SAMPLE_STEP_PX = 3
# ブリージングの振幅帯（基準 0.8 + 揺れ 0.2）
BREATH_BASE = 0.8
BREATH_DEPTH = 0.2
# ブリージングの空間周波数（|progress| に掛ける係数）
BREATH_SPATIAL = 0.5

logger = logging.getLogger(__name__)


def scale_amplitude(amplitude_px: float, height: float) -> float:
    """高さに収まるようスケールした振幅を返す（拡大はしない）。

    返り値は常に `0 <= amp <= height / 2` かつ `amp <= amplitude_px`。
    """
    amp = float(amplitude_px)
    h = float(height)
    if amp <= 0.0 or h <= 0.0:
        return 0.0
    intrinsic_height = amp * 2.0
    scale = min(1.0, h / intrinsic_height)
    return amp * scale


def wave_baseline(direction: WaveDirection, height: float, amplitude: float) -> float:
    """山が `direction` 側の辺に接するベースライン y を返す。"""
    if direction is WaveDirection.TOP:
        return float(amplitude)
    return float(height) - float(amplitude)


def local_amplitude(
    progress: np.ndarray | float,
    amplitude: float,
    *,
    vertical_phase: float = 0.0,
    animate_shape: bool = True,
) -> np.ndarray:
    """サンプル位置ごとの振幅（ブリージング変調込み）。"""
    p = np.abs(np.asarray(progress, dtype=np.float64))
    if not animate_shape:
        return np.full_like(p, float(amplitude))
    return float(amplitude) * (
        BREATH_BASE + BREATH_DEPTH * np.sin(float(vertical_phase) + p * BREATH_SPATIAL)
    )


def sample_positions(width: float, direction: WaveDirection) -> np.ndarray:
    """曲線をサンプルする整数 x 座標列（Top は昇順、Bottom は降順）。"""
    last = int(width)
    if last < 0:
        return np.empty(0, dtype=np.float64)
    if direction is WaveDirection.TOP:
        xs = np.arange(0, last + 1, SAMPLE_STEP_PX)
    else:
        xs = np.arange(last, -1, -SAMPLE_STEP_PX)
    return xs.astype(np.float64)


def wave_outline(
    width: float,
    height: float,
    *,
    horizontal_phase: float = 0.0,
    vertical_phase: float = 0.0,
    params: WaveParameters | None = None,
    color: object = "black",
    density: float | None = None,
) -> Outline:
    """1 フレーム分の波形アウトラインを生成します。

    Parameters
    ----------
    width, height : float
        描画面のサイズ [px]。負値は 0 とみなす。
    horizontal_phase : float, default 0.0
        水平位相 [rad]（`engine.core.animation` が進める）。
    vertical_phase : float, default 0.0
        ブリージング位相 [rad]。
    params : WaveParameters | None
        波形設定。None で既定値。
    color : object, default "black"
        塗り色トークン（`util.color.normalize_color` が受理する形式）。
    density : float | None
        dp→px 係数。None で設定値（`WAVY_DENSITY`）。

    Returns
    -------
    Outline
        波形の閉じた多角形。スケール後振幅が 0（または幅 0）の場合は全面矩形。
    """
    p = params if params is not None else WaveParameters()
    rgba: RGBA = normalize_color(color)
    w = max(0.0, float(width))
    h = max(0.0, float(height))

    amplitude_px = dp_to_px(p.wave_amplitude, density)
    amp = scale_amplitude(amplitude_px, h)
    if amp == 0.0 or w == 0.0:
        logger.debug("degenerate wave surface (w=%g, h=%g, amp=%g); solid fill", w, h, amp)
        return Outline.solid_rect(w, h, rgba)

    baseline = wave_baseline(p.direction, h, amp)
    wavelength = w / p.effective_wave_count

    xs = sample_positions(w, p.direction)
    progress = (xs / wavelength) * TAU
    amps = local_amplitude(
        progress, amp, vertical_phase=vertical_phase, animate_shape=p.animate_shape
    )
    ys = baseline + amps * np.sin(progress + float(horizontal_phase))
    curve = np.column_stack([xs, ys])

    if p.direction is WaveDirection.TOP:
        head = np.array([[0.0, 0.0]])
        tail = np.array([[w, h], [0.0, h]])
    else:
        head = np.array([[0.0, 0.0], [w, 0.0]])
        tail = np.array([[0.0, h]])
    vertices = np.concatenate([head, curve, tail], axis=0)

    if _get_settings().DEBUG_FRAMES:
        logger.debug(
            "wave outline: %d vertices, amp=%.3f, baseline=%.3f, phase=(%.4f, %.4f)",
            vertices.shape[0],
            amp,
            baseline,
            horizontal_phase,
            vertical_phase,
        )
    return Outline(
        vertices,
        rgba,
        kind="path",
        width=w,
        height=h,
        amplitude=amp,
        baseline=baseline,
    )


__all__ = [
    "SAMPLE_STEP_PX",
    "scale_amplitude",
    "wave_baseline",
    "local_amplitude",
    "sample_positions",
    "wave_outline",
]
