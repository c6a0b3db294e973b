"""
どこで: `api.runner`（プレビュー用ホスト）。
何を: pyglet ウィンドウ上で `WavyBackground` をフレーム駆動し、塗りアウトラインを描画する。
なぜ: 埋め込み先 UI が無い環境でも、同じクロック/ビルダ/ループでプレビューできるようにするため。

実行フロー:
1) 設定解決: 引数 > `configs/default.yaml` の `wavy:` セクション > 環境変数設定（`WAVY_*`）。
2) 波形背景の構成（検証エラーはここで `ValueError`/`KeyError`）。`init_only=True` ならここで返す。
3) `RenderWindow` + `FillRenderer` + `FrameLoop` を結線し、`FrameClock` を `pyglet.clock` で駆動。
4) `ESC`/クローズで FrameClock 停止 → 背景破棄 → 描画リソース解放。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from common.logging import setup_default_logging
from common.settings import get as _get_settings
from common.wave_params import WaveDirection
from util.color import normalize_color
from util.units import dp_to_px
from util.utils import wavy_section

from .style import WaveStyle
from .wavy import WavyBackground, wavy_background

logger = logging.getLogger(__name__)

# 既定のプレビュー領域 [dp]
DEFAULT_WINDOW_DP = (360.0, 160.0)


@dataclass(frozen=True)
class Preview:
    """プレビュー構成（`wavy_background` のキーワード引数の組）。"""

    name: str
    height_dp: float = 160.0
    options: Mapping[str, Any] = field(default_factory=dict)


PREVIEWS: dict[str, Preview] = {
    "top": Preview(
        "top",
        options={
            "color": 0xFF4FC3F7,
            "wave_direction": WaveDirection.TOP,
            "style": WaveStyle.GENTLE,
        },
    ),
    "bottom": Preview(
        "bottom",
        options={
            "color": 0xFF4DB6AC,
            "wave_direction": WaveDirection.BOTTOM,
            "style": WaveStyle.GENTLE,
        },
    ),
    "calm": Preview("calm", options={"color": 0xFF90CAF9, "style": WaveStyle.CALM}),
}


def resolve_fps(requested_fps: int | None, cfg: Mapping[str, Any] | None = None) -> int:
    """FPS を解決して 1 以上の int を返す（明示指定 > 設定ファイル > `WAVY_FPS`）。"""
    default = _get_settings().FPS
    if requested_fps is not None:
        return max(1, int(requested_fps))
    section = cfg if cfg is not None else {}
    try:
        return max(1, int(section.get("fps", default)))
    except (TypeError, ValueError):
        return max(1, int(default))


def resolve_window_px(
    width: int | None,
    height: int | None,
    cfg: Mapping[str, Any] | None = None,
    *,
    density: float | None = None,
) -> tuple[int, int]:
    """ウィンドウサイズ [px] を解決する。引数は px、設定ファイルの `window` は dp。"""
    section = cfg if cfg is not None else {}
    win = section.get("window", {})
    win = win if isinstance(win, Mapping) else {}
    w_dp = float(win.get("width", DEFAULT_WINDOW_DP[0]))
    h_dp = float(win.get("height", DEFAULT_WINDOW_DP[1]))
    w_px = int(width) if width is not None else int(round(dp_to_px(w_dp, density)))
    h_px = int(height) if height is not None else int(round(dp_to_px(h_dp, density)))
    if w_px <= 0 or h_px <= 0:
        raise ValueError(f"window size must be positive, got: {(w_px, h_px)}")
    return w_px, h_px


def preview_options(name: str) -> tuple[dict[str, Any], float]:
    """名前付きプレビューの `wavy_background` 引数と高さ [dp] を返す。"""
    key = name.strip().lower()
    if key not in PREVIEWS:
        allowed = ", ".join(sorted(PREVIEWS))
        raise KeyError(f"unknown preview: {name}; allowed={allowed}")
    p = PREVIEWS[key]
    return dict(p.options), p.height_dp


def run_wavy(
    *,
    width: int | None = None,
    height: int | None = None,
    background: object | None = None,
    fps: int | None = None,
    density: float | None = None,
    init_only: bool = False,
    **wave_options: Any,
) -> WavyBackground:
    """波形背景をウィンドウでプレビューする。

    Parameters
    ----------
    width, height : int | None
        ウィンドウサイズ [px]。None で設定ファイルの `wavy.window`（dp）から解決。
    background : object | None
        ウィンドウの背景色。None で設定ファイル/白。
    fps : int | None
        更新レート。None で設定ファイル/`WAVY_FPS`。
    density : float | None
        dp→px 係数。None で設定ファイル/`WAVY_DENSITY`。
    init_only : bool, default False
        True でウィンドウを開かず、構成済みの背景を返す。
    **wave_options
        `api.wavy.wavy_background` のキーワード引数（color/style/wave_count など）。

    Returns
    -------
    WavyBackground
        駆動した背景（ウィンドウを閉じた後は破棄済み）。
    """
    setup_default_logging()
    cfg = wavy_section()
    if density is None and "density" in cfg:
        density = float(cfg["density"])
    fps = resolve_fps(fps, cfg)
    win_w, win_h = resolve_window_px(width, height, cfg, density=density)
    if background is None:
        background = cfg.get("background", "white")
    bg_color = normalize_color(background)

    wavy = wavy_background(density=density, **wave_options)
    logger.info("wavy preview: %dx%d px @ %d fps, %r", win_w, win_h, fps, wavy.params)

    if init_only:
        return wavy

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet

    from engine.core.frame_clock import FrameClock
    from engine.core.render_window import RenderWindow
    from engine.render.renderer import FillRenderer
    from engine.runtime.loop import FrameLoop

    window = RenderWindow(win_w, win_h, bg_color=bg_color)
    renderer = FillRenderer(window)
    loop = FrameLoop(wavy, renderer)
    frame_clock = FrameClock([loop])
    window.add_draw_callback(renderer.draw)
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)

    def _shutdown() -> None:
        frame_clock.stop()
        pyglet.clock.unschedule(frame_clock.tick)
        wavy.dispose()
        renderer.release()
        logger.info("wavy preview closed after %d frames", loop.frames_rendered)

    # ESC/クローズの両方で呼ばれる
    window.add_close_callback(_shutdown)
    pyglet.app.run()
    return wavy


def run_preview(name: str, *, init_only: bool = False, **overrides: Any) -> WavyBackground:
    """`PREVIEWS` の名前付き構成でプレビューする（overrides で個別上書き）。"""
    options, height_dp = preview_options(name)
    options.update(overrides)
    if "height" not in options:
        options["height"] = int(round(dp_to_px(height_dp, options.get("density"))))
    return run_wavy(init_only=init_only, **options)


__all__ = [
    "PREVIEWS",
    "Preview",
    "preview_options",
    "resolve_fps",
    "resolve_window_px",
    "run_preview",
    "run_wavy",
]
