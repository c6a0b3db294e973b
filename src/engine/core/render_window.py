"""
どこで: `engine.core` のプレビュー用ウィンドウ。
何を: Pyglet Window に背景クリア・描画コールバック・終了コールバック（ESC/クローズ）をまとめる。
なぜ: ランナーが「描画する関数」と「破棄する関数」を登録するだけでプレビューを組めるようにするため。

使用例:
    win = RenderWindow(360, 160, bg_color="#FFFFFF")
    win.add_draw_callback(renderer.draw)
    win.add_close_callback(background.dispose)
    pyglet.app.run()
"""

import logging
from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor
from pyglet.window import key

from util.color import normalize_color

logger = logging.getLogger(__name__)


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        bg_color: object = "white",
        caption: str = "Wavy background",
        resizable: bool = True,
    ):
        """ウィンドウを生成する。

        引数:
            width, height: 初期サイズ [px]。
            bg_color: 背景色（`util.color.normalize_color` が受理する形式）。
            caption: タイトル。
            resizable: リサイズ可否。波形は毎フレーム現在サイズで作り直される。
        """
        config = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        super().__init__(
            width=width, height=height, caption=caption, resizable=resizable, config=config
        )
        self._bg_color = normalize_color(bg_color)
        self._draw_callbacks: list[Callable[[], None]] = []
        self._close_callbacks: list[Callable[[], None]] = []
        self._closed = False

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """`on_draw` 中に呼ぶ描画関数を登録する（登録順）。"""
        self._draw_callbacks.append(func)

    def add_close_callback(self, func: Callable[[], None]) -> None:
        """ウィンドウ終了時に 1 度だけ呼ぶ関数を登録する（登録順）。"""
        self._close_callbacks.append(func)

    # ---- pyglet イベント ----
    def on_draw(self):
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_resize(self, width, height):
        logger.debug("window resized: %dx%d", width, height)
        return super().on_resize(width, height)

    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.close()

    def on_close(self):
        if not self._closed:
            self._closed = True
            for cb in self._close_callbacks:
                cb()
        super().on_close()

    def set_background_color(self, color: object) -> None:
        """背景色を更新する。次フレームから反映。不正入力は無視。"""
        try:
            self._bg_color = normalize_color(color)
        except ValueError:
            logger.warning("invalid background color ignored: %r", color)
