"""
どこで: `common.settings`
何を: 波形背景の環境変数（`WAVY_*`）を型付きで一元管理し、起動時に読み込む。
なぜ: 密度（dp→px）や FPS の既定値をモジュール間で揃え、テストで差し替え可能にするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_int

# 密度の下限（0 以下は dp→px 変換が破綻する）
_MIN_DENSITY = 0.01


@dataclass
class _Settings:
    # dp → px 変換係数（ホストの画面密度）
    DENSITY: float = 1.0

    # プレビューランナーの更新レート
    FPS: int = 60

    # フレームごとの位相を DEBUG ログへ出す
    DEBUG_FRAMES: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `WAVY_DENSITY`: float。`_MIN_DENSITY` 未満は下限へ丸める。
    - `WAVY_FPS`: int。1 未満は 1。
    - `WAVY_DEBUG_FRAMES`: bool。
    """
    density = env_float("WAVY_DENSITY", 1.0, min_value=_MIN_DENSITY)
    _settings.DENSITY = float(density if density is not None else 1.0)
    fps = env_int("WAVY_FPS", 60, min_value=1)
    _settings.FPS = int(fps if fps is not None else 60)
    _settings.DEBUG_FRAMES = env_bool("WAVY_DEBUG_FRAMES", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
