"""
どこで: `common.logging`。
何を: 波形背景のランナー/デモ向けに、最小のロギング構成を 1 度だけ適用するヘルパ。
なぜ: コア（clock/builder）は `logging.getLogger(__name__)` で出力するだけにし、
ハンドラ構成はホスト側（ランナー）に任せるため。
"""

from __future__ import annotations

import logging
import os

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("WAVY_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """ルートロガーが未構成の場合のみ `basicConfig` を適用する。

    - `level` 省略時は環境変数 `WAVY_LOG_LEVEL`（既定 INFO）を用いる。
    - ルートロガーにハンドラが既にあれば何もしない（アプリ側の設定を尊重）。
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=_resolve_level(level), format=_DEFAULT_FORMAT)


__all__ = ["setup_default_logging"]
