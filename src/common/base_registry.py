"""
どこで: `common.base_registry`
何を: 名前正規化付きの小さな辞書レジストリ（スタイルプリセット等の名前解決に使用）。
なぜ: "Gentle" / "gentle" / "GENTLE" のような表記揺れを 1 箇所で吸収するため。
"""

from __future__ import annotations

import re
from typing import Generic, TypeVar

T = TypeVar("T")


class BaseRegistry(Generic[T]):
    """正規化キー → 値 のレジストリ。

    - 文字列キーは正規化されます（大文字小文字・キャメル→スネーク・ハイフンを吸収）。
    - 同一キーへ別の値を登録しようとすると `ValueError`。
    """

    def __init__(self) -> None:
        self._registry: dict[str, T] = {}

    # === 内部ユーティリティ ===
    @staticmethod
    def _camel_to_snake(name: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return s2.lower()

    @classmethod
    def normalize_key(cls, name: str) -> str:
        """レジストリキーの正規化（例: "VeryCalm" -> "very_calm", "GENTLE" -> "gentle"）。"""
        if not isinstance(name, str):
            raise TypeError("レジストリキーは str である必要があります")
        key = name.strip().replace("-", "_")
        if not key:
            raise ValueError("レジストリキーは空であってはなりません")
        # 全大文字はそのまま小文字化（"GENTLE" を "g_e_n_t_l_e" にしない）
        if key.isupper() or not any(c.isupper() for c in key):
            return key.lower()
        return cls._camel_to_snake(key)

    def add(self, name: str, value: T) -> T:
        """値を登録して返す。"""
        key = self.normalize_key(name)
        if key in self._registry and self._registry[key] != value:
            raise ValueError(f"'{key}' は既に登録されています")
        self._registry[key] = value
        return value

    def get(self, name: str) -> T:
        """登録された値を取得。未登録は `KeyError`。"""
        key = self.normalize_key(name)
        if key not in self._registry:
            raise KeyError(f"'{name}' は登録されていません")
        return self._registry[key]

    def list_all(self) -> list[str]:
        """登録順の名前一覧。"""
        return list(self._registry.keys())


__all__ = ["BaseRegistry"]
