from pathlib import Path
from typing import Any, Dict

import yaml


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/util/` から呼ばれる想定で、上位に `.git`/`pyproject.toml`/`configs/` がある
      もっとも近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent`。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    return cur.parent.parent


def load_config(project_root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書。
    - トップレベルのみ上書き（ディープマージしない）。
    """
    root = project_root if project_root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


def wavy_section(cfg: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """設定の `wavy:` セクションを返す（無い/不正なら空辞書）。"""
    data = load_config() if cfg is None else cfg
    section = data.get("wavy", {}) if isinstance(data, dict) else {}
    return section if isinstance(section, dict) else {}
