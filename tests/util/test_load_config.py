from __future__ import annotations

from pathlib import Path

from util.utils import _find_project_root, load_config, wavy_section


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # tmp_path/a/b のような構造（上流に .git/pyproject.toml/configs が無い）では
    # フォールバックで start.parent.parent を返す
    a = tmp_path / "a" / "b"
    a.mkdir(parents=True)
    start = a
    got = _find_project_root(start)
    assert got == start.parent.parent


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_load_config_default_then_root_override(tmp_path: Path) -> None:
    _write(tmp_path / "configs" / "default.yaml", "wavy:\n  fps: 60\n  density: 1.0\nother: 1\n")
    _write(tmp_path / "config.yaml", "wavy:\n  fps: 24\n")
    cfg = load_config(tmp_path)
    # トップレベルのみ上書き（wavy はまるごと置換）
    assert cfg["wavy"] == {"fps": 24}
    assert cfg["other"] == 1


def test_load_config_is_fail_soft(tmp_path: Path) -> None:
    _write(tmp_path / "configs" / "default.yaml", "wavy: [unclosed\n")
    assert load_config(tmp_path) == {}
    assert load_config(tmp_path / "missing") == {}


def test_wavy_section_shapes() -> None:
    assert wavy_section({"wavy": {"fps": 10}}) == {"fps": 10}
    assert wavy_section({"wavy": "oops"}) == {}
    assert wavy_section({}) == {}


def test_shipped_default_config_has_wavy_section() -> None:
    root = _find_project_root(Path(__file__).parent)
    section = wavy_section(load_config(root))
    assert section.get("fps") == 60
    assert section.get("window", {}).get("height") == 160
