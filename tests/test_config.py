from pathlib import Path

import pytest

from articlegen.config import RenderOptions, load_render_options


def test_defaults() -> None:
    options = RenderOptions()

    assert options.doctype == ""
    assert options.formatted is False


def test_load_render_options(tmp_path: Path) -> None:
    path = tmp_path / "render.yaml"
    path.write_text("doctype: '<!doctype html>'\nformatted: true\n", encoding="utf-8")

    options = load_render_options(path)

    assert options == RenderOptions(doctype="<!doctype html>", formatted=True)


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "render.yaml"
    path.write_text("", encoding="utf-8")

    assert load_render_options(path) == RenderOptions()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_render_options(tmp_path / "missing.yaml")


def test_unknown_key_exits(tmp_path: Path) -> None:
    path = tmp_path / "render.yaml"
    path.write_text("pretty: true\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        load_render_options(path)
    assert "render.yaml" in str(excinfo.value)
