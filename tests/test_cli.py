import json
from pathlib import Path

import pytest
from docx import Document as DocxReader

from PostRender.cli import main


@pytest.fixture
def post(tmp_path: Path) -> Path:
    path = tmp_path / "post.md"
    path.write_text("# Hello\n\n- one\n  - two\n", encoding="utf-8")
    return path


def test_default_output_is_docx(post: Path):
    main([str(post)])
    out = post.with_suffix(".docx")
    assert [p.text for p in DocxReader(out).paragraphs] == ["Hello", "• one", "◦ two"]


def test_html_output(post: Path):
    main([str(post), "--format", "html"])
    html = post.with_suffix(".html").read_text(encoding="utf-8")
    assert html.startswith("<h1>Hello</h1>\n")


def test_json_output_into_directory(post: Path, tmp_path: Path):
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    main([str(post), "--format", "json", "-o", str(out_dir)])
    data = json.loads((out_dir / "post.json").read_text(encoding="utf-8"))
    assert [block["type"] for block in data["blocks"]] == ["Heading", "ListBlock"]


def test_style_file_is_used(post: Path, tmp_path: Path):
    style = tmp_path / "style.yaml"
    style.write_text("font_name: Arial\n", encoding="utf-8")
    out = tmp_path / "styled.docx"
    main([str(post), "--style", str(style), "-o", str(out)])
    assert DocxReader(out).paragraphs[0].runs[0].font.name == "Arial"


def test_bad_style_file_raises(post: Path, tmp_path: Path):
    style = tmp_path / "style.yaml"
    style.write_text("nope: 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        main([str(post), "--style", str(style)])


def test_missing_input_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "missing.md")])


def test_byte_order_mark_is_ignored(tmp_path: Path):
    path = tmp_path / "bom.md"
    path.write_bytes("\ufeff# Hello\n".encode("utf-8"))
    main([str(path), "--format", "json"])
    data = json.loads(path.with_suffix(".json").read_text(encoding="utf-8"))
    assert [block["type"] for block in data["blocks"]] == ["Heading"]
