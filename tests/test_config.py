import textwrap
from pathlib import Path

import pytest

from PostRender.config import DEFAULT_STYLE, load_config, parse_config


def test_empty_config_uses_defaults():
    assert parse_config("") == DEFAULT_STYLE
    assert load_config(None) is DEFAULT_STYLE


def test_config_overrides(tmp_path: Path):
    path = tmp_path / "style.yaml"
    path.write_text(
        textwrap.dedent(
            """
            font_name: Arial
            font_size_pt: 12
            margin_left_cm: 2.5
            """
        ),
        encoding="utf-8",
    )
    style = load_config(path)
    assert style.font_name == "Arial"
    assert style.font_size_pt == 12.0
    assert style.margin_left_cm == 2.5
    assert style.code_font_name == DEFAULT_STYLE.code_font_name


def test_root_must_be_mapping():
    with pytest.raises(ValueError, match="mapping"):
        parse_config("- font_name\n- Arial")


def test_unknown_keys_are_rejected():
    with pytest.raises(ValueError, match="Unknown style settings: colour"):
        parse_config("colour: red")


@pytest.mark.parametrize(
    "text",
    [
        "font_size_pt: big",
        "font_size_pt: -1",
        "list_indent_cm: true",
        "font_name: ''",
        "font_size_pt: .nan",
        "margin_left_cm: .inf",
        "margin_top_cm: 1" + "0" * 400,
    ],
)
def test_bad_values_are_rejected(text):
    with pytest.raises(ValueError, match="Style setting"):
        parse_config(text)
