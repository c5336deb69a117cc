from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml


@dataclass(frozen=True)
class StyleConfig:
    """Page and typography settings shared by the renderers."""

    font_name: str = "Times New Roman"
    code_font_name: str = "Courier New"
    font_size_pt: float = 14
    line_spacing_pt: float = 18
    first_line_indent_cm: float = 1.25
    list_indent_cm: float = 0.75
    page_width_mm: float = 210
    page_height_mm: float = 297
    margin_left_cm: float = 3.0
    margin_right_cm: float = 1.5
    margin_top_cm: float = 2.0
    margin_bottom_cm: float = 2.0


DEFAULT_STYLE = StyleConfig()


def parse_config(text: str) -> StyleConfig:
    """Build a StyleConfig from YAML text; unset keys keep their defaults."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("Style config root must be a mapping of setting names to values.")

    known = {f.name: f for f in fields(StyleConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ValueError(f"Unknown style settings: {', '.join(unknown)}")

    values = {}
    for key, value in data.items():
        default = getattr(DEFAULT_STYLE, key)
        if isinstance(default, str):
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Style setting '{key}' must be a non-empty string.")
            values[key] = value
        else:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Style setting '{key}' must be a number.")
            try:
                number = float(value)
            except OverflowError:
                number = math.inf
            if not math.isfinite(number) or number < 0:
                raise ValueError(f"Style setting '{key}' must be a finite non-negative number.")
            values[key] = number
    return replace(DEFAULT_STYLE, **values)


def load_config(path: str | Path | None) -> StyleConfig:
    if path is None:
        return DEFAULT_STYLE
    return parse_config(Path(path).read_text(encoding="utf-8"))
