from __future__ import annotations

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt

from .config import StyleConfig


def apply_page_layout(doc, style: StyleConfig) -> None:
    """Apply page size and margins."""
    section = doc.sections[0]
    section.page_height = Cm(style.page_height_mm / 10)
    section.page_width = Cm(style.page_width_mm / 10)
    section.left_margin = Cm(style.margin_left_cm)
    section.right_margin = Cm(style.margin_right_cm)
    section.top_margin = Cm(style.margin_top_cm)
    section.bottom_margin = Cm(style.margin_bottom_cm)


def set_run_font(
    run,
    style: StyleConfig,
    bold: bool = False,
    italic: bool = False,
    code: bool = False,
    strike: bool = False,
) -> None:
    run.font.name = style.code_font_name if code else style.font_name
    run.font.size = Pt(style.font_size_pt)
    run.bold = bold
    run.italic = italic
    run.font.strike = strike


def apply_body_paragraph_format(paragraph, style: StyleConfig) -> None:
    """Format normal text paragraphs."""
    paragraph.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
    paragraph.paragraph_format.space_after = Pt(0)
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.line_spacing = Pt(style.line_spacing_pt)
    paragraph.paragraph_format.first_line_indent = Cm(style.first_line_indent_cm)


HEADING_SCALE = (1.6, 1.4, 1.25, 1.15, 1.08, 1.0)


def heading_size_pt(style: StyleConfig, level: int) -> float:
    scale = HEADING_SCALE[min(max(level, 1), len(HEADING_SCALE)) - 1]
    return round(style.font_size_pt * scale, 1)


def apply_heading_format(paragraph, style: StyleConfig, level: int) -> None:
    size = Pt(heading_size_pt(style, level))
    for run in paragraph.runs:
        run.font.size = size
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_after = Pt(style.line_spacing_pt)
    paragraph.paragraph_format.space_before = Pt(style.line_spacing_pt if level == 1 else 0)
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.keep_with_next = True


def apply_block_format(paragraph, style: StyleConfig, left_indent_cm: float = 0) -> None:
    """Left-aligned, unindented layout for list items, quotes and code."""
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_after = Pt(0)
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.line_spacing = Pt(style.line_spacing_pt)
    paragraph.paragraph_format.first_line_indent = Cm(0)
    paragraph.paragraph_format.left_indent = Cm(left_indent_cm)
