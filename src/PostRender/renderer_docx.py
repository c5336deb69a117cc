from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from docx import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt

from . import docx_format
from .config import DEFAULT_STYLE, StyleConfig
from .inline_parser import tokenize_lines
from .model import (
    Block,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    InlineBold,
    InlineCode,
    InlineItalic,
    InlineLink,
    InlineNode,
    InlineStrike,
    ListBlock,
    Paragraph,
)

logger = logging.getLogger(__name__)

BULLETS = ("•", "◦", "▪")
SAFE_LINK_PREFIXES = ("http://", "https://")


def render_document(doc: Document, output_path: str | Path, config: StyleConfig | None = None) -> None:
    output_path = Path(output_path)
    style = config or DEFAULT_STYLE
    docx = DocxDocument()
    docx_format.apply_page_layout(docx, style)

    for block in doc.blocks:
        _dispatch_block(docx, block, style)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)
    logger.debug("Wrote %d top-level blocks to %s", len(doc.blocks), output_path)


def _dispatch_block(docx: DocxDocument, block: Block, style: StyleConfig) -> None:
    if isinstance(block, Heading):
        _render_heading(docx, block, style)
    elif isinstance(block, Paragraph):
        paragraph = docx.add_paragraph()
        _add_lines(paragraph, block, style)
        docx_format.apply_body_paragraph_format(paragraph, style)
    elif isinstance(block, BlockQuote):
        paragraph = docx.add_paragraph()
        _add_lines(paragraph, block.paragraph, style, italic=True)
        docx_format.apply_block_format(paragraph, style, left_indent_cm=style.first_line_indent_cm)
    elif isinstance(block, ListBlock):
        _render_list(docx, block, style)
    elif isinstance(block, CodeBlock):
        _render_code_block(docx, block, style)
    elif isinstance(block, HorizontalRule):
        _render_horizontal_rule(docx, style)


def _render_heading(docx: DocxDocument, heading: Heading, style: StyleConfig) -> None:
    paragraph = docx.add_paragraph()
    _add_inline(paragraph, heading.inline, style, bold=True)
    docx_format.apply_heading_format(paragraph, style, heading.level)


def _add_lines(paragraph, block: Paragraph, style: StyleConfig, italic: bool = False) -> None:
    """Add each physical line, separated by hard line breaks."""
    for idx, inline in enumerate(tokenize_lines(block.lines)):
        if idx:
            paragraph.add_run().add_break()
        _add_inline(paragraph, inline, style, italic=italic)


def _add_inline(
    paragraph,
    inline_elements: Iterable[InlineNode],
    style: StyleConfig,
    bold: bool = False,
    italic: bool = False,
) -> None:
    for inline in inline_elements:
        if isinstance(inline, InlineLink):
            run = paragraph.add_run(inline.text)
            docx_format.set_run_font(run, style, bold=bold, italic=italic)
            if inline.href.startswith(SAFE_LINK_PREFIXES):
                run.font.underline = True
                if inline.href != inline.text:
                    href_run = paragraph.add_run(f" ({inline.href})")
                    docx_format.set_run_font(href_run, style, bold=bold, italic=italic)
            continue
        run = paragraph.add_run(inline.text)
        docx_format.set_run_font(
            run,
            style,
            bold=bold or isinstance(inline, InlineBold),
            italic=italic or isinstance(inline, InlineItalic),
            code=isinstance(inline, InlineCode),
            strike=isinstance(inline, InlineStrike),
        )


def _render_list(docx: DocxDocument, block: ListBlock, style: StyleConfig) -> None:
    left_indent = style.first_line_indent_cm + block.depth * style.list_indent_cm
    for idx, item in enumerate(block.items, start=1):
        paragraph = docx.add_paragraph()
        marker = f"{idx}. " if block.ordered else f"{_bullet(block.depth)} "
        marker_run = paragraph.add_run(marker)
        docx_format.set_run_font(marker_run, style)
        _add_inline(paragraph, item.inline, style)
        docx_format.apply_block_format(paragraph, style, left_indent_cm=left_indent)

        for child in item.children:
            _dispatch_block(docx, child, style)


def _bullet(depth: int) -> str:
    return BULLETS[min(depth, len(BULLETS) - 1)]


def _render_code_block(docx: DocxDocument, block: CodeBlock, style: StyleConfig) -> None:
    paragraph = docx.add_paragraph()
    _add_code_lines(paragraph, block.lines, style)
    docx_format.apply_block_format(paragraph, style)
    paragraph.paragraph_format.space_after = Pt(style.line_spacing_pt)


def _add_code_lines(paragraph, lines: Sequence[str], style: StyleConfig) -> None:
    for idx, line in enumerate(lines):
        run = paragraph.add_run(line)
        docx_format.set_run_font(run, style, code=True)
        if idx < len(lines) - 1:
            run.add_break()


def _render_horizontal_rule(docx: DocxDocument, style: StyleConfig) -> None:
    paragraph = docx.add_paragraph()
    run = paragraph.add_run("-" * 20)
    docx_format.set_run_font(run, style)
    docx_format.apply_block_format(paragraph, style)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    paragraph.paragraph_format.left_indent = Cm(0)
