"""HTML serializer for parsed posts.

Every piece of text is escaped, so the output is safe to embed even though
the source is user-submitted. Links are only emitted for http(s) targets
and never pass the referrer or a window handle to the linked page.
"""

from __future__ import annotations

import html
from typing import Iterable, List

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

BULLET_STYLES = ("disc", "circle", "square")
SAFE_LINK_PREFIXES = ("http://", "https://")


def render_html(doc: Document) -> str:
    out: List[str] = []
    for block in doc.blocks:
        _render_block(block, out)
    return "\n".join(out)


def _render_block(block: Block, out: List[str]) -> None:
    if isinstance(block, Heading):
        out.append(f"<h{block.level}>{render_inline(block.inline)}</h{block.level}>")
    elif isinstance(block, Paragraph):
        out.append(f"<p>{_paragraph_body(block)}</p>")
    elif isinstance(block, BlockQuote):
        out.append(f"<blockquote><p>{_paragraph_body(block.paragraph)}</p></blockquote>")
    elif isinstance(block, CodeBlock):
        out.append(_code_block(block))
    elif isinstance(block, HorizontalRule):
        out.append("<hr>")
    elif isinstance(block, ListBlock):
        _render_list(block, out)


def _paragraph_body(paragraph: Paragraph) -> str:
    return "<br>\n".join(render_inline(line) for line in tokenize_lines(paragraph.lines))


def _code_block(block: CodeBlock) -> str:
    attr = f' class="language-{html.escape(block.language)}"' if block.language else ""
    return f"<pre><code{attr}>{html.escape(block.code)}</code></pre>"


def _render_list(block: ListBlock, out: List[str]) -> None:
    if block.ordered:
        out.append('<ol style="list-style-type: decimal">')
    else:
        style = BULLET_STYLES[min(block.depth, len(BULLET_STYLES) - 1)]
        out.append(f'<ul style="list-style-type: {style}">')
    for item in block.items:
        if not item.children:
            out.append(f"<li>{render_inline(item.inline)}</li>")
            continue
        out.append(f"<li>{render_inline(item.inline)}")
        for child in item.children:
            _render_block(child, out)
        out.append("</li>")
    out.append("</ol>" if block.ordered else "</ul>")


def render_inline(inline_elements: Iterable[InlineNode]) -> str:
    parts: List[str] = []
    for inline in inline_elements:
        text = html.escape(inline.text)
        if isinstance(inline, InlineCode):
            parts.append(f"<code>{text}</code>")
        elif isinstance(inline, InlineLink):
            if inline.href.startswith(SAFE_LINK_PREFIXES):
                href = html.escape(inline.href, quote=True)
                parts.append(f'<a href="{href}" target="_blank" rel="noopener noreferrer">{text}</a>')
            else:
                parts.append(text)
        elif isinstance(inline, InlineBold):
            parts.append(f"<strong>{text}</strong>")
        elif isinstance(inline, InlineItalic):
            parts.append(f"<em>{text}</em>")
        elif isinstance(inline, InlineStrike):
            parts.append(f"<del>{text}</del>")
        else:
            parts.append(text)
    return "".join(parts)
