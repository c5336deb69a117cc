from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List

from .inline_parser import tokenize_inline
from .model import (
    Block,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    InlineNode,
    ListBlock,
    ListItem,
    ListKind,
    Paragraph,
)

logger = logging.getLogger(__name__)

LIST_ITEM_RE = re.compile(r"^(\s*)([-*+]|\d+\.)\s+(.*)$")
HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
RULE_RE = re.compile(r"^(\*\s*\*\s*\*|-{3,}|_{3,})$")
QUOTE_PREFIX_RE = re.compile(r"^>\s?")
FENCE = "```"
TAB_WIDTH = 4


def parse_document(text: str) -> Document:
    """Parse lightly formatted post text into a Document tree.

    Never raises: unterminated fences run to the end of the input and
    odd indentation is absorbed by the list stack.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    blocks: List[Block] = []
    lists = _ListStack(blocks)
    i = 0
    while i < len(lines):
        line = lines[i]
        if not line.strip():
            lists.close_all()
            i += 1
            continue
        item = LIST_ITEM_RE.match(line)
        if item:
            kind = ListKind.ORDERED if item.group(2).endswith(".") else ListKind.UNORDERED
            lists.add_item(_indent_width(item.group(1)), kind, tokenize_inline(item.group(3)))
            i += 1
            continue
        lists.close_all()
        block, i = _parse_block(lines, i)
        blocks.append(block)
    lists.close_all()
    logger.debug("Parsed %d lines into %d blocks", len(lines), len(blocks))
    return Document(blocks=tuple(blocks))


def _parse_block(lines: List[str], index: int) -> tuple[Block, int]:
    line = lines[index]
    trimmed = line.strip()
    if trimmed.startswith(FENCE):
        return _parse_fence(lines, index)
    heading = HEADING_RE.match(line)
    if heading:
        inline = tuple(tokenize_inline(heading.group(2)))
        return Heading(level=len(heading.group(1)), inline=inline), index + 1
    if RULE_RE.match(trimmed):
        return HorizontalRule(), index + 1
    if line.startswith(">"):
        return _parse_quote(lines, index)
    return _parse_paragraph(lines, index)


def _parse_fence(lines: List[str], index: int) -> tuple[CodeBlock, int]:
    language = lines[index].strip()[len(FENCE):].strip() or None
    i = index + 1
    code_lines: List[str] = []
    while i < len(lines) and not lines[i].strip().startswith(FENCE):
        code_lines.append(lines[i])
        i += 1
    if i < len(lines):
        i += 1  # skip closing fence
    else:
        logger.debug("Unterminated code fence at line %d runs to end of input", index + 1)
    return CodeBlock(language=language, lines=tuple(code_lines)), i


def _parse_quote(lines: List[str], index: int) -> tuple[BlockQuote, int]:
    quote_lines: List[str] = []
    i = index
    while i < len(lines) and lines[i].startswith(">"):
        quote_lines.append(QUOTE_PREFIX_RE.sub("", lines[i], count=1))
        i += 1
    return BlockQuote(paragraph=Paragraph(lines=tuple(quote_lines))), i


def _parse_paragraph(lines: List[str], index: int) -> tuple[Paragraph, int]:
    paragraph_lines = [lines[index]]
    i = index + 1
    while i < len(lines) and lines[i].strip() and not _starts_block(lines[i]):
        paragraph_lines.append(lines[i])
        i += 1
    return Paragraph(lines=tuple(paragraph_lines)), i


def _starts_block(line: str) -> bool:
    trimmed = line.strip()
    return bool(
        LIST_ITEM_RE.match(line)
        or trimmed.startswith(FENCE)
        or HEADING_RE.match(line)
        or RULE_RE.match(trimmed)
        or line.startswith(">")
    )


def _indent_width(indent: str) -> int:
    return sum(TAB_WIDTH if ch == "\t" else 1 for ch in indent)


@dataclass
class _OpenItem:
    inline: tuple[InlineNode, ...]
    children: List[Block] = field(default_factory=list)


@dataclass
class _ListContext:
    kind: ListKind
    indent: int
    depth: int
    items: List[_OpenItem] = field(default_factory=list)


class _ListStack:
    """Open list contexts, innermost last.

    Nesting comes only from indentation: a deeper item opens a child list
    under the last item of the enclosing context, a shallower one closes
    contexts until it fits, and a change of list kind at the same indent
    starts a sibling list.
    """

    def __init__(self, blocks: List[Block]) -> None:
        self._blocks = blocks
        self._contexts: List[_ListContext] = []

    def add_item(self, indent: int, kind: ListKind, inline: List[InlineNode]) -> None:
        while self._contexts and indent < self._contexts[-1].indent:
            self._flush()
        if not self._contexts or indent > self._contexts[-1].indent:
            self._open(kind, indent)
        elif kind is not self._contexts[-1].kind:
            depth = self._contexts[-1].depth
            self._flush()
            self._contexts.append(_ListContext(kind=kind, indent=indent, depth=depth))
        self._contexts[-1].items.append(_OpenItem(inline=tuple(inline)))

    def close_all(self) -> None:
        while self._contexts:
            self._flush()

    def _open(self, kind: ListKind, indent: int) -> None:
        depth = 0
        if self._contexts:
            parent = self._contexts[-1]
            depth = parent.depth + 1
            self._ensure_item(parent)
        self._contexts.append(_ListContext(kind=kind, indent=indent, depth=depth))

    def _flush(self) -> None:
        context = self._contexts.pop()
        items = tuple(ListItem(inline=item.inline, children=tuple(item.children)) for item in context.items)
        block = ListBlock(kind=context.kind, items=items, depth=context.depth)
        if self._contexts:
            parent = self._contexts[-1]
            self._ensure_item(parent)
            parent.items[-1].children.append(block)
        else:
            self._blocks.append(block)

    @staticmethod
    def _ensure_item(context: _ListContext) -> None:
        if not context.items:
            logger.debug("Synthesizing empty list item at indent %d to host a nested list", context.indent)
            context.items.append(_OpenItem(inline=()))
