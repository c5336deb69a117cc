from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class ListKind(str, Enum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass(frozen=True)
class InlineText:
    text: str


@dataclass(frozen=True)
class InlineCode:
    text: str


@dataclass(frozen=True)
class InlineLink:
    text: str
    href: str


@dataclass(frozen=True)
class InlineBold:
    text: str


@dataclass(frozen=True)
class InlineItalic:
    text: str


@dataclass(frozen=True)
class InlineStrike:
    text: str


InlineNode = Union[InlineText, InlineCode, InlineLink, InlineBold, InlineItalic, InlineStrike]


@dataclass(frozen=True)
class Heading:
    level: int
    inline: Tuple[InlineNode, ...]


@dataclass(frozen=True)
class Paragraph:
    """Raw physical lines; renderers break the line between each one."""

    lines: Tuple[str, ...]


@dataclass(frozen=True)
class CodeBlock:
    language: str | None
    lines: Tuple[str, ...]

    @property
    def code(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class BlockQuote:
    paragraph: Paragraph


@dataclass(frozen=True)
class HorizontalRule:
    """Horizontal rule / thematic break."""


@dataclass(frozen=True)
class ListItem:
    inline: Tuple[InlineNode, ...]
    children: Tuple["Block", ...] = ()


@dataclass(frozen=True)
class ListBlock:
    kind: ListKind
    items: Tuple[ListItem, ...]
    depth: int = 0

    @property
    def ordered(self) -> bool:
        return self.kind is ListKind.ORDERED


Block = Union[Heading, Paragraph, CodeBlock, BlockQuote, HorizontalRule, ListBlock]


@dataclass(frozen=True)
class Document:
    blocks: Tuple[Block, ...] = ()
