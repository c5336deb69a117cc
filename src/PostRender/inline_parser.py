from __future__ import annotations

import re
from typing import Iterable, List, Sequence

from .model import (
    InlineBold,
    InlineCode,
    InlineItalic,
    InlineLink,
    InlineNode,
    InlineStrike,
    InlineText,
)

# Order matters: earlier alternatives win at the same position. A bare "["
# only marks a link candidate; _LinkMatcher decides whether it is one.
INLINE_TOKEN_RE = re.compile(
    r"(?P<code>`[^`]+`)"
    r"|(?P<bracket>\[)"
    r"|(?P<bold>\*\*[^*]+\*\*)"
    r"|(?P<italic>\*[^*]+\*)"
    r"|(?P<strike>~~[^~]+~~)"
)
HREF_STOP_RE = re.compile(r"[\s)]")
LINK_PREFIXES = ("http://", "https://")


def tokenize_inline(text: str) -> List[InlineNode]:
    """Split one physical line into inline nodes.

    Matched spans are not re-tokenized, so ``**a `b` c**`` is a single bold
    node holding ``a `b` c``. Anything left unmatched, including stray
    delimiters and links to non-http(s) targets, stays literal text.
    """
    result: List[InlineNode] = []
    links = _LinkMatcher(text)
    last = pos = 0
    while True:
        match = INLINE_TOKEN_RE.search(text, pos)
        if match is None:
            break
        start = match.start()
        if match.group("bracket") is not None:
            found = links.match(start)
            if found is None:
                pos = start + 1
                continue
            node, end = found
        else:
            node, end = _node_from_match(match), match.end()
        if start > last:
            result.append(InlineText(text[last:start]))
        result.append(node)
        last = pos = end
    if last < len(text):
        result.append(InlineText(text[last:]))
    return result


def tokenize_lines(lines: Sequence[str]) -> List[List[InlineNode]]:
    """Tokenize each physical line of a paragraph on its own."""
    return [tokenize_inline(line) for line in lines]


class _LinkMatcher:
    """Matches ``[label](http(s)://target)`` starting at a ``[``.

    The closing bracket and the end of the target run are remembered
    between calls: every ``[`` before the same ``]`` shares them, so a line
    of unclosed brackets is scanned once rather than once per bracket.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._close: int | None = None
        self._stop: int | None = None

    def match(self, start: int) -> tuple[InlineLink, int] | None:
        text = self.text
        if self._close is None or (self._close != -1 and self._close < start):
            self._close = text.find("]", start + 1)
        close = self._close
        if close == -1 or close == start + 1 or not text.startswith("(", close + 1):
            return None

        target = close + 2
        if not text.startswith(LINK_PREFIXES, target):
            return None
        if self._stop is None or self._stop < target:
            found = HREF_STOP_RE.search(text, target)
            self._stop = found.start() if found else len(text)
        stop = self._stop
        prefix_len = len("https://") if text.startswith("https://", target) else len("http://")
        if stop <= target + prefix_len or stop == len(text) or text[stop] != ")":
            return None
        return InlineLink(text=text[start + 1 : close], href=text[target:stop]), stop + 1


def _node_from_match(match: re.Match) -> InlineNode:
    token = match.group(0)
    if match.group("code") is not None:
        return InlineCode(token[1:-1])
    if match.group("bold") is not None:
        return InlineBold(token[2:-2])
    if match.group("italic") is not None:
        return InlineItalic(token[1:-1])
    return InlineStrike(token[2:-2])


def inline_to_text(inlines: Iterable[InlineNode]) -> str:
    return "".join(inline.text for inline in inlines)
