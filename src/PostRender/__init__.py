from .inline_parser import tokenize_inline
from .markdown_parser import parse_document

parse = parse_document

__all__ = ["parse", "parse_document", "tokenize_inline"]
