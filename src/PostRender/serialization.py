"""JSON export of the document tree.

Each node becomes a dict with a ``type`` discriminator (the node class
name) followed by its fields, so the tree can be inspected or handed to a
renderer written in another language::

    from PostRender import parse
    from PostRender.serialization import to_json

    print(to_json(parse("- a\\n  - b"), indent=2))

"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from .model import Document


def to_dict(node: Any) -> dict[str, Any]:
    """Convert a node (block, inline, list item or document) to a dict."""
    result: dict[str, Any] = {"type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if is_dataclass(value):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (tuple, list)):
        return [_serialize_value(item) for item in value]
    return value


def to_json(document: Document, *, indent: int | None = None) -> str:
    """Deterministic JSON for a parsed document (keys sorted)."""
    return json.dumps(to_dict(document), sort_keys=True, indent=indent, ensure_ascii=False)
