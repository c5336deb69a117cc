import json

from PostRender import parse
from PostRender.serialization import to_dict, to_json


def test_list_tree_to_dict():
    assert to_dict(parse("- a")) == {
        "type": "Document",
        "blocks": [
            {
                "type": "ListBlock",
                "kind": "unordered",
                "depth": 0,
                "items": [
                    {
                        "type": "ListItem",
                        "inline": [{"type": "InlineText", "text": "a"}],
                        "children": [],
                    }
                ],
            }
        ],
    }


def test_rule_and_code_block():
    data = to_dict(parse("---\n```sh\necho hi\n```"))
    assert data["blocks"] == [
        {"type": "HorizontalRule"},
        {"type": "CodeBlock", "language": "sh", "lines": ["echo hi"]},
    ]


def test_json_is_deterministic():
    document = parse("# Title\n\n> quote\n\n1. one\n   - two")
    first = to_json(document, indent=2)
    assert first == to_json(parse("# Title\n\n> quote\n\n1. one\n   - two"), indent=2)
    assert json.loads(first) == to_dict(document)
