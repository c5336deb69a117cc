from PostRender import parse
from PostRender.model import InlineLink, InlineText
from PostRender.renderer_html import render_html, render_inline


def test_heading_and_emphasis():
    assert render_html(parse("# Hi *there*")) == "<h1>Hi <em>there</em></h1>"


def test_paragraph_lines_get_hard_breaks():
    assert render_html(parse("a\nb")) == "<p>a<br>\nb</p>"


def test_text_is_escaped():
    assert render_html(parse("<script>alert('x')</script>")) == (
        "<p>&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;</p>"
    )


def test_link_does_not_leak_referrer():
    html = render_html(parse("[site](https://example.com)"))
    assert html == '<p><a href="https://example.com" target="_blank" rel="noopener noreferrer">site</a></p>'


def test_unsafe_link_node_renders_as_text():
    assert render_inline([InlineLink(text="x", href="javascript:alert(1)"), InlineText("!")]) == "x!"


def test_nested_list_markup():
    assert render_html(parse("- a\n  - b")).split("\n") == [
        '<ul style="list-style-type: disc">',
        "<li>a",
        '<ul style="list-style-type: circle">',
        "<li>b</li>",
        "</ul>",
        "</li>",
        "</ul>",
    ]


def test_bullet_style_by_depth():
    html = render_html(parse("- a\n  - b\n    - c\n      - d"))
    assert html.count("list-style-type: disc") == 1
    assert html.count("list-style-type: circle") == 1
    assert html.count("list-style-type: square") == 2


def test_ordered_lists_use_decimal_at_any_depth():
    html = render_html(parse("1. a\n   1. b"))
    assert html.count('<ol style="list-style-type: decimal">') == 2


def test_code_block_quote_and_rule():
    html = render_html(parse("```py\n<b>\n  x\n```\n> quoted\n---"))
    assert html.split("\n") == [
        '<pre><code class="language-py">&lt;b&gt;',
        "  x</code></pre>",
        "<blockquote><p>quoted</p></blockquote>",
        "<hr>",
    ]
