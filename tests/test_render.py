from __future__ import annotations

import io

from tagcloud.render import DEFAULT_STYLESHEET, render_page, write_page
from tagcloud.selection import Selection


SEL = Selection(words=(("cat", 2), ("mat", 1), ("the", 3)), min_count=1, max_count=3)


def test_render_page_heading_and_title() -> None:
    html = render_page(SEL, "story.txt")
    assert "<title>Top 3 words in story.txt</title>" in html
    assert "<h2>Top 3 words in story.txt</h2>" in html
    assert f'<link href="{DEFAULT_STYLESHEET}" rel="stylesheet" type="text/css">' in html


def test_render_page_words_in_order_with_sizes() -> None:
    html = render_page(SEL, "story.txt")
    spans = [ln for ln in html.splitlines() if ln.startswith("<span")]
    assert spans == [
        '<span style="cursor:default" class="f29" title="count: 2">cat</span>',
        '<span style="cursor:default" class="f11" title="count: 1">mat</span>',
        '<span style="cursor:default" class="f47" title="count: 3">the</span>',
    ]


def test_render_page_empty_selection() -> None:
    html = render_page(Selection(), "empty.txt")
    assert "<h2>Top 0 words in empty.txt</h2>" in html
    assert '<p class="cbox">\n</p>' in html
    assert "<span" not in html
    assert html.startswith("<html>\n")
    assert html.endswith("</html>\n")


def test_render_page_escapes_markup() -> None:
    sel = Selection(words=(("<b>", 1),), min_count=1, max_count=1)
    html = render_page(sel, "a<b>.txt")
    assert ">&lt;b&gt;</span>" in html
    assert "Top 1 words in a&lt;b&gt;.txt" in html


def test_render_page_custom_stylesheet_and_no_mutation() -> None:
    before = SEL.words
    html = render_page(SEL, "x", stylesheet="cloud.css")
    assert 'href="cloud.css"' in html
    assert SEL.words == before


def test_write_page_matches_render() -> None:
    buf = io.StringIO()
    write_page(buf, SEL, "story.txt")
    assert buf.getvalue() == render_page(SEL, "story.txt")


def test_render_page_keeps_apostrophes_and_quotes() -> None:
    sel = Selection(words=(("don't", 1), ('say"', 1)), min_count=1, max_count=1)
    html = render_page(sel, "it's.txt")
    assert ">don't</span>" in html
    assert '>say"</span>' in html
    assert "<h2>Top 2 words in it's.txt</h2>" in html
