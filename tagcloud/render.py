from __future__ import annotations

from html import escape
from typing import TextIO

from .fonts import font_class, font_size
from .selection import Selection


DEFAULT_STYLESHEET = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/projects/"
    "tag-cloud-generator/data/tagcloud.css"
)


def heading(count: int, input_name: str) -> str:
    return f"Top {int(count)} words in {escape(str(input_name), quote=False)}"


def render_word(word: str, count: int, *, min_count: int, max_count: int) -> str:
    cls = font_class(font_size(count, min_count, max_count))
    return (
        f'<span style="cursor:default" class="{cls}" title="count: {int(count)}">'
        f"{escape(word, quote=False)}</span>"
    )


def render_page(
    selection: Selection,
    input_name: str,
    *,
    stylesheet: str = DEFAULT_STYLESHEET,
) -> str:
    """Render a complete HTML tag-cloud page for an alphabetical selection."""
    title = heading(len(selection), input_name)
    lines = [
        "<html>",
        "<head>",
        f"<title>{title}</title>",
        f'<link href="{escape(stylesheet)}" rel="stylesheet" type="text/css">',
        "</head>",
        "<body>",
        f"<h2>{title}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]
    for word, cnt in selection:
        lines.append(
            render_word(word, cnt, min_count=selection.min_count, max_count=selection.max_count)
        )
    lines += [
        "</p>",
        "</div>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"


def write_page(
    fp: TextIO,
    selection: Selection,
    input_name: str,
    *,
    stylesheet: str = DEFAULT_STYLESHEET,
) -> None:
    fp.write(render_page(selection, input_name, stylesheet=stylesheet))
