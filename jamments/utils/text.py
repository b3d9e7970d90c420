"""Helpers to display comment content safely."""

import re

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)

# Applied in this order. Bold must run before italic, otherwise the italic
# pattern eats the inner asterisks of "**bold**". Inline rules never span a
# line break, "\r" included.
MARKDOWN_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"```([\s\S]{3,}?)```"), r'<pre><code class="hljs">\1</code></pre>'),
    (re.compile(r"`([^\r\n]*?)`"), r"<code>\1</code>"),
    (re.compile(r"\[([^\r\n]*?)\]\(([^\r\n]*?)\)"), r'<a href="\2">\1</a>'),
    (re.compile(r"\*\*([^\r\n]*?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*([^\r\n]*?)\*"), r"<i>\1</i>"),
    (re.compile(r"([^\r\n]+((\r?\n[^\r\n]+)*))"), r"<p>\1</p>"),
)


def escape_html(text: str) -> str:
    """
    Escape the five HTML special characters of a text.

    Every character is replaced independently in a single pass, so entities
    produced along the way are never escaped again. Escaping an already
    escaped text does double the ampersands.

    Args:
        text: Raw text

    Returns:
        Text safe to embed in HTML
    """
    return text.translate(_HTML_ESCAPES)


def render_markdown(text: str) -> str:
    """
    Render the Markdown subset supported in comments to HTML.

    Supported: ```code blocks```, `inline code`, [links](url), **bold**,
    *italic* and paragraphs (runs of non-empty lines). Nested or overlapping
    constructs and escaped markers are not handled.

    Args:
        text: Markdown text, usually already passed through escape_html

    Returns:
        HTML string
    """
    for pattern, replacement in MARKDOWN_RULES:
        text = pattern.sub(replacement, text)
    return text
