"""Tests for the HTML and Markdown text helpers."""

from jamments.utils import escape_html, render_markdown


class TestEscapeHtml:
    """Test suite for escape_html."""

    def test_escape_tags_and_quotes(self):
        """Test tags and double quotes are escaped in one pass."""
        assert escape_html('<b>"x"</b>') == "&lt;b&gt;&quot;x&quot;&lt;/b&gt;"

    def test_escape_ampersand_and_apostrophe(self):
        """Test ampersands and apostrophes are escaped."""
        assert escape_html("Tom & Jerry's") == "Tom &amp; Jerry&#039;s"

    def test_escape_is_not_idempotent(self):
        """Test escaping twice doubles the ampersands."""
        assert escape_html(escape_html("<")) == "&amp;lt;"

    def test_plain_text_unchanged(self):
        """Test text without special characters is left alone."""
        assert escape_html("Hello world") == "Hello world"


class TestRenderMarkdown:
    """Test suite for render_markdown."""

    def test_bold_and_italic(self):
        """Test bold and italic inside a paragraph."""
        assert (
            render_markdown("**bold** and *italic*")
            == "<p><strong>bold</strong> and <i>italic</i></p>"
        )

    def test_inline_code(self):
        """Test inline code spans."""
        assert render_markdown("run `ls -la` now") == "<p>run <code>ls -la</code> now</p>"

    def test_link(self):
        """Test link syntax."""
        assert (
            render_markdown("see [docs](https://example.com)")
            == '<p>see <a href="https://example.com">docs</a></p>'
        )

    def test_code_block(self):
        """Test fenced code blocks."""
        assert (
            render_markdown("```print(1)```")
            == '<p><pre><code class="hljs">print(1)</code></pre></p>'
        )

    def test_paragraphs(self):
        """Test blank lines separate paragraphs and line breaks are kept."""
        assert (
            render_markdown("first line\nsecond line\n\nnext")
            == "<p>first line\nsecond line</p>\n\n<p>next</p>"
        )

    def test_crlf_paragraphs(self):
        """Test CRLF blank lines separate paragraphs like LF ones."""
        assert (
            render_markdown("first\r\n\r\nsecond")
            == "<p>first</p>\r\n\r\n<p>second</p>"
        )
        assert (
            render_markdown("line one\r\nline two")
            == "<p>line one\r\nline two</p>"
        )

    def test_inline_rules_stop_at_carriage_return(self):
        """Test inline code and links do not span a bare carriage return."""
        assert "<code>" not in render_markdown("a `x\rb` c")
        assert "<a " not in render_markdown("[te\rxt](https://example.com)")

    def test_empty_text(self):
        """Test empty input renders to nothing."""
        assert render_markdown("") == ""
