"""Tests for body-to-markdown conversion and length clamping."""

import pytest

from answerhub_client.formatting import (
    MAX_BODY_LENGTH,
    TRUNCATION_MARKER,
    format_body,
    to_markdown,
)


class TestToMarkdown:
    """Test cases for the HTML to markdown conversion."""

    @pytest.mark.parametrize("body", [None, ""])
    def test_empty_body(self, body):
        assert to_markdown(body) == ""

    def test_inline_formatting(self):
        assert to_markdown("<p>Hello <strong>world</strong></p>") == "Hello **world**"

    def test_atx_headings(self):
        assert to_markdown("<h2>Setup</h2>") == "## Setup"

    def test_strikethrough(self):
        assert to_markdown("<p><del>old</del> new</p>") == "~~old~~ new"

    def test_fenced_code_block(self):
        markdown = to_markdown("<pre><code>int main() {}</code></pre>")

        assert markdown.startswith("```")
        assert markdown.endswith("```")
        assert "int main() {}" in markdown

    def test_bullets(self):
        markdown = to_markdown("<ul><li>one</li><li>two</li></ul>")
        assert markdown.splitlines() == ["- one", "- two"]

    def test_script_and_style_contents_are_dropped(self):
        markdown = to_markdown("<p>a</p><script>alert(1)</script><style>p{}</style>")

        assert markdown == "a"
        assert "alert" not in markdown
        assert "p{}" not in markdown

    def test_tables(self):
        markdown = to_markdown(
            "<table><tr><th>Engine</th><th>Version</th></tr>"
            "<tr><td>UE</td><td>4.18</td></tr></table>"
        )
        lines = markdown.splitlines()

        assert "| --- | --- |" in lines
        assert "| UE | 4.18 |" in lines

    def test_autolinks(self):
        assert to_markdown('<a href="http://x.com">http://x.com</a>') == "<http://x.com>"

    def test_relative_links_are_not_rewritten(self):
        markdown = to_markdown('<a href="/questions/42/spawn.html">see here</a>')
        assert markdown == "[see here](/questions/42/spawn.html)"


class TestFormatBody:
    """Test cases for the clamped chat formatting."""

    def test_short_body_is_unchanged(self):
        html = "<p>Short <em>answer</em></p>"
        assert format_body(html) == to_markdown(html)

    def test_just_under_limit(self):
        body = "a" * (MAX_BODY_LENGTH - 1)
        assert format_body(body) == body

    def test_exactly_at_limit_gets_marker(self):
        body = "a" * MAX_BODY_LENGTH
        result = format_body(body)

        assert result == body + TRUNCATION_MARKER
        assert len(result) == 1024

    def test_long_body_is_truncated(self):
        result = format_body("b" * 5000)

        assert len(result) == 1024
        assert result == "b" * 1021 + "..."

    def test_truncation_law_for_html(self):
        html = "".join(f"<p>Paragraph {i} with <strong>bold</strong> text.</p>" for i in range(100))
        markdown = to_markdown(html)
        assert len(markdown) >= MAX_BODY_LENGTH

        assert format_body(html) == markdown[:MAX_BODY_LENGTH] + "..."

    def test_truncation_counts_code_points(self):
        body = "日本語" * 1000
        result = format_body(body)

        assert len(result) == 1024
        assert result[:MAX_BODY_LENGTH] == body[:MAX_BODY_LENGTH]
        assert result.endswith("...")

    def test_truncation_may_cut_code_fence(self):
        html = "<pre><code>" + "x = 1\n" * 400 + "</code></pre>"
        result = format_body(html)

        assert result.startswith("```")
        assert result.count("```") == 1
        assert len(result) == 1024

    def test_deterministic(self):
        html = "<h1>Title</h1><p>" + "word " * 400 + "</p>"
        assert format_body(html) == format_body(html)

    def test_none_body(self):
        assert format_body(None) == ""
