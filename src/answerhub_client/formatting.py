"""
Body normalization for chat display.

Converts an AnswerHub rich-text/HTML body into GitHub-flavoured markdown and
clamps it to the 1024 character budget of a chat embed.
"""

from typing import Optional

from markdownify import markdownify

# Characters kept before the ellipsis; 1021 + len("...") == 1024.
MAX_BODY_LENGTH = 1021
TRUNCATION_MARKER = "..."


def to_markdown(body: Optional[str]) -> str:
    """
    Convert an HTML body to GitHub-flavoured markdown.

    ATX headings, ``-`` bullets, fenced code blocks, ``~~`` strikethrough,
    pipe tables and ``<url>`` autolinks. Script and style contents are dropped.
    """
    if not body:
        return ""
    return markdownify(
        body,
        heading_style="ATX",
        bullets="-",
        autolinks=True,
    ).strip()


def format_body(body: Optional[str]) -> str:
    """
    Convert ``body`` to markdown and clamp it for display.

    Markdown of 1021 characters or more is cut to its first 1021 code points
    and suffixed with ``"..."``. Relative links are left untouched and a cut
    may land inside a code fence.
    """
    markdown = to_markdown(body)
    clamped = markdown[:MAX_BODY_LENGTH]
    return clamped + (TRUNCATION_MARKER if len(clamped) == MAX_BODY_LENGTH else "")
