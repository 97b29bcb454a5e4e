"""First-paragraph excerpt extraction.

Plain pattern matching rather than an HTML parser: it tolerates malformed
markup and targets documentation-style pages where the article body sits in
a single ``sl-markdown-content`` wrapper.  The first match always wins.
"""

from __future__ import annotations

import re

# ── Patterns ───────────────────────────────────────────────────────────

_CONTENT_DIV: re.Pattern[str] = re.compile(
    r"""<div[^>]*class=["']?sl-markdown-content["']?[^>]*>(.*?)</div>""",
    re.IGNORECASE | re.DOTALL,
)

_PARAGRAPH: re.Pattern[str] = re.compile(r"<p[^>]*>(.*?)</p>", re.IGNORECASE | re.DOTALL)

_TAG: re.Pattern[str] = re.compile(r"<[^>]+>")


def strip_tags(text: str) -> str:
    """Remove every ``<...>`` tag from *text* and trim surrounding whitespace."""
    return _TAG.sub("", text).strip()


def extract_first_paragraph(html: str) -> str:
    """Return the plain text of the first ``<p>`` in *html*.

    The search is restricted to the first ``sl-markdown-content`` div when one
    is present.  Returns ``""`` when no paragraph is found.
    """
    container = _CONTENT_DIV.search(html)
    scope = container.group(1) if container else html

    paragraph = _PARAGRAPH.search(scope)
    if paragraph is None:
        return ""
    return strip_tags(paragraph.group(1))
