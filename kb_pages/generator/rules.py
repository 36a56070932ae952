"""Rendering rules for headings, tables, code blocks and blockquotes.

The Markdown extension in :mod:`kb_pages.generator.extension` hands each of
these structural nodes to an object implementing :class:`RenderRules` and
splices the returned HTML into the document. :class:`CalloutRenderRules` is
the rule set used for knowledge-base pages: headings get stable ids and
status badges, fenced code keeps a language class, and blockquotes become
callouts.

Example
-------
>>> from kb_pages.headings import HeadingCollector
>>> rules = CalloutRenderRules(HeadingCollector())
>>> rules.code("a < b", None)
'<pre><code class="lang-text">a &lt; b</code></pre>'
>>> rules.blockquote("[!TIP] Use the cache")
'<div class="callout callout-note">Use the cache</div>'
"""

from __future__ import annotations

import re
import typing as typ

from kb_pages._constants import DEFAULT_CODE_LANGUAGE
from kb_pages.badges import classify_badge, heading_badge

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from kb_pages.headings import HeadingCollector

    from .models import TableCell

IMPORTANT_MARKERS = ("[!IMPORTANT]", "[!WARNING]")
CALLOUT_MARKER_PATTERN = re.compile(r"\[!(IMPORTANT|NOTE|WARNING|TIP)\]\s*")


class RenderRules(typ.Protocol):
    """Callbacks the parsing engine invokes for each structural node kind."""

    def heading(self, text: str, depth: int) -> str:
        """Return HTML for a heading whose inner HTML is ``text``."""
        ...

    def table(
        self,
        header: cabc.Sequence[TableCell],
        rows: cabc.Sequence[cabc.Sequence[TableCell]],
    ) -> str:
        """Return HTML for a table with one header row and ``rows`` body rows."""
        ...

    def code(self, code: str, language: str | None) -> str:
        """Return HTML for a raw (unescaped) code block."""
        ...

    def blockquote(self, content: str) -> str:
        """Return HTML for a blockquote whose rendered content is ``content``."""
        ...


class CalloutRenderRules:
    """Knowledge-base rule set that records headings as it renders them."""

    def __init__(self, headings: HeadingCollector) -> None:
        self.headings = headings

    def heading(self, text: str, depth: int) -> str:
        """Render ``<hN id="slug">text badge</hN>`` and record the heading.

        Parameters
        ----------
        text : str
            Inner HTML of the heading.
        depth : int
            Heading level from 1 to 6.

        Returns
        -------
        str
            The heading element. A space always separates the text from the
            badge slot, even when no badge applies.
        """
        record = self.headings.add(depth, text)
        badge = heading_badge(classify_badge(record.text))
        return f'<h{depth} id="{record.id}">{text} {badge}</h{depth}>'

    def table(
        self,
        header: cabc.Sequence[TableCell],
        rows: cabc.Sequence[cabc.Sequence[TableCell]],
    ) -> str:
        """Render a table with a ``thead`` and ``tbody``, keeping cell order."""
        head_html = "".join(_cell("th", cell) for cell in header)
        body_html = "".join(
            "<tr>" + "".join(_cell("td", cell) for cell in row) + "</tr>"
            for row in rows
        )
        return (
            f"<table><thead><tr>{head_html}</tr></thead>"
            f"<tbody>{body_html}</tbody></table>"
        )

    def code(self, code: str, language: str | None) -> str:
        """Render an escaped code block tagged with a ``lang-*`` class."""
        lang = language or DEFAULT_CODE_LANGUAGE
        return f'<pre><code class="lang-{lang}">{escape_code(code)}</code></pre>'

    def blockquote(self, content: str) -> str:
        """Render a blockquote as an important or note callout."""
        kind = classify_callout(content)
        cleaned = strip_callout_markers(content)
        return f'<div class="callout callout-{kind}">{cleaned}</div>'


def _cell(tag: str, cell: TableCell) -> str:
    style = f' style="text-align:{cell.align}"' if cell.align else ""
    return f"<{tag}{style}>{cell.text}</{tag}>"


def escape_code(code: str) -> str:
    """Escape ``&``, ``<`` and ``>``; ampersands go first so entities survive."""
    return code.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def classify_callout(content: str) -> typ.Literal["important", "note"]:
    """Return ``"important"`` for IMPORTANT/WARNING callouts, else ``"note"``."""
    if any(marker in content for marker in IMPORTANT_MARKERS):
        return "important"
    return "note"


def strip_callout_markers(content: str) -> str:
    """Remove every IMPORTANT/NOTE/WARNING/TIP marker and the whitespace after it."""
    return CALLOUT_MARKER_PATTERN.sub("", content)


__all__ = [
    "CALLOUT_MARKER_PATTERN",
    "IMPORTANT_MARKERS",
    "CalloutRenderRules",
    "RenderRules",
    "classify_callout",
    "escape_code",
    "strip_callout_markers",
]
