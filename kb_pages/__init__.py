"""Render a project knowledge-base markdown file into one self-contained page.

The page carries stable heading anchors, a two-level sidebar table of
contents, status badges inferred from marker glyphs, and callout styling for
blockquotes.

Exports
-------
- ``app``: Cyclopts application behind the ``kb-pages`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``render_document``: Library entry point returning the document parts and
  the final HTML.

Examples
--------
>>> from kb_pages import render_document
>>> document, html = render_document("# Guide\\n\\n## Setup ✅\\n", "Guide")
>>> document.nav_html.splitlines()[0]
'<span class="nav-group-label">Guide</span>'
>>> html.startswith("<!DOCTYPE html>")
True
"""

from __future__ import annotations

from .cli import app, main
from .generator import render_document

__all__ = ["app", "main", "render_document"]
