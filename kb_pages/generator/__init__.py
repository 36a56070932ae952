"""Utilities for rendering, navigating and assembling knowledge-base pages."""

from .extension import RenderRulesExtension
from .models import GenerationResult, NavEntry, RenderedBody, RenderedDocument, TableCell
from .navigation import build_nav, build_nav_entries, render_nav
from .page_generator import (
    DocumentAssembler,
    PageContentGenerator,
    derive_title,
    render_document,
)
from .renderer import HtmlContentRenderer
from .rules import CalloutRenderRules, RenderRules

__all__ = [
    "CalloutRenderRules",
    "DocumentAssembler",
    "GenerationResult",
    "HtmlContentRenderer",
    "NavEntry",
    "PageContentGenerator",
    "RenderRules",
    "RenderRulesExtension",
    "RenderedBody",
    "RenderedDocument",
    "TableCell",
    "build_nav",
    "build_nav_entries",
    "derive_title",
    "render_document",
    "render_nav",
]
